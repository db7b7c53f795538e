"""Resource Services - validate, call the data access layer, shape responses.

Invariants:
    - Services receive a DataAccess instance (never import a global store)
    - Services raise ClubError subclasses; routes never build error bodies
"""
