"""Club API package - REST backend for the club management app.

Invariants:
    - Package root contains no executable code (no import side effects)
"""
