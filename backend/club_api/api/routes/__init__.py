"""Route Modules - one file per resource.

Invariants:
    - Each module defines its own APIRouter with prefix and tags
    - Routes parse HTTP input and delegate to services/ (no business rules here)
"""
