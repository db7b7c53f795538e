"""Pydantic Schemas - request validation for every resource.

Invariants:
    - Schemas accept camelCase input (aliases) and strip unknown fields
    - Enumerated fields use the domain enums from core/domain_types.py
"""
