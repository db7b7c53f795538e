"""Infrastructure Layer - database sessions, generic data access, logging, password hashing."""
