"""Database Infrastructure - SQLAlchemy Base and session factory.

Invariants:
    - Single async engine per process (initialized via init_db)
    - asyncpg driver for PostgreSQL
"""
