"""
Per-entity repository modules for database access.

Each function takes an open SQLAlchemy ``Session`` as its first argument and
returns ORM instances; callers own the session lifecycle.
"""
