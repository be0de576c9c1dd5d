"""Database Infrastructure — SQLAlchemy declarative Base shared by all ORM models.

Invariants:
    - All sessions are async (AsyncSession)

Design Decisions:
    - asyncpg driver for PostgreSQL, aiosqlite for tests (native async, no thread pool overhead)
"""
