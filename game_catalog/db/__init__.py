"""Database Infrastructure — async session factory, SQLAlchemy Base, and seed data.

Invariants:
    - Single async engine per process (initialized via init_db)
    - All sessions are async (AsyncSession)

Design Decisions:
    - asyncpg driver for PostgreSQL (native async, no thread pool overhead)
    - aiosqlite for tests and local experiments
"""
