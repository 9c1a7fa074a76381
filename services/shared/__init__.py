"""
Shared infrastructure for services.

This package contains shared building blocks used across multiple services,
such as database abstractions and the error taxonomy.
"""

from .database import (
    Database,
    PostgreSQLDatabase,
    SQLiteDatabase,
    UniqueViolationError,
    create_database,
)

__all__ = [
    "Database",
    "PostgreSQLDatabase",
    "SQLiteDatabase",
    "UniqueViolationError",
    "create_database",
]
