"""Test fixture package for the marine site API.

Contains fixtures for:
- In-memory SQLite database sessions
- The application and HTTP clients with signed-in users
"""

from .db import db_engine, db_session, db_session_factory

__all__ = [
    # Database
    "db_engine",
    "db_session",
    "db_session_factory",
]
