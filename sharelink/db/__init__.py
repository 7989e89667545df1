"""
Database module with abstraction layer.

This module provides:
- DatabaseAdapter interface: Abstract base class for database implementations
- SQLiteAdapter: SQLite-specific implementation (default)
- Engine and session factory helpers used by the link store

To add a new database backend:
1. Create a new adapter class inheriting from DatabaseAdapter
2. Implement all abstract methods
3. Update get_database_adapter() in sqlite_adapter.py to return the new adapter
4. No other code changes needed!
"""

from sharelink.db.interface import DatabaseAdapter
from sharelink.db.session import create_engine, create_session_maker, init_models

__all__ = [
    "DatabaseAdapter",
    "create_engine",
    "create_session_maker",
    "init_models",
]
