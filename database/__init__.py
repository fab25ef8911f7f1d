"""
Blog data - Database module.

This module contains the SQLAlchemy models, connection utilities and the
typed data-access client.
"""

from database.client import DataClient, EntityKind, Repository, create_data_client
from database.connection import (
    create_engine_from_url,
    create_session_factory,
    drop_db,
    init_db,
    session_scope,
)

__all__ = [
    "DataClient",
    "EntityKind",
    "Repository",
    "create_data_client",
    "create_engine_from_url",
    "create_session_factory",
    "session_scope",
    "init_db",
    "drop_db",
]
