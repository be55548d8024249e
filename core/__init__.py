"""
Core utilities and configuration for the app cache builder.

Modules:
    config: Application configuration and environment variable management
    database: Store handles (engine + session factory per SQLite file)
    exceptions: Custom exception hierarchy for error handling
    languages: The reading languages the apps ship with
    logging: Logging configuration and context loggers

Usage:
    from core.config import settings
    from core.database import StoreHandle
    from core.exceptions import APIExtractionError, NetworkError
    from core.logging import setup_logging
"""

from core.config import settings
from core.database import StoreHandle
from core.exceptions import (
    APIExtractionError,
    AuthenticationError,
    CacheBuilderError,
    ConfigurationError,
    ExtractionError,
    GraphQLQueryError,
    LoadError,
    NetworkError,
    SnapshotError,
    SnapshotNotFoundError,
    UpsertError,
)
from core.languages import LANGUAGES
from core.logging import setup_logging

__all__ = [
    "settings",
    "StoreHandle",
    "setup_logging",
    "LANGUAGES",
    # Exceptions
    "CacheBuilderError",
    "ExtractionError",
    "APIExtractionError",
    "NetworkError",
    "AuthenticationError",
    "GraphQLQueryError",
    "LoadError",
    "UpsertError",
    "SnapshotError",
    "SnapshotNotFoundError",
    "ConfigurationError",
]
