"""
Custom exceptions for the cache builder with structured error context.

Errors are raised where they originate (the HTTP boundary, a store write,
the snapshot file check) and then travel to the top-level caller
unmodified. Nothing in between wraps or reclassifies them.

Exception Hierarchy:
    CacheBuilderError (base)
    ├── ExtractionError
    │   └── APIExtractionError
    │       ├── NetworkError
    │       ├── AuthenticationError
    │       └── GraphQLQueryError
    ├── LoadError
    │   └── UpsertError
    ├── SnapshotError
    │   └── SnapshotNotFoundError
    └── ConfigurationError
"""

from datetime import datetime, timezone
from typing import Any, Dict, Optional


class CacheBuilderError(Exception):
    """
    Base exception for all cache builder errors.

    Attributes:
        message: Human-readable error message
        context: Additional context information (url, path, entity, etc.)
        original_exception: The original exception that was caught (if any)
    """

    def __init__(
        self,
        message: str,
        context: Optional[Dict[str, Any]] = None,
        original_exception: Optional[Exception] = None
    ):
        self.message = message
        self.context = context or {}
        self.original_exception = original_exception
        self.timestamp = datetime.now(timezone.utc)

        self.context["error_timestamp"] = self.timestamp.isoformat()

        super().__init__(message)
        if original_exception:
            self.__cause__ = original_exception

    def __str__(self) -> str:
        """Format error message with context."""
        base_msg = f"{self.__class__.__name__}: {self.message}"

        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            base_msg += f" | Context: {context_str}"

        if self.original_exception:
            base_msg += f" | Caused by: {type(self.original_exception).__name__}: {self.original_exception}"

        return base_msg

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "context": self.context,
            "timestamp": self.timestamp.isoformat(),
            "original_error": str(self.original_exception) if self.original_exception else None
        }


# ============================================================================
# Extraction Errors
# ============================================================================

class ExtractionError(CacheBuilderError):
    """Base exception for content API failures."""
    pass


class APIExtractionError(ExtractionError):
    """
    Exception raised when a content API request fails.

    Context should include:
        - api_url: The gateway endpoint
        - status_code: HTTP status code (if applicable)
        - response_body: Response body (truncated)
    """
    pass


class NetworkError(APIExtractionError):
    """Transport-level failure (connection refused, reset, timeout)."""
    pass


class AuthenticationError(APIExtractionError):
    """The gateway rejected the client (HTTP 401, 403)."""
    pass


class GraphQLQueryError(APIExtractionError):
    """
    The gateway answered but the query itself failed.

    Context should include:
        - errors: The messages from the response's errors array
        - operation: The query's operation name
    """
    pass


# ============================================================================
# Load Errors
# ============================================================================

class LoadError(CacheBuilderError):
    """Base exception for store write failures."""
    pass


class UpsertError(LoadError):
    """
    Exception raised when a record cannot be written.

    Context should include:
        - record_type: Normalized record class name
        - field: The field that could not be stored
    """
    pass


# ============================================================================
# Snapshot Errors
# ============================================================================

class SnapshotError(CacheBuilderError):
    """Base exception for clean snapshot handling."""
    pass


class SnapshotNotFoundError(SnapshotError):
    """The clean baseline file for a target does not exist."""
    pass


# ============================================================================
# Configuration Errors
# ============================================================================

class ConfigurationError(CacheBuilderError):
    """Invalid run configuration (unknown target, bad language)."""
    pass
