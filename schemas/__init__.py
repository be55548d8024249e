"""
Pydantic schemas for normalized records.

Modules:
    base: NormalizedRecord, identity keys and JSON bundle serialization
    android: Records for the Android relational cache
    ios: Records for the iOS object cache
"""

from schemas.base import KEY_SEPARATOR, NormalizedRecord, composite_key, serialize_records

__all__ = [
    "KEY_SEPARATOR",
    "NormalizedRecord",
    "composite_key",
    "serialize_records",
]
