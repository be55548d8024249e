"""
SQLAlchemy ORM models for the two embedded stores.

Modules:
    base: Declarative bases (AndroidBase, ObjectBase) and shared enums
    android: Relational tables of the Android cache database
    ios: Object types of the iOS cache store

Each store has its own declarative base, so AndroidBase.metadata and
ObjectBase.metadata describe exactly one store file each.
"""

from models import android, ios
from models.base import (
    AndroidBase,
    CONTAINER_LABELS,
    ExecutionMode,
    ObjectBase,
    RunStatus,
    Target,
    VideoLabel,
)

__all__ = [
    "android",
    "ios",
    "AndroidBase",
    "ObjectBase",
    "CONTAINER_LABELS",
    "ExecutionMode",
    "RunStatus",
    "Target",
    "VideoLabel",
]
