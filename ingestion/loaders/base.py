"""
Repository contract shared by both cache stores.
"""

from abc import ABC, abstractmethod
from typing import Optional, Sequence, Type, TypeVar
import logging

from sqlalchemy.ext.asyncio import AsyncSession

from core.exceptions import UpsertError
from schemas.base import IdentityKey, NormalizedRecord

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=NormalizedRecord)


class Repository(ABC):
    """
    Idempotent writer and point reader for one store.

    The session is injected by whoever opened the store, so a repository
    never reaches for a global handle and tests can hand it a private one.

    Guarantees:
    - upsert with the same identity key never creates a second row; the
      last write wins
    - one page of records is written in one transaction; a failing page is
      rolled back and the error re-raised as is
    - get_by_key returns None for unknown keys, never raises for them
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    @abstractmethod
    async def upsert(self, records: Sequence[NormalizedRecord]) -> int:
        """
        Create or update records keyed by their identity key.

        Args:
            records: Records of one type, typically one page

        Returns:
            Number of records written
        """
        pass

    @staticmethod
    def record_type(records: Sequence[NormalizedRecord]) -> Type[NormalizedRecord]:
        """Type shared by every record of a page; a page never mixes types."""
        record_type = type(records[0])
        mixed = {type(record).__name__ for record in records if type(record) is not record_type}
        if mixed:
            raise UpsertError(
                "Cannot upsert records of different types in one call",
                context={"record_type": record_type.__name__, "other_types": sorted(mixed)},
            )
        return record_type

    async def get_by_key(self, record_type: Type[RecordT], key: IdentityKey) -> Optional[RecordT]:
        """Read a stored record back as a normalized record."""
        instance = await self.session.get(record_type.orm_model, key)
        if instance is None:
            return None
        return record_type.model_validate(instance)
