"""
Load normalized records into the iOS object cache
"""

from typing import Any, Optional, Sequence
import logging

from ingestion.loaders.base import Repository
from schemas.base import NormalizedRecord

logger = logging.getLogger(__name__)


class ObjectRepository(Repository):
    """
    Write iOS cache objects one at a time inside a single transaction.

    Records that hold other records (link fields) are stored with real
    references: each linked record is looked up by key and attached, and
    links to objects that are not stored yet are dropped.
    """

    async def upsert(self, records: Sequence[NormalizedRecord]) -> int:
        """
        Create or update each record's object by primary key.

        Returns:
            Number of objects written
        """
        if not records:
            return 0

        object_type = self.record_type(records).orm_model.__name__

        try:
            for record in records:
                instance = await self._to_object(record)
                await self.session.merge(instance)
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            logger.error(f"Write of {object_type} objects failed, transaction rolled back")
            raise

        logger.debug(f"Wrote {len(records)} {object_type} objects")
        return len(records)

    async def _to_object(self, record: NormalizedRecord) -> Any:
        values = record.to_row()
        for field in record.link_fields:
            linked = getattr(record, field)
            if isinstance(linked, (list, tuple)):
                resolved = [await self._stored(item) for item in linked]
                values[field] = [instance for instance in resolved if instance is not None]
            elif linked is not None:
                values[field] = await self._stored(linked)
        return record.orm_model(**values)

    async def _stored(self, record: NormalizedRecord) -> Optional[Any]:
        instance = await self.session.get(record.orm_model, record.identity_key())
        if instance is None:
            logger.debug(f"{record.orm_model.__name__} {record.identity_key()} not stored, link dropped")
        return instance
