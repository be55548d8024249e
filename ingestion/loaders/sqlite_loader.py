"""
Load normalized records into the Android SQLite cache with upsert logic (idempotency)
"""

from typing import Any, Dict, List, Sequence
import logging

from sqlalchemy import Table, inspect
from sqlalchemy.dialects.sqlite import insert

from ingestion.loaders.base import Repository
from schemas.base import NormalizedRecord

logger = logging.getLogger(__name__)

# Bound parameters per statement on older SQLite builds
SQLITE_MAX_VARIABLES = 999


def _last_wins(records: Sequence[NormalizedRecord]) -> List[NormalizedRecord]:
    """Collapse records sharing an identity key, keeping the latest one."""
    by_key: Dict[Any, NormalizedRecord] = {}
    for record in records:
        key = record.identity_key()
        by_key.pop(key, None)
        by_key[key] = record
    return list(by_key.values())


class RelationalRepository(Repository):
    """
    Write Android cache rows with INSERT ... ON CONFLICT DO UPDATE.

    Ensures:
    - No duplicate rows on repeated runs
    - Updates existing rows if source data changes
    - One transaction per upsert call
    """

    async def upsert(self, records: Sequence[NormalizedRecord]) -> int:
        """
        Upsert records of one type in multi-row batches.

        Args:
            records: Records of one type

        Returns:
            Number of distinct rows written
        """
        if not records:
            return 0

        mapper = inspect(self.record_type(records).orm_model)
        rows = _last_wins(records)
        table: Table = mapper.local_table
        # Attribute name -> column key, e.g. country_id -> countryId
        column_keys = {attr.key: attr.columns[0].key for attr in mapper.column_attrs}
        batch_size = max(1, SQLITE_MAX_VARIABLES // len(table.columns))

        try:
            for i in range(0, len(rows), batch_size):
                values = [
                    {column_keys[name]: value for name, value in record.to_row().items()}
                    for record in rows[i:i + batch_size]
                ]
                await self.session.execute(self._upsert_statement(table, values))
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            logger.error(f"Upsert into {table.name} failed, page rolled back")
            raise

        logger.debug(f"Upserted {len(rows)} rows into {table.name}")
        return len(rows)

    @staticmethod
    def _upsert_statement(table: Table, values: List[Dict[str, Any]]):
        stmt = insert(table).values(values)
        key_columns = [column.key for column in table.primary_key.columns]
        update_columns = {
            column.key: stmt.excluded[column.key]
            for column in table.columns
            if not column.primary_key
        }

        # Tables made only of key columns have nothing to update
        if not update_columns:
            return stmt.on_conflict_do_nothing(index_elements=key_columns)

        return stmt.on_conflict_do_update(index_elements=key_columns, set_=update_columns)
