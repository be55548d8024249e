from typing import Any, Dict, List

from ingestion.base import Transformer
from ingestion.queries import ios as queries
from ingestion.transformers.helpers import first_value
from schemas.ios import BibleCodeRecord


class BibleCodesTransformer(Transformer[BibleCodeRecord]):
    """Bible book names; the localized name falls back to English when empty."""

    name = "bibleCodes"
    query = queries.BIBLE_CODES
    root_field = "bibleBooks"

    def variables(self) -> Dict[str, Any]:
        return self.language_variables()

    async def transform(self, rows: List[Dict[str, Any]]) -> List[BibleCodeRecord]:
        records = []
        for book in rows:
            english_full_name = first_value(book.get("englishFullName"))
            records.append(
                BibleCodeRecord(
                    name=book["name"],
                    metadata_language_tag=self.context.language_tag,
                    current_descriptor_language_id=self.context.language_id,
                    english_full_name=english_full_name,
                    full_name=first_value(book.get("fullName")) or english_full_name,
                )
            )
        return records
