"""
Per-language bundles of read-only pipeline output.

For every reading language other than the run's own, the bible code,
country link, language and media item transformers are run again in
simulate mode scoped to that language. Their results are serialized to
JSON and stored together as one ReadingLanguageData object keyed by the
language id, so the app can switch reading language offline.
"""

from typing import Any, AsyncIterator, Dict, List

from core.languages import LANGUAGES
from ingestion.base import Transformer
from ingestion.transformers.ios.bible_codes import BibleCodesTransformer
from ingestion.transformers.ios.country_links import CountryLinksTransformer
from ingestion.transformers.ios.languages import LanguagesTransformer
from ingestion.transformers.ios.media_items import MediaItemsTransformer
from models.base import ExecutionMode
from schemas.base import serialize_records
from schemas.ios import ReadingLanguageDataRecord

# Bundle field -> transformer producing it
BUNDLED_TRANSFORMERS = (
    ("bible_code_data", BibleCodesTransformer),
    ("country_data", CountryLinksTransformer),
    ("language_data", LanguagesTransformer),
    ("media_item_data", MediaItemsTransformer),
)


class ReadingLanguageDataTransformer(Transformer[ReadingLanguageDataRecord]):
    name = "readingLanguageData"

    async def pages(self) -> AsyncIterator[List[Dict[str, Any]]]:
        # One language per page so each bundle is written as soon as it is built
        for language in LANGUAGES:
            if language.id == self.context.language_id:
                continue
            yield [language._asdict()]

    async def transform(self, rows: List[Dict[str, Any]]) -> List[ReadingLanguageDataRecord]:
        return [await self._bundle(row["id"], row["tag"]) for row in rows]

    async def _bundle(self, language_id: str, tag: str) -> ReadingLanguageDataRecord:
        self.logger.info(f"Building reading language data for {tag} ({language_id})")
        scoped = self.context.derive(
            language_id=language_id,
            language_tag=tag,
            mode=ExecutionMode.SIMULATE,
        )

        payload: Dict[str, bytes] = {}
        for field, transformer_class in BUNDLED_TRANSFORMERS:
            records = await transformer_class(scoped).run()
            payload[field] = serialize_records(records)

        return ReadingLanguageDataRecord(
            reading_language_id=language_id,
            metadata_language_tag=tag,
            **payload,
        )
