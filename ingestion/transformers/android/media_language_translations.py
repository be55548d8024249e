from typing import Any, Dict, List

from ingestion.base import Transformer
from ingestion.queries import android as queries
from ingestion.transformers.helpers import language_tag, tagged_entries
from schemas.android import MediaLanguageTranslationRecord


class MediaLanguageTranslationsTransformer(Transformer[MediaLanguageTranslationRecord]):
    name = "mediaLanguageTranslations"
    query = queries.MEDIA_LANGUAGE_TRANSLATIONS
    root_field = "languages"

    async def transform(self, rows: List[Dict[str, Any]]) -> List[MediaLanguageTranslationRecord]:
        return [
            MediaLanguageTranslationRecord(
                language_id=language["id"],
                name=entry.get("value") or "",
                metadata_language_tag=language_tag(entry, "metadataLanguageTag"),
            )
            for language in rows
            for entry in tagged_entries(language.get("name"), "metadataLanguageTag")
        ]
