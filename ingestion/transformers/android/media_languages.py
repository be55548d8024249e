from typing import Any, Dict, List

from core.languages import ENGLISH_LANGUAGE_ID
from ingestion.base import Transformer
from ingestion.queries import android as queries
from ingestion.transformers.helpers import first_value
from schemas.android import MediaLanguageRecord


class MediaLanguagesTransformer(Transformer[MediaLanguageRecord]):
    """Languages with English and native names and total speakers."""

    name = "mediaLanguages"
    query = queries.MEDIA_LANGUAGES
    root_field = "languages"

    def variables(self) -> Dict[str, Any]:
        return {"englishLanguageId": ENGLISH_LANGUAGE_ID}

    async def transform(self, rows: List[Dict[str, Any]]) -> List[MediaLanguageRecord]:
        records = []
        for language in rows:
            country_languages = language.get("countryLanguages") or []
            primary = next((entry for entry in country_languages if entry.get("primary")), None)
            audio_preview = language.get("audioPreviewURL") or {}

            records.append(
                MediaLanguageRecord(
                    media_language_id=language["mediaLanguageId"],
                    name=first_value(language.get("name")),
                    name_native=first_value(language.get("nameNative")),
                    iso3=language.get("iso3") or "",
                    bcp47=language.get("bcp47") or "",
                    speaker_count=sum(entry.get("speakerCount") or 0 for entry in country_languages),
                    audio_preview_url=audio_preview.get("value"),
                    primary_country_id=primary["country"]["id"] if primary else "",
                )
            )
        return records
