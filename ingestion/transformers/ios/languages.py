from typing import Any, Dict, List

from ingestion.base import Transformer
from ingestion.queries import ios as queries
from ingestion.transformers.helpers import first_value
from schemas.ios import LanguageRecord


class LanguagesTransformer(Transformer[LanguageRecord]):
    name = "languages"
    query = queries.LANGUAGES
    root_field = "languages"

    def variables(self) -> Dict[str, Any]:
        return self.language_variables()

    async def transform(self, rows: List[Dict[str, Any]]) -> List[LanguageRecord]:
        records = []
        for language in rows:
            country_languages = language.get("countryLanguages") or []
            primary = next((entry for entry in country_languages if entry.get("primary")), None)

            records.append(
                LanguageRecord(
                    language_id=language["id"],
                    audio_preview_url=(language.get("audioPreviewURL") or {}).get("value"),
                    speaker_count=sum(entry.get("speakerCount") or 0 for entry in country_languages),
                    iso3=language.get("iso3") or "",
                    primary_country_id=primary["country"]["id"] if primary else "",
                    num_countries=len(country_languages),
                    bcp47=language.get("bcp47"),
                    metadata_language_tag=self.context.language_tag,
                    current_descriptor_language_id=self.context.language_id,
                    english_name=first_value(language.get("englishName")),
                    name=first_value(language.get("name")),
                    name_native=first_value(language.get("nameNative")),
                )
            )
        return records
