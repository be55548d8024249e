from typing import Any, Dict, List

from ingestion.base import Transformer
from ingestion.queries import ios as queries
from schemas.base import composite_key
from schemas.ios import SuggestedLanguageRecord


class SuggestedLanguagesTransformer(Transformer[SuggestedLanguageRecord]):
    name = "suggestedLanguages"
    query = queries.SUGGESTED_LANGUAGES
    root_field = "countries"

    async def transform(self, rows: List[Dict[str, Any]]) -> List[SuggestedLanguageRecord]:
        return [
            SuggestedLanguageRecord(
                country_language_id=composite_key(country["id"], entry["language"]["id"]),
                language_id=int(entry["language"]["id"]),
                language_rank=entry.get("languageRank") or 0,
            )
            for country in rows
            for entry in country.get("countryLanguages") or []
            if entry.get("suggested")
        ]
