from typing import Any, Dict, List

from ingestion.base import Transformer
from ingestion.queries import android as queries
from schemas.android import SuggestedLanguageRecord


class SuggestedLanguagesTransformer(Transformer[SuggestedLanguageRecord]):
    name = "suggestedLanguages"
    query = queries.SUGGESTED_LANGUAGES
    root_field = "countries"

    async def transform(self, rows: List[Dict[str, Any]]) -> List[SuggestedLanguageRecord]:
        return [
            SuggestedLanguageRecord(
                country_id=country["countryId"],
                language_id=entry["language"]["id"],
                language_rank=entry.get("languageRank") or 0,
            )
            for country in rows
            for entry in country.get("countryLanguages") or []
            if entry.get("suggested")
        ]
