from typing import Any, Dict, List

from ingestion.base import Transformer
from ingestion.queries import android as queries
from ingestion.transformers.helpers import language_tag, tagged_entries
from schemas.android import CountryTranslationRecord


class CountryTranslationsTransformer(Transformer[CountryTranslationRecord]):
    """One row per country name translation that has a language tag."""

    name = "countryTranslations"
    query = queries.COUNTRY_TRANSLATIONS
    root_field = "countries"

    async def transform(self, rows: List[Dict[str, Any]]) -> List[CountryTranslationRecord]:
        return [
            CountryTranslationRecord(
                country_id=country["countryId"],
                name=entry.get("value") or "",
                language_tag=language_tag(entry),
            )
            for country in rows
            for entry in tagged_entries(country.get("name"))
        ]
