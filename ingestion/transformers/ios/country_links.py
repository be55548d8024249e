from typing import Any, Dict, List

from ingestion.base import Transformer
from ingestion.queries import ios as queries
from ingestion.transformers.helpers import dedupe_keep_max
from schemas.base import composite_key
from schemas.ios import CountryLinkRecord


class CountryLinksTransformer(Transformer[CountryLinkRecord]):
    """
    Speaker counts per country and language, keyed "{countryId}__{languageId}".

    Duplicate languages within a country keep the highest speaker count.
    """

    name = "countryLinks"
    query = queries.COUNTRY_LINKS
    root_field = "countries"

    async def transform(self, rows: List[Dict[str, Any]]) -> List[CountryLinkRecord]:
        records = []
        for country in rows:
            links = [
                CountryLinkRecord(
                    country_language_id=composite_key(country["id"], entry["language"]["id"]),
                    language_id=int(entry["language"]["id"]),
                    speaker_count=entry.get("speakerCount") or 0,
                )
                for entry in country.get("countryLanguages") or []
            ]
            records.extend(
                dedupe_keep_max(
                    links,
                    key=lambda link: link.country_language_id,
                    score=lambda link: link.speaker_count,
                )
            )
        return records
