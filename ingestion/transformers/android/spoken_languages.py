from typing import Any, Dict, List

from ingestion.base import Transformer
from ingestion.queries import android as queries
from ingestion.transformers.helpers import dedupe_keep_max
from schemas.android import SpokenLanguageRecord


class SpokenLanguagesTransformer(Transformer[SpokenLanguageRecord]):
    """
    Languages spoken per country.

    A country can list the same language more than once; only the entry
    with the most speakers is kept.
    """

    name = "spokenLanguages"
    query = queries.SPOKEN_LANGUAGES
    root_field = "countries"

    async def transform(self, rows: List[Dict[str, Any]]) -> List[SpokenLanguageRecord]:
        records = []
        for country in rows:
            candidates = [
                SpokenLanguageRecord(
                    country_id=country["countryId"],
                    language_id=entry["language"]["id"],
                    speaker_count=entry.get("speakers") or 0,
                )
                for entry in country.get("countryLanguages") or []
            ]
            records.extend(
                dedupe_keep_max(
                    candidates,
                    key=lambda record: record.language_id,
                    score=lambda record: record.speaker_count,
                )
            )
        return records
