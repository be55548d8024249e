from typing import Any, Dict, List

from ingestion.base import Transformer
from ingestion.queries import android as queries
from ingestion.transformers.helpers import first_value
from schemas.android import CountryRecord


class CountriesTransformer(Transformer[CountryRecord]):
    """Countries with names and continent in the run language."""

    name = "countries"
    query = queries.COUNTRIES
    root_field = "countries"

    def variables(self) -> Dict[str, Any]:
        return {"languageId": self.context.language_id}

    async def transform(self, rows: List[Dict[str, Any]]) -> List[CountryRecord]:
        return [
            CountryRecord(
                country_id=country["countryId"],
                name=first_value(country.get("name")),
                continent_name=first_value((country.get("continent") or {}).get("continentName")),
                language_having_media_count=country.get("languageHavingMediaCount") or 0,
                population=country.get("population") or 0,
                longitude=country.get("longitude") or 0,
                latitude=country.get("latitude") or 0,
                flag_lossy_web=country.get("flagLossyWeb"),
                flag_png8=country.get("flagPng8"),
            )
            for country in rows
        ]
