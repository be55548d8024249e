"""
Countries for the iOS cache.

Each country links to the CountryLink and SuggestedLanguage objects written
earlier in the run. Links are looked up by "{countryId}__{languageId}" and
any that are not stored are left out.
"""

from typing import Any, Dict, List, Optional, Type, TypeVar

from ingestion.base import Transformer
from ingestion.queries import ios as queries
from ingestion.transformers.helpers import first_value
from schemas.base import NormalizedRecord, composite_key
from schemas.ios import CountryLinkRecord, CountryRecord, SuggestedLanguageRecord

LinkT = TypeVar("LinkT", bound=NormalizedRecord)


class CountriesTransformer(Transformer[CountryRecord]):
    name = "countries"
    query = queries.COUNTRIES
    root_field = "countries"

    def variables(self) -> Dict[str, Any]:
        return self.language_variables()

    async def transform(self, rows: List[Dict[str, Any]]) -> List[CountryRecord]:
        return [await self._country(country) for country in rows]

    async def _country(self, country: Dict[str, Any]) -> CountryRecord:
        country_id = country["countryId"]
        continent = country.get("continent") or {}
        country_languages = country.get("countryLanguages") or []

        speaker_counts = await self._resolve(
            CountryLinkRecord,
            [composite_key(country_id, entry["language"]["id"]) for entry in country_languages],
        )
        suggested = await self._resolve(
            SuggestedLanguageRecord,
            [
                composite_key(country_id, entry["language"]["id"])
                for entry in country_languages
                if entry.get("suggested")
            ],
        )

        return CountryRecord(
            country_id=country_id,
            flag_url_png=country.get("flagUrlPng") or "",
            flag_url_webp_lossy_50=country.get("flagUrlWebPLossy50") or "",
            latitude=country.get("latitude"),
            longitude=country.get("longitude"),
            country_population=country.get("countryPopulation"),
            language_count=country.get("languageCount"),
            language_count_having_media=country.get("languageCountHavingMedia"),
            language_speaker_counts=speaker_counts,
            suggested_languages=suggested,
            metadata_language_tag=self.context.language_tag,
            current_descriptor_language_id=self.context.language_id,
            english_continent_name=first_value(continent.get("englishContinentName")),
            continent_name=first_value(continent.get("continentName")),
            english_name=first_value(country.get("englishName")),
            name=first_value(country.get("name")),
        )

    async def _resolve(self, record_type: Type[LinkT], keys: List[str]) -> List[LinkT]:
        found: List[LinkT] = []
        for key in dict.fromkeys(keys):
            record: Optional[LinkT] = await self.repository.get_by_key(record_type, key)
            if record is None:
                self.logger.debug(f"No {record_type.__name__} stored for {key}, link omitted")
                continue
            found.append(record)
        return found
