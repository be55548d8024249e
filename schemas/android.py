"""
Pydantic schemas for Android cache rows
"""

from typing import Optional

from models import android as tables
from schemas.base import NormalizedRecord


class CountryRecord(NormalizedRecord):
    orm_model = tables.Country
    key_fields = ("country_id",)

    country_id: str
    name: str = ""
    continent_name: str = ""
    language_having_media_count: int = 0
    population: int = 0
    longitude: float = 0
    latitude: float = 0
    flag_lossy_web: Optional[str] = None
    flag_png8: Optional[str] = None


class CountryTranslationRecord(NormalizedRecord):
    orm_model = tables.CountryTranslation
    key_fields = ("country_id", "language_tag")

    country_id: str
    name: str
    language_tag: str


class MediaDataRecord(NormalizedRecord):
    orm_model = tables.MediaData
    key_fields = ("id",)

    id: str
    component_type: int
    primary_media_language_id: Optional[str] = None
    primary_media_language_name: str = ""
    sub_type: Optional[str] = None
    content_type: int
    length_in_milliseconds: int = 0
    is_downloadable: int = 0
    language_count: Optional[int] = None
    contains_count: Optional[int] = None
    approximate_download_low_file_size_in_bytes: int = 0
    approximate_download_high_file_size_in_bytes: int = 0
    bible_citations: str = "[]"
    media_component_links: Optional[str] = None
    image_urls: str = "{}"


class MediaLanguageRecord(NormalizedRecord):
    orm_model = tables.MediaLanguage
    key_fields = ("media_language_id",)

    media_language_id: str
    name: str = ""
    name_native: str = ""
    iso3: str = ""
    bcp47: str = ""
    speaker_count: int = 0
    audio_preview_url: Optional[str] = None
    primary_country_id: str = ""


class MediaLanguageLinkRecord(NormalizedRecord):
    orm_model = tables.MediaLanguageLink
    key_fields = ("media_component_id", "language_id")

    media_component_id: str
    language_id: str


class MediaLanguageTranslationRecord(NormalizedRecord):
    orm_model = tables.MediaLanguageTranslation
    key_fields = ("language_id", "metadata_language_tag")

    language_id: str
    name: str
    metadata_language_tag: str


class MediaMetadataRecord(NormalizedRecord):
    orm_model = tables.MediaMetadata
    key_fields = ("media_id", "metadata_language_tag")

    media_id: str
    title: str = ""
    short_description: str = ""
    long_description: str = ""
    study_questions: Optional[str] = None
    metadata_language_tag: str


class SpokenLanguageRecord(NormalizedRecord):
    orm_model = tables.SpokenLanguage
    key_fields = ("country_id", "language_id")

    country_id: str
    language_id: str
    speaker_count: int = 0


class SuggestedLanguageRecord(NormalizedRecord):
    orm_model = tables.SuggestedLanguage
    key_fields = ("country_id", "language_id")

    country_id: str
    language_id: str
    language_rank: int = 0


class TermTranslationRecord(NormalizedRecord):
    orm_model = tables.TermTranslation
    key_fields = ("label", "language_tag")

    language_tag: str
    label: str
    term: str


class ReadingLanguageRecord(NormalizedRecord):
    orm_model = tables.ReadingLanguage
    key_fields = ("id",)

    id: str
    name: str
    native_name: str
