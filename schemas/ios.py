"""
Pydantic schemas for iOS cache objects
"""

from typing import List, Optional

from pydantic import Field

from models import ios as objects
from schemas.base import NormalizedRecord


class BibleCodeRecord(NormalizedRecord):
    orm_model = objects.BibleCode
    key_fields = ("name",)

    name: str
    metadata_language_tag: str
    current_descriptor_language_id: str
    english_full_name: str = ""
    full_name: str = ""


class CountryLinkRecord(NormalizedRecord):
    orm_model = objects.CountryLink
    key_fields = ("country_language_id",)

    country_language_id: str
    language_id: int
    speaker_count: int = 0


class SuggestedLanguageRecord(NormalizedRecord):
    orm_model = objects.SuggestedLanguage
    key_fields = ("country_language_id",)

    country_language_id: str
    language_id: int
    language_rank: int = 0


class LanguageRecord(NormalizedRecord):
    orm_model = objects.Language
    key_fields = ("language_id",)

    language_id: str
    audio_preview_url: Optional[str] = Field(None, alias="audioPreviewURL")
    speaker_count: int = 0
    iso3: str = ""
    primary_country_id: str = ""
    num_countries: int = 0
    bcp47: Optional[str] = None
    metadata_language_tag: str
    current_descriptor_language_id: str
    english_name: str = ""
    name: str = ""
    name_native: str = ""


class CountryRecord(NormalizedRecord):
    orm_model = objects.Country
    key_fields = ("country_id",)
    link_fields = ("language_speaker_counts", "suggested_languages")

    country_id: str
    flag_url_png: str = ""
    flag_url_webp_lossy_50: str = Field("", alias="flagUrlWebPLossy50")
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    country_population: Optional[int] = None
    language_count: Optional[int] = None
    language_count_having_media: Optional[int] = None
    language_speaker_counts: List[CountryLinkRecord] = Field(default_factory=list)
    suggested_languages: List[SuggestedLanguageRecord] = Field(default_factory=list)
    metadata_language_tag: str
    current_descriptor_language_id: str
    english_continent_name: str = ""
    continent_name: str = ""
    english_name: str = ""
    name: str = ""


class MediaCategoryRecord(NormalizedRecord):
    orm_model = objects.MediaCategory
    key_fields = ("name",)

    name: str
    category_description: str = Field(..., alias="category_description")


class MediaItemRecord(NormalizedRecord):
    orm_model = objects.MediaItem
    key_fields = ("media_component_id",)

    media_component_id: str
    language_count: int = 0
    sort: str = ""
    primary_language_id: str = ""
    component_type: str
    content_type: str
    length_in_seconds: int = 0
    approx_large_download_size: Optional[float] = None
    approx_small_download_size: Optional[float] = None
    high_res_image_url: str = ""
    low_res_image_url: str = ""
    very_low_res_image_url: str = ""
    thumbnail_url: str = ""
    video_still_url: str = ""
    is_downloadable: bool = False
    language_ids: str = ""
    sub_type: str = ""
    group_content_count: int = 0
    current_descriptor_language_id: str
    metadata_language_tag: str
    english_long_description: str = ""
    long_description: str = ""
    english_short_description: str = ""
    short_description: str = ""
    english_name: str = ""
    name: str = ""
    english_bible_citations_data: Optional[bytes] = None
    bible_citations_data: Optional[bytes] = None
    english_study_questions_data: Optional[bytes] = None
    study_questions_data: Optional[bytes] = None


class ContainedByMediaLinkRecord(NormalizedRecord):
    orm_model = objects.ContainedByMediaLink
    key_fields = ("parent_sort_link",)
    link_fields = ("media_item",)

    parent_sort_link: str
    media_component_id: str
    link_type: str
    parent_media_component_id: str
    sort_order: int
    media_item: Optional[MediaItemRecord] = None


class ReadingLanguageDataRecord(NormalizedRecord):
    orm_model = objects.ReadingLanguageData
    key_fields = ("reading_language_id",)

    reading_language_id: str
    metadata_language_tag: str
    bible_code_data: Optional[bytes] = None
    country_data: Optional[bytes] = None
    language_data: Optional[bytes] = None
    media_item_data: Optional[bytes] = None
