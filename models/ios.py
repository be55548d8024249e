"""
Object store shipped with the iOS app.

Each class is one object type keyed by its primary key. Objects refer to
other objects directly (a country holds its speaker-count links, a
contained-by link holds its media item); those references are relationships
rather than copied ids, so reading an object yields the linked objects too.
"""

from sqlalchemy import Boolean, Column, DateTime, Float, ForeignKey, Integer, LargeBinary, String, Table, Text
from sqlalchemy.orm import relationship

from models.base import ObjectBase


country_language_speaker_counts = Table(
    "Country_languageSpeakerCounts",
    ObjectBase.metadata,
    Column("countryId", String, ForeignKey("Country.countryId"), primary_key=True),
    Column("countryLanguageId", String, ForeignKey("CountryLink.countryLanguageId"), primary_key=True),
)

country_suggested_languages = Table(
    "Country_suggestedLanguages",
    ObjectBase.metadata,
    Column("countryId", String, ForeignKey("Country.countryId"), primary_key=True),
    Column("countryLanguageId", String, ForeignKey("SuggestedLanguage.countryLanguageId"), primary_key=True),
)


class BibleCode(ObjectBase):
    __tablename__ = "BibleCode"

    name = Column(String, primary_key=True)  # OSIS book id
    metadata_language_tag = Column("metadataLanguageTag", String, nullable=False)
    current_descriptor_language_id = Column("currentDescriptorLanguageId", String, nullable=False)
    english_full_name = Column("englishFullName", String, nullable=False)
    full_name = Column("fullName", String, nullable=False)


class CountryLink(ObjectBase):
    """Speakers of one language in one country, keyed "{countryId}__{languageId}"."""
    __tablename__ = "CountryLink"

    country_language_id = Column("countryLanguageId", String, primary_key=True)
    language_id = Column("languageId", Integer, nullable=False)
    speaker_count = Column("speakerCount", Integer, nullable=False)


class SuggestedLanguage(ObjectBase):
    __tablename__ = "SuggestedLanguage"

    country_language_id = Column("countryLanguageId", String, primary_key=True)
    language_id = Column("languageId", Integer, nullable=False)
    language_rank = Column("languageRank", Integer, nullable=False)


class Language(ObjectBase):
    __tablename__ = "Language"

    language_id = Column("languageId", String, primary_key=True)
    audio_preview_url = Column("audioPreviewURL", String, nullable=True)
    speaker_count = Column("speakerCount", Integer, nullable=False)
    iso3 = Column(String, nullable=False)
    primary_country_id = Column("primaryCountryId", String, nullable=False)
    num_countries = Column("numCountries", Integer, nullable=False)
    bcp47 = Column(String, nullable=True)
    metadata_language_tag = Column("metadataLanguageTag", String, nullable=False)
    current_descriptor_language_id = Column("currentDescriptorLanguageId", String, nullable=False)
    english_name = Column("englishName", String, nullable=False)
    name = Column(String, nullable=False)
    name_native = Column("nameNative", String, nullable=False)


class Country(ObjectBase):
    """
    Country with its localized names and links to language objects.

    languageSpeakerCounts and suggestedLanguages point at CountryLink and
    SuggestedLanguage objects, so both of those must be written first.
    """
    __tablename__ = "Country"

    country_id = Column("countryId", String, primary_key=True)
    flag_url_png = Column("flagUrlPng", String, nullable=False)
    flag_url_webp_lossy_50 = Column("flagUrlWebPLossy50", String, nullable=False)
    latitude = Column(Float, nullable=True)
    longitude = Column(Float, nullable=True)
    country_population = Column("countryPopulation", Integer, nullable=True)
    language_count = Column("languageCount", Integer, nullable=True)
    language_count_having_media = Column("languageCountHavingMedia", Integer, nullable=True)
    metadata_language_tag = Column("metadataLanguageTag", String, nullable=False)
    current_descriptor_language_id = Column("currentDescriptorLanguageId", String, nullable=False)
    english_continent_name = Column("englishContinentName", String, nullable=False)
    continent_name = Column("continentName", String, nullable=False)
    english_name = Column("englishName", String, nullable=False)
    name = Column(String, nullable=False)

    language_speaker_counts = relationship(
        CountryLink,
        secondary=country_language_speaker_counts,
        order_by=CountryLink.country_language_id,
        lazy="selectin",
    )
    suggested_languages = relationship(
        SuggestedLanguage,
        secondary=country_suggested_languages,
        order_by=SuggestedLanguage.country_language_id,
        lazy="selectin",
    )


class MediaCategory(ObjectBase):
    __tablename__ = "MediaCategory"

    name = Column(String, primary_key=True)
    category_description = Column(String, nullable=False)


class MediaItem(ObjectBase):
    """
    Video in the run language with English fallbacks.

    The *Data columns hold UTF-8 JSON documents and are NULL when the video
    has no citations or questions.
    """
    __tablename__ = "MediaItem"

    media_component_id = Column("mediaComponentId", String, primary_key=True)
    language_count = Column("languageCount", Integer, nullable=False)
    sort = Column(String, nullable=False)
    primary_language_id = Column("primaryLanguageId", String, nullable=False)
    component_type = Column("componentType", String, nullable=False)
    content_type = Column("contentType", String, nullable=False)
    length_in_seconds = Column("lengthInSeconds", Integer, nullable=False)
    approx_large_download_size = Column("approxLargeDownloadSize", Float, nullable=True)
    approx_small_download_size = Column("approxSmallDownloadSize", Float, nullable=True)
    high_res_image_url = Column("highResImageUrl", String, nullable=False)
    low_res_image_url = Column("lowResImageUrl", String, nullable=False)
    very_low_res_image_url = Column("veryLowResImageUrl", String, nullable=False)
    thumbnail_url = Column("thumbnailUrl", String, nullable=False)
    video_still_url = Column("videoStillUrl", String, nullable=False)
    is_downloadable = Column("isDownloadable", Boolean, nullable=False)
    language_ids = Column("languageIds", Text, nullable=False)
    sub_type = Column("subType", String, nullable=False)
    group_content_count = Column("groupContentCount", Integer, nullable=False)
    current_descriptor_language_id = Column("currentDescriptorLanguageId", String, nullable=False)
    metadata_language_tag = Column("metadataLanguageTag", String, nullable=False)
    english_long_description = Column("englishLongDescription", Text, nullable=False)
    long_description = Column("longDescription", Text, nullable=False)
    english_short_description = Column("englishShortDescription", Text, nullable=False)
    short_description = Column("shortDescription", Text, nullable=False)
    english_name = Column("englishName", String, nullable=False)
    name = Column(String, nullable=False)
    english_bible_citations_data = Column("englishBibleCitationsData", LargeBinary, nullable=True)
    bible_citations_data = Column("bibleCitationsData", LargeBinary, nullable=True)
    english_study_questions_data = Column("englishStudyQuestionsData", LargeBinary, nullable=True)
    study_questions_data = Column("studyQuestionsData", LargeBinary, nullable=True)


class ContainedByMediaLink(ObjectBase):
    """Position of a child video inside a collection or series."""
    __tablename__ = "ContainedByMediaLink"

    parent_sort_link = Column("parentSortLink", String, primary_key=True)
    media_component_id = Column("mediaComponentId", String, nullable=False)
    link_type = Column("linkType", String, nullable=False)
    parent_media_component_id = Column("parentMediaComponentId", String, nullable=False)
    sort_order = Column("sortOrder", Integer, nullable=False)
    media_item_id = Column("mediaItem", String, ForeignKey("MediaItem.mediaComponentId"), nullable=True)

    media_item = relationship(MediaItem, lazy="selectin")


class Etag(ObjectBase):
    """HTTP cache validators the app keeps per resource and language."""
    __tablename__ = "Etag"

    name_language_id = Column("nameLanguageId", String, primary_key=True)
    name = Column(String, nullable=False)
    language_id = Column("languageId", String, nullable=False)
    etag = Column(String, nullable=False)
    date = Column(DateTime, nullable=False)


class ReadingLanguageData(ObjectBase):
    """Serialized read-only results for one non-primary reading language."""
    __tablename__ = "ReadingLanguageData"

    reading_language_id = Column("readingLanguageId", String, primary_key=True)
    metadata_language_tag = Column("metadataLanguageTag", String, nullable=False)
    bible_code_data = Column("bibleCodeData", LargeBinary, nullable=True)
    country_data = Column("countryData", LargeBinary, nullable=True)
    language_data = Column("languageData", LargeBinary, nullable=True)
    media_item_data = Column("mediaItemData", LargeBinary, nullable=True)
