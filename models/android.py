from sqlalchemy import Column, Float, Integer, String, Text

from models.base import AndroidBase


class Country(AndroidBase):
    """
    Country summary in the default run language.

    Numeric fields are never null: missing population and coordinates are
    stored as 0.
    """
    __tablename__ = "countries"

    country_id = Column("countryId", String, primary_key=True)
    name = Column(String, nullable=False)
    continent_name = Column("continentName", String, nullable=False)
    language_having_media_count = Column("languageHavingMediaCount", Integer, nullable=False)
    population = Column(Integer, nullable=False)
    longitude = Column(Float, nullable=False)
    latitude = Column(Float, nullable=False)
    flag_lossy_web = Column("flagLossyWeb", String, nullable=True)
    flag_png8 = Column("flagPng8", String, nullable=True)


class CountryTranslation(AndroidBase):
    __tablename__ = "country_translations"

    country_id = Column("countryId", String, primary_key=True)
    language_tag = Column("languageTag", String, primary_key=True)
    name = Column(String, nullable=False)


class MediaData(AndroidBase):
    """
    One row per video.

    Nested collections have no table of their own and are stored as JSON
    text:
    - bibleCitations: list of {osisId, chapterStart, chapterEnd, verseStart, verseEnd}
    - mediaComponentLinks: parent ids then child ids, NULL when there are none
    - imageUrls: object keyed by image slot
    """
    __tablename__ = "media_data"

    id = Column(String, primary_key=True)
    component_type = Column("componentType", Integer, nullable=False)
    primary_media_language_id = Column("primaryMediaLanguageId", String, nullable=True)
    primary_media_language_name = Column("primaryMediaLanguageName", String, nullable=False)
    sub_type = Column("subType", String, nullable=True)
    content_type = Column("contentType", Integer, nullable=False)
    length_in_milliseconds = Column("lengthInMilliseconds", Integer, nullable=False)
    is_downloadable = Column("isDownloadable", Integer, nullable=False)
    language_count = Column("languageCount", Integer, nullable=True)
    contains_count = Column("containsCount", Integer, nullable=True)

    # 32-bit columns on the device, values are clamped before insert
    approximate_download_low_file_size_in_bytes = Column(
        "approximateDownloadLowFileSizeInBytes", Integer, nullable=False
    )
    approximate_download_high_file_size_in_bytes = Column(
        "approximateDownloadHighFileSizeInBytes", Integer, nullable=False
    )

    bible_citations = Column("bibleCitations", Text, nullable=False)
    media_component_links = Column("mediaComponentLinks", Text, nullable=True)
    image_urls = Column("imageUrls", Text, nullable=False)


class MediaLanguage(AndroidBase):
    __tablename__ = "media_languages"

    media_language_id = Column("mediaLanguageId", String, primary_key=True)
    name = Column(String, nullable=False)
    name_native = Column("nameNative", String, nullable=False)
    iso3 = Column(String, nullable=False)
    bcp47 = Column(String, nullable=False)
    speaker_count = Column("speakerCount", Integer, nullable=False)
    audio_preview_url = Column("audioPreviewUrl", String, nullable=True)
    primary_country_id = Column("primaryCountryId", String, nullable=False)


class MediaLanguageLink(AndroidBase):
    __tablename__ = "media_language_links"

    media_component_id = Column("mediaComponentId", String, primary_key=True)
    language_id = Column("languageId", String, primary_key=True)


class MediaLanguageTranslation(AndroidBase):
    __tablename__ = "media_language_translations"

    language_id = Column("languageId", String, primary_key=True)
    metadata_language_tag = Column("metadataLanguageTag", String, primary_key=True)
    name = Column(String, nullable=False)


class MediaMetadata(AndroidBase):
    """Localized video text, one row per video and language tag."""
    __tablename__ = "media_metadata"

    media_id = Column("mediaId", String, primary_key=True)
    metadata_language_tag = Column("metadataLanguageTag", String, primary_key=True)
    title = Column(String, nullable=False)
    short_description = Column("shortDescription", Text, nullable=False)
    long_description = Column("longDescription", Text, nullable=False)
    study_questions = Column("studyQuestions", Text, nullable=True)  # JSON list


class SpokenLanguage(AndroidBase):
    __tablename__ = "spoken_languages"

    country_id = Column("countryId", String, primary_key=True)
    language_id = Column("languageId", String, primary_key=True)
    speaker_count = Column("speakerCount", Integer, nullable=False)


class SuggestedLanguage(AndroidBase):
    __tablename__ = "suggested_languages"

    country_id = Column("countryId", String, primary_key=True)
    language_id = Column("languageId", String, primary_key=True)
    language_rank = Column("languageRank", Integer, nullable=False)


class TermTranslation(AndroidBase):
    __tablename__ = "term_translations"

    label = Column(String, primary_key=True)
    language_tag = Column("languageTag", String, primary_key=True)
    term = Column(String, nullable=False)


class ReadingLanguage(AndroidBase):
    __tablename__ = "reading_languages"

    id = Column(String, primary_key=True)  # BCP 47 tag
    name = Column(String, nullable=False)
    native_name = Column("nativeName", String, nullable=False)
