"""Transformers for the Android relational cache, in load order."""

from ingestion.transformers.android.countries import CountriesTransformer
from ingestion.transformers.android.country_translations import CountryTranslationsTransformer
from ingestion.transformers.android.media_data import MediaDataTransformer
from ingestion.transformers.android.media_language_links import MediaLanguageLinksTransformer
from ingestion.transformers.android.media_language_translations import MediaLanguageTranslationsTransformer
from ingestion.transformers.android.media_languages import MediaLanguagesTransformer
from ingestion.transformers.android.media_metadata import MediaMetadataTransformer
from ingestion.transformers.android.reading_languages import ReadingLanguagesTransformer
from ingestion.transformers.android.spoken_languages import SpokenLanguagesTransformer
from ingestion.transformers.android.suggested_languages import SuggestedLanguagesTransformer
from ingestion.transformers.android.term_translations import TermTranslationsTransformer

ANDROID_TRANSFORMERS = (
    CountriesTransformer,
    CountryTranslationsTransformer,
    MediaDataTransformer,
    MediaLanguagesTransformer,
    MediaLanguageLinksTransformer,
    MediaLanguageTranslationsTransformer,
    MediaMetadataTransformer,
    SpokenLanguagesTransformer,
    SuggestedLanguagesTransformer,
    TermTranslationsTransformer,
    ReadingLanguagesTransformer,
)

__all__ = [cls.__name__ for cls in ANDROID_TRANSFORMERS] + ["ANDROID_TRANSFORMERS"]
