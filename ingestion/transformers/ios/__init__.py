"""Transformers for the iOS object cache, in load order."""

from ingestion.transformers.ios.bible_codes import BibleCodesTransformer
from ingestion.transformers.ios.contained_by_media_links import ContainedByMediaLinksTransformer
from ingestion.transformers.ios.countries import CountriesTransformer
from ingestion.transformers.ios.country_links import CountryLinksTransformer
from ingestion.transformers.ios.languages import LanguagesTransformer
from ingestion.transformers.ios.media_categories import MediaCategoriesTransformer
from ingestion.transformers.ios.media_items import MediaItemsTransformer
from ingestion.transformers.ios.reading_language_data import ReadingLanguageDataTransformer
from ingestion.transformers.ios.suggested_languages import SuggestedLanguagesTransformer

# Countries link to country links and suggested languages; contained-by
# links point at media items. Referenced objects load first.
IOS_TRANSFORMERS = (
    BibleCodesTransformer,
    CountryLinksTransformer,
    LanguagesTransformer,
    SuggestedLanguagesTransformer,
    CountriesTransformer,
    MediaCategoriesTransformer,
    MediaItemsTransformer,
    ContainedByMediaLinksTransformer,
)

__all__ = [cls.__name__ for cls in IOS_TRANSFORMERS] + [
    "IOS_TRANSFORMERS",
    "ReadingLanguageDataTransformer",
]
