"""
Languages the apps can be read in.

The ids are content API language ids; English (529) is the language every
record's English fallback fields are queried in.
"""

from typing import NamedTuple, Tuple

ENGLISH_LANGUAGE_ID = "529"


class ReadingLanguage(NamedTuple):
    tag: str
    name: str
    name_native: str
    id: str


LANGUAGES: Tuple[ReadingLanguage, ...] = (
    ReadingLanguage("ar", "Arabic", "عربي", "22658"),
    ReadingLanguage("zh-Hans", "Chinese (Simplified)", "中国（简体）", "21754"),
    ReadingLanguage("zh-Hant", "Chinese (Traditional)", "中國（繁體）", "21753"),
    ReadingLanguage("en", "English", "English", "529"),
    ReadingLanguage("fa", "Farsi", "فارسی", "6788"),
    ReadingLanguage("fr", "French", "le français", "496"),
    ReadingLanguage("de", "German", "Deutsche", "1106"),
    ReadingLanguage("he", "Hebrew", "עברית", "6930"),
    ReadingLanguage("hi", "Hindi", "हिन्दी", "6464"),
    ReadingLanguage("id", "Indonesian", "bahasa Indonesia", "16639"),
    ReadingLanguage("ja", "Japanese", "日本語", "7083"),
    ReadingLanguage("ko", "Korean", "한국어", "3804"),
    ReadingLanguage("pt", "Portuguese", "Português", "584"),
    ReadingLanguage("ru", "Russian", "Русский", "3934"),
    ReadingLanguage("es", "Spanish", "Español", "21028"),
    ReadingLanguage("th", "Thai", "ภาษาไทย", "13169"),
    ReadingLanguage("tr", "Turkish", "Türk", "1942"),
    ReadingLanguage("ur", "Urdu", "اُردُو", "407"),
    ReadingLanguage("vi", "Vietnamese", "Tiếng Việt", "3887"),
)
