from typing import Any, AsyncIterator, Dict, List

from core.languages import LANGUAGES
from ingestion.base import Transformer
from schemas.android import ReadingLanguageRecord


class ReadingLanguagesTransformer(Transformer[ReadingLanguageRecord]):
    """The fixed list of app reading languages; nothing is fetched."""

    name = "readingLanguages"

    async def pages(self) -> AsyncIterator[List[Dict[str, Any]]]:
        yield [language._asdict() for language in LANGUAGES]

    async def transform(self, rows: List[Dict[str, Any]]) -> List[ReadingLanguageRecord]:
        return [
            ReadingLanguageRecord(id=row["tag"], name=row["name"], native_name=row["name_native"])
            for row in rows
        ]
