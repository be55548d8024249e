from typing import Any, AsyncIterator, Dict, List

from ingestion.base import Transformer
from ingestion.transformers.helpers import titleize
from models.base import VideoLabel
from schemas.ios import MediaCategoryRecord


class MediaCategoriesTransformer(Transformer[MediaCategoryRecord]):
    """One category per video label; nothing is fetched."""

    name = "mediaCategories"

    async def pages(self) -> AsyncIterator[List[Dict[str, Any]]]:
        yield [{"label": label.value} for label in VideoLabel]

    async def transform(self, rows: List[Dict[str, Any]]) -> List[MediaCategoryRecord]:
        return [
            MediaCategoryRecord(name=row["label"], category_description=titleize(row["label"]))
            for row in rows
        ]
