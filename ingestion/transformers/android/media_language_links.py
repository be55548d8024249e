from typing import Any, Dict, List

from ingestion.base import Transformer
from ingestion.queries import android as queries
from schemas.android import MediaLanguageLinkRecord


class MediaLanguageLinksTransformer(Transformer[MediaLanguageLinkRecord]):
    """One row per video and language it is available in."""

    name = "mediaLanguageLinks"
    query = queries.MEDIA_LANGUAGE_LINKS
    root_field = "videos"
    paginated = True

    async def transform(self, rows: List[Dict[str, Any]]) -> List[MediaLanguageLinkRecord]:
        return [
            MediaLanguageLinkRecord(media_component_id=video["id"], language_id=language["id"])
            for video in rows
            for language in video.get("languageIds") or []
        ]
