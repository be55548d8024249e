"""
Localized video text for the Android cache.

Titles, descriptions, snippets and study questions arrive as separate
language-tagged lists. They are regrouped per language tag so each video
yields one row per language; study questions are ordered by their `order`
field before grouping.
"""

from typing import Any, Dict, List

from ingestion.base import Transformer
from ingestion.queries import android as queries
from ingestion.transformers.helpers import language_tag, to_json_or_none
from schemas.android import MediaMetadataRecord

TAG_FIELD = "metadataLanguageTag"

TEXT_FIELDS = (
    ("title", "title"),
    ("longDescription", "long_description"),
    ("shortDescription", "short_description"),
)


class MediaMetadataTransformer(Transformer[MediaMetadataRecord]):
    name = "mediaMetadata"
    query = queries.MEDIA_METADATA
    root_field = "videos"
    paginated = True

    async def transform(self, rows: List[Dict[str, Any]]) -> List[MediaMetadataRecord]:
        records = []
        for video in rows:
            records.extend(self._metadata(video))
        return records

    def _metadata(self, video: Dict[str, Any]) -> List[MediaMetadataRecord]:
        by_tag: Dict[str, Dict[str, Any]] = {}

        def group(tag: str) -> Dict[str, Any]:
            return by_tag.setdefault(tag, {"study_questions": []})

        for source_field, field in TEXT_FIELDS:
            for entry in video.get(source_field) or []:
                tag = language_tag(entry, TAG_FIELD)
                if tag:
                    group(tag)[field] = entry.get("value")

        questions = sorted(video.get("studyQuestions") or [], key=lambda question: question.get("order") or 0)
        for question in questions:
            tag = language_tag(question, TAG_FIELD)
            if tag:
                group(tag)["study_questions"].append(question.get("value"))

        return [
            MediaMetadataRecord(
                media_id=video["id"],
                title=metadata.get("title") or "",
                short_description=metadata.get("short_description") or "",
                long_description=metadata.get("long_description") or "",
                study_questions=to_json_or_none(metadata["study_questions"]),
                metadata_language_tag=tag,
            )
            for tag, metadata in by_tag.items()
        ]
