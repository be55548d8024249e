"""
Video rows for the Android cache.

Derived fields:
- componentType / contentType: 2 / 1 for collections and series, 1 / 2 otherwise
- mediaComponentLinks: parent ids followed by child ids, NULL when none
- imageUrls: first non-empty url per slot across all image entries
- download sizes: smallest and largest non-zero download, clamped to 32 bits
"""

from typing import Any, Dict, List

from ingestion.base import Transformer
from ingestion.queries import android as queries
from ingestion.transformers.helpers import clamp_int32, fill_slots, to_json, to_json_or_none
from models.base import CONTAINER_LABELS
from schemas.android import MediaDataRecord

IMAGE_SLOTS = (
    "mobileCinematicHigh",
    "mobileCinematicLow",
    "mobileCinematicVeryLow",
    "thumbnail",
    "videoStill",
)


def download_size_range(downloads: List[Dict[str, Any]]):
    sizes = [download.get("size") for download in downloads if download.get("size")]
    if not sizes:
        return 0, 0
    return clamp_int32(int(min(sizes))), clamp_int32(int(max(sizes)))


class MediaDataTransformer(Transformer[MediaDataRecord]):
    name = "mediaData"
    query = queries.MEDIA_DATA
    root_field = "videos"
    paginated = True

    async def transform(self, rows: List[Dict[str, Any]]) -> List[MediaDataRecord]:
        return [self._media_data(video) for video in rows]

    def _media_data(self, video: Dict[str, Any]) -> MediaDataRecord:
        is_container = video.get("subType") in CONTAINER_LABELS
        variant = video.get("variant") or {}
        low_size, high_size = download_size_range(variant.get("downloads") or [])

        links = [parent["id"] for parent in video.get("parents") or []]
        links += [child["id"] for child in video.get("children") or []]

        citations = [
            {
                "osisId": citation.get("osisBibleBook"),
                "chapterStart": citation.get("chapterStart"),
                "chapterEnd": citation.get("chapterEnd"),
                "verseStart": citation.get("verseStart"),
                "verseEnd": citation.get("verseEnd"),
            }
            for citation in video.get("bibleCitations") or []
        ]

        return MediaDataRecord(
            id=video["id"],
            component_type=2 if is_container else 1,
            primary_media_language_id=video.get("primaryMediaLanguageId"),
            primary_media_language_name="",
            sub_type=video.get("subType"),
            content_type=1 if is_container else 2,
            length_in_milliseconds=variant.get("lengthInMilliseconds") or 0,
            is_downloadable=1 if variant.get("isDownloadable") else 0,
            language_count=video.get("languageCount"),
            contains_count=video.get("containsCount"),
            approximate_download_low_file_size_in_bytes=low_size,
            approximate_download_high_file_size_in_bytes=high_size,
            bible_citations=to_json(citations),
            media_component_links=to_json_or_none(links),
            image_urls=to_json(fill_slots(video.get("imageUrls"), IMAGE_SLOTS)),
        )
