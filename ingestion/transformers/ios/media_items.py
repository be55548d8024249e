"""
Videos for the iOS cache, in the run language with English fallbacks.

Citations and study questions have no object type of their own and are
stored as UTF-8 JSON documents, or left empty when a video has none.
"""

from typing import Any, Dict, List, Optional

from ingestion.base import Transformer
from ingestion.queries import ios as queries
from ingestion.transformers.helpers import first_value, to_json_bytes_or_none
from models.base import CONTAINER_LABELS
from schemas.ios import MediaItemRecord


def download_size(downloads: List[Dict[str, Any]], quality: str) -> Optional[float]:
    match = next((download for download in downloads if download.get("quality") == quality), None)
    return match.get("approxDownloadSize") if match else None


def citations_data(citations: List[Dict[str, Any]]) -> Optional[bytes]:
    return to_json_bytes_or_none([
        {
            "osisBibleBook": citation.get("osisBibleBook"),
            "verseStart": citation.get("verseStart"),
            "verseEnd": citation.get("verseEnd"),
            "chapterStart": citation.get("chapterStart"),
            "chapterEnd": citation.get("chapterEnd"),
        }
        for citation in citations
    ])


def study_questions_data(questions: List[Dict[str, Any]]) -> Optional[bytes]:
    return to_json_bytes_or_none([{"studyQuestion": question.get("value")} for question in questions])


class MediaItemsTransformer(Transformer[MediaItemRecord]):
    name = "mediaItems"
    query = queries.MEDIA_ITEMS
    root_field = "videos"
    paginated = True

    def variables(self) -> Dict[str, Any]:
        return self.language_variables()

    async def transform(self, rows: List[Dict[str, Any]]) -> List[MediaItemRecord]:
        return [self._media_item(video) for video in rows]

    def _media_item(self, video: Dict[str, Any]) -> MediaItemRecord:
        is_container = video.get("subType") in CONTAINER_LABELS
        image = (video.get("images") or [{}])[0]
        variant = video.get("variant") or {}
        downloads = variant.get("downloads") or []
        citations = video.get("bibleCitationsData") or []

        return MediaItemRecord(
            media_component_id=video["id"],
            language_count=video.get("languageCount") or 0,
            sort="",
            primary_language_id=video.get("primaryLanguageId") or "",
            component_type="container" if is_container else "content",
            content_type="none" if is_container else "video",
            length_in_seconds=variant.get("lengthInSeconds") or 0,
            approx_large_download_size=download_size(downloads, "high"),
            approx_small_download_size=download_size(downloads, "low"),
            high_res_image_url=image.get("highResImageUrl") or "",
            low_res_image_url=image.get("lowResImageUrl") or "",
            very_low_res_image_url=image.get("veryLowResImageUrl") or "",
            thumbnail_url=image.get("thumbnailUrl") or "",
            video_still_url=image.get("videoStillUrl") or "",
            is_downloadable=bool(variant.get("isDownloadable")),
            language_ids=",".join(f"|{language['id']}|" for language in video.get("languageIds") or []),
            sub_type=video.get("subType") or "",
            group_content_count=video.get("groupContentCount") or 0,
            current_descriptor_language_id=self.context.language_id,
            metadata_language_tag=self.context.language_tag,
            english_long_description=first_value(video.get("englishLongDescription")),
            long_description=first_value(video.get("longDescription")),
            english_short_description=first_value(video.get("englishShortDescription")),
            short_description=first_value(video.get("shortDescription")),
            english_name=first_value(video.get("englishName")),
            name=first_value(video.get("name")),
            # Citations are not localized, both columns carry the same document
            english_bible_citations_data=citations_data(citations),
            bible_citations_data=citations_data(citations),
            english_study_questions_data=study_questions_data(video.get("englishStudyQuestionsData") or []),
            study_questions_data=study_questions_data(video.get("studyQuestionsData") or []),
        )
