"""
Unit tests for the iOS transformers
"""

import json
from unittest.mock import AsyncMock

import pytest

from core.languages import LANGUAGES
from ingestion.transformers.ios import (
    IOS_TRANSFORMERS,
    BibleCodesTransformer,
    ContainedByMediaLinksTransformer,
    CountriesTransformer,
    CountryLinksTransformer,
    LanguagesTransformer,
    MediaCategoriesTransformer,
    MediaItemsTransformer,
    ReadingLanguageDataTransformer,
    SuggestedLanguagesTransformer,
)
from models.base import ExecutionMode, Target
from schemas.ios import CountryLinkRecord, MediaItemRecord, ReadingLanguageDataRecord


@pytest.fixture
def ios_mock_context(make_context):
    def factory(**overrides):
        return make_context(target=Target.IOS, **overrides)
    return factory


def media_item(media_component_id: str) -> MediaItemRecord:
    return MediaItemRecord(
        media_component_id=media_component_id,
        component_type="content",
        content_type="video",
        current_descriptor_language_id="529",
        metadata_language_tag="en",
    )


class TestBibleCodes:
    @pytest.mark.asyncio
    async def test_full_name_falls_back_to_english(self, ios_mock_context):
        rows = [
            {"name": "Gen", "englishFullName": [{"value": "Genesis"}], "fullName": [{"value": "Génesis"}]},
            {"name": "Exod", "englishFullName": [{"value": "Exodus"}], "fullName": []},
        ]

        records = await BibleCodesTransformer(ios_mock_context(language_id="21028", language_tag="es")).transform(rows)

        assert [r.full_name for r in records] == ["Génesis", "Exodus"]
        assert records[0].metadata_language_tag == "es"
        assert records[0].current_descriptor_language_id == "21028"


class TestCountryLinks:
    @pytest.mark.asyncio
    async def test_composite_key_and_keep_max(self, ios_mock_context):
        rows = [{
            "id": "CA",
            "countryLanguages": [
                {"language": {"id": "529"}, "speakerCount": 10},
                {"language": {"id": "529"}, "speakerCount": 20},
                {"language": {"id": "496"}, "speakerCount": None},
            ],
        }]

        records = await CountryLinksTransformer(ios_mock_context()).transform(rows)

        assert [(r.country_language_id, r.language_id, r.speaker_count) for r in records] == [
            ("CA__529", 529, 20),
            ("CA__496", 496, 0),
        ]

    @pytest.mark.asyncio
    async def test_suggested_languages(self, ios_mock_context):
        rows = [{
            "id": "CA",
            "countryLanguages": [
                {"language": {"id": "529"}, "suggested": True, "languageRank": 3},
                {"language": {"id": "496"}, "suggested": False, "languageRank": 1},
            ],
        }]

        [record] = await SuggestedLanguagesTransformer(ios_mock_context()).transform(rows)

        assert record.country_language_id == "CA__529"
        assert record.language_rank == 3


class TestLanguages:
    @pytest.mark.asyncio
    async def test_language_fields(self, ios_mock_context):
        rows = [{
            "id": "496",
            "iso3": "fra",
            "bcp47": "fr",
            "englishName": [{"value": "French"}],
            "name": [{"value": "French"}],
            "nameNative": [{"value": "Français"}],
            "countryLanguages": [
                {"country": {"id": "FR"}, "primary": True, "speakerCount": 60},
                {"country": {"id": "CA"}, "primary": False, "speakerCount": 7},
            ],
        }]

        [record] = await LanguagesTransformer(ios_mock_context()).transform(rows)

        assert record.speaker_count == 67
        assert record.num_countries == 2
        assert record.primary_country_id == "FR"
        assert record.audio_preview_url is None
        assert record.name_native == "Français"

    @pytest.mark.asyncio
    async def test_missing_bcp47_stays_absent(self, ios_mock_context):
        [record] = await LanguagesTransformer(ios_mock_context()).transform([{"id": "1"}])

        assert record.bcp47 is None
        assert record.iso3 == ""
        assert record.primary_country_id == ""


class TestCountries:
    """Test link resolution against stored objects"""

    @pytest.mark.asyncio
    async def test_links_resolved_and_missing_omitted(self, ios_mock_context, mock_repository):
        stored = {"CA__529": CountryLinkRecord(country_language_id="CA__529", language_id=529, speaker_count=20)}

        async def get_by_key(record_type, key):
            return stored.get(key) if record_type is CountryLinkRecord else None

        mock_repository.get_by_key = AsyncMock(side_effect=get_by_key)
        rows = [{
            "countryId": "CA",
            "englishName": [{"value": "Canada"}],
            "name": [{"value": "Canada"}],
            "countryLanguages": [
                {"language": {"id": "529"}, "suggested": True},
                {"language": {"id": "496"}, "suggested": False},
            ],
        }]

        [record] = await CountriesTransformer(ios_mock_context()).transform(rows)

        assert record.language_speaker_counts == [stored["CA__529"]]
        assert record.suggested_languages == []
        assert record.flag_url_png == ""
        assert record.latitude is None
        assert mock_repository.get_by_key.call_count == 3


class TestMediaCategories:
    @pytest.mark.asyncio
    async def test_eight_labels(self, ios_mock_context, mock_client):
        records = await MediaCategoriesTransformer(ios_mock_context()).run()

        assert {r.name: r.category_description for r in records} == {
            "collection": "Collection",
            "episode": "Episode",
            "featureFilm": "Feature Film",
            "segment": "Segment",
            "series": "Series",
            "shortFilm": "Short Film",
            "trailer": "Trailer",
            "behindTheScenes": "Behind The Scenes",
        }
        mock_client.fetch_all.assert_not_called()


class TestMediaItems:
    """Test media item mapping"""

    def video(self, **overrides):
        video = {
            "id": "1_jf-0-0",
            "languageCount": 1500,
            "primaryLanguageId": "529",
            "subType": "featureFilm",
            "images": [{"highResImageUrl": "high.jpg", "thumbnailUrl": "thumb.jpg"}],
            "languageIds": [{"id": "529"}, {"id": "496"}],
            "variant": {
                "lengthInSeconds": 7674,
                "isDownloadable": True,
                "downloads": [
                    {"quality": "low", "approxDownloadSize": 1000.0},
                    {"quality": "high", "approxDownloadSize": 9000.0},
                ],
            },
            "groupContentCount": None,
            "englishName": [{"value": "JESUS"}],
            "name": [{"value": "JESÚS"}],
            "bibleCitationsData": [
                {"osisBibleBook": "Luke", "verseStart": 1, "verseEnd": 2, "chapterStart": 3, "chapterEnd": 4},
            ],
            "englishStudyQuestionsData": [{"value": "Who is Jesus?"}],
            "studyQuestionsData": [],
        }
        video.update(overrides)
        return video

    @pytest.mark.asyncio
    async def test_content_item(self, ios_mock_context):
        context = ios_mock_context(language_id="21028", language_tag="es")

        [record] = await MediaItemsTransformer(context).transform([self.video()])

        assert record.component_type == "content"
        assert record.content_type == "video"
        assert record.length_in_seconds == 7674
        assert record.approx_large_download_size == 9000.0
        assert record.approx_small_download_size == 1000.0
        assert record.high_res_image_url == "high.jpg"
        assert record.low_res_image_url == ""
        assert record.language_ids == "|529|,|496|"
        assert record.sort == ""
        assert record.group_content_count == 0
        assert record.name == "JESÚS"
        assert record.metadata_language_tag == "es"
        assert json.loads(record.bible_citations_data) == [
            {"osisBibleBook": "Luke", "verseStart": 1, "verseEnd": 2, "chapterStart": 3, "chapterEnd": 4},
        ]
        assert record.bible_citations_data == record.english_bible_citations_data
        assert json.loads(record.english_study_questions_data) == [{"studyQuestion": "Who is Jesus?"}]
        assert record.study_questions_data is None

    @pytest.mark.asyncio
    async def test_container_item_without_variant(self, ios_mock_context):
        video = self.video(subType="collection", variant=None, images=[], groupContentCount=5, bibleCitationsData=None)

        [record] = await MediaItemsTransformer(ios_mock_context()).transform([video])

        assert record.component_type == "container"
        assert record.content_type == "none"
        assert record.length_in_seconds == 0
        assert record.approx_large_download_size is None
        assert record.is_downloadable is False
        assert record.thumbnail_url == ""
        assert record.group_content_count == 5
        assert record.bible_citations_data is None

    @pytest.mark.asyncio
    async def test_paginated_with_language_variables(self, ios_mock_context, mock_client):
        mock_client.fetch_page = AsyncMock(side_effect=[[self.video()], []])

        await MediaItemsTransformer(ios_mock_context(language_id="496")).run()

        variables = mock_client.fetch_page.call_args_list[0].kwargs["variables"]
        assert variables == {"languageId": "496", "englishLanguageId": "529"}


class TestContainedByMediaLinks:
    @pytest.mark.asyncio
    async def test_explicit_sort_order_and_missing_children(self, ios_mock_context, mock_repository):
        stored = {"c1": media_item("c1"), "c3": media_item("c3")}
        mock_repository.get_by_key = AsyncMock(side_effect=lambda record_type, key: stored.get(key))
        rows = [{
            "parentMediaComponentId": "JFP",
            "children": [{"mediaComponentId": "c1"}, {"mediaComponentId": "c2"}, {"mediaComponentId": "c3"}],
        }]

        records = await ContainedByMediaLinksTransformer(ios_mock_context()).transform(rows)

        assert [(r.parent_sort_link, r.sort_order) for r in records] == [
            ("JFP__0__arclightContainedBy", 0),
            ("JFP__2__arclightContainedBy", 2),
        ]
        assert records[0].link_type == "arclightContainedBy"
        assert records[0].media_item == stored["c1"]
        assert records[1].media_component_id == "c3"


class TestReadingLanguageData:
    """Test per-language bundles"""

    @pytest.mark.asyncio
    async def test_excludes_run_language(self, ios_mock_context, mock_client, mock_repository):
        records = await ReadingLanguageDataTransformer(ios_mock_context(language_id="529")).run()

        assert len(records) == len(LANGUAGES) - 1
        assert "529" not in {r.reading_language_id for r in records}
        # Written one bundle at a time
        assert mock_repository.upsert.call_count == len(LANGUAGES) - 1
        for call in mock_repository.upsert.call_args_list:
            [bundle] = call.args[0]
            assert isinstance(bundle, ReadingLanguageDataRecord)

    @pytest.mark.asyncio
    async def test_bundle_contents(self, ios_mock_context, mock_client, mock_repository):
        async def fetch_all(query, root_field, variables=None):
            if root_field == "bibleBooks":
                return [{"name": "Gen", "englishFullName": [{"value": "Genesis"}], "fullName": []}]
            return []

        mock_client.fetch_all = AsyncMock(side_effect=fetch_all)

        records = await ReadingLanguageDataTransformer(ios_mock_context()).run()

        arabic = records[0]
        assert arabic.reading_language_id == "22658"
        assert arabic.metadata_language_tag == "ar"
        bible_codes = json.loads(arabic.bible_code_data)
        assert bible_codes == [{
            "name": "Gen",
            "metadataLanguageTag": "ar",
            "currentDescriptorLanguageId": "22658",
            "englishFullName": "Genesis",
            "fullName": "Genesis",
        }]
        assert json.loads(arabic.media_item_data) == []
        # Nested runs only read; the bundles are the only writes
        assert all(
            isinstance(call.args[0][0], ReadingLanguageDataRecord)
            for call in mock_repository.upsert.call_args_list
        )

    @pytest.mark.asyncio
    async def test_simulate_writes_nothing(self, ios_mock_context, mock_repository):
        records = await ReadingLanguageDataTransformer(ios_mock_context(mode=ExecutionMode.SIMULATE)).run()

        assert len(records) == len(LANGUAGES) - 1
        mock_repository.upsert.assert_not_called()


def test_declaration_order():
    assert [cls.name for cls in IOS_TRANSFORMERS] == [
        "bibleCodes",
        "countryLinks",
        "languages",
        "suggestedLanguages",
        "countries",
        "mediaCategories",
        "mediaItems",
        "containedByMediaLinks",
    ]
