"""
Integration tests: full cache builds per platform against real SQLite stores
"""

from typing import Any, Dict, List, Optional

import pytest
from sqlalchemy import func, select

from core.config import settings
from core.database import StoreHandle
from core.exceptions import GraphQLQueryError, SnapshotNotFoundError
from core.languages import LANGUAGES
from ingestion.queries import android as android_queries
from ingestion.queries import ios as ios_queries
from ingestion.runner import CacheRunner
from ingestion.snapshot import SnapshotManager
from ingestion.targets import get_target
from models import android as tables
from models import ios as objects
from models.base import ExecutionMode, RunStatus


class FakeContentAPI:
    """Stands in for the extraction client; serves canned rows per query"""

    def __init__(self, responses: Dict[str, List[Dict[str, Any]]]):
        self.responses = responses
        self.calls: List[str] = []

    async def fetch_all(self, query: str, root_field: str, variables: Optional[Dict[str, Any]] = None):
        self.calls.append(root_field)
        return self.responses.get(query, [])

    async def fetch_page(self, query, root_field, offset, limit, variables=None):
        self.calls.append(root_field)
        rows = self.responses.get(query, [])
        return rows[offset:offset + limit]


ANDROID_RESPONSES = {
    android_queries.COUNTRIES: [
        {"countryId": "US", "name": [{"value": "United States"}], "population": 331002651},
    ],
    android_queries.COUNTRY_TRANSLATIONS: [
        {"countryId": "US", "name": [{"value": "United States", "language": {"id": "529", "bcp47": "en"}}]},
    ],
    android_queries.MEDIA_DATA: [
        {"id": "1_jf-0-0", "subType": "featureFilm", "variant": {"downloads": [{"size": 100}]}},
        {"id": "JFP", "subType": "collection", "children": [{"id": "1_jf-0-0"}]},
    ],
    android_queries.MEDIA_LANGUAGES: [
        {"mediaLanguageId": "529", "name": [{"value": "English"}], "bcp47": "en"},
    ],
    android_queries.MEDIA_LANGUAGE_LINKS: [
        {"id": "1_jf-0-0", "languageIds": [{"id": "529"}, {"id": "496"}, {"id": "529"}]},
    ],
    android_queries.MEDIA_LANGUAGE_TRANSLATIONS: [
        {"id": "529", "name": [{"value": "English", "language": {"metadataLanguageTag": "en"}}]},
    ],
    android_queries.MEDIA_METADATA: [
        {"id": "1_jf-0-0", "title": [{"value": "JESUS", "language": {"metadataLanguageTag": "en"}}]},
    ],
    android_queries.SPOKEN_LANGUAGES: [
        {"countryId": "US", "countryLanguages": [{"language": {"id": "529"}, "speakers": 100}]},
    ],
    android_queries.SUGGESTED_LANGUAGES: [
        {"countryId": "US", "countryLanguages": [{"language": {"id": "529"}, "suggested": True, "languageRank": 1}]},
    ],
    android_queries.TERM_TRANSLATIONS: [
        {"label": "featureFilm", "term": [{"value": "Feature Film", "language": {"languageTag": "en"}}]},
    ],
}

IOS_RESPONSES = {
    ios_queries.BIBLE_CODES: [
        {"name": "Luke", "englishFullName": [{"value": "Luke"}], "fullName": [{"value": "Luke"}]},
    ],
    ios_queries.COUNTRY_LINKS: [
        {"id": "CA", "countryLanguages": [{"language": {"id": "529"}, "speakerCount": 20}]},
    ],
    ios_queries.LANGUAGES: [
        {"id": "529", "englishName": [{"value": "English"}], "name": [{"value": "English"}]},
    ],
    ios_queries.SUGGESTED_LANGUAGES: [
        {"id": "CA", "countryLanguages": [{"language": {"id": "529"}, "suggested": True, "languageRank": 1}]},
    ],
    ios_queries.COUNTRIES: [
        {
            "countryId": "CA",
            "name": [{"value": "Canada"}],
            "countryLanguages": [
                {"language": {"id": "529"}, "suggested": True},
                {"language": {"id": "496"}, "suggested": False},
            ],
        },
    ],
    ios_queries.MEDIA_ITEMS: [
        {"id": "1_jf-0-0", "subType": "featureFilm", "languageIds": [{"id": "529"}]},
        {"id": "JFP", "subType": "collection"},
    ],
    ios_queries.CONTAINED_BY_MEDIA_LINKS: [
        {
            "parentMediaComponentId": "JFP",
            "children": [{"mediaComponentId": "1_jf-0-0"}, {"mediaComponentId": "missing"}],
        },
    ],
}


async def count_rows(path, metadata, model) -> int:
    store = StoreHandle(path, metadata)
    try:
        async with store.session() as session:
            return (await session.execute(select(func.count()).select_from(model))).scalar_one()
    finally:
        await store.dispose()


class TestAndroidBuild:
    """Full Android cache build"""

    @pytest.mark.asyncio
    async def test_full_build(self, assets_dir):
        runner = CacheRunner("android", client=FakeContentAPI(ANDROID_RESPONSES))

        result = await runner.run()

        assert result["status"] == "completed"
        assert result["target"] == "android"
        assert runner.status == RunStatus.COMPLETED
        assert result["records"]["countries"] == 1
        assert result["records"]["mediaLanguageLinks"] == 3
        assert result["records"]["readingLanguages"] == len(LANGUAGES)

        platform = get_target("android")
        assert await count_rows(platform.live_path, platform.metadata, tables.Country) == 1
        assert await count_rows(platform.live_path, platform.metadata, tables.MediaData) == 2
        assert await count_rows(platform.live_path, platform.metadata, tables.MediaLanguageLink) == 2
        assert await count_rows(platform.live_path, platform.metadata, tables.ReadingLanguage) == len(LANGUAGES)
        # The baseline itself stays empty
        assert await count_rows(platform.clean_path, platform.metadata, tables.Country) == 0

    @pytest.mark.asyncio
    async def test_repeat_build_gives_same_rows(self, assets_dir):
        platform = get_target("android")

        first = await CacheRunner("android", client=FakeContentAPI(ANDROID_RESPONSES)).run()
        second = await CacheRunner("android", client=FakeContentAPI(ANDROID_RESPONSES)).run()

        assert first == second
        assert await count_rows(platform.live_path, platform.metadata, tables.MediaData) == 2

    @pytest.mark.asyncio
    async def test_dry_run_leaves_store_untouched(self, assets_dir):
        platform = get_target("android")
        client = FakeContentAPI(ANDROID_RESPONSES)

        result = await CacheRunner("android", mode=ExecutionMode.SIMULATE, client=client).run()

        assert result["records"]["countries"] == 1
        assert "countries" in client.calls
        assert not platform.live_path.exists()
        assert await count_rows(platform.clean_path, platform.metadata, tables.Country) == 0

    @pytest.mark.asyncio
    async def test_dry_run_without_any_store(self, tmp_path, monkeypatch):
        monkeypatch.setattr(settings, "ASSETS_DIR", tmp_path)
        runner = CacheRunner("android", mode=ExecutionMode.SIMULATE, client=FakeContentAPI({}))

        with pytest.raises(SnapshotNotFoundError):
            await runner.run()

        assert runner.status == RunStatus.FAILED

    @pytest.mark.asyncio
    async def test_failure_propagates_unwrapped(self, assets_dir):
        class BrokenAPI(FakeContentAPI):
            async def fetch_all(self, query, root_field, variables=None):
                if query == android_queries.MEDIA_LANGUAGES:
                    raise GraphQLQueryError("Query failed")
                return await super().fetch_all(query, root_field, variables)

        runner = CacheRunner("android", client=BrokenAPI(ANDROID_RESPONSES))

        with pytest.raises(GraphQLQueryError):
            await runner.run()

        assert runner.status == RunStatus.FAILED
        # Transformers before the failure are written
        assert runner.records["mediaData"] == 2
        platform = get_target("android")
        assert await count_rows(platform.live_path, platform.metadata, tables.MediaData) == 2


class TestIOSBuild:
    """Full iOS cache build"""

    @pytest.mark.asyncio
    async def test_full_build(self, assets_dir):
        result = await CacheRunner("ios", client=FakeContentAPI(IOS_RESPONSES)).run()

        assert result["status"] == "completed"
        assert result["records"]["mediaCategories"] == 8
        assert result["records"]["containedByMediaLinks"] == 1
        assert "readingLanguageData" not in result["records"]

        platform = get_target("ios")
        store = StoreHandle(platform.live_path, platform.metadata)
        try:
            async with store.session() as session:
                country = await session.get(objects.Country, "CA")
                assert [link.country_language_id for link in country.language_speaker_counts] == ["CA__529"]
                assert [link.country_language_id for link in country.suggested_languages] == ["CA__529"]

                link = await session.get(objects.ContainedByMediaLink, "JFP__0__arclightContainedBy")
                assert link.sort_order == 0
                assert link.media_item.media_component_id == "1_jf-0-0"
        finally:
            await store.dispose()

    @pytest.mark.asyncio
    async def test_reading_language_data(self, assets_dir):
        result = await CacheRunner(
            "ios",
            language_id="496",
            language_tag="fr",
            include_reading_language_data=True,
            client=FakeContentAPI(IOS_RESPONSES),
        ).run()

        assert result["records"]["readingLanguageData"] == len(LANGUAGES) - 1

        platform = get_target("ios")
        store = StoreHandle(platform.live_path, platform.metadata)
        try:
            async with store.session() as session:
                rows = (await session.execute(select(objects.ReadingLanguageData))).scalars().all()
                assert len(rows) == len(LANGUAGES) - 1
                assert "496" not in {row.reading_language_id for row in rows}
                english = await session.get(objects.ReadingLanguageData, "529")
                assert english.metadata_language_tag == "en"
                assert b'"fullName":"Luke"' in english.bible_code_data
                # Nested runs never wrote in the other languages
                items = (await session.execute(select(objects.MediaItem))).scalars().all()
                assert {item.metadata_language_tag for item in items} == {"fr"}
        finally:
            await store.dispose()


class TestRebuild:
    @pytest.mark.asyncio
    async def test_rebuild_restores_snapshot_bytes(self, assets_dir):
        platform = get_target("ios")
        snapshot = platform.clean_path.read_bytes()

        await CacheRunner("ios", client=FakeContentAPI(IOS_RESPONSES)).run()
        assert platform.live_path.read_bytes() != snapshot

        await SnapshotManager(platform).rebuild()

        assert platform.live_path.read_bytes() == snapshot
        assert platform.clean_path.read_bytes() == snapshot

    @pytest.mark.asyncio
    async def test_repeated_rebuilds_identical(self, assets_dir):
        platform = get_target("android")

        await CacheRunner("android", client=FakeContentAPI(ANDROID_RESPONSES)).run()
        manager = SnapshotManager(platform)

        await manager.rebuild()
        first = platform.live_path.read_bytes()
        await manager.rebuild()
        second = platform.live_path.read_bytes()

        assert first == second
