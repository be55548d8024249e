"""
Pytest configuration and fixtures
"""

from typing import AsyncGenerator
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession

from core.config import settings
from core.database import StoreHandle
from ingestion.base import TransformContext
from ingestion.targets import TARGETS
from models.base import AndroidBase, ExecutionMode, ObjectBase, Target


@pytest_asyncio.fixture(scope="function")
async def android_store(tmp_path) -> AsyncGenerator[StoreHandle, None]:
    """Empty Android store in a temporary file"""
    store = StoreHandle(tmp_path / "cache.db", AndroidBase.metadata)
    await store.create_schema()
    yield store
    await store.dispose()


@pytest_asyncio.fixture(scope="function")
async def ios_store(tmp_path) -> AsyncGenerator[StoreHandle, None]:
    """Empty iOS store in a temporary file"""
    store = StoreHandle(tmp_path / "arclight.db", ObjectBase.metadata)
    await store.create_schema()
    yield store
    await store.dispose()


@pytest_asyncio.fixture(scope="function")
async def android_session(android_store) -> AsyncGenerator[AsyncSession, None]:
    async with android_store.session() as session:
        yield session


@pytest_asyncio.fixture(scope="function")
async def ios_session(ios_store) -> AsyncGenerator[AsyncSession, None]:
    async with ios_store.session() as session:
        yield session


@pytest.fixture
def mock_client():
    """Extraction client returning nothing unless a test says otherwise"""
    client = MagicMock()
    client.fetch_all = AsyncMock(return_value=[])
    client.fetch_page = AsyncMock(return_value=[])
    return client


@pytest.fixture
def mock_repository():
    repository = MagicMock()
    repository.upsert = AsyncMock(side_effect=lambda records: len(records))
    repository.get_by_key = AsyncMock(return_value=None)
    return repository


@pytest.fixture
def make_context(mock_client, mock_repository):
    """Factory for transform contexts; overrides replace any field"""

    def factory(**overrides) -> TransformContext:
        fields = {
            "target": Target.ANDROID,
            "client": mock_client,
            "repository": mock_repository,
            "language_id": "529",
            "language_tag": "en",
            "mode": ExecutionMode.WRITE,
            "page_size": 2,
        }
        fields.update(overrides)
        return TransformContext(**fields)

    return factory


@pytest_asyncio.fixture(scope="function")
async def assets_dir(tmp_path, monkeypatch):
    """Assets directory with an empty clean snapshot per platform"""
    assets = tmp_path / "assets"
    monkeypatch.setattr(settings, "ASSETS_DIR", assets)

    for platform in TARGETS.values():
        platform.directory.mkdir(parents=True)
        (platform.directory / ".gitkeep").touch()
        store = StoreHandle(platform.clean_path, platform.metadata)
        await store.create_schema()
        await store.dispose()

    return assets


@pytest.fixture
def mock_country_data():
    """Countries as returned by the Android countries query"""
    return [
        {
            "countryId": "US",
            "name": [{"value": "United States"}],
            "continent": {"continentName": [{"value": "North America"}]},
            "languageHavingMediaCount": 1500,
            "population": 331002651,
            "longitude": -98.5,
            "latitude": 39.8,
            "flagLossyWeb": "https://example.com/us.webp",
            "flagPng8": "https://example.com/us.png",
        },
        {
            "countryId": "FR",
            "name": [],
            "continent": None,
            "population": None,
        },
    ]
