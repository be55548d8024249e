"""
Store handle management with SQLAlchemy async

Both embedded stores are SQLite files. A StoreHandle owns the engine and
session factory for one file and is passed explicitly to whoever needs it;
there is no module-level engine.
"""

from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator, Optional, Union
import logging

from sqlalchemy import MetaData
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from core.config import settings

logger = logging.getLogger(__name__)


def sqlite_url(path: Union[str, Path], read_only: bool = False) -> str:
    if read_only:
        # SQLite URI filename; the driver refuses any write on this connection
        return f"sqlite+aiosqlite:///file:{Path(path).resolve().as_posix()}?mode=ro&uri=true"
    return f"sqlite+aiosqlite:///{Path(path)}"


class StoreHandle:
    """
    Engine and session factory bound to one store file.

    NullPool keeps no connection open between sessions, so the file can be
    copied or replaced once every session has closed. A read-only handle
    opens an existing file and fails on any write.
    """

    def __init__(
        self,
        path: Union[str, Path],
        metadata: MetaData,
        echo: Optional[bool] = None,
        read_only: bool = False,
    ):
        self.path = Path(path)
        self.metadata = metadata
        self.read_only = read_only
        self.engine = create_async_engine(
            sqlite_url(self.path, read_only=read_only),
            echo=settings.SQL_ECHO if echo is None else echo,
            poolclass=NullPool,
        )
        self.session_maker = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )

    @property
    def exists(self) -> bool:
        return self.path.is_file()

    async def create_schema(self):
        """Create every table of this store's metadata that is missing."""
        async with self.engine.begin() as conn:
            await conn.run_sync(self.metadata.create_all)
        logger.info(f"Schema ready at {self.path}")

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        async with self.session_maker() as session:
            yield session

    async def dispose(self):
        await self.engine.dispose()
