"""
Clean-baseline lifecycle for the live stores.

Every write run starts from a copy of the platform's clean snapshot. The
snapshot is created out of band (scripts/init_snapshot.py) and kept under
version control, so a rebuild is: make sure the snapshot holds no rows,
clear the platform directory, copy the snapshot over the live store.
"""

import asyncio
import logging
import shutil
from pathlib import Path
from typing import Dict, Optional, Union

from sqlalchemy import delete, func, select

from core.database import StoreHandle
from core.exceptions import SnapshotNotFoundError
from ingestion.targets import TargetPlatform

logger = logging.getLogger(__name__)

PLACEHOLDER_FILE = ".gitkeep"


class SnapshotManager:
    """Clean and restore one platform's store from its snapshot."""

    def __init__(self, platform: TargetPlatform):
        self.platform = platform

    async def cleanup(self, snapshot_path: Optional[Union[str, Path]] = None) -> Dict[str, int]:
        """
        Delete every row of the snapshot, referrers before referenced tables.

        Args:
            snapshot_path: Snapshot file, the platform's clean file by default

        Returns:
            Row count per table before cleanup

        Raises:
            SnapshotNotFoundError: If the snapshot file does not exist
        """
        path = Path(snapshot_path or self.platform.clean_path)
        if not path.is_file():
            raise SnapshotNotFoundError(
                f"Clean database file not found at: {path}",
                context={"target": self.platform.target.value},
            )

        tables = self.platform.metadata.sorted_tables
        handle = StoreHandle(path, self.platform.metadata)
        try:
            async with handle.session() as session:
                counts = {}
                for table in tables:
                    result = await session.execute(select(func.count()).select_from(table))
                    counts[table.name] = result.scalar_one()

                if not any(counts.values()):
                    logger.info(f"Snapshot {path} is already clean")
                    return counts

                for table in reversed(tables):
                    if counts[table.name]:
                        await session.execute(delete(table))
                        logger.info(f"Cleared {counts[table.name]} rows from {table.name}")
                await session.commit()
        finally:
            await handle.dispose()

        logger.info(f"Snapshot {path} cleaned")
        return counts

    async def rebuild(self):
        """
        Reset the live store to the clean snapshot.

        Every other entry of the platform directory (stale live stores,
        journals, leftovers) is removed first; the placeholder file stays.
        """
        await self.cleanup()

        directory = self.platform.directory
        clean_path = self.platform.clean_path
        logger.info(f"Rebuilding {self.platform.live_path} from {clean_path}")

        for entry in directory.iterdir():
            if entry.name in (clean_path.name, PLACEHOLDER_FILE):
                continue
            try:
                if entry.is_dir():
                    await asyncio.to_thread(shutil.rmtree, entry)
                else:
                    await asyncio.to_thread(entry.unlink)
            except OSError as e:
                logger.warning(f"Could not remove {entry}: {e}")

        await asyncio.to_thread(shutil.copyfile, clean_path, self.platform.live_path)
        logger.info(f"Live store ready at {self.platform.live_path}")
