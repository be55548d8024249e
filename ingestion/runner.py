# ============================================================================
# File: ingestion/runner.py
# Description: Cache build orchestrator for one target platform
# ============================================================================
"""
Cache Runner - rebuilds a platform's live store and runs its transformers.

A run is strictly sequential:
1. Rebuild - reset the live store from the clean snapshot (write mode only)
2. Open - attach a repository to the live store
3. Transform - run every transformer of the platform in declaration order

Errors are never wrapped here: whatever a transformer, repository or the
extraction client raises reaches the caller as is.
"""

from contextlib import AsyncExitStack
from typing import Any, Dict, List, Optional, Type
import logging

from core.config import settings
from core.database import StoreHandle
from core.exceptions import CacheBuilderError, SnapshotNotFoundError
from ingestion.base import Transformer, TransformContext
from ingestion.extractors.graphql_extractor import GraphQLExtractor
from ingestion.snapshot import SnapshotManager
from ingestion.targets import get_target
from models.base import ExecutionMode, RunStatus

logger = logging.getLogger(__name__)


class CacheRunner:
    """
    Cache build orchestrator

    Responsibilities:
    - Start every write run from the clean snapshot
    - Build one Transform Context and hand it to each transformer
    - Track run status and per-transformer record counts
    - Release the store and the extraction client in every case
    """

    def __init__(
        self,
        target: Any,
        language_id: Optional[str] = None,
        language_tag: Optional[str] = None,
        mode: ExecutionMode = ExecutionMode.WRITE,
        include_reading_language_data: bool = False,
        client: Optional[GraphQLExtractor] = None,
        store: Optional[StoreHandle] = None,
    ):
        self.platform = get_target(target)
        self.language_id = str(language_id or settings.DEFAULT_LANGUAGE_ID)
        self.language_tag = language_tag or settings.DEFAULT_LANGUAGE_TAG
        self.mode = ExecutionMode(mode)
        self.include_reading_language_data = include_reading_language_data
        self.client = client
        self.store = store
        self.status = RunStatus.PENDING
        self.records: Dict[str, int] = {}

    @property
    def read_only(self) -> bool:
        return self.mode == ExecutionMode.SIMULATE

    @property
    def transformers(self) -> List[Type[Transformer]]:
        transformers = list(self.platform.transformers)
        if self.include_reading_language_data:
            if not self.platform.reading_language_transformers:
                logger.warning(f"No reading-language data for {self.platform.target.value}, flag ignored")
            transformers.extend(self.platform.reading_language_transformers)
        return transformers

    async def rebuild(self):
        await SnapshotManager(self.platform).rebuild()

    def open_store(self) -> StoreHandle:
        """
        Store the run writes to, or reads from when simulating.

        A simulated run never touches the snapshot lifecycle: it reads the
        live store if one exists, the clean snapshot otherwise.
        """
        if self.store is not None:
            return self.store

        if not self.read_only:
            return StoreHandle(self.platform.live_path, self.platform.metadata)

        for path in (self.platform.live_path, self.platform.clean_path):
            if path.is_file():
                logger.info(f"Simulating against {path} (read-only)")
                return StoreHandle(path, self.platform.metadata, read_only=True)

        raise SnapshotNotFoundError(
            f"Clean database file not found at: {self.platform.clean_path}",
            context={"target": self.platform.target.value, "mode": self.mode.value},
        )

    async def run(self) -> Dict[str, Any]:
        """
        Build the cache for this runner's platform and language.

        Returns:
            Dictionary with run statistics:
            - status: "completed"
            - target: Platform name
            - records: Records produced per transformer name

        Raises:
            Whatever the rebuild, a transformer or a repository raised
        """
        store: Optional[StoreHandle] = None
        target = self.platform.target.value
        logger.info(
            f"Starting {target} cache build (language {self.language_tag}/{self.language_id}, "
            f"mode {self.mode.value})"
        )

        try:
            async with AsyncExitStack() as stack:
                # --------------------------------------------------
                # PHASE 1: REBUILD FROM SNAPSHOT
                # --------------------------------------------------
                if not self.read_only:
                    self.status = RunStatus.REBUILDING
                    await self.rebuild()

                # --------------------------------------------------
                # PHASE 2: OPEN STORE AND CLIENT
                # --------------------------------------------------
                store = self.open_store()
                session = await stack.enter_async_context(store.session())
                client = self.client or await stack.enter_async_context(GraphQLExtractor())

                context = TransformContext(
                    target=self.platform.target,
                    client=client,
                    repository=self.platform.repository_class(session),
                    language_id=self.language_id,
                    language_tag=self.language_tag,
                    mode=self.mode,
                )

                # --------------------------------------------------
                # PHASE 3: TRANSFORM AND LOAD
                # --------------------------------------------------
                self.status = RunStatus.RUNNING
                for transformer_class in self.transformers:
                    transformer = transformer_class(context)
                    produced = await transformer.run()
                    self.records[transformer.name] = len(produced)

            self.status = RunStatus.COMPLETED

        except CacheBuilderError as e:
            self.status = RunStatus.FAILED
            logger.error(f"{target} cache build failed: {e.message}", extra={"error_context": e.to_dict()})
            raise

        except Exception:
            self.status = RunStatus.FAILED
            logger.exception(f"Unexpected error in {target} cache build")
            raise

        finally:
            if store is not None:
                await store.dispose()

        logger.info(f"{target} cache build completed: {sum(self.records.values())} records")
        return {
            "status": self.status.value,
            "target": target,
            "records": dict(self.records),
        }
