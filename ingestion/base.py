"""
Abstract base class for entity transformers with pagination and execution mode
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from typing import Any, AsyncIterator, Dict, Generic, List, Sequence, TypeVar

from core.config import settings
from core.languages import ENGLISH_LANGUAGE_ID
from core.logging import ContextLogger, get_context_logger
from ingestion.extractors.graphql_extractor import GraphQLExtractor
from ingestion.loaders.base import Repository
from models.base import ExecutionMode, Target
from schemas.base import NormalizedRecord

RecordT = TypeVar("RecordT", bound=NormalizedRecord)


@dataclass(frozen=True)
class TransformContext:
    """
    Everything a transformer needs for one run, created once and passed down.

    Nested runs (reading-language data) derive a copy scoped to another
    language in simulate mode instead of threading flags through calls.
    """

    target: Target
    client: GraphQLExtractor
    repository: Repository
    language_id: str
    language_tag: str
    mode: ExecutionMode = ExecutionMode.WRITE
    page_size: int = settings.PAGE_SIZE

    @property
    def read_only(self) -> bool:
        return self.mode == ExecutionMode.SIMULATE

    def derive(self, **changes: Any) -> "TransformContext":
        return replace(self, **changes)


class Transformer(ABC, Generic[RecordT]):
    """
    Abstract base class for all entity transformers.

    Responsibilities:
    - Fetching raw pages (whole collection, or offset/limit pages until an
      empty page)
    - Mapping each page to normalized records
    - Writing each page before the next one is fetched, unless simulating

    Subclasses set `name`, `query` and `root_field`, set `paginated` for
    paged collections, and implement `transform`.
    """

    name: str = ""
    query: str = ""
    root_field: str = ""
    paginated: bool = False

    def __init__(self, context: TransformContext):
        self.context = context
        self.client = context.client
        self.repository = context.repository
        self.logger: ContextLogger = get_context_logger(
            type(self).__module__,
            target=context.target.value,
            transformer=self.name,
            language_id=context.language_id,
            language_tag=context.language_tag,
        )

    def variables(self) -> Dict[str, Any]:
        """Entity filters sent with every request."""
        return {}

    def language_variables(self) -> Dict[str, Any]:
        return {
            "languageId": self.context.language_id,
            "englishLanguageId": ENGLISH_LANGUAGE_ID,
        }

    async def pages(self) -> AsyncIterator[List[Dict[str, Any]]]:
        """Yield raw pages; the terminating empty page is never yielded."""
        if not self.paginated:
            yield await self.client.fetch_all(self.query, self.root_field, self.variables())
            return

        offset = 0
        limit = self.context.page_size
        while True:
            self.logger.debug(f"Fetching page at offset {offset} (limit {limit})")
            rows = await self.client.fetch_page(
                self.query, self.root_field, offset=offset, limit=limit, variables=self.variables()
            )
            if not rows:
                self.logger.info(f"No more {self.root_field} after offset {offset}")
                break
            yield rows
            offset += limit

    @abstractmethod
    async def transform(self, rows: List[Dict[str, Any]]) -> List[RecordT]:
        """
        Map one raw page to normalized records.

        Args:
            rows: Raw records as returned by the content API

        Returns:
            Normalized records, possibly more or fewer than rows
        """
        pass

    async def load(self, records: Sequence[RecordT]):
        if not records:
            return
        if self.context.read_only:
            self.logger.info(f"Read-only mode - skipping write of {len(records)} records")
            return
        await self.repository.upsert(records)
        self.logger.info(f"Wrote {len(records)} records")

    async def run(self) -> List[RecordT]:
        """
        Transform every page and persist each before fetching the next.

        Returns:
            All records produced across pages, written or not
        """
        self.logger.info("Starting transformation")
        produced: List[RecordT] = []

        async for rows in self.pages():
            records = await self.transform(rows)
            produced.extend(records)
            await self.load(records)

        self.logger.info(f"Transformation completed: {len(produced)} records")
        return produced
