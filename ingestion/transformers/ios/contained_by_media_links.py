from typing import Any, Dict, List

from ingestion.base import Transformer
from ingestion.queries import ios as queries
from schemas.base import composite_key
from schemas.ios import ContainedByMediaLinkRecord, MediaItemRecord

LINK_TYPE = "arclightContainedBy"


class ContainedByMediaLinksTransformer(Transformer[ContainedByMediaLinkRecord]):
    """
    Parent/child links between collections or series and their videos.

    The child's position in its parent becomes an explicit sort order and
    part of the key, "{parentId}__{index}__arclightContainedBy". Media items
    must already be stored; children without one are skipped.
    """

    name = "containedByMediaLinks"
    query = queries.CONTAINED_BY_MEDIA_LINKS
    root_field = "videos"

    async def transform(self, rows: List[Dict[str, Any]]) -> List[ContainedByMediaLinkRecord]:
        records = []
        for parent in rows:
            parent_id = parent["parentMediaComponentId"]
            for index, child in enumerate(parent.get("children") or []):
                child_id = child["mediaComponentId"]
                media_item = await self.repository.get_by_key(MediaItemRecord, child_id)
                if media_item is None:
                    self.logger.debug(f"Media item {child_id} not stored, skipping link from {parent_id}")
                    continue

                records.append(
                    ContainedByMediaLinkRecord(
                        parent_sort_link=composite_key(parent_id, index, LINK_TYPE),
                        media_component_id=child_id,
                        link_type=LINK_TYPE,
                        parent_media_component_id=parent_id,
                        sort_order=index,
                        media_item=media_item,
                    )
                )
        return records
