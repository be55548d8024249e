from typing import Any, Dict, List

from ingestion.base import Transformer
from ingestion.queries import android as queries
from ingestion.transformers.helpers import language_tag, tagged_entries
from schemas.android import TermTranslationRecord


class TermTranslationsTransformer(Transformer[TermTranslationRecord]):
    """Translated labels of taxonomy terms, one row per language tag."""

    name = "termTranslations"
    query = queries.TERM_TRANSLATIONS
    root_field = "taxonomies"

    async def transform(self, rows: List[Dict[str, Any]]) -> List[TermTranslationRecord]:
        return [
            TermTranslationRecord(
                language_tag=language_tag(entry, "languageTag"),
                label=taxonomy["label"],
                term=entry.get("value") or "",
            )
            for taxonomy in rows
            for entry in tagged_entries(taxonomy.get("term"), "languageTag")
        ]
