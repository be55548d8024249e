"""
Base type for normalized records.

A normalized record is the immutable output of a transformer: one row (or
one object) ready to be written to a store. Fields use snake_case in Python
and serialize under the camelCase names the apps read.
"""

import json
from typing import Any, ClassVar, Dict, Sequence, Tuple, Type, Union

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

KEY_SEPARATOR = "__"

IdentityKey = Union[str, int, Tuple[Any, ...]]


def composite_key(*parts: Any) -> str:
    """Join external ids into a single string key, e.g. "US__529"."""
    return KEY_SEPARATOR.join(str(part) for part in parts)


class NormalizedRecord(BaseModel):
    """
    Immutable record bound to one destination model.

    Subclasses set:
        orm_model: the SQLAlchemy model the record is stored as
        key_fields: fields forming the identity key, in primary key order
        link_fields: fields holding other records that are stored as
            relationships rather than columns
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    orm_model: ClassVar[Type[Any]]
    key_fields: ClassVar[Tuple[str, ...]] = ()
    link_fields: ClassVar[Tuple[str, ...]] = ()

    def identity_key(self) -> IdentityKey:
        values = tuple(getattr(self, field) for field in self.key_fields)
        return values[0] if len(values) == 1 else values

    def to_row(self) -> Dict[str, Any]:
        """Column values keyed by model attribute name, links excluded."""
        return self.model_dump(exclude=set(self.link_fields))


def serialize_records(records: Sequence[NormalizedRecord]) -> bytes:
    """Encode records as a UTF-8 JSON array using their camelCase names."""
    payload = [record.model_dump(mode="json", by_alias=True) for record in records]
    return json.dumps(payload, ensure_ascii=False, separators=(",", ":")).encode("utf-8")
