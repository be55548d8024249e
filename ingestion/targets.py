"""
Per-platform wiring: store files, schema, repository and transformers.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Sequence, Type

from sqlalchemy import MetaData

from core.config import settings
from core.exceptions import ConfigurationError
from ingestion.base import Transformer
from ingestion.loaders.base import Repository
from ingestion.loaders.object_loader import ObjectRepository
from ingestion.loaders.sqlite_loader import RelationalRepository
from ingestion.transformers.android import ANDROID_TRANSFORMERS
from ingestion.transformers.ios import IOS_TRANSFORMERS, ReadingLanguageDataTransformer
from models.base import AndroidBase, ObjectBase, Target


@dataclass(frozen=True)
class TargetPlatform:
    """
    Everything that differs between the two stores.

    Store files live in `<ASSETS_DIR>/<target>/` as `<store_name>.clean.db`
    (the baseline) and `<store_name>.db` (the live store).
    """

    target: Target
    store_name: str
    metadata: MetaData
    repository_class: Type[Repository]
    transformers: Sequence[Type[Transformer]]
    # Run after the others, only when reading-language data is requested
    reading_language_transformers: Sequence[Type[Transformer]] = ()

    @property
    def directory(self) -> Path:
        return Path(settings.ASSETS_DIR) / self.target.value

    @property
    def clean_path(self) -> Path:
        return self.directory / f"{self.store_name}.clean.db"

    @property
    def live_path(self) -> Path:
        return self.directory / f"{self.store_name}.db"


TARGETS = {
    Target.ANDROID: TargetPlatform(
        target=Target.ANDROID,
        store_name="cache",
        metadata=AndroidBase.metadata,
        repository_class=RelationalRepository,
        transformers=ANDROID_TRANSFORMERS,
    ),
    Target.IOS: TargetPlatform(
        target=Target.IOS,
        store_name="arclight",
        metadata=ObjectBase.metadata,
        repository_class=ObjectRepository,
        transformers=IOS_TRANSFORMERS,
        reading_language_transformers=(ReadingLanguageDataTransformer,),
    ),
}


def get_target(name) -> TargetPlatform:
    """Look up a platform by `Target` or its string value."""
    try:
        return TARGETS[Target(name)]
    except ValueError as e:
        raise ConfigurationError(
            f"Unknown target: {name}",
            context={"valid_targets": [target.value for target in Target]},
            original_exception=e,
        )
