"""
Create the empty clean snapshot for one or both platforms.

Run once when the store schema changes; the resulting *.clean.db files are
committed and every cache build starts from a copy of them.
"""

import argparse
import asyncio
import logging
import os
import sys

# Add current directory to path to allow imports from core, models, etc.
sys.path.append(os.getcwd())

from core.database import StoreHandle
from core.logging import setup_logging
from ingestion.targets import TARGETS, get_target
from models.base import Target

logger = logging.getLogger(__name__)


async def init_snapshot(target: str):
    platform = get_target(target)
    platform.directory.mkdir(parents=True, exist_ok=True)
    (platform.directory / ".gitkeep").touch()

    logger.info(f"Creating {target} snapshot at {platform.clean_path}")
    handle = StoreHandle(platform.clean_path, platform.metadata)
    try:
        await handle.create_schema()
    finally:
        await handle.dispose()


async def init_snapshots(targets=None):
    """Create every clean snapshot when no targets are given."""
    for target in targets or [t.value for t in TARGETS]:
        await init_snapshot(target)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__.strip().splitlines()[0])
    parser.add_argument(
        "targets",
        nargs="*",
        metavar="target",
        help=f"One of {', '.join(t.value for t in Target)}; all targets when omitted",
    )
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging()
    asyncio.run(init_snapshots(args.targets))
    return 0


if __name__ == "__main__":
    sys.exit(main())
