"""
Command line entry point: build, simulate or rebuild one platform's cache.

    app-cache-builder --target ios --language-id 529 --language-tag en
    app-cache-builder --target android --dry --verbose
    app-cache-builder --target ios --rebuild
"""

import argparse
import asyncio
import logging
from typing import List, Optional

from core.config import settings
from core.logging import setup_logging
from ingestion.runner import CacheRunner
from models.base import ExecutionMode, Target

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="app-cache-builder",
        description="Build the offline content caches shipped with the mobile apps.",
    )
    parser.add_argument(
        "-t", "--target",
        required=True,
        choices=[target.value for target in Target],
        help="platform whose cache is built",
    )
    parser.add_argument(
        "-l", "--language-id",
        default=settings.DEFAULT_LANGUAGE_ID,
        help="content language id (default: %(default)s)",
    )
    parser.add_argument(
        "-g", "--language-tag",
        default=settings.DEFAULT_LANGUAGE_TAG,
        help="BCP 47 tag of the content language (default: %(default)s)",
    )
    parser.add_argument(
        "--include-reading-language-data",
        action="store_true",
        help="also bundle data for every other reading language (ios only)",
    )
    parser.add_argument("-s", "--silent", action="store_true", help="emit no log output")
    parser.add_argument("-v", "--verbose", action="store_true", help="log at debug level")
    parser.add_argument(
        "-d", "--dry",
        action="store_true",
        help="run every transformer without writing to the store",
    )
    parser.add_argument(
        "-r", "--rebuild",
        action="store_true",
        help="only reset the live store from the clean snapshot, then exit",
    )
    return parser


async def run(args: argparse.Namespace):
    runner = CacheRunner(
        target=args.target,
        language_id=args.language_id,
        language_tag=args.language_tag,
        mode=ExecutionMode.SIMULATE if args.dry else ExecutionMode.WRITE,
        include_reading_language_data=args.include_reading_language_data,
    )

    if args.rebuild:
        await runner.rebuild()
        logger.info(f"{args.target} live store rebuilt")
        return None

    return await runner.run()


def main(argv: Optional[List[str]] = None) -> int:
    """
    Parse arguments and run.

    Returns:
        0 on success, 1 on a failed run; argument errors exit with 2
    """
    args = build_parser().parse_args(argv)
    setup_logging(level="DEBUG" if args.verbose else None, silent=args.silent)

    try:
        result = asyncio.run(run(args))
    except Exception:
        logger.exception("Cache build failed")
        return 1

    if result is not None:
        for name, count in result["records"].items():
            logger.info(f"  {name}: {count}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
