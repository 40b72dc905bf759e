"""Clear all content, votes and favorites from the configured database."""
from __future__ import annotations

import argparse
import logging
import sys

from sqlalchemy.exc import SQLAlchemyError

from dopameter.core.settings import settings
from dopameter.storage import SqlStorage

logger = logging.getLogger(__name__)


def reset_content(database_url: str) -> None:
    """Empty the content, vote and favorite tables at ``database_url``.

    Memoized chart series are kept.
    """
    storage = SqlStorage.from_url(database_url)
    logger.info("Resetting content tables")
    try:
        storage.reset()
    finally:
        storage.close()


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Reset Dopameter content")
    parser.add_argument(
        "--url",
        default=None,
        help="Override database URL (defaults to DATABASE_URL)",
    )
    parser.add_argument(
        "--yes",
        action="store_true",
        help="Skip the confirmation prompt.",
    )
    args = parser.parse_args(argv)
    logging.basicConfig(level=settings.log_level.upper())

    url = args.url or settings.database_url
    if not args.yes:
        answer = input(f"Delete all content, votes and favorites in {url}? [y/N] ")
        if answer.strip().lower() not in {"y", "yes"}:
            print("[reset_content] aborted")
            return

    try:
        reset_content(url)
    except SQLAlchemyError as exc:
        print(f"[reset_content] ERROR: {exc}", file=sys.stderr)
        sys.exit(1)
    print("[reset_content] content, votes and favorites cleared")


if __name__ == "__main__":
    main()
