# src/dopameter/scripts/migrate.py
from __future__ import annotations

import os

from alembic import command
from alembic.config import Config

from dopameter.core.settings import settings

_MIGRATIONS_DIR = os.path.abspath(
    os.path.join(os.path.dirname(__file__), "..", "..", "..", "migrations")
)


def run_upgrade_head(url: str | None = None) -> None:
    """Apply every Alembic revision to the configured database."""
    cfg = Config(os.path.join(_MIGRATIONS_DIR, "alembic.ini"))
    cfg.set_main_option("sqlalchemy.url", url or settings.database_url)
    cfg.set_main_option("script_location", _MIGRATIONS_DIR)
    command.upgrade(cfg, "head")


if __name__ == "__main__":
    run_upgrade_head()
