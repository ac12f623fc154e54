"""
Migration runner

Applies the versioned schema changes under src/platform/alembic/versions.
Alembic records every applied revision in the `alembic_version` table, so
`upgrade()` on an up-to-date database is a no-op and `downgrade()` reverts
exactly one revision at a time (latest first).

Console scripts (see pyproject.toml):
    storefront-migrate             -> upgrade to head
    storefront-rollback            -> downgrade one revision
    storefront-migration-current   -> show applied revision
    storefront-migration-history   -> list revisions
"""

import asyncio
from typing import Optional

from alembic import command
from alembic.config import Config
from alembic.runtime.migration import MigrationContext
from alembic.script import ScriptDirectory
from sqlalchemy import pool
from sqlalchemy.ext.asyncio import create_async_engine

from src.platform.config.core_setting import settings
from src.platform.constant.path import ALEMBIC_DIR
from src.platform.logging.loguru_io import Logger


def build_alembic_config(database_url: Optional[str] = None) -> Config:
    """Alembic config pointing at our script directory, independent of alembic.ini."""
    alembic_cfg = Config()
    alembic_cfg.set_main_option('script_location', str(ALEMBIC_DIR))
    alembic_cfg.set_main_option('sqlalchemy.url', database_url or settings.DATABASE_URL_ASYNC)
    # Our loguru setup already intercepts stdlib logging
    alembic_cfg.attributes['configure_logger'] = False
    return alembic_cfg


@Logger.io
def upgrade(revision: str = 'head', *, database_url: Optional[str] = None) -> None:
    Logger.base.info(f'⬆️  [MIGRATION] Upgrading to {revision}')
    command.upgrade(build_alembic_config(database_url), revision)


@Logger.io
def downgrade(revision: str = '-1', *, database_url: Optional[str] = None) -> None:
    Logger.base.info(f'⬇️  [MIGRATION] Downgrading to {revision}')
    command.downgrade(build_alembic_config(database_url), revision)


@Logger.io
def current(*, database_url: Optional[str] = None) -> tuple[str, ...]:
    """Return the revision(s) recorded in alembic_version (empty when nothing applied)."""
    return asyncio.run(_current_heads(database_url or settings.DATABASE_URL_ASYNC))


@Logger.io
def history(*, database_url: Optional[str] = None) -> list[str]:
    """Revision ids from oldest to newest."""
    script = ScriptDirectory.from_config(build_alembic_config(database_url))
    return [rev.revision for rev in reversed(list(script.walk_revisions()))]


async def _current_heads(database_url: str) -> tuple[str, ...]:
    engine = create_async_engine(database_url, poolclass=pool.NullPool)
    try:
        async with engine.connect() as connection:
            return await connection.run_sync(
                lambda sync_conn: tuple(MigrationContext.configure(sync_conn).get_current_heads())
            )
    finally:
        await engine.dispose()


# === Console script entry points ===


def upgrade_cli() -> None:
    upgrade()


def downgrade_cli() -> None:
    downgrade()


def current_cli() -> None:
    heads = current()
    print(', '.join(heads) if heads else '<base>')


def history_cli() -> None:
    for rev in history():
        print(rev)
