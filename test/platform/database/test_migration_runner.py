from collections.abc import Generator
from pathlib import Path

import pytest
from sqlalchemy import create_engine, event, inspect, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError

from src.platform.database import migration_runner


@pytest.fixture
def scratch_db(tmp_path: Path) -> Generator[tuple[str, Engine], None, None]:
    """Empty database separate from the shared test database."""
    db_path = tmp_path / 'migrations.db'
    engine = create_engine(f'sqlite:///{db_path}')

    @event.listens_for(engine, 'connect')
    def _fk_on(dbapi_connection, connection_record) -> None:  # type: ignore[no-untyped-def]
        dbapi_connection.execute('PRAGMA foreign_keys=ON')

    yield f'sqlite+aiosqlite:///{db_path}', engine
    engine.dispose()


@pytest.mark.unit
class TestMigrationRunner:
    def test_history_lists_revisions_oldest_first(self) -> None:
        assert migration_runner.history() == ['0001', '0002']

    def test_fresh_database_has_no_revision(self, scratch_db: tuple[str, Engine]) -> None:
        url, _ = scratch_db

        assert migration_runner.current(database_url=url) == ()

    def test_upgrade_creates_reviews_table(self, scratch_db: tuple[str, Engine]) -> None:
        url, engine = scratch_db

        migration_runner.upgrade(database_url=url)

        inspector = inspect(engine)
        assert {'users', 'products', 'reviews', 'alembic_version'} <= set(
            inspector.get_table_names()
        )
        columns = {column['name']: column for column in inspector.get_columns('reviews')}
        assert set(columns) == {'id', 'content', 'product_id', 'created_at', 'updated_at'}
        assert columns['content']['nullable'] is True
        assert columns['product_id']['nullable'] is False
        foreign_keys = inspector.get_foreign_keys('reviews')
        assert [(fk['constrained_columns'], fk['referred_table']) for fk in foreign_keys] == [
            (['product_id'], 'products')
        ]
        assert migration_runner.current(database_url=url) == ('0002',)

    def test_upgrade_twice_is_noop(self, scratch_db: tuple[str, Engine]) -> None:
        url, engine = scratch_db
        migration_runner.upgrade(database_url=url)
        with engine.begin() as conn:
            conn.execute(text("INSERT INTO products (id, name) VALUES (1, 'Lamp')"))
            conn.execute(text("INSERT INTO reviews (content, product_id) VALUES ('kept', 1)"))

        migration_runner.upgrade(database_url=url)

        with engine.connect() as conn:
            contents = conn.execute(text('SELECT content FROM reviews')).scalars().all()
            versions = conn.execute(text('SELECT version_num FROM alembic_version')).all()
        assert contents == ['kept']
        assert len(versions) == 1
        assert migration_runner.current(database_url=url) == ('0002',)

    def test_review_insert_enforces_product_reference(
        self, scratch_db: tuple[str, Engine]
    ) -> None:
        url, engine = scratch_db
        migration_runner.upgrade(database_url=url)

        with pytest.raises(IntegrityError):
            with engine.begin() as conn:
                conn.execute(text("INSERT INTO reviews (content, product_id) VALUES ('x', 42)"))

        with pytest.raises(IntegrityError):
            with engine.begin() as conn:
                conn.execute(text("INSERT INTO reviews (content) VALUES ('no product')"))

    def test_review_insert_populates_timestamps(self, scratch_db: tuple[str, Engine]) -> None:
        url, engine = scratch_db
        migration_runner.upgrade(database_url=url)

        with engine.begin() as conn:
            conn.execute(text("INSERT INTO products (id, name) VALUES (1, 'Lamp')"))
            conn.execute(text('INSERT INTO reviews (product_id) VALUES (1)'))
            row = conn.execute(
                text('SELECT content, created_at, updated_at FROM reviews')
            ).one()

        assert row.content is None
        assert row.created_at is not None
        assert row.updated_at is not None

    def test_downgrade_drops_only_reviews(self, scratch_db: tuple[str, Engine]) -> None:
        url, engine = scratch_db
        migration_runner.upgrade(database_url=url)

        migration_runner.downgrade(database_url=url)

        tables = set(inspect(engine).get_table_names())
        assert 'reviews' not in tables
        assert {'users', 'products'} <= tables
        assert migration_runner.current(database_url=url) == ('0001',)

    def test_downgrade_to_base_then_upgrade_again(self, scratch_db: tuple[str, Engine]) -> None:
        url, engine = scratch_db
        migration_runner.upgrade(database_url=url)

        migration_runner.downgrade('base', database_url=url)
        assert set(inspect(engine).get_table_names()) <= {'alembic_version'}

        migration_runner.upgrade(database_url=url)
        assert 'reviews' in inspect(engine).get_table_names()
