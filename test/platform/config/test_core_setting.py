import pytest

from src.platform.config.core_setting import Settings


@pytest.mark.unit
class TestSettings:
    def test_database_url_override_wins(self) -> None:
        settings = Settings(DATABASE_URL='sqlite+aiosqlite:///./local.db')

        assert settings.DATABASE_URL_ASYNC == 'sqlite+aiosqlite:///./local.db'
        assert settings.DATABASE_READ_URL_ASYNC == 'sqlite+aiosqlite:///./local.db'

    def test_postgres_url_from_parts(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv('DATABASE_URL', raising=False)
        settings = Settings(
            DATABASE_URL=None,
            POSTGRES_USER='app',
            POSTGRES_PASSWORD='pw',
            POSTGRES_SERVER='db',
            POSTGRES_PORT=5433,
            POSTGRES_DB='shop',
        )

        assert settings.DATABASE_URL_ASYNC == 'postgresql+asyncpg://app:pw@db:5433/shop'

    def test_read_url_uses_replica_when_configured(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv('DATABASE_URL', raising=False)
        settings = Settings(
            DATABASE_URL=None,
            POSTGRES_USER='app',
            POSTGRES_PASSWORD='pw',
            POSTGRES_SERVER='db',
            POSTGRES_DB='shop',
            POSTGRES_REPLICA_SERVER='replica',
        )

        assert settings.DATABASE_READ_URL_ASYNC == 'postgresql+asyncpg://app:pw@replica:5432/shop'

    def test_cors_origins_from_comma_separated_string(self) -> None:
        settings = Settings(BACKEND_CORS_ORIGINS='http://a.test, http://b.test')

        assert settings.BACKEND_CORS_ORIGINS == ['http://a.test', 'http://b.test']
