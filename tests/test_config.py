"""Unit tests for settings and database URL assembly."""

from src.config import Settings


def test_defaults_build_postgres_url(monkeypatch):
    for var in ("DB_HOST", "DB_USER", "DB_PASSWORD", "DB_NAME", "DB_PORT", "DATABASE_URL"):
        monkeypatch.delenv(var, raising=False)
    url = Settings(_env_file=None).sqlalchemy_url
    assert url.drivername == "postgresql+asyncpg"
    assert url.host == "localhost"
    assert url.username == "root"
    assert url.password is None
    assert url.database == "school_management"


def test_default_port_is_3000(monkeypatch):
    monkeypatch.delenv("PORT", raising=False)
    assert Settings(_env_file=None).port == 3000


def test_environment_overrides(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    monkeypatch.setenv("DB_HOST", "db.internal")
    monkeypatch.setenv("DB_USER", "schools")
    monkeypatch.setenv("DB_PASSWORD", "s3cret")
    monkeypatch.setenv("DB_NAME", "schools_prod")
    monkeypatch.setenv("PORT", "8080")

    cfg = Settings(_env_file=None)
    url = cfg.sqlalchemy_url
    assert url.host == "db.internal"
    assert url.username == "schools"
    assert url.password == "s3cret"
    assert url.database == "schools_prod"
    assert cfg.port == 8080


def test_database_url_wins_over_parts():
    cfg = Settings(
        _env_file=None,
        database_url="sqlite+aiosqlite:///:memory:",
        db_host="ignored",
    )
    assert cfg.sqlalchemy_url.drivername == "sqlite+aiosqlite"
    assert cfg.sqlalchemy_url.host is None


def test_alternate_driver():
    cfg = Settings(_env_file=None, db_driver="mysql+aiomysql", db_port=3306)
    assert cfg.sqlalchemy_url.drivername == "mysql+aiomysql"
    assert cfg.sqlalchemy_url.port == 3306
