import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session

from app.core.config import Settings
from app.db.session import build_engine, init_db
from app.main import create_app


@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        _env_file=None,
        ENV="test",
        DATABASE_URL="sqlite://",
        CHECK_DB_ON_STARTUP=False,
        LOG_LEVEL="WARNING",
    )


@pytest.fixture
def app(test_settings):
    return create_app(test_settings)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def session(test_settings):
    engine = build_engine(test_settings)
    init_db(engine)
    with Session(engine) as s:
        yield s
    engine.dispose()
