import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from config import Settings
from database import build_engine, build_sessionmaker, init_db
from main import create_app


@pytest.fixture
def settings(tmp_path, request):
    # Unique per-test database file
    db_file = tmp_path / f"books_{request.node.name}.db"
    return Settings(database_url=f"sqlite+aiosqlite:///{db_file}", log_level="DEBUG")


@pytest.fixture
def client(settings):
    with TestClient(create_app(settings)) as test_client:
        yield test_client


@pytest_asyncio.fixture
async def db(settings):
    engine = build_engine(settings.database_url)
    await init_db(engine)
    async with build_sessionmaker(engine)() as session:
        yield session
    await engine.dispose()
