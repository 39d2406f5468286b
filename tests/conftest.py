import asyncio

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import NullPool

from config import Settings, get_settings
from database import create_tables, get_db, make_engine, make_sessionmaker
from main import app


@pytest.fixture
def store(tmp_path):
    # NullPool: every request runs on its own event loop under TestClient
    engine = make_engine(f"sqlite+aiosqlite:///{tmp_path / 'portfolio.db'}", poolclass=NullPool)
    asyncio.run(create_tables(engine))
    yield engine
    asyncio.run(engine.dispose())


@pytest.fixture
def run_in_session(store):
    """Run ``fn(db, *args, **kwargs)`` against the test store and return its result."""
    session_factory = make_sessionmaker(store)

    def run(fn, *args, **kwargs):
        async def go():
            async with session_factory() as db:
                return await fn(db, *args, **kwargs)

        return asyncio.run(go())

    return run


@pytest.fixture
def settings():
    return Settings()


@pytest.fixture
def client(store, settings):
    session_factory = make_sessionmaker(store)

    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_settings] = lambda: settings
    yield TestClient(app)
    app.dependency_overrides.clear()
