import os
import sys
import tempfile
from pathlib import Path

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

sys.path.append(str(Path(__file__).parents[1] / "src"))

from finance_tracker.db.session import get_db
from finance_tracker.main import app

ENV_TEST_PATH = Path(__file__).parents[1] / ".env.test"


def _load_env_file(path: Path) -> None:
    if not path.exists():
        return
    for line in path.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, value = line.split("=", 1)
        os.environ.setdefault(key, value)


_load_env_file(ENV_TEST_PATH)

TEST_DATABASE_URL = os.getenv(
    "TEST_DATABASE_URL",
    f"sqlite+aiosqlite:///{Path(tempfile.gettempdir()) / 'finance_tracker_test.db'}",
)

test_engine = create_async_engine(TEST_DATABASE_URL, echo=False)
TestSessionLocal = async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture(scope="function")
async def setup_database():
    """Create tables for tests that need the database, and drop them after.

    This fixture is intentionally NOT autouse so pure unit tests can run
    without a database.
    """
    from finance_tracker.models.base import Base
    import finance_tracker.models  # noqa: F401

    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)

    yield

    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await test_engine.dispose()


@pytest.fixture
async def db_session(setup_database):
    """Provide test database session with fresh connection per test."""
    async with TestSessionLocal() as session:
        yield session
        await session.rollback()


@pytest.fixture
async def session_factory(setup_database):
    """Provide the session factory for tests that need independent sessions."""
    return TestSessionLocal


@pytest.fixture
async def test_user(db_session: AsyncSession):
    """Create a test user for authentication tests."""
    from finance_tracker.models.user import User
    from finance_tracker.repositories.user import UserRepository

    repo = UserRepository(db_session)
    user = User(
        open_id="test-user",
        name="Test User",
        email="testuser@example.com",
        login_method="oauth",
    )
    return await repo.create(user)


@pytest.fixture
async def other_user(db_session: AsyncSession):
    """Create a second user for tenant isolation tests."""
    from finance_tracker.models.user import User
    from finance_tracker.repositories.user import UserRepository

    repo = UserRepository(db_session)
    user = User(
        open_id="other-user",
        name="Other User",
        email="other@example.com",
        login_method="oauth",
    )
    return await repo.create(user)


@pytest.fixture
async def auth_headers(test_user):
    """Provide authentication headers with a valid session token."""
    from finance_tracker.core.security import create_session_token

    token = create_session_token(test_user.open_id)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
async def other_auth_headers(other_user):
    from finance_tracker.core.security import create_session_token

    token = create_session_token(other_user.open_id)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
async def client(db_session: AsyncSession):
    """Provide test client with database override."""
    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
