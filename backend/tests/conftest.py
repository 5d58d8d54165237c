"""
Pytest configuration and fixtures.

WHY: Fixtures provide reusable test setup/teardown logic, reducing
duplication and ensuring consistent test environments.
"""

import pytest
import pytest_asyncio
from typing import AsyncGenerator
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.pool import StaticPool
from httpx import AsyncClient

from candidates.main import app
from candidates.models.base import Base
from candidates.db.session import get_db
from candidates.core.deps import get_election_client, get_party_client
from candidates.services.candidate_service import CandidateService
from tests.factories import FakeElectionClient, FakePartyClient


# WHY: Using SQLite for tests eliminates external database dependencies
# and makes tests faster. StaticPool keeps the in-memory database alive
# across connections.
TEST_ASYNC_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture(scope="function")
async def db_engine():
    """
    Create a test database engine.

    Function scope gives each test a fresh database.
    """
    engine = create_async_engine(
        TEST_ASYNC_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(db_engine) -> AsyncGenerator[AsyncSession, None]:
    """
    Create a test database session.

    Yields:
        AsyncSession: Database session for the test
    """
    async_session = async_sessionmaker(
        db_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with async_session() as session:
        yield session
        await session.rollback()


@pytest.fixture
def party_client() -> FakePartyClient:
    """
    In-memory Party service.

    Party 1 has number 15, party 2 has number 1, party 3 has number 22.
    """
    return FakePartyClient(parties={1: 15, 2: 1, 3: 22})


@pytest.fixture
def election_client() -> FakeElectionClient:
    """
    In-memory Election service.

    Elections 10 and 20 exist and have no votes yet.
    """
    return FakeElectionClient(elections=[10, 20])


@pytest.fixture
def candidate_service(
    db_session: AsyncSession,
    party_client: FakePartyClient,
    election_client: FakeElectionClient,
) -> CandidateService:
    """Candidate service wired to the test session and fake peer services."""
    return CandidateService(db_session, party_client, election_client)


@pytest_asyncio.fixture
async def client(
    db_session: AsyncSession,
    party_client: FakePartyClient,
    election_client: FakeElectionClient,
) -> AsyncGenerator[AsyncClient, None]:
    """
    Create a test HTTP client.

    The database session and both peer service clients are replaced
    through dependency overrides.

    Yields:
        AsyncClient: HTTP client for making test requests
    """
    from httpx import ASGITransport

    async def override_get_db():
        """Override database dependency with test session."""
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_party_client] = lambda: party_client
    app.dependency_overrides[get_election_client] = lambda: election_client

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
def sample_candidate_data() -> dict:
    """
    Sample candidate input.

    Party 1 has number 15, so 150 belongs to it.
    """
    return {
        "name": "Jane Doe",
        "party_id": 1,
        "election_id": 10,
        "number_election": 150,
    }
