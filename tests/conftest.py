"""
Test configuration and fixtures for the HomeQuest Listing API.
Provides an in-memory database, an HTTP client bound to the app, and test data factories.
"""

import os

os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("SEED_ON_STARTUP", "false")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

import pytest
import uuid
from typing import AsyncGenerator, Optional, List
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.pool import StaticPool
from httpx import AsyncClient, ASGITransport

from homequest.main import app
from homequest.config import settings
from homequest.database import Base, get_db
from homequest.models.user import User, UserRole
from homequest.models.agent import Agent
from homequest.models.property import Property, PropertyType, PropertyCategory, PropertyStatus
from homequest.repositories.user import UserRepository
from homequest.repositories.property import PropertyRepository
from homequest.repositories.agent import AgentRepository
from homequest.repositories.enquiry import EnquiryRepository
from homequest.repositories.saved_property import SavedPropertyRepository
from homequest.repositories.session import SessionStore
from homequest.services.auth import AuthService


TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

DEFAULT_PASSWORD = "secret123"
DEFAULT_IMAGE = "https://images.example.com/listing.jpg"


@pytest.fixture
async def test_engine():
    """Create a fresh in-memory database per test."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False}
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def session_factory(test_engine):
    return async_sessionmaker(
        bind=test_engine,
        class_=AsyncSession,
        expire_on_commit=False
    )


@pytest.fixture
async def db_session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    """Create a test database session."""
    async with session_factory() as session:
        try:
            yield session
        finally:
            await session.rollback()
            await session.close()


@pytest.fixture
async def async_client(session_factory) -> AsyncGenerator[AsyncClient, None]:
    """Create an async test client whose requests each get their own session."""
    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client

    app.dependency_overrides.clear()


# Repository fixtures
@pytest.fixture
def user_repository(db_session: AsyncSession) -> UserRepository:
    return UserRepository(db_session)


@pytest.fixture
def property_repository(db_session: AsyncSession) -> PropertyRepository:
    return PropertyRepository(db_session)


@pytest.fixture
def agent_repository(db_session: AsyncSession) -> AgentRepository:
    return AgentRepository(db_session)


@pytest.fixture
def enquiry_repository(db_session: AsyncSession) -> EnquiryRepository:
    return EnquiryRepository(db_session)


@pytest.fixture
def saved_property_repository(db_session: AsyncSession) -> SavedPropertyRepository:
    return SavedPropertyRepository(db_session)


@pytest.fixture
def session_store(db_session: AsyncSession) -> SessionStore:
    return SessionStore(db_session)


# Service fixtures
@pytest.fixture
def auth_service(db_session: AsyncSession) -> AuthService:
    """Create an auth service instance."""
    return AuthService(db_session)


# Test data factories
class UserFactory:
    """Factory for creating test users."""

    @staticmethod
    def create_user_data(
        username: str = None,
        password: str = DEFAULT_PASSWORD,
        email: Optional[str] = None,
        name: str = "Test User",
        role: UserRole = UserRole.USER
    ) -> dict:
        """Create user data dictionary."""
        return {
            "username": username or f"user_{uuid.uuid4().hex[:8]}",
            "password": password,
            "email": email,
            "name": name,
            "role": role
        }

    @staticmethod
    async def create_user(user_repo: UserRepository, **kwargs) -> User:
        """Create a test user in the database."""
        return await user_repo.create_user(UserFactory.create_user_data(**kwargs))


class AgentFactory:
    """Factory for creating test agents."""

    @staticmethod
    def create_agent_data(
        name: str = "Test Agent",
        email: str = None,
        phone: str = "9876500000",
        areas: Optional[List[str]] = None
    ) -> dict:
        return {
            "name": name,
            "email": email or f"agent{uuid.uuid4().hex[:8]}@example.com",
            "phone": phone,
            "specialization": "Residential Specialist",
            "areas": areas or ["Mumbai"],
            "experience": 5,
            "rating": 4,
            "review_count": 10
        }

    @staticmethod
    async def create_agent(agent_repo: AgentRepository, **kwargs) -> Agent:
        return await agent_repo.create_agent(AgentFactory.create_agent_data(**kwargs))


class PropertyFactory:
    """Factory for creating test properties."""

    @staticmethod
    def create_property_data(
        title: str = "Test Property",
        city: str = "Mumbai",
        location: str = "Bandra West",
        property_type: PropertyType = PropertyType.APARTMENT,
        category: PropertyCategory = PropertyCategory.BUY,
        price: int = 10000000,
        bedrooms: Optional[int] = 2,
        bathrooms: Optional[int] = 2,
        area: Optional[int] = 1000,
        status: PropertyStatus = PropertyStatus.AVAILABLE,
        featured: bool = False,
        agent_id: Optional[int] = None,
        images: Optional[List[str]] = None
    ) -> dict:
        """Create property data dictionary."""
        return {
            "title": title,
            "description": f"{title} in {location}",
            "address": f"{title}, {location}",
            "city": city,
            "location": location,
            "type": property_type,
            "category": category,
            "price": price,
            "bedrooms": bedrooms,
            "bathrooms": bathrooms,
            "area": area,
            "amenities": ["Gym", "Security"],
            "features": ["Parking"],
            "images": images if images is not None else [DEFAULT_IMAGE],
            "status": status,
            "featured": featured,
            "agent_id": agent_id
        }

    @staticmethod
    async def create_property(property_repo: PropertyRepository, **kwargs) -> Property:
        """Create a test property in the database."""
        return await property_repo.create_property(PropertyFactory.create_property_data(**kwargs))


# Common test fixtures
@pytest.fixture
async def test_user(user_repository: UserRepository) -> User:
    """Create a regular test user with a known password."""
    return await UserFactory.create_user(
        user_repository,
        username="alice",
        email="alice@example.com",
        name="Alice"
    )


@pytest.fixture
async def other_user(user_repository: UserRepository) -> User:
    return await UserFactory.create_user(user_repository, username="bob", name="Bob")


@pytest.fixture
async def test_agent(agent_repository: AgentRepository) -> Agent:
    return await AgentFactory.create_agent(agent_repository, name="Aditya Kumar")


@pytest.fixture
async def sample_listings(property_repository: PropertyRepository, test_agent: Agent) -> List[Property]:
    """A small mixed catalogue across two cities."""
    listings = [
        dict(title="Bandra Flat", city="Mumbai", location="Bandra West", price=12500000,
             bedrooms=3, bathrooms=2, area=1250, featured=True),
        dict(title="Juhu Villa", city="Mumbai", location="Juhu", property_type=PropertyType.VILLA,
             price=29500000, bedrooms=4, bathrooms=4, area=2680, featured=True),
        dict(title="Malad Rental", city="Mumbai", location="Malad West", category=PropertyCategory.RENT,
             price=35000, bedrooms=2, bathrooms=2, area=950),
        dict(title="Pune Office", city="Pune", location="Hinjewadi", property_type=PropertyType.COMMERCIAL,
             price=17500000, bedrooms=None, bathrooms=None, area=1800, featured=True),
        dict(title="Powai Studio", city="Mumbai", location="Powai", price=1000000,
             bedrooms=1, bathrooms=1, area=650, status=PropertyStatus.SOLD),
    ]
    return [
        await PropertyFactory.create_property(property_repository, agent_id=test_agent.id, **fields)
        for fields in listings
    ]


async def login(client: AsyncClient, username: str = "alice", password: str = DEFAULT_PASSWORD):
    """Log in through the API; the client keeps the session cookie."""
    response = await client.post("/api/auth/login", json={"username": username, "password": password})
    assert response.status_code == 200, response.text
    return response


# Utility functions for tests
def assert_no_password(user_payload: dict):
    """Assert a serialized user carries no password material."""
    assert "password" not in user_payload
    assert "hashedPassword" not in user_payload
    assert "hashed_password" not in user_payload


def assert_error_body(response, status_code: int, message: Optional[str] = None):
    """Assert the flat error shape and, optionally, its message."""
    assert response.status_code == status_code, response.text
    data = response.json()
    assert "message" in data
    assert "code" in data
    if message is not None:
        assert data["message"] == message
    return data


SESSION_COOKIE = settings.session_cookie_name
