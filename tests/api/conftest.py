"""API test fixtures — async DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use the test database
    - StaticPool keeps one connection so every session sees the same database
"""

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncSession, async_sessionmaker, create_async_engine,
)
from sqlalchemy.pool import StaticPool

import app.domain  # noqa: F401
from app.db.base import Base, get_db
from app.domain.company import Company
from app.domain.employee import Employee
from app.main import app


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def client(test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
async def company(test_db):
    """A company with no employees."""
    company = Company(name="Acme", address="1 Main St", country="USA")
    test_db.add(company)
    await test_db.commit()
    return company


@pytest.fixture
async def staffed_company(test_db, company):
    """Acme with 23 employees: `Employee 00`..`Employee 22`, aged 20..42."""
    test_db.add_all(
        Employee(
            name=f"Employee {i:02d}",
            age=20 + i,
            position="Developer" if i % 2 else "Tester",
            company_id=company.id,
        )
        for i in range(23)
    )
    await test_db.commit()
    return company
