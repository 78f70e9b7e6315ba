"""
Fixtures for integration tests.

Provides:
- In-memory SQLite database with a small seeded contract book
- Test client for the FastAPI app wired to that database
"""

from datetime import date
from decimal import Decimal
from typing import AsyncGenerator, Dict
from uuid import uuid4

import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from src.main import app
from src.core.dependencies import get_contract_repository
from src.infrastructure.database import (
    Base,
    ContractInstallmentModel,
    ContractModel,
    PlanModel,
)
from src.infrastructure.repositories import PostgresContractRepository


# =============================================================================
# Database Fixtures
# =============================================================================

@pytest_asyncio.fixture
async def test_engine():
    """Create an in-memory SQLite async engine for testing."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def test_session(test_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create a test database session."""
    async_session = async_sessionmaker(
        bind=test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autocommit=False,
        autoflush=False,
    )

    async with async_session() as session:
        yield session


@pytest_asyncio.fixture
async def seeded(test_session: AsyncSession) -> Dict[str, str]:
    """
    Seed two plans and three contracts.

    - PP-0001: Basic, monthly, second installment drifted to 2024-03-15
    - PP-0002: Comfort, annual, clean schedule
    - PP-0003: Basic, monthly, never paid

    Returns a map of names to generated IDs.
    """
    ids = {
        "basic_plan": str(uuid4()),
        "comfort_plan": str(uuid4()),
        "drifted": str(uuid4()),
        "annual": str(uuid4()),
        "unpaid": str(uuid4()),
        "drifted_second": str(uuid4()),
    }

    test_session.add_all([
        PlanModel(id=ids["basic_plan"], name="Basic"),
        PlanModel(id=ids["comfort_plan"], name="Comfort Plus"),
    ])
    await test_session.flush()

    test_session.add_all([
        ContractModel(
            id=ids["drifted"],
            plan_id=ids["basic_plan"],
            contract_number="PP-0001",
            status="active",
            start_date=date(2024, 1, 15),
            billing_period="monthly",
            monthly_amount=Decimal("49.90"),
            received_date=date(2024, 1, 15),
            payment_approved=True,
        ),
        ContractModel(
            id=ids["annual"],
            plan_id=ids["comfort_plan"],
            contract_number="PP-0002",
            status="active",
            start_date=date(2023, 6, 1),
            billing_period="annual",
            monthly_amount=Decimal("59.90"),
            annual_amount=Decimal("599.00"),
            received_date=date(2023, 6, 1),
            payment_approved=True,
        ),
        ContractModel(
            id=ids["unpaid"],
            plan_id=ids["basic_plan"],
            contract_number="PP-0003",
            status="pending",
            start_date=date(2023, 5, 31),
            billing_period="monthly",
            monthly_amount=Decimal("50.00"),
            payment_approved=False,
        ),
    ])
    await test_session.flush()

    test_session.add_all([
        ContractInstallmentModel(
            contract_id=ids["drifted"],
            installment_number=1,
            due_date=date(2024, 1, 15),
            amount=Decimal("49.90"),
            status="paid",
        ),
        ContractInstallmentModel(
            id=ids["drifted_second"],
            contract_id=ids["drifted"],
            installment_number=2,
            due_date=date(2024, 3, 15),
            amount=Decimal("49.90"),
            status="pending",
        ),
        ContractInstallmentModel(
            contract_id=ids["annual"],
            installment_number=1,
            due_date=date(2023, 6, 1),
            amount=Decimal("599.00"),
            status="paid",
        ),
        ContractInstallmentModel(
            contract_id=ids["annual"],
            installment_number=2,
            due_date=date(2024, 6, 1),
            amount=Decimal("599.00"),
            status="pending",
        ),
        ContractInstallmentModel(
            contract_id=ids["unpaid"],
            installment_number=1,
            due_date=date(2023, 5, 31),
            amount=Decimal("50.00"),
            status="overdue",
        ),
    ])
    await test_session.commit()

    return ids


@pytest_asyncio.fixture
async def repository(test_session: AsyncSession, seeded) -> PostgresContractRepository:
    return PostgresContractRepository(test_session)


# =============================================================================
# App Client Fixtures
# =============================================================================

@pytest_asyncio.fixture
async def client(
    test_session: AsyncSession,
    seeded,
) -> AsyncGenerator[AsyncClient, None]:
    """
    Create a test client backed by the seeded in-memory database.
    """
    async def override_get_contract_repository():
        return PostgresContractRepository(test_session)

    app.dependency_overrides[get_contract_repository] = override_get_contract_repository

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
