"""
Pytest Configuration and Shared Fixtures

This module contains shared test fixtures and configuration for all test modules.
"""

import os

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

os.environ["ENVIRONMENT"] = "test"

from loan_decision.main import app  # noqa: E402
from loan_decision.services.decision_engine import (  # noqa: E402
    DecisionEngine,
    get_decision_engine,
)

from .codes import (  # noqa: E402
    DEBT_CODE,
    DEBT_CODE_1200,
    EIGHTEEN_TODAY_CODE,
    LEAP_YEAR_CODE,
    SEGMENT_1_CODE,
    SEGMENT_2_CODE,
    SEGMENT_3_CODE,
    SENIOR_LITHUANIA_CODE,
    TODAY,
)


@pytest.fixture()
def today():
    """Fixed decision date"""
    return TODAY


@pytest.fixture()
def engine():
    """Decision engine with the default policy and a fixed clock"""
    return DecisionEngine(today=lambda: TODAY)


@pytest.fixture()
def valid_personal_codes():
    """List of valid personal codes for testing"""
    return [
        DEBT_CODE,
        DEBT_CODE_1200,
        SEGMENT_1_CODE,
        SEGMENT_2_CODE,
        SEGMENT_3_CODE,
        EIGHTEEN_TODAY_CODE,
        SENIOR_LITHUANIA_CODE,
        LEAP_YEAR_CODE,
    ]


@pytest.fixture()
def invalid_personal_codes():
    """List of invalid personal codes for testing"""
    return [
        "",
        "4900201300",    # Too short
        "490020130080",  # Too long
        "4900201300A",   # Letter
        "4900-013008",   # Invalid characters
        "49002013009",   # Wrong check digit
        "79002013008",   # Unsupported century indicator
        "09002013008",   # Unsupported century indicator
        "49013013006",   # Month 13
        "49002303008",   # 30 February
    ]


@pytest_asyncio.fixture(scope="function")
async def client(engine):
    """Create test client with the fixed-clock decision engine"""
    app.dependency_overrides[get_decision_engine] = lambda: engine

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
