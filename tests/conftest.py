"""
Shared pytest fixtures for all tests.

This module provides common fixtures including:
- Sample form answers and signups
- Sample analytics rows
- Mock backend client
- FastAPI test client
"""
import pytest
from unittest.mock import AsyncMock
from fastapi.testclient import TestClient

from native_yards.main import app
from native_yards.domain.models import FormAnswers, WaitlistSignup
from native_yards.infrastructure.supabase_client import SupabaseClient
from native_yards.services.domain.package_recommender import PackageRecommender


# ============================================================
# Sample Data Fixtures
# ============================================================

@pytest.fixture
def sample_answers() -> FormAnswers:
    """Answers from a visitor in Grand Rapids with a small yard."""
    return FormAnswers(
        zip_code="49525",
        yard_size="small",
        desires=["edible", "curb_appeal", "low_maintenance"],
        budget="high",
        time_commitment="moderate",
    )


@pytest.fixture
def sample_signup() -> WaitlistSignup:
    """A completed signup tied to an analytics session."""
    return WaitlistSignup(
        email="visitor@example.com",
        zip_code="49525",
        yard_size="small",
        desires=["edible", "curb_appeal", "low_maintenance"],
        budget="high",
        time_commitment="moderate",
        session_id="session-123",
        messaging_variant="B",
        customer_segments=["busy_professional"],
    )


@pytest.fixture
def messaging_rows() -> list[dict]:
    """page_view and conversion rows across two variants."""
    return (
        [{"messaging_variant": "A", "event_type": "page_view"}] * 4
        + [{"messaging_variant": "A", "event_type": "conversion"}]
        + [{"messaging_variant": "B", "event_type": "page_view"}] * 3
        + [{"messaging_variant": None, "event_type": "page_view"}]
    )


@pytest.fixture
def recommender() -> PackageRecommender:
    return PackageRecommender()


# ============================================================
# Mock Backend Client Fixtures
# ============================================================

@pytest.fixture
def mock_backend():
    """Create a mock hosted backend client."""
    mock_client = AsyncMock(spec=SupabaseClient)
    mock_client.insert.return_value = {"id": 1}
    mock_client.count.return_value = 10
    mock_client.select.return_value = []
    return mock_client


# ============================================================
# FastAPI Test Client Fixtures
# ============================================================

@pytest.fixture
def test_client() -> TestClient:
    """Create a synchronous test client for FastAPI."""
    return TestClient(app)


@pytest.fixture
def override_backend(mock_backend):
    """Route every service dependency to the mock backend."""
    from native_yards.infrastructure.supabase_client import get_backend_client

    app.dependency_overrides[get_backend_client] = lambda: mock_backend
    try:
        yield mock_backend
    finally:
        app.dependency_overrides.clear()
