"""
Unit tests for the waitlist and analytics application services.

The hosted backend is replaced by an AsyncMock; these tests check the
orchestration only.
"""
import pytest

from native_yards.domain.models import AnalyticsEvent, EventType, WaitlistSignup
from native_yards.infrastructure.supabase_client import BackendError
from native_yards.services.application.analytics_service import AnalyticsService
from native_yards.services.application.waitlist_service import WaitlistService
from native_yards.services.domain.impact_calculator import ImpactCalculator
from native_yards.services.domain.package_recommender import PackageRecommender


@pytest.fixture
def waitlist_service(mock_backend) -> WaitlistService:
    return WaitlistService(
        backend=mock_backend,
        recommender=PackageRecommender(),
        impact_calculator=ImpactCalculator(avg_yard_acres=0.2, co2_tons_per_acre=1.5),
    )


# ============================================================
# Waitlist Service Tests
# ============================================================

class TestWaitlistService:
    """Tests for waitlist orchestration."""

    @pytest.mark.asyncio
    async def test_signup_stores_form_answers(self, waitlist_service, mock_backend, sample_signup):
        """Only the form answers are stored in the waitlist table."""
        await waitlist_service.signup(sample_signup)

        table, row = mock_backend.insert.call_args_list[0].args
        assert table == "waitlist"
        assert row == {
            "email": "visitor@example.com",
            "zip_code": "49525",
            "yard_size": "small",
            "time_commitment": "moderate",
            "desires": ["edible", "curb_appeal", "low_maintenance"],
            "vibe": None,
            "budget": "high",
        }

    @pytest.mark.asyncio
    async def test_signup_records_conversion(self, waitlist_service, mock_backend, sample_signup):
        """A signup with a session records a conversion event."""
        await waitlist_service.signup(sample_signup)

        assert mock_backend.insert.call_count == 2
        table, row = mock_backend.insert.call_args_list[1].args
        assert table == "analytics"
        assert row["session_id"] == "session-123"
        assert row["event_type"] == "conversion"
        assert row["messaging_variant"] == "B"
        assert row["customer_segments"] == ["busy_professional"]
        assert "timestamp" in row

    @pytest.mark.asyncio
    async def test_conversion_variant_assigned_when_missing(self, waitlist_service, mock_backend):
        """Without an explicit variant the session's assigned variant is used."""
        signup = WaitlistSignup(email="a@b.co", zip_code="1", session_id="c")

        await waitlist_service.signup(signup)

        row = mock_backend.insert.call_args_list[1].args[1]
        assert row["messaging_variant"] == "A"
        assert "customer_segments" not in row

    @pytest.mark.asyncio
    async def test_signup_without_session_skips_analytics(self, waitlist_service, mock_backend):
        signup = WaitlistSignup(email="a@b.co", zip_code="1")

        await waitlist_service.signup(signup)

        assert mock_backend.insert.call_count == 1

    @pytest.mark.asyncio
    async def test_signup_returns_package_and_stats(self, waitlist_service, mock_backend, sample_signup):
        result = await waitlist_service.signup(sample_signup)

        assert result.package.zone == "7a"
        assert result.package.pricing.final == 833
        assert result.stats.total_yards == 10
        assert result.stats.co2_saved_tons == 3
        mock_backend.count.assert_awaited_once_with("waitlist")

    @pytest.mark.asyncio
    async def test_failed_insert_propagates(self, waitlist_service, mock_backend, sample_signup):
        """A signup that cannot be stored fails."""
        mock_backend.insert.side_effect = BackendError("down", status_code=503)

        with pytest.raises(BackendError):
            await waitlist_service.signup(sample_signup)

        mock_backend.count.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_failed_conversion_does_not_fail_signup(self, waitlist_service, mock_backend, sample_signup):
        """The signup succeeds when only the analytics insert fails."""
        mock_backend.insert.side_effect = [{"id": 1}, BackendError("analytics down")]

        result = await waitlist_service.signup(sample_signup)

        assert result.stats.total_yards == 10

    def test_preview_does_not_touch_backend(self, waitlist_service, mock_backend, sample_answers):
        package = waitlist_service.preview_package(sample_answers)

        assert package.square_feet == 3000
        mock_backend.insert.assert_not_called()


# ============================================================
# Analytics Service Tests
# ============================================================

class TestAnalyticsService:
    """Tests for analytics orchestration."""

    @pytest.mark.asyncio
    async def test_record_event(self, mock_backend):
        service = AnalyticsService(backend=mock_backend)
        event = AnalyticsEvent(
            session_id="s1",
            event_type=EventType.STEP_COMPLETED,
            step=2,
            duration_ms=4200,
        )

        await service.record_event(event)

        table, row = mock_backend.insert.call_args.args
        assert table == "analytics"
        assert row["event_type"] == "step_completed"
        assert row["step"] == 2
        assert row["duration_ms"] == 4200
        assert "benefit_type" not in row

    @pytest.mark.asyncio
    async def test_dashboard_queries(self, mock_backend, messaging_rows):
        """The dashboard issues one query per section with the right filters."""
        mock_backend.select.side_effect = [
            messaging_rows,
            [{"customer_segments": ["senior"], "event_type": "conversion"}],
            [{"benefit_type": "safety", "action": "hover"}],
        ]
        service = AnalyticsService(backend=mock_backend)

        dashboard = await service.get_dashboard()

        filters = [call.kwargs["filters"] for call in mock_backend.select.call_args_list]
        assert filters == [
            {"event_type": "in.(page_view,conversion)"},
            {"event_type": "eq.conversion"},
            {"event_type": "eq.benefit_interaction"},
        ]
        assert dashboard.messaging_performance["A"].conversion_rate == 25.0
        assert dashboard.top_segments[0].segment == "senior"
        assert dashboard.benefit_engagement[0].hover == 1


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
