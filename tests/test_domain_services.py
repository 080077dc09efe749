"""
Unit tests for the impact, messaging and analytics domain services.

Tests cover:
- Impact statistics rounding
- Messaging variant assignment
- Dashboard aggregation
- Rounding helpers
"""
import pytest

from native_yards.services.domain.analytics_aggregator import (
    build_dashboard,
    summarize_benefits,
    summarize_messaging,
    summarize_segments,
)
from native_yards.services.domain.impact_calculator import ImpactCalculator
from native_yards.services.domain.messaging_experiment import (
    MESSAGING_VARIANTS,
    assign_variant,
    get_variant,
    new_session_id,
)
from native_yards.utils.rounding import ceil_to_half, round_half_up, round_to_tenth


# ============================================================
# Impact Statistics Tests
# ============================================================

class TestImpactCalculator:
    """Tests for waitlist impact statistics."""

    def test_co2_from_yard_count(self):
        """10 yards * 0.2 acres * 1.5 tons = 3 tons."""
        stats = ImpactCalculator(avg_yard_acres=0.2, co2_tons_per_acre=1.5).calculate(10)

        assert stats.total_yards == 10
        assert stats.co2_saved_tons == 3

    def test_half_ton_rounds_up(self):
        """5 yards give 1.5 tons, shown as 2."""
        stats = ImpactCalculator(avg_yard_acres=0.2, co2_tons_per_acre=1.5).calculate(5)

        assert stats.co2_saved_tons == 2

    @pytest.mark.parametrize("count", [None, 0])
    def test_empty_waitlist(self, count):
        """No signups means no impact."""
        stats = ImpactCalculator().calculate(count)

        assert stats.total_yards == 0
        assert stats.co2_saved_tons == 0

    def test_defaults_from_settings(self):
        """Unset factors come from application settings."""
        calculator = ImpactCalculator()

        assert calculator.avg_yard_acres == 0.2
        assert calculator.co2_tons_per_acre == 1.5


# ============================================================
# Messaging Experiment Tests
# ============================================================

class TestMessagingExperiment:
    """Tests for A/B/C messaging variant assignment."""

    def test_assignment_is_deterministic(self):
        """A session always gets the same variant."""
        assert assign_variant("session-abc") == assign_variant("session-abc")

    @pytest.mark.parametrize("session_id,variant", [
        ("a", "B"),  # ord("a") = 97, 97 % 3 = 1
        ("c", "A"),  # 99 % 3 = 0
        ("b", "C"),  # 98 % 3 = 2
        ("", "A"),
    ])
    def test_assignment_by_character_sum(self, session_id, variant):
        assert assign_variant(session_id) == variant

    def test_all_variants_reachable(self):
        """Sessions spread over every variant."""
        assigned = {assign_variant(new_session_id()) for _ in range(200)}

        assert assigned == set(MESSAGING_VARIANTS)

    def test_get_variant_returns_assigned_copy_text(self):
        variant = get_variant("c")

        assert variant.key == "A"
        assert variant.cta == "Get Your Weekends Back"
        assert variant.benefits_heading == "Why Choose Native Yards?"

    def test_session_ids_are_unique(self):
        assert new_session_id() != new_session_id()


# ============================================================
# Analytics Aggregation Tests
# ============================================================

class TestMessagingPerformance:
    """Tests for conversion rates per variant."""

    def test_views_and_conversions(self, messaging_rows):
        performance = summarize_messaging(messaging_rows)

        assert set(performance) == {"A", "B"}
        assert performance["A"].views == 4
        assert performance["A"].conversions == 1
        assert performance["A"].conversion_rate == 25.0
        assert performance["B"].conversion_rate == 0.0

    def test_rate_rounded_to_two_places(self):
        rows = (
            [{"messaging_variant": "C", "event_type": "page_view"}] * 3
            + [{"messaging_variant": "C", "event_type": "conversion"}]
        )

        assert summarize_messaging(rows)["C"].conversion_rate == 33.33

    def test_no_views_has_no_rate(self):
        """Conversions without views leave the rate undefined."""
        rows = [{"messaging_variant": "A", "event_type": "conversion"}]

        performance = summarize_messaging(rows)

        assert performance["A"].conversions == 1
        assert performance["A"].conversion_rate is None

    def test_missing_rows(self):
        assert summarize_messaging(None) == {}


class TestSegments:
    """Tests for top converting segments."""

    def test_counts_sorted_descending(self):
        rows = [
            {"customer_segments": ["senior", "landlord"]},
            {"customer_segments": ["landlord"]},
            {"customer_segments": None},
            {},
        ]

        segments = summarize_segments(rows)

        assert [(s.segment, s.conversions) for s in segments] == [
            ("landlord", 2),
            ("senior", 1),
        ]

    def test_limited_to_top_five(self):
        rows = [{"customer_segments": [f"segment_{i}"] * (i + 1)} for i in range(7)]

        segments = summarize_segments(rows)

        assert len(segments) == 5
        assert segments[0].segment == "segment_6"


class TestBenefits:
    """Tests for benefit engagement."""

    def test_hover_and_click_counts(self):
        rows = [
            {"benefit_type": "safety", "action": "hover"},
            {"benefit_type": "time_savings", "action": "click"},
            {"benefit_type": "time_savings", "action": "hover"},
            {"benefit_type": "time_savings", "action": "click"},
        ]

        benefits = summarize_benefits(rows)

        assert [b.benefit for b in benefits] == ["time_savings", "safety"]
        assert benefits[0].click == 2
        assert benefits[0].hover == 1
        assert benefits[1].click == 0

    def test_unknown_actions_ignored(self):
        rows = [
            {"benefit_type": "safety", "action": "scroll"},
            {"benefit_type": None, "action": "click"},
        ]

        assert summarize_benefits(rows) == []


class TestBuildDashboard:
    """Tests for assembling the dashboard."""

    def test_combines_sections(self, messaging_rows):
        dashboard = build_dashboard(
            messaging_rows,
            [{"customer_segments": ["senior"]}],
            [{"benefit_type": "safety", "action": "click"}],
        )

        assert dashboard.messaging_performance["A"].views == 4
        assert dashboard.top_segments[0].segment == "senior"
        assert dashboard.benefit_engagement[0].click == 1

    def test_empty_dashboard(self):
        dashboard = build_dashboard([], [], [])

        assert dashboard.messaging_performance == {}
        assert dashboard.top_segments == []
        assert dashboard.benefit_engagement == []


# ============================================================
# Rounding Helper Tests
# ============================================================

class TestRounding:
    """Tests for rounding helpers."""

    @pytest.mark.parametrize("value,expected", [
        (832.5, 833),
        (277.5, 278),
        (0.5, 1),
        (2.4999, 2),
        (0, 0),
    ])
    def test_round_half_up(self, value, expected):
        assert round_half_up(value) == expected

    def test_round_to_tenth(self):
        assert round_to_tenth(5000 * 0.0003) == 1.5
        assert round_to_tenth(3000 * 0.0003) == 0.9

    @pytest.mark.parametrize("value,expected", [
        (0.1, 0.5),
        (2.5, 2.5),
        (2.51, 3.0),
        (15, 15),
    ])
    def test_ceil_to_half(self, value, expected):
        assert ceil_to_half(value) == expected


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
