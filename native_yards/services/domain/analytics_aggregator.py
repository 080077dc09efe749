"""
Domain service: Reduce raw analytics rows into dashboard figures.

Covers:
- Conversion rate per messaging variant
- Top converting customer segments
- Engagement with each benefit card
"""
import logging
from collections import Counter
from typing import Any, Iterable, Mapping, Optional

from native_yards.domain.models import (
    BenefitEngagement,
    DashboardData,
    EventType,
    SegmentConversions,
    VariantPerformance,
)

logger = logging.getLogger(__name__)

Row = Mapping[str, Any]

BENEFIT_ACTIONS = ("hover", "click")
TOP_SEGMENT_LIMIT = 5


def summarize_messaging(rows: Optional[Iterable[Row]]) -> dict[str, VariantPerformance]:
    """
    Count views and conversions per messaging variant.

    Args:
        rows: Rows with messaging_variant and event_type

    Returns:
        Dictionary of variant key to VariantPerformance
    """
    counts: dict[str, dict[str, int]] = {}

    for row in rows or []:
        variant = row.get("messaging_variant")
        if not variant:
            continue
        stats = counts.setdefault(variant, {"views": 0, "conversions": 0})
        event_type = row.get("event_type")
        if event_type == EventType.PAGE_VIEW.value:
            stats["views"] += 1
        elif event_type == EventType.CONVERSION.value:
            stats["conversions"] += 1

    performance = {}
    for variant, stats in counts.items():
        rate = None
        if stats["views"]:
            rate = round(stats["conversions"] / stats["views"] * 100, 2)
        performance[variant] = VariantPerformance(
            views=stats["views"],
            conversions=stats["conversions"],
            conversion_rate=rate,
        )
    return performance


def summarize_segments(
    rows: Optional[Iterable[Row]],
    limit: int = TOP_SEGMENT_LIMIT,
) -> list[SegmentConversions]:
    """
    Rank customer segments by number of conversions.

    Args:
        rows: Conversion rows with a customer_segments list
        limit: Maximum number of segments to return

    Returns:
        Segments sorted by conversions, highest first
    """
    counter: Counter = Counter()
    for row in rows or []:
        counter.update(row.get("customer_segments") or [])

    return [
        SegmentConversions(segment=segment, conversions=count)
        for segment, count in counter.most_common(limit)
    ]


def summarize_benefits(rows: Optional[Iterable[Row]]) -> list[BenefitEngagement]:
    """
    Count hovers and clicks per benefit.

    Rows with an action other than hover or click are ignored.

    Args:
        rows: Rows with benefit_type and action

    Returns:
        Benefits sorted by hover + click, highest first
    """
    engagement: dict[str, dict[str, int]] = {}

    for row in rows or []:
        benefit = row.get("benefit_type")
        action = row.get("action")
        if not benefit or action not in BENEFIT_ACTIONS:
            continue
        stats = engagement.setdefault(benefit, {"hover": 0, "click": 0})
        stats[action] += 1

    ranked = sorted(
        engagement.items(),
        key=lambda item: item[1]["hover"] + item[1]["click"],
        reverse=True,
    )
    return [BenefitEngagement(benefit=benefit, **stats) for benefit, stats in ranked]


def build_dashboard(
    messaging_rows: Optional[Iterable[Row]],
    segment_rows: Optional[Iterable[Row]],
    benefit_rows: Optional[Iterable[Row]],
) -> DashboardData:
    """
    Build the full dashboard from the three analytics queries.

    Args:
        messaging_rows: page_view and conversion rows
        segment_rows: conversion rows
        benefit_rows: benefit_interaction rows

    Returns:
        DashboardData
    """
    dashboard = DashboardData(
        messaging_performance=summarize_messaging(messaging_rows),
        top_segments=summarize_segments(segment_rows),
        benefit_engagement=summarize_benefits(benefit_rows),
    )
    logger.debug(f"Dashboard built: {len(dashboard.messaging_performance)} variants, "
                 f"{len(dashboard.top_segments)} segments, "
                 f"{len(dashboard.benefit_engagement)} benefits")
    return dashboard
