"""
Domain service: A/B messaging experiment.

Each visitor session is assigned one messaging variant deterministically
from its session id, so a returning session always sees the same copy.
"""
import uuid
from typing import Mapping
from types import MappingProxyType

from native_yards.domain.models import MessagingVariant


MESSAGING_VARIANTS: Mapping[str, MessagingVariant] = MappingProxyType({
    "A": MessagingVariant(
        key="A",
        hero="Get Your Weekends Back",
        subhero="Replace the lawn you mow every Saturday with native plants that look after themselves.",
        cta="Get Your Weekends Back",
        benefits_heading="Why Choose Native Yards?",
    ),
    "B": MessagingVariant(
        key="B",
        hero="Take Control of Your Yard",
        subhero="Cut water, fertilizer and mowing bills with a yard designed for your exact climate.",
        cta="Take Control Today",
        benefits_heading="Your Yard, Your Benefits",
    ),
    "C": MessagingVariant(
        key="C",
        hero="Kill Your Lawn. Save the Planet.",
        subhero="Convert water-guzzling grass into a native ecosystem that sequesters carbon.",
        cta="Join the Revolution",
        benefits_heading="The Smart Yard Advantage",
    ),
})

VARIANT_KEYS = tuple(sorted(MESSAGING_VARIANTS))


def new_session_id() -> str:
    """Generate a random session identifier."""
    return uuid.uuid4().hex


def assign_variant(session_id: str) -> str:
    """
    Assign a messaging variant key to a session.

    Args:
        session_id: Visitor session identifier

    Returns:
        Variant key ("A", "B" or "C")
    """
    bucket = sum(ord(char) for char in session_id) % len(VARIANT_KEYS)
    return VARIANT_KEYS[bucket]


def get_variant(session_id: str) -> MessagingVariant:
    """
    Get the messaging copy assigned to a session.

    Args:
        session_id: Visitor session identifier

    Returns:
        MessagingVariant for the session
    """
    return MESSAGING_VARIANTS[assign_variant(session_id)]
