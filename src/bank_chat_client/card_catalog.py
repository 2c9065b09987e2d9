"""Static credit card offers shown for ``cc_selecteddisplay`` actions."""
from __future__ import annotations

from typing import Collection

from .domain_types import CardOffer

__all__ = ["CARD_CATALOG", "select_cards"]

CARD_CATALOG: tuple[CardOffer, ...] = (
    CardOffer(
        id=0,
        value="Travel Rewards",
        card_name="Travel Rewards",
        description="$150 online cash rewards bonus offer",
    ),
    CardOffer(
        id=1,
        value="Saving",
        card_name="The Mega Saver",
        description="Save on interest to help pay down your balance faster",
    ),
    CardOffer(
        id=2,
        value="Credit Level",
        card_name="Mega Credit Card",
        description="For users with good credit.",
    ),
    CardOffer(
        id=3,
        value="Cash Rewards",
        card_name="The Ultimate Cash Back Card",
        description="Get the most cash back for your purchases",
    ),
    CardOffer(
        id=4,
        value="General Rewards",
        card_name="The Balanced Rewards Card",
        description="Just the right amount of all rewards",
    ),
)


def select_cards(criteria: Collection[str]) -> tuple[CardOffer, ...]:
    """
    Filter the catalog down to offers matching the given criteria.

    Args:
        criteria: Criterion strings declared by the backend (``CardCriteria``)

    Returns:
        Matching offers in catalog order, regardless of the order of ``criteria``.
    """
    wanted = set(criteria)
    return tuple(card for card in CARD_CATALOG if card.value in wanted)
