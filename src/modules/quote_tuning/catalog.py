"""Attribute catalog — the fixed registry of quote attributes and focus resolution."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType

from src.models.enums import AttributeDirection, AttributeKey
from src.modules.quote_tuning.constants import (
    CARBON_FOOTPRINT_ANCHOR,
    DELIVERY_TIME_ANCHOR_DAYS,
    PAYMENT_TERMS_ANCHOR_DAYS,
    PRICE_ANCHOR,
)

logger = logging.getLogger(__name__)


class UnknownAttributeError(KeyError):
    """Raised when code asks the catalog for a key it does not define."""


@dataclass(frozen=True)
class Attribute:
    """A single scoring attribute as declared in the catalog."""

    key: AttributeKey
    label: str
    unit: str
    direction: AttributeDirection | None
    anchor: float | None = None

    @property
    def is_numeric(self) -> bool:
        return self.key is not AttributeKey.INCOTERMS


# Declaration order is load-bearing: it breaks ranking ties and picks the
# default emphasis attribute.
ATTRIBUTE_CATALOG: tuple[Attribute, ...] = (
    Attribute(
        key=AttributeKey.PRICE,
        label="Price Competitiveness",
        unit="$",
        direction=AttributeDirection.MINIMIZE,
        anchor=PRICE_ANCHOR,
    ),
    Attribute(
        key=AttributeKey.QUALITY,
        label="Quality Certifications",
        unit="%",
        direction=AttributeDirection.MAXIMIZE,
    ),
    Attribute(
        key=AttributeKey.DELIVERY_TIME,
        label="Delivery Time (Days)",
        unit="days",
        direction=AttributeDirection.MINIMIZE,
        anchor=DELIVERY_TIME_ANCHOR_DAYS,
    ),
    Attribute(
        key=AttributeKey.PAYMENT_TERMS,
        label="Payment Terms (Days)",
        unit="days",
        direction=AttributeDirection.MAXIMIZE,
        anchor=PAYMENT_TERMS_ANCHOR_DAYS,
    ),
    Attribute(
        key=AttributeKey.CARBON_FOOTPRINT,
        label="Carbon Footprint",
        unit="tCO2e",
        direction=AttributeDirection.MINIMIZE,
        anchor=CARBON_FOOTPRINT_ANCHOR,
    ),
    Attribute(
        key=AttributeKey.INCOTERMS,
        label="Incoterms",
        unit="",
        direction=None,
    ),
)

NUMERIC_ATTRIBUTES: tuple[Attribute, ...] = tuple(
    attr for attr in ATTRIBUTE_CATALOG if attr.is_numeric
)

_BY_KEY: MappingProxyType[str, Attribute] = MappingProxyType(
    {attr.key.value: attr for attr in ATTRIBUTE_CATALOG}
)

# Case-folded key -> numeric attribute key, for matching free-text buyer focus
_FOCUS_INDEX: MappingProxyType[str, AttributeKey] = MappingProxyType(
    {attr.key.value.casefold(): attr.key for attr in NUMERIC_ATTRIBUTES}
)


def get_attribute(key: AttributeKey | str) -> Attribute:
    """Return the catalog entry for ``key``.

    Raises ``UnknownAttributeError`` for anything outside the fixed catalog;
    a typo'd key is an integration bug, not a runtime condition to recover from.
    """
    lookup = key.value if isinstance(key, AttributeKey) else key
    try:
        return _BY_KEY[lookup]
    except KeyError:
        raise UnknownAttributeError(lookup) from None


def has_attribute(key: str) -> bool:
    return key in _BY_KEY


def resolve_focus(buyer_focus: str | None) -> AttributeKey | None:
    """Normalize a free-text buyer focus to a numeric attribute key.

    Matching is case-insensitive against the catalog keys.  ``None`` is the
    explicit "unmatched" result (e.g. "Innovation", "Generic", "incoterms")
    and callers fall back to uniform weighting.
    """
    if not buyer_focus:
        return None
    key = _FOCUS_INDEX.get(buyer_focus.casefold())
    if key is None:
        logger.debug("Buyer focus %r matches no scoring attribute", buyer_focus)
    return key
