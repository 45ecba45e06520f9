"""Quote tuning constants — weights, normalization anchors, target factors, and regional carbon policy."""

from __future__ import annotations

from types import MappingProxyType

from src.models.enums import AttributeKey, Region, SuggestionTier

# ── Focus weighting ─────────────────────────────────────────────────────────
FOCUS_WEIGHT = 2.5
BASE_WEIGHT = 1.0

# ── Normalization anchors (fixed reference denominators, not adaptive) ──────
PRICE_ANCHOR = 100.0
DELIVERY_TIME_ANCHOR_DAYS = 60.0
PAYMENT_TERMS_ANCHOR_DAYS = 90.0
CARBON_FOOTPRINT_ANCHOR = 20.0

# ── Competitive target factors: (focused, default) ──────────────────────────
PRICE_TARGET_FACTOR = (0.92, 0.95)
QUALITY_TARGET_UPLIFT = (5.0, 3.0)
DELIVERY_TIME_TARGET_FACTOR = (0.8, 0.9)
PAYMENT_TERMS_TARGET_EXTENSION_DAYS = (30.0, 15.0)

QUALITY_CEILING = 100.0
DELIVERY_TIME_FLOOR_DAYS = 1

# ── Regional carbon policy (share of baseline footprint allowed) ────────────
REGION_CARBON_FACTORS: MappingProxyType[Region, float] = MappingProxyType({
    Region.GLOBAL: 0.85,  # 15% reduction
    Region.US: 0.80,
    Region.EU: 0.70,
    Region.APAC: 0.90,
})

# ── Suggestion tiers (inclusive lower bounds) ───────────────────────────────
EXCELLENT_THRESHOLD = 85.0
GOOD_THRESHOLD = 70.0

# Emphasis used when no attribute outweighs the others
DEFAULT_EMPHASIS = AttributeKey.PRICE

SUGGESTION_TEMPLATES: MappingProxyType[SuggestionTier, str] = MappingProxyType({
    SuggestionTier.EXCELLENT: (
        "Excellent alignment! Emphasize the **low Carbon Footprint** and your "
        "**short Delivery Time** in the final bid."
    ),
    SuggestionTier.GOOD: (
        "Good potential. The buyer prioritizes **{buyer_focus}**, but your "
        "**{emphasis}** value could be more competitive to maximize the chance of winning."
    ),
    SuggestionTier.POOR: (
        "Poor alignment. Your quote needs major adjustments. Review the historical "
        "data and specifically improve your **{buyer_focus}** offering."
    ),
})

# ── Incoterm narratives ─────────────────────────────────────────────────────
LOW_RISK_INCOTERM = "FOB"
LOW_RISK_INCOTERM_NARRATIVE = "Free On Board (FOB) - Low Risk for Supplier"
HIGH_RISK_INCOTERM_NARRATIVE = "Delivered Duty Paid (DDP) - High Risk for Supplier"

# Applied upstream when a quote or baseline omits payment terms
DEFAULT_PAYMENT_TERMS_DAYS = 30.0

__all__ = [
    "BASE_WEIGHT",
    "CARBON_FOOTPRINT_ANCHOR",
    "DEFAULT_EMPHASIS",
    "DEFAULT_PAYMENT_TERMS_DAYS",
    "DELIVERY_TIME_ANCHOR_DAYS",
    "DELIVERY_TIME_FLOOR_DAYS",
    "DELIVERY_TIME_TARGET_FACTOR",
    "EXCELLENT_THRESHOLD",
    "FOCUS_WEIGHT",
    "GOOD_THRESHOLD",
    "HIGH_RISK_INCOTERM_NARRATIVE",
    "LOW_RISK_INCOTERM",
    "LOW_RISK_INCOTERM_NARRATIVE",
    "PAYMENT_TERMS_ANCHOR_DAYS",
    "PAYMENT_TERMS_TARGET_EXTENSION_DAYS",
    "PRICE_ANCHOR",
    "PRICE_TARGET_FACTOR",
    "QUALITY_CEILING",
    "QUALITY_TARGET_UPLIFT",
    "REGION_CARBON_FACTORS",
    "SUGGESTION_TEMPLATES",
]
