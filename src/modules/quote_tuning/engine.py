"""Quote tuning engine — attribute ranking, competitive targets, and attractiveness scoring.

Every operation here is a pure function of its inputs: no I/O and no shared
mutable state, so callers may invoke them concurrently without coordination.
"""

from __future__ import annotations

import logging
import math
from decimal import ROUND_HALF_UP, Decimal

from src.models.enums import AttributeKey, Region, SuggestionTier
from src.modules.quote_tuning.catalog import (
    NUMERIC_ATTRIBUTES,
    get_attribute,
    resolve_focus,
)
from src.modules.quote_tuning.constants import (
    BASE_WEIGHT,
    DEFAULT_EMPHASIS,
    DELIVERY_TIME_FLOOR_DAYS,
    DELIVERY_TIME_TARGET_FACTOR,
    EXCELLENT_THRESHOLD,
    FOCUS_WEIGHT,
    GOOD_THRESHOLD,
    HIGH_RISK_INCOTERM_NARRATIVE,
    LOW_RISK_INCOTERM,
    LOW_RISK_INCOTERM_NARRATIVE,
    PAYMENT_TERMS_TARGET_EXTENSION_DAYS,
    PRICE_TARGET_FACTOR,
    QUALITY_CEILING,
    QUALITY_TARGET_UPLIFT,
    REGION_CARBON_FACTORS,
    SUGGESTION_TEMPLATES,
)
from src.modules.quote_tuning.schemas import (
    AttractivenessResult,
    AttributeScore,
    BaselineValues,
    CompetitiveTargets,
    RankedAttribute,
    SupplierQuote,
)

logger = logging.getLogger(__name__)


def _round_half_up(value: float, places: int) -> float:
    """Round on the decimal representation, halves away from zero.

    Non-finite values pass through untouched.
    """
    if not math.isfinite(value):
        return value
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def _pick(focused: bool, factors: tuple[float, float]) -> float:
    return factors[0] if focused else factors[1]


# ── Weighting ───────────────────────────────────────────────────────────────


def focus_weight(key: AttributeKey, focus: AttributeKey | None) -> float:
    """Weight of ``key`` for a resolved focus; shared by ranking and scoring."""
    return FOCUS_WEIGHT if focus is not None and key is focus else BASE_WEIGHT


def rank_attributes(buyer_focus: str) -> list[RankedAttribute]:
    """Order the numeric attributes by strategic weight for this buyer.

    The focused attribute (if any) comes first; ties keep catalog order.
    """
    focus = resolve_focus(buyer_focus)
    ranked = [
        RankedAttribute(
            key=attr.key,
            label=attr.label,
            unit=attr.unit,
            direction=attr.direction,
            weight=focus_weight(attr.key, focus),
            is_focused=attr.key is focus,
        )
        for attr in NUMERIC_ATTRIBUTES
    ]
    # sort() is stable, so equal weights stay in declaration order
    ranked.sort(key=lambda r: r.weight, reverse=True)
    return ranked


# ── Competitive targets ─────────────────────────────────────────────────────


def resolve_region(region: Region | str | None) -> Region:
    """Map a region code to a known region, falling back to GLOBAL."""
    if isinstance(region, Region):
        return region
    try:
        return Region(region)
    except ValueError:
        logger.debug("Unknown region %r, using GLOBAL carbon policy", region)
        return Region.GLOBAL


def carbon_factor_for(region: Region | str | None) -> float:
    return REGION_CARBON_FACTORS[resolve_region(region)]


def generate_competitive_targets(
    baseline: BaselineValues,
    buyer_focus: str,
    region: Region | str | None,
) -> CompetitiveTargets:
    """Recommend per-attribute targets from a baseline.

    Being the buyer's declared priority makes the recommended improvement
    more aggressive for that attribute.  Baseline values are not validated;
    zero or negative inputs propagate into the targets.
    """
    focus = resolve_focus(buyer_focus)
    resolved_region = resolve_region(region)
    carbon_factor = carbon_factor_for(resolved_region)

    price_focused = focus is AttributeKey.PRICE

    price = _round_half_up(
        baseline.price * _pick(price_focused, PRICE_TARGET_FACTOR), 2
    )
    quality = min(
        QUALITY_CEILING,
        baseline.quality + _pick(focus is AttributeKey.QUALITY, QUALITY_TARGET_UPLIFT),
    )
    delivery_time = max(
        DELIVERY_TIME_FLOOR_DAYS,
        _round_half_up(
            baseline.delivery_time
            * _pick(focus is AttributeKey.DELIVERY_TIME, DELIVERY_TIME_TARGET_FACTOR),
            0,
        ),
    )
    carbon_footprint = _round_half_up(baseline.carbon_footprint * carbon_factor, 1)
    # Longer terms are a concession the buyer grants the supplier
    payment_terms = baseline.payment_terms + _pick(
        price_focused, PAYMENT_TERMS_TARGET_EXTENSION_DAYS
    )

    return CompetitiveTargets(
        price=price,
        quality=quality,
        delivery_time=delivery_time,
        payment_terms=payment_terms,
        carbon_footprint=carbon_footprint,
        region=resolved_region,
        carbon_factor=carbon_factor,
    )


# ── Attractiveness scoring ──────────────────────────────────────────────────


def _anchor(key: AttributeKey) -> float:
    return get_attribute(key).anchor


def normalize_quote(quote: SupplierQuote) -> dict[AttributeKey, float]:
    """Score each numeric attribute against its catalog reference anchor.

    A value equal to its anchor scores 50.  Quality is already a percentage
    and is used as-is.  Results are left unclamped: extreme
    inputs can push a component below 0 or above 100.
    """
    return {
        AttributeKey.PRICE: 100 - (quote.price / _anchor(AttributeKey.PRICE)) * 50,
        AttributeKey.QUALITY: quote.quality,
        AttributeKey.DELIVERY_TIME: (
            100 - (quote.delivery_time / _anchor(AttributeKey.DELIVERY_TIME)) * 50
        ),
        AttributeKey.PAYMENT_TERMS: (
            (quote.payment_terms / _anchor(AttributeKey.PAYMENT_TERMS)) * 50
        ),
        AttributeKey.CARBON_FOOTPRINT: (
            100 - (quote.carbon_footprint / _anchor(AttributeKey.CARBON_FOOTPRINT)) * 50
        ),
    }


def classify_score(score: float) -> SuggestionTier:
    if score >= EXCELLENT_THRESHOLD:
        return SuggestionTier.EXCELLENT
    if score >= GOOD_THRESHOLD:
        return SuggestionTier.GOOD
    return SuggestionTier.POOR


def build_suggestion(
    overall_score: float,
    tier: SuggestionTier,
    buyer_focus: str,
    emphasis: AttributeKey,
) -> str:
    """Render the scorecard suggestion text for a tier."""
    advice = SUGGESTION_TEMPLATES[tier].format(
        buyer_focus=buyer_focus, emphasis=emphasis.value
    )
    return f"Current score is **{overall_score:.1f}/100**. {advice}"


def narrate_incoterms(incoterms: str) -> str:
    """Describe the supplier's risk exposure under the quoted incoterms."""
    if incoterms == LOW_RISK_INCOTERM:
        return LOW_RISK_INCOTERM_NARRATIVE
    return HIGH_RISK_INCOTERM_NARRATIVE


def score_quote(quote: SupplierQuote, buyer_focus: str) -> AttractivenessResult:
    """Compute the weighted attractiveness of a quote for a buyer.

    An unrecognized focus is not an error: every attribute weighs 1.0 and
    the score is the plain mean of the normalized scores.
    """
    focus = resolve_focus(buyer_focus)
    normalized = normalize_quote(quote)

    attribute_scores: list[AttributeScore] = []
    weighted_total = 0.0
    weight_total = 0.0
    emphasis = DEFAULT_EMPHASIS
    max_weight = -1.0

    for attr in NUMERIC_ATTRIBUTES:
        weight = focus_weight(attr.key, focus)
        weighted = normalized[attr.key] * weight
        weighted_total += weighted
        weight_total += weight

        # strict comparison: first attribute wins ties
        if weight > max_weight:
            max_weight = weight
            emphasis = attr.key

        attribute_scores.append(AttributeScore(
            key=attr.key,
            raw_value=quote.value_of(attr.key),
            normalized_score=normalized[attr.key],
            weight=weight,
            weighted_score=weighted,
        ))

    final_score = weighted_total / weight_total
    # Tier thresholds apply to the unrounded score
    tier = classify_score(final_score)
    overall_score = _round_half_up(final_score, 1)

    return AttractivenessResult(
        overall_score=overall_score,
        suggestion_tier=tier,
        suggestion=build_suggestion(overall_score, tier, buyer_focus, emphasis),
        emphasis_attribute=emphasis,
        emphasis_label=get_attribute(emphasis).label,
        incoterm_narrative=narrate_incoterms(quote.incoterms),
        attribute_scores=attribute_scores,
    )
