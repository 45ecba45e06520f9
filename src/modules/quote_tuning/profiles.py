"""BuyerProfileService — static buyer profiles used as the upstream source of focus and baselines."""

from __future__ import annotations

import logging

from src.exceptions import NotFoundException
from src.modules.quote_tuning.catalog import resolve_focus
from src.modules.quote_tuning.engine import (
    generate_competitive_targets,
    rank_attributes,
    score_quote,
)
from src.modules.quote_tuning.schemas import (
    BuyerAnalysisResponse,
    BuyerPerformance,
    BuyerProfileResponse,
    GrowthPoint,
    MaterialRejection,
    RankingResponse,
    SupplierQuote,
)

logger = logging.getLogger(__name__)

HISTORY_START_YEAR = 2016
FORECAST_START_YEAR = 2026


def _performance(historical: list[float], forecast: list[float]) -> BuyerPerformance:
    return BuyerPerformance(
        historical=[
            GrowthPoint(year=HISTORY_START_YEAR + i, growth=g) for i, g in enumerate(historical)
        ],
        forecast=[
            GrowthPoint(year=FORECAST_START_YEAR + i, growth=g) for i, g in enumerate(forecast)
        ],
    )


def _rejection(material: str, rate: float, reason: str) -> MaterialRejection:
    return MaterialRejection(material=material, rejection_rate=rate, reason=reason)


# Sample profiles.  "Innovation" is intentionally not a scoring attribute and
# exercises the uniform-weight path.
BUYER_PROFILES: tuple[BuyerProfileResponse, ...] = (
    BuyerProfileResponse(
        name="Toyota",
        focus="Quality",
        sentiment="Stable, high demand for reliable parts.",
        historical=SupplierQuote(
            price=80, quality=95, delivery_time=20, payment_terms=45,
            carbon_footprint=10, incoterms="FOB",
        ),
        material_rejections=[
            _rejection("Steel Alloy X", 8, "Dimensional Tolerance"),
            _rejection("Composite Y", 3, "Surface Finish"),
            _rejection("Rubber Seal Z", 1, "High Acceptance"),
        ],
        performance=_performance(
            [4.5, 6.2, 5.8, 3.1, -1.5, 8.5, 7.0, 5.3, 4.8, 3.5],
            [4.2, 5.0, 6.5, 5.8, 5.1],
        ),
    ),
    BuyerProfileResponse(
        name="Tesla",
        focus="Innovation",
        sentiment="Aggressive, prioritizes speed to market and new tech.",
        historical=SupplierQuote(
            price=90, quality=85, delivery_time=10, payment_terms=30,
            carbon_footprint=5, incoterms="DDP",
        ),
        material_rejections=[
            _rejection("Composite Y", 15, "Delamination/High Heat Stress"),
            _rejection("Aluminum Frame A", 5, "Weld Quality"),
            _rejection("Polymer Housing B", 0, "New Material/No Data"),
        ],
        performance=_performance(
            [15.0, 22.0, 35.0, 40.0, 45.0, 70.0, 55.0, 38.0, 25.0, 18.0],
            [15.0, 16.5, 17.0, 18.5, 20.0],
        ),
    ),
    BuyerProfileResponse(
        name="Generic Corp",
        focus="Price",
        sentiment="Cost-sensitive, looks for long-term contract discounts.",
        historical=SupplierQuote(
            price=95, quality=70, delivery_time=30, payment_terms=30,
            carbon_footprint=20, incoterms="EXW",
        ),
        material_rejections=[
            _rejection("Steel Alloy X", 12, "Cost-driven Material Failure"),
            _rejection("Composite Y", 10, "General Defects"),
            _rejection("Copper Wire", 4, "Minor Insulation Issues"),
        ],
        performance=_performance(
            [1.0, 0.5, 1.2, 0.8, -2.0, 1.5, 2.1, 1.9, 1.5, 0.9],
            [1.1, 1.3, 1.5, 1.7, 2.0],
        ),
    ),
)


class BuyerProfileService:
    """Read-only lookups over the static buyer profiles."""

    def __init__(self, profiles: tuple[BuyerProfileResponse, ...] = BUYER_PROFILES) -> None:
        self._profiles = profiles

    def list_profiles(self) -> list[BuyerProfileResponse]:
        return list(self._profiles)

    def get_profile(self, name: str) -> BuyerProfileResponse:
        for profile in self._profiles:
            if profile.name == name:
                return profile
        raise NotFoundException(f"Buyer profile '{name}' not found")

    def analyze(self, name: str, region: str | None) -> BuyerAnalysisResponse:
        """Rank, target and score a buyer's historical baseline in one pass.

        The historical quote doubles as the initial supplier quote, which is
        how a new quotation is seeded before the supplier edits it.
        """
        profile = self.get_profile(name)
        ranking = RankingResponse(
            buyer_focus=profile.focus,
            focused_attribute=resolve_focus(profile.focus),
            attributes=rank_attributes(profile.focus),
        )
        targets = generate_competitive_targets(profile.historical, profile.focus, region)
        attractiveness = score_quote(profile.historical, profile.focus)
        logger.info(
            "Analyzed buyer %s (focus=%s): score %.1f",
            profile.name,
            profile.focus,
            attractiveness.overall_score,
        )
        return BuyerAnalysisResponse(
            profile=profile,
            ranking=ranking,
            targets=targets,
            attractiveness=attractiveness,
        )
