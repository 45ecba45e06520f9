"""Quote tuning API router — attribute catalog, ranking, competitive targets, and scoring."""

import logging

from fastapi import APIRouter, Query, Request

from src.config import settings
from src.exceptions import NotFoundException
from src.modules.quote_tuning.catalog import (
    ATTRIBUTE_CATALOG,
    get_attribute,
    has_attribute,
    resolve_focus,
)
from src.modules.quote_tuning.constants import REGION_CARBON_FACTORS
from src.modules.quote_tuning.engine import (
    generate_competitive_targets,
    rank_attributes,
    score_quote,
)
from src.modules.quote_tuning.profiles import BuyerProfileService
from src.modules.quote_tuning.schemas import (
    AttractivenessResult,
    AttributeResponse,
    BuyerAnalysisResponse,
    BuyerProfileResponse,
    CompetitiveTargets,
    LineItemTargets,
    LineItemTargetsRequest,
    LineItemTargetsResponse,
    RankingResponse,
    RankRequest,
    RegionFactorResponse,
    ScoreRequest,
    TargetRequest,
)
from src.rate_limit import limiter

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/quote-tuning", tags=["Quote Tuning"])
_profiles = BuyerProfileService()


# ── 1. GET /quote-tuning/attributes ─────────────────────────────────────


@router.get("/attributes", response_model=list[AttributeResponse])
async def list_attributes() -> list[AttributeResponse]:
    """List the attribute catalog in declaration order."""
    return [AttributeResponse.model_validate(attr) for attr in ATTRIBUTE_CATALOG]


# ── 2. GET /quote-tuning/attributes/{key} ───────────────────────────────


@router.get("/attributes/{key}", response_model=AttributeResponse)
async def get_attribute_by_key(key: str) -> AttributeResponse:
    """Get a single catalog attribute by its exact key."""
    if not has_attribute(key):
        raise NotFoundException(f"Attribute '{key}' not found")
    return AttributeResponse.model_validate(get_attribute(key))


# ── 3. GET /quote-tuning/regions ────────────────────────────────────────


@router.get("/regions", response_model=list[RegionFactorResponse])
async def list_regions() -> list[RegionFactorResponse]:
    """List the regional carbon-reduction multipliers."""
    return [
        RegionFactorResponse(region=region, carbon_factor=factor)
        for region, factor in REGION_CARBON_FACTORS.items()
    ]


# ── 4. POST /quote-tuning/rank ──────────────────────────────────────────


@router.post("/rank", response_model=RankingResponse)
@limiter.limit(settings.rate_limit_default)
async def rank(request: Request, body: RankRequest) -> RankingResponse:
    """Rank the scoring attributes for a buyer focus."""
    return RankingResponse(
        buyer_focus=body.buyer_focus,
        focused_attribute=resolve_focus(body.buyer_focus),
        attributes=rank_attributes(body.buyer_focus),
    )


# ── 5. POST /quote-tuning/targets ───────────────────────────────────────


@router.post("/targets", response_model=CompetitiveTargets)
@limiter.limit(settings.rate_limit_default)
async def generate_targets(request: Request, body: TargetRequest) -> CompetitiveTargets:
    """Generate competitive targets from a baseline for a buyer focus and region."""
    return generate_competitive_targets(
        body.baseline,
        body.buyer_focus,
        body.region or settings.default_region,
    )


# ── 6. POST /quote-tuning/line-items/targets ────────────────────────────


@router.post("/line-items/targets", response_model=LineItemTargetsResponse)
@limiter.limit(settings.rate_limit_default)
async def generate_line_item_targets(
    request: Request, body: LineItemTargetsRequest
) -> LineItemTargetsResponse:
    """Generate targets for every quotation line, each using its own region."""
    items = [
        LineItemTargets(
            item_id=item.item_id,
            item_desc=item.item_desc,
            targets=generate_competitive_targets(item, body.buyer_focus, item.region),
        )
        for item in body.line_items
    ]
    return LineItemTargetsResponse(
        buyer_focus=body.buyer_focus, items=items, total=len(items)
    )


# ── 7. POST /quote-tuning/score ─────────────────────────────────────────


@router.post("/score", response_model=AttractivenessResult)
@limiter.limit(settings.rate_limit_default)
async def score(request: Request, body: ScoreRequest) -> AttractivenessResult:
    """Score a supplier quote against a buyer focus."""
    result = score_quote(body.quote, body.buyer_focus)
    logger.info(
        "Scored quote for focus %r: %.1f (%s)",
        body.buyer_focus,
        result.overall_score,
        result.suggestion_tier.value,
    )
    return result


# ── 8. GET /quote-tuning/buyers ─────────────────────────────────────────


@router.get("/buyers", response_model=list[BuyerProfileResponse])
async def list_buyers() -> list[BuyerProfileResponse]:
    """List the static buyer profiles."""
    return _profiles.list_profiles()


# ── 9. GET /quote-tuning/buyers/{name} ──────────────────────────────────


@router.get("/buyers/{name}", response_model=BuyerProfileResponse)
async def get_buyer(name: str) -> BuyerProfileResponse:
    """Get a buyer profile by exact name."""
    return _profiles.get_profile(name)


# ── 10. GET /quote-tuning/buyers/{name}/analysis ────────────────────────


@router.get("/buyers/{name}/analysis", response_model=BuyerAnalysisResponse)
async def analyze_buyer(
    name: str,
    region: str | None = Query(default=None, max_length=32),
) -> BuyerAnalysisResponse:
    """Rank, target and score a buyer's historical baseline."""
    return _profiles.analyze(name, region or settings.default_region)
