"""Pydantic v2 schemas for the quote tuning module."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from src.models.enums import AttributeDirection, AttributeKey, Region, SuggestionTier
from src.modules.quote_tuning.constants import DEFAULT_PAYMENT_TERMS_DAYS

# ── Shared value schemas ─────────────────────────────────────────────────────


class BaselineValues(BaseModel):
    """Numeric attribute values a target is derived from (historical or current)."""

    model_config = ConfigDict(populate_by_name=True)

    price: float
    quality: float
    delivery_time: float = Field(..., alias="deliveryTime")
    payment_terms: float = Field(default=DEFAULT_PAYMENT_TERMS_DAYS, alias="paymentTerms")
    carbon_footprint: float = Field(..., alias="carbonFootprint")

    def value_of(self, key: AttributeKey) -> float:
        """Return the numeric value for a catalog key."""
        return {
            AttributeKey.PRICE: self.price,
            AttributeKey.QUALITY: self.quality,
            AttributeKey.DELIVERY_TIME: self.delivery_time,
            AttributeKey.PAYMENT_TERMS: self.payment_terms,
            AttributeKey.CARBON_FOOTPRINT: self.carbon_footprint,
        }[key]


class SupplierQuote(BaselineValues):
    """A full supplier quote: the five numeric attributes plus incoterms."""

    incoterms: str = Field(..., max_length=16)


class QuoteLineItem(SupplierQuote):
    """One line of a quotation, each carrying its own delivery region."""

    item_id: str = Field(default="", alias="itemId", max_length=64)
    item_desc: str = Field(default="", alias="itemDesc", max_length=255)
    quantity: float = 1
    unit: str = "pcs"
    region: str = Region.GLOBAL.value


# ── Request schemas ──────────────────────────────────────────────────────────


class RankRequest(BaseModel):
    """Request to rank attributes for a buyer focus."""

    model_config = ConfigDict(populate_by_name=True)

    buyer_focus: str = Field(..., alias="buyerFocus", max_length=100)


class TargetRequest(BaseModel):
    """Request to generate competitive targets from a baseline."""

    model_config = ConfigDict(populate_by_name=True)

    baseline: BaselineValues
    buyer_focus: str = Field(..., alias="buyerFocus", max_length=100)
    region: str | None = Field(default=None, max_length=32)


class LineItemTargetsRequest(BaseModel):
    """Request to generate targets for every line of a quotation."""

    model_config = ConfigDict(populate_by_name=True)

    buyer_focus: str = Field(..., alias="buyerFocus", max_length=100)
    line_items: list[QuoteLineItem] = Field(..., alias="lineItems", min_length=1)


class ScoreRequest(BaseModel):
    """Request to score a supplier quote against a buyer focus."""

    model_config = ConfigDict(populate_by_name=True)

    quote: SupplierQuote
    buyer_focus: str = Field(..., alias="buyerFocus", max_length=100)


# ── Response schemas ─────────────────────────────────────────────────────────


class AttributeResponse(BaseModel):
    """A catalog attribute."""

    model_config = ConfigDict(from_attributes=True)

    key: AttributeKey
    label: str
    unit: str
    direction: AttributeDirection | None
    anchor: float | None = None


class RankedAttribute(BaseModel):
    """A numeric attribute annotated with its weight for a buyer focus."""

    model_config = ConfigDict(populate_by_name=True)

    key: AttributeKey
    label: str
    unit: str
    direction: AttributeDirection | None
    weight: float
    is_focused: bool = Field(..., alias="isFocused")


class RankingResponse(BaseModel):
    """Attribute ranking for a buyer focus."""

    model_config = ConfigDict(populate_by_name=True)

    buyer_focus: str = Field(..., alias="buyerFocus")
    focused_attribute: AttributeKey | None = Field(default=None, alias="focusedAttribute")
    attributes: list[RankedAttribute]


class CompetitiveTargets(BaseModel):
    """Recommended per-attribute values a supplier should aim for."""

    model_config = ConfigDict(populate_by_name=True)

    price: float
    quality: float
    delivery_time: float = Field(..., alias="deliveryTime")
    payment_terms: float = Field(..., alias="paymentTerms")
    carbon_footprint: float = Field(..., alias="carbonFootprint")
    region: Region
    carbon_factor: float = Field(..., alias="carbonFactor")


class LineItemTargets(BaseModel):
    """Targets generated for a single quotation line."""

    model_config = ConfigDict(populate_by_name=True)

    item_id: str = Field(..., alias="itemId")
    item_desc: str = Field(..., alias="itemDesc")
    targets: CompetitiveTargets


class LineItemTargetsResponse(BaseModel):
    """Targets for every line of a quotation."""

    model_config = ConfigDict(populate_by_name=True)

    buyer_focus: str = Field(..., alias="buyerFocus")
    items: list[LineItemTargets]
    total: int


class AttributeScore(BaseModel):
    """Normalized and weighted score of one attribute within a quote."""

    model_config = ConfigDict(populate_by_name=True)

    key: AttributeKey
    raw_value: float = Field(..., alias="rawValue")
    normalized_score: float = Field(..., alias="normalizedScore")
    weight: float
    weighted_score: float = Field(..., alias="weightedScore")


class AttractivenessResult(BaseModel):
    """Scorecard for a supplier quote."""

    model_config = ConfigDict(populate_by_name=True)

    overall_score: float = Field(..., alias="overallScore")
    suggestion_tier: SuggestionTier = Field(..., alias="suggestionTier")
    suggestion: str
    emphasis_attribute: AttributeKey = Field(..., alias="emphasisAttribute")
    emphasis_label: str = Field(..., alias="emphasisLabel")
    incoterm_narrative: str = Field(..., alias="incotermNarrative")
    attribute_scores: list[AttributeScore] = Field(default_factory=list, alias="attributeScores")


class RegionFactorResponse(BaseModel):
    """Carbon-reduction multiplier for a region."""

    model_config = ConfigDict(populate_by_name=True)

    region: Region
    carbon_factor: float = Field(..., alias="carbonFactor")


class MaterialRejection(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    material: str
    rejection_rate: float = Field(..., alias="rejectionRate")
    reason: str


class GrowthPoint(BaseModel):
    year: int
    growth: float


class BuyerPerformance(BaseModel):
    """Year-over-year growth (%), reported history and forecast."""

    historical: list[GrowthPoint] = Field(default_factory=list)
    forecast: list[GrowthPoint] = Field(default_factory=list)


class BuyerProfileResponse(BaseModel):
    """Static buyer profile: declared focus plus historical baseline."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    focus: str
    sentiment: str
    historical: SupplierQuote
    material_rejections: list[MaterialRejection] = Field(
        default_factory=list, alias="materialRejections"
    )
    performance: BuyerPerformance = Field(default_factory=BuyerPerformance)


class BuyerAnalysisResponse(BaseModel):
    """Ranking, targets and score of a buyer's historical baseline."""

    model_config = ConfigDict(populate_by_name=True)

    profile: BuyerProfileResponse
    ranking: RankingResponse
    targets: CompetitiveTargets
    attractiveness: AttractivenessResult
