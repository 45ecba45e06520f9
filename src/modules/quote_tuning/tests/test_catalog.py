"""Tests for the attribute catalog and buyer focus resolution."""

from __future__ import annotations

import dataclasses

import pytest

from src.models.enums import AttributeDirection, AttributeKey
from src.modules.quote_tuning.catalog import (
    ATTRIBUTE_CATALOG,
    NUMERIC_ATTRIBUTES,
    UnknownAttributeError,
    get_attribute,
    has_attribute,
    resolve_focus,
)


class TestAttributeCatalog:
    def test_declaration_order(self) -> None:
        assert [a.key for a in ATTRIBUTE_CATALOG] == [
            AttributeKey.PRICE,
            AttributeKey.QUALITY,
            AttributeKey.DELIVERY_TIME,
            AttributeKey.PAYMENT_TERMS,
            AttributeKey.CARBON_FOOTPRINT,
            AttributeKey.INCOTERMS,
        ]

    def test_incoterms_excluded_from_numeric(self) -> None:
        assert len(NUMERIC_ATTRIBUTES) == 5
        assert AttributeKey.INCOTERMS not in {a.key for a in NUMERIC_ATTRIBUTES}

    def test_entries_are_immutable(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            ATTRIBUTE_CATALOG[0].label = "Cost"  # type: ignore[misc]


class TestGetAttribute:
    def test_lookup_by_string(self) -> None:
        attr = get_attribute("deliveryTime")
        assert attr.label == "Delivery Time (Days)"
        assert attr.unit == "days"
        assert attr.direction is AttributeDirection.MINIMIZE

    def test_lookup_by_enum(self) -> None:
        attr = get_attribute(AttributeKey.CARBON_FOOTPRINT)
        assert attr.unit == "tCO2e"
        assert attr.anchor == 20.0

    def test_incoterms_has_no_direction(self) -> None:
        assert get_attribute("incoterms").direction is None

    @pytest.mark.parametrize("key", ["priec", "Price", "delivery_time", ""])
    def test_unknown_key_fails_fast(self, key: str) -> None:
        with pytest.raises(UnknownAttributeError):
            get_attribute(key)

    def test_unknown_key_error_is_key_error(self) -> None:
        with pytest.raises(KeyError):
            get_attribute("lead_time")

    def test_has_attribute(self) -> None:
        assert has_attribute("paymentTerms")
        assert not has_attribute("paymentterms")


class TestResolveFocus:
    @pytest.mark.parametrize(
        "focus,expected",
        [
            ("price", AttributeKey.PRICE),
            ("PRICE", AttributeKey.PRICE),
            ("Quality", AttributeKey.QUALITY),
            ("deliverytime", AttributeKey.DELIVERY_TIME),
            ("PaymentTerms", AttributeKey.PAYMENT_TERMS),
            ("carbonfootprint", AttributeKey.CARBON_FOOTPRINT),
        ],
    )
    def test_case_insensitive_match(self, focus: str, expected: AttributeKey) -> None:
        assert resolve_focus(focus) is expected

    @pytest.mark.parametrize("focus", ["Innovation", "Generic", "incoterms", "", None, "Delivery Time"])
    def test_unmatched(self, focus: str | None) -> None:
        assert resolve_focus(focus) is None
