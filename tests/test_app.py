"""Integration tests for the application shell — error envelope, request IDs, health."""

from __future__ import annotations

import pytest
from httpx import AsyncClient

from src.app import create_app
from src.config import settings

QUOTE = {
    "price": 80,
    "quality": 95,
    "deliveryTime": 20,
    "paymentTerms": 45,
    "carbonFootprint": 10,
    "incoterms": "FOB",
}


class TestHealth:
    @pytest.mark.asyncio
    async def test_health(self, async_client: AsyncClient) -> None:
        resp = await async_client.get("/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ok"}


class TestRequestId:
    @pytest.mark.asyncio
    async def test_generates_request_id(self, async_client: AsyncClient) -> None:
        resp = await async_client.get("/health")
        assert resp.headers["X-Request-ID"]

    @pytest.mark.asyncio
    async def test_propagates_request_id(self, async_client: AsyncClient) -> None:
        resp = await async_client.get("/health", headers={"X-Request-ID": "req-123"})
        assert resp.headers["X-Request-ID"] == "req-123"


class TestErrorEnvelope:
    @pytest.mark.asyncio
    async def test_not_found_envelope(self, async_client: AsyncClient) -> None:
        resp = await async_client.get(
            "/api/v1/quote-tuning/attributes/leadTime",
            headers={"X-Request-ID": "req-404"},
        )
        assert resp.status_code == 404
        error = resp.json()["error"]
        assert error["code"] == "NOT_FOUND"
        assert "leadTime" in error["message"]
        assert error["requestId"] == "req-404"

    @pytest.mark.asyncio
    async def test_unknown_buyer_envelope(self, async_client: AsyncClient) -> None:
        resp = await async_client.get("/api/v1/quote-tuning/buyers/Acme/analysis")
        assert resp.status_code == 404
        assert resp.json()["error"]["code"] == "NOT_FOUND"

    @pytest.mark.asyncio
    async def test_validation_envelope(self, async_client: AsyncClient) -> None:
        resp = await async_client.post(
            "/api/v1/quote-tuning/score",
            json={"quote": {**QUOTE, "price": "cheap"}, "buyerFocus": "price"},
        )
        assert resp.status_code == 422
        error = resp.json()["error"]
        assert error["code"] == "VALIDATION_ERROR"
        assert any(d["field"].endswith("price") for d in error["details"])


class TestQuoteTuningApi:
    @pytest.mark.asyncio
    async def test_score_through_app(self, async_client: AsyncClient) -> None:
        resp = await async_client.post(
            "/api/v1/quote-tuning/score", json={"quote": QUOTE, "buyerFocus": "Innovation"}
        )
        assert resp.status_code == 200
        data = resp.json()
        assert data["overallScore"] == 67.7
        assert data["suggestionTier"] == "Poor"
        assert data["emphasisAttribute"] == "price"

    @pytest.mark.asyncio
    async def test_buyer_analysis_through_app(self, async_client: AsyncClient) -> None:
        resp = await async_client.get("/api/v1/quote-tuning/buyers/Generic Corp/analysis")
        assert resp.status_code == 200
        data = resp.json()
        assert data["profile"]["name"] == "Generic Corp"
        assert data["targets"]["region"] == "GLOBAL"
        assert data["ranking"]["attributes"][0]["key"] == "price"


class TestRateLimiting:
    @pytest.mark.asyncio
    async def test_health_is_not_rate_limited(self, async_client: AsyncClient) -> None:
        statuses = [(await async_client.get("/health")).status_code for _ in range(70)]
        assert set(statuses) == {200}

    @pytest.mark.asyncio
    async def test_catalog_reads_are_not_rate_limited(self, async_client: AsyncClient) -> None:
        statuses = [
            (await async_client.get("/api/v1/quote-tuning/attributes")).status_code
            for _ in range(70)
        ]
        assert set(statuses) == {200}

    @pytest.mark.skipif(not settings.rate_limit_enabled, reason="rate limiting disabled")
    @pytest.mark.asyncio
    async def test_score_over_limit_returns_rate_limited_envelope(
        self, async_client: AsyncClient
    ) -> None:
        payload = {"quote": QUOTE, "buyerFocus": "Quality"}
        accepted = 0
        resp = await async_client.post("/api/v1/quote-tuning/score", json=payload)
        while resp.status_code == 200 and accepted < 1000:
            accepted += 1
            resp = await async_client.post(
                "/api/v1/quote-tuning/score",
                json=payload,
                headers={"X-Request-ID": "req-429"},
            )

        assert accepted == int(settings.rate_limit_default.split("/")[0])
        assert resp.status_code == 429
        error = resp.json()["error"]
        assert error["code"] == "RATE_LIMITED"
        assert error["requestId"] == "req-429"
        assert resp.headers["X-Request-ID"] == "req-429"


class TestCreateApp:
    def test_registers_v1_routes(self) -> None:
        paths = create_app().openapi()["paths"]
        assert "/api/v1/quote-tuning/score" in paths
        assert "/api/v1/quote-tuning/buyers/{name}/analysis" in paths
        assert "/health" in paths

    def test_documents_rate_limited_response(self) -> None:
        score = create_app().openapi()["paths"]["/api/v1/quote-tuning/score"]["post"]
        assert "429" in score["responses"]
