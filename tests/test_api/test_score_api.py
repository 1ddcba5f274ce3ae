"""Tests for the score and health HTTP endpoints."""

from collections.abc import Iterator
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from src.api.app import create_app, limiter
from src.api.dependencies import get_price_source, get_pumpfun
from src.parsers.pumpfun.models import PumpfunCoin
from src.scoring.exceptions import NotFoundError, UpstreamError

MINT = "7xKXtg2CW87d97TXJSDpbD5jBkheTqA83TZRuJosgAsU"


@pytest.fixture
def pumpfun() -> MagicMock:
    mock = MagicMock()
    mock.get_coin = AsyncMock()
    return mock


@pytest.fixture
def price_source() -> MagicMock:
    mock = MagicMock()
    mock.get_price = AsyncMock(return_value=200.0)
    mock.cached_price = 200.0
    return mock


@pytest.fixture
def client(pumpfun: MagicMock, price_source: MagicMock) -> Iterator[TestClient]:
    limiter.enabled = False
    app = create_app()
    app.dependency_overrides[get_pumpfun] = lambda: pumpfun
    app.dependency_overrides[get_price_source] = lambda: price_source
    with TestClient(app) as test_client:
        yield test_client
    limiter.enabled = True


class TestScoreEndpoint:
    def test_success(self, client: TestClient, pumpfun: MagicMock, coin: PumpfunCoin) -> None:
        pumpfun.get_coin.return_value = coin

        resp = client.get("/api/score", params={"mint": MINT})

        assert resp.status_code == 200
        data = resp.json()
        assert data["mintAddress"] == MINT
        assert data["symbol"] == "TEST"
        assert data["score"] == 100
        assert data["grade"] == "A"
        assert data["metrics"]["liquidity"] == 8_000
        assert data["metrics"]["holders"] == 20
        assert set(data) == {
            "symbol", "name", "imageUrl", "mintAddress",
            "score", "grade", "metrics", "risks", "positives",
        }
        assert resp.headers["Cache-Control"] == "no-store"
        assert resp.headers["X-Content-Type-Options"] == "nosniff"

    def test_missing_mint(self, client: TestClient, pumpfun: MagicMock) -> None:
        resp = client.get("/api/score")
        assert resp.status_code == 400
        assert resp.json() == {"error": "Missing mint address"}
        pumpfun.get_coin.assert_not_awaited()

    def test_invalid_mint(self, client: TestClient) -> None:
        resp = client.get("/api/score", params={"mint": "tooshort"})
        assert resp.status_code == 400
        assert resp.json() == {"error": "Invalid mint address format"}

    def test_not_found(self, client: TestClient, pumpfun: MagicMock) -> None:
        pumpfun.get_coin.side_effect = NotFoundError()
        resp = client.get("/api/score", params={"mint": MINT})
        assert resp.status_code == 404
        assert resp.json() == {
            "error": "Token not found on Pump.fun. Only Pump.fun tokens are supported."
        }

    def test_unsupported(self, client: TestClient, pumpfun: MagicMock, coin_payload: dict) -> None:
        pumpfun.get_coin.return_value = PumpfunCoin.model_validate(
            {**coin_payload, "bonding_curve": None, "raydium_pool": None}
        )
        resp = client.get("/api/score", params={"mint": MINT})
        assert resp.status_code == 400
        assert resp.json() == {
            "error": "This token is not from Pump.fun. Only Pump.fun tokens are supported."
        }

    def test_control_character_mint(self, client: TestClient, pumpfun: MagicMock) -> None:
        resp = client.get("/api/score", params={"mint": "A" * 20 + "\x01" + "B" * 20})
        assert resp.status_code == 400
        assert resp.headers["content-type"].startswith("application/json")
        assert resp.json() == {"error": "Invalid mint address format"}
        pumpfun.get_coin.assert_not_awaited()

    def test_invalid_url_from_provider(self, client: TestClient, pumpfun: MagicMock) -> None:
        """Provider URL failures surface as structured 500s."""
        pumpfun.get_coin.side_effect = UpstreamError("Invalid non-printable ASCII character in URL")
        resp = client.get("/api/score", params={"mint": MINT})
        assert resp.status_code == 500
        assert resp.json() == {"error": "Invalid non-printable ASCII character in URL"}

    def test_upstream_error(self, client: TestClient, pumpfun: MagicMock) -> None:
        pumpfun.get_coin.side_effect = UpstreamError("Pump.fun API error: 502")
        resp = client.get("/api/score", params={"mint": MINT})
        assert resp.status_code == 500
        assert resp.json() == {"error": "Pump.fun API error: 502"}


def test_health(client: TestClient) -> None:
    resp = client.get("/api/v1/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok", "version": "0.1.0", "sol_price_usd": 200.0}
