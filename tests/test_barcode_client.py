"""BarcodeAnalysisClient tests against a mocked transport."""
import asyncio
import json

import httpx
import pytest

from owlverload_client.analysis.barcode import BarcodeAnalysisClient
from owlverload_client.analysis.client import AnalysisClient
from owlverload_client.constants import MSG_BARCODE_FAILED
from owlverload_client.errors import AnalysisError, ServerError, TransportError, ValidationError

BASE_URL = "https://api.test"

COLA = {"success": True, "payload": {"analysis": {"name": {"english": "Cola"}}}}


def test_barcode_client_implements_abc():
    assert issubclass(BarcodeAnalysisClient, AnalysisClient)


# ── success ───────────────────────────────────────────────────────────────────


async def test_returns_body_unchanged(recorder):
    handler, transport = recorder(200, COLA)
    client = BarcodeAnalysisClient(BASE_URL, transport=transport)

    result = await client.analyze("0123456789012", "abc")

    assert result == COLA


async def test_sends_post_with_json_body_and_bearer(recorder):
    handler, transport = recorder(200, COLA)
    client = BarcodeAnalysisClient(BASE_URL, transport=transport)

    await client.analyze("0123456789012", "abc")

    request = handler.requests[0]
    assert request.method == "POST"
    assert request.url == "https://api.test/api/v1/analyzeBarcode"
    assert request.headers["Authorization"] == "Bearer abc"
    assert request.headers["Content-Type"] == "application/json"
    assert handler.last_json == {"barcode": "0123456789012"}


async def test_trailing_slash_in_base_url_is_ignored(recorder):
    handler, transport = recorder(200, COLA)
    client = BarcodeAnalysisClient(BASE_URL + "/", transport=transport)

    await client.analyze("42", "abc")

    assert handler.requests[0].url.path == "/api/v1/analyzeBarcode"


async def test_full_success_envelope_is_returned_verbatim(recorder):
    body = {
        "success": True,
        "message": "Barcode analysis completed",
        "payload": {
            "analysis": {
                "name": {"english": "Cola", "korean": "콜라", "japanese": "コーラ", "chinese": "可乐"},
                "expiry_date": "2026-01-01",
                "ingredients_translated": "water, sugar",
                "contains_alcohol": False,
                "halal_status": "halal",
                "reasoning": "no animal products",
            },
            "isNewItem": True,
        },
        "userExists": True,
    }
    _, transport = recorder(200, body)
    client = BarcodeAnalysisClient(BASE_URL, transport=transport)

    assert await client.analyze("8801234567890", "abc") == body


# ── server errors ─────────────────────────────────────────────────────────────


async def test_non_2xx_carries_server_message(recorder):
    _, transport = recorder(401, {"message": "User authentication required"})
    client = BarcodeAnalysisClient(BASE_URL, transport=transport)

    with pytest.raises(ServerError) as exc_info:
        await client.analyze("42", "expired")

    assert exc_info.value.message == "User authentication required"
    assert exc_info.value.status_code == 401


async def test_non_2xx_without_message_uses_default(recorder):
    _, transport = recorder(500, {"success": False})
    client = BarcodeAnalysisClient(BASE_URL, transport=transport)

    with pytest.raises(ServerError, match=MSG_BARCODE_FAILED):
        await client.analyze("42", "abc")


async def test_non_2xx_with_empty_message_uses_default(recorder):
    _, transport = recorder(400, {"message": ""})
    client = BarcodeAnalysisClient(BASE_URL, transport=transport)

    with pytest.raises(ServerError) as exc_info:
        await client.analyze("42", "abc")

    assert str(exc_info.value) == MSG_BARCODE_FAILED


async def test_non_2xx_with_non_object_body_uses_default(recorder):
    _, transport = recorder(502, ["unexpected"])
    client = BarcodeAnalysisClient(BASE_URL, transport=transport)

    with pytest.raises(ServerError, match=MSG_BARCODE_FAILED):
        await client.analyze("42", "abc")


# ── transport errors ──────────────────────────────────────────────────────────


async def test_network_failure_raises_transport_error(recorder):
    _, transport = recorder(exc=httpx.ConnectError("connection refused"))
    client = BarcodeAnalysisClient(BASE_URL, transport=transport)

    with pytest.raises(TransportError, match="connection refused") as exc_info:
        await client.analyze("42", "abc")

    assert isinstance(exc_info.value.__cause__, httpx.ConnectError)


async def test_malformed_json_raises_transport_error(recorder):
    _, transport = recorder(200, raw=b"<html>oops</html>")
    client = BarcodeAnalysisClient(BASE_URL, transport=transport)

    with pytest.raises(TransportError):
        await client.analyze("42", "abc")


async def test_non_json_error_page_is_a_transport_error(recorder):
    _, transport = recorder(503, raw=b"Service Unavailable")
    client = BarcodeAnalysisClient(BASE_URL, transport=transport)

    with pytest.raises(TransportError):
        await client.analyze("42", "abc")


async def test_all_failures_share_one_base(recorder):
    _, transport = recorder(500, {"message": "boom"})
    client = BarcodeAnalysisClient(BASE_URL, transport=transport)

    with pytest.raises(AnalysisError, match="boom"):
        await client.analyze("42", "abc")


# ── validation ────────────────────────────────────────────────────────────────


@pytest.mark.parametrize("barcode", ["", "   "])
async def test_empty_barcode_fails_before_request(recorder, barcode):
    handler, transport = recorder(200, COLA)
    client = BarcodeAnalysisClient(BASE_URL, transport=transport)

    with pytest.raises(ValidationError):
        await client.analyze(barcode, "abc")

    assert handler.requests == []


async def test_empty_token_fails_before_request(recorder):
    handler, transport = recorder(200, COLA)
    client = BarcodeAnalysisClient(BASE_URL, transport=transport)

    with pytest.raises(ValidationError):
        await client.analyze("42", "")

    assert handler.requests == []


# ── concurrency ───────────────────────────────────────────────────────────────


async def test_concurrent_calls_keep_their_own_body_and_token(recorder):
    handler, transport = recorder(200, COLA)
    client = BarcodeAnalysisClient(BASE_URL, transport=transport)

    results = await asyncio.gather(
        client.analyze("1111111111111", "token-a"),
        client.analyze("2222222222222", "token-b"),
    )

    assert results == [COLA, COLA]
    sent = {
        json.loads(request.content)["barcode"]: request.headers["Authorization"]
        for request in handler.requests
    }
    assert sent == {"1111111111111": "Bearer token-a", "2222222222222": "Bearer token-b"}
