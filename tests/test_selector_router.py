import pytest

from healthcare_chain.core.config import settings
from healthcare_chain.infrastructure.blockchain.selectors import selector_of

pytestmark = pytest.mark.anyio("asyncio")


@pytest.mark.anyio
async def test_match_endpoint_returns_first_matching_signature(async_client):
    """Matching endpoint reports the signature and its index."""
    target = selector_of("NotPatientOwner()").upper().replace("0X", "0x")

    response = await async_client.post(
        "/api/v1/selectors/match",
        json={
            "target": target,
            "signatures": ["UnauthorizedAccess()", "NotPatientOwner()"],
        },
    )
    assert response.status_code == 200

    body = response.json()
    assert body["success"] is True
    assert body["data"]["matched"] is True
    assert body["data"]["signature"] == "NotPatientOwner()"
    assert body["data"]["selector"] == target.lower()
    assert body["data"]["index"] == 1
    assert body["data"]["scanned"] == 2


@pytest.mark.anyio
async def test_match_endpoint_uses_configured_signatures(async_client, monkeypatch):
    """Omitting signatures falls back to ERROR_SIGNATURES."""
    monkeypatch.setattr(settings, "ERROR_SIGNATURES", ["Error(string)"], raising=False)

    response = await async_client.post(
        "/api/v1/selectors/match", json={"target": "0x08c379a0"}
    )
    assert response.status_code == 200
    assert response.json()["data"]["signature"] == "Error(string)"


@pytest.mark.anyio
async def test_match_endpoint_reports_no_match(async_client):
    response = await async_client.post(
        "/api/v1/selectors/match",
        json={"target": "0xdeadbeef", "signatures": ["NotPatientOwner()"]},
    )
    assert response.status_code == 200

    data = response.json()["data"]
    assert data["matched"] is False
    assert data["signature"] is None
    assert data["target"] == "0xdeadbeef"
    assert data["scanned"] == 1


@pytest.mark.anyio
async def test_match_endpoint_rejects_malformed_target(async_client):
    response = await async_client.post(
        "/api/v1/selectors/match",
        json={"target": "0x123", "signatures": ["NotPatientOwner()"]},
    )
    assert response.status_code == 422
    assert response.json()["detail"]["error_code"] == "INVALID_INPUT"


@pytest.mark.anyio
async def test_revert_endpoint_decodes_panic(async_client):
    data = "0x4e487b71" + "00" * 31 + "11"

    response = await async_client.post(
        "/api/v1/selectors/revert",
        json={"data": data, "signatures": ["Error(string)", "Panic(uint256)"]},
    )
    assert response.status_code == 200
    assert response.json()["data"]["signature"] == "Panic(uint256)"


@pytest.mark.anyio
async def test_selector_endpoint(async_client):
    response = await async_client.get(
        "/api/v1/selectors/selector", params={"signature": "transfer(address,uint256)"}
    )
    assert response.status_code == 200
    assert response.json()["selector"] == "0xa9059cbb"


@pytest.mark.anyio
async def test_health_reports_default_network(async_client):
    response = await async_client.get("/health")
    assert response.status_code == 200
    assert response.json()["default_network"] == settings.DEFAULT_NETWORK
