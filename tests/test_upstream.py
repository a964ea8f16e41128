from __future__ import annotations

import httpx
import pytest
from respx import MockRouter

from loterias_gateway import upstream
from loterias_gateway.errors import InternalGatewayError, UpstreamStatusError

BASE_URL = "https://upstream.test/api"


def test_build_target_url_latest() -> None:
    assert upstream.build_target_url(BASE_URL, "megasena") == f"{BASE_URL}/megasena"


def test_build_target_url_with_contest() -> None:
    assert upstream.build_target_url(BASE_URL, "lotofacil", "3000") == f"{BASE_URL}/lotofacil/3000"


def test_build_target_url_passes_segments_verbatim() -> None:
    assert upstream.build_target_url(BASE_URL, "mega%20sena", "abc") == f"{BASE_URL}/mega%20sena/abc"


@pytest.mark.asyncio
async def test_fetch_record_sends_fixed_headers(respx_mock: MockRouter) -> None:
    route = respx_mock.get(f"{BASE_URL}/megasena").mock(
        return_value=httpx.Response(200, json={"tipoJogo": "MEGA_SENA", "numero": 2700})
    )
    async with upstream.new_client() as client:
        data = await upstream.fetch_record(client, f"{BASE_URL}/megasena")

    assert data == {"tipoJogo": "MEGA_SENA", "numero": 2700}
    request = route.calls.last.request
    assert request.headers["User-Agent"] == "Mozilla/5.0"
    assert request.headers["Accept"] == "application/json"
    assert request.headers["Origin"] == "https://loterias.caixa.gov.br"


@pytest.mark.asyncio
async def test_fetch_record_non_success_status(respx_mock: MockRouter) -> None:
    respx_mock.get(f"{BASE_URL}/megasena").mock(return_value=httpx.Response(503, text="<html>down</html>"))
    async with upstream.new_client() as client:
        with pytest.raises(UpstreamStatusError) as exc_info:
            await upstream.fetch_record(client, f"{BASE_URL}/megasena")

    assert exc_info.value.status_code == 503
    assert exc_info.value.to_body() == {"error": "upstream_error", "status": 503}


@pytest.mark.asyncio
async def test_fetch_record_network_failure(respx_mock: MockRouter) -> None:
    respx_mock.get(f"{BASE_URL}/megasena").mock(side_effect=httpx.ConnectError("connection refused"))
    async with upstream.new_client() as client:
        with pytest.raises(InternalGatewayError) as exc_info:
            await upstream.fetch_record(client, f"{BASE_URL}/megasena")

    assert exc_info.value.status_code == 500
    assert exc_info.value.to_body() == {"error": "internal_error", "message": "connection refused"}


@pytest.mark.asyncio
async def test_fetch_record_invalid_json(respx_mock: MockRouter) -> None:
    respx_mock.get(f"{BASE_URL}/megasena").mock(return_value=httpx.Response(200, text="not json"))
    async with upstream.new_client() as client:
        with pytest.raises(InternalGatewayError):
            await upstream.fetch_record(client, f"{BASE_URL}/megasena")


@pytest.mark.asyncio
async def test_fetch_record_rejects_non_object_payload(respx_mock: MockRouter) -> None:
    respx_mock.get(f"{BASE_URL}/megasena").mock(return_value=httpx.Response(200, json=[1, 2, 3]))
    async with upstream.new_client() as client:
        with pytest.raises(InternalGatewayError, match="not a JSON object"):
            await upstream.fetch_record(client, f"{BASE_URL}/megasena")
