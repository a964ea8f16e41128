from __future__ import annotations

from typing import Any

import httpx
from aws_lambda_powertools import Logger, Tracer

from loterias_gateway.errors import InternalGatewayError, UpstreamStatusError

logger = Logger()
tracer = Tracer()

UPSTREAM_HEADERS = {
    "User-Agent": "Mozilla/5.0",
    "Accept": "application/json",
    # The upstream rejects requests that do not come from the public portal
    "Origin": "https://loterias.caixa.gov.br",
}


def build_target_url(base_url: str, lottery: str, contest: str | None = None) -> str:
    if contest:
        return f"{base_url}/{lottery}/{contest}"
    return f"{base_url}/{lottery}"


def new_client() -> httpx.AsyncClient:
    # No timeout of our own: the Lambda lifetime bounds a hung call
    return httpx.AsyncClient(timeout=None, follow_redirects=True)


@tracer.capture_method
async def fetch_record(client: httpx.AsyncClient, url: str) -> dict[str, Any]:
    """GET one contest from the upstream and return its decoded JSON object.

    Raises UpstreamStatusError on a non-2xx answer without reading the body,
    and InternalGatewayError on transport or decoding failures.
    """
    try:
        response = await client.get(url, headers=UPSTREAM_HEADERS)
    except httpx.HTTPError as exc:
        logger.exception("Upstream request failed", extra={"url": url})
        raise InternalGatewayError(str(exc)) from exc

    if not response.is_success:
        logger.warning("Upstream rejected request", extra={"url": url, "status": response.status_code})
        raise UpstreamStatusError(response.status_code)

    try:
        data = response.json()
    except ValueError as exc:
        logger.exception("Upstream returned invalid JSON", extra={"url": url})
        raise InternalGatewayError(str(exc)) from exc

    if not isinstance(data, dict):
        logger.error("Upstream payload is not an object", extra={"url": url})
        raise InternalGatewayError("Upstream payload is not a JSON object")
    return data
