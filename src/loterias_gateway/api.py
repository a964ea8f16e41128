from __future__ import annotations

from typing import Annotated

from aws_lambda_powertools import Logger
from aws_lambda_powertools.metrics import Metrics, MetricUnit
from fastapi import Depends, FastAPI, Header, Request
from fastapi.responses import JSONResponse

from loterias_gateway import auth, shaper, upstream
from loterias_gateway.config import GatewayConfig, get_config
from loterias_gateway.errors import (
    GatewayError,
    InternalGatewayError,
    RouteNotFoundError,
    UnauthorizedError,
    UpstreamStatusError,
)
from loterias_gateway.routing import RouteKind, parse_route

logger = Logger()
metrics = Metrics(namespace="LotteryGateway")

app = FastAPI(title="API Loterias", version=shaper.SERVICE_VERSION)

# Every method goes through the same pipeline
ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]

RESULT_HEADERS = {
    "Content-Type": "application/json;charset=UTF-8",
    "Access-Control-Allow-Origin": "*",
}

_ERROR_METRICS = {
    UnauthorizedError: "UnauthorizedRequest",
    UpstreamStatusError: "UpstreamError",
    InternalGatewayError: "InternalError",
}


def raw_request_path(request: Request) -> str:
    """Return the request path with percent-escapes left intact."""
    raw_path = request.scope.get("raw_path")
    if not raw_path:
        return request.url.path
    return raw_path.split(b"?", 1)[0].decode("latin-1")


@app.exception_handler(GatewayError)
async def handle_gateway_error(request: Request, exc: GatewayError) -> JSONResponse:
    metric = _ERROR_METRICS.get(type(exc))
    if metric:
        metrics.add_metric(name=metric, value=1, unit=MetricUnit.Count)
    return JSONResponse(status_code=exc.status_code, content=exc.to_body())


@app.api_route("/{path:path}", methods=ALL_METHODS)
async def gateway(
    request: Request,
    config: Annotated[GatewayConfig, Depends(get_config)],
    authorization: Annotated[str | None, Header()] = None,
) -> JSONResponse:
    route = parse_route(raw_request_path(request))
    if route.kind is RouteKind.DISCOVERY:
        return JSONResponse(shaper.discovery(config).model_dump())
    if route.kind is RouteKind.NOT_FOUND:
        raise RouteNotFoundError()

    auth.authorize(authorization, config.tokens, debug=config.debug)

    target = upstream.build_target_url(config.upstream_base_url, route.lottery, route.contest)
    logger.info("Fetching lottery record", extra={"url": target, "full_view": route.full_view})
    metrics.add_metric(name="LotteryLookup", value=1, unit=MetricUnit.Count)
    async with upstream.new_client() as client:
        payload = await upstream.fetch_record(client, target)

    result = shaper.shape(payload, full_view=route.full_view)
    return JSONResponse(result.model_dump(mode="json"), headers=RESULT_HEADERS)
