from __future__ import annotations

import json

from aws_lambda_powertools import Logger

from loterias_gateway.errors import UnauthorizedError

logger = Logger()

BEARER_PREFIX = "Bearer "


def parse_token_registry(raw: str | None) -> dict[str, str]:
    """Parse the TOKENS setting into a token -> label mapping.

    Anything that is not a JSON object yields an empty registry, so a broken
    setting rejects every caller.
    """
    try:
        registry = json.loads(raw or "{}")
    except ValueError as exc:
        logger.error("Failed to parse TOKENS, expected a JSON object", extra={"reason": str(exc)})
        return {}
    if not isinstance(registry, dict):
        logger.error("TOKENS is not a JSON object", extra={"payload_type": type(registry).__name__})
        return {}
    return registry


def extract_bearer_token(authorization: str | None) -> str | None:
    if not authorization or not authorization.startswith(BEARER_PREFIX):
        return None
    return authorization[len(BEARER_PREFIX):]


def is_authorized(authorization: str | None, raw_registry: str | None) -> bool:
    token = extract_bearer_token(authorization)
    if not token:
        return False
    return token in parse_token_registry(raw_registry)


def authorize(authorization: str | None, raw_registry: str | None, *, debug: bool) -> None:
    """Raise UnauthorizedError unless the bearer token is registered.

    Debug mode disables the check entirely.
    """
    if debug:
        return
    if not is_authorized(authorization, raw_registry):
        logger.info("Rejected request", extra={"has_authorization": authorization is not None})
        raise UnauthorizedError()
