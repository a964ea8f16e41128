from __future__ import annotations

from typing import Any


class GatewayError(Exception):
    """Base class for every failure the gateway renders as a JSON envelope."""

    status_code = 500
    code = "internal_error"

    def __init__(self, message: str | None = None, status_code: int | None = None) -> None:
        if status_code is not None:
            self.status_code = status_code
        self.message = message
        super().__init__(message or self.code)

    def to_body(self) -> dict[str, Any]:
        body: dict[str, Any] = {"error": self.code}
        if self.message is not None:
            body["message"] = self.message
        return body


class UnauthorizedError(GatewayError):
    status_code = 401
    code = "unauthorized"

    def __init__(self) -> None:
        super().__init__("Token inválido ou não autorizado para este ambiente.")


class RouteNotFoundError(GatewayError):
    status_code = 404
    code = "not_found"

    def __init__(self) -> None:
        super().__init__("Use /v1 para acessar a API.")


class UpstreamStatusError(GatewayError):
    """Upstream answered with a non-success status; its body is discarded."""

    code = "upstream_error"

    def __init__(self, status_code: int) -> None:
        super().__init__(status_code=status_code)

    def to_body(self) -> dict[str, Any]:
        return {"error": self.code, "status": self.status_code}


class InternalGatewayError(GatewayError):
    status_code = 500
    code = "internal_error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
