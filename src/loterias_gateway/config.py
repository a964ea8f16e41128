from __future__ import annotations

import os
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict

DEFAULT_UPSTREAM_URL = "https://servicebus2.caixa.gov.br/portaldeloterias/api"


class GatewayConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    upstream_base_url: str = DEFAULT_UPSTREAM_URL
    debug: bool = False
    # Raw JSON object string, token -> label; parsed per request by auth
    tokens: str = "{}"

    @classmethod
    def from_env(cls, environ: Mapping[str, str]) -> GatewayConfig:
        return cls(
            upstream_base_url=environ.get("CAIXA_API_URL", DEFAULT_UPSTREAM_URL).rstrip("/"),
            # Only the exact literal enables debug mode
            debug=environ.get("DEBUG_MODE") == "true",
            tokens=environ.get("TOKENS", "{}"),
        )


def get_config() -> GatewayConfig:
    return GatewayConfig.from_env(os.environ)
