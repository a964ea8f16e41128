from __future__ import annotations

import math
from typing import Any

from loterias_gateway.config import GatewayConfig
from loterias_gateway.models import Discovery, EndpointHints, FullResult, LotteryRecord, SummaryResult

SERVICE_NAME = "API Loterias"
SERVICE_VERSION = "1.0.0"


def is_special(contest: Any) -> bool:
    """A contest is special when its last decimal digit is 0 or 5."""
    if contest is None or isinstance(contest, bool):
        return False
    try:
        number = float(contest.strip()) if isinstance(contest, str) else float(contest)
    except (TypeError, ValueError):
        return False
    if not math.isfinite(number):
        return False
    return abs(number) % 10 in (0, 5)


def to_summary(record: LotteryRecord) -> SummaryResult:
    return SummaryResult(
        loteria=record.tipo_jogo,
        concurso=record.numero,
        concursoAt=record.data_apuracao or None,
        dezenas=record.lista_dezenas or [],
        proximo=record.numero_concurso_proximo,
        proximoAt=record.data_proximo_concurso,
        especial=is_special(record.numero),
    )


def to_full(record: LotteryRecord) -> FullResult:
    return FullResult(
        loteria=record.tipo_jogo,
        concurso=record.numero,
        concursoAt=record.data_apuracao or None,
        dezenas=record.dezenas_ordem_sorteio or [],
        dezenasAsc=record.lista_dezenas or [],
        anterior=record.numero_concurso_anterior,
        proximo=record.numero_concurso_proximo,
        proximoAt=record.data_proximo_concurso,
        especial=is_special(record.numero),
        arrecadado=record.valor_arrecadado,
        acumuladoConcursoEspecial=record.acumulado_concurso_especial,
        acumuladoProximoConcurso=record.valor_acumulado_proximo_concurso,
        estimadoProximoConcurso=record.valor_estimado_proximo_concurso,
    )


def shape(payload: dict[str, Any], *, full_view: bool) -> SummaryResult | FullResult:
    record = LotteryRecord.model_validate(payload)
    return to_full(record) if full_view else to_summary(record)


def discovery(config: GatewayConfig) -> Discovery:
    return Discovery(
        name=SERVICE_NAME,
        version=SERVICE_VERSION,
        endpoints={
            "v1": EndpointHints(
                usage="/v1/:loteria ou /v1/full/:loteria",
                history="/v1/:loteria/:concurso",
                example="/v1/megasena ou /v1/full/lotofacil/3000",
            )
        },
        auth="Disabled (Debug Mode)" if config.debug else "Required (Bearer Token)",
    )
