from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class LotteryRecord(BaseModel):
    """One contest as published by the upstream lottery API.

    Fields are passed through untouched, whatever their JSON type. Every field
    is optional: the upstream omits or nulls fields freely, and a missing field
    must never break the response.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    tipo_jogo: Any = Field(default=None, alias="tipoJogo")
    numero: Any = None
    data_apuracao: Any = Field(default=None, alias="dataApuracao")
    lista_dezenas: Any = Field(default=None, alias="listaDezenas")
    dezenas_ordem_sorteio: Any = Field(default=None, alias="dezenasSorteadasOrdemSorteio")
    numero_concurso_anterior: Any = Field(default=None, alias="numeroConcursoAnterior")
    numero_concurso_proximo: Any = Field(default=None, alias="numeroConcursoProximo")
    data_proximo_concurso: Any = Field(default=None, alias="dataProximoConcurso")
    valor_arrecadado: Any = Field(default=None, alias="valorArrecadado")
    acumulado_concurso_especial: Any = Field(default=None, alias="AcumuladoConcurso_0_5")
    valor_acumulado_proximo_concurso: Any = Field(default=None, alias="valorAcumuladoProximoConcurso")
    valor_estimado_proximo_concurso: Any = Field(default=None, alias="valorEstimadoProximoConcurso")


class SummaryResult(BaseModel):
    loteria: Any
    concurso: Any
    concursoAt: Any
    dezenas: Any
    proximo: Any
    proximoAt: Any
    especial: bool


class FullResult(BaseModel):
    loteria: Any
    concurso: Any
    concursoAt: Any
    dezenas: Any
    dezenasAsc: Any
    anterior: Any
    proximo: Any
    proximoAt: Any
    especial: bool
    arrecadado: Any
    acumuladoConcursoEspecial: Any
    acumuladoProximoConcurso: Any
    estimadoProximoConcurso: Any


class EndpointHints(BaseModel):
    usage: str
    history: str
    example: str


class Discovery(BaseModel):
    name: str
    version: str
    endpoints: dict[str, EndpointHints]
    auth: str
