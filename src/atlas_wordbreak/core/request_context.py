# src/atlas_wordbreak/core/request_context.py
"""
RequestContext — Contexto canônico de uma requisição de busca.

Este módulo define o **RequestContext**, a estrutura que representa uma
requisição em andamento, e o acessor ambiente usado pelo supplier do
index reader.

O index reader só é válido durante a requisição que o obteve: o host
troca de reader entre requisições (ex.: após um commit). Por isso o
resolver nunca guarda um reader; ele guarda apenas a capacidade de
perguntar "qual é o reader da requisição atual?" (`current_index_reader`).

Princípios fundamentais:
- Isolamento por requisição (cada requisição possui seu próprio contexto)
- O contexto atual é resolvido via `contextvars`, portanto cada thread
  ou task asyncio enxerga apenas o seu
- Eventos da requisição são registrados de forma estruturada (`log`)
"""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Iterator, List, Optional

from .exceptions import NoActiveRequestError


_CURRENT_REQUEST: ContextVar[Optional["RequestContext"]] = ContextVar(
    "atlas_wordbreak_current_request", default=None
)


@dataclass
class RequestContext:
    """
    Contexto de uma requisição de busca.

    Campos canônicos:
    - request_id: identificador da requisição
    - index_reader: reader do índice válido durante esta requisição
    - meta: metadados livres do host (ex.: core, shard)
    - events: log estruturado de eventos
    """

    request_id: str
    index_reader: Any
    meta: Dict[str, Any] = field(default_factory=dict)
    events: List[Dict[str, Any]] = field(default_factory=list)

    def log(self, *, level: str, message: str, **extra: Any) -> None:
        event = {
            "request_id": self.request_id,
            "level": level,
            "message": message,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        event.update(extra)
        self.events.append(event)


@contextmanager
def request_scope(ctx: RequestContext) -> Iterator[RequestContext]:
    """Torna `ctx` a requisição atual até o fim do bloco `with`.

    Escopos podem ser aninhados; ao sair, o contexto anterior é restaurado.
    """
    token = _CURRENT_REQUEST.set(ctx)
    try:
        yield ctx
    finally:
        _CURRENT_REQUEST.reset(token)


def current_request() -> RequestContext:
    ctx = _CURRENT_REQUEST.get()
    if ctx is None:
        raise NoActiveRequestError(
            message="No active request context",
            hint="Call the rewriter inside request_scope(RequestContext(...)).",
        )
    return ctx


def current_index_reader() -> Any:
    """Retorna o index reader da requisição atual (pull, sem cache)."""
    return current_request().index_reader
