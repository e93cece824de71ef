"""
Atlas WordBreak — Canonical Exceptions (v1)

Este módulo define exceções tipadas internas do Atlas WordBreak.

Objetivo:
- Permitir que resolver e factory levantem exceções semânticas tipadas
- Carregar dados estruturados (chave ofensora, valor encontrado) para diagnóstico
- Evitar ValueError/RuntimeError genéricos em guardrails de configure

Regras:
- Exceções devem carregar apenas dados estruturados (serializáveis).
- Nenhuma exceção deste módulo é transitória: não há retry.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Optional


@dataclass(eq=False)
class AtlasException(Exception):
    """Base class para exceções internas do Atlas WordBreak.

    Importante:
    - Sempre carregar dados estruturados em `details`
    - Mensagem deve ser curta e humana
    """

    message: str
    details: Dict[str, Any] = field(default_factory=dict)
    hint: Optional[str] = None

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> Dict[str, Any]:
        """Retorna representação serializável do erro."""
        payload = asdict(self)
        payload["type"] = type(self).__name__
        return payload


# ---------------------------------------------------------------------------
# Rewriter / Configuração
# ---------------------------------------------------------------------------

@dataclass(eq=False)
class RewriterConfigurationError(AtlasException):
    """Valor residual inválido detectado em configure; aborta a construção do rewriter."""


@dataclass(eq=False)
class RewriterNotConfiguredError(AtlasException):
    """Engine solicitado antes de um `configure` bem-sucedido."""


# ---------------------------------------------------------------------------
# Contexto de requisição
# ---------------------------------------------------------------------------

@dataclass(eq=False)
class NoActiveRequestError(AtlasException):
    """Index reader solicitado fora de um escopo de requisição."""
