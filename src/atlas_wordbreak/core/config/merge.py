# src/atlas_wordbreak/core/config/merge.py
"""
Utilitário canônico de deep-merge de Settings Documents.

Este módulo implementa a política de deep-merge usada para resolver
a configuração do rewriter a partir de um documento base (defaults)
e overrides explícitos, e para reconciliar chaves flat com
sub-documentos aninhados (`decompound`, `compound`).

Política de merge (v1):
    - dict → merge recursivo por chave
    - list → sobrescrita total (sem merge elemento a elemento)
    - escalar → sobrescrita direta
    - None no override → valor da base preservado
    - conflito de tipos → erro estrutural explícito

Invariantes:
    - A mesma entrada sempre produz a mesma saída
    - Nenhum input é mutado durante o processo
    - Conflitos estruturais interrompem o merge

Limites explícitos:
    - Não carrega arquivos
    - Não aplica defaults do rewriter
    - Não realiza coerção de tipos
"""

from copy import deepcopy
from typing import Any, Dict

from .errors import ConfigTypeConflictError


def _type_name(value: Any) -> str:
    return type(value).__name__


def deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """
    Realiza um deep-merge determinístico entre dois Settings Documents.

    Política (v1):
        - dict + dict → merge recursivo por chave
        - list        → sobrescrita total
        - escalar     → sobrescrita direta pelo override
        - None        → chave ausente (mantém o valor da base)
        - conflito de tipos → `ConfigTypeConflictError`

    `bool` e `int` são tratados como tipos distintos: um override
    `{"minBreakLength": True}` sobre `{"minBreakLength": 3}` é conflito.

    Args:
        base (Dict[str, Any]): Documento base (ex.: defaults).
        override (Dict[str, Any]): Overrides explícitos.

    Returns:
        Dict[str, Any]: Novo documento resultante do deep-merge.

    Raises:
        ConfigTypeConflictError: Se ocorrer conflito de tipo entre base e override.
    """

    if not isinstance(base, dict) or not isinstance(override, dict):
        raise ConfigTypeConflictError(
            f"Deep-merge requires dicts at the root, found: "
            f"{_type_name(base)} vs {_type_name(override)}"
        )

    result: Dict[str, Any] = deepcopy(base)

    for key, override_value in override.items():
        # None no override equivale a chave ausente
        if override_value is None:
            result.setdefault(key, None)
            continue

        if key not in result or result[key] is None:
            result[key] = deepcopy(override_value)
            continue

        base_value = result[key]

        # dict -> merge recursivo
        if isinstance(base_value, dict) and isinstance(override_value, dict):
            result[key] = deep_merge(base_value, override_value)
            continue

        # list -> sobrescrita total
        if isinstance(base_value, list) and isinstance(override_value, list):
            result[key] = deepcopy(override_value)
            continue

        # conflito de tipo
        if type(base_value) is not type(override_value):
            raise ConfigTypeConflictError(
                f"Type conflict for key '{key}': "
                f"{_type_name(base_value)} vs {_type_name(override_value)}"
            )

        # escalar -> sobrescrita
        result[key] = deepcopy(override_value)

    return result
