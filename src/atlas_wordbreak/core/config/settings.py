# src/atlas_wordbreak/core/config/settings.py
"""
Vocabulário do Settings Document e acesso tipado às suas chaves.

O Settings Document é o formato de transporte/armazenamento da
configuração do rewriter: um `dict` de chaves string para valores
primitivos, listas de strings ou sub-documentos aninhados
(`decompound`, `compound`).

Este módulo concentra:
    - os nomes canônicos das chaves (wire shape)
    - os defaults documentados de cada campo
    - o acessor `get_arg` ("get-with-default, fail-on-type-mismatch")

Decisões arquiteturais:
    - Chave ausente ou com valor `None` → default
    - Chave presente com tipo errado → `ConfigTypeMismatchError`
    - `bool` nunca é aceito onde `int` é esperado

Limites explícitos:
    - Não valida faixas numéricas (responsabilidade do resolver)
    - Não conhece morfologias nem o contexto de requisição
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple, Type

from .errors import ConfigTypeMismatchError


SettingsDocument = Dict[str, Any]


# ---------------------------------------------------------------------------
# Chaves canônicas
# ---------------------------------------------------------------------------

CONF_DICTIONARY_FIELD = "dictionaryField"
CONF_MIN_SUGGESTION_FREQ = "minSuggestionFrequency"
CONF_MAX_COMBINE_WORD_LENGTH = "maxCombineWordLength"
CONF_MIN_BREAK_LENGTH = "minBreakLength"
CONF_LOWER_CASE_INPUT = "lowerCaseInput"
CONF_REVERSE_COMPOUND_TRIGGER_WORDS = "reverseCompoundTriggerWords"
CONF_ALWAYS_ADD_REVERSE_COMPOUNDS = "alwaysAddReverseCompounds"
CONF_PROTECTED_WORDS = "protectedWords"
CONF_MORPHOLOGY = "morphology"

CONF_DECOMPOUND = "decompound"
CONF_DECOMPOUND_MAX_EXPANSIONS = "maxExpansions"
CONF_DECOMPOUND_VERIFY_COLLATION = "verifyCollation"

CONF_COMPOUND = "compound"

# Sub-documentos por modo e as chaves que cada um aceita.
MODE_KEYS: Dict[str, Tuple[str, ...]] = {
    CONF_DECOMPOUND: (
        CONF_DECOMPOUND_MAX_EXPANSIONS,
        CONF_DECOMPOUND_VERIFY_COLLATION,
        CONF_MORPHOLOGY,
    ),
    CONF_COMPOUND: (CONF_MORPHOLOGY,),
}


# ---------------------------------------------------------------------------
# Defaults documentados
# ---------------------------------------------------------------------------

DEFAULT_MIN_SUGGESTION_FREQ = 1
DEFAULT_MAX_COMBINE_WORD_LENGTH = 30
DEFAULT_MIN_BREAK_LENGTH = 3
DEFAULT_LOWER_CASE_INPUT = False
DEFAULT_ALWAYS_ADD_REVERSE_COMPOUNDS = False
DEFAULT_MAX_DECOMPOUND_EXPANSIONS = 3
DEFAULT_VERIFY_DECOMPOUND_COLLATION = False

# Nome da morfologia usada quando nada é configurado. O modo compound
# usa este literal mesmo quando `morphology` global é definido.
DEFAULT_MORPHOLOGY = "DEFAULT"


# ---------------------------------------------------------------------------
# Acesso tipado
# ---------------------------------------------------------------------------

_TYPE_NAMES = {
    str: "string",
    int: "integer",
    bool: "boolean",
    list: "list",
    dict: "object",
}


def describe_type(value: Any) -> str:
    """Nome do tipo no vocabulário do Settings Document (string, integer, ...)."""
    for py_type in (bool, int, str, list, dict):
        if isinstance(value, py_type):
            return _TYPE_NAMES[py_type]
    if value is None:
        return "null"
    return type(value).__name__


def _qualified(key: str, prefix: Optional[str]) -> str:
    return f"{prefix}.{key}" if prefix else key


def get_arg(
    config: SettingsDocument,
    key: str,
    default: Any,
    expected_type: Type[Any],
    *,
    prefix: Optional[str] = None,
) -> Any:
    """
    Lê `config[key]` garantindo o tipo esperado.

    Política:
        - chave ausente ou `None` → `default`
        - `expected_type is int` rejeita `bool` (subclasse de int em Python)
        - `expected_type is list` exige que todos os elementos sejam `str`

    Args:
        config: Settings Document (ou sub-documento).
        key: Chave a ser lida.
        default: Valor retornado quando a chave está ausente.
        expected_type: Um de `str`, `int`, `bool`, `list`, `dict`.
        prefix: Nome do sub-documento, usado apenas na mensagem de erro.

    Raises:
        ConfigTypeMismatchError: Se a chave existe com tipo incompatível.
    """
    value = config.get(key)
    if value is None:
        return default

    qualified = _qualified(key, prefix)
    expected_name = _TYPE_NAMES.get(expected_type, expected_type.__name__)

    if expected_type is int and isinstance(value, bool):
        raise ConfigTypeMismatchError(qualified, expected_name, describe_type(value))

    if not isinstance(value, expected_type):
        raise ConfigTypeMismatchError(qualified, expected_name, describe_type(value))

    if expected_type is list:
        for item in value:
            if not isinstance(item, str):
                raise ConfigTypeMismatchError(
                    qualified, "list of string", f"list containing {describe_type(item)}"
                )

    return value


def get_string_list(
    config: SettingsDocument, key: str, *, prefix: Optional[str] = None
) -> List[str]:
    """Lista de strings com default vazio (nova lista a cada chamada)."""
    return list(get_arg(config, key, [], list, prefix=prefix))


def get_sub_document(config: SettingsDocument, key: str) -> SettingsDocument:
    """Sub-documento de modo (`decompound`/`compound`), vazio quando ausente."""
    return get_arg(config, key, {}, dict)


def is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()
