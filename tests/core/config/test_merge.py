# tests/core/config/test_merge.py
"""
Testes da política de deep-merge de Settings Documents.

Os testes asseguram que:
- valores escalares são sobrescritos corretamente
- sub-documentos de modo são mesclados de forma recursiva
- listas são sobrescritas integralmente
- conflitos de tipo são detectados e rejeitados explicitamente
- objetos de entrada não são mutados durante o merge

Limites explícitos:
    - Não valida carregamento de arquivos YAML
    - Não valida defaults do rewriter
"""

import pytest

try:
    from atlas_wordbreak.core.config.merge import deep_merge
    from atlas_wordbreak.core.config.errors import ConfigTypeConflictError
except Exception as e:  # noqa: BLE001
    deep_merge = None
    ConfigTypeConflictError = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    """
    Garante que os módulos de merge de config estejam disponíveis para os testes.

    Falha explicitamente com uma mensagem orientada quando `deep_merge`
    e/ou `ConfigTypeConflictError` não podem ser importados.
    """
    if _IMPORT_ERR is not None:
        pytest.fail(
            "Missing config merge modules. Implement:\n"
            "- src/atlas_wordbreak/core/config/merge.py (deep_merge)\n"
            "- src/atlas_wordbreak/core/config/errors.py (ConfigTypeConflictError)\n"
            f"Import error: {_IMPORT_ERR}"
        )


def test_merge_simple_override():
    """
    Verifica o override de valores escalares sem mutar os inputs.

    Invariantes:
        - O valor sobrescrito reflete exatamente o override
        - Chaves não sobrescritas permanecem inalteradas
        - `base` e `override` não sofrem mutação
    """
    _require_imports()

    base = {"dictionaryField": "f", "minBreakLength": 3}
    override = {"minBreakLength": 2}

    out = deep_merge(base, override)

    assert out == {"dictionaryField": "f", "minBreakLength": 2}
    assert base == {"dictionaryField": "f", "minBreakLength": 3}
    assert override == {"minBreakLength": 2}


def test_merge_nested_mode_document():
    """
    Verifica que sub-documentos de modo são mesclados recursivamente.
    """
    _require_imports()

    base = {"decompound": {"maxExpansions": 3, "verifyCollation": False}}
    override = {"decompound": {"verifyCollation": True}}

    out = deep_merge(base, override)

    assert out == {"decompound": {"maxExpansions": 3, "verifyCollation": True}}


def test_merge_list_override_total():
    """
    Verifica que listas (ex.: `protectedWords`) são sobrescritas integralmente.
    """
    _require_imports()

    base = {"protectedWords": ["bus", "mast"]}
    override = {"protectedWords": ["tischbein"]}

    out = deep_merge(base, override)

    assert out == {"protectedWords": ["tischbein"]}


def test_merge_type_conflict_raises():
    """
    Verifica que um sub-documento não pode ser sobrescrito por um escalar.
    """
    _require_imports()

    base = {"decompound": {"maxExpansions": 3}}
    override = {"decompound": "off"}

    with pytest.raises(ConfigTypeConflictError):
        deep_merge(base, override)


def test_merge_bool_and_int_are_distinct_types():
    _require_imports()

    with pytest.raises(ConfigTypeConflictError):
        deep_merge({"minBreakLength": 3}, {"minBreakLength": True})


def test_merge_none_in_base_is_replaced():
    _require_imports()

    assert deep_merge({"morphology": None}, {"morphology": "GERMAN"}) == {"morphology": "GERMAN"}


def test_merge_non_dict_root_raises():
    _require_imports()

    with pytest.raises(ConfigTypeConflictError):
        deep_merge({"a": 1}, ["not", "a", "dict"])


def test_merge_none_override_keeps_base_value():
    """
    Verifica que `None` no override equivale a chave ausente.
    """
    _require_imports()

    base = {"minBreakLength": 3, "decompound": {"maxExpansions": 4, "morphology": "GERMAN"}}
    override = {"minBreakLength": None, "decompound": {"morphology": None}, "compound": None}

    out = deep_merge(base, override)

    assert out == {
        "minBreakLength": 3,
        "decompound": {"maxExpansions": 4, "morphology": "GERMAN"},
        "compound": None,
    }


def test_merge_none_over_sub_document_keeps_sub_document():
    _require_imports()

    base = {"decompound": {"maxExpansions": 4}}

    assert deep_merge(base, {"decompound": None}) == base
