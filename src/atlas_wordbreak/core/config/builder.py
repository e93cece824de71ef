# src/atlas_wordbreak/core/config/builder.py
"""
Builder fluente de Settings Documents para o rewriter de compostos.

O `WordBreakConfigBuilder` monta o documento aninhado a partir de campos
discretos, protegendo o chamador do formato de dicionário (chaves wire,
sub-documentos `decompound`/`compound`).

Decisões arquiteturais:
    - Setters validam imediatamente (`ValueError`), nunca no `build()`
    - `build()` só emite chaves efetivamente definidas
    - Sub-documentos de modo só existem quando algum campo deles foi definido
    - A ausência de `dictionaryField` é detectada no `build()` com uma
      exceção própria (`MissingDictionaryFieldError`)

Invariantes:
    - O builder é reutilizável: cada `build()` reflete o estado atual
    - Cada `build()` retorna containers novos (listas/dicts não compartilhados)

Limites explícitos:
    - Não valida nomes de morfologia (responsabilidade do resolver)
    - Não aplica defaults
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional, Union

from .settings import (
    CONF_ALWAYS_ADD_REVERSE_COMPOUNDS,
    CONF_COMPOUND,
    CONF_DECOMPOUND,
    CONF_DECOMPOUND_MAX_EXPANSIONS,
    CONF_DECOMPOUND_VERIFY_COLLATION,
    CONF_DICTIONARY_FIELD,
    CONF_LOWER_CASE_INPUT,
    CONF_MAX_COMBINE_WORD_LENGTH,
    CONF_MIN_BREAK_LENGTH,
    CONF_MIN_SUGGESTION_FREQ,
    CONF_MORPHOLOGY,
    CONF_PROTECTED_WORDS,
    CONF_REVERSE_COMPOUND_TRIGGER_WORDS,
    SettingsDocument,
)


class MissingDictionaryFieldError(ValueError):
    """`build()` chamado sem que `dictionary_field` tenha sido definido."""


WordsArg = Union[str, Iterable[str], None]


def _require_int(key: str, value: Any) -> None:
    # bool é subclasse de int, mas não é um valor numérico válido aqui
    if value is not None and (isinstance(value, bool) or not isinstance(value, int)):
        raise ValueError(f"{key} must be an int or None, found {type(value).__name__}")


def _collect_words(first: WordsArg, rest: tuple) -> Optional[List[str]]:
    """Aceita tanto varargs (`"a", "b"`) quanto um iterável único (`["a", "b"]`)."""
    if first is None and not rest:
        return None
    if isinstance(first, str) or first is None:
        return [w for w in (first, *rest) if w is not None]
    if rest:
        raise ValueError("pass either a single list of words or words as arguments")
    return list(first)


class WordBreakConfigBuilder:
    """
    Builder fluente do Settings Document do rewriter.

    Exemplo:
        config = (
            WordBreakConfigBuilder()
            .dictionary_field("f_dict")
            .min_break_length(2)
            .protected_words("bus", "mast")
            .max_decompound_expansions(5)
            .build()
        )
    """

    def __init__(self) -> None:
        self._dictionary_field: Optional[str] = None
        self._min_suggestion_frequency: Optional[int] = None
        self._max_combine_word_length: Optional[int] = None
        self._min_break_length: Optional[int] = None
        self._lower_case_input: Optional[bool] = None
        self._reverse_compound_trigger_words: Optional[List[str]] = None
        self._always_add_reverse_compounds: Optional[bool] = None
        self._protected_words: Optional[List[str]] = None
        self._morphology: Optional[str] = None
        self._decompound_max_expansions: Optional[int] = None
        self._decompound_verify_collation: Optional[bool] = None
        self._decompound_morphology: Optional[str] = None
        self._compound_morphology: Optional[str] = None

    # -----------------------------
    # Campos raiz
    # -----------------------------
    def dictionary_field(self, dictionary_field: str) -> "WordBreakConfigBuilder":
        if dictionary_field is None:
            raise ValueError("dictionaryField must not be null")
        field_name = dictionary_field.strip()
        if not field_name:
            raise ValueError("dictionaryField must not be empty")
        self._dictionary_field = field_name
        return self

    def min_suggestion_frequency(self, value: Optional[int]) -> "WordBreakConfigBuilder":
        self._min_suggestion_frequency = value
        return self

    def max_combine_word_length(self, value: Optional[int]) -> "WordBreakConfigBuilder":
        self._max_combine_word_length = value
        return self

    def min_break_length(self, value: Optional[int]) -> "WordBreakConfigBuilder":
        _require_int("minBreakLength", value)
        if value is not None and value < 1:
            raise ValueError("minBreakLength must be >=1 or None")
        self._min_break_length = value
        return self

    def lower_case_input(self, value: Optional[bool]) -> "WordBreakConfigBuilder":
        self._lower_case_input = value
        return self

    def reverse_compound_trigger_words(self, words: WordsArg = None, *more: str) -> "WordBreakConfigBuilder":
        self._reverse_compound_trigger_words = _collect_words(words, more)
        return self

    def always_add_reverse_compounds(self, value: Optional[bool]) -> "WordBreakConfigBuilder":
        self._always_add_reverse_compounds = value
        return self

    def protected_words(self, words: WordsArg = None, *more: str) -> "WordBreakConfigBuilder":
        self._protected_words = _collect_words(words, more)
        return self

    def morphology(self, name: Optional[str]) -> "WordBreakConfigBuilder":
        self._morphology = name
        return self

    # -----------------------------
    # Modo decompound
    # -----------------------------
    def max_decompound_expansions(self, value: Optional[int]) -> "WordBreakConfigBuilder":
        _require_int("maxDecompoundExpansions", value)
        if value is not None and value < 0:
            raise ValueError("maxDecompoundExpansions must be >=0 or None")
        self._decompound_max_expansions = value
        return self

    def verify_decompound_collation(self, value: Optional[bool]) -> "WordBreakConfigBuilder":
        self._decompound_verify_collation = value
        return self

    def decompound_morphology(self, name: Optional[str]) -> "WordBreakConfigBuilder":
        self._decompound_morphology = name
        return self

    # -----------------------------
    # Modo compound
    # -----------------------------
    def compound_morphology(self, name: Optional[str]) -> "WordBreakConfigBuilder":
        self._compound_morphology = name
        return self

    # -----------------------------
    # Build
    # -----------------------------
    def build(self) -> SettingsDocument:
        """
        Monta o Settings Document a partir do estado atual do builder.

        Raises:
            MissingDictionaryFieldError: Se `dictionary_field` nunca foi definido.
        """
        if self._dictionary_field is None:
            raise MissingDictionaryFieldError(f"{CONF_DICTIONARY_FIELD} must not be null")

        config: Dict[str, Any] = {CONF_DICTIONARY_FIELD: self._dictionary_field}

        flat = (
            (CONF_MIN_SUGGESTION_FREQ, self._min_suggestion_frequency),
            (CONF_MAX_COMBINE_WORD_LENGTH, self._max_combine_word_length),
            (CONF_MIN_BREAK_LENGTH, self._min_break_length),
            (CONF_LOWER_CASE_INPUT, self._lower_case_input),
            (CONF_REVERSE_COMPOUND_TRIGGER_WORDS, self._copy(self._reverse_compound_trigger_words)),
            (CONF_PROTECTED_WORDS, self._copy(self._protected_words)),
            (CONF_ALWAYS_ADD_REVERSE_COMPOUNDS, self._always_add_reverse_compounds),
            (CONF_MORPHOLOGY, self._morphology),
        )
        for key, value in flat:
            if value is not None:
                config[key] = value

        decompound_conf = self._sub_document(
            (CONF_DECOMPOUND_MAX_EXPANSIONS, self._decompound_max_expansions),
            (CONF_DECOMPOUND_VERIFY_COLLATION, self._decompound_verify_collation),
            (CONF_MORPHOLOGY, self._decompound_morphology),
        )
        if decompound_conf:
            config[CONF_DECOMPOUND] = decompound_conf

        compound_conf = self._sub_document(
            (CONF_MORPHOLOGY, self._compound_morphology),
        )
        if compound_conf:
            config[CONF_COMPOUND] = compound_conf

        return config

    @staticmethod
    def _sub_document(*entries) -> Dict[str, Any]:
        return {key: value for key, value in entries if value is not None}

    @staticmethod
    def _copy(words: Optional[List[str]]) -> Optional[List[str]]:
        return None if words is None else list(words)
