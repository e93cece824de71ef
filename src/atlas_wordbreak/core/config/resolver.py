# src/atlas_wordbreak/core/config/resolver.py
"""
Resolver canônico da configuração do rewriter de compostos.

Este módulo transforma um Settings Document (vindo do builder, de um
arquivo ou de uma API administrativa) no conjunto de parâmetros
tipados e consistentes que o engine de compounding precisa.

Duas fases explícitas:
    - `validate`: pré-voo sem exceções; devolve uma lista ordenada de
      findings legíveis (lista vazia = documento válido)
    - `configure`: resolução com defaults, checagens defensivas e binding
      dos colaboradores (supplier do index reader, morfologias)

Decisões arquiteturais:
    - `validate` acumula todos os findings em uma única passada
    - Erros de tipo viram findings em `validate` e exceções em `configure`
    - `configure` repete as checagens de faixa: nenhum engine é construído
      com limites inválidos, mesmo que `validate` não tenha sido chamado
    - `compound.morphology` usa o literal "DEFAULT" quando ausente,
      independentemente de `morphology` global; `decompound.morphology`
      herda a morfologia global
    - O supplier do index reader nunca captura um reader

Invariantes:
    - `ResolvedParameters` é imutável (dataclass frozen, tuplas)
    - A mesma entrada (documento + estado do provider) produz a mesma saída
    - `validate` não muta o documento e é idempotente

Limites explícitos:
    - Não executa compounding/decompounding
    - Não consulta o índice
    - Não implementa morfologias (apenas valida e encaminha nomes)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Tuple, Type

from ..exceptions import RewriterConfigurationError
from ..request_context import current_index_reader
from ...morphology.provider import MorphologyProvider
from .errors import ConfigError, ConfigTypeMismatchError
from .nesting import nest_settings
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
    DEFAULT_ALWAYS_ADD_REVERSE_COMPOUNDS,
    DEFAULT_LOWER_CASE_INPUT,
    DEFAULT_MAX_COMBINE_WORD_LENGTH,
    DEFAULT_MAX_DECOMPOUND_EXPANSIONS,
    DEFAULT_MIN_BREAK_LENGTH,
    DEFAULT_MIN_SUGGESTION_FREQ,
    DEFAULT_MORPHOLOGY,
    DEFAULT_VERIFY_DECOMPOUND_COLLATION,
    SettingsDocument,
    describe_type,
    get_arg,
    get_string_list,
    get_sub_document,
    is_blank,
)


IndexReaderSupplier = Callable[[], Any]


# ---------------------------------------------------------------------------
# Findings
# ---------------------------------------------------------------------------

FINDING_MORPHOLOGY = "Cannot load morphology: {name}"
FINDING_MAX_EXPANSIONS = "maxDecompoundExpansions >= 0 expected"
FINDING_DECOMPOUND_MORPHOLOGY = "Cannot load decompound morphology: {name}"
FINDING_COMPOUND_MORPHOLOGY = "Cannot load compound morphology: {name}"
FINDING_PROTECTED_WORD = "protected word must not be an empty string"
FINDING_TRIGGER_WORD = "reverseCompoundTriggerWords must not contain an empty string"
FINDING_MIN_BREAK_LENGTH = "minBreakLength >= 1 expected"
FINDING_DICTIONARY_FIELD = "Missing config: dictionaryField"

# Campos escalares da raiz conferidos apenas por tipo em `validate`.
_SCALAR_FIELDS: Tuple[Tuple[str, Type[Any]], ...] = (
    (CONF_MIN_SUGGESTION_FREQ, int),
    (CONF_MAX_COMBINE_WORD_LENGTH, int),
    (CONF_MIN_BREAK_LENGTH, int),
    (CONF_LOWER_CASE_INPUT, bool),
    (CONF_ALWAYS_ADD_REVERSE_COMPOUNDS, bool),
)


# ---------------------------------------------------------------------------
# Resultado
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ResolvedParameters:
    """Parâmetros validados, com defaults aplicados, consumidos pelo engine."""

    dictionary_field: str
    min_suggestion_frequency: int = DEFAULT_MIN_SUGGESTION_FREQ
    max_combine_word_length: int = DEFAULT_MAX_COMBINE_WORD_LENGTH
    min_break_length: int = DEFAULT_MIN_BREAK_LENGTH
    lower_case_input: bool = DEFAULT_LOWER_CASE_INPUT
    reverse_compound_trigger_words: Tuple[str, ...] = ()
    always_add_reverse_compounds: bool = DEFAULT_ALWAYS_ADD_REVERSE_COMPOUNDS
    protected_words: Tuple[str, ...] = ()
    decompound_max_expansions: int = DEFAULT_MAX_DECOMPOUND_EXPANSIONS
    decompound_verify_collation: bool = DEFAULT_VERIFY_DECOMPOUND_COLLATION
    default_morphology: str = DEFAULT_MORPHOLOGY
    decompound_morphology: str = DEFAULT_MORPHOLOGY
    compound_morphology: str = DEFAULT_MORPHOLOGY


@dataclass(frozen=True)
class ResolvedConfiguration:
    """
    Pacote pronto para o construtor do engine de compounding.

    Campos:
    - parameters: `ResolvedParameters`
    - index_reader_supplier: chamada sem argumentos que devolve o reader
      da requisição atual; reavaliada a cada invocação
    - decompound_morphology / compound_morphology: estratégias criadas
      pelo `MorphologyProvider` para os nomes resolvidos
    """

    parameters: ResolvedParameters
    index_reader_supplier: IndexReaderSupplier
    decompound_morphology: Any
    compound_morphology: Any


def bind_index_reader_supplier(source: IndexReaderSupplier) -> IndexReaderSupplier:
    """Supplier que consulta `source` a cada chamada, sem guardar o reader."""

    def index_reader_supplier() -> Any:
        return source()

    return index_reader_supplier


# ---------------------------------------------------------------------------
# Resolver
# ---------------------------------------------------------------------------

class ConfigResolver:
    """
    Valida e resolve Settings Documents contra um `MorphologyProvider`.

    Args:
        morphology_provider: Registry de morfologias. Default: catálogo v1.
        index_reader_source: Acessor do reader da requisição atual.
            Default: `current_index_reader` (contexto ambiente).
    """

    def __init__(
        self,
        morphology_provider: Optional[MorphologyProvider] = None,
        index_reader_source: IndexReaderSupplier = current_index_reader,
    ):
        self.morphology_provider = morphology_provider or MorphologyProvider.v1()
        self._index_reader_source = index_reader_source

    # -----------------------------
    # validate
    # -----------------------------
    def validate(self, config: SettingsDocument) -> List[str]:
        """
        Retorna a lista ordenada de findings do documento (vazia se válido).

        Ordem das checagens:
            1. `morphology` global resolvível
            2. `decompound.maxExpansions >= 0`
            3. `decompound.morphology` resolvível
            4. `compound.morphology` resolvível
            5. nenhuma `protectedWords` em branco
            6. nenhuma `reverseCompoundTriggerWords` em branco
            7. tipos dos campos escalares e `minBreakLength >= 1`
            8. `dictionaryField` presente e não vazio

        Nunca levanta exceção para valores malformados: erros de tipo
        são reportados como findings.
        """
        if not isinstance(config, dict):
            return [f"Settings document must be an object, found: {describe_type(config)}"]

        try:
            config = nest_settings(config)
        except ConfigError as exc:
            return [str(exc)]

        findings: List[str] = []

        self._check_morphology(config, None, FINDING_MORPHOLOGY, findings)

        decompound_conf = self._checked(findings, get_sub_document, config, CONF_DECOMPOUND)
        if decompound_conf is not None:
            max_expansions = self._checked(
                findings, get_arg, decompound_conf, CONF_DECOMPOUND_MAX_EXPANSIONS,
                DEFAULT_MAX_DECOMPOUND_EXPANSIONS, int, prefix=CONF_DECOMPOUND,
            )
            if max_expansions is not None and max_expansions < 0:
                findings.append(FINDING_MAX_EXPANSIONS)
            self._checked(
                findings, get_arg, decompound_conf, CONF_DECOMPOUND_VERIFY_COLLATION,
                DEFAULT_VERIFY_DECOMPOUND_COLLATION, bool, prefix=CONF_DECOMPOUND,
            )
            self._check_morphology(
                decompound_conf, CONF_DECOMPOUND, FINDING_DECOMPOUND_MORPHOLOGY, findings
            )

        compound_conf = self._checked(findings, get_sub_document, config, CONF_COMPOUND)
        if compound_conf is not None:
            self._check_morphology(
                compound_conf, CONF_COMPOUND, FINDING_COMPOUND_MORPHOLOGY, findings
            )

        protected_words = self._checked(findings, get_string_list, config, CONF_PROTECTED_WORDS)
        if protected_words and any(is_blank(w) for w in protected_words):
            findings.append(FINDING_PROTECTED_WORD)

        trigger_words = self._checked(
            findings, get_string_list, config, CONF_REVERSE_COMPOUND_TRIGGER_WORDS
        )
        if trigger_words and any(is_blank(w) for w in trigger_words):
            findings.append(FINDING_TRIGGER_WORD)

        for key, expected_type in _SCALAR_FIELDS:
            value = self._checked(findings, get_arg, config, key, None, expected_type)
            if key == CONF_MIN_BREAK_LENGTH and value is not None and value < 1:
                findings.append(FINDING_MIN_BREAK_LENGTH)

        dictionary_field = config.get(CONF_DICTIONARY_FIELD)
        if not isinstance(dictionary_field, str) or is_blank(dictionary_field):
            findings.append(FINDING_DICTIONARY_FIELD)

        return findings

    @staticmethod
    def _checked(findings: List[str], getter: Callable[..., Any], *args: Any, **kwargs: Any) -> Any:
        """Executa um acessor tipado convertendo mismatch em finding (retorna None)."""
        try:
            return getter(*args, **kwargs)
        except ConfigTypeMismatchError as exc:
            findings.append(str(exc))
            return None

    def _check_morphology(
        self,
        config: SettingsDocument,
        prefix: Optional[str],
        template: str,
        findings: List[str],
    ) -> None:
        name = self._checked(findings, get_arg, config, CONF_MORPHOLOGY, None, str, prefix=prefix)
        if name is not None and not self.morphology_provider.exists(name):
            findings.append(template.format(name=name))

    # -----------------------------
    # configure
    # -----------------------------
    def configure(self, config: SettingsDocument) -> ResolvedConfiguration:
        """
        Resolve o Settings Document em `ResolvedConfiguration`.

        Raises:
            ConfigTypeMismatchError: Chave presente com tipo incompatível.
            ConfigTypeConflictError: Chaves flat conflitantes com sub-documentos.
            RewriterConfigurationError: Valor residual inválido (faixa, lista
                com entrada vazia, dictionaryField ausente, morfologia desconhecida).
        """
        if not isinstance(config, dict):
            raise RewriterConfigurationError(
                message="Settings document must be an object",
                details={"found": describe_type(config)},
            )
        config = nest_settings(config)

        dictionary_field = get_arg(config, CONF_DICTIONARY_FIELD, None, str)
        if is_blank(dictionary_field):
            raise RewriterConfigurationError(
                message=FINDING_DICTIONARY_FIELD,
                details={"key": CONF_DICTIONARY_FIELD},
                hint="Name the index field whose terms serve as the compound dictionary.",
            )

        min_suggestion_frequency = get_arg(
            config, CONF_MIN_SUGGESTION_FREQ, DEFAULT_MIN_SUGGESTION_FREQ, int
        )
        max_combine_word_length = get_arg(
            config, CONF_MAX_COMBINE_WORD_LENGTH, DEFAULT_MAX_COMBINE_WORD_LENGTH, int
        )
        min_break_length = get_arg(config, CONF_MIN_BREAK_LENGTH, DEFAULT_MIN_BREAK_LENGTH, int)
        if min_break_length < 1:
            raise RewriterConfigurationError(
                message=f"{CONF_MIN_BREAK_LENGTH} >= 1 expected. Found: {min_break_length}",
                details={"key": CONF_MIN_BREAK_LENGTH, "value": min_break_length},
            )

        lower_case_input = get_arg(config, CONF_LOWER_CASE_INPUT, DEFAULT_LOWER_CASE_INPUT, bool)
        always_add_reverse_compounds = get_arg(
            config, CONF_ALWAYS_ADD_REVERSE_COMPOUNDS, DEFAULT_ALWAYS_ADD_REVERSE_COMPOUNDS, bool
        )
        trigger_words = self._non_blank_words(config, CONF_REVERSE_COMPOUND_TRIGGER_WORDS)
        protected_words = self._non_blank_words(config, CONF_PROTECTED_WORDS)

        decompound_conf = get_sub_document(config, CONF_DECOMPOUND)
        compound_conf = get_sub_document(config, CONF_COMPOUND)

        max_expansions = get_arg(
            decompound_conf, CONF_DECOMPOUND_MAX_EXPANSIONS,
            DEFAULT_MAX_DECOMPOUND_EXPANSIONS, int, prefix=CONF_DECOMPOUND,
        )
        if max_expansions < 0:
            raise RewriterConfigurationError(
                message=f"decompound.maxExpansions >= 0 expected. Found: {max_expansions}",
                details={"key": f"{CONF_DECOMPOUND}.{CONF_DECOMPOUND_MAX_EXPANSIONS}", "value": max_expansions},
            )
        verify_collation = get_arg(
            decompound_conf, CONF_DECOMPOUND_VERIFY_COLLATION,
            DEFAULT_VERIFY_DECOMPOUND_COLLATION, bool, prefix=CONF_DECOMPOUND,
        )

        default_morphology = get_arg(config, CONF_MORPHOLOGY, DEFAULT_MORPHOLOGY, str)
        decompound_morphology = get_arg(
            decompound_conf, CONF_MORPHOLOGY, default_morphology, str, prefix=CONF_DECOMPOUND
        )
        # configurações anteriores ao override por modo compunham sempre com DEFAULT
        compound_morphology = get_arg(
            compound_conf, CONF_MORPHOLOGY, DEFAULT_MORPHOLOGY, str, prefix=CONF_COMPOUND
        )
        for key, name in (
            (CONF_MORPHOLOGY, default_morphology),
            (f"{CONF_DECOMPOUND}.{CONF_MORPHOLOGY}", decompound_morphology),
            (f"{CONF_COMPOUND}.{CONF_MORPHOLOGY}", compound_morphology),
        ):
            if not self.morphology_provider.exists(name):
                raise RewriterConfigurationError(
                    message=f"Cannot load morphology: {name}",
                    details={"key": key, "value": name},
                    hint=f"Known morphologies: {', '.join(self.morphology_provider.list_names())}",
                )

        parameters = ResolvedParameters(
            dictionary_field=dictionary_field.strip(),
            min_suggestion_frequency=min_suggestion_frequency,
            max_combine_word_length=max_combine_word_length,
            min_break_length=min_break_length,
            lower_case_input=lower_case_input,
            reverse_compound_trigger_words=trigger_words,
            always_add_reverse_compounds=always_add_reverse_compounds,
            protected_words=protected_words,
            decompound_max_expansions=max_expansions,
            decompound_verify_collation=verify_collation,
            default_morphology=default_morphology,
            decompound_morphology=decompound_morphology,
            compound_morphology=compound_morphology,
        )

        return ResolvedConfiguration(
            parameters=parameters,
            index_reader_supplier=bind_index_reader_supplier(self._index_reader_source),
            decompound_morphology=self.morphology_provider.create(decompound_morphology),
            compound_morphology=self.morphology_provider.create(compound_morphology),
        )

    @staticmethod
    def _non_blank_words(config: SettingsDocument, key: str) -> Tuple[str, ...]:
        words = get_string_list(config, key)
        if any(is_blank(w) for w in words):
            raise RewriterConfigurationError(
                message=f"{key} must not contain an empty string",
                details={"key": key, "value": list(words)},
            )
        return tuple(words)
