# src/atlas_wordbreak/rewriter/factory.py
"""
Factory do rewriter de compostos no lado do host de busca.

A `WordBreakCompoundRewriterFactory` é o ponto em que o host instala ou
atualiza a configuração de um rewriter:
    - `validate_configuration` → findings para quem está instalando a config
    - `configure` → resolve a configuração e constrói o engine uma única vez
    - `get_rewriter_factory` → engine pronto, compartilhado entre requisições

O engine de compounding é um colaborador externo: a factory recebe um
`engine_factory` chamado como `engine_factory(rewriter_id=..., configuration=...)`.
Sem engine_factory, o resultado é um `CompoundingEngineBinding`, o pacote
opaco de parâmetros que o engine consome.

Decisões arquiteturais:
    - `configure` é atômico: em caso de erro o engine anterior é mantido
    - Cada `configure` registra o hash canônico da forma aninhada do documento no event log
    - Documentos fora do modelo JSON são rejeitados antes da troca do engine
    - Erros de configure são fatais e nunca tratados com retry
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional

from ..core.config.errors import ConfigError
from ..core.config.hashing import compute_config_hash
from ..core.config.nesting import nest_settings
from ..core.config.resolver import (
    ConfigResolver,
    IndexReaderSupplier,
    ResolvedConfiguration,
    ResolvedParameters,
)
from ..core.config.settings import SettingsDocument
from ..core.exceptions import (
    AtlasException,
    RewriterConfigurationError,
    RewriterNotConfiguredError,
)
from ..morphology.provider import MorphologyProvider


EngineFactory = Callable[..., Any]


@dataclass(frozen=True)
class CompoundingEngineBinding:
    """Agrupamento canônico entregue ao engine: identidade, reader, parâmetros, morfologias."""

    rewriter_id: str
    index_reader_supplier: IndexReaderSupplier
    parameters: ResolvedParameters
    decompound_morphology: Any
    compound_morphology: Any


def bind_engine(*, rewriter_id: str, configuration: ResolvedConfiguration) -> CompoundingEngineBinding:
    return CompoundingEngineBinding(
        rewriter_id=rewriter_id,
        index_reader_supplier=configuration.index_reader_supplier,
        parameters=configuration.parameters,
        decompound_morphology=configuration.decompound_morphology,
        compound_morphology=configuration.compound_morphology,
    )


class WordBreakCompoundRewriterFactory:
    """
    Adapter do host para um rewriter de compostos identificado por `rewriter_id`.

    Campos de diagnóstico:
    - events: log estruturado (configure aceito/rejeitado)
    - config_hash: hash do último documento aceito
    """

    def __init__(
        self,
        rewriter_id: str,
        morphology_provider: Optional[MorphologyProvider] = None,
        engine_factory: Optional[EngineFactory] = None,
        resolver: Optional[ConfigResolver] = None,
    ):
        if not isinstance(rewriter_id, str) or not rewriter_id.strip():
            raise ValueError("rewriter_id must be a non-empty string")
        self.rewriter_id = rewriter_id
        self.resolver = resolver or ConfigResolver(morphology_provider=morphology_provider)
        self._engine_factory = engine_factory or bind_engine
        self._delegate: Any = None
        self.config_hash: Optional[str] = None
        self.events: List[Dict[str, Any]] = []

    def validate_configuration(self, config: SettingsDocument) -> List[str]:
        return self.resolver.validate(config)

    def configure(self, config: SettingsDocument) -> None:
        try:
            configuration = self.resolver.configure(config)
            config_hash = self._hash(config)
        except (ConfigError, AtlasException) as exc:
            self.log(
                level="error",
                message="configuration rejected",
                error_type=type(exc).__name__,
                error=str(exc),
            )
            raise

        delegate = self._engine_factory(rewriter_id=self.rewriter_id, configuration=configuration)

        self._delegate = delegate
        self.config_hash = config_hash
        self.log(
            level="info",
            message="configured",
            config_hash=self.config_hash,
            dictionary_field=configuration.parameters.dictionary_field,
            decompound_morphology=configuration.parameters.decompound_morphology,
            compound_morphology=configuration.parameters.compound_morphology,
        )

    @staticmethod
    def _hash(config: SettingsDocument) -> str:
        """Hash da forma aninhada: documentos flat e aninhados equivalentes coincidem."""
        try:
            return compute_config_hash(nest_settings(config))
        except TypeError as exc:
            raise RewriterConfigurationError(
                message="Settings document is not JSON-serializable",
                details={"error": str(exc)},
                hint="Use only strings, numbers, booleans, lists and objects as values.",
            ) from exc

    def get_rewriter_factory(self) -> Any:
        if self._delegate is None:
            raise RewriterNotConfiguredError(
                message=f"Rewriter '{self.rewriter_id}' is not configured",
                details={"rewriter_id": self.rewriter_id},
                hint="Call configure() with a valid settings document first.",
            )
        return self._delegate

    def log(self, *, level: str, message: str, **extra: Any) -> None:
        event = {
            "rewriter_id": self.rewriter_id,
            "level": level,
            "message": message,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        event.update(extra)
        self.events.append(event)
