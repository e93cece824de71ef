"""
MorphologyProvider v1 — catálogo determinístico de estratégias de morfologia.

No Atlas WordBreak, as morfologias disponíveis para compounding/decompounding
são centralizadas e explícitas: o resolver só aceita nomes registrados aqui,
e `validate` e `configure` consultam o mesmo registry.

Este módulo fornece:
- MorphologyStrategy: parâmetros de uma morfologia encaminhados ao engine
- MorphologySpec: especificação de uma morfologia suportada (nome + factory)
- MorphologyProvider: ponto único de verdade para nomes de morfologia (v1)

O algoritmo que aplica os morfemas de ligação pertence ao engine externo;
aqui existem apenas os nomes e seus parâmetros.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple


@dataclass(frozen=True)
class MorphologyStrategy:
    """Parâmetros de uma morfologia, encaminhados ao engine de compounding.

    `linking_morphemes` são os elementos de ligação permitidos entre
    constituintes (ex.: alemão "s" em "Arbeit-s-zimmer"). O morfema vazio
    representa a concatenação direta.
    """

    name: str
    linking_morphemes: Tuple[str, ...] = ("",)
    description: str = ""


@dataclass(frozen=True)
class MorphologySpec:
    """Especificação canônica de uma morfologia suportada pelo registry."""

    name: str
    factory: Callable[..., Any]
    default_params: Dict[str, Any] = field(default_factory=dict)
    version: str = "v1"

    def create(self, overrides: Optional[Dict[str, Any]] = None) -> Any:
        """Instancia a estratégia com default_params + overrides."""
        params = dict(self.default_params)
        if overrides:
            params.update(overrides)
        return self.factory(**params)


class MorphologyProvider:
    """Registry determinístico de MorphologySpec.

    Extensibilidade é explícita: novas morfologias são registradas via `register()`.
    Não há discovery automático. Nomes são sensíveis a maiúsculas/minúsculas.
    """

    def __init__(self, specs: Optional[Iterable[MorphologySpec]] = None):
        self._specs: Dict[str, MorphologySpec] = {}
        if specs:
            for s in specs:
                self.register(s)

    @classmethod
    def v1(cls) -> "MorphologyProvider":
        """Factory do catálogo v1 (DEFAULT, GERMAN)."""
        return cls(specs=_default_specs_v1())

    def register(self, spec: MorphologySpec) -> None:
        if not isinstance(spec, MorphologySpec):
            raise TypeError("spec must be a MorphologySpec")
        if not isinstance(spec.name, str) or not spec.name.strip():
            raise ValueError("morphology name must be a non-empty string")
        if spec.name in self._specs:
            raise ValueError(f"morphology already registered: {spec.name}")
        self._specs[spec.name] = spec

    def exists(self, name: Any) -> bool:
        return isinstance(name, str) and name in self._specs

    def list_names(self) -> List[str]:
        return sorted(self._specs.keys())

    def get(self, name: str) -> MorphologySpec:
        if not self.exists(name):
            raise KeyError(f"unknown morphology: {name}")
        return self._specs[name]

    def create(self, name: str, overrides: Optional[Dict[str, Any]] = None) -> Any:
        """Instancia a estratégia registrada sob `name`."""
        return self.get(name).create(overrides=overrides)


def _default_specs_v1() -> List[MorphologySpec]:
    """Catálogo v1: DEFAULT (concatenação direta) e GERMAN (morfemas de ligação)."""
    return [
        MorphologySpec(
            name="DEFAULT",
            factory=MorphologyStrategy,
            default_params={
                "name": "DEFAULT",
                "linking_morphemes": ("",),
                "description": "Plain concatenation, no linking morphemes",
            },
        ),
        MorphologySpec(
            name="GERMAN",
            factory=MorphologyStrategy,
            default_params={
                "name": "GERMAN",
                "linking_morphemes": ("", "s", "es", "e", "en", "n", "er", "ens", "ns"),
                "description": "German compounding with linking morphemes (Fugenelemente)",
            },
        ),
    ]
