# tests/conftest.py
"""
Fixtures compartilhados para testes do Atlas WordBreak.

Este módulo define fixtures reutilizáveis que fornecem:
- Settings Documents mínimos e determinísticos (dict e YAML)
- um MorphologyProvider com o catálogo v1 + uma morfologia extra (SNOWBALL)
- um index reader falso para exercitar o supplier por requisição

Decisões arquiteturais:
    - Fixtures são mantidas simples e explícitas
    - Nenhuma fixture depende de um índice real
    - Imports do core são realizados de forma lazy para
      melhorar a clareza de erros durante falhas

Invariantes:
    - Nenhuma fixture realiza I/O
    - Todas as fixtures retornam objetos novos a cada teste
"""

import pytest


@pytest.fixture
def project_like_settings_defaults_yaml() -> str:
    """
    YAML de configuração base de um rewriter, semelhante ao uso real.

    Returns:
        str: Conteúdo de um `wordbreak.defaults.yaml`.
    """

    return """\
dictionaryField: f_dictionary
minSuggestionFrequency: 2
lowerCaseInput: true
protectedWords:
  - bus
  - mast
decompound:
  maxExpansions: 4
  verifyCollation: false
"""


@pytest.fixture
def project_like_settings_local_yaml() -> str:
    """
    YAML de override local: troca a morfologia de decompound e as palavras protegidas.

    Returns:
        str: Conteúdo de um `wordbreak.local.yaml`.
    """

    return """\
protectedWords:
  - tischbein
decompound:
  morphology: GERMAN
"""


@pytest.fixture
def minimal_settings() -> dict:
    """Menor Settings Document válido: apenas o campo de dicionário."""
    return {"dictionaryField": "f_dictionary"}


@pytest.fixture
def morphology_provider():
    """
    MorphologyProvider v1 (DEFAULT, GERMAN) estendido com SNOWBALL.

    SNOWBALL não faz parte do catálogo v1; é registrado aqui para
    exercitar a precedência de morfologias com um nome não-DEFAULT.
    """
    from atlas_wordbreak.morphology.provider import (
        MorphologyProvider,
        MorphologySpec,
        MorphologyStrategy,
    )

    provider = MorphologyProvider.v1()
    provider.register(
        MorphologySpec(
            name="SNOWBALL",
            factory=MorphologyStrategy,
            default_params={"name": "SNOWBALL"},
        )
    )
    return provider


@pytest.fixture
def resolver(morphology_provider):
    from atlas_wordbreak.core.config.resolver import ConfigResolver

    return ConfigResolver(morphology_provider=morphology_provider)


@pytest.fixture
def FakeIndexReader():
    """
    Fixture factory que fornece uma classe de index reader falsa.

    O reader só carrega um rótulo de geração, permitindo verificar que o
    supplier devolve o reader da requisição atual e nunca um reader antigo.
    """

    class _FakeIndexReader:
        def __init__(self, generation: int):
            self.generation = generation

        def __repr__(self) -> str:  # pragma: no cover
            return f"_FakeIndexReader(generation={self.generation})"

    return _FakeIndexReader
