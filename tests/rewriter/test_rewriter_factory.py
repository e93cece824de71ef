# tests/rewriter/test_rewriter_factory.py
"""
Testes da WordBreakCompoundRewriterFactory (adapter do host).

Os testes asseguram que:
- validate_configuration delega ao resolver
- configure constrói o engine uma única vez com o agrupamento canônico
- falhas de configure são fatais, registradas e não substituem o engine anterior
- o event log registra o hash do documento aceito
"""

from datetime import date

import pytest

from atlas_wordbreak.core.config.errors import ConfigTypeMismatchError
from atlas_wordbreak.core.config.hashing import compute_config_hash
from atlas_wordbreak.core.exceptions import RewriterConfigurationError, RewriterNotConfiguredError
from atlas_wordbreak.rewriter.factory import (
    CompoundingEngineBinding,
    WordBreakCompoundRewriterFactory,
)


def test_rewriter_id_is_required():
    with pytest.raises(ValueError):
        WordBreakCompoundRewriterFactory(" ")


def test_engine_is_unavailable_before_configure():
    factory = WordBreakCompoundRewriterFactory("compounds")
    with pytest.raises(RewriterNotConfiguredError):
        factory.get_rewriter_factory()


def test_validate_configuration_delegates_to_resolver(morphology_provider):
    factory = WordBreakCompoundRewriterFactory("compounds", morphology_provider=morphology_provider)

    assert factory.validate_configuration({"dictionaryField": "f", "morphology": "SNOWBALL"}) == []
    assert factory.validate_configuration({}) == ["Missing config: dictionaryField"]


def test_configure_builds_default_binding(morphology_provider):
    factory = WordBreakCompoundRewriterFactory("compounds", morphology_provider=morphology_provider)
    config = {"dictionaryField": "f", "morphology": "SNOWBALL"}

    factory.configure(config)
    engine = factory.get_rewriter_factory()

    assert isinstance(engine, CompoundingEngineBinding)
    assert engine.rewriter_id == "compounds"
    assert engine.parameters.decompound_morphology == "SNOWBALL"
    assert engine.compound_morphology.name == "DEFAULT"
    assert callable(engine.index_reader_supplier)
    assert factory.config_hash == compute_config_hash(config)


def test_configure_calls_engine_factory_once_with_identity_and_configuration():
    calls = []

    def engine_factory(*, rewriter_id, configuration):
        calls.append((rewriter_id, configuration))
        return object()

    factory = WordBreakCompoundRewriterFactory("compounds", engine_factory=engine_factory)
    factory.configure({"dictionaryField": "f"})

    assert len(calls) == 1
    rewriter_id, configuration = calls[0]
    assert rewriter_id == "compounds"
    assert configuration.parameters.dictionary_field == "f"
    assert factory.get_rewriter_factory() is not None


def test_configure_event_is_logged():
    factory = WordBreakCompoundRewriterFactory("compounds")
    factory.configure({"dictionaryField": "f", "decompound": {"morphology": "GERMAN"}})

    event = factory.events[-1]
    assert event["rewriter_id"] == "compounds"
    assert event["level"] == "info"
    assert event["message"] == "configured"
    assert event["decompound_morphology"] == "GERMAN"
    assert event["compound_morphology"] == "DEFAULT"
    assert len(event["config_hash"]) == 64


@pytest.mark.parametrize(
    "bad_config,expected_exc",
    [
        ({"dictionaryField": "f", "decompound": {"maxExpansions": -1}}, RewriterConfigurationError),
        ({"dictionaryField": "f", "minSuggestionFrequency": "1"}, ConfigTypeMismatchError),
    ],
)
def test_failed_configure_keeps_previous_engine(bad_config, expected_exc):
    factory = WordBreakCompoundRewriterFactory("compounds")
    factory.configure({"dictionaryField": "f"})
    previous = factory.get_rewriter_factory()
    previous_hash = factory.config_hash

    with pytest.raises(expected_exc):
        factory.configure(bad_config)

    assert factory.get_rewriter_factory() is previous
    assert factory.config_hash == previous_hash
    assert factory.events[-1]["level"] == "error"
    assert factory.events[-1]["message"] == "configuration rejected"
    assert factory.events[-1]["error_type"] == expected_exc.__name__


def test_unserializable_document_is_rejected_before_engine_swap():
    """
    Verifica que um valor fora do modelo JSON (ex.: data vinda de YAML) não troca o engine.
    """
    factory = WordBreakCompoundRewriterFactory("compounds")
    factory.configure({"dictionaryField": "f"})
    previous = factory.get_rewriter_factory()
    previous_hash = factory.config_hash

    with pytest.raises(RewriterConfigurationError):
        factory.configure({"dictionaryField": "g", "updated": date(2024, 1, 1)})

    assert factory.get_rewriter_factory() is previous
    assert factory.config_hash == previous_hash
    assert factory.events[-1]["level"] == "error"
    assert factory.events[-1]["message"] == "configuration rejected"
    assert factory.events[-1]["error_type"] == "RewriterConfigurationError"


def test_flat_and_nested_documents_share_config_hash():
    flat = WordBreakCompoundRewriterFactory("compounds")
    nested = WordBreakCompoundRewriterFactory("compounds")

    flat.configure({"dictionaryField": "f", "decompound.maxExpansions": 5})
    nested.configure({"dictionaryField": "f", "decompound": {"maxExpansions": 5}})

    assert flat.config_hash == nested.config_hash
