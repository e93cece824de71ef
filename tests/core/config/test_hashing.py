# tests/core/config/test_hashing.py
"""
Testes do hashing canônico de Settings Documents.

Os testes asseguram que:
- o hash é determinístico e independente da ordem das chaves
- o hash corresponde ao SHA-256 do JSON canônico
- qualquer mudança estrutural altera o hash
"""

import json
import hashlib

import pytest

from atlas_wordbreak.core.config.hashing import compute_config_hash


def test_hash_is_deterministic_and_order_independent():
    a = {"dictionaryField": "f", "decompound": {"maxExpansions": 5, "verifyCollation": True}}
    b = {"decompound": {"verifyCollation": True, "maxExpansions": 5}, "dictionaryField": "f"}

    h1 = compute_config_hash(a)
    h2 = compute_config_hash(b)

    assert h1 == h2
    assert isinstance(h1, str)
    assert len(h1) == 64


def test_hash_matches_sha256_of_canonical_json():
    cfg = {"protectedWords": ["straße"], "dictionaryField": "f"}

    canonical = json.dumps(cfg, sort_keys=True, separators=(",", ":"), ensure_ascii=False)
    expected = hashlib.sha256(canonical.encode("utf-8")).hexdigest()

    assert compute_config_hash(cfg) == expected


def test_hash_changes_on_override():
    base = {"dictionaryField": "f", "minBreakLength": 3}
    changed = {"dictionaryField": "f", "minBreakLength": 2}

    assert compute_config_hash(base) != compute_config_hash(changed)


def test_hash_requires_dict():
    with pytest.raises(TypeError):
        compute_config_hash(["dictionaryField", "f"])
