# src/atlas_wordbreak/core/config/hashing.py
"""
Hashing canônico de Settings Documents.

O hash representa a **identidade estrutural** da configuração de um
rewriter e é registrado no event log da factory a cada `configure`,
permitindo correlacionar o comportamento de consultas com a
configuração ativa.

Política de hashing (v1):
    - Serialização JSON canônica (chaves ordenadas, separadores compactos)
    - Codificação UTF-8
    - SHA-256 em hexadecimal (64 caracteres)

Limites explícitos:
    - Não valida nem resolve a configuração
    - Não persiste o hash
"""


import json
import hashlib
from typing import Dict, Any


def compute_config_hash(config: Dict[str, Any]) -> str:
    """
    Gera um hash determinístico de um Settings Document.

    Documentos estruturalmente equivalentes (independente da ordem
    original das chaves) produzem o mesmo hash.

    Args:
        config (Dict[str, Any]): Settings Document.

    Returns:
        str: Hash SHA-256 hexadecimal.

    Raises:
        TypeError: Se o objeto fornecido não for um dicionário.
    """

    if not isinstance(config, dict):
        raise TypeError(
            f"Config for hashing must be a dict, found: {type(config).__name__}"
        )

    canonical_json = json.dumps(
        config,
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
    )

    return hashlib.sha256(canonical_json.encode("utf-8")).hexdigest()
