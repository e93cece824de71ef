# src/atlas_wordbreak/core/config/nesting.py
"""
Reconciliação de chaves flat com sub-documentos aninhados.

Configurações chegam por dois caminhos: aninhadas (JSON/YAML, builder)
ou flat, com chaves pontuadas vindas de arquivos de propriedades
(`decompound.maxExpansions = 5`). Este módulo converte a forma flat
na forma aninhada canônica, usando o mesmo `deep_merge` do loader.

Regras:
    - `"<modo>.<chave>"` vira `{"<modo>": {"<chave>": valor}}`
    - chaves sem ponto são mantidas no nível raiz
    - quando o sub-documento aninhado também existe, as chaves pontuadas
      são mescladas sobre ele (o valor pontuado prevalece)
    - conflitos de tipo levantam `ConfigTypeConflictError`

Limites explícitos:
    - Não realiza coerção de tipos (strings continuam strings)
    - Não valida nomes de chaves nem aplica defaults
"""

from __future__ import annotations

from typing import Any, Dict

from .errors import ConfigTypeConflictError
from .merge import deep_merge
from .settings import SettingsDocument


def nest_settings(config: SettingsDocument) -> SettingsDocument:
    """
    Retorna a forma aninhada de um Settings Document possivelmente flat.

    O input nunca é mutado. Um documento já aninhado retorna como cópia
    estruturalmente idêntica.

    Raises:
        ConfigTypeConflictError: Se uma chave pontuada colide com um valor
            não-dict no mesmo caminho.
    """
    nested: Dict[str, Any] = {}
    dotted: Dict[str, Any] = {}

    for key, value in config.items():
        if isinstance(key, str) and "." in key:
            head, _, tail = key.partition(".")
            if not head or not tail:
                raise ConfigTypeConflictError(f"Malformed dotted key: '{key}'")
            dotted[head] = deep_merge(dotted.get(head, {}), nest_settings({tail: value}))
        else:
            nested[key] = value

    return deep_merge(nested, dotted)
