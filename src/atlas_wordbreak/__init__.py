# src/atlas_wordbreak/__init__.py
"""
Atlas WordBreak — configuração de rewriters de compostos em tempo de consulta.

Este pacote raiz define o namespace público do Atlas WordBreak, responsável
por transformar a configuração (solta, possivelmente flat) de um rewriter
de compostos no conjunto de parâmetros tipados e consistentes que o engine
de compounding/decompounding consome a cada consulta.

Arquitetura em alto nível:
    - core.config          → builder, loader, merge, hashing, validação e resolução
    - core.request_context → contexto por requisição e index reader atual
    - morphology           → registry de morfologias por nome
    - rewriter             → factory do lado do host (validate/configure/engine)

Limites explícitos:
    - Não executa o algoritmo de compounding
    - Não consulta o índice
    - Não implementa morfologias
"""

from .core.config.builder import WordBreakConfigBuilder
from .core.config.resolver import ConfigResolver, ResolvedConfiguration, ResolvedParameters
from .core.request_context import RequestContext, current_index_reader, request_scope
from .morphology.provider import MorphologyProvider
from .rewriter.factory import WordBreakCompoundRewriterFactory

__all__ = [
    "ConfigResolver",
    "MorphologyProvider",
    "RequestContext",
    "ResolvedConfiguration",
    "ResolvedParameters",
    "WordBreakCompoundRewriterFactory",
    "WordBreakConfigBuilder",
    "current_index_reader",
    "request_scope",
]
