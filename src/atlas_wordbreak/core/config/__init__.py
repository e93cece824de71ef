# src/atlas_wordbreak/core/config/__init__.py

"""
Camada de configuração do Atlas WordBreak.

Este pacote contém as estruturas e utilitários responsáveis por montar,
carregar, mesclar, validar e resolver o Settings Document de um
rewriter de compostos.

Fluxo:
    WordBreakConfigBuilder / load_settings
        → Settings Document (dict aninhado)
        → ConfigResolver.validate (findings, opcional)
        → ConfigResolver.configure (ResolvedConfiguration)

Invariantes:
    - O Settings Document é um dicionário puro
    - A resolução é determinística dado o documento e o MorphologyProvider
    - Erros estruturais são tratados como falha, nunca como default

Limites explícitos:
    - Não executa compounding
    - Não consulta o índice
"""
