# src/atlas_wordbreak/core/__init__.py
"""
Core do Atlas WordBreak.

Componentes principais:
    - config          → Settings Document: builder, loader, merge, hashing,
                        validação (findings) e resolução (parâmetros tipados)
    - request_context → contexto explícito por requisição e acessor ambiente
                        do index reader atual
    - exceptions      → exceções estruturadas de configure e de contexto

Princípios fundamentais:
    - Nenhum default silencioso para valores com tipo errado
    - Parâmetros resolvidos são imutáveis e compartilhados entre requisições
    - Estado por requisição nunca é capturado em tempo de configure
"""
