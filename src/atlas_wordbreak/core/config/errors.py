# src/atlas_wordbreak/core/config/errors.py
"""
Exceções canônicas da camada de configuração do Atlas WordBreak.

Este módulo define a hierarquia oficial de exceções utilizadas durante
o carregamento, a reconciliação (flat → aninhado) e o acesso tipado ao
Settings Document do rewriter de compostos.

As exceções aqui definidas representam **violações estruturais
explícitas** da configuração, e não erros de execução de consultas.

Princípios fundamentais:
    - Exceções são tipadas e semânticas
    - Erros estruturais são tratados como falhas fatais
    - Mensagens de erro nomeiam a chave ofensora

Invariantes:
    - Todas as exceções de configuração herdam de `ConfigError`
    - Nenhuma exceção representa erro de consulta ou de índice

Limites explícitos:
    - Não realiza fallback ou recovery
    - Não depende do rewriter, do engine ou do contexto de requisição
"""


class ConfigError(Exception):
    """
    Exceção base para erros relacionados à configuração do rewriter.

    Todas as exceções levantadas durante carregamento, reconciliação
    e leitura tipada do Settings Document devem herdar desta classe.
    """


class SettingsNotFoundError(ConfigError):
    """
    Exceção levantada quando o arquivo de configuração base (defaults)
    não é encontrado no caminho especificado.

    Decisões arquiteturais:
        - O arquivo de defaults é obrigatório
        - Não existe configuração implícita do rewriter
    """


class UnsupportedConfigFormatError(ConfigError):
    """
    Exceção levantada quando o formato do arquivo de configuração
    não é suportado pelo loader.

    Formatos suportados (v1):
        - YAML (.yaml, .yml)
        - JSON (.json)
    """


class InvalidConfigRootTypeError(ConfigError):
    """
    Exceção levantada quando o conteúdo raiz da configuração
    não é um dicionário (`dict`).

    Invariantes:
        - O Settings Document é sempre um mapa chave-valor
    """


class ConfigTypeConflictError(ConfigError):
    """
    Exceção levantada quando ocorre conflito de tipos durante o deep-merge
    ou durante a reconciliação de chaves flat com sub-documentos aninhados.

    Exemplo de conflito:
        - flat:   {"decompound.maxExpansions": 5}
        - nested: {"decompound": "off"}

    Limites explícitos:
        - Não realiza coerção ou conversão de tipos
        - Não tenta resolver conflitos automaticamente
    """


class ConfigTypeMismatchError(ConfigError):
    """
    Exceção levantada quando uma chave presente no Settings Document
    possui tipo diferente do esperado pelo acessor tipado.

    Decisões arquiteturais:
        - Chave ausente → default documentado
        - Chave presente com tipo errado → erro, nunca default silencioso

    Atributos:
        key: chave ofensora (com prefixo do sub-documento, quando houver)
        expected: nome do tipo esperado
        found: nome do tipo encontrado
    """

    def __init__(self, key: str, expected: str, found: str):
        self.key = key
        self.expected = expected
        self.found = found
        super().__init__(f"Invalid type for {key}: expected {expected}, found {found}")
