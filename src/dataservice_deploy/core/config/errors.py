# src/dataservice_deploy/core/config/errors.py
"""
Exceções canônicas da camada de configuração.

Este módulo define a hierarquia de exceções levantadas durante o acesso
por caminho ao PropertyStore e durante a leitura/escrita do arquivo de
configuração persistido.

Princípios fundamentais:
    - Exceções são tipadas e semânticas
    - Erros estruturais são tratados como falhas fatais
    - Nenhum fallback silencioso é aplicado

Invariantes:
    - Todas as exceções de configuração herdam de `ConfigError`
    - Nenhuma exceção aqui representa erro de deploy ou do backend

Limites explícitos:
    - Não realiza recovery
    - Não depende de Step, contexto ou backend
"""


class ConfigError(Exception):
    """
    Exceção base para erros relacionados à configuração.

    Permite captura genérica de falhas de configuração e distinção clara
    entre falhas estruturais e falhas de execução do deploy.
    """


class KeyNotFoundError(ConfigError, KeyError):
    """
    Exceção levantada quando um caminho de chave não existe no PropertyStore.

    Herda também de `KeyError` para que chamadores que usam o idioma
    `try/except KeyError` continuem funcionando.

    Invariantes:
        - O caminho ausente é sempre informado em `path`
    """

    def __init__(self, path):
        self.path = tuple(path)
        super().__init__(".".join(self.path))

    def __str__(self) -> str:
        return f"Chave não encontrada: {'.'.join(self.path)}"


class InvalidKeyPathError(ConfigError, ValueError):
    """
    Exceção levantada quando um caminho de chave é inválido.

    Exemplos:
        - caminho vazio
        - segmento vazio ou não-string
        - escrita atravessando um valor escalar (`a.b` quando `a` é int)
    """


class ConfigFileNotFoundError(ConfigError):
    """Arquivo de configuração persistido não encontrado no caminho resolvido."""


class UnsupportedConfigFormatError(ConfigError):
    """
    Exceção levantada quando a extensão do arquivo não é suportada.

    Formatos suportados:
        - YAML (.yaml, .yml)
        - JSON (.json)

    Limites explícitos:
        - Não tenta inferir formato por conteúdo
    """


class InvalidConfigRootTypeError(ConfigError):
    """
    Exceção levantada quando o conteúdo raiz do arquivo não é um mapa.

    Listas ou valores escalares no root são inválidos para um PropertyStore.
    """
