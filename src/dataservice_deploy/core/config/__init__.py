# src/dataservice_deploy/core/config/__init__.py

"""
Camada de configuração do deploy.

Este pacote contém as estruturas responsáveis por representar, sobrepor,
carregar e persistir a configuração do produto.

Responsabilidades do pacote:
    - PropertyStore: árvore hierárquica chave-caminho → valor
    - merge: sobreposição funcional (o overlay vence em conflito)
    - codec: representação em disco (YAML/JSON) com escrita atômica
    - repository: load/store do arquivo persistido, com compare-and-swap
    - hashing: identidade estrutural e checksum de arquivo

Invariantes:
    - merge nunca muta seus inputs
    - O arquivo persistido é sempre relido do disco antes de ser regravado

Limites explícitos:
    - Não executa Steps
    - Não interage com o backend de deploy
"""

from .errors import ConfigError, InvalidKeyPathError, KeyNotFoundError
from .properties import PropertyStore, merge
from .repository import ConfigFileRepository, ConfigPathProvider, StaticConfigPath

__all__ = [
    "ConfigError",
    "ConfigFileRepository",
    "ConfigPathProvider",
    "InvalidKeyPathError",
    "KeyNotFoundError",
    "PropertyStore",
    "StaticConfigPath",
    "merge",
]
