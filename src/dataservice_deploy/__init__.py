# src/dataservice_deploy/__init__.py
"""
dataservice_deploy — Step de deploy de serviços de dados replicados.

Este pacote resolve a sobreposição de configuração por serviço, entrega a
configuração efetiva a um backend de deploy externo e reconcilia o arquivo
de configuração persistido para que valores transitórios nunca sejam gravados.

Arquitetura em alto nível:
    - core.config    → PropertyStore, merge, repositório persistido
    - core.pipeline  → Step, DeploymentContext, StepRegistry
    - deploy         → contrato do backend de deploy
    - steps.deploy   → `create_replication_dataservice`

Limites explícitos:
    - Não implementa o serviço de replicação
    - Não sequencia Steps; o orquestrador consome `get_deployment_methods()`
"""

from .core.config.properties import PropertyStore, merge
from .steps.deploy import (
    CreateReplicationDataServiceStep,
    build_default_registry,
    get_deployment_methods,
)

__version__ = "0.1.0"

__all__ = [
    "CreateReplicationDataServiceStep",
    "PropertyStore",
    "build_default_registry",
    "get_deployment_methods",
    "merge",
]
