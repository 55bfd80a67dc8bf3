# src/dataservice_deploy/steps/deploy/__init__.py
"""
Steps de deploy de serviços de dados replicados.

`build_default_registry()` registra, na ordem declarada por
`get_deployment_methods()`, os Steps que este pacote oferece ao orquestrador.
"""

from __future__ import annotations

from dataservice_deploy.core.pipeline.registry import StepRegistry

from .create_service import (
    CREATE_REPLICATION_DATASERVICE,
    CreateReplicationDataServiceStep,
    get_deployment_methods,
)

_STEP_FACTORIES = {
    CREATE_REPLICATION_DATASERVICE: CreateReplicationDataServiceStep,
}


def build_default_registry() -> StepRegistry:
    registry = StepRegistry()
    for descriptor in get_deployment_methods():
        registry.add(_STEP_FACTORIES[descriptor.name]())
    return registry


__all__ = [
    "CreateReplicationDataServiceStep",
    "build_default_registry",
    "get_deployment_methods",
]
