# tests/fixtures/backends.py
"""
Backends de deploy falsos para testes.

Nenhum deles implanta nada: apenas registram as chamadas recebidas e
simulam sucesso, falha ou efeitos colaterais no arquivo persistido.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Tuple

from dataservice_deploy.core.config.properties import PropertyStore
from dataservice_deploy.deploy.backend import DeploymentOutcome


class RecordingBackend:
    """Registra (service_type, config) e devolve um outcome fixo."""

    def __init__(self, outcome: Optional[DeploymentOutcome] = None):
        self.outcome = outcome
        self.calls: List[Tuple[str, PropertyStore]] = []

    def deploy_replication_dataservice(self, service_type: str, config: PropertyStore):
        self.calls.append((service_type, config))
        return self.outcome


class RaisingBackend(RecordingBackend):
    """Levanta a exceção configurada após registrar a chamada."""

    def __init__(self, exc: Exception):
        super().__init__()
        self.exc = exc

    def deploy_replication_dataservice(self, service_type: str, config: PropertyStore):
        super().deploy_replication_dataservice(service_type, config)
        raise self.exc


class FileEditingBackend(RecordingBackend):
    """Edita o arquivo persistido durante o deploy (processo externo simulado)."""

    def __init__(self, path: Path, edit: Callable[[Dict[str, Any]], None]):
        super().__init__()
        self.path = path
        self.edit = edit

    def deploy_replication_dataservice(self, service_type: str, config: PropertyStore):
        super().deploy_replication_dataservice(service_type, config)
        store = PropertyStore.load(self.path)
        data = store.to_dict()
        self.edit(data)
        PropertyStore(data).store(self.path)
        return DeploymentOutcome.success()
