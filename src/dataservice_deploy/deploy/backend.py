# src/dataservice_deploy/deploy/backend.py
"""
Fronteira com o backend de deploy.

O backend é o colaborador externo que efetivamente implanta um serviço de
dados replicado a partir de um tipo de serviço e da configuração resolvida.
Este módulo define apenas o contrato e o resultado; a implementação vive
fora deste pacote.

Contrato:
    - `deploy_replication_dataservice(service_type, config)` é síncrono e
      bloqueante, sem timeout ou cancelamento definidos aqui
    - Sucesso: retorna `None` ou `DeploymentOutcome(ok=True)`
    - Falha: retorna `DeploymentOutcome(ok=False, reason=...)` ou levanta
      qualquer exceção
    - Qualquer outro retorno (ex.: `bool`) viola o contrato e é tratado
      como falha pelo Step
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Protocol, runtime_checkable

from dataservice_deploy.core.config.properties import PropertyStore


@dataclass(frozen=True)
class DeploymentOutcome:
    """Resultado reportado pelo backend."""

    ok: bool
    reason: Optional[str] = None
    details: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def success(cls, **details: Any) -> "DeploymentOutcome":
        return cls(ok=True, details=dict(details))

    @classmethod
    def failure(cls, reason: str, **details: Any) -> "DeploymentOutcome":
        return cls(ok=False, reason=reason, details=dict(details))


@runtime_checkable
class DeploymentBackend(Protocol):
    """Implanta um serviço de dados replicado."""

    def deploy_replication_dataservice(
        self, service_type: str, config: PropertyStore
    ) -> Optional[DeploymentOutcome]:
        ...


__all__ = ["DeploymentBackend", "DeploymentOutcome"]
