# src/dataservice_deploy/core/pipeline/context.py
"""
Contexto de execução de um Step de deploy.

Este módulo define o `DeploymentContext`, o parâmetro explícito passado ao
ponto de entrada de cada Step. Ele substitui o acesso implícito à
configuração global e ao provider de caminho por dependências injetadas.

O DeploymentContext consolida:
    - identidade da execução (run_id, created_at)
    - a configuração global da execução (somente leitura para o Step)
    - o repositório do arquivo de configuração persistido
    - o backend de deploy
    - logs estruturados e warnings por Step

Invariantes:
    - Logs sempre incluem `run_id` e `step_id`
    - Warnings são agrupados por `step_id`

Limites explícitos:
    - Não executa Steps
    - Não persiste dados automaticamente
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any, Dict, List

from dataservice_deploy.core.config.properties import PropertyStore
from dataservice_deploy.core.config.repository import ConfigFileRepository

if TYPE_CHECKING:  # pragma: no cover
    from dataservice_deploy.deploy.backend import DeploymentBackend


@dataclass
class DeploymentContext:
    """
    Contexto canônico de uma execução de Step.

    Decisões arquiteturais:
        - `config` é tratado como somente leitura pelos Steps
        - Repositório e backend são injetados pelo orquestrador
        - Logs e warnings são estruturados e rastreáveis
    """
    run_id: str
    config: PropertyStore
    repository: ConfigFileRepository
    backend: "DeploymentBackend"
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    meta: Dict[str, Any] = field(default_factory=dict)

    events: List[Dict[str, Any]] = field(default_factory=list, init=False)
    warnings: Dict[str, List[str]] = field(default_factory=dict, init=False)

    def __post_init__(self) -> None:
        if isinstance(self.config, dict):
            self.config = PropertyStore(self.config)

    # -----------------------------
    # Logging & warnings
    # -----------------------------
    def log(self, *, step_id: str, level: str, message: str, **extra: Any) -> None:
        event = {
            "run_id": self.run_id,
            "step_id": step_id,
            "level": level,
            "message": message,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        event.update(extra)
        self.events.append(event)

    def add_warning(self, *, step_id: str, message: str) -> None:
        if step_id not in self.warnings:
            self.warnings[step_id] = []
        self.warnings[step_id].append(message)

    def events_for(self, step_id: str) -> List[Dict[str, Any]]:
        return [e for e in self.events if e.get("step_id") == step_id]
