# src/dataservice_deploy/core/pipeline/types.py
"""
Tipos canônicos dos Steps de deploy.

Componentes principais:
    - StepKind                 → classificação semântica de Steps
    - StepStatus               → estados finais (SUCCESS, SKIPPED, FAILED)
    - StepResult               → resultado imutável da execução de um Step
    - DeploymentStepDescriptor → identidade de um Step que o orquestrador pode invocar

Invariantes:
    - Enums possuem valores textuais canônicos
    - StepResult e DeploymentStepDescriptor são imutáveis
    - Tipos não dependem de backend, repositório ou UI
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List


class StepKind(str, Enum):
    """
    Tipos semânticos de Steps de deploy.

    Tipos definidos:
        - VALIDATE: verificações prévias de configuração ou ambiente
        - CONFIGURE: escrita ou reconciliação de configuração
        - DEPLOY: implantação efetiva de um serviço

    O tipo é puramente informativo; o orquestrador não decide execução por ele.
    """
    VALIDATE = "validate"
    CONFIGURE = "configure"
    DEPLOY = "deploy"


class StepStatus(str, Enum):
    """
    Estados finais possíveis da execução de um Step.

    Estados definidos:
        - SUCCESS: execução concluída com sucesso
        - SKIPPED: execução pulada por decisão explícita
        - FAILED: execução interrompida por erro
    """
    SUCCESS = "success"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass(frozen=True)
class StepResult:
    """
    Resultado imutável da execução de um Step.

    Campos:
        - step_id: identificador do Step
        - kind: tipo semântico do Step
        - status: estado final da execução
        - summary: resumo textual
        - metrics: métricas produzidas
        - warnings: avisos não fatais
        - artifacts: referências a artefatos produzidos (ex.: caminhos)
        - payload: dados adicionais; em falha, `payload["error"]` carrega
          o `DeployErrorPayload` serializado
    """
    step_id: str
    kind: StepKind
    status: StepStatus
    summary: str
    metrics: Dict[str, Any] = field(default_factory=dict)
    warnings: List[str] = field(default_factory=list)
    artifacts: Dict[str, str] = field(default_factory=dict)
    payload: Dict[str, Any] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.status != StepStatus.FAILED


@dataclass(frozen=True)
class DeploymentStepDescriptor:
    """Identifica uma unidade de trabalho que o orquestrador pode invocar."""

    name: str
