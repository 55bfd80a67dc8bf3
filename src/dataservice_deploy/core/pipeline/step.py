# src/dataservice_deploy/core/pipeline/step.py
"""
Contrato canônico de Step de deploy.

Um Step é a menor unidade de trabalho que o orquestrador pode descobrir e
invocar. Ele recebe todo o seu estado pelo `DeploymentContext`; não há
acesso a configuração global implícita nem a singletons de processo.

Princípios fundamentais:
    - Steps não controlam ordem de execução
    - Steps não fazem retry
    - Conformidade é garantida por duck typing (@runtime_checkable)
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from .context import DeploymentContext
from .types import StepKind, StepResult


@runtime_checkable
class Step(Protocol):
    """
    Contrato canônico de um Step de deploy.

    Atributos obrigatórios:
        - id: identificador único e estável (também o nome do descriptor)
        - kind: classificação semântica do Step (`StepKind`)

    Invariantes:
        - `id` é único dentro de um `StepRegistry`
        - O retorno de `run` é sempre um `StepResult`
        - Falhas de domínio são devolvidas como `StepStatus.FAILED`,
          nunca recuperadas localmente
    """
    id: str
    kind: StepKind

    def run(self, ctx: DeploymentContext) -> StepResult:
        """Executa o Step uma única vez usando exclusivamente o contexto."""
        ...
