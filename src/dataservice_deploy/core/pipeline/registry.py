# src/dataservice_deploy/core/pipeline/registry.py
"""
Registro de Steps de deploy e fronteira com o orquestrador.

Este módulo define o `StepRegistry`, que registra Steps, valida a unicidade
de seus identificadores e traduz `DeploymentStepDescriptor` (o que o
orquestrador descobre) no Step que efetivamente executa.

Responsabilidades do módulo:
    - Validar unicidade de `step.id`
    - Preservar ordem de registro dos Steps
    - Expor descriptors na ordem de registro
    - Resolver e invocar um Step a partir de seu descriptor

Invariantes:
    - Cada Step registrado possui um `step.id` único
    - A lista de Steps reflete exatamente a ordem de registro

Limites explícitos:
    - Não sequencia múltiplos Steps (responsabilidade do orquestrador)
    - Não realiza retry
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from dataservice_deploy.core.errors import DeployErrorPayload, unknown_deployment_step

from .context import DeploymentContext
from .step import Step
from .types import DeploymentStepDescriptor, StepResult


class DuplicateStepIdError(ValueError):
    """
    Exceção levantada quando ocorre duplicidade de identificador de Step.

    A duplicidade é tratada como erro fatal de configuração e é detectada
    no momento do registro, antes de qualquer execução.
    """


class UnknownDeploymentStepError(KeyError):
    """Descriptor não corresponde a nenhum Step registrado."""

    def __init__(self, name: str, known: Optional[List[str]] = None):
        self.name = name
        self.known = list(known or [])
        super().__init__(name)

    def __str__(self) -> str:
        return f"Unknown deployment step: {self.name}"

    def to_payload(self) -> DeployErrorPayload:
        return unknown_deployment_step(name=self.name, known=self.known)


@dataclass
class StepRegistry:
    """
    Registro canônico de Steps de deploy.

    Decisões arquiteturais:
        - A ordem de inserção é preservada separadamente
        - A estrutura interna não é exposta diretamente
        - Erros estruturais são tratados como falhas fatais
    """

    _steps: Dict[str, Step] = field(default_factory=dict, init=False, repr=False)
    _order: List[str] = field(default_factory=list, init=False, repr=False)

    def add(self, step: Step) -> None:
        step_id = getattr(step, "id", None)
        if not isinstance(step_id, str) or not step_id.strip():
            raise ValueError("step.id must be a non-empty string")

        if step_id in self._steps:
            raise DuplicateStepIdError(f"Duplicate step id: {step_id}")

        self._steps[step_id] = step
        self._order.append(step_id)

    def get(self, step_id: str) -> Step:
        return self._steps[step_id]

    def list(self) -> List[Step]:
        return [self._steps[sid] for sid in self._order]

    # ------------------------------------------------------------------
    # Fronteira com o orquestrador
    # ------------------------------------------------------------------
    def descriptors(self) -> List[DeploymentStepDescriptor]:
        return [DeploymentStepDescriptor(name=sid) for sid in self._order]

    def resolve(self, descriptor: DeploymentStepDescriptor) -> Step:
        if descriptor.name not in self._steps:
            raise UnknownDeploymentStepError(descriptor.name, known=list(self._order))
        return self._steps[descriptor.name]

    def invoke(self, descriptor: DeploymentStepDescriptor, ctx: DeploymentContext) -> StepResult:
        step = self.resolve(descriptor)
        result = step.run(ctx)
        if not isinstance(result, StepResult):
            raise TypeError("Step.run(ctx) must return StepResult")
        return result
