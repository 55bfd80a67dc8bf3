
"""
Exceções tipadas do deploy (v1).

Este módulo define as exceções semânticas levantadas pelos Steps de deploy.

Objetivo:
- Permitir que Steps levantem exceções tipadas em vez de ValueError/RuntimeError
- Facilitar o mapeamento determinístico para DeployErrorPayload
- Dar a cada tipo de falha um código estável (`code`)

Regras:
- Exceções carregam apenas dados estruturados (serializáveis) em `details`.
- Nenhuma exceção aqui é recuperada localmente; a política de retry,
  se existir, pertence ao orquestrador.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, ClassVar, Dict, Optional

if TYPE_CHECKING:  # pragma: no cover
    from .errors import DeployErrorPayload


@dataclass(eq=False)
class DeployException(Exception):
    """Base class para exceções internas do deploy.

    Importante:
    - Sempre carregar dados estruturados em `details`
    - Não embedar stack trace em payloads de erro
    - Mensagem deve ser curta e humana
    """

    code: ClassVar[str] = "DEPLOY_ERROR"

    message: str
    details: Dict[str, Any] = field(default_factory=dict)
    hint: Optional[str] = None
    decision_required: bool = False

    def __str__(self) -> str:
        return self.message

    @classmethod
    def from_payload(cls, payload: "DeployErrorPayload") -> "DeployException":
        """Constrói a exceção a partir de um payload do catálogo (`core.errors`)."""
        return cls(
            message=payload.message,
            details=dict(payload.details),
            hint=payload.hint,
            decision_required=payload.decision_required,
        )


# ---------------------------------------------------------------------------
# Resolução da configuração do serviço
# ---------------------------------------------------------------------------

@dataclass(eq=False)
class MissingServiceKey(DeployException):
    """`deployment_service` ausente no topo da configuração global."""

    code: ClassVar[str] = "MISSING_SERVICE_KEY"


@dataclass(eq=False)
class MissingServiceType(DeployException):
    """`repl_services.<key>.deployment_service` ausente para o serviço selecionado."""

    code: ClassVar[str] = "MISSING_SERVICE_TYPE"


# ---------------------------------------------------------------------------
# Backend
# ---------------------------------------------------------------------------

@dataclass(eq=False)
class DeploymentBackendFailure(DeployException):
    """Falha reportada pelo backend de deploy (não interpretada)."""

    code: ClassVar[str] = "DEPLOYMENT_BACKEND_FAILURE"


# ---------------------------------------------------------------------------
# Persistência
# ---------------------------------------------------------------------------

@dataclass(eq=False)
class PersistenceIOError(DeployException):
    """Falha ao carregar ou gravar o arquivo de configuração persistido."""

    code: ClassVar[str] = "PERSISTENCE_IO_ERROR"


@dataclass(eq=False)
class PersistedConfigConflict(DeployException):
    """O arquivo persistido mudou entre o load e o store (compare-and-swap)."""

    code: ClassVar[str] = "PERSISTED_CONFIG_CONFLICT"
