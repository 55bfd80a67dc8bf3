"""
Estruturas canônicas de erro do deploy (v1).

Erros são artefatos de domínio e fazem parte do contrato operacional
entre os Steps de deploy e o orquestrador. Devem ser:

- explícitos
- serializáveis
- acionáveis

Nenhuma decisão implícita é permitida.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict, List, Optional


# ---------------------------------------------------------------------------
# Payload canônico
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class DeployErrorPayload:
    """
    Payload canônico de erro.

    Campos:
    - type: código estável do erro (não é texto livre)
    - message: mensagem curta, humana e objetiva
    - details: dados estruturados relevantes para diagnóstico
    - hint: ação sugerida ao operador (onde corrigir)
    - decision_required: indica se o deploy está bloqueado aguardando decisão humana
    """

    type: str
    message: str
    details: Dict[str, Any]
    hint: Optional[str] = None
    decision_required: bool = False

    def to_dict(self) -> Dict[str, Any]:
        """Retorna representação serializável do erro."""
        return asdict(self)


# ---------------------------------------------------------------------------
# Catálogo canônico de tipos de erro (v1)
# ---------------------------------------------------------------------------

# Resolução da configuração do serviço
MISSING_SERVICE_KEY = "MISSING_SERVICE_KEY"
MISSING_SERVICE_TYPE = "MISSING_SERVICE_TYPE"

# Backend
DEPLOYMENT_BACKEND_FAILURE = "DEPLOYMENT_BACKEND_FAILURE"

# Persistência
PERSISTENCE_IO_ERROR = "PERSISTENCE_IO_ERROR"
PERSISTED_CONFIG_CONFLICT = "PERSISTED_CONFIG_CONFLICT"

# Orquestração
UNKNOWN_DEPLOYMENT_STEP = "UNKNOWN_DEPLOYMENT_STEP"


# ---------------------------------------------------------------------------
# Helpers de fábrica
# ---------------------------------------------------------------------------

def missing_service_key(
    *,
    path: str = "deployment_service",
    step: Optional[str] = None,
    hint: str = "Declare `deployment_service` no topo da configuração com a chave do serviço a ser implantado.",
) -> DeployErrorPayload:
    return DeployErrorPayload(
        type=MISSING_SERVICE_KEY,
        message="Chave do serviço ativo ausente na configuração",
        details={"path": path, "step": step},
        hint=hint,
    )


def missing_service_type(
    *,
    service_key: str,
    step: Optional[str] = None,
    hint: str = "Declare `deployment_service` dentro do registro do serviço em `repl_services`.",
) -> DeployErrorPayload:
    return DeployErrorPayload(
        type=MISSING_SERVICE_TYPE,
        message="Tipo do serviço ausente no registro do serviço",
        details={
            "service_key": service_key,
            "path": f"repl_services.{service_key}.deployment_service",
            "step": step,
        },
        hint=hint,
    )


def deployment_backend_failure(
    *,
    service_type: str,
    reason: Optional[str] = None,
    exc_type: Optional[str] = None,
    step: Optional[str] = None,
    hint: str = "Consulte o log do backend de deploy. O arquivo de configuração persistido não foi alterado.",
) -> DeployErrorPayload:
    return DeployErrorPayload(
        type=DEPLOYMENT_BACKEND_FAILURE,
        message="Backend de deploy reportou falha",
        details={
            "service_type": service_type,
            "reason": reason,
            "exc_type": exc_type,
            "step": step,
        },
        hint=hint,
    )


def persistence_io_error(
    *,
    path: str,
    operation: str,
    exc_type: Optional[str] = None,
    exc_message: Optional[str] = None,
    hint: str = "Verifique existência, permissões e formato do arquivo de configuração.",
) -> DeployErrorPayload:
    return DeployErrorPayload(
        type=PERSISTENCE_IO_ERROR,
        message="Falha de I/O no arquivo de configuração persistido",
        details={
            "path": path,
            "operation": operation,
            "exc_type": exc_type,
            "exc_message": exc_message,
        },
        hint=hint,
    )


def persisted_config_conflict(
    *,
    path: str,
    expected_version: str,
    actual_version: str,
    hint: str = "Outro processo alterou o arquivo durante o deploy. Reexecute o Step após revisar as alterações.",
) -> DeployErrorPayload:
    return DeployErrorPayload(
        type=PERSISTED_CONFIG_CONFLICT,
        message="Arquivo de configuração alterado concorrentemente",
        details={
            "path": path,
            "expected_version": expected_version,
            "actual_version": actual_version,
        },
        hint=hint,
        decision_required=True,
    )


def unknown_deployment_step(
    *,
    name: str,
    known: Optional[List[str]] = None,
    hint: str = "Use um dos nomes retornados por `get_deployment_methods()`.",
) -> DeployErrorPayload:
    return DeployErrorPayload(
        type=UNKNOWN_DEPLOYMENT_STEP,
        message="Step de deploy desconhecido",
        details={"name": name, "known": list(known or [])},
        hint=hint,
    )


def from_exception(exc: Exception) -> DeployErrorPayload:
    """Converte uma DeployException no payload serializável equivalente."""
    from .exceptions import DeployException

    if not isinstance(exc, DeployException):
        raise TypeError(f"Esperado DeployException, recebido: {type(exc).__name__}")

    return DeployErrorPayload(
        type=exc.code,
        message=str(exc) or "Erro de deploy",
        details=dict(exc.details or {}),
        hint=exc.hint,
        decision_required=bool(exc.decision_required),
    )
