# src/dataservice_deploy/steps/deploy/create_service.py
"""Step canônico: deploy.create_replication_dataservice (v1).

Responsabilidades:
- Resolver o serviço ativo (`deployment_service`) e seu tipo.
- Entregar ao backend a configuração global sobreposta pelo registro
  `repl_services.<key>`.
- Reconciliar o arquivo persistido: o registro do serviço volta a ser
  exatamente o que estava em disco antes do Step.

Princípios:
- A visão mesclada é transitória; nunca é persistida.
- A fonte da reconciliação é o disco, não o contexto. Um registro ausente
  em disco antes do Step continua ausente depois dele.
- Falhas antes da escrita final deixam o arquivo intacto.

Payload mínimo esperado:
- service_key, service_type
- version (checksum do arquivo gravado)
- config_hash (hash canônico da visão entregue ao backend)
- restored (o registro em disco foi alterado durante o deploy)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Tuple

from dataservice_deploy.core.config.errors import InvalidKeyPathError, KeyNotFoundError
from dataservice_deploy.core.config.hashing import compute_config_hash
from dataservice_deploy.core.config.keys import (
    DEPLOYMENT_SERVICE,
    service_path,
    service_type_path,
)
from dataservice_deploy.core.config.properties import PropertyStore, merge
from dataservice_deploy.core.errors import (
    deployment_backend_failure,
    from_exception,
    missing_service_key,
    missing_service_type,
    persistence_io_error,
)
from dataservice_deploy.core.exceptions import (
    DeployException,
    DeploymentBackendFailure,
    MissingServiceKey,
    MissingServiceType,
    PersistenceIOError,
)
from dataservice_deploy.core.pipeline.context import DeploymentContext
from dataservice_deploy.core.pipeline.step import Step
from dataservice_deploy.core.pipeline.types import (
    DeploymentStepDescriptor,
    StepKind,
    StepResult,
    StepStatus,
)
from dataservice_deploy.deploy.backend import DeploymentOutcome

CREATE_REPLICATION_DATASERVICE = "create_replication_dataservice"


def get_deployment_methods() -> List[DeploymentStepDescriptor]:
    """Steps de deploy oferecidos por este módulo, na ordem de execução."""
    return [
        DeploymentStepDescriptor(name=CREATE_REPLICATION_DATASERVICE),
    ]


def _resolve_service_key(config: PropertyStore, step_id: str) -> str:
    try:
        service_key = config.get(DEPLOYMENT_SERVICE)
    except KeyNotFoundError as e:
        raise MissingServiceKey.from_payload(missing_service_key(step=step_id)) from e

    if not isinstance(service_key, str) or not service_key.strip():
        raise MissingServiceKey.from_payload(missing_service_key(step=step_id))
    return service_key


def _resolve_service_type(config: PropertyStore, service_key: str, step_id: str) -> str:
    try:
        service_type = config.get(service_type_path(service_key))
    except KeyNotFoundError as e:
        raise MissingServiceType.from_payload(
            missing_service_type(service_key=service_key, step=step_id)
        ) from e

    if not isinstance(service_type, str) or not service_type.strip():
        raise MissingServiceType.from_payload(
            missing_service_type(service_key=service_key, step=step_id)
        )
    return service_type


def _record_snapshot(store: PropertyStore, path: Tuple[str, ...]) -> Tuple[bool, Any]:
    """(existe, valor) do registro em `path`; distingue ausente de vazio."""
    if not store.has(path):
        return False, None
    return True, store.get(path)


@dataclass
class CreateReplicationDataServiceStep(Step):
    """Implanta o serviço de replicação ativo e reconcilia o arquivo persistido.

    A configuração vista pelo backend é a global sobreposta pelo registro
    `repl_services.<key>`. Essa visão é transitória: após o deploy o arquivo
    é relido e o registro do serviço volta ao valor que tinha em disco
    antes do deploy.
    """

    id: str = CREATE_REPLICATION_DATASERVICE
    kind: StepKind = StepKind.DEPLOY

    def create_replication_dataservice(self, ctx: DeploymentContext) -> Dict[str, Any]:
        """Executa o deploy; falhas são levantadas como `DeployException`."""
        ctx.log(
            step_id=self.id,
            level="info",
            message="write the replication service configuration",
        )

        config = ctx.config
        service_key = _resolve_service_key(config, self.id)
        record_path = service_path(service_key)

        # overlay usado apenas para a visão entregue ao backend
        original = config.get_scoped(record_path)
        service_config = merge(config, original)

        service_type = _resolve_service_type(config, service_key, self.id)

        repository = ctx.repository
        snapshot = _record_snapshot(repository.load(), record_path)

        ctx.log(
            step_id=self.id,
            level="info",
            message="deploy replication dataservice",
            service_key=service_key,
            service_type=service_type,
        )
        try:
            outcome = ctx.backend.deploy_replication_dataservice(service_type, service_config)
        except DeployException:
            raise
        except Exception as e:
            raise DeploymentBackendFailure.from_payload(
                deployment_backend_failure(
                    service_type=service_type,
                    reason=str(e) or None,
                    exc_type=e.__class__.__name__,
                    step=self.id,
                )
            ) from e

        if outcome is not None and not isinstance(outcome, DeploymentOutcome):
            raise DeploymentBackendFailure.from_payload(
                deployment_backend_failure(
                    service_type=service_type,
                    reason=f"unexpected backend result: {type(outcome).__name__}",
                    step=self.id,
                )
            )
        if outcome is not None and not outcome.ok:
            raise DeploymentBackendFailure.from_payload(
                deployment_backend_failure(
                    service_type=service_type,
                    reason=outcome.reason,
                    step=self.id,
                )
            )

        stored, version = repository.load_versioned()

        restored = _record_snapshot(stored, record_path) != snapshot
        if restored:
            ctx.add_warning(
                step_id=self.id,
                message=f"repl_services.{service_key} changed during deploy and was restored",
            )

        existed, value = snapshot
        if existed:
            try:
                stored.set_property(record_path, value)
            except InvalidKeyPathError as e:
                raise PersistenceIOError.from_payload(
                    persistence_io_error(
                        path=str(repository.path),
                        operation="reconcile",
                        exc_type=e.__class__.__name__,
                        exc_message=str(e),
                    )
                ) from e
        else:
            stored.remove_property(record_path)

        written = repository.store(stored, expected_version=version)

        ctx.log(
            step_id=self.id,
            level="info",
            message="persisted configuration reconciled",
            service_key=service_key,
            version=written,
        )

        return {
            "service_key": service_key,
            "service_type": service_type,
            "config_path": str(repository.path),
            "version": written,
            "config_hash": compute_config_hash(service_config),
            "overlay_keys": original.keys(),
            "effective_keys": len(service_config),
            "restored": restored,
        }

    def run(self, ctx: DeploymentContext) -> StepResult:
        try:
            summary = self.create_replication_dataservice(ctx)
        except DeployException as e:
            ctx.log(
                step_id=self.id,
                level="error",
                message=f"{self.id} failed",
                error_type=e.code,
                error_message=str(e) or "error",
            )
            error = from_exception(e)
            return StepResult(
                step_id=self.id,
                kind=self.kind,
                status=StepStatus.FAILED,
                summary=error.message,
                metrics={},
                warnings=list(ctx.warnings.get(self.id, [])),
                artifacts={},
                payload={"error": error.to_dict()},
            )

        return StepResult(
            step_id=self.id,
            kind=self.kind,
            status=StepStatus.SUCCESS,
            summary=f"replication dataservice {summary['service_key']} deployed ({summary['service_type']})",
            metrics={
                "overlay_keys": len(summary["overlay_keys"]),
                "effective_keys": summary["effective_keys"],
            },
            warnings=list(ctx.warnings.get(self.id, [])),
            artifacts={"config_file": summary["config_path"]},
            payload={
                "service_key": summary["service_key"],
                "service_type": summary["service_type"],
                "version": summary["version"],
                "config_hash": summary["config_hash"],
                "restored": summary["restored"],
            },
        )


__all__ = [
    "CREATE_REPLICATION_DATASERVICE",
    "CreateReplicationDataServiceStep",
    "get_deployment_methods",
]
