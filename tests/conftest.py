# tests/conftest.py
"""
Fixtures compartilhados para os testes de deploy.

Este módulo fornece:
- a configuração persistida canônica do cenário `svc1`
- a configuração global da execução (contexto do orquestrador)
- um arquivo YAML persistido em `tmp_path`
- uma fábrica de `DeploymentContext` com repositório e backend injetáveis

Decisões arquiteturais:
    - Arquivos vivem sempre em `tmp_path`; nenhum teste toca o filesystem real
    - Backends são falsos e determinísticos (ver tests/fixtures/backends.py)
    - Imports do pacote são lazy para falhar com mensagens mais claras
"""

from copy import deepcopy
from datetime import datetime, timezone

import pytest
import yaml


@pytest.fixture
def persisted_config() -> dict:
    """
    Conteúdo do arquivo persistido antes do Step.

    Contém dois serviços para que a reconciliação de `svc1` possa ser
    verificada sem efeito sobre `svc2` e chaves não relacionadas.
    """
    return {
        "cluster_name": "east",
        "repl_services": {
            "svc1": {"deployment_service": "mysql", "a": 2, "b": 3},
            "svc2": {"deployment_service": "postgresql", "a": 7},
        },
    }


@pytest.fixture
def global_config(persisted_config) -> dict:
    """Configuração global da execução: o persistido + serviço ativo `svc1`."""
    config = deepcopy(persisted_config)
    config["deployment_service"] = "svc1"
    return config


@pytest.fixture
def config_path(tmp_path, persisted_config):
    """Arquivo YAML persistido com `persisted_config`."""
    path = tmp_path / "conf" / "deploy.yaml"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(yaml.safe_dump(persisted_config, sort_keys=False), encoding="utf-8")
    return path


@pytest.fixture
def repository(config_path):
    from dataservice_deploy.core.config.repository import ConfigFileRepository, StaticConfigPath

    return ConfigFileRepository(StaticConfigPath(config_path))


@pytest.fixture
def make_ctx(global_config, repository):
    """
    Fábrica de `DeploymentContext`.

    Parâmetros opcionais sobrescrevem config, repositório e backend; o
    backend padrão é um `RecordingBackend` com sucesso.
    """
    from dataservice_deploy.core.config.properties import PropertyStore
    from dataservice_deploy.core.pipeline.context import DeploymentContext
    from tests.fixtures.backends import RecordingBackend

    def _make(config=None, repo=None, backend=None):
        return DeploymentContext(
            run_id="run-test-001",
            config=PropertyStore(global_config if config is None else config),
            repository=repository if repo is None else repo,
            backend=RecordingBackend() if backend is None else backend,
            created_at=datetime(2026, 1, 16, 0, 0, 0, tzinfo=timezone.utc),
            meta={"source": "pytest"},
        )

    return _make


@pytest.fixture
def DummyStep():
    """Classe de Step mínima, duck-typed, que sempre retorna SUCCESS."""
    from dataservice_deploy.core.pipeline.types import StepKind, StepResult, StepStatus

    class _DummyStep:
        def __init__(self, step_id: str = "dummy.configure", kind: StepKind = StepKind.CONFIGURE):
            self.id = step_id
            self.kind = kind
            self.runs = 0

        def run(self, ctx):
            self.runs += 1
            ctx.log(step_id=self.id, level="info", message="dummy ok")
            return StepResult(
                step_id=self.id,
                kind=self.kind,
                status=StepStatus.SUCCESS,
                summary="dummy ok",
            )

    return _DummyStep
