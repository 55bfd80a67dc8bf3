# tests/core/pipeline/test_registry_unique_step_id.py
"""
Testes do StepRegistry: unicidade, ordem e fronteira com o orquestrador.

Os testes asseguram que:
- `step.id` duplicado é rejeitado no registro
- `step.id` vazio é rejeitado
- a ordem de registro é preservada em `list()` e `descriptors()`
- descriptors desconhecidos são rejeitados
- `invoke` executa o Step resolvido e exige `StepResult`
"""

import pytest

from dataservice_deploy.core.pipeline.registry import (
    DuplicateStepIdError,
    StepRegistry,
    UnknownDeploymentStepError,
)
from dataservice_deploy.core.pipeline.types import DeploymentStepDescriptor, StepStatus


def test_registry_rejects_duplicate_step_id(DummyStep):
    reg = StepRegistry()
    reg.add(DummyStep("a"))

    with pytest.raises(DuplicateStepIdError):
        reg.add(DummyStep("a"))


@pytest.mark.parametrize("bad_id", ["", "   ", None])
def test_registry_rejects_empty_step_id(DummyStep, bad_id):
    step = DummyStep()
    step.id = bad_id

    with pytest.raises(ValueError):
        StepRegistry().add(step)


def test_registry_preserves_order(DummyStep):
    reg = StepRegistry()
    for sid in ["z.last", "a.first", "m.middle"]:
        reg.add(DummyStep(sid))

    assert [s.id for s in reg.list()] == ["z.last", "a.first", "m.middle"]
    assert reg.descriptors() == [
        DeploymentStepDescriptor("z.last"),
        DeploymentStepDescriptor("a.first"),
        DeploymentStepDescriptor("m.middle"),
    ]


def test_resolve_unknown_descriptor_raises(DummyStep):
    reg = StepRegistry()
    reg.add(DummyStep("a"))

    with pytest.raises(UnknownDeploymentStepError) as exc:
        reg.resolve(DeploymentStepDescriptor("missing"))

    assert exc.value.name == "missing"
    assert "missing" in str(exc.value)

    payload = exc.value.to_payload()
    assert payload.type == "UNKNOWN_DEPLOYMENT_STEP"
    assert payload.details == {"name": "missing", "known": ["a"]}


def test_invoke_runs_resolved_step(DummyStep, make_ctx):
    reg = StepRegistry()
    step = DummyStep("a")
    reg.add(step)
    ctx = make_ctx()

    result = reg.invoke(DeploymentStepDescriptor("a"), ctx)

    assert result.status == StepStatus.SUCCESS
    assert step.runs == 1
    assert ctx.events_for("a")[0]["message"] == "dummy ok"


def test_invoke_requires_step_result(DummyStep, make_ctx):
    step = DummyStep("a")
    step.run = lambda ctx: {"status": "success"}
    reg = StepRegistry()
    reg.add(step)

    with pytest.raises(TypeError):
        reg.invoke(DeploymentStepDescriptor("a"), make_ctx())
