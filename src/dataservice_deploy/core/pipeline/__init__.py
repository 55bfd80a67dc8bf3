# src/dataservice_deploy/core/pipeline/__init__.py
"""
# Pipeline Core — Steps de deploy

Este pacote define os contratos que ligam os Steps de deploy ao orquestrador.

## Componentes

- **types**
  - `StepStatus`, `StepKind`, `StepResult`
  - `DeploymentStepDescriptor`: nome de um Step que o orquestrador pode invocar

- **step**
  - `Step` (Protocol): contrato mínimo que todo Step deve satisfazer

- **context**
  - `DeploymentContext`: configuração global, repositório, backend, logs e warnings

- **registry**
  - `StepRegistry`: unicidade de `step.id`, descriptors e invocação

## Limites Explícitos

- Não sequencia Steps (o orquestrador é externo)
- Não contém lógica específica de serviço
"""
