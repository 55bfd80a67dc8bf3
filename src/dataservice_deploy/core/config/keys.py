# src/dataservice_deploy/core/config/keys.py
"""
Caminhos bem conhecidos da configuração de deploy.

`deployment_service` aparece em dois níveis:
    - no topo, seleciona a ServiceKey ativa
    - dentro de `repl_services.<key>`, seleciona o tipo do serviço subjacente
"""

from __future__ import annotations

from typing import Tuple

DEPLOYMENT_SERVICE = "deployment_service"
REPL_SERVICES = "repl_services"


def service_path(service_key: str) -> Tuple[str, str]:
    """Caminho do registro por serviço: `repl_services.<key>`."""
    return (REPL_SERVICES, service_key)


def service_type_path(service_key: str) -> Tuple[str, str, str]:
    """Caminho do tipo de serviço: `repl_services.<key>.deployment_service`."""
    return (REPL_SERVICES, service_key, DEPLOYMENT_SERVICE)
