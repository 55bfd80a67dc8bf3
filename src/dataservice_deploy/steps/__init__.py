# src/dataservice_deploy/steps/__init__.py
"""Steps concretos de deploy, agrupados por responsabilidade."""
