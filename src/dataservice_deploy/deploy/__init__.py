# src/dataservice_deploy/deploy/__init__.py
"""Contratos dos colaboradores externos de deploy."""

from .backend import DeploymentBackend, DeploymentOutcome

__all__ = ["DeploymentBackend", "DeploymentOutcome"]
