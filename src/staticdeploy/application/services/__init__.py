"""Application services."""

from .deploy_service import DeployRequest, DeployService, PreparedDeployment, check_installation

__all__ = ["DeployRequest", "DeployService", "PreparedDeployment", "check_installation"]
