"""clusternames components and configuration models."""

from .config_base import ConfigModel
from .specs import (
    AgentPoolProfile,
    ClusterProperties,
    HostedMasterProfile,
    MasterProfile,
    OrchestratorProfile,
    OSType,
)

__all__ = [
    # Base
    "ConfigModel",
    # Cluster
    "AgentPoolProfile",
    "ClusterProperties",
    "HostedMasterProfile",
    "MasterProfile",
    "OrchestratorProfile",
    "OSType",
]
