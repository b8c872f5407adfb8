"""Cluster description models."""

from .cluster import (
    AgentPoolProfile,
    ClusterProperties,
    HostedMasterProfile,
    MasterProfile,
    OrchestratorProfile,
    OSType,
)

__all__ = [
    "AgentPoolProfile",
    "ClusterProperties",
    "HostedMasterProfile",
    "MasterProfile",
    "OrchestratorProfile",
    "OSType",
]
