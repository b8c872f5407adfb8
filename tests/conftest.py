"""Shared cluster fixtures for clusternames tests."""

import pytest
import yaml

from clusternames.components import ClusterProperties


@pytest.fixture
def k8s_cluster():
    """Self-hosted Kubernetes cluster with a fixed cluster ID."""
    return ClusterProperties(
        cluster_id="38988164",
        master_profile={"dns_prefix": "foo", "count": 3},
        agent_pool_profiles=[
            {"name": "agentpool1", "count": 3, "os_type": "Linux"},
            {"name": "winpool", "count": 2, "os_type": "Windows", "windows_name_format": "legacy"},
        ],
    )


@pytest.fixture
def aks_cluster_data():
    """Hosted-master cluster: one Windows pool between two Linux pools."""
    return {
        "cluster_id": "28513887",
        "hosted_master_profile": {"dns_prefix": "foo"},
        "agent_pool_profiles": [
            {"name": "linux1", "vm_size": "Standard_D2_v2", "count": 3, "os_type": "Linux"},
            {"name": "windows2", "vm_size": "Standard_D2_v2", "count": 2, "os_type": "Windows"},
            {"name": "someotherpool", "vm_size": "Standard_D2_v2", "count": 5, "os_type": "Linux"},
        ],
    }


@pytest.fixture
def aks_cluster(aks_cluster_data):
    return ClusterProperties(**aks_cluster_data)


@pytest.fixture
def aks_cluster_file(tmp_path, aks_cluster_data):
    """The hosted-master cluster written to a YAML file."""
    path = tmp_path / "cluster.yaml"
    path.write_text(yaml.safe_dump(aks_cluster_data))
    return path
