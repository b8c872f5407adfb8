"""VM name CLI commands."""

from dataclasses import asdict
from pathlib import Path
from typing import Optional

import typer

from ..components import ClusterProperties
from ..core import VMNaming
from ..errors import FormatError
from .common_options import cluster_argument, cluster_option, os_type_option
from .display import error, info, info_dict, section, table

app = typer.Typer(help="Build and parse cluster VM names")


@app.command()
def name(
    config: Path = cluster_argument(),
    pool: str = typer.Option(..., "--pool", "-p", help="Agent pool name"),
    index: int = typer.Option(..., "--index", "-i", help="Zero-based agent index within the pool"),
):
    """Derive the VM name of one agent slot.

    Example:
        cnames vm name cluster.yaml --pool linux1 --index 2
    """
    cluster = ClusterProperties.from_yaml(config)
    profile = cluster.get_agent_pool(pool)
    if profile is None:
        error(f"Agent pool {pool} not found in {config.name}")
        raise typer.Exit(1)

    try:
        info(VMNaming.get_k8s_vm_name(cluster, profile, index))
    except FormatError as e:
        error(str(e))
        raise typer.Exit(1)


@app.command("list")
def list_names(config: Path = cluster_argument()):
    """List the names of every VM in the cluster.

    Scale set pools are listed once with their scale set name.

    Example:
        cnames vm list cluster.yaml
    """
    cluster = ClusterProperties.from_yaml(config)

    rows = []
    try:
        if cluster.master_profile is not None:
            for i in range(cluster.master_profile.count):
                rows.append(("master", "Linux", i, VMNaming.master_vm_name(cluster, i)))
        for profile in cluster.agent_pool_profiles:
            if profile.is_virtual_machine_scale_sets():
                rows.append((profile.name, profile.os_type.value, "-", VMNaming.get_vmss_name(cluster, profile)))
                continue
            for i in range(profile.count):
                rows.append((profile.name, profile.os_type.value, i, VMNaming.get_k8s_vm_name(cluster, profile, i)))
    except FormatError as e:
        error(str(e))
        raise typer.Exit(1)

    table(f"Cluster {cluster.get_cluster_id()}", ["Pool", "OS", "Index", "VM Name"], rows)


@app.command()
def parse(
    vm_name: str = typer.Argument(..., help="VM or scale set name"),
    config: Optional[Path] = cluster_option(),
):
    """Decode the fields of a VM name.

    Example:
        cnames vm parse k8s-agentpool1-38988164-65
        cnames vm parse 2851aks011
    """
    cluster = ClusterProperties.from_yaml_optional(config)

    try:
        parts = VMNaming.parse_vm_name(vm_name, cluster)
    except FormatError as e:
        error(str(e))
        raise typer.Exit(1)

    section(f"{vm_name} ({type(parts).__name__})")
    info_dict(asdict(parts))


@app.command()
def index(
    vm_name: str = typer.Argument(..., help="VM name"),
    os_type: str = os_type_option(),
    config: Optional[Path] = cluster_option(),
):
    """Print the agent index encoded in a VM name.

    Example:
        cnames vm index 38988k8s90320 --os windows
    """
    cluster = ClusterProperties.from_yaml_optional(config)

    try:
        info(str(VMNaming.get_vm_name_index(os_type, vm_name, cluster)))
    except FormatError as e:
        error(str(e))
        raise typer.Exit(1)
