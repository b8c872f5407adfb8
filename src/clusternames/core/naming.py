"""VM naming conventions for cluster agent and master nodes.

Two families of names are in use:

* Linux names are hyphen delimited and carry the full cluster ID, e.g.
  ``k8s-agentpool1-38988164-65`` or, for scale sets,
  ``k8s-agentpool1-38988164-vmss``.
* Windows computer names are limited to 15 characters, so they are packed
  without delimiters and parsed by position, e.g. ``2851aks011``.

Every parser raises FormatError when the name does not follow the convention.
"""

import logging
import re
from dataclasses import dataclass
from typing import Optional, Union

from ..components.specs.cluster import AgentPoolProfile, ClusterProperties, OSType
from ..errors import FormatError

logger = logging.getLogger(__name__)

VMSS_MARKER = "vmss"
MASTER_MARKER = "master"

WINDOWS_ORCHESTRATOR_NAMES = ("k8s", "aks", "acs")
WINDOWS_MAX_NAME_LENGTH = 15
WINDOWS_LEGACY_POOL_OFFSET = 900

# Field widths of the two Windows layouts, keyed by layout name:
# (cluster ID prefix width, pool index field width)
WINDOWS_FIELD_WIDTHS = {
    "compact": (4, 2),
    "legacy": (5, 3),
}
WINDOWS_MIN_NAME_LENGTH = 4 + 3 + 3

_LINUX_VM_NAME_RE = re.compile(r"^([0-9a-zA-Z]{3})-(.+)-([0-9a-fA-F]{8})-([0-9]+)\Z")
_VMSS_NAME_RE = re.compile(r"^([0-9a-zA-Z]{3})-(.+)-([0-9a-fA-F]{8})-" + VMSS_MARKER + r"\Z")
_MASTER_VM_NAME_RE = re.compile(r"^([0-9a-zA-Z]{3})-" + MASTER_MARKER + r"-([0-9a-fA-F]{8})-([0-9]+)\Z")
_WINDOWS_VM_NAME_RE = re.compile(
    r"^([0-9a-fA-F]{4,5})(" + "|".join(WINDOWS_ORCHESTRATOR_NAMES) + r")([0-9]{3,8})\Z"
)


@dataclass(frozen=True)
class LinuxVMNameParts:
    """Fields of a Linux agent VM name."""
    pool_identifier: str
    name_suffix: str
    agent_index: int


@dataclass(frozen=True)
class VMSSNameParts:
    """Fields of a virtual machine scale set name."""
    pool_identifier: str
    name_suffix: str


@dataclass(frozen=True)
class WindowsVMNameParts:
    """Fields of a Windows agent VM computer name."""
    pool_prefix: str
    orchestrator: str
    pool_index: int
    agent_index: int

    @property
    def name_format(self) -> str:
        for name_format, (prefix_width, _) in WINDOWS_FIELD_WIDTHS.items():
            if len(self.pool_prefix) == prefix_width:
                return name_format
        raise FormatError(f"Pool prefix {self.pool_prefix!r} has no matching Windows layout")


@dataclass(frozen=True)
class MasterVMNameParts:
    """Fields of a master VM name."""
    orchestrator: str
    name_suffix: str
    master_index: int


VMNameParts = Union[LinuxVMNameParts, VMSSNameParts, WindowsVMNameParts, MasterVMNameParts]


class VMNaming:
    """Encode and decode the names of the VMs that make up a cluster.

    Encoders take the cluster description and return a name; decoders take a
    name and, optionally, the cluster it is expected to belong to. When a
    cluster is given, the orchestrator prefix and cluster ID embedded in a
    Linux-style name must match it.
    """

    # ---------- Linux ----------

    @staticmethod
    def linux_vm_name(cluster: ClusterProperties, pool_identifier: str, agent_index: int) -> str:
        """Generate a Linux agent VM name.

        Pattern: {orchestrator}-{pool_identifier}-{cluster_id}-{agent_index}

        Args:
            cluster: Cluster the VM belongs to
            pool_identifier: Agent pool name
            agent_index: Zero-based index of the VM within its pool

        Returns:
            VM name like 'k8s-agentpool1-38988164-65'
        """
        VMNaming._check_index(agent_index, "agent index")
        orchestrator = VMNaming._orchestrator_name(cluster)
        if pool_identifier == MASTER_MARKER:
            raise FormatError(f"Pool identifier {pool_identifier!r} is reserved for master VM names")
        vm_name = f"{orchestrator}-{pool_identifier}-{cluster.get_cluster_id()}-{agent_index}"
        if not _LINUX_VM_NAME_RE.match(vm_name):
            raise FormatError(f"Pool identifier {pool_identifier!r} cannot be encoded in a Linux VM name")
        return vm_name

    @staticmethod
    def linux_vm_name_parts(vm_name: str, cluster: Optional[ClusterProperties] = None) -> LinuxVMNameParts:
        """Parse a Linux agent VM name such as 'k8s-agentpool1-38988164-65'.

        Raises:
            FormatError: If the name is not a Linux agent VM name, or does not
                belong to the given cluster
        """
        match = _LINUX_VM_NAME_RE.match(vm_name)
        if not match:
            logger.debug(f"{vm_name!r} does not match the Linux VM naming format")
            raise FormatError(f"Error parsing Linux VM name: {vm_name}")

        orchestrator, pool_identifier, name_suffix, agent_index = match.groups()
        VMNaming._check_cluster(vm_name, cluster, orchestrator, name_suffix)
        return LinuxVMNameParts(pool_identifier, name_suffix, int(agent_index))

    # ---------- VMSS ----------

    @staticmethod
    def vmss_name(cluster: ClusterProperties, pool_identifier: str) -> str:
        """Generate a scale set name.

        Pattern: {orchestrator}-{pool_identifier}-{cluster_id}-vmss
        """
        orchestrator = VMNaming._orchestrator_name(cluster)
        vmss_name = f"{orchestrator}-{pool_identifier}-{cluster.get_cluster_id()}-{VMSS_MARKER}"
        if not _VMSS_NAME_RE.match(vmss_name):
            raise FormatError(f"Pool identifier {pool_identifier!r} cannot be encoded in a scale set name")
        return vmss_name

    @staticmethod
    def vmss_name_parts(vmss_name: str, cluster: Optional[ClusterProperties] = None) -> VMSSNameParts:
        """Parse a scale set name such as 'k8s-agentpool1-38988164-vmss'."""
        match = _VMSS_NAME_RE.match(vmss_name)
        if not match:
            logger.debug(f"{vmss_name!r} does not match the VMSS naming format")
            raise FormatError(f"Error parsing VMSS name: {vmss_name}")

        orchestrator, pool_identifier, name_suffix = match.groups()
        VMNaming._check_cluster(vmss_name, cluster, orchestrator, name_suffix)
        return VMSSNameParts(pool_identifier, name_suffix)

    # ---------- Windows ----------

    @staticmethod
    def windows_vm_name(
        cluster: ClusterProperties,
        pool_index: int,
        agent_index: int,
        name_format: str = "compact",
    ) -> str:
        """Generate a Windows agent VM computer name.

        Patterns:
            compact: {cluster_id[:4]}{orchestrator}{pool_index:02d}{agent_index}
            legacy:  {cluster_id[:5]}{orchestrator}{900 + pool_index}{agent_index}

        Args:
            cluster: Cluster the VM belongs to
            pool_index: Position of the agent pool in the cluster
            agent_index: Zero-based index of the VM within its pool
            name_format: 'compact' or 'legacy'

        Returns:
            Computer name like '2851aks011'

        Raises:
            FormatError: If a field does not fit its width or the name would
                exceed the Windows computer name limit
        """
        if name_format not in WINDOWS_FIELD_WIDTHS:
            raise FormatError(f"Unknown Windows name format: {name_format}")
        VMNaming._check_index(pool_index, "pool index")
        VMNaming._check_index(agent_index, "agent index")

        prefix_width, pool_width = WINDOWS_FIELD_WIDTHS[name_format]
        orchestrator = VMNaming._orchestrator_name(cluster)
        if orchestrator not in WINDOWS_ORCHESTRATOR_NAMES:
            raise FormatError(f"Orchestrator name {orchestrator!r} cannot be used in a Windows VM name")

        if name_format == "legacy":
            pool_field = str(WINDOWS_LEGACY_POOL_OFFSET + pool_index)
        else:
            pool_field = f"{pool_index:0{pool_width}d}"
        if len(pool_field) != pool_width:
            raise FormatError(f"Pool index {pool_index} does not fit the {name_format} Windows name format")

        vm_name = f"{cluster.get_cluster_id()[:prefix_width]}{orchestrator}{pool_field}{agent_index}"
        if len(vm_name) > WINDOWS_MAX_NAME_LENGTH:
            raise FormatError(
                f"Windows VM name {vm_name} exceeds {WINDOWS_MAX_NAME_LENGTH} characters"
            )
        return vm_name

    @staticmethod
    def windows_vm_name_parts(vm_name: str) -> WindowsVMNameParts:
        """Parse a Windows computer name such as '38988k8s90312' or '2851aks011'.

        The layout is chosen by the width of the leading cluster ID prefix:
        four characters for the compact layout (two digit pool index), five
        for the legacy layout (pool index offset by 900). Whatever digits
        follow the pool field form the agent index.
        """
        if len(vm_name) < WINDOWS_MIN_NAME_LENGTH:
            raise FormatError(
                f"Error parsing Windows VM name: {vm_name} is shorter than "
                f"{WINDOWS_MIN_NAME_LENGTH} characters"
            )
        match = _WINDOWS_VM_NAME_RE.match(vm_name)
        if not match:
            logger.debug(f"{vm_name!r} does not match the Windows VM naming format")
            raise FormatError(f"Error parsing Windows VM name: {vm_name}")

        pool_prefix, orchestrator, pool_info = match.groups()
        if len(pool_prefix) == WINDOWS_FIELD_WIDTHS["legacy"][0]:
            pool_width = WINDOWS_FIELD_WIDTHS["legacy"][1]
            pool_index = int(pool_info[:pool_width]) - WINDOWS_LEGACY_POOL_OFFSET
            if pool_index < 0:
                raise FormatError(f"Error parsing Windows VM name: {vm_name} has an invalid pool index")
        else:
            pool_width = WINDOWS_FIELD_WIDTHS["compact"][1]
            pool_index = int(pool_info[:pool_width])

        agent_field = pool_info[pool_width:]
        if not agent_field:
            raise FormatError(f"Error parsing Windows VM name: {vm_name} has no agent index")

        return WindowsVMNameParts(pool_prefix, orchestrator, pool_index, int(agent_field))

    # ---------- Masters ----------

    @staticmethod
    def master_vm_name(cluster: ClusterProperties, master_index: int) -> str:
        """Generate a master VM name.

        Pattern: {orchestrator}-master-{cluster_id}-{master_index}
        """
        if cluster.master_profile is None:
            raise FormatError("Cluster has no self-hosted master profile")
        VMNaming._check_index(master_index, "master index")
        if master_index >= cluster.master_profile.count:
            raise FormatError(
                f"Master index {master_index} out of range for {cluster.master_profile.count} masters"
            )
        orchestrator = VMNaming._orchestrator_name(cluster)
        return f"{orchestrator}-{MASTER_MARKER}-{cluster.get_cluster_id()}-{master_index}"

    @staticmethod
    def master_vm_name_parts(vm_name: str, cluster: Optional[ClusterProperties] = None) -> MasterVMNameParts:
        """Parse a master VM name such as 'k8s-master-38988164-0'."""
        match = _MASTER_VM_NAME_RE.match(vm_name)
        if not match:
            raise FormatError(f"Error parsing master VM name: {vm_name}")

        orchestrator, name_suffix, master_index = match.groups()
        VMNaming._check_cluster(vm_name, cluster, orchestrator, name_suffix)
        return MasterVMNameParts(orchestrator, name_suffix, int(master_index))

    # ---------- Dispatch ----------

    @staticmethod
    def get_vm_name_index(
        os_type: Union[OSType, str],
        vm_name: str,
        cluster: Optional[ClusterProperties] = None,
    ) -> int:
        """Return the agent index encoded in a VM name.

        Args:
            os_type: OS of the VM, selects the naming convention
            vm_name: VM name to parse
            cluster: Optional cluster the Linux name must belong to

        Raises:
            FormatError: If the name does not follow the convention of os_type
        """
        try:
            os_type = OSType.parse(os_type)
        except ValueError as e:
            raise FormatError(str(e)) from e

        if os_type == OSType.LINUX:
            return VMNaming.linux_vm_name_parts(vm_name, cluster).agent_index
        return VMNaming.windows_vm_name_parts(vm_name).agent_index

    @staticmethod
    def get_k8s_vm_name(cluster: ClusterProperties, pool: AgentPoolProfile, agent_index: int) -> str:
        """Return the canonical name of an agent VM slot.

        Linux pools get Linux names, Windows pools the layout selected by
        the pool's windows_name_format. Scale set pools have no per-slot VM
        names and are addressed through get_vmss_name.

        Args:
            cluster: Cluster containing the pool
            pool: Agent pool of the VM
            agent_index: Zero-based index of the VM within the pool

        Returns:
            VM name like 'aks-linux1-28513887-2' or '2851aks011'
        """
        pool_index = cluster.get_agent_pool_index_by_name(pool.name)
        if pool_index == -1:
            raise FormatError(f"Agent pool {pool.name} is not part of the cluster")
        if pool.is_virtual_machine_scale_sets():
            raise FormatError(f"Agent pool {pool.name} is a scale set; use its scale set name")

        if pool.is_windows():
            return VMNaming.windows_vm_name(cluster, pool_index, agent_index, pool.windows_name_format)
        return VMNaming.linux_vm_name(cluster, pool.name, agent_index)

    @staticmethod
    def get_vmss_name(cluster: ClusterProperties, pool: AgentPoolProfile) -> str:
        """Return the scale set name of a Linux scale set pool."""
        if cluster.get_agent_pool_index_by_name(pool.name) == -1:
            raise FormatError(f"Agent pool {pool.name} is not part of the cluster")
        if not pool.is_virtual_machine_scale_sets():
            raise FormatError(f"Agent pool {pool.name} is not a scale set")
        if pool.is_windows():
            raise FormatError(f"Agent pool {pool.name} is a Windows scale set; only Linux scale sets are named")
        return VMNaming.vmss_name(cluster, pool.name)

    @staticmethod
    def parse_vm_name(vm_name: str, cluster: Optional[ClusterProperties] = None) -> VMNameParts:
        """Decode a name of any known layout.

        Layouts are tried in order: master, scale set, Linux agent, Windows
        agent. A name that matches a layout but not the given cluster is
        reported rather than tried against the remaining layouts.
        """
        if _MASTER_VM_NAME_RE.match(vm_name):
            return VMNaming.master_vm_name_parts(vm_name, cluster)
        if _VMSS_NAME_RE.match(vm_name):
            return VMNaming.vmss_name_parts(vm_name, cluster)
        if _LINUX_VM_NAME_RE.match(vm_name):
            return VMNaming.linux_vm_name_parts(vm_name, cluster)
        if _WINDOWS_VM_NAME_RE.match(vm_name):
            return VMNaming.windows_vm_name_parts(vm_name)
        raise FormatError(f"{vm_name} does not match any known VM naming format")

    @staticmethod
    def detect_os_type(vm_name: str) -> OSType:
        """Tell from its layout whether a VM name belongs to a Linux or Windows VM."""
        parts = VMNaming.parse_vm_name(vm_name)
        if isinstance(parts, WindowsVMNameParts):
            return OSType.WINDOWS
        return OSType.LINUX

    # ---------- Helpers ----------

    @staticmethod
    def _orchestrator_name(cluster: ClusterProperties) -> str:
        orchestrator = cluster.k8s_orchestrator_name()
        if not orchestrator:
            raise FormatError(
                f"Orchestrator {cluster.orchestrator_profile.orchestrator_type} has no VM naming convention"
            )
        return orchestrator

    @staticmethod
    def _check_index(value: int, label: str) -> None:
        if value < 0:
            raise FormatError(f"{label.capitalize()} must be >= 0, got {value}")

    @staticmethod
    def _check_cluster(
        vm_name: str,
        cluster: Optional[ClusterProperties],
        orchestrator: str,
        name_suffix: str,
    ) -> None:
        """Verify the orchestrator prefix and cluster ID of a parsed name."""
        if cluster is None:
            return
        expected_orchestrator = cluster.k8s_orchestrator_name()
        if orchestrator != expected_orchestrator:
            raise FormatError(
                f"{vm_name} has orchestrator prefix {orchestrator!r}, expected {expected_orchestrator!r}"
            )
        expected_suffix = cluster.get_cluster_id()
        if name_suffix.lower() != expected_suffix.lower():
            raise FormatError(f"{vm_name} has cluster ID {name_suffix}, expected {expected_suffix}")
