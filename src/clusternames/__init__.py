"""clusternames - naming conventions for cluster VMs and storage URIs."""

__version__ = "0.1.0"

# Make key components available at package level
from .components import AgentPoolProfile, ClusterProperties, OSType
from .core import BlobLocator, VMNaming, resource_name, split_blob_uri
from .errors import ClusterNamesError, FormatError

__all__ = [
    "AgentPoolProfile",
    "BlobLocator",
    "ClusterNamesError",
    "ClusterProperties",
    "FormatError",
    "OSType",
    "VMNaming",
    "resource_name",
    "split_blob_uri",
    "__version__",
]
