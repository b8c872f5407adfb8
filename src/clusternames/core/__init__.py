"""Name and URI codecs."""

from .naming import (
    LinuxVMNameParts,
    MasterVMNameParts,
    VMNameParts,
    VMNaming,
    VMSSNameParts,
    WindowsVMNameParts,
)
from .resources import BlobLocator, resource_name, split_blob_uri

__all__ = [
    "VMNaming",
    "VMNameParts",
    "LinuxVMNameParts",
    "VMSSNameParts",
    "WindowsVMNameParts",
    "MasterVMNameParts",
    "BlobLocator",
    "split_blob_uri",
    "resource_name",
]
