"""Parsing of Azure resource identifiers and blob storage URIs."""

import logging
from dataclasses import dataclass
from urllib.parse import unquote, urlparse

from ..errors import FormatError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BlobLocator:
    """Location of a blob within a storage account."""
    account: str
    container: str
    blob_path: str


def split_blob_uri(uri: str) -> BlobLocator:
    """Split a blob URI into account, container and blob path.

    Example:
        >>> split_blob_uri("https://acct.blob.core.windows.net/vhds/osdisks/disk1234.vhd")
        BlobLocator(account='acct', container='vhds', blob_path='osdisks/disk1234.vhd')

    Raises:
        FormatError: If the URI is not https, its host has no account label,
            or the path lacks a container or blob segment
    """
    try:
        parsed = urlparse(uri)
    except ValueError as e:
        raise FormatError(f"Invalid blob URI {uri}: {e}") from e

    if parsed.scheme != "https":
        raise FormatError(f"Blob URI must use https: {uri}")

    host = parsed.netloc.rpartition("@")[2].partition(":")[0]
    account, _, service_suffix = host.partition(".")
    if not account or not service_suffix:
        raise FormatError(f"Blob URI host must be <account>.<service-suffix>: {uri}")

    segments = unquote(parsed.path).split("/")[1:]
    if len(segments) < 2 or not segments[0]:
        raise FormatError(f"Blob URI is missing a container or blob path: {uri}")

    blob_path = "/".join(segments[1:])
    if not blob_path:
        raise FormatError(f"Blob URI is missing a blob path: {uri}")

    logger.debug(f"Split {uri} into account={account} container={segments[0]} blob={blob_path}")
    return BlobLocator(account=account, container=segments[0], blob_path=blob_path)


def resource_name(identifier: str) -> str:
    """Return the last segment (the resource name) of a resource identifier.

    Works for ARM resource IDs as well as blob URIs.

    Raises:
        FormatError: If the identifier ends in a separator
    """
    name = identifier.split("/")[-1]
    if not name:
        raise FormatError("resource name was missing from identifier")
    return name
