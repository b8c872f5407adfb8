"""Blob URI and resource identifier CLI commands."""

import typer

from ..core import resource_name as get_resource_name
from ..core import split_blob_uri
from ..errors import FormatError
from .display import error, info, info_dict

app = typer.Typer(help="Parse blob storage URIs and resource identifiers")


@app.command()
def split(uri: str = typer.Argument(..., help="https blob URI")):
    """Split a blob URI into account, container and blob path.

    Example:
        cnames blob split https://acct.blob.core.windows.net/vhds/osdisks/disk1234.vhd
    """
    try:
        locator = split_blob_uri(uri)
    except FormatError as e:
        error(str(e))
        raise typer.Exit(1)

    info_dict({
        "Account": locator.account,
        "Container": locator.container,
        "Blob": locator.blob_path,
    })


@app.command("resource-name")
def resource_name(identifier: str = typer.Argument(..., help="Resource ID or URI")):
    """Print the last segment of a resource identifier."""
    try:
        info(get_resource_name(identifier))
    except FormatError as e:
        error(str(e))
        raise typer.Exit(1)
