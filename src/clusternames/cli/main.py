"""clusternames CLI entry point."""

import logging
import sys

import typer

from .common_options import verbose_option
from .display import error, info, warning

# Create main CLI app
app = typer.Typer(
    name="cnames",
    help="Naming conventions for cluster VMs and blob storage URIs",
    no_args_is_help=True,
    add_completion=False,
    rich_markup_mode="rich"
)

# Import sub-commands
from . import blob, vm

# Register sub-commands
app.add_typer(
    vm.app,
    name="vm",
    help="Build and parse cluster VM names"
)

app.add_typer(
    blob.app,
    name="blob",
    help="Parse blob storage URIs and resource identifiers"
)


@app.callback()
def configure(verbose: bool = verbose_option()):
    """Configure logging for all commands."""
    logging.basicConfig(
        format="%(asctime)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )
    # basicConfig leaves the level alone once the root logger has handlers
    logging.getLogger().setLevel(logging.DEBUG if verbose else logging.INFO)


@app.command()
def version():
    """Show clusternames version."""
    from .. import __version__
    info(f"clusternames version: {__version__}")


def main():
    """Main CLI entry point."""
    try:
        app()
    except KeyboardInterrupt:
        warning("\nInterrupted by user")
        raise typer.Exit(1)
    except Exception as e:
        error(f"Error: {e}")
        raise typer.Exit(1)


if __name__ == "__main__":
    main()
