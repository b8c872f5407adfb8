"""Common Typer options shared across CLI commands.

This module provides reusable option definitions to ensure consistency
and reduce duplication across CLI modules.
"""

import typer


def cluster_argument(help_text: str = "Cluster description file (YAML)") -> typer.Argument:
    """Create a required cluster file argument.

    Args:
        help_text: Custom help text

    Returns:
        Configured Typer Argument
    """
    return typer.Argument(
        ...,
        help=help_text,
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    )


def cluster_option(help_text: str = "Cluster the name must belong to (YAML)") -> typer.Option:
    """Create an optional cluster file option.

    Args:
        help_text: Custom help text

    Returns:
        Configured Typer Option
    """
    return typer.Option(
        None,
        "--config",
        "-c",
        help=help_text,
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    )


def os_type_option(help_text: str = "Operating system of the VM (linux, windows)") -> typer.Option:
    """Create a required OS type option."""
    return typer.Option(..., "--os", help=help_text)


def verbose_option(help_text: str = "Show debug logging") -> typer.Option:
    """Create a verbose output option.

    Args:
        help_text: Custom help text

    Returns:
        Configured Typer Option
    """
    return typer.Option(False, "--verbose", "-v", help=help_text)
