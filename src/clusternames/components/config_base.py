"""Base model for cluster records that are read from and written to YAML."""

from pathlib import Path
from typing import TypeVar

import typer
import yaml
from pydantic import BaseModel, ValidationError
from rich.console import Console

T = TypeVar("T", bound="ConfigModel")
console = Console(stderr=True)


class ConfigModel(BaseModel):
    """Base model with YAML loading/saving capabilities."""

    @classmethod
    def from_yaml(cls: type[T], path: Path) -> T:
        """
        Load and validate a cluster description from a YAML file.

        Args:
            path: Path to YAML file

        Returns:
            Validated model instance

        Raises:
            typer.Exit: On file not found, invalid YAML, or validation errors
        """
        if not path.exists():
            console.print(f"[red]Cluster file not found:[/red] {path}")
            raise typer.Exit(1)

        try:
            with open(path) as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            cls._handle_yaml_error(e, path)
        except OSError as e:
            console.print(f"[red]Error reading cluster file:[/red] {path}")
            console.print(f"[dim]{e}[/dim]")
            raise typer.Exit(1)

        if not isinstance(data, dict):
            console.print(f"[red]Expected a mapping at the top level of:[/red] {path.name}")
            raise typer.Exit(1)

        try:
            return cls(**data)
        except ValidationError as e:
            cls._handle_validation_error(e, path)

    @classmethod
    def from_yaml_optional(cls: type[T], path: Path | None) -> T | None:
        """Load from YAML if a path was given and exists, otherwise None."""
        if path and path.exists():
            return cls.from_yaml(path)
        return None

    def to_yaml(self, path: Path):
        """
        Write the model to a YAML file.

        Args:
            path: Path to write YAML file
        """
        with open(path, "w") as f:
            yaml.safe_dump(
                self.model_dump(mode="json", exclude_none=True),
                f,
                default_flow_style=False,
                sort_keys=False,
            )

    def to_yaml_string(self) -> str:
        """Render the model as a YAML string."""
        return yaml.safe_dump(
            self.model_dump(mode="json", exclude_none=True),
            default_flow_style=False,
            sort_keys=False,
        )

    @classmethod
    def _handle_validation_error(cls, error: ValidationError, path: Path):
        """Pretty-print validation errors."""
        console.print(f"[red]Invalid {cls.__name__}:[/red] {path.name}\n")

        for err in error.errors():
            field_path = " → ".join(str(loc) for loc in err["loc"])
            if "missing" in err["type"]:
                console.print(f"  [yellow]Missing required field:[/yellow] {field_path}")
            else:
                console.print(f"  [yellow]{field_path}:[/yellow] {err['msg']}")

        console.print("\n[dim]Check the cluster file format and required fields[/dim]")
        raise typer.Exit(1)

    @classmethod
    def _handle_yaml_error(cls, error: yaml.YAMLError, path: Path):
        """Handle YAML parsing errors."""
        console.print(f"[red]Invalid YAML syntax in:[/red] {path.name}")

        if hasattr(error, "problem_mark"):
            mark = error.problem_mark
            console.print(f"  Line {mark.line + 1}, Column {mark.column + 1}")

        console.print(f"\n[dim]{error}[/dim]")
        raise typer.Exit(1)
