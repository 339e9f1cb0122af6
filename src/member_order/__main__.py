"""Main entry point for the component member order checker.

This module provides the command-line interface, including commands for:
- Checking TypeScript files for member order violations
- Listing the effective category order
- Validating a configuration file
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from member_order.cli import (
    categories_command,
    check_command,
    validate_config_command,
)

app = typer.Typer(name="member-order", no_args_is_help=True)

_ConfigOption = Annotated[
    Path | None,
    typer.Option(
        "--config",
        "-c",
        help="YAML configuration file with the rule options",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
]

_LogLevelOption = Annotated[
    str,
    typer.Option(
        "--log-level",
        help="Set logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
        case_sensitive=False,
    ),
]


@app.command()
def check(
    paths: Annotated[
        list[Path],
        typer.Argument(
            help="TypeScript files or directories to check",
            exists=True,
            readable=True,
        ),
    ],
    config: _ConfigOption = None,
    order: Annotated[
        list[str] | None,
        typer.Option(
            "--order",
            help="Category in the desired order (repeat to build a custom order)",
        ),
    ] = None,
    json_output: Annotated[
        bool,
        typer.Option("--json", help="Print findings as JSON"),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose output (sets log level to DEBUG)",
        ),
    ] = False,
    log_level: _LogLevelOption = "WARNING",
) -> None:
    """Check class member order in TypeScript files.

    Exits with 1 when violations are found and 2 on configuration errors.

    Example:
        member-order check src/app --config member-order.yaml
        member-order check src/app/app.component.ts --json

    """
    check_command(paths, config, order, json_output, verbose, log_level)


@app.command()
def categories(
    config: _ConfigOption = None,
    log_level: _LogLevelOption = "WARNING",
) -> None:
    """List member categories in their effective order."""
    categories_command(config, log_level)


@app.command("validate-config")
def validate_config(
    config: Annotated[
        Path,
        typer.Argument(
            help="Path to the YAML configuration file",
            exists=True,
            file_okay=True,
            dir_okay=False,
            readable=True,
        ),
    ],
    log_level: _LogLevelOption = "WARNING",
) -> None:
    """Validate a member order configuration file."""
    validate_config_command(config, log_level)


def main() -> None:
    """Run the CLI application."""
    app()


if __name__ == "__main__":
    main()
