"""CLI command implementations for checking member order."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

import typer
from rich.console import Console

from member_order.checker import MemberOrderChecker
from member_order.cli.errors import cli_error_handler
from member_order.cli.formatting import OutputFormatter
from member_order.config import MemberOrderConfig
from member_order.logging import setup_logging
from member_order.models import FindingModel

logger = logging.getLogger(__name__)
console = Console()

# Exit code when violations are found
VIOLATIONS_EXIT_CODE = 1


def load_config(
    config_path: Path | None, order: Sequence[str] | None = None
) -> MemberOrderConfig:
    """Build the rule configuration from an optional file and CLI order override.

    Raises:
        InvalidConfigurationError: If the file or the order is invalid

    """
    config = (
        MemberOrderConfig.from_file(config_path)
        if config_path is not None
        else MemberOrderConfig()
    )
    if order:
        properties = config.model_dump()
        properties["order"] = list(order)
        config = MemberOrderConfig.from_properties(properties)
    return config


def check_command(  # noqa: PLR0913 - CLI entry point with many options
    paths: Sequence[Path],
    config_path: Path | None = None,
    order: Sequence[str] | None = None,
    json_output: bool = False,
    verbose: bool = False,
    log_level: str = "WARNING",
) -> None:
    """CLI command implementation for checking member order.

    Args:
        paths: Files and directories to check
        config_path: Optional YAML configuration file
        order: Optional order override, replacing any configured order
        json_output: Print findings as JSON instead of a table
        verbose: Enable debug logging
        log_level: Logging level

    Raises:
        typer.Exit: With code 1 if violations were found

    """
    setup_logging(level="DEBUG" if verbose else log_level)

    findings: list[FindingModel] = []
    with cli_error_handler("check", "Member order check failed"):
        checker = MemberOrderChecker(load_config(config_path, order))
        findings = checker.check_paths(paths)

    formatter = OutputFormatter()
    if json_output:
        formatter.format_findings_json(findings)
    else:
        formatter.format_findings(findings)

    if findings:
        raise typer.Exit(VIOLATIONS_EXIT_CODE)


def categories_command(
    config_path: Path | None = None, log_level: str = "WARNING"
) -> None:
    """CLI command implementation for listing the effective category order.

    Args:
        config_path: Optional YAML configuration file
        log_level: Logging level

    """
    setup_logging(level=log_level)

    with cli_error_handler("categories", "Failed to list categories"):
        config = load_config(config_path)
        title = (
            "Custom Member Order"
            if config.order is not None
            else "Default Member Order"
        )
        OutputFormatter().format_order(config.effective_order, title)


def validate_config_command(config_path: Path, log_level: str = "WARNING") -> None:
    """CLI command implementation for validating a configuration file.

    Args:
        config_path: Path to the YAML configuration file
        log_level: Logging level

    """
    setup_logging(level=log_level)

    with cli_error_handler("validate-config", "Configuration validation failed"):
        load_config(config_path)
        console.print(f"[green]✅ Configuration is valid: {config_path}[/green]")
        logger.info("Configuration %s validated", config_path)
