"""CLI command implementations for member order checks."""

from member_order.cli.check import (
    categories_command,
    check_command,
    validate_config_command,
)
from member_order.cli.errors import CLIError

__all__ = [
    "CLIError",
    "categories_command",
    "check_command",
    "validate_config_command",
]
