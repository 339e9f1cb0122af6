"""Python-standard logging configuration for member order checks.

This module provides centralized logging setup using logging.config.dictConfig()
with YAML configuration files stored in member_order/resources/.
"""

from __future__ import annotations

import logging
import logging.config
import sys
from pathlib import Path
from typing import Any, cast

import yaml

_CONFIG_DIR = Path(__file__).parent / "resources"
_DEFAULT_CONFIG_NAME = "logging"


class LoggingError(Exception):
    """Exception raised for logging configuration errors."""

    pass


def get_config_path(config_name: str | None = None) -> Path:
    """Get the path to a bundled logging configuration file.

    Args:
        config_name: Name of config file (without extension)

    Returns:
        Path to the logging configuration file

    Raises:
        LoggingError: If no suitable configuration file is found

    """
    config_path = _CONFIG_DIR / f"{config_name or _DEFAULT_CONFIG_NAME}.yaml"

    if not config_path.exists():
        raise LoggingError(
            f"No logging configuration found. Expected at: {config_path}"
        )

    return config_path


def load_config(config_path: Path) -> dict[str, Any]:
    """Load logging configuration from YAML file.

    Args:
        config_path: Path to the YAML configuration file

    Returns:
        Logging configuration dictionary

    Raises:
        LoggingError: If configuration cannot be loaded or parsed

    """
    try:
        with open(config_path, encoding="utf-8") as f:
            config = yaml.safe_load(f)

        if not isinstance(config, dict):
            raise LoggingError(f"Invalid configuration format in {config_path}")

        return config  # type: ignore[return-value]

    except yaml.YAMLError as e:
        raise LoggingError(f"Failed to parse YAML config {config_path}: {e}") from e
    except OSError as e:
        raise LoggingError(f"Failed to read config file {config_path}: {e}") from e


def _apply_level_override(config: dict[str, Any], level: str) -> None:
    """Set the level on every configured logger and lower handler levels to match."""
    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        raise LoggingError(f"Invalid log level: {level}")

    level = level.upper()
    for logger_name in config.get("loggers", {}):
        config["loggers"][logger_name]["level"] = level

    if "root" in config:
        config["root"]["level"] = level

    # Handlers filter out messages below their own level
    for handler_name, handler_config in config.get("handlers", {}).items():
        if isinstance(handler_config, dict) and "level" in handler_config:
            handler_level_str = cast(str, handler_config["level"])
            current_handler_level = getattr(logging, handler_level_str, logging.INFO)
            if numeric_level < current_handler_level:
                config["handlers"][handler_name]["level"] = level


def setup_logging(
    config_path: Path | str | None = None,
    level: str | None = None,
    force_basic: bool = False,
) -> None:
    """Configure logging using Python standard dictConfig.

    Falls back to basic stderr logging if the configuration cannot be applied.

    Args:
        config_path: Path to logging configuration file
        level: Override log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        force_basic: Force basic console logging (fallback mode)

    """
    if force_basic:
        _setup_basic_logging(level or "WARNING")
        return

    try:
        if isinstance(config_path, str):
            config_path = Path(config_path)
        elif config_path is None:
            config_path = get_config_path()

        config = load_config(config_path)
        if level:
            _apply_level_override(config, level)

        logging.config.dictConfig(config)

        logger = logging.getLogger(__name__)
        logger.debug("Logging configured from: %s", config_path)

    except (LoggingError, KeyError, ValueError, TypeError) as e:
        fallback_level = level or "WARNING"
        _setup_basic_logging(fallback_level)

        fallback_logger = logging.getLogger(__name__)
        fallback_logger.warning(
            "Failed to configure logging from file (%s), using basic console logging at %s level",
            e,
            fallback_level,
        )


def _setup_basic_logging(level: str) -> None:
    """Set up basic console logging as fallback.

    Args:
        level: Logging level string

    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
        force=True,
    )
