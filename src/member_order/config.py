"""Configuration for the component member order rule."""

from pathlib import Path
from typing import Any, Self

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from member_order.categories import DEFAULT_ORDER
from member_order.errors import InvalidConfigurationError
from member_order.validator import validate_order_spec

RULE_NAME = "angular-component-order"

_DEFAULT_EXCLUDE = ("node_modules", "dist", ".git")


class MemberOrderConfig(BaseModel):
    """Configuration for the member order rule with Pydantic validation.

    Immutable, and extra fields are rejected so that misspelt options fail
    loudly instead of being ignored.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    order: tuple[str, ...] | None = Field(
        default=None,
        description="Custom category order (default order if None)",
    )
    max_file_size: int = Field(
        default=10 * 1024 * 1024,  # 10MB
        description="Skip files larger than this size in bytes",
        gt=0,
    )
    exclude: tuple[str, ...] = Field(
        default=_DEFAULT_EXCLUDE,
        description="Directory names skipped when expanding directories",
    )

    @field_validator("order")
    @classmethod
    def validate_order(cls, v: tuple[str, ...] | None) -> tuple[str, ...] | None:
        """Reject order entries outside the category vocabulary."""
        if v is not None:
            validate_order_spec(v)
        return v

    @property
    def effective_order(self) -> tuple[str, ...]:
        """Return the custom order, or the default order when none is set."""
        return self.order if self.order is not None else DEFAULT_ORDER

    @classmethod
    def from_properties(cls, properties: dict[str, Any]) -> Self:
        """Create configuration from a properties dictionary.

        Args:
            properties: Raw rule options containing:
                - order (list[str], optional): Custom category order.
                - max_file_size (int, optional): Maximum file size to process.
                - exclude (list[str], optional): Directory names to skip.

        Returns:
            Validated configuration object

        Raises:
            InvalidConfigurationError: If validation fails

        """
        try:
            return cls.model_validate(properties)
        except ValidationError as e:
            raise InvalidConfigurationError(
                f"Invalid member order configuration: {e}"
            ) from e

    @classmethod
    def from_file(cls, config_path: Path) -> Self:
        """Load configuration from a YAML file.

        Options may sit at the top level or under an ``angular-component-order``
        key.

        Raises:
            InvalidConfigurationError: If the file cannot be read, parsed or validated

        """
        try:
            with open(config_path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise InvalidConfigurationError(
                f"Failed to parse YAML config {config_path}: {e}"
            ) from e
        except OSError as e:
            raise InvalidConfigurationError(
                f"Failed to read config file {config_path}: {e}"
            ) from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise InvalidConfigurationError(
                f"Invalid configuration format in {config_path}"
            )

        properties = data.get(RULE_NAME, data)
        if not isinstance(properties, dict):
            raise InvalidConfigurationError(
                f"Invalid '{RULE_NAME}' section in {config_path}"
            )
        return cls.from_properties(properties)  # type: ignore[arg-type]
