"""Framework-aware class member order checking for Angular components.

Classifies class members (inputs, outputs, host bindings, queries, lifecycle
hooks, listeners, plain properties and methods) and reports members declared
out of the canonical order.
"""

__version__ = "0.1.0"

from member_order.categories import DEFAULT_ORDER, LIFECYCLE_HOOKS, UNKNOWN
from member_order.checker import MemberOrderChecker
from member_order.classifier import classify
from member_order.config import MemberOrderConfig
from member_order.errors import (
    InvalidConfigurationError,
    MemberOrderError,
    ParserError,
)
from member_order.models import (
    ClassDeclarationModel,
    DecoratorModel,
    FindingModel,
    MemberModel,
    ViolationModel,
)
from member_order.validator import find_violations, validate_order_spec

__all__ = [
    "DEFAULT_ORDER",
    "LIFECYCLE_HOOKS",
    "UNKNOWN",
    "ClassDeclarationModel",
    "DecoratorModel",
    "FindingModel",
    "InvalidConfigurationError",
    "MemberModel",
    "MemberOrderChecker",
    "MemberOrderConfig",
    "MemberOrderError",
    "ParserError",
    "ViolationModel",
    "classify",
    "find_violations",
    "validate_order_spec",
]
