"""Language support for extracting class members from source code."""

from member_order.languages.base import (
    find_child_by_type,
    find_children_by_type,
    find_nodes_by_types,
    get_node_text,
    get_position,
)
from member_order.languages.typescript import TS_EXTENSIONS, TypeScriptMemberExtractor

__all__ = [
    # Base utilities
    "find_child_by_type",
    "find_children_by_type",
    "find_nodes_by_types",
    "get_node_text",
    "get_position",
    # TypeScript
    "TS_EXTENSIONS",
    "TypeScriptMemberExtractor",
]
