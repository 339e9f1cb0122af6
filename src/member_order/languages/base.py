"""Base utility functions for tree-sitter AST traversal."""

from tree_sitter import Node

_DEFAULT_ENCODING = "utf-8"

# Line and column offset (tree-sitter uses 0-based, we want 1-based)
POSITION_OFFSET = 1


def get_node_text(node: Node, source_code: str) -> str:
    """Get the text content of an AST node.

    Args:
        node: Tree-sitter node with start_byte and end_byte attributes
        source_code: Original source code string

    Returns:
        Text content of the node

    """
    source_bytes = source_code.encode(_DEFAULT_ENCODING)
    return source_bytes[node.start_byte : node.end_byte].decode(_DEFAULT_ENCODING)


def find_nodes_by_types(node: Node, node_types: frozenset[str]) -> list[Node]:
    """Find all descendant nodes whose type is in a set, in document order."""
    results: list[Node] = []
    _collect_nodes_by_type(node, node_types, results)
    return results


def find_child_by_type(node: Node, child_type: str) -> Node | None:
    """Find the first direct child of a specific type.

    Args:
        node: Parent node to search in
        child_type: Type of child node to find

    Returns:
        First matching child node or None

    """
    for child in node.children:
        if child.type == child_type:
            return child
    return None


def find_children_by_type(node: Node, child_type: str) -> list[Node]:
    """Find all direct children of a specific type."""
    return [child for child in node.children if child.type == child_type]


def get_position(node: Node) -> tuple[int, int]:
    """Return the 1-based (line, column) where a node starts."""
    row, column = node.start_point
    return row + POSITION_OFFSET, column + POSITION_OFFSET


def _collect_nodes_by_type(
    node: Node, node_types: frozenset[str], results: list[Node]
) -> None:
    if node.type in node_types:
        results.append(node)

    for child in node.children:
        _collect_nodes_by_type(child, node_types, results)
