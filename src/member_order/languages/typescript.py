"""TypeScript class member extraction using tree-sitter-typescript."""

import logging

import tree_sitter_typescript as tsts
from tree_sitter import Language, Node, Parser

from member_order.languages.base import (
    find_child_by_type,
    find_children_by_type,
    find_nodes_by_types,
    get_node_text,
    get_position,
)
from member_order.models import (
    ClassDeclarationModel,
    DecoratorModel,
    MemberKind,
    MemberModel,
)

logger = logging.getLogger(__name__)

_DEFAULT_ENCODING = "utf-8"

# TypeScript file extensions
TS_EXTENSIONS = (".ts", ".tsx", ".mts", ".cts")

# TypeScript AST node types
_CLASS_TYPES = frozenset({"class_declaration", "abstract_class_declaration"})
_CLASS_BODY_TYPE = "class_body"
_DECORATOR_TYPE = "decorator"
_COMMENT_TYPE = "comment"
_PROPERTY_TYPES = frozenset({"public_field_definition", "field_definition"})
_METHOD_TYPES = frozenset(
    {"method_definition", "method_signature", "abstract_method_signature"}
)
_INDEX_SIGNATURE_TYPE = "index_signature"
_STATIC_BLOCK_TYPE = "class_static_block"
_SEMICOLON_TYPE = ";"

# Members whose trailing semicolon terminates them; any other semicolon in a
# class body is an empty class element
_TERMINATED_TYPES = _PROPERTY_TYPES | {
    _INDEX_SIGNATURE_TYPE,
    "method_signature",
    "abstract_method_signature",
}

# Member kinds that never carry a name
_UNNAMED_KINDS = frozenset({"index_signature", "static_block", "semicolon"})

_CONSTRUCTOR_NAME = "constructor"
_ANONYMOUS_CLASS_NAME = "<anonymous>"

# Tree-sitter TSX grammar handles both .ts and .tsx sources
_TSX_LANGUAGE = Language(tsts.language_tsx())


class TypeScriptMemberExtractor:
    """Extracts class declarations and their direct members from TypeScript.

    Members are reported in source order. Decorators are collected from the
    member node itself and from the decorator nodes placed directly before it
    in the class body, since the grammar attaches method decorators to the
    class body rather than the method.
    """

    def __init__(self) -> None:
        """Initialise the extractor with a TSX parser."""
        self._parser = Parser(_TSX_LANGUAGE)

    @staticmethod
    def get_tree_sitter_language() -> Language:
        """Return the tree-sitter TSX language binding."""
        return _TSX_LANGUAGE

    def parse(self, source_code: str) -> Node:
        """Parse source code and return the AST root node."""
        tree = self._parser.parse(source_code.encode(_DEFAULT_ENCODING))
        if tree.root_node.has_error:
            logger.debug("Source contains syntax errors, extracting what parsed")
        return tree.root_node

    def extract_classes(
        self, root_node: Node, source_code: str
    ) -> list[ClassDeclarationModel]:
        """Extract every class declaration, nested ones included, in document order.

        Args:
            root_node: The root node of the parsed AST
            source_code: The original source code string

        Returns:
            List of class declarations with their members

        """
        classes: list[ClassDeclarationModel] = []
        for node in find_nodes_by_types(root_node, _CLASS_TYPES):
            name_node = node.child_by_field_name("name")
            name = (
                get_node_text(name_node, source_code)
                if name_node
                else _ANONYMOUS_CLASS_NAME
            )
            line, _ = get_position(node)
            classes.append(
                ClassDeclarationModel(
                    name=name,
                    line=line,
                    members=tuple(self._extract_members(node, source_code)),
                )
            )
        return classes

    def extract_source(self, source_code: str) -> list[ClassDeclarationModel]:
        """Parse source code and extract its class declarations."""
        return self.extract_classes(self.parse(source_code), source_code)

    def _extract_members(self, class_node: Node, source_code: str) -> list[MemberModel]:
        body = class_node.child_by_field_name("body") or find_child_by_type(
            class_node, _CLASS_BODY_TYPE
        )
        if body is None:
            return []

        members: list[MemberModel] = []
        pending_decorators: list[DecoratorModel] = []
        previous_type: str | None = None
        for child in body.children:
            if child.type == _DECORATOR_TYPE:
                pending_decorators.append(self._extract_decorator(child, source_code))
                continue
            if child.type == _COMMENT_TYPE:
                continue

            kind = self._get_member_kind(child, previous_type, source_code)
            previous_type = child.type
            if kind is None:
                continue

            members.append(
                self._extract_member(child, kind, pending_decorators, source_code)
            )
            pending_decorators = []

        return members

    def _extract_member(
        self,
        node: Node,
        kind: MemberKind,
        leading_decorators: list[DecoratorModel],
        source_code: str,
    ) -> MemberModel:
        own_decorators = [
            self._extract_decorator(decorator, source_code)
            for decorator in find_children_by_type(node, _DECORATOR_TYPE)
        ]

        name_node = None if kind in _UNNAMED_KINDS else node.child_by_field_name("name")
        name = get_node_text(name_node, source_code) if name_node else None
        line, column = get_position(name_node or node)

        return MemberModel(
            kind=kind,
            name=name,
            decorators=(*leading_decorators, *own_decorators),
            is_static=self._is_static(node),
            line=line,
            column=column,
        )

    def _get_member_kind(
        self, node: Node, previous_type: str | None, source_code: str
    ) -> MemberKind | None:
        """Map a class body child to a member kind, or None to skip it.

        A semicolon is a member of its own unless it terminates the preceding
        field, index signature or signature declaration.
        """
        if node.type in _PROPERTY_TYPES:
            return "property"

        if node.type in _METHOD_TYPES:
            name_node = node.child_by_field_name("name")
            if name_node and get_node_text(name_node, source_code) == _CONSTRUCTOR_NAME:
                return "constructor"
            if self._has_keyword(node, "get"):
                return "getter"
            if self._has_keyword(node, "set"):
                return "setter"
            return "method"

        if node.type == _INDEX_SIGNATURE_TYPE:
            return "index_signature"

        if node.type == _STATIC_BLOCK_TYPE:
            return "static_block"

        if node.type == _SEMICOLON_TYPE and previous_type not in _TERMINATED_TYPES:
            return "semicolon"

        # Braces, commas and terminating semicolons
        return None

    def _extract_decorator(self, node: Node, source_code: str) -> DecoratorModel:
        """Extract the name and raw call arguments of a decorator node."""
        expression = next(
            (child for child in node.named_children if child.type != _COMMENT_TYPE),
            None,
        )
        if expression is None:
            return DecoratorModel(name="")

        arguments: tuple[str, ...] = ()
        if expression.type == "call_expression":
            arguments_node = expression.child_by_field_name("arguments")
            if arguments_node is not None:
                arguments = tuple(
                    get_node_text(argument, source_code)
                    for argument in arguments_node.named_children
                    if argument.type != _COMMENT_TYPE
                )

        return DecoratorModel(
            name=self._get_decorator_name(expression, source_code),
            arguments=arguments,
        )

    def _get_decorator_name(self, expression: Node, source_code: str) -> str:
        """Return the leftmost identifier of a decorator expression."""
        node: Node | None = expression
        while node is not None:
            if node.type == "call_expression":
                node = node.child_by_field_name("function")
            elif node.type == "member_expression":
                node = node.child_by_field_name("object")
            elif node.type == "parenthesized_expression":
                node = next(iter(node.named_children), None)
            else:
                return get_node_text(node, source_code)
        return ""

    def _is_static(self, node: Node) -> bool:
        """Check if a member has a static modifier."""
        return any(
            not child.is_named and child.type.startswith("static")
            for child in node.children
        )

    def _has_keyword(self, node: Node, keyword: str) -> bool:
        return any(
            not child.is_named and child.type == keyword for child in node.children
        )
