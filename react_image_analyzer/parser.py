"""Source parsing and markup tree walking for component files."""

from __future__ import annotations

from typing import Iterable, Iterator, List, Optional

import tree_sitter_typescript
from tree_sitter import Language, Node, Parser, Tree

from .config import REQUIRED_ATTRIBUTE, TARGET_TAG
from .models import MarkupAttribute, MarkupElement, SourceParseError

# The TSX grammar is a superset covering plain scripts, embedded markup and
# type annotations, so one grammar serves every supported extension.
TSX_LANGUAGE = Language(tree_sitter_typescript.language_tsx())

MARKUP_NODE_TYPES = frozenset({"jsx_element", "jsx_self_closing_element"})


def _first_error(root: Node) -> Optional[Node]:
    stack = [root]
    while stack:
        node = stack.pop()
        if node.is_error or node.is_missing:
            return node
        stack.extend(child for child in reversed(node.children) if child.has_error or child.is_missing)
    return None


def parse_source(text: str) -> Tree:
    """Parse source text, raising SourceParseError if it is not valid syntax."""
    parser = Parser(TSX_LANGUAGE)
    tree = parser.parse(text.encode("utf-8"))
    if tree.root_node.has_error:
        error = _first_error(tree.root_node) or tree.root_node
        row, column = error.start_point
        kind = "Missing token" if error.is_missing else "Unexpected token"
        raise SourceParseError(kind, line=row + 1, column=column + 1)
    return tree


def _node_text(node: Node) -> str:
    return node.text.decode("utf-8") if node.text is not None else ""


def _opening_tag(node: Node) -> Node:
    if node.type == "jsx_self_closing_element":
        return node
    opening = node.child_by_field_name("open_tag")
    if opening is not None:
        return opening
    return next(child for child in node.named_children if child.type == "jsx_opening_element")


def _attribute_from_node(node: Node) -> MarkupAttribute:
    name_node, *value_nodes = node.named_children
    return MarkupAttribute(name=_node_text(name_node), has_value=bool(value_nodes))


def _element_from_node(node: Node) -> MarkupElement:
    tag = _opening_tag(node)
    name_node = tag.child_by_field_name("name")
    attributes = tuple(
        _attribute_from_node(child)
        for child in tag.named_children
        if child.type == "jsx_attribute"
    )
    return MarkupElement(
        tag_name=_node_text(name_node) if name_node is not None else None,
        attributes=attributes,
    )


def build_markup_tree(root: Node) -> List[MarkupElement]:
    """Map a syntax tree to the markup elements it contains.

    Each element's children are every markup element nested anywhere beneath
    it, including markup inside attribute and child expressions. Elements are
    kept in document order at every level.
    """
    roots: List[MarkupElement] = []
    stack = [(root, roots)]
    while stack:
        node, siblings = stack.pop()
        target = siblings
        if node.type in MARKUP_NODE_TYPES:
            element = _element_from_node(node)
            siblings.append(element)
            target = element.children
        stack.extend((child, target) for child in reversed(node.named_children))
    return roots


def iter_elements(roots: Iterable[MarkupElement]) -> Iterator[MarkupElement]:
    """Yield every element depth-first, outer elements before their children."""
    stack = list(reversed(list(roots)))
    while stack:
        element = stack.pop()
        yield element
        stack.extend(reversed(element.children))


def find_elements(roots: Iterable[MarkupElement], tag_name: str = TARGET_TAG) -> List[MarkupElement]:
    return [element for element in iter_elements(roots) if element.tag_name == tag_name]


def has_attribute(element: MarkupElement, name: str = REQUIRED_ATTRIBUTE) -> bool:
    return any(attribute.name == name for attribute in element.attributes)


def scan_markup(text: str, tag_name: str = TARGET_TAG) -> List[MarkupElement]:
    """Parse source text and return its ``tag_name`` elements in document order."""
    tree = parse_source(text)
    return find_elements(build_markup_tree(tree.root_node), tag_name)
