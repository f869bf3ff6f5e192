"""Small helpers over tree-sitter nodes."""

from collections.abc import Iterator
from typing import Any

FUNCTION_TYPES = frozenset(
    [
        "function_declaration",
        "generator_function_declaration",
        "function_expression",
        "function",
        "generator_function",
        "arrow_function",
        "method_definition",
    ]
)


def node_text(node: Any) -> str:
    """Decode a node's source text."""
    if node is None:
        return ""
    return node.text.decode("utf-8", errors="ignore")


def string_value(node: Any) -> str:
    """Text of a string literal node without its quotes."""
    text = node_text(node)
    if len(text) >= 2 and text[0] in "'\"`" and text[-1] == text[0]:
        return text[1:-1]
    return text


def iter_preorder(root: Any) -> Iterator[Any]:
    """Yield every node under root in document order."""
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children))


def unwrap_parent(node: Any) -> tuple[Any, Any]:
    """Walk up through parenthesized expressions.

    Returns (outermost wrapped node, its real parent).
    """
    child = node
    parent = node.parent
    while parent is not None and parent.type == "parenthesized_expression":
        child = parent
        parent = parent.parent
    return child, parent


def same_node(a: Any, b: Any) -> bool:
    if a is None or b is None:
        return False
    return (a.start_byte, a.end_byte, a.type) == (b.start_byte, b.end_byte, b.type)


def import_source(statement: Any) -> str | None:
    """Module specifier of an import_statement."""
    source = statement.child_by_field_name("source")
    if source is None:
        return None
    return string_value(source)


def is_type_only(node: Any) -> bool:
    """True for ``import type ...`` statements and ``{ type X }`` specifiers."""
    return any(child.type in ("type", "typeof") for child in node.children)


def iter_import_specifiers(statement: Any) -> Iterator[tuple[str, str, Any]]:
    """Yield (local_name, exported_name, node) for each value specifier.

    Default imports give exported_name "default", namespace imports
    "namespace". Type-only imports are skipped.
    """
    if is_type_only(statement):
        return

    for clause in statement.named_children:
        if clause.type != "import_clause":
            continue

        for part in clause.named_children:
            if part.type == "identifier":
                yield node_text(part), "default", part

            elif part.type == "namespace_import":
                for ident in part.named_children:
                    if ident.type == "identifier":
                        yield node_text(ident), "namespace", part

            elif part.type == "named_imports":
                for spec in part.named_children:
                    if spec.type != "import_specifier" or is_type_only(spec):
                        continue
                    name = spec.child_by_field_name("name")
                    alias = spec.child_by_field_name("alias")
                    if name is None:
                        continue
                    exported = string_value(name)
                    local = node_text(alias) if alias is not None else exported
                    yield local, exported, spec


def pattern_names(node: Any) -> list[str]:
    """Every identifier a binding target declares."""
    if node is None:
        return []

    kind = node.type
    if kind in ("identifier", "shorthand_property_identifier_pattern"):
        return [node_text(node)]

    if kind in ("assignment_pattern", "object_assignment_pattern"):
        return pattern_names(node.child_by_field_name("left"))

    if kind == "pair_pattern":
        return pattern_names(node.child_by_field_name("value"))

    if kind in ("required_parameter", "optional_parameter"):
        return pattern_names(node.child_by_field_name("pattern"))

    if kind in ("array_pattern", "object_pattern", "rest_pattern", "formal_parameters"):
        names = []
        for child in node.named_children:
            names.extend(pattern_names(child))
        return names

    return []
