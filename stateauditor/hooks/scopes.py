"""Lexical scope tree for one parsed file.

Built in a single pass over the tree. Each scope holds the names declared
directly in it; lookups walk from a node's innermost scope outward and stop
at the first scope declaring the name. Declarations are lexical, not flow
sensitive: a declaration anywhere in a scope shadows the whole scope.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .nodes import FUNCTION_TYPES, iter_import_specifiers, node_text, pattern_names

BLOCK_SCOPE_TYPES = frozenset(
    ["statement_block", "for_statement", "for_in_statement", "catch_clause", "switch_body"]
)

NAMED_EXPRESSION_TYPES = frozenset(["function_expression", "function", "generator_function"])

CLASS_DECLARATION_TYPES = frozenset(["class_declaration", "abstract_class_declaration"])

FUNCTION_DECLARATION_TYPES = frozenset(
    ["function_declaration", "generator_function_declaration"]
)


class ScopeKind(Enum):
    MODULE = "module"
    FUNCTION = "function"
    BLOCK = "block"
    CLASS = "class"


@dataclass(eq=False)
class Scope:
    kind: ScopeKind
    parent: "Scope | None" = None
    declarations: set[str] = field(default_factory=set)

    @property
    def is_module(self) -> bool:
        return self.parent is None

    def declares(self, name: str) -> bool:
        return name in self.declarations

    def hoist_target(self) -> "Scope":
        """Nearest function or module scope, where ``var`` declarations land."""
        scope = self
        while scope.kind not in (ScopeKind.FUNCTION, ScopeKind.MODULE):
            scope = scope.parent
        return scope


def _key(node: Any) -> tuple[int, int, str]:
    return (node.start_byte, node.end_byte, node.type)


class ScopeTree:
    """Maps scope-opening nodes to their Scope."""

    def __init__(self, root: Any):
        self.module = Scope(ScopeKind.MODULE)
        self._scopes: dict[tuple[int, int, str], Scope] = {_key(root): self.module}

    def __len__(self) -> int:
        return len(self._scopes)

    def open_scope(self, node: Any, kind: ScopeKind, parent: Scope) -> Scope:
        scope = Scope(kind, parent)
        self._scopes[_key(node)] = scope
        return scope

    def scope_for(self, node: Any) -> Scope:
        """Innermost scope containing node."""
        current = node
        while current is not None:
            scope = self._scopes.get(_key(current))
            if scope is not None:
                return scope
            current = current.parent
        return self.module

    def declaring_scope(self, name: str, scope: Scope) -> Scope | None:
        """First scope from ``scope`` outward that declares ``name``."""
        current = scope
        while current is not None:
            if current.declares(name):
                return current
            current = current.parent
        return None


def _opens_scope(node: Any) -> ScopeKind | None:
    kind = node.type
    if kind in FUNCTION_TYPES:
        return ScopeKind.FUNCTION

    if kind == "statement_block":
        parent = node.parent
        if parent is not None and parent.type in FUNCTION_TYPES:
            return None
        return ScopeKind.BLOCK

    if kind in BLOCK_SCOPE_TYPES:
        return ScopeKind.BLOCK

    if kind == "class" and node.child_by_field_name("name") is not None:
        return ScopeKind.CLASS

    return None


def _declare(node: Any, outer: Scope, inner: Scope, tree: ScopeTree) -> None:
    """Record the names ``node`` declares.

    outer is the scope node sits in; inner the scope it opens (or outer).
    """
    kind = node.type

    if kind == "variable_declaration":
        target = outer.hoist_target()
        for declarator in node.named_children:
            if declarator.type == "variable_declarator":
                target.declarations.update(pattern_names(declarator.child_by_field_name("name")))

    elif kind == "lexical_declaration":
        for declarator in node.named_children:
            if declarator.type == "variable_declarator":
                outer.declarations.update(pattern_names(declarator.child_by_field_name("name")))

    elif kind in FUNCTION_DECLARATION_TYPES or kind in CLASS_DECLARATION_TYPES:
        name = node.child_by_field_name("name")
        if name is not None:
            outer.declarations.add(node_text(name))

    elif kind == "class":
        name = node.child_by_field_name("name")
        if name is not None:
            inner.declarations.add(node_text(name))

    elif kind == "catch_clause":
        inner.declarations.update(pattern_names(node.child_by_field_name("parameter")))

    elif kind == "for_in_statement":
        declaration_kind = node.child_by_field_name("kind")
        if declaration_kind is not None:
            target = inner.hoist_target() if node_text(declaration_kind) == "var" else inner
            target.declarations.update(pattern_names(node.child_by_field_name("left")))

    elif kind == "import_statement":
        for local_name, _, _ in iter_import_specifiers(node):
            tree.module.declarations.add(local_name)

    if kind in FUNCTION_TYPES:
        if kind in NAMED_EXPRESSION_TYPES:
            name = node.child_by_field_name("name")
            if name is not None:
                inner.declarations.add(node_text(name))

        inner.declarations.update(pattern_names(node.child_by_field_name("parameters")))
        inner.declarations.update(pattern_names(node.child_by_field_name("parameter")))


def build_scope_tree(root: Any) -> ScopeTree:
    """Build the scope tree of one file in a single traversal."""
    tree = ScopeTree(root)
    stack = [(root, tree.module)]

    while stack:
        node, scope = stack.pop()

        inner = scope
        if node is not root:
            kind = _opens_scope(node)
            if kind is not None:
                inner = tree.open_scope(node, kind, scope)

        _declare(node, scope, inner, tree)

        for child in reversed(node.children):
            stack.append((child, inner))

    return tree
