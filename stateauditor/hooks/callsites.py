"""Call-site matcher for the tracked initializer."""

from typing import Any

from stateauditor.config import DEFAULT_CONFIG, HookRuleConfig
from stateauditor.utils.logging import logger

from .bindings import RoleTable
from .models import BindingPattern, CallSite, PatternKind, RoleKind, Slot
from .nodes import iter_preorder, node_text, same_node, unwrap_parent
from .scopes import ScopeTree


def classify_pattern(target: Any) -> BindingPattern:
    """Turn a declarator's target node into a BindingPattern.

    Every comma closes one slot; a slot with no element is a hole. An
    element after the last comma opens one more slot, so ``[a,]`` has one
    slot and ``[, , , ,]`` four.
    """
    if target.type != "array_pattern":
        kind = PatternKind.IDENTIFIER if target.type == "identifier" else PatternKind.OBJECT
        return BindingPattern(kind, (), target.start_byte, target.end_byte)

    slots = []
    current = None
    for child in target.children:
        if child.type in ("[", "]", "comment"):
            continue
        if child.type == ",":
            slots.append(current if current is not None else Slot.elided())
            current = None
        elif child.type == "identifier":
            current = Slot.identifier(node_text(child))
        else:
            current = Slot.other()

    if current is not None:
        slots.append(current)

    return BindingPattern(PatternKind.POSITIONAL, tuple(slots), target.start_byte, target.end_byte)


def _enclosing_declarator(call: Any) -> Any | None:
    """Declarator whose whole initializer is this call, if any."""
    wrapped, parent = unwrap_parent(call)
    if parent is None or parent.type != "variable_declarator":
        return None

    if not same_node(parent.child_by_field_name("value"), wrapped):
        return None

    return parent


def match_call(
    call: Any, scopes: ScopeTree, roles: RoleTable, config: HookRuleConfig = DEFAULT_CONFIG
) -> CallSite | None:
    """Return a CallSite when ``call`` invokes the tracked initializer."""
    callee = call.child_by_field_name("function")
    if callee is None:
        return None

    scope = scopes.scope_for(call)
    callee_name = None
    namespace = None

    if callee.type == "identifier":
        name = node_text(callee)
        role = roles.lookup(name, scope, scopes)
        if role is None or role.kind is not RoleKind.INITIALIZER:
            return None
        callee_name = name

    elif callee.type == "member_expression":
        obj = callee.child_by_field_name("object")
        prop = callee.child_by_field_name("property")
        if obj is None or prop is None or obj.type != "identifier":
            return None
        if node_text(prop) != config.initializer_export:
            return None
        name = node_text(obj)
        role = roles.lookup(name, scope, scopes)
        if role is None or role.kind is not RoleKind.NAMESPACE:
            return None
        namespace = name

    else:
        return None

    args_node = call.child_by_field_name("arguments")
    arguments = ()
    if args_node is not None:
        arguments = tuple(arg for arg in args_node.named_children if arg.type != "comment")

    declarator = _enclosing_declarator(call)
    pattern = None
    if declarator is not None:
        target = declarator.child_by_field_name("name")
        if target is not None:
            pattern = classify_pattern(target)

    return CallSite(
        call=call,
        callee=callee,
        arguments=arguments,
        scope=scope,
        pattern=pattern,
        declarator=declarator,
        callee_name=callee_name,
        namespace=namespace,
    )


def find_call_sites(
    root: Any, scopes: ScopeTree, roles: RoleTable, config: HookRuleConfig = DEFAULT_CONFIG
) -> list[CallSite]:
    """All tracked initializer calls under root, in document order."""
    sites = []

    if not roles:
        return sites

    for node in iter_preorder(root):
        if node.type != "call_expression":
            continue

        site = match_call(node, scopes, roles, config)
        if site is None:
            continue

        logger.debug(
            "Matched {callee} call at line {line}",
            callee=node_text(site.callee),
            line=node.start_point[0] + 1,
        )
        sites.append(site)

    return sites
