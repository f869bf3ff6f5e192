"""Fix proposal generator for misnamed or missing value + setter pairs."""

from stateauditor.config import DEFAULT_CONFIG, HookRuleConfig
from stateauditor.utils.logging import logger

from .bindings import RoleTable
from .models import CallSite, FixProposal, RoleKind, TextEdit, Verdict
from .nodes import node_text
from .patterns import value_name_for
from .scopes import ScopeTree

UNFIXABLE = frozenset([Verdict.VALID, Verdict.NOT_DESTRUCTURED, Verdict.EMPTY])


def rename_fix(site: CallSite, value_name: str, config: HookRuleConfig = DEFAULT_CONFIG) -> FixProposal:
    """Rewrite the pattern to exactly ``[value, setValue]``."""
    pattern = site.pattern
    text = f"[{value_name}, {config.expected_setter(value_name)}]"
    return FixProposal(edits=(TextEdit(pattern.start_byte, pattern.end_byte, text),))


def _memoizer_reference(
    site: CallSite, roles: RoleTable, scopes: ScopeTree, config: HookRuleConfig
) -> tuple[str, TextEdit | None] | None:
    """How the memoizer is spelled at the call site, plus any import edit.

    None when no reference can be made without colliding with a local name.
    """
    if site.is_namespace_call:
        return f"{site.namespace}.{config.memoizer_export}", None

    aliases = roles.names_with(RoleKind.MEMOIZER)
    if aliases:
        for alias in aliases:
            role = roles.lookup(alias, site.scope, scopes)
            if role is not None and role.kind is RoleKind.MEMOIZER:
                return alias, None
        logger.debug("Memoizer import is shadowed at the call site, skipping memo fix")
        return None

    canonical = config.memoizer_export
    if scopes.declaring_scope(canonical, site.scope) is not None:
        logger.debug("'{name}' is already declared, skipping memo fix", name=canonical)
        return None

    binding = roles.binding_of(site.callee_name)
    if binding is None:
        return None

    return canonical, TextEdit(binding.end_byte, binding.end_byte, f", {canonical}")


def memo_fix(
    site: CallSite,
    value_name: str,
    roles: RoleTable,
    scopes: ScopeTree,
    config: HookRuleConfig = DEFAULT_CONFIG,
) -> FixProposal | None:
    """Replace ``const [value] = useState(x)`` with ``const value = useMemo(() => x, [])``."""
    if site.arguments and site.arguments[0].type == "spread_element":
        return None

    reference = _memoizer_reference(site, roles, scopes, config)
    if reference is None:
        return None
    memo, import_edit = reference

    if site.arguments:
        first = site.arguments[0]
        body = node_text(first)
        if first.type == "object":
            body = f"({body})"
    else:
        body = "{}"

    pattern = site.pattern
    call = site.call
    edits = [
        TextEdit(pattern.start_byte, pattern.end_byte, value_name),
        TextEdit(call.start_byte, call.end_byte, f"{memo}(() => {body}, [])"),
    ]
    if import_edit is not None:
        edits.append(import_edit)

    return FixProposal(
        edits=tuple(sorted(edits, key=lambda e: e.start_byte)),
        description=f"Replace {config.initializer_export} call with {config.memoizer_export}",
    )


def generate_fixes(
    site: CallSite,
    verdict: Verdict,
    roles: RoleTable,
    scopes: ScopeTree,
    config: HookRuleConfig = DEFAULT_CONFIG,
) -> list[FixProposal]:
    """Ranked fix proposals for an invalid call site.

    The memoization proposal, when it applies, always comes first.
    """
    if verdict in UNFIXABLE or site.pattern is None:
        return []

    value_name = value_name_for(site.pattern, config)
    if value_name is None:
        return []

    proposals = [rename_fix(site, value_name, config)]

    if verdict is Verdict.VALUE_ONLY:
        memo = memo_fix(site, value_name, roles, scopes, config)
        if memo is not None:
            proposals.insert(0, memo)

    return proposals
