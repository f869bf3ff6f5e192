"""Per-file driver for the useState naming check.

Wires the resolver, matcher, validator and fix generator together. Holds no
state between calls, so files can be analyzed in any order or in parallel.
"""

from typing import Any

from stateauditor.config import DEFAULT_CONFIG, HookRuleConfig
from stateauditor.utils.logging import logger

from .bindings import extract_import_bindings, resolve
from .callsites import find_call_sites
from .fixes import generate_fixes
from .models import USE_STATE_MESSAGE, Diagnostic, PatternKind, SourceLocation
from .patterns import validate
from .scopes import build_scope_tree


def diagnostic_message(config: HookRuleConfig = DEFAULT_CONFIG) -> str:
    if config.initializer_export == DEFAULT_CONFIG.initializer_export:
        return USE_STATE_MESSAGE
    return f"{config.initializer_export} call is not destructured into value + setter pair"


def analyze_tree(tree: Any, config: HookRuleConfig = DEFAULT_CONFIG) -> list[Diagnostic]:
    """Diagnostics for one parsed file, in document order."""
    root = tree.root_node
    roles = resolve(extract_import_bindings(root), config)
    if not roles:
        return []

    scopes = build_scope_tree(root)
    message = diagnostic_message(config)
    diagnostics = []

    for site in find_call_sites(root, scopes, roles, config):
        if site.pattern is None:
            continue

        verdict = validate(site.pattern, config)
        if verdict.is_valid:
            continue

        if site.pattern.kind is PatternKind.POSITIONAL:
            location = SourceLocation.from_node(site.declarator.child_by_field_name("name"))
        else:
            location = SourceLocation.from_node(site.call)

        fixes = generate_fixes(site, verdict, roles, scopes, config)
        logger.debug(
            "{verdict} pattern at line {line} with {count} fix(es)",
            verdict=verdict.value,
            line=location.line,
            count=len(fixes),
        )
        diagnostics.append(Diagnostic(message, location, verdict, tuple(fixes)))

    return diagnostics
