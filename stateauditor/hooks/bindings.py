"""Binding resolver: which local names stand for the tracked hook exports."""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from stateauditor.config import DEFAULT_CONFIG, HookRuleConfig
from stateauditor.utils.logging import logger

from .models import ImportBinding, ResolvedRole, RoleKind
from .nodes import import_source, iter_import_specifiers
from .scopes import Scope, ScopeTree


def extract_import_bindings(root: Any) -> list[ImportBinding]:
    """Collect every value import specifier of a module, in document order."""
    bindings = []

    for statement in root.named_children:
        if statement.type != "import_statement":
            continue

        module = import_source(statement)
        if module is None:
            continue

        for local_name, exported_name, spec in iter_import_specifiers(statement):
            bindings.append(
                ImportBinding(
                    local_name=local_name,
                    source_module=module,
                    exported_name=exported_name,
                    start_byte=spec.start_byte,
                    end_byte=spec.end_byte,
                )
            )

    return bindings


@dataclass(frozen=True)
class RoleTable:
    """Immutable mapping of module-level local names to tracked roles."""

    roles: Mapping[str, ResolvedRole] = field(default_factory=dict)
    bindings: Mapping[str, ImportBinding] = field(default_factory=dict)

    def __bool__(self) -> bool:
        return bool(self.roles)

    def __contains__(self, name: str) -> bool:
        return name in self.roles

    def role_of(self, name: str) -> ResolvedRole | None:
        """Role of a name at module level, ignoring shadowing."""
        return self.roles.get(name)

    def binding_of(self, name: str) -> ImportBinding | None:
        return self.bindings.get(name)

    def names_with(self, kind: RoleKind) -> list[str]:
        return [name for name, role in self.roles.items() if role.kind is kind]

    def lookup(self, name: str, scope: Scope, scopes: ScopeTree) -> ResolvedRole | None:
        """Role of ``name`` as seen from ``scope``.

        Any declaration of the name in a nested scope hides the import.
        """
        role = self.roles.get(name)
        if role is None:
            return None

        declaring = scopes.declaring_scope(name, scope)
        if declaring is not None and not declaring.is_module:
            logger.debug("'{name}' is shadowed by a nested declaration", name=name)
            return None

        return role


def resolve(
    import_bindings: Iterable[ImportBinding], config: HookRuleConfig = DEFAULT_CONFIG
) -> RoleTable:
    """Build the role table from a file's import bindings.

    Imports from modules other than the tracked one never register a role,
    even when their local names match a tracked export.
    """
    roles: dict[str, ResolvedRole] = {}
    bindings: dict[str, ImportBinding] = {}

    for binding in import_bindings:
        if binding.source_module != config.tracked_module:
            continue

        if binding.exported_name in ("default", "namespace"):
            kind = RoleKind.NAMESPACE
        elif binding.exported_name == config.initializer_export:
            kind = RoleKind.INITIALIZER
        elif binding.exported_name == config.memoizer_export:
            kind = RoleKind.MEMOIZER
        else:
            continue

        roles[binding.local_name] = ResolvedRole(kind, binding.local_name)
        bindings[binding.local_name] = binding

    if roles:
        logger.debug(
            "Resolved {count} tracked binding(s) from '{module}'",
            count=len(roles),
            module=config.tracked_module,
        )

    return RoleTable(MappingProxyType(roles), MappingProxyType(bindings))
