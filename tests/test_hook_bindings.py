"""Tests for the binding resolver (stateauditor/hooks/bindings.py)."""

import pytest

from stateauditor.config import HookRuleConfig
from stateauditor.hooks.bindings import extract_import_bindings, resolve
from stateauditor.hooks.models import ImportBinding, RoleKind
from stateauditor.hooks.scopes import build_scope_tree

from conftest import dedent


class TestExtractImportBindings:
    """Import declarations become ImportBinding records."""

    def test_all_specifier_forms(self, parse):
        tree = parse(dedent("""
            import React, { useState, useMemo as memo } from 'react'
            import * as R from "react"
            import './side-effect.css'
        """))
        bindings = extract_import_bindings(tree.root_node)

        assert [(b.local_name, b.source_module, b.exported_name) for b in bindings] == [
            ("React", "react", "default"),
            ("useState", "react", "useState"),
            ("memo", "react", "useMemo"),
            ("R", "react", "namespace"),
        ]

    def test_specifier_span_covers_alias(self, parse):
        code = "import { useState as useLocal } from 'react'\n"
        tree = parse(code)
        (binding,) = extract_import_bindings(tree.root_node)
        assert code.encode()[binding.start_byte:binding.end_byte] == b"useState as useLocal"

    def test_type_only_imports_are_skipped(self, parse):
        tree = parse(dedent("""
            import type { useState } from 'react'
            import { type useMemo, useRef } from 'react'
        """), "typescript")
        bindings = extract_import_bindings(tree.root_node)
        assert [b.local_name for b in bindings] == ["useRef"]


class TestResolve:
    """RoleTable construction from ImportBindings."""

    def test_roles_from_tracked_module(self):
        roles = resolve([
            ImportBinding("React", "react", "default"),
            ImportBinding("R", "react", "namespace"),
            ImportBinding("useLocal", "react", "useState"),
            ImportBinding("memo", "react", "useMemo"),
            ImportBinding("useRef", "react", "useRef"),
        ])

        assert roles.role_of("React").kind is RoleKind.NAMESPACE
        assert roles.role_of("R").kind is RoleKind.NAMESPACE
        assert roles.role_of("useLocal").kind is RoleKind.INITIALIZER
        assert roles.role_of("memo").kind is RoleKind.MEMOIZER
        assert "useRef" not in roles
        assert roles.names_with(RoleKind.MEMOIZER) == ["memo"]

    def test_foreign_module_with_same_name_is_ignored(self):
        roles = resolve([
            ImportBinding("useState", "someOtherUseState", "default"),
            ImportBinding("useMemo", "preact/hooks", "useMemo"),
        ])
        assert not roles
        assert roles.role_of("useState") is None

    def test_configured_module_and_exports(self):
        config = HookRuleConfig(tracked_module="preact/hooks")
        roles = resolve([
            ImportBinding("useState", "react", "useState"),
            ImportBinding("useState2", "preact/hooks", "useState"),
        ], config)
        assert "useState" not in roles
        assert roles.role_of("useState2").kind is RoleKind.INITIALIZER

    def test_table_is_immutable(self):
        roles = resolve([ImportBinding("useState", "react", "useState")])
        with pytest.raises(TypeError):
            roles.roles["other"] = roles.role_of("useState")


class TestShadowedLookup:
    """RoleTable.lookup honours nested declarations."""

    CODE = dedent("""
        import { useState } from 'react'
        first()
        function shadowed() {
          function useState() {}
          second()
          if (x) {
            third()
          }
        }
        function clean() {
          fourth()
        }
    """)

    def _lookups(self, parse, find_nodes):
        tree = parse(self.CODE)
        root = tree.root_node
        roles = resolve(extract_import_bindings(root))
        scopes = build_scope_tree(root)
        calls = [c for c in find_nodes(root, "call_expression")]
        return [roles.lookup("useState", scopes.scope_for(c), scopes) for c in calls]

    def test_lookup_per_scope(self, parse, find_nodes):
        module_level, in_shadow, nested_in_shadow, sibling = self._lookups(parse, find_nodes)

        assert module_level.kind is RoleKind.INITIALIZER
        assert in_shadow is None
        assert nested_in_shadow is None
        assert sibling.kind is RoleKind.INITIALIZER
