"""Tests for the lexical scope tree (stateauditor/hooks/scopes.py)."""

from stateauditor.hooks.scopes import ScopeKind, build_scope_tree

from conftest import dedent


def _call_scope(parse, find_nodes, code, index=0, language="javascript"):
    tree = parse(dedent(code), language)
    scopes = build_scope_tree(tree.root_node)
    call = find_nodes(tree.root_node, "call_expression")[index]
    return scopes, scopes.scope_for(call)


class TestScopeTree:
    """Scope nesting and declaration placement."""

    def test_imports_declare_in_module_scope(self, parse):
        tree = parse(dedent("""
            import React, { useState as useLocalState } from 'react'
            import * as Other from 'other'
        """))
        scopes = build_scope_tree(tree.root_node)
        assert scopes.module.declarations >= {"React", "useLocalState", "Other"}

    def test_function_body_shares_function_scope(self, parse, find_nodes):
        scopes, scope = _call_scope(parse, find_nodes, """
            function useColor(initial) {
              const [color, setColor] = useState(initial)
            }
        """)
        assert scope.kind is ScopeKind.FUNCTION
        assert {"initial", "color", "setColor"} <= scope.declarations
        assert scope.parent is scopes.module
        assert "useColor" in scopes.module.declarations

    def test_nested_block_opens_scope(self, parse, find_nodes):
        _, scope = _call_scope(parse, find_nodes, """
            function f() {
              if (ready) {
                const value = compute()
              }
            }
        """)
        assert scope.kind is ScopeKind.BLOCK
        assert "value" in scope.declarations
        assert scope.parent.kind is ScopeKind.FUNCTION

    def test_var_hoists_to_function_scope(self, parse, find_nodes):
        scopes, scope = _call_scope(parse, find_nodes, """
            function f() {
              if (ready) {
                var useState = make()
              }
            }
        """)
        function_scope = scope.parent
        assert "useState" not in scope.declarations
        assert "useState" in function_scope.declarations
        assert scopes.declaring_scope("useState", scope) is function_scope

    def test_destructured_and_default_parameters(self, parse, find_nodes):
        _, scope = _call_scope(parse, find_nodes, """
            const f = ({ a, b: { c } }, [d, ...rest], e = 1) => g()
        """)
        assert scope.kind is ScopeKind.FUNCTION
        assert {"a", "c", "d", "rest", "e"} <= scope.declarations

    def test_single_arrow_parameter(self, parse, find_nodes):
        _, scope = _call_scope(parse, find_nodes, "const f = useState => useState()\n")
        assert "useState" in scope.declarations

    def test_catch_parameter(self, parse, find_nodes):
        _, scope = _call_scope(parse, find_nodes, """
            try {
              run()
            } catch (err) {
              report(err)
            }
        """, index=1)
        assert "err" in scope.parent.declarations

    def test_for_of_binding(self, parse, find_nodes):
        _, scope = _call_scope(parse, find_nodes, """
            for (const item of items) {
              use(item)
            }
        """)
        assert scopes_chain_declares(scope, "item")

    def test_named_function_expression_binds_its_own_name(self, parse, find_nodes):
        scopes, scope = _call_scope(parse, find_nodes, """
            const outer = function useState() {
              return useState()
            }
        """)
        assert "useState" in scope.declarations
        assert "useState" not in scopes.module.declarations

    def test_undeclared_name_has_no_declaring_scope(self, parse, find_nodes):
        scopes, scope = _call_scope(parse, find_nodes, "useState()\n")
        assert scope is scopes.module
        assert scopes.declaring_scope("useState", scope) is None


def scopes_chain_declares(scope, name):
    while scope is not None:
        if scope.declares(name):
            return True
        scope = scope.parent
    return False
