"""Pytest configuration and fixtures."""
import textwrap

import pytest

from stateauditor.ast_parser import ASTParser
from stateauditor.config import DEFAULT_CONFIG
from stateauditor.hooks.nodes import iter_preorder
from stateauditor.rules.react.hook_use_state_analyze import analyze_content


def dedent(code: str) -> str:
    """Strip the common indentation of an inline source snippet."""
    return textwrap.dedent(code).lstrip("\n")


@pytest.fixture(scope="session")
def parser():
    """One parser for the whole run; loading grammars is the slow part."""
    return ASTParser()


@pytest.fixture
def parse(parser):
    """Parse a snippet and return the tree-sitter tree."""

    def _parse(code: str, language: str = "javascript"):
        return parser.parse_content(code, language)["tree"]

    return _parse


@pytest.fixture
def analyze(parser):
    """Run the full engine over a snippet and return its diagnostics."""

    def _analyze(code: str, language: str = "javascript", config=DEFAULT_CONFIG):
        return analyze_content(code, language, config, parser)

    return _analyze


@pytest.fixture
def find_nodes():
    """All nodes of one type under a root, in document order."""

    def _find(root, node_type: str):
        return [node for node in iter_preorder(root) if node.type == node_type]

    return _find
