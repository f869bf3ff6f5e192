"""useState value + setter naming engine.

Operates on one tree-sitter syntax tree at a time and never touches files.
"""

from .bindings import RoleTable, extract_import_bindings, resolve
from .callsites import classify_pattern, find_call_sites, match_call
from .engine import analyze_tree
from .fixes import generate_fixes
from .models import (
    USE_STATE_MESSAGE,
    BindingPattern,
    CallSite,
    Diagnostic,
    FixProposal,
    ImportBinding,
    PatternKind,
    ResolvedRole,
    RoleKind,
    Slot,
    SlotKind,
    SourceLocation,
    TextEdit,
    Verdict,
)
from .patterns import validate
from .scopes import ScopeTree, build_scope_tree

__all__ = [
    "USE_STATE_MESSAGE",
    "BindingPattern",
    "CallSite",
    "Diagnostic",
    "FixProposal",
    "ImportBinding",
    "PatternKind",
    "ResolvedRole",
    "RoleKind",
    "RoleTable",
    "ScopeTree",
    "Slot",
    "SlotKind",
    "SourceLocation",
    "TextEdit",
    "Verdict",
    "analyze_tree",
    "build_scope_tree",
    "classify_pattern",
    "extract_import_bindings",
    "find_call_sites",
    "generate_fixes",
    "match_call",
    "resolve",
    "validate",
]
