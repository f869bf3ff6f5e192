"""React-specific rule detectors for StateAuditor.

This package contains syntax-tree rules for React hook conventions.
"""

from .hook_use_state_analyze import METADATA, find_hook_use_state_issues

__all__ = ["METADATA", "find_hook_use_state_issues"]
