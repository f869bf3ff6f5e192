"""StateAuditor rule definitions."""

from .react import find_hook_use_state_issues

__all__ = [
    "find_hook_use_state_issues",
]
