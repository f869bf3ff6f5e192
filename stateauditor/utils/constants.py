"""Centralized constants for the StateAuditor utils package."""

from pathlib import Path

# ============================================================================
# OUTPUT DIRECTORIES
# ============================================================================

PF_DIR = Path("./.pf")

ERROR_LOG_FILE = PF_DIR / "error.log"

# ============================================================================
# FILE DISCOVERY
# ============================================================================

SKIP_DIRS = frozenset(
    [
        "node_modules",
        ".git",
        ".pf",
        "dist",
        "build",
        "coverage",
        "__pycache__",
    ]
)
