"""StateAuditor utilities package."""

from .constants import ERROR_LOG_FILE, PF_DIR, SKIP_DIRS
from .error_handler import handle_exceptions
from .exit_codes import ExitCodes
from .logging import logger

__all__ = [
    "PF_DIR",
    "ERROR_LOG_FILE",
    "SKIP_DIRS",
    "handle_exceptions",
    "ExitCodes",
    "logger",
]
