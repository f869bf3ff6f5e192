"""Centralized exit codes for the StateAuditor CLI."""


class ExitCodes:
    """Standard exit codes for StateAuditor CLI commands."""

    SUCCESS = 0

    FINDINGS_PRESENT = 1
