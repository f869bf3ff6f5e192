"""Central UI handler for StateAuditor.

Single source of truth for Rich console styling. Import this instead of
instantiating Console() in every command file.
"""

import sys

from rich.console import Console
from rich.table import Table
from rich.theme import Theme

AUDITOR_THEME = Theme({
    "info": "bold cyan",
    "warning": "bold yellow",
    "error": "bold red",
    "success": "bold green",
    "low": "cyan",
    "path": "bold cyan",
    "dim": "dim white",
})

console = Console(
    theme=AUDITOR_THEME,
    force_terminal=sys.stdout.isatty()
)


def print_success(msg: str) -> None:
    """Print a success message in green."""
    console.print(f"[success]OK:[/success] {msg}")


def findings_table(findings: list[dict], max_rows: int = 50) -> Table:
    """Tabulate finding dicts as produced by StandardFinding.to_dict()."""
    table = Table(show_lines=False)
    table.add_column("Location", style="path", no_wrap=True)
    table.add_column("Severity", style="low")
    table.add_column("Message")
    table.add_column("Code", style="dim")

    for finding in findings[:max_rows]:
        table.add_row(
            f"{finding['file']}:{finding['line']}:{finding['column']}",
            finding["severity"],
            finding["message"],
            finding.get("code_snippet", ""),
        )

    return table
