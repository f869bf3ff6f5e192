"""Check JS/TS sources for useState value + setter naming."""

import json
from pathlib import Path

import click

from stateauditor.ast_parser import ASTParser, language_for_path
from stateauditor.config import load_config
from stateauditor.rules.react.hook_use_state_analyze import (
    METADATA,
    analyze_context,
    apply_default_fixes,
    build_context,
    diagnostic_to_finding,
)
from stateauditor.ui import console, findings_table, print_success
from stateauditor.utils.constants import SKIP_DIRS
from stateauditor.utils.error_handler import handle_exceptions
from stateauditor.utils.exit_codes import ExitCodes
from stateauditor.utils.logging import logger


def collect_files(paths: tuple[str, ...]) -> list[Path]:
    """Expand directories into rule targets, sorted for determinism."""
    files = set()

    for raw in paths:
        path = Path(raw)
        if path.is_file():
            files.add(path)
            continue

        for candidate in path.rglob("*"):
            if any(part in SKIP_DIRS for part in candidate.relative_to(path).parts):
                continue
            if candidate.is_file() and METADATA.applies_to(candidate):
                files.add(candidate)

    return sorted(files)


@click.command("check")
@click.argument("paths", nargs=-1, required=True, type=click.Path(exists=True))
@click.option("--config", "config_path", type=click.Path(), default=None,
              help="pyproject.toml holding a [tool.stateauditor] table")
@click.option("--json", "as_json", is_flag=True, help="Print findings as JSON")
@click.option("--fix", is_flag=True, help="Apply the default rename fix in place")
@click.option("--max-rows", default=50, type=int, help="Maximum rows to display in table")
@handle_exceptions
def check(paths, config_path, as_json, fix, max_rows):
    """Report useState calls not destructured into a value + setter pair.

    \b
    Examples:
      stateauditor check src/
      stateauditor check --json src/App.tsx
      stateauditor check --fix src/"""
    config = load_config(config_path or Path("pyproject.toml"))
    parser = ASTParser()
    findings = []
    fixed = 0

    for file_path in collect_files(paths):
        language = language_for_path(file_path)
        if not language:
            logger.debug("Skipping {path}: unsupported extension", path=str(file_path))
            continue

        content = file_path.read_text(encoding="utf-8")
        context = build_context(file_path, content, language, parser, config)
        diagnostics = analyze_context(context)

        if fix and diagnostics:
            new_content, applied = apply_default_fixes(content, diagnostics)
            if applied:
                file_path.write_text(new_content, encoding="utf-8")
                fixed += applied
                context = build_context(file_path, new_content, language, parser, config)
                diagnostics = analyze_context(context)

        findings.extend(diagnostic_to_finding(context, d).to_dict() for d in diagnostics)

    findings.sort(key=lambda f: (f["file"], f["line"], f["column"]))

    if as_json:
        click.echo(json.dumps(findings, indent=2, sort_keys=True))
    elif findings:
        console.print(findings_table(findings, max_rows))
        console.print(f"[warning]{len(findings)} finding(s)[/warning]")
    else:
        print_success("No useState naming issues found")

    if fixed:
        logger.info("Applied {count} fix(es)", count=fixed)

    raise SystemExit(ExitCodes.FINDINGS_PRESENT if findings else ExitCodes.SUCCESS)
