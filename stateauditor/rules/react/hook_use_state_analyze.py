"""React useState naming rule.

Flags useState calls whose result is not destructured into a symmetric
``[value, setValue]`` pair and attaches ranked fix proposals.
"""

from pathlib import Path

from stateauditor.ast_parser import ASTParser
from stateauditor.config import DEFAULT_CONFIG, HookRuleConfig
from stateauditor.hooks import Diagnostic, FixProposal, TextEdit, analyze_tree
from stateauditor.rules.base import (
    Confidence,
    RuleMetadata,
    Severity,
    StandardFinding,
    StandardRuleContext,
)
from stateauditor.utils.logging import logger

METADATA = RuleMetadata(
    name="react_hook_use_state",
    category="react",
    target_extensions=[".js", ".jsx", ".ts", ".tsx", ".mjs", ".cjs", ".mts", ".cts"],
    exclude_patterns=["node_modules/", "*.d.ts", "*.min.js"],
)

RULE_NAME = "react-hook-use-state"


def analyze_context(context: StandardRuleContext) -> list[Diagnostic]:
    """Run the engine over the tree carried by a rule context."""
    tree = context.get_ast("tree_sitter")
    if tree is None:
        return []

    if context.ast_wrapper.get("has_errors"):
        logger.debug("Skipping {path}: syntax errors", path=str(context.file_path))
        return []

    return analyze_tree(tree, context.config)


def diagnostic_to_finding(context: StandardRuleContext, diagnostic: Diagnostic) -> StandardFinding:
    return StandardFinding(
        rule_name=RULE_NAME,
        message=diagnostic.message,
        file_path=str(context.file_path),
        line=diagnostic.location.line,
        column=diagnostic.location.column,
        severity=Severity.LOW,
        category="react-hooks",
        confidence=Confidence.HIGH,
        snippet=context.get_snippet(diagnostic.location.line),
        additional_info={
            "verdict": diagnostic.verdict.value,
            "fixes": [fix.to_dict() for fix in diagnostic.fix_proposals],
        },
    )


def find_hook_use_state_issues(context: StandardRuleContext) -> list[StandardFinding]:
    """Detect useState calls not destructured into a value + setter pair."""
    return [diagnostic_to_finding(context, d) for d in analyze_context(context)]


def build_context(
    file_path: Path | str,
    content: str,
    language: str,
    parser: ASTParser,
    config: HookRuleConfig = DEFAULT_CONFIG,
) -> StandardRuleContext:
    return StandardRuleContext(
        file_path=Path(file_path),
        content=content,
        language=language,
        ast_wrapper=parser.parse_content(content, language, str(file_path)),
        config=config,
    )


def analyze_content(
    content: str,
    language: str = "javascript",
    config: HookRuleConfig = DEFAULT_CONFIG,
    parser: ASTParser | None = None,
) -> list[Diagnostic]:
    """Parse and analyze one in-memory source."""
    parser = parser or ASTParser()
    context = build_context("<memory>", content, language, parser, config)
    return analyze_context(context)


def default_fix(diagnostic: Diagnostic) -> FixProposal | None:
    """The unlabeled proposal of a diagnostic, if it has one."""
    for proposal in diagnostic.fix_proposals:
        if proposal.description is None:
            return proposal
    return None


def apply_default_fixes(content: str, diagnostics: list[Diagnostic]) -> tuple[str, int]:
    """Apply each diagnostic's default fix, skipping any that overlap.

    Returns the new content and the number of fixes applied.
    """
    accepted: list[TextEdit] = []
    applied = 0

    for diagnostic in diagnostics:
        proposal = default_fix(diagnostic)
        if proposal is None:
            continue

        overlaps = any(
            edit.start_byte < taken.end_byte and taken.start_byte < edit.end_byte
            for edit in proposal.edits
            for taken in accepted
        )
        if overlaps:
            logger.debug("Skipping overlapping fix at line {line}", line=diagnostic.location.line)
            continue

        accepted.extend(proposal.edits)
        applied += 1

    if not accepted:
        return content, 0

    return FixProposal(edits=tuple(accepted)).apply(content), applied
