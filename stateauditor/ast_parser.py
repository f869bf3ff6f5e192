"""AST parser for JavaScript/TypeScript sources using Tree-sitter."""

import hashlib
from functools import lru_cache
from pathlib import Path
from typing import Any

from stateauditor.utils.logging import logger

EXTENSION_LANGUAGES = {
    ".js": "javascript",
    ".jsx": "javascript",
    ".mjs": "javascript",
    ".cjs": "javascript",
    ".ts": "typescript",
    ".mts": "typescript",
    ".cts": "typescript",
    ".tsx": "tsx",
}

SUPPORTED_LANGUAGES = ("javascript", "typescript", "tsx")


def language_for_path(file_path: Path | str) -> str:
    """Detect grammar name from file extension, or "" when unsupported."""
    return EXTENSION_LANGUAGES.get(Path(file_path).suffix.lower(), "")


class ASTParser:
    """Tree-sitter parser holder for the JS-family grammars."""

    def __init__(self):
        """Initialize parser with Tree-sitter language support."""
        self.parsers = {}
        self._init_tree_sitter_parsers()

    def _init_tree_sitter_parsers(self):
        """Load each grammar from tree-sitter-language-pack."""
        from tree_sitter_language_pack import get_parser

        for language in SUPPORTED_LANGUAGES:
            try:
                self.parsers[language] = get_parser(language)
            except Exception as e:
                raise RuntimeError(
                    f"Failed to load tree-sitter grammar for {language}: {e}\n"
                    "This is often due to missing build tools or corrupted installation.\n"
                    "Please try: pip install --force-reinstall tree-sitter-language-pack"
                ) from e

    def supports_language(self, language: str) -> bool:
        """Check if a language is supported for AST parsing."""
        return language in self.parsers

    @lru_cache(maxsize=1000)  # noqa: B019 - intentional cache, parser is long-lived
    def _parse_treesitter_cached(self, content_hash: str, content: bytes, language: str) -> Any:
        """Parse code using Tree-sitter with caching based on content hash."""
        parser = self.parsers[language]
        return parser.parse(content)

    def parse_content(self, content: str, language: str, filepath: str = "unknown") -> dict[str, Any]:
        """Parse in-memory content into a tree wrapper.

        The wrapper's "has_errors" flag is set when tree-sitter had to
        recover from a syntax error; callers should not analyze such trees.
        """
        if not self.supports_language(language):
            raise ValueError(f"Unsupported language '{language}' for {filepath}")

        content_bytes = content.encode("utf-8")
        content_hash = hashlib.md5(content_bytes).hexdigest()
        tree = self._parse_treesitter_cached(content_hash, content_bytes, language)

        has_errors = tree.root_node.has_error
        if has_errors:
            logger.warning("Syntax errors in {path}, tree is partial", path=filepath)

        return {
            "type": "tree_sitter",
            "tree": tree,
            "language": language,
            "content": content,
            "has_errors": has_errors,
        }

    def parse_file(self, file_path: Path, language: str = None) -> dict[str, Any] | None:
        """Parse a file into a tree wrapper, or None when it cannot be read."""
        if language is None:
            language = language_for_path(file_path)

        try:
            content = Path(file_path).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Failed to read {path}: {err}", path=str(file_path), err=str(e))
            return None

        return self.parse_content(content, language, str(file_path))

    def get_supported_languages(self) -> list[str]:
        return sorted(self.parsers)
