"""Data model shared by the useState naming engine.

Everything here is immutable. Syntax-tree nodes only appear on CallSite;
the pattern and verdict types are parser independent so the validator can be
exercised without a grammar.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

USE_STATE_MESSAGE = "useState call is not destructured into value + setter pair"


@dataclass(frozen=True)
class ImportBinding:
    """One specifier of one import declaration.

    exported_name is the imported export, or "default" / "namespace" for
    ``import React`` / ``import * as React``.
    """

    local_name: str
    source_module: str
    exported_name: str
    start_byte: int = 0
    end_byte: int = 0


class RoleKind(Enum):
    """What a resolved local name stands for."""

    INITIALIZER = "initializer"
    NAMESPACE = "namespace"
    MEMOIZER = "memoizer"


@dataclass(frozen=True)
class ResolvedRole:
    kind: RoleKind
    local_name: str


class SlotKind(Enum):
    IDENTIFIER = "identifier"
    ELIDED = "elided"
    OTHER = "other"


@dataclass(frozen=True)
class Slot:
    """One position of a positional binding pattern."""

    kind: SlotKind
    name: str | None = None

    @classmethod
    def identifier(cls, name: str) -> "Slot":
        return cls(SlotKind.IDENTIFIER, name)

    @classmethod
    def elided(cls) -> "Slot":
        return cls(SlotKind.ELIDED)

    @classmethod
    def other(cls) -> "Slot":
        return cls(SlotKind.OTHER)

    @property
    def is_identifier(self) -> bool:
        return self.kind is SlotKind.IDENTIFIER


class PatternKind(Enum):
    """Shape of a declarator's target."""

    POSITIONAL = "positional"
    OBJECT = "object"
    IDENTIFIER = "identifier"


@dataclass(frozen=True)
class BindingPattern:
    """Target of the declarator a tracked call initializes.

    Only POSITIONAL patterns carry slots. Byte offsets cover the whole
    target so a fix can replace it.
    """

    kind: PatternKind
    slots: tuple[Slot, ...] = ()
    start_byte: int = 0
    end_byte: int = 0

    def __len__(self) -> int:
        return len(self.slots)

    @classmethod
    def positional(cls, *slots: Slot, start_byte: int = 0, end_byte: int = 0) -> "BindingPattern":
        return cls(PatternKind.POSITIONAL, tuple(slots), start_byte, end_byte)


class Verdict(Enum):
    """Outcome of validating one binding pattern."""

    VALID = "valid"
    NOT_DESTRUCTURED = "not_destructured"
    EMPTY = "empty"
    VALUE_ONLY = "value_only"
    EXTRA_SLOTS = "extra_slots"
    MISNAMED = "misnamed"

    @property
    def is_valid(self) -> bool:
        return self is Verdict.VALID


@dataclass(frozen=True)
class SourceLocation:
    """Lines are 1-based, columns 0-based byte columns."""

    line: int
    column: int
    end_line: int
    end_column: int
    start_byte: int = 0
    end_byte: int = 0

    @classmethod
    def from_node(cls, node: Any) -> "SourceLocation":
        return cls(
            line=node.start_point[0] + 1,
            column=node.start_point[1],
            end_line=node.end_point[0] + 1,
            end_column=node.end_point[1],
            start_byte=node.start_byte,
            end_byte=node.end_byte,
        )


@dataclass(frozen=True)
class TextEdit:
    """Replace source[start_byte:end_byte] (UTF-8 bytes) with text."""

    start_byte: int
    end_byte: int
    text: str

    def to_dict(self) -> dict[str, Any]:
        return {"range": [self.start_byte, self.end_byte], "text": self.text}


@dataclass(frozen=True)
class FixProposal:
    """One complete alternative rewrite. description is None for the default fix."""

    edits: tuple[TextEdit, ...]
    description: str | None = None

    def apply(self, source: str) -> str:
        """Return source with every edit of this proposal applied."""
        data = source.encode("utf-8")
        for edit in sorted(self.edits, key=lambda e: e.start_byte, reverse=True):
            data = data[: edit.start_byte] + edit.text.encode("utf-8") + data[edit.end_byte :]
        return data.decode("utf-8")

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"edits": [e.to_dict() for e in self.edits]}
        if self.description:
            result["description"] = self.description
        return result


@dataclass(frozen=True)
class CallSite:
    """A call that resolved to the tracked initializer."""

    call: Any
    callee: Any
    arguments: tuple[Any, ...]
    scope: Any
    pattern: BindingPattern | None = None
    declarator: Any | None = None
    callee_name: str | None = None
    namespace: str | None = None

    @property
    def is_namespace_call(self) -> bool:
        return self.namespace is not None


@dataclass(frozen=True)
class Diagnostic:
    message: str
    location: SourceLocation
    verdict: Verdict
    fix_proposals: tuple[FixProposal, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, Any]:
        return {
            "message": self.message,
            "line": self.location.line,
            "column": self.location.column,
            "end_line": self.location.end_line,
            "end_column": self.location.end_column,
            "verdict": self.verdict.value,
            "fixes": [fix.to_dict() for fix in self.fix_proposals],
        }
