"""
dataModel.py

This module defines the data models used throughout Penknife. Configuration
and result models leverage Pydantic for validation; the hot-path runtime
structures (tokens, loop frames, render context) are plain dataclasses.

Features:
- Enum for token kinds.
- Immutable tokens carrying their source line.
- Marker configuration with validation of every marker literal.
- Loop frames and the per-call render context.
- Rendering results for the command line layer.

Usage:
Import these models to structure data passed between the tokenizer, the
executor and the command line interface.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Any, Callable, Final, Optional
from dataclasses import dataclass, field, replace
from enum import Enum


MARKER_NAMES: Final[tuple[str, ...]] = (
    "open",
    "close",
    "if",
    "else",
    "end",
    "loop",
    "index",
    "scope",
    "args",
)


class TokenKind(Enum):
    """
    Enum for the two kinds of template token.
    """

    TEXT = 0
    COMMAND = 1


@dataclass(frozen=True)
class Token:
    """A single unit of a tokenized template.

    Attributes:
        kind: TEXT or COMMAND
        text: Literal text; for commands, the trimmed content between markers
        line: Source line (1-based) where the token begins
        raw: Untrimmed command content, used to rebuild the template
    """

    kind: TokenKind
    text: str
    line: int = 0
    raw: str = ""

    @property
    def is_command(self) -> bool:
        return self.kind is TokenKind.COMMAND

    def with_text(self, text: str) -> "Token":
        """Return a copy of this token with new text, same kind and line."""
        return replace(self, text=text, raw=text)


class TokenConfig(BaseModel):
    """
    Model for the nine marker literals that delimit and tag template syntax.

    Attributes:
        open (str): Starts a command.
        close (str): Ends a command.
        if_ (str): Prefix of a conditional block (field alias ``if``).
        else_ (str): Prefix of an else marker (field alias ``else``).
        end (str): Prefix of an end marker.
        loop (str): Prefix of a loop block.
        index (str): Path segment selecting the current loop key.
        scope (str): Separator between path segments.
        args (str): Separator between an expression and its argument.
    """

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    open: str = Field(default="{{", description="Open marker.")
    close: str = Field(default="}}", description="Close marker.")
    if_: str = Field(default="?", alias="if", description="Conditional prefix.")
    else_: str = Field(default="!", alias="else", description="Else prefix.")
    end: str = Field(default="/", description="End prefix.")
    loop: str = Field(default="@", description="Loop prefix.")
    index: str = Field(default="#", description="Loop index segment.")
    scope: str = Field(default=".", description="Path separator.")
    args: str = Field(default=",", description="Argument separator.")

    @field_validator("*")
    @classmethod
    def marker_nonEmpty(cls, value: str) -> str:
        if not isinstance(value, str) or not value:
            raise ValueError("marker literals must be non-empty strings")
        return value

    @staticmethod
    def names() -> tuple[str, ...]:
        """The fixed set of logical marker names."""
        return MARKER_NAMES

    def marker(self, name: str) -> str:
        """Look up a marker by its logical name (``if``, ``else``, ...)."""
        return self.as_dict()[name]

    def as_dict(self) -> dict[str, str]:
        return self.model_dump(by_alias=True)


@dataclass
class LoopFrame:
    """Runtime state of one active loop.

    Attributes:
        name: The bound loop variable name (``loop1``, ``bob``, ...)
        pairs: Ordered (key, value) pairs of the loop target
        key: Key of the current element
        row: 0-based position of the current element
        value: Element at the current key
    """

    name: str
    pairs: list[tuple[Any, Any]]
    key: Any = None
    row: int = 0
    value: Any = None


@dataclass
class RenderContext:
    """Everything one top-level ``format`` call needs, threaded through recursion.

    Attributes:
        config: Marker configuration snapshot for this call
        resolve: The caller-supplied resolver function
        loops: Stack of active loop frames, outermost first
        max_depth: Block nesting limit, 0 for none
        depth: Current block nesting depth
    """

    config: TokenConfig
    resolve: Callable[[str], Any]
    loops: list[LoopFrame] = field(default_factory=list)
    max_depth: int = 0
    depth: int = 0

    def frame_find(self, name: str) -> Optional[LoopFrame]:
        """Return the first active frame bound to ``name``, outermost first."""
        for frame in self.loops:
            if frame.name == name:
                return frame
        return None


class RenderResult(BaseModel):
    """Result of a rendering operation.

    Attributes:
        text: The rendered text
        error: Optional error message if rendering failed
        success: Whether rendering succeeded
    """

    text: str
    error: str | None = None
    success: bool = True
