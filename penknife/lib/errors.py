"""
Exception types raised by Penknife.

- `StructuralError`: malformed template syntax (unterminated blocks,
  unbalanced open/close markers).
- `ConfigurationError`: an invalid marker configuration request.
- `LoopTargetError`: a loop target that cannot be iterated.
- `UnresolvedError`: a strict `MappingResolver` could not satisfy a path.

All derive from `PenknifeError`. Resolver failures are never wrapped.
"""

from typing import Optional


class PenknifeError(Exception):
    """Base class for all Penknife errors."""


class StructuralError(PenknifeError):
    """Malformed marker nesting or closing.

    Attributes:
        text: The offending command text, when known
        line: Source line of the offending construct, when known
    """

    def __init__(
        self, message: str, text: Optional[str] = None, line: Optional[int] = None
    ) -> None:
        super().__init__(message)
        self.text: Optional[str] = text
        self.line: Optional[int] = line


class ConfigurationError(PenknifeError):
    """Unrecognized marker name or unusable marker value."""


class LoopTargetError(PenknifeError, TypeError):
    """A loop target expression did not resolve to an iterable value."""

    def __init__(self, expression: str, value: object) -> None:
        super().__init__(
            f"Loop variable {expression} is not an array "
            f"(resolved to {type(value).__name__})."
        )
        self.expression: str = expression


class UnresolvedError(PenknifeError, KeyError):
    """Raised by a strict resolver when a path has no value and no default."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""
