"""
Block end/else matching.

A block started by command text ``X`` ends at the first later command whose
text is exactly ``end + X``; its optional else branch starts at the first
later command whose text is exactly ``else + X``. Matching is textual and
does not count nesting depth, so nested blocks that must share a target
need distinct start text.
"""

from typing import Optional, Sequence
from penknife.lib.errors import StructuralError
from penknife.lib.log import LOG
from penknife.models.dataModel import Token, TokenConfig


def _scan(
    tokens: Sequence[Token], find: str, start: int, stop: Optional[int]
) -> Optional[int]:
    for position in range(start + 1, len(tokens) if stop is None else stop):
        token: Token = tokens[position]
        if token.is_command and token.text == find:
            return position
    return None


def end_find(
    tokens: Sequence[Token],
    start_token: Token,
    start: int,
    config: TokenConfig,
    construct: str,
    stop: Optional[int] = None,
) -> int:
    """Find the end command matching ``start_token``.

    Args:
        tokens: The token list to scan
        start_token: The block's start token (its text is what gets matched)
        start: Position of the start token in ``tokens``
        config: Marker configuration
        construct: Human readable block type for the error message
        stop: Scan limit (exclusive); the end of ``tokens`` if omitted

    Returns:
        Position of the end token

    Raises:
        StructuralError: If no matching end exists
    """
    position: Optional[int] = _scan(
        tokens, config.end + start_token.text, start, stop
    )
    if position is None:
        msg: str = (
            f"Unterminated {construct}: {start_token.text} "
            f"starting on or after line {start_token.line}"
        )
        LOG(msg)
        raise StructuralError(msg, text=start_token.text, line=start_token.line)
    return position


def else_find(
    tokens: Sequence[Token],
    start_token: Token,
    start: int,
    config: TokenConfig,
    stop: Optional[int] = None,
) -> Optional[int]:
    """Find the else command matching ``start_token``, or None if absent."""
    return _scan(tokens, config.else_ + start_token.text, start, stop)
