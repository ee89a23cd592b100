"""
Template tokenizer.

Splits a template into alternating Text and Command tokens using the
configured open/close markers. Every command is followed by a Text token,
even an empty one, so that block bodies can be addressed as index ranges
into a single immutable token list.

Example:
    >>> [t.text for t in tokenize("a {{ b }} c", TokenConfig())]
    ['a ', 'b', ' c']
"""

from typing import Iterable
from penknife.lib.errors import StructuralError
from penknife.lib.log import LOG
from penknife.models.dataModel import Token, TokenConfig, TokenKind


def tokenize(template: str, config: TokenConfig) -> list[Token]:
    """Segment a template into Text and Command tokens.

    Args:
        template: Raw template text
        config: Marker configuration; only ``open`` and ``close`` are used

    Returns:
        The ordered token list

    Raises:
        StructuralError: On a close marker before any open marker, a command
            with no close marker, or a command with more than one
    """
    chunks: list[str] = template.split(config.open)
    tokens: list[Token] = []
    line: int = 1

    # Text ahead of the first open marker
    first: str = chunks[0]
    if config.close in first:
        line_bad: int = line + first[: first.index(config.close)].count("\n")
        LOG(f"Unmatched closing token on line {line_bad}")
        raise StructuralError(
            f"Unmatched closing token on or after line {line_bad}", line=line_bad
        )
    tokens.append(Token(TokenKind.TEXT, first, line, first))
    line += first.count("\n")

    for chunk in chunks[1:]:
        parts: list[str] = chunk.split(config.close)
        if len(parts) == 1:
            LOG(f"Unclosed command on line {line}")
            raise StructuralError(
                f"Unclosed command on or after line {line}: "
                f"{config.open}{chunk[:20]}",
                text=chunk.strip(),
                line=line,
            )
        if len(parts) > 2:
            LOG(f"Unexpected closing token on line {line}")
            raise StructuralError(
                f"Unexpected closing token on or after line {line}",
                text=parts[0].strip(),
                line=line,
            )
        command, trailing = parts
        tokens.append(Token(TokenKind.COMMAND, command.strip(), line, command))
        line += command.count("\n")
        tokens.append(Token(TokenKind.TEXT, trailing, line, trailing))
        line += trailing.count("\n")

    LOG(f"Tokenized template into {len(tokens)} tokens over {line} line(s)")
    return tokens


def reconstruct(tokens: Iterable[Token], config: TokenConfig) -> str:
    """Rebuild template text from tokens, rewrapping commands in markers."""
    return "".join(
        f"{config.open}{token.raw}{config.close}" if token.is_command else token.raw
        for token in tokens
    )
