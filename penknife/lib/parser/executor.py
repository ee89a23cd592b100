"""
Recursive template executor.

Walks a range of the token list left to right. Text is copied through;
each command is dispatched on its prefix, checked in this order:

1. end marker   -- skipped, end commands are only targets of matching
2. loop marker  -- ``@target[,name]`` repeats its body once per element
3. if marker    -- ``?test`` with an optional ``!?test`` else branch
4. anything else is looked up and its display string appended

Block bodies are executed by recursing on an index range of the same token
list; nothing is copied or mutated.
"""

from typing import Any, Optional, Sequence
from penknife.lib.errors import LoopTargetError, StructuralError
from penknife.lib.log import LOG
from penknife.lib.parser.matcher import else_find, end_find
from penknife.lib.parser.scope import lookup
from penknife.lib.parser.values import as_pairs, is_truthy, to_display
from penknife.models.dataModel import LoopFrame, RenderContext, Token


def execute(
    tokens: Sequence[Token],
    ctx: RenderContext,
    start: int = 0,
    stop: Optional[int] = None,
) -> str:
    """Execute ``tokens[start:stop]`` and return the produced text.

    Args:
        tokens: The full token list of the template
        ctx: Render context for this call
        start: First position to execute
        stop: Position to stop before; the end of ``tokens`` if omitted

    Returns:
        The concatenated output of the range

    Raises:
        StructuralError: On an unterminated block or excessive nesting
        LoopTargetError: If a loop target is not iterable
    """
    stop = len(tokens) if stop is None else stop
    config = ctx.config
    result: list[str] = []
    position: int = start
    while position < stop:
        token: Token = tokens[position]
        if not token.is_command:
            result.append(token.text)
            position += 1
        elif token.text.startswith(config.end):
            position += 1
        elif token.text.startswith(config.loop):
            position = _loop_do(tokens, position, stop, ctx, result)
        elif token.text.startswith(config.if_):
            position = _if_do(tokens, position, stop, ctx, result)
        else:
            result.append(to_display(lookup(token.text, ctx)))
            position += 1
    return "".join(result)


def _body_do(
    tokens: Sequence[Token], ctx: RenderContext, start: int, stop: int, opener: Token
) -> str:
    ctx.depth += 1
    try:
        if ctx.max_depth and ctx.depth > ctx.max_depth:
            raise StructuralError(
                f"Blocks nested deeper than {ctx.max_depth} levels at "
                f"{opener.text} on or after line {opener.line}",
                text=opener.text,
                line=opener.line,
            )
        return execute(tokens, ctx, start, stop)
    finally:
        ctx.depth -= 1


def _loop_do(
    tokens: Sequence[Token],
    position: int,
    stop: int,
    ctx: RenderContext,
    result: list[str],
) -> int:
    config = ctx.config
    token: Token = tokens[position]
    args: list[str] = token.text[len(config.loop) :].split(config.args)
    target: str = args[0].strip()

    # The end marker names the target as written: {{@list,bob}} ... {{/@list}}
    end: int = end_find(
        tokens,
        token.with_text(config.loop + args[0].rstrip()),
        position,
        config,
        "loop",
        stop,
    )

    depth: int = len(ctx.loops) + 1
    name: str = args[1].strip() if len(args) > 1 and args[1].strip() else ""
    name = name or f"loop{depth}"

    subject: Any = lookup(target, ctx)
    pairs = as_pairs(subject)
    if pairs is None:
        LOG(f"Loop target {target} on line {token.line} is not iterable")
        raise LoopTargetError(target, subject)

    LOG(f"Loop {name} over {target}: {len(pairs)} element(s)")
    frame = LoopFrame(name=name, pairs=pairs)
    ctx.loops.append(frame)
    try:
        for row, (key, value) in enumerate(pairs):
            frame.key, frame.row, frame.value = key, row, value
            result.append(_body_do(tokens, ctx, position + 1, end, token))
    finally:
        ctx.loops.pop()
    return end + 1


def _if_do(
    tokens: Sequence[Token],
    position: int,
    stop: int,
    ctx: RenderContext,
    result: list[str],
) -> int:
    config = ctx.config
    token: Token = tokens[position]
    end: int = end_find(tokens, token, position, config, "if", stop)
    otherwise: Optional[int] = else_find(tokens, token, position, config, end)

    subject: Any = lookup(token.text[len(config.if_) :].strip(), ctx)
    if is_truthy(subject):
        branch_stop: int = end if otherwise is None else otherwise
        result.append(_body_do(tokens, ctx, position + 1, branch_stop, token))
    elif otherwise is not None:
        result.append(_body_do(tokens, ctx, otherwise + 1, end, token))
    return end + 1
