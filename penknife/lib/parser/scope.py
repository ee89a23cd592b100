"""
Scoped expression lookup.

An expression has the form ``path[,default]`` with path segments separated
by the ``scope`` marker. When the first segment names an active loop frame
the value comes from that frame:

    name            current element
    name.#          current key
    name.#.1        current row + 1
    name.field      element field, else the default, else ""

A bare ``loop`` is shorthand for ``loop1``. Anything else goes to the
caller's resolver untouched, default syntax included.

Any integer offset counts, so ``name.#.0`` is the row itself. The PHP
Penknife returns the key there instead, since ``"0"`` is falsy in PHP.
"""

from typing import Any, Optional
from penknife.lib.parser.values import element_get
from penknife.models.dataModel import LoopFrame, RenderContext

LOOP_ALIAS: str = "loop"


def lookup(expression: str, ctx: RenderContext) -> Any:
    """Resolve an expression against the loop stack, then the resolver.

    Args:
        expression: Command text, without any block prefix
        ctx: The render context of the current call

    Returns:
        The resolved value; resolver results are passed through as-is
    """
    config = ctx.config
    args: list[str] = expression.split(config.args)
    parts: list[str] = args[0].split(config.scope)
    name: str = parts[0]
    if name == LOOP_ALIAS:
        name = f"{LOOP_ALIAS}1"

    frame: Optional[LoopFrame] = ctx.frame_find(name)
    if frame is None:
        return ctx.resolve(expression)

    if len(parts) == 1:
        return frame.value

    if parts[1] == config.index:
        if len(parts) > 2:
            try:
                return frame.row + int(parts[2])
            except ValueError:
                pass
        return frame.key

    default: Any = args[1].strip() if len(args) > 1 else ""
    value: Any = frame.value
    for segment in parts[1:]:
        try:
            value = element_get(value, segment)
        except LookupError:
            return default
    return value
