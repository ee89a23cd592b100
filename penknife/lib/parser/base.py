r"""
Template engine entry point.

Ties the tokenizer and executor together behind a small object that owns
the marker configuration. Each call to `format` tokenizes the template
once and interprets the tokens directly; there is no compiled form and no
cache.

The engine handles:
- Substitution of ``{{expression}}`` through a caller-supplied resolver
- Conditional blocks ``{{?test}}...{{!?test}}...{{/?test}}``
- Loops ``{{@list[,name]}}...{{/@list}}`` with ``name.#`` index access
- Configurable marker literals

Example:
    engine = Penknife()
    engine.format("Hello {{name}}", {"name": "world"}.get)
"""

from typing import Any, Callable, Mapping, Optional, Protocol, Self, runtime_checkable
from penknife.config.settings import appsettings, tokens_build
from penknife.lib.log import LOG
from penknife.lib.parser.executor import execute
from penknife.lib.parser.tokenizer import tokenize
from penknife.models.dataModel import RenderContext, Token, TokenConfig


@runtime_checkable
class TemplateResolver(Protocol):
    """Protocol for objects that supply values to templates.

    ``resolve`` receives the exact command text (minus any block prefix),
    which may carry the resolver's own scope or default syntax. It may
    return strings, numbers, booleans, None, sequences or mappings; loop
    targets must be iterable.
    """

    def resolve(self: Self, expression: str) -> Any:
        """Return the value of ``expression``."""
        ...


Resolver = Callable[[str], Any] | TemplateResolver


def resolver_callable(resolver: Resolver) -> Callable[[str], Any]:
    """Accept either a plain function or a `TemplateResolver` object.

    Callables win: an object that is both callable and has ``resolve`` is
    called directly.
    """
    if callable(resolver):
        return resolver
    if isinstance(resolver, TemplateResolver):
        return resolver.resolve
    raise TypeError(
        f"resolver must be callable or provide resolve(), not {type(resolver).__name__}"
    )


class Penknife:
    """Template engine with configurable markers.

    The engine only stores its marker configuration. Loop state and the
    resolver live in a `RenderContext` created per call, so one engine can
    be shared across threads as long as markers are not reconfigured
    mid-call.

    Attributes:
        max_depth: Block nesting limit applied to each call (0 disables)
    """

    def __init__(
        self: Self,
        tokens: Optional[Mapping[str, str]] = None,
        max_depth: Optional[int] = None,
    ) -> None:
        """Initialize the engine.

        Args:
            tokens: Optional marker overrides, keyed by logical name
            max_depth: Nesting limit; the ``PNK_MAX_DEPTH`` setting if omitted

        Raises:
            ConfigurationError: On an unknown marker name or empty literal
        """
        self._config: TokenConfig = tokens_build(tokens or {})
        self.max_depth: int = (
            appsettings.max_depth if max_depth is None else max_depth
        )

    @property
    def tokens(self: Self) -> dict[str, str]:
        """A copy of the current marker literals, keyed by logical name."""
        return self._config.as_dict()

    @property
    def config(self: Self) -> TokenConfig:
        return self._config

    def token_set(self: Self, name: str, value: str) -> Self:
        """Set one marker literal.

        Raises:
            ConfigurationError: On an unknown name or empty value; the
                configuration is left unchanged
        """
        return self.tokens_set({name: value})

    def tokens_set(self: Self, tokens: Mapping[str, str]) -> Self:
        """Set several marker literals at once.

        Every entry is validated before any is applied.

        Raises:
            ConfigurationError: On an unknown name or empty value; the
                configuration is left unchanged
        """
        self._config = tokens_build(tokens, self._config)
        LOG(f"Markers updated: {', '.join(tokens)}")
        return self

    # camelCase aliases
    setToken = token_set
    setTokens = tokens_set

    def tokenize(self: Self, template: str) -> list[Token]:
        """Tokenize ``template`` with the current markers."""
        return tokenize(template, self._config)

    def format(self: Self, template: str, resolver: Resolver) -> str:
        """Expand a template using ``resolver`` for every value.

        Args:
            template: Template text
            resolver: Function or `TemplateResolver` mapping an expression
                to a value

        Returns:
            The expanded text

        Raises:
            StructuralError: On malformed markers or unterminated blocks
            LoopTargetError: If a loop target is not iterable

        Note:
            Exceptions raised by the resolver propagate unchanged.
        """
        ctx = RenderContext(
            config=self._config,
            resolve=resolver_callable(resolver),
            max_depth=self.max_depth,
        )
        tokens: list[Token] = tokenize(template, ctx.config)
        return execute(tokens, ctx)


def format(
    template: str, resolver: Resolver, tokens: Optional[Mapping[str, str]] = None
) -> str:
    """Expand ``template`` with a one-off engine."""
    return Penknife(tokens).format(template, resolver)
