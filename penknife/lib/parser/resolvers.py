"""
Bundled resolvers.

Implements resolution strategies for common data sources:
- Mappings: nested dict/list data addressed by ``a.b.0`` paths with an
  optional ``,default``
- Callables: adapts a plain function to the `TemplateResolver` protocol
"""

from typing import Any, Callable, Mapping, Self
from penknife.lib.errors import UnresolvedError
from penknife.lib.log import LOG
from penknife.lib.parser.values import element_get


class MappingResolver:
    """Resolver for nested mapping/sequence data."""

    def __init__(
        self: Self,
        data: Mapping[str, Any],
        scope: str = ".",
        args: str = ",",
        strict: bool = False,
    ) -> None:
        """Initialize resolver.

        Args:
            data: Root mapping to resolve paths against
            scope: Path segment separator
            args: Separator between path and default value
            strict: Raise `UnresolvedError` instead of returning "" when a
                path is missing and has no default
        """
        self.data: Mapping[str, Any] = data
        self.scope: str = scope
        self.args: str = args
        self.strict: bool = strict

    def resolve(self: Self, expression: str) -> Any:
        """Resolve ``path[,default]`` against the data.

        Args:
            expression: Path, optionally followed by a default literal

        Returns:
            The value found, else the trimmed default, else ""

        Raises:
            UnresolvedError: In strict mode, for a missing path with no default
        """
        path, sep, default = expression.partition(self.args)
        value: Any = self.data
        for segment in path.strip().split(self.scope):
            try:
                value = element_get(value, segment)
            except LookupError:
                if sep:
                    return default.strip()
                if self.strict:
                    raise UnresolvedError(f"Unresolved template value: {path.strip()}")
                LOG(f"No value for {path.strip()}; substituting empty string")
                return ""
        return value


class CallableResolver:
    """Adapts a plain ``expression -> value`` function to the resolver protocol."""

    def __init__(self: Self, func: Callable[[str], Any]) -> None:
        self.func: Callable[[str], Any] = func

    def resolve(self: Self, expression: str) -> Any:
        return self.func(expression)
