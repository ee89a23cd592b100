"""Tests for the bundled resolvers."""

import pytest
from penknife.lib.errors import UnresolvedError
from penknife.lib.parser.base import TemplateResolver
from penknife.lib.parser.resolvers import CallableResolver, MappingResolver

DATA = {
    "title": "Report",
    "user": {"name": "Ada", "langs": ["en", "fr"]},
    "count": 0,
}


@pytest.fixture
def resolver() -> MappingResolver:
    return MappingResolver(DATA)


def test_protocol_conformance(resolver):
    assert isinstance(resolver, TemplateResolver)
    assert isinstance(CallableResolver(str.upper), TemplateResolver)


def test_paths(resolver):
    assert resolver.resolve("title") == "Report"
    assert resolver.resolve("user.name") == "Ada"
    assert resolver.resolve("user.langs.1") == "fr"
    assert resolver.resolve("user.langs") == ["en", "fr"]
    assert resolver.resolve("count") == 0


def test_whitespace_around_path(resolver):
    assert resolver.resolve(" user.name ") == "Ada"


def test_missing_path_gives_default_or_empty(resolver):
    assert resolver.resolve("user.email") == ""
    assert resolver.resolve("user.email, n/a ") == "n/a"
    assert resolver.resolve("user.langs.5,none") == "none"


def test_strict_missing_path():
    resolver = MappingResolver(DATA, strict=True)
    with pytest.raises(UnresolvedError, match="user.email"):
        resolver.resolve("user.email")
    assert resolver.resolve("user.email,fallback") == "fallback"


def test_custom_separators():
    resolver = MappingResolver(DATA, scope="/", args="|")
    assert resolver.resolve("user/name") == "Ada"
    assert resolver.resolve("user/age|unknown") == "unknown"


def test_callable_resolver():
    assert CallableResolver(str.upper).resolve("abc") == "ABC"
