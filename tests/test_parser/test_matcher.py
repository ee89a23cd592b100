"""Tests for block end/else matching."""

import pytest
from penknife.lib.errors import StructuralError
from penknife.lib.parser.matcher import else_find, end_find
from penknife.lib.parser.tokenizer import tokenize
from penknife.models.dataModel import TokenConfig


@pytest.fixture
def config() -> TokenConfig:
    return TokenConfig()


def test_end_and_else_positions(config):
    tokens = tokenize("{{?a}}x{{!?a}}y{{/?a}}", config)
    assert end_find(tokens, tokens[1], 1, config, "if") == 5
    assert else_find(tokens, tokens[1], 1, config) == 3


def test_else_is_optional(config):
    tokens = tokenize("{{?a}}x{{/?a}}", config)
    assert else_find(tokens, tokens[1], 1, config) is None


def test_else_search_respects_stop(config):
    tokens = tokenize("{{?a}}x{{/?a}}{{!?a}}", config)
    end = end_find(tokens, tokens[1], 1, config, "if")
    assert else_find(tokens, tokens[1], 1, config, end) is None


def test_unterminated_block(config):
    tokens = tokenize("line one\n{{?a}}x", config)
    with pytest.raises(StructuralError) as e:
        end_find(tokens, tokens[1], 1, config, "if")
    assert "Unterminated if: ?a" in str(e.value)
    assert e.value.line == 2
    assert e.value.text == "?a"


def test_end_outside_stop_is_not_found(config):
    tokens = tokenize("{{?a}}x{{/?a}}", config)
    with pytest.raises(StructuralError):
        end_find(tokens, tokens[1], 1, config, "if", stop=3)


def test_first_textual_match_wins(config):
    # Matching is textual: the inner end closes the outer block
    tokens = tokenize("{{?a}}{{?a}}in{{/?a}}out{{/?a}}", config)
    assert end_find(tokens, tokens[1], 1, config, "if") == 5


def test_commands_only(config):
    tokens = tokenize("{{?a}}/?a{{/?a}}", config)
    assert end_find(tokens, tokens[1], 1, config, "if") == 3
