"""Tests for template tokenization."""

import pytest
from penknife.lib.errors import StructuralError
from penknife.lib.parser.tokenizer import reconstruct, tokenize
from penknife.models.dataModel import Token, TokenConfig, TokenKind


@pytest.fixture
def config() -> TokenConfig:
    return TokenConfig()


def kinds_texts(tokens: list[Token]) -> list[tuple[TokenKind, str]]:
    return [(t.kind, t.text) for t in tokens]


def test_plain_text_is_single_token(config):
    tokens = tokenize("just text\non two lines", config)
    assert kinds_texts(tokens) == [(TokenKind.TEXT, "just text\non two lines")]


def test_empty_template(config):
    assert kinds_texts(tokenize("", config)) == [(TokenKind.TEXT, "")]


def test_command_is_trimmed_and_keeps_raw(config):
    tokens = tokenize("a {{ b }} c", config)
    assert kinds_texts(tokens) == [
        (TokenKind.TEXT, "a "),
        (TokenKind.COMMAND, "b"),
        (TokenKind.TEXT, " c"),
    ]
    assert tokens[1].raw == " b "


def test_empty_text_tokens_are_kept_between_commands(config):
    tokens = tokenize("{{a}}{{b}}", config)
    assert kinds_texts(tokens) == [
        (TokenKind.TEXT, ""),
        (TokenKind.COMMAND, "a"),
        (TokenKind.TEXT, ""),
        (TokenKind.COMMAND, "b"),
        (TokenKind.TEXT, ""),
    ]


def test_line_numbers(config):
    tokens = tokenize("line1\n{{a}}\nline3 {{b}}\n{{\nc}}", config)
    commands = [(t.text, t.line) for t in tokens if t.is_command]
    assert commands == [("a", 2), ("b", 3), ("c", 4)]
    # Text after a command starts on the line where the command ended
    assert tokens[-1].line == 5


def test_missing_close_marker(config):
    with pytest.raises(StructuralError) as e:
        tokenize("error {{right <-there.", config)
    assert "Unclosed command" in str(e.value)
    assert e.value.line == 1


def test_close_before_any_open(config):
    with pytest.raises(StructuralError) as e:
        tokenize("ok}} extra}} more", config)
    assert "Unmatched closing token" in str(e.value)


def test_close_before_open_reports_its_line(config):
    with pytest.raises(StructuralError) as e:
        tokenize("a\nb\n}} {{c}}", config)
    assert e.value.line == 3


def test_too_many_closes_in_one_command(config):
    with pytest.raises(StructuralError) as e:
        tokenize("this is {{good}} but error }} <-there.", config)
    assert "Unexpected closing token" in str(e.value)
    assert e.value.text == "good"


def test_custom_markers():
    config = TokenConfig.model_validate({"open": "<%", "close": "%>"})
    tokens = tokenize("x <% y %> {{z}}", config)
    assert kinds_texts(tokens) == [
        (TokenKind.TEXT, "x "),
        (TokenKind.COMMAND, "y"),
        (TokenKind.TEXT, " {{z}}"),
    ]


@pytest.mark.parametrize(
    "template",
    [
        "",
        "no markers at all",
        "Hi {{ name }}!\n{{?x}}y{{!?x}}z{{/?x}}",
        "{{@list,bob}}\n  {{bob.#.1}}: {{  bob  }}\n{{/@list}}",
    ],
)
def test_reconstruct_reproduces_template(config, template):
    assert reconstruct(tokenize(template, config), config) == template
