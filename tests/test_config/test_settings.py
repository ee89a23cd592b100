# tests/test_config/test_settings.py
import json
import os
import pytest
from pathlib import Path
from penknife.config.settings import App, tokens_build, tokens_load
from penknife.lib.errors import ConfigurationError
from penknife.models.dataModel import TokenConfig


def setup_function():
    for k in list(os.environ):
        if k.upper().startswith("PNK_"):
            del os.environ[k]


def teardown_function():
    for k in list(os.environ):
        if k.upper().startswith("PNK_"):
            del os.environ[k]


def test_app_default_settings():
    app = App()
    assert app.beQuiet is True
    assert app.max_depth == 64
    assert app.strict is False
    assert app.tokens_file is None


def test_app_env_override():
    os.environ["PNK_BEQUIET"] = "false"
    os.environ["PNK_MAX_DEPTH"] = "5"
    os.environ["PNK_STRICT"] = "true"
    os.environ["PNK_TOKENS_FILE"] = "/tmp/markers.json"

    app = App()
    assert app.beQuiet is False
    assert app.max_depth == 5
    assert app.strict is True
    assert app.tokens_file == Path("/tmp/markers.json")


def test_app_config_case_insensitive():
    os.environ["pnk_bequiet"] = "false"
    app = App()
    assert app.beQuiet is False


def test_tokens_build_overrides():
    config = tokens_build({"open": "<%", "if": "if "})
    assert config.open == "<%"
    assert config.if_ == "if "
    assert config.close == "}}"


def test_tokens_build_leaves_base_untouched():
    base = TokenConfig()
    tokens_build({"open": "<%"}, base)
    assert base.open == "{{"


def test_tokens_build_unknown_name():
    with pytest.raises(ConfigurationError, match="fubar is not a valid token name"):
        tokens_build({"fubar": "x"})


@pytest.mark.parametrize("value", ["", 1, None])
def test_tokens_build_bad_value(value):
    with pytest.raises(ConfigurationError, match="Invalid value"):
        tokens_build({"else": value})


def test_tokens_load_missing_file(tmp_path):
    assert tokens_load(tmp_path / "absent.json") == TokenConfig()


def test_tokens_load_file(tmp_path):
    path = tmp_path / "tokens.json"
    path.write_text(json.dumps({"open": "[[", "close": "]]"}))
    config = tokens_load(path)
    assert (config.open, config.close) == ("[[", "]]")


def test_tokens_load_invalid_json(tmp_path):
    path = tmp_path / "tokens.json"
    path.write_text("{not json")
    with pytest.raises(ConfigurationError, match="not valid JSON"):
        tokens_load(path)


def test_tokens_load_not_an_object(tmp_path):
    path = tmp_path / "tokens.json"
    path.write_text(json.dumps(["open"]))
    with pytest.raises(ConfigurationError, match="JSON object"):
        tokens_load(path)


def test_token_config_marker_lookup():
    config = TokenConfig()
    assert config.marker("else") == "!"
    assert TokenConfig.names() == tuple(config.as_dict())
