"""
Bearer token resolution: environment first, then prompt.
"""

from unittest.mock import Mock

import pytest

from apc_progress.auth.token_manager import resolve_bearer_token


@pytest.fixture
def fake_input(monkeypatch):
    mock = Mock()
    monkeypatch.setattr("builtins.input", mock)
    return mock


def test_env_token_wins(monkeypatch, fake_input):
    monkeypatch.setenv("BEARER_TOKEN", "env-token")

    assert resolve_bearer_token() == "env-token"
    fake_input.assert_not_called()


@pytest.mark.parametrize("env_value", [None, "", "   "])
def test_prompts_when_env_missing_or_blank(monkeypatch, fake_input, env_value):
    if env_value is None:
        monkeypatch.delenv("BEARER_TOKEN", raising=False)
    else:
        monkeypatch.setenv("BEARER_TOKEN", env_value)
    fake_input.return_value = "typed-token"

    assert resolve_bearer_token() == "typed-token"
    fake_input.assert_called_once()


@pytest.mark.parametrize("typed, expected", [
    ('"quoted-token"', "quoted-token"),
    ('  "padded"  \n', "padded"),
    ('"only-leading', "only-leading"),
    ('inner"quote', 'inner"quote'),
])
def test_prompted_token_strips_surrounding_quotes(monkeypatch, fake_input, typed, expected):
    monkeypatch.delenv("BEARER_TOKEN", raising=False)
    fake_input.return_value = typed

    assert resolve_bearer_token() == expected


@pytest.mark.parametrize("typed", ["", '""', "   "])
def test_empty_token_exits(monkeypatch, fake_input, capsys, typed):
    monkeypatch.delenv("BEARER_TOKEN", raising=False)
    fake_input.return_value = typed

    with pytest.raises(SystemExit) as excinfo:
        resolve_bearer_token()

    assert excinfo.value.code == 1
    assert "No BEARER_TOKEN provided" in capsys.readouterr().err
