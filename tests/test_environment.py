import sys

import pytest

from auralib.system.environment import (
    clear_variable,
    exec_command,
    get_variable,
    set_variable,
)

KEY = "AURA_TEST_VAR"


@pytest.fixture
def clean_key(monkeypatch):
    monkeypatch.delenv(KEY, raising=False)
    yield KEY
    monkeypatch.delenv(KEY, raising=False)


def test_get_path():
    assert get_variable("PATH") != ""
    assert len(get_variable("PATH")) > 0


def test_missing_variable_is_empty(clean_key):
    assert get_variable(clean_key) == ""


def test_set_and_get(clean_key):
    set_variable(clean_key, "test")
    assert get_variable(clean_key) == "test"


def test_clear(clean_key):
    set_variable(clean_key, "test")
    clear_variable(clean_key)
    assert get_variable(clean_key) == ""


def test_invalid_name_raises():
    with pytest.raises(ValueError):
        set_variable("AURA=BAD", "test")


def test_exec_echo():
    expected = "Hello World\r\n" if sys.platform == "win32" else "Hello World\n"
    assert exec_command('echo "Hello World"') == expected


def test_exec_empty():
    assert exec_command("") == ""


def test_exec_unknown_program():
    if sys.platform == "win32":
        assert "auralib-no-such-program" not in exec_command("echo ok")
    else:
        with pytest.raises(FileNotFoundError):
            exec_command("auralib-no-such-program --flag")