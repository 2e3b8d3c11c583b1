import pytest

from hshell.envtools import format_environment, getenv, setenv, unsetenv


def test_getenv_present():
    assert getenv("HOME", {"HOME": "/home/user"}) == "/home/user"


def test_getenv_absent():
    assert getenv("HOME", {}) is None


def test_getenv_default_environment(monkeypatch):
    monkeypatch.setenv("INDIGO_VAR", "c_is_fun")
    assert getenv("INDIGO_VAR") == "c_is_fun"


def test_setenv_new_variable():
    env = {}
    setenv("INDIGO_VAR", "c_is_fun", True, env)
    assert env == {"INDIGO_VAR": "c_is_fun"}


def test_setenv_without_overwrite_keeps_value():
    env = {"INDIGO_VAR": "c_is_fun"}
    setenv("INDIGO_VAR", "overwrite_test", False, env)
    assert env["INDIGO_VAR"] == "c_is_fun"


def test_setenv_with_overwrite_replaces_value():
    env = {"INDIGO_VAR": "c_is_fun"}
    setenv("INDIGO_VAR", "overwrite_test", True, env)
    assert env["INDIGO_VAR"] == "overwrite_test"


def test_setenv_without_overwrite_sets_missing():
    env = {}
    setenv("NEW", "value", False, env)
    assert getenv("NEW", env) == "value"


@pytest.mark.parametrize("name,value", [("A=B", "x"), (None, "x"), ("A", None)])
def test_setenv_invalid(name, value):
    env = {}
    with pytest.raises(ValueError):
        setenv(name, value, True, env)
    assert env == {}


def test_setenv_process_environment(monkeypatch):
    monkeypatch.delenv("INDIGO_VAR", raising=False)
    setenv("INDIGO_VAR", "c_is_fun")
    assert getenv("INDIGO_VAR") == "c_is_fun"
    unsetenv("INDIGO_VAR")
    assert getenv("INDIGO_VAR") is None


def test_unsetenv_removes():
    env = {"HOME": "/home/user", "PATH": "/bin"}
    unsetenv("HOME", env)
    assert env == {"PATH": "/bin"}


def test_unsetenv_missing_is_harmless():
    env = {"PATH": "/bin"}
    unsetenv("HOME", env)
    assert env == {"PATH": "/bin"}


@pytest.mark.parametrize("name", ["", "A=B", None])
def test_unsetenv_invalid(name):
    with pytest.raises(ValueError):
        unsetenv(name, {})


def test_format_environment_lines():
    assert format_environment({"A": "1", "B": "2"}) == "A=1\nB=2\n"


def test_format_environment_empty():
    assert format_environment({}) == ""


def test_format_environment_round_trip():
    env = {"HOME": "/home/user", "EQ": "a=b"}
    parsed = dict(line.split("=", 1) for line in format_environment(env).splitlines())
    assert parsed == env