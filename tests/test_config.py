import pytest

from leetcrust.config import handle_config_command, validate_u8_bool
from leetcrust.read_write import read_boolean_env_variable


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.mark.parametrize("value", [0, 1])
def test_validate_accepts_bits(value):
    assert validate_u8_bool(value, "premium") == ("premium", str(value))


@pytest.mark.parametrize("value", [2, 255, -1])
def test_validate_rejects_other_values(value):
    with pytest.raises(ValueError, match="should be either 0 or 1"):
        validate_u8_bool(value, "premium")


def test_config_username(workdir, capsys):
    assert handle_config_command("username", "alice") is True
    assert (workdir / ".env").read_text() == "username=alice"
    assert "Sucessfully wrote username to .env" in capsys.readouterr().out


def test_config_premium_round_trip(workdir):
    assert handle_config_command("premium", 1) is True
    assert read_boolean_env_variable("premium", "cmd", "explain") is True


def test_config_allow_dead_code_dash_name(workdir):
    assert handle_config_command("allow-dead-code", 1) is True
    assert read_boolean_env_variable("allow_dead_code", "cmd", "explain") is True


def test_config_invalid_premium(workdir, capsys):
    assert handle_config_command("premium", 3) is False
    assert not (workdir / ".env").exists()
    assert "The premium value 3 is not valid" in capsys.readouterr().out


def test_config_unknown_setting(workdir):
    with pytest.raises(ValueError):
        handle_config_command("colour", "x")