import pytest

from leetcrust.cli import build_parser, main


@pytest.fixture
def workspace(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_create_alias_parses_problem_id():
    args = build_parser().parse_args(["c", "42"])
    assert args.action == "create"
    assert args.problem_id == 42


def test_problem_id_out_of_range_is_rejected():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["create", "70000"])


def test_problem_id_must_be_a_number():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["clip", "two"])


def test_config_allow_dead_code_parses():
    args = build_parser().parse_args(["config", "allow-dead-code", "1"])
    assert (args.action, args.setting, args.value) == ("config", "allow-dead-code", 1)


def test_fetch_alias_parses():
    args = build_parser().parse_args(["f", "slugs"])
    assert (args.action, args.fetch_command) == ("fetch", "slugs")


def test_missing_command_is_rejected():
    with pytest.raises(SystemExit):
        build_parser().parse_args([])


def test_main_config_username_writes_env(workspace):
    assert main(["config", "username", "alice"]) == 0
    assert (workspace / ".env").read_text() == "username=alice"


def test_main_config_premium_rejects_two(workspace, capsys):
    assert main(["config", "premium", "2"]) == 1
    assert not (workspace / ".env").exists()
    assert "should be either 0 or 1" in capsys.readouterr().out


def test_main_config_allow_dead_code_writes_env(workspace):
    assert main(["config", "allow-dead-code", "1"]) == 0
    assert (workspace / ".env").read_text() == "allow_dead_code=1"


def test_main_fetch_reports_not_implemented(capsys):
    assert main(["fetch", "slugs"]) == 0
    assert "not implemented yet" in capsys.readouterr().out


def test_main_clip_without_slug_fails(workspace):
    assert main(["clip", "3"]) == 1


def test_main_create_aborts_on_invalid_premium(workspace):
    (workspace / ".env").write_text("premium=7")
    assert main(["create", "1"]) == 1