import pytest

from teaclock import cli


@pytest.fixture
def fake_run(monkeypatch, tmp_path):
    calls = []

    def run(config_path, minutes, plugins):
        calls.append((config_path, minutes, plugins))

    monkeypatch.setattr(cli, "run", run)
    monkeypatch.setattr(cli, "_setup_logging", lambda: None)
    monkeypatch.chdir(tmp_path)
    return calls


def test_run_defaults(fake_run):
    cli.main(["run"])

    assert fake_run == [(None, None, None)]


def test_run_picks_up_default_config_when_present(fake_run, tmp_path):
    (tmp_path / "config").mkdir()
    (tmp_path / "config" / "config.yaml").write_text("minutes: 1\n", encoding="utf-8")

    cli.main(["run"])

    assert fake_run == [(cli.DEFAULT_CONFIG, None, None)]


def test_run_options(fake_run):
    cli.main(["run", "--config", "x.yaml", "--minutes", "0.5", "--plugin", "bell", "--plugin", "beep"])
    cli.main(["run", "--no-plugins"])

    assert fake_run == [("x.yaml", 0.5, ["bell", "beep"]), (None, None, [])]


@pytest.mark.parametrize(
    "argv",
    [
        ["run", "--minutes", "-1"],
        ["run", "--minutes", "abc"],
        ["run", "--minutes", "inf"],
        ["run", "--minutes", "nan"],
        ["run", "--minutes", "1e300"],
        ["run", "--plugin", "beep", "--no-plugins"],
    ],
)
def test_bad_arguments_exit(fake_run, argv):
    with pytest.raises(SystemExit) as exc:
        cli.main(argv)

    assert exc.value.code == 2
    assert fake_run == []


def test_errors_exit_with_status_1(monkeypatch, tmp_path):
    def run(config_path, minutes, plugins):
        raise ValueError("config: plugins[0] 'kettle' not in plugin registry")

    monkeypatch.setattr(cli, "run", run)
    monkeypatch.setattr(cli, "_setup_logging", lambda: None)
    monkeypatch.chdir(tmp_path)

    with pytest.raises(SystemExit) as exc:
        cli.main(["run"])
    assert exc.value.code == 1


def test_plugins_command_lists_ids(capsys):
    cli.main(["plugins"])

    assert capsys.readouterr().out.split() == ["log", "bell", "beep"]


def test_end_to_end_zero_minutes(monkeypatch, tmp_path, capsys):
    monkeypatch.setattr(cli, "_setup_logging", lambda: None)
    monkeypatch.chdir(tmp_path)

    cli.main(["run", "--minutes", "0", "--plugin", "beep"])

    assert capsys.readouterr().out == "BEEP!\nTea is ready!\n"


def test_infinite_minutes_in_config_exits_with_status_1(monkeypatch, tmp_path):
    monkeypatch.setattr(cli, "_setup_logging", lambda: None)
    monkeypatch.chdir(tmp_path)
    (tmp_path / "tea.yaml").write_text("minutes: .inf\n", encoding="utf-8")

    with pytest.raises(SystemExit) as exc:
        cli.main(["run", "--config", "tea.yaml", "--no-plugins"])
    assert exc.value.code == 1
