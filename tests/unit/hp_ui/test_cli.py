import pytest
from typer.testing import CliRunner

from hp_common.errors import ConfigurationError, ProducerMismatchError
from hp_ui.cli import EXIT_CANCELLED, EXIT_USAGE, _describe_error, app


pytestmark = pytest.mark.unit_ui

runner = CliRunner()


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    monkeypatch.setattr("hp_ui.cli.configure_logging", lambda **_: None)
    for key in ("HP_ALPHABET", "HP_NEXT_PAGE", "HP_PREV_PAGE", "HP_UNDER_CURSOR", "HP_CANCEL", "HP_MAX_WIDTH"):
        monkeypatch.delenv(key, raising=False)


def test_tags_command() -> None:
    result = runner.invoke(app, ["tags", "3", "--alphabet", "ab"])
    assert result.exit_code == 0
    assert result.stdout.split() == ["aa", "ab", "ba"]


def test_tags_command_rejects_bad_alphabet() -> None:
    result = runner.invoke(app, ["tags", "3", "--alphabet", "a"])
    assert result.exit_code == EXIT_USAGE


def test_headless_pick_from_stdin() -> None:
    result = runner.invoke(
        app,
        ["pick", "--headless", "--alphabet", "ab", "--keys", "a b"],
        input="one\ntwo\n\nthree\n",
    )
    assert result.exit_code == 0
    assert result.stdout.strip().splitlines()[-1] == "1\ttwo"


def test_headless_pick_from_file_with_paging(tmp_path) -> None:
    items = tmp_path / "items.txt"
    items.write_text("\n".join(f"file{i}.py" for i in range(5)))

    result = runner.invoke(
        app,
        ["pick", str(items), "--headless", "--alphabet", "ab", "--capacity", "2", "--keys", "J enter"],
    )
    assert result.exit_code == 0
    assert result.stdout.strip().splitlines()[-1] == "2\tfile2.py"


def test_headless_pick_cancelled() -> None:
    result = runner.invoke(app, ["pick", "--headless", "--keys", "escape"], input="one\n")
    assert result.exit_code == EXIT_CANCELLED


def test_pick_without_items() -> None:
    result = runner.invoke(app, ["pick", "--headless"], input="\n\n")
    assert result.exit_code == EXIT_CANCELLED


def test_pick_missing_file(tmp_path) -> None:
    result = runner.invoke(app, ["pick", str(tmp_path / "nope.txt"), "--headless"])
    assert result.exit_code == EXIT_USAGE


def test_interactive_pick_needs_terminal() -> None:
    result = runner.invoke(app, ["pick"], input="one\n")
    assert result.exit_code == EXIT_USAGE


def test_error_description_uses_payload_context(tmp_path) -> None:
    err = ConfigurationError("Cannot read items file", context={"path": tmp_path / "x.txt"})
    assert _describe_error(err) == f"Cannot read items file (path={tmp_path / 'x.txt'})"
    assert _describe_error(ProducerMismatchError("mismatch")) == "mismatch"


def test_pick_missing_file_reports_error() -> None:
    result = runner.invoke(app, ["pick", "nope-items.txt", "--headless"])
    assert result.exit_code == EXIT_USAGE
    assert "Cannot read items file" in result.output


def test_debug_is_a_global_option() -> None:
    result = runner.invoke(
        app, ["--debug", "pick", "--headless", "--alphabet", "ab", "--keys", "a"], input="one\ntwo\n"
    )
    assert result.exit_code == 0
    assert result.stdout.strip().splitlines()[-1] == "0\tone"
