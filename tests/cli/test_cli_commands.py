from pathlib import Path

from click.testing import CliRunner

from officewatch.cli import cli
from tests.helpers import add_commit, init_repo, local_ts


def test_classify_reports_room_activity_and_task(tmp_path: Path) -> None:
    result = CliRunner().invoke(cli, ["--config-dir", str(tmp_path), "classify", "textevidence/src/app.ts"])

    assert result.exit_code == 0, result.output
    assert "TEXTEVIDENCE" in result.output
    assert "coding" in result.output
    assert "Working on TextEvidence: app.ts" in result.output


def test_classify_with_command(tmp_path: Path) -> None:
    result = CliRunner().invoke(
        cli,
        ["--config-dir", str(tmp_path), "classify", "notes.md", "--command", "git commit -m wip"],
    )

    assert result.exit_code == 0, result.output
    assert "IDLE" in result.output
    assert "commit" in result.output


def test_history_classifies_shell_commands(tmp_path: Path) -> None:
    history = tmp_path / "history"
    history.write_text("ls\nnpm install\ncurl localhost:3001/api/status\n", encoding="utf-8")
    (tmp_path / "config.yaml").write_text(f"history_file: {history}\n", encoding="utf-8")

    result = CliRunner().invoke(cli, ["--config-dir", str(tmp_path), "history", "--limit", "2"])

    assert result.exit_code == 0, result.output
    assert "npm install" in result.output
    assert "build" in result.output
    assert "api" in result.output
    assert "Last 2 commands" in result.output


def test_commits_lists_recent_history(tmp_path: Path) -> None:
    repo = init_repo(tmp_path / "ws")
    add_commit(repo, "Ship status endpoint", local_ts(2026, 3, 10, 9))
    config_dir = tmp_path / "config"
    config_dir.mkdir()

    result = CliRunner().invoke(
        cli,
        ["--config-dir", str(config_dir), "commits", "--workspace", str(tmp_path / "ws")],
    )

    assert result.exit_code == 0, result.output
    assert "Ship status endpoint" in result.output


def test_version() -> None:
    result = CliRunner().invoke(cli, ["version"])

    assert result.exit_code == 0
    assert "OfficeWatch" in result.output
