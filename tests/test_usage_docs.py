from pathlib import Path

from click.testing import CliRunner

from password_evaluator.cli import cli


def test_help_commands_run() -> None:
    runner = CliRunner()
    assert runner.invoke(cli, ["--help"]).exit_code == 0
    assert runner.invoke(cli, ["evaluate", "--help"]).exit_code == 0
    assert runner.invoke(cli, ["serve", "--help"]).exit_code == 0
    assert runner.invoke(cli, ["corpus-info", "--help"]).exit_code == 0


def test_readme_documents_commands_and_endpoint() -> None:
    repo_root = Path(__file__).resolve().parent.parent
    readme = (repo_root / "README.md").read_text(encoding="utf-8")

    assert "pwevaluate evaluate" in readme
    assert "pwevaluate serve" in readme
    assert "/api/v1/password/evaluate" in readme
