"""Command line interface for Password Evaluator."""

from __future__ import annotations

import getpass
import json
import logging
from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from password_evaluator import __version__
from password_evaluator.config import Settings
from password_evaluator.corpus import MATCH_STRATEGIES, ReferenceCorpus, load_corpus
from password_evaluator.errors import InvalidInput
from password_evaluator.evaluator import EvaluationResult, PasswordEvaluator, validate_password_input
from password_evaluator.logs import configure_logging
from password_evaluator.web import create_app

EXIT_SUCCESS = 0
EXIT_USAGE = 1

console = Console()


def _prompt_password(password_opt: str | None) -> str:
    if password_opt is not None:
        return password_opt
    return getpass.getpass("Password: ")


def _strength_style(strength: str) -> str:
    if strength == "Very Strong":
        return "green"
    if strength == "Strong":
        return "cyan"
    if strength.startswith("Very Weak"):
        return "bold red"
    return "red"


def _settings(ctx: click.Context) -> Settings:
    return ctx.obj["settings"]


def _load(settings: Settings, corpus: Path | None, column: str | None) -> ReferenceCorpus:
    return load_corpus(
        corpus or settings.corpus_path,
        column=column or settings.corpus_column,
        delimiter=settings.corpus_delimiter,
    )


def _print_result(result: EvaluationResult) -> None:
    table = Table(show_header=False, box=None)
    table.add_row("Length", str(result.length))
    table.add_row("Keyspace", str(result.keyspace))
    table.add_row("Entropy", f"{result.display_entropy:.2f} bits")
    style = _strength_style(result.strength)
    table.add_row("Strength", f"[{style}]{result.strength}[/{style}]")
    table.add_row("Breach-listed", "yes" if result.is_common else "no")
    table.add_row("Contains common word", result.contained_common_word or "-")
    table.add_row("Estimated crack time", result.estimated_crack_time)

    console.print("[bold]Password evaluation[/bold]")
    console.print(table)
    console.print(result.recommendation, markup=False)


corpus_option = click.option(
    "--corpus",
    type=click.Path(path_type=Path),
    default=None,
    help="Delimited file of common passwords (defaults to $PASSWORD_EVALUATOR_CORPUS).",
)
column_option = click.option(
    "--column",
    default=None,
    help="Column holding the password in the corpus file.",
)


@click.group(
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=False,
)
@click.version_option(version=__version__, prog_name="Password Evaluator")
@click.option("--verbose/--quiet", "verbose", default=False, help="Show debug logging.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Estimate password strength and check it against breached-password lists."""
    configure_logging(logging.DEBUG if verbose else logging.WARNING)
    try:
        settings = Settings.from_env()
    except ValueError as exc:
        raise click.UsageError(str(exc)) from exc
    ctx.ensure_object(dict)
    ctx.obj["settings"] = settings
    ctx.obj["verbose"] = verbose


@cli.command(
    help="Evaluate a single password.",
    epilog="Examples:\n  pwevaluate evaluate\n  pwevaluate evaluate --password 'Tr0ub4dor&3' --json",
)
@click.option("--password", "password_opt", help="Password to evaluate (will prompt if omitted).")
@corpus_option
@column_option
@click.option(
    "--strategy",
    type=click.Choice(MATCH_STRATEGIES, case_sensitive=False),
    default=None,
    help="Partial-match strategy.",
)
@click.option("--json", "as_json", is_flag=True, default=False, help="Print the result as JSON.")
@click.pass_context
def evaluate(
    ctx: click.Context,
    password_opt: str | None,
    corpus: Path | None,
    column: str | None,
    strategy: str | None,
    as_json: bool,
) -> None:
    settings = _settings(ctx)
    try:
        password = validate_password_input(_prompt_password(password_opt))
    except InvalidInput as exc:
        console.print(f"[red]Error:[/red] {exc}")
        ctx.exit(EXIT_USAGE)
        return

    evaluator = PasswordEvaluator(
        _load(settings, corpus, column),
        strategy=strategy or settings.match_strategy,
    )
    result = evaluator.evaluate(password)

    if as_json:
        click.echo(json.dumps(result.to_dict(), ensure_ascii=False))
    else:
        _print_result(result)
    ctx.exit(EXIT_SUCCESS)


@cli.command(
    "corpus-info",
    help="Load a corpus file and report its size.",
    epilog="Example:\n  pwevaluate corpus-info --corpus data/1millionPasswords.csv",
)
@corpus_option
@column_option
@click.pass_context
def corpus_info(ctx: click.Context, corpus: Path | None, column: str | None) -> None:
    settings = _settings(ctx)
    source = corpus or settings.corpus_path
    reference = _load(settings, corpus, column)

    table = Table(show_header=False, box=None)
    table.add_row("Source", str(source))
    table.add_row("Column", column or settings.corpus_column)
    table.add_row("Entries", str(len(reference)))
    table.add_row("Partial-match entries", str(len(reference.partial_entries)))
    console.print("[bold]Reference corpus[/bold]")
    console.print(table)
    if not reference:
        console.print("[yellow]Corpus is empty; only entropy scoring will apply.[/yellow]")
    ctx.exit(EXIT_SUCCESS)


@cli.command(
    help="Serve the evaluation API over HTTP.",
    epilog="Example:\n  pwevaluate serve --port 3000 --corpus data/1millionPasswords.csv",
)
@click.option("--host", default=None, help="Interface to bind (defaults to $PASSWORD_EVALUATOR_HOST).")
@click.option("--port", type=click.IntRange(1, 65535), default=None, help="Port to bind (defaults to $PORT).")
@corpus_option
@column_option
@click.pass_context
def serve(
    ctx: click.Context,
    host: str | None,
    port: int | None,
    corpus: Path | None,
    column: str | None,
) -> None:
    settings = _settings(ctx)
    configure_logging(logging.DEBUG if ctx.obj["verbose"] else logging.INFO)
    evaluator = PasswordEvaluator(_load(settings, corpus, column), strategy=settings.match_strategy)
    app = create_app(evaluator)

    bind_host = host or settings.host
    bind_port = port or settings.port
    console.print(f"[green]Serving on[/green] http://{bind_host}:{bind_port}/")
    app.run(host=bind_host, port=bind_port, debug=False, threaded=True)
    ctx.exit(EXIT_SUCCESS)


@cli.command("version", help="Print the installed version.")
def version_cmd() -> None:
    console.print(f"Password Evaluator, version {__version__}")


def main(argv: list[str] | None = None) -> int:
    try:
        return cli.main(args=argv, prog_name="pwevaluate", standalone_mode=False)
    except SystemExit as exc:  # noqa: TRY003
        code = exc.code if isinstance(exc.code, int) else EXIT_USAGE
        return code
    except click.ClickException as exc:
        exc.show()
        return EXIT_USAGE


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
