"""Handpick CLI - curated completion candidates.

Commands:
    handpick edit              Open the completing line editor
    handpick add TEXT...       Add candidates
    handpick remove TEXT...    Remove candidates
    handpick clear             Remove every candidate
    handpick list [PREFIX]     Show candidates starting with PREFIX
    handpick path              Print the candidate file location
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from handpick.config import HandpickConfig, config_dir, load_config
from handpick.exceptions import ConfigError, PersistenceError
from handpick.repl.channels import enable_debug
from handpick.session import CandidateSession

app = typer.Typer(
    name="handpick",
    help="Curated completion candidates that persist across sessions",
    no_args_is_help=True,
)

_err = Console(stderr=True)


def _report(err: PersistenceError) -> None:
    _err.print(f"[red]error:[/red] {escape(str(err))}")


@app.callback()
def main_options(
    ctx: typer.Context,
    file: Annotated[
        Optional[Path],
        typer.Option("--file", "-f", help="Candidate file (overrides config)"),
    ] = None,
    config: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help="Config TOML (default ~/.handpick/config.toml)"),
    ] = None,
    debug: Annotated[
        bool,
        typer.Option("--debug", help="Write a debug log to ~/.handpick/debug.log"),
    ] = False,
):
    try:
        cfg = load_config(config)
    except ConfigError as e:
        _err.print(f"[red]error:[/red] {escape(str(e))}")
        raise typer.Exit(2)
    if file is not None:
        cfg = cfg.model_copy(update={"persistence_file_path": file.expanduser()})
    if debug:
        enable_debug(config_dir())
    ctx.obj = cfg


def _open(ctx: typer.Context, *, writing: bool = False) -> CandidateSession:
    """Session with candidates loaded. CLI commands always read the file.

    With writing set, an unreadable file aborts with status 1 and is left as is.
    """
    cfg: HandpickConfig = ctx.obj
    session = CandidateSession(
        cfg.model_copy(update={"restore_on_startup": True}), on_error=_report
    )
    session.start()
    if writing and session.load_error is not None:
        raise typer.Exit(1)
    return session


def _commit(session: CandidateSession) -> None:
    if not session.save():
        raise typer.Exit(1)


@app.command("edit")
def edit(ctx: typer.Context):
    """Open the line editor with candidate completion."""
    from handpick.repl import launch

    launch(ctx.obj)


@app.command("add")
def add(
    ctx: typer.Context,
    texts: Annotated[list[str], typer.Argument(help="Candidates to add")],
):
    """Add candidates.

    Examples:
        handpick add numpy.ndarray
        handpick add "two words" another
    """
    session = _open(ctx, writing=True)
    for text in texts:
        if text:
            session.store.add(text)
    _commit(session)


@app.command("remove")
def remove(
    ctx: typer.Context,
    texts: Annotated[list[str], typer.Argument(help="Candidates to remove")],
):
    """Remove candidates. Names that are not present are ignored."""
    session = _open(ctx, writing=True)
    for text in texts:
        session.store.remove(text)
    _commit(session)


@app.command("clear")
def clear(
    ctx: typer.Context,
    yes: Annotated[bool, typer.Option("--yes", "-y", help="Do not ask")] = False,
):
    """Remove every candidate."""
    session = _open(ctx, writing=True)
    if not yes and len(session.store):
        typer.confirm(f"Remove all {len(session.store)} candidates?", abort=True)
    session.store.clear()
    _commit(session)


@app.command("list")
def list_candidates(
    ctx: typer.Context,
    prefix: Annotated[str, typer.Argument(help="Only candidates starting with this")] = "",
    plain: Annotated[bool, typer.Option("--plain", help="One per line, no table")] = False,
):
    """Show candidates in store order."""
    session = _open(ctx)
    matches = session.store.query(prefix)
    if plain:
        for m in matches:
            typer.echo(m)
        return
    table = Table("#", "candidate", title=escape(str(session.path)), title_justify="left")
    for i, m in enumerate(matches, start=1):
        table.add_row(str(i), escape(m))
    Console().print(table)


@app.command("path")
def path(ctx: typer.Context):
    """Print the candidate file location."""
    typer.echo(str(ctx.obj.persistence_file_path))


def main():
    app()


if __name__ == "__main__":
    main()
