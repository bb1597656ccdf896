from __future__ import annotations

import os
from pathlib import Path

import typer

from droidcfg import __version__
from droidcfg.cli.commands.check import check
from droidcfg.cli.commands.export import export
from droidcfg.cli.commands.placeholders import placeholders
from droidcfg.cli.commands.show import show
from droidcfg.core.errors import ErrorCode
from droidcfg.core.project import PROJECT_ROOT_ENV, is_project_root


app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    rich_markup_mode="rich",
)


app.command()(show)
app.command()(check)
app.command()(placeholders)
app.command()(export)


@app.callback()
def _main(  # pyright: ignore[reportUnusedFunction]
    version: bool = typer.Option(False, "--version", help="Show version and exit."),
    project: Path | None = typer.Option(
        None,
        "--project",
        help="Android project root (overrides auto detection)",
    ),
) -> None:
    if version:
        typer.echo(__version__)
        raise typer.Exit(code=0)

    if project is not None:
        try:
            root = project.expanduser().resolve()
        except OSError as e:
            typer.echo(f"error: invalid --project: {e}", err=True)
            raise typer.Exit(code=int(ErrorCode.USER_ERROR))

        if not root.is_dir() or not is_project_root(root):
            typer.echo(
                f"error: --project '{root}' is not an Android project (missing settings.gradle.kts)",
                err=True,
            )
            raise typer.Exit(code=int(ErrorCode.USER_ERROR))

        os.environ[PROJECT_ROOT_ENV] = str(root)


def main() -> None:
    app()
