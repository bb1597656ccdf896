from __future__ import annotations

from dataclasses import dataclass

import typer

from droidcfg.core.errors import ErrorCode
from droidcfg.core.project import AndroidProject, detect_project
from droidcfg.core.result import Err
from droidcfg.output.console import ConsoleProtocol, RichConsole


@dataclass(frozen=True, slots=True)
class CLIContext:
    project: AndroidProject
    console: ConsoleProtocol


def build_context(*, log_to_stderr: bool = False) -> CLIContext:
    """Detect the project and open the build-log console.

    Commands whose stdout is machine-readable pass ``log_to_stderr`` so the
    build log stays out of it.
    """
    project_result = detect_project()
    if isinstance(project_result, Err):
        error = project_result.error
        typer.echo(f"error: {error.message}", err=True)
        if error.hint:
            typer.echo(f"hint: {error.hint}", err=True)
        raise typer.Exit(code=int(ErrorCode.USER_ERROR))

    return CLIContext(project=project_result.value, console=RichConsole(stderr=log_to_stderr))
