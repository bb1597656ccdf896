"""Shared helpers for CLI commands."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING, NoReturn

import typer

from droidcfg.core.errors import ErrorCode
from droidcfg.core.project_properties import parse_overrides
from droidcfg.core.result import Err
from droidcfg.output.errors import descriptor_error_exit_code, print_descriptor_error
from droidcfg.services.descriptor import DescriptorError, DescriptorService, LoadedDescriptor

if TYPE_CHECKING:
    from droidcfg.cli.context import CLIContext


PROPERTY_OPTION_HELP = "Project property override NAME=value (repeatable), like gradle -P."


def exit_on_descriptor_error(error: DescriptorError, ctx: CLIContext) -> NoReturn:
    print_descriptor_error(error, ctx.console)
    raise typer.Exit(code=descriptor_error_exit_code(error))


def load_descriptor(ctx: CLIContext, properties: list[str] | None) -> LoadedDescriptor:
    """Run the descriptor pass for a command, exiting on the first failure."""
    overrides = parse_overrides(properties or [])
    if isinstance(overrides, Err):
        ctx.console.error(overrides.error.message)
        raise typer.Exit(code=int(ErrorCode.USER_ERROR))

    service = DescriptorService(project=ctx.project, console=ctx.console)
    result = service.load(overrides=overrides.value, environ=os.environ)
    if isinstance(result, Err):
        exit_on_descriptor_error(result.error, ctx)
    return result.value
