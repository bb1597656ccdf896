from __future__ import annotations

import typer

from droidcfg.cli.commands._helpers import PROPERTY_OPTION_HELP, load_descriptor
from droidcfg.cli.context import build_context
from droidcfg.output.console import Style


def placeholders(
    properties: list[str] | None = typer.Option(
        None, "--property", "-P", help=PROPERTY_OPTION_HELP
    ),
) -> None:
    """Print resolved manifest placeholders as NAME=value lines.

    Only the NAME=value lines go to stdout; the build log goes to stderr.
    """
    ctx = build_context(log_to_stderr=True)
    loaded = load_descriptor(ctx, properties)

    for placeholder in loaded.descriptor.default_config.manifest_placeholders:
        typer.echo(f"{placeholder.name}={placeholder.value}")
        if placeholder.from_fallback:
            ctx.console.print(f"{placeholder.name} unset, fallback used", Style.DIM)
