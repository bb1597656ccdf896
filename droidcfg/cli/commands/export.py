from __future__ import annotations

import json
from pathlib import Path

import typer

from droidcfg.cli.commands._helpers import PROPERTY_OPTION_HELP, load_descriptor
from droidcfg.cli.context import build_context
from droidcfg.core.errors import ErrorCode
from droidcfg.platform.files import atomic_write_text


def export(
    output: Path = typer.Argument(..., help="JSON file to write."),
    show_secrets: bool = typer.Option(
        False, "--show-secrets", help="Write key and store passwords in clear text."
    ),
    properties: list[str] | None = typer.Option(
        None, "--property", "-P", help=PROPERTY_OPTION_HELP
    ),
) -> None:
    """Write the resolved build descriptor as JSON."""
    ctx = build_context()
    loaded = load_descriptor(ctx, properties)

    payload = loaded.descriptor.to_dict(redact=not show_secrets)
    try:
        atomic_write_text(output, json.dumps(payload, indent=2) + "\n")
    except OSError as e:
        ctx.console.error(f"cannot write {output}: {e}")
        raise typer.Exit(code=int(ErrorCode.IO_ERROR))

    ctx.console.success(f"wrote {output}")
