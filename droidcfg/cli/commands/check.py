from __future__ import annotations

import typer

from droidcfg.cli.commands._helpers import (
    PROPERTY_OPTION_HELP,
    exit_on_descriptor_error,
    load_descriptor,
)
from droidcfg.cli.context import build_context
from droidcfg.core.result import Err
from droidcfg.output.console import Style
from droidcfg.services.descriptor import DescriptorService


def check(
    properties: list[str] | None = typer.Option(
        None, "--property", "-P", help=PROPERTY_OPTION_HELP
    ),
) -> None:
    """Check that a release package could be signed."""
    ctx = build_context()
    loaded = load_descriptor(ctx, properties)

    service = DescriptorService(project=ctx.project, console=ctx.console)
    signing = service.release_signing(loaded.descriptor)
    if isinstance(signing, Err):
        exit_on_descriptor_error(signing.error, ctx)

    store_file = signing.value.store_file
    if not store_file.is_file():
        ctx.console.warning(f"keystore not found: {store_file}")
        ctx.console.print("hint: storeFile is resolved relative to the app/ module", Style.DIM)

    for placeholder in loaded.descriptor.default_config.manifest_placeholders:
        if placeholder.from_fallback:
            ctx.console.warning(f"{placeholder.name} not set, using {placeholder.value!r}")

    ctx.console.success("release signing config is complete")
