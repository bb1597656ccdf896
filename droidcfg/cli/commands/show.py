from __future__ import annotations

import typer

from droidcfg.cli.commands._helpers import (
    PROPERTY_OPTION_HELP,
    exit_on_descriptor_error,
    load_descriptor,
)
from droidcfg.cli.context import CLIContext, build_context
from droidcfg.core.descriptor import BuildDescriptor
from droidcfg.core.result import Err
from droidcfg.output.console import Style
from droidcfg.services.descriptor import DescriptorService


def show(
    release: bool = typer.Option(
        False, "--release", help="Also assemble the release signing config (fails if incomplete)."
    ),
    properties: list[str] | None = typer.Option(
        None, "--property", "-P", help=PROPERTY_OPTION_HELP
    ),
) -> None:
    """Show the resolved build descriptor."""
    ctx = build_context()
    loaded = load_descriptor(ctx, properties)
    descriptor = loaded.descriptor

    ctx.console.print(f"project: {ctx.project.root}", Style.DIM)
    if loaded.flutter_sdk is not None:
        ctx.console.print(f"flutter sdk: {loaded.flutter_sdk}", Style.DIM)

    _print_descriptor(ctx, descriptor)

    if release:
        service = DescriptorService(project=ctx.project, console=ctx.console)
        signing = service.release_signing(descriptor)
        if isinstance(signing, Err):
            exit_on_descriptor_error(signing.error, ctx)
        ctx.console.header("Release signing")
        for name, value in signing.value.to_dict().items():
            ctx.console.print(f"{name}: {value}")


def _print_descriptor(ctx: CLIContext, descriptor: BuildDescriptor) -> None:
    console = ctx.console
    identity = descriptor.default_config.identity

    console.header("Plugins")
    for plugin in descriptor.plugins:
        console.print(plugin)

    console.header("Android")
    console.print(f"namespace: {descriptor.namespace}")
    console.print(f"compileSdk: {descriptor.compile_sdk}")
    console.print(f"ndkVersion: {descriptor.ndk_version}")
    console.print(f"java: {descriptor.compile_options.source_compatibility}")

    console.header("Default config")
    console.print(f"applicationId: {identity.application_id}")
    console.print(f"minSdk: {identity.min_platform_version}")
    console.print(f"targetSdk: {identity.target_platform_version}")
    console.print(f"versionCode: {identity.version_code}")
    console.print(f"versionName: {identity.version_name}")
    for placeholder in descriptor.default_config.manifest_placeholders:
        console.print(f"manifestPlaceholders[{placeholder.name}]: {placeholder.value}")

    console.header("Build types")
    for bt in descriptor.build_types:
        console.print(f"{bt.name}: signingConfig={bt.signing_config}")
