from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from droidcfg.core.descriptor import (
    PLUGINS,
    RELEASE,
    BuildDescriptor,
    DefaultConfig,
    PluginOrderInvalid,
    validate_plugin_order,
)
from droidcfg.core.identity import IdentityInvalid, load_application_identity
from droidcfg.core.placeholders import resolve_manifest_placeholders
from droidcfg.core.project import AndroidProject
from droidcfg.core.project_properties import load_project_properties
from droidcfg.core.properties import PropertiesParseError, PropertiesReadError
from droidcfg.core.result import Err, Ok, Result
from droidcfg.core.signing import (
    ReleaseSigningConfig,
    SigningFieldsMissing,
    assemble_release_signing,
    load_signing_credentials,
)
from droidcfg.output.console import ConsoleProtocol

__all__ = ["DescriptorError", "DescriptorService", "LoadedDescriptor", "BuildTypeNotFound"]


@dataclass(frozen=True, slots=True)
class BuildTypeNotFound:
    name: str

    @property
    def message(self) -> str:
        return f"unknown build type: {self.name}"


DescriptorError = (
    PropertiesParseError
    | PropertiesReadError
    | IdentityInvalid
    | PluginOrderInvalid
    | SigningFieldsMissing
    | BuildTypeNotFound
)


@dataclass(frozen=True, slots=True)
class LoadedDescriptor:
    descriptor: BuildDescriptor
    properties: Mapping[str, str]
    flutter_sdk: Path | None = None


class DescriptorService:
    """Loads the build descriptor of one Android project.

    One linear pass: signing credentials, project properties, versioning
    provider, then assembly. The first failure stops the pass.
    """

    def __init__(
        self,
        *,
        project: AndroidProject,
        console: ConsoleProtocol,
        plugins: tuple[str, ...] = PLUGINS,
    ) -> None:
        self._project = project
        self._console = console
        self._plugins = plugins

    @property
    def project(self) -> AndroidProject:
        return self._project

    def load(
        self,
        *,
        overrides: Mapping[str, str] | None = None,
        environ: Mapping[str, str] | None = None,
        user_home: Path | None = None,
    ) -> Result[LoadedDescriptor, DescriptorError]:
        plugins = validate_plugin_order(self._plugins)
        if isinstance(plugins, Err):
            return plugins

        credentials = load_signing_credentials(
            self._project.key_properties_path, console=self._console
        )
        if isinstance(credentials, Err):
            return credentials

        properties = load_project_properties(
            self._project.root,
            overrides=overrides,
            environ=environ,
            user_home=user_home,
        )
        if isinstance(properties, Err):
            return properties

        versioning = load_application_identity(self._project.local_properties_path)
        if isinstance(versioning, Err):
            return versioning

        descriptor = BuildDescriptor(
            plugins=plugins.value,
            default_config=DefaultConfig(
                identity=versioning.value.identity,
                manifest_placeholders=resolve_manifest_placeholders(properties.value),
            ),
            signing_configs={RELEASE: credentials.value},
        )
        return Ok(
            LoadedDescriptor(
                descriptor=descriptor,
                properties=properties.value,
                flutter_sdk=versioning.value.flutter_sdk,
            )
        )

    def release_signing(
        self,
        descriptor: BuildDescriptor,
        *,
        build_type: str = RELEASE,
    ) -> Result[ReleaseSigningConfig, SigningFieldsMissing | BuildTypeNotFound]:
        """Assemble the signing config a build type refers to."""
        bt = descriptor.build_type(build_type)
        if bt is None or bt.signing_config is None:
            return Err(BuildTypeNotFound(build_type))

        credentials = descriptor.signing_configs.get(bt.signing_config)
        if credentials is None:
            return Err(BuildTypeNotFound(build_type))

        return assemble_release_signing(
            credentials,
            module_dir=self._project.app_dir,
            source=self._project.key_properties_path,
        )
