"""Build descriptor records.

Plain ordered records standing in for the ``plugins {}``, ``android {}`` and
``flutter {}`` blocks of the app module's build script.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .identity import APPLICATION_ID, ApplicationIdentity
from .placeholders import ManifestPlaceholder
from .result import Err, Ok, Result
from .signing import REDACTED, SigningCredentials

__all__ = [
    "PLUGINS",
    "NAMESPACE",
    "COMPILE_SDK",
    "NDK_VERSION",
    "JAVA_VERSION",
    "FLUTTER_SOURCE",
    "RELEASE",
    "CompileOptions",
    "DefaultConfig",
    "BuildType",
    "BuildDescriptor",
    "PluginOrderInvalid",
    "validate_plugin_order",
]

ANDROID_APPLICATION_PLUGIN = "com.android.application"
KOTLIN_ANDROID_PLUGIN = "kotlin-android"
FLUTTER_GRADLE_PLUGIN = "dev.flutter.flutter-gradle-plugin"

# Applied in this order. The Flutter plugin must follow the Android and
# Kotlin plugins.
PLUGINS: tuple[str, ...] = (
    ANDROID_APPLICATION_PLUGIN,
    "com.google.gms.google-services",
    "com.google.firebase.crashlytics",
    KOTLIN_ANDROID_PLUGIN,
    FLUTTER_GRADLE_PLUGIN,
)

NAMESPACE = APPLICATION_ID
COMPILE_SDK = 35
NDK_VERSION = "27.0.12077973"
JAVA_VERSION = 11
FLUTTER_SOURCE = "../.."

RELEASE = "release"


@dataclass(frozen=True, slots=True)
class PluginOrderInvalid:
    plugin: str
    must_follow: str

    @property
    def message(self) -> str:
        return f"plugin {self.plugin} must be applied after {self.must_follow}"


def validate_plugin_order(plugins: tuple[str, ...]) -> Result[tuple[str, ...], PluginOrderInvalid]:
    if FLUTTER_GRADLE_PLUGIN not in plugins:
        return Ok(plugins)
    flutter_at = plugins.index(FLUTTER_GRADLE_PLUGIN)
    for required in (ANDROID_APPLICATION_PLUGIN, KOTLIN_ANDROID_PLUGIN):
        if required not in plugins[:flutter_at]:
            return Err(PluginOrderInvalid(plugin=FLUTTER_GRADLE_PLUGIN, must_follow=required))
    return Ok(plugins)


@dataclass(frozen=True, slots=True)
class CompileOptions:
    source_compatibility: int = JAVA_VERSION
    target_compatibility: int = JAVA_VERSION

    @property
    def jvm_target(self) -> str:
        return str(self.target_compatibility)


@dataclass(frozen=True, slots=True)
class DefaultConfig:
    identity: ApplicationIdentity
    manifest_placeholders: tuple[ManifestPlaceholder, ...] = ()

    def placeholder_map(self) -> dict[str, str]:
        return {p.name: p.value for p in self.manifest_placeholders}


@dataclass(frozen=True, slots=True)
class BuildType:
    name: str
    signing_config: str | None = None


def _release_build_types() -> tuple[BuildType, ...]:
    return (BuildType(name=RELEASE, signing_config=RELEASE),)


@dataclass(frozen=True, slots=True)
class BuildDescriptor:
    """Everything the packaging toolchain needs, resolved once per build."""

    default_config: DefaultConfig
    signing_configs: dict[str, SigningCredentials]
    plugins: tuple[str, ...] = PLUGINS
    namespace: str = NAMESPACE
    compile_sdk: int = COMPILE_SDK
    ndk_version: str = NDK_VERSION
    compile_options: CompileOptions = field(default_factory=CompileOptions)
    build_types: tuple[BuildType, ...] = field(default_factory=_release_build_types)
    flutter_source: str = FLUTTER_SOURCE

    def build_type(self, name: str) -> BuildType | None:
        for bt in self.build_types:
            if bt.name == name:
                return bt
        return None

    def to_dict(self, *, redact: bool = True) -> dict[str, object]:
        """JSON-ready view. Passwords are masked unless ``redact`` is False."""
        signing: dict[str, object] = {}
        for name, creds in self.signing_configs.items():
            values = creds.as_properties()
            if redact:
                for secret in ("keyPassword", "storePassword"):
                    if values[secret] is not None:
                        values[secret] = REDACTED
            signing[name] = values

        return {
            "plugins": list(self.plugins),
            "android": {
                "namespace": self.namespace,
                "compileSdk": self.compile_sdk,
                "ndkVersion": self.ndk_version,
                "compileOptions": {
                    "sourceCompatibility": self.compile_options.source_compatibility,
                    "targetCompatibility": self.compile_options.target_compatibility,
                },
                "kotlinOptions": {"jvmTarget": self.compile_options.jvm_target},
                "signingConfigs": signing,
                "defaultConfig": {
                    **self.default_config.identity.to_dict(),
                    "manifestPlaceholders": self.default_config.placeholder_map(),
                },
                "buildTypes": {bt.name: {"signingConfig": bt.signing_config} for bt in self.build_types},
            },
            "flutter": {"source": self.flutter_source},
        }
