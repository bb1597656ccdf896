"""Tests for droidcfg.core.descriptor module."""

from __future__ import annotations

from droidcfg.core.descriptor import (
    PLUGINS,
    RELEASE,
    BuildDescriptor,
    BuildType,
    CompileOptions,
    DefaultConfig,
    PluginOrderInvalid,
    validate_plugin_order,
)
from droidcfg.core.identity import ApplicationIdentity
from droidcfg.core.placeholders import ManifestPlaceholder
from droidcfg.core.result import Err, Ok
from droidcfg.core.signing import SigningCredentials


def _descriptor(creds: SigningCredentials) -> BuildDescriptor:
    return BuildDescriptor(
        default_config=DefaultConfig(
            identity=ApplicationIdentity("com.manoooz.syria_jobs", 23, 34, 3, "1.0.2"),
            manifest_placeholders=(ManifestPlaceholder("ADMOB_APP_ID", "ca-app-pub-123"),),
        ),
        signing_configs={RELEASE: creds},
    )


class TestPluginOrder:
    def test_declared_order_is_valid(self) -> None:
        assert validate_plugin_order(PLUGINS) == Ok(PLUGINS)

    def test_flutter_plugin_is_last(self) -> None:
        assert PLUGINS[-1] == "dev.flutter.flutter-gradle-plugin"

    def test_flutter_before_kotlin_is_invalid(self) -> None:
        plugins = (
            "com.android.application",
            "dev.flutter.flutter-gradle-plugin",
            "kotlin-android",
        )
        assert validate_plugin_order(plugins) == Err(
            PluginOrderInvalid(plugin="dev.flutter.flutter-gradle-plugin", must_follow="kotlin-android")
        )

    def test_without_flutter_plugin(self) -> None:
        assert isinstance(validate_plugin_order(("com.android.application",)), Ok)


class TestBuildDescriptor:
    def test_fixed_values(self) -> None:
        d = _descriptor(SigningCredentials())
        assert d.namespace == "com.manoooz.syria_jobs"
        assert d.ndk_version == "27.0.12077973"
        assert d.compile_options == CompileOptions(11, 11)
        assert d.compile_options.jvm_target == "11"
        assert d.flutter_source == "../.."

    def test_release_build_type_uses_release_signing(self) -> None:
        d = _descriptor(SigningCredentials())
        assert d.build_type("release") == BuildType(name="release", signing_config="release")
        assert d.build_type("debug") is None

    def test_to_dict_redacts_passwords(self) -> None:
        creds = SigningCredentials("upload", "kp", "upload.jks", "sp")

        data = _descriptor(creds).to_dict()

        android = data["android"]
        assert isinstance(android, dict)
        assert android["signingConfigs"] == {
            "release": {
                "keyAlias": "upload",
                "keyPassword": "****",
                "storeFile": "upload.jks",
                "storePassword": "****",
            }
        }
        assert android["defaultConfig"]["manifestPlaceholders"] == {"ADMOB_APP_ID": "ca-app-pub-123"}
        assert android["kotlinOptions"] == {"jvmTarget": "11"}
        assert data["flutter"] == {"source": "../.."}

    def test_to_dict_keeps_unset_secrets_null(self) -> None:
        data = _descriptor(SigningCredentials(key_alias="upload")).to_dict()
        android = data["android"]
        assert isinstance(android, dict)
        assert android["signingConfigs"]["release"]["keyPassword"] is None

    def test_to_dict_clear_text(self) -> None:
        creds = SigningCredentials("upload", "kp", "upload.jks", "sp")
        android = _descriptor(creds).to_dict(redact=False)["android"]
        assert isinstance(android, dict)
        assert android["signingConfigs"]["release"]["storePassword"] == "sp"
