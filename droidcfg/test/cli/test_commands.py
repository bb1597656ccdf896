from __future__ import annotations

import json
from pathlib import Path

import pytest
import typer

from droidcfg.cli.context import CLIContext
from droidcfg.core.errors import ErrorCode
from droidcfg.core.project import AndroidProject
from droidcfg.output.console import MockConsole

KEY_PROPERTIES = (
    "keyAlias=upload\n"
    "keyPassword=kp\n"
    "storeFile=upload-keystore.jks\n"
    "storePassword=sp\n"
)


def _ctx(tmp_path: Path, *, key_properties: str | None = KEY_PROPERTIES) -> CLIContext:
    root = tmp_path / "android"
    (root / "app").mkdir(parents=True)
    (root / "settings.gradle.kts").write_text("", encoding="utf-8")
    if key_properties is not None:
        (root / "key.properties").write_text(key_properties, encoding="utf-8")
    return CLIContext(project=AndroidProject(root=root), console=MockConsole())


@pytest.fixture(autouse=True)
def _isolated_gradle_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    home = tmp_path / "gradle-home"
    home.mkdir()
    monkeypatch.setenv("GRADLE_USER_HOME", str(home))
    monkeypatch.delenv("ORG_GRADLE_PROJECT_ADMOB_APP_ID", raising=False)


def _console(ctx: CLIContext) -> MockConsole:
    assert isinstance(ctx.console, MockConsole)
    return ctx.console


def test_placeholders_stdout_holds_only_values(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    import droidcfg.cli.commands.placeholders as cmd

    ctx = _ctx(tmp_path)
    requested: dict[str, object] = {}

    def _build_context(**kwargs: object) -> CLIContext:
        requested.update(kwargs)
        return ctx

    monkeypatch.setattr(cmd, "build_context", _build_context)

    cmd.placeholders(properties=["ADMOB_APP_ID=ca-app-pub-123"])

    assert capsys.readouterr().out == "ADMOB_APP_ID=ca-app-pub-123\n"
    assert requested == {"log_to_stderr": True}
    assert _console(ctx).messages == ["Key Alias: upload"]


def test_placeholders_prints_fallback(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    import droidcfg.cli.commands.placeholders as cmd

    ctx = _ctx(tmp_path)
    monkeypatch.setattr(cmd, "build_context", lambda **_: ctx)

    cmd.placeholders(properties=None)

    assert capsys.readouterr().out == "ADMOB_APP_ID=default_admob_app_id\n"
    assert _console(ctx).find("fallback used")


def test_invalid_override_is_user_error(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    import droidcfg.cli.commands.placeholders as cmd

    ctx = _ctx(tmp_path)
    monkeypatch.setattr(cmd, "build_context", lambda **_: ctx)

    with pytest.raises(typer.Exit) as exc:
        cmd.placeholders(properties=["ADMOB_APP_ID"])

    assert exc.value.exit_code == int(ErrorCode.USER_ERROR)


def test_check_passes_with_complete_credentials(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    import droidcfg.cli.commands.check as cmd

    ctx = _ctx(tmp_path)
    (ctx.project.app_dir / "upload-keystore.jks").write_bytes(b"\x00")
    monkeypatch.setattr(cmd, "build_context", lambda: ctx)

    cmd.check(properties=["ADMOB_APP_ID=ca-app-pub-123"])

    console = _console(ctx)
    assert console.messages[0] == "Key Alias: upload"
    assert "OK release signing config is complete" in console.messages
    assert not console.has_warning()


def test_check_warns_on_missing_keystore_and_fallback(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    import droidcfg.cli.commands.check as cmd

    ctx = _ctx(tmp_path)
    monkeypatch.setattr(cmd, "build_context", lambda: ctx)

    cmd.check(properties=None)

    console = _console(ctx)
    assert console.find("keystore not found")
    assert console.find("ADMOB_APP_ID not set")


def test_check_fails_on_missing_fields(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    import droidcfg.cli.commands.check as cmd

    ctx = _ctx(tmp_path, key_properties="keyAlias=upload\n")
    monkeypatch.setattr(cmd, "build_context", lambda: ctx)

    with pytest.raises(typer.Exit) as exc:
        cmd.check(properties=None)

    assert exc.value.exit_code == int(ErrorCode.SIGNING_ERROR)
    assert _console(ctx).find("missing: keyPassword, storeFile, storePassword")


def test_check_fails_on_malformed_key_properties(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    import droidcfg.cli.commands.check as cmd

    ctx = _ctx(tmp_path, key_properties="not a property\n")
    monkeypatch.setattr(cmd, "build_context", lambda: ctx)

    with pytest.raises(typer.Exit) as exc:
        cmd.check(properties=None)

    assert exc.value.exit_code == int(ErrorCode.CONFIG_ERROR)
    console = _console(ctx)
    assert console.has_error()
    assert console.find("Key Alias") == []


def test_show_release_prints_redacted_signing(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    import droidcfg.cli.commands.show as cmd

    ctx = _ctx(tmp_path)
    monkeypatch.setattr(cmd, "build_context", lambda: ctx)

    cmd.show(release=True, properties=None)

    console = _console(ctx)
    assert "namespace: com.manoooz.syria_jobs" in console.messages
    assert "minSdk: 23" in console.messages
    assert "targetSdk: 34" in console.messages
    assert "keyPassword: ****" in console.messages
    assert console.find(": kp") == []
    assert console.find(": sp") == []


def test_export_writes_redacted_json(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    import droidcfg.cli.commands.export as cmd

    ctx = _ctx(tmp_path)
    monkeypatch.setattr(cmd, "build_context", lambda: ctx)
    output = tmp_path / "out" / "descriptor.json"

    cmd.export(output=output, show_secrets=False, properties=["ADMOB_APP_ID=ca-app-pub-123"])

    data = json.loads(output.read_text(encoding="utf-8"))
    release = data["android"]["signingConfigs"]["release"]
    assert release["keyAlias"] == "upload"
    assert release["storePassword"] == "****"
    assert data["android"]["defaultConfig"]["manifestPlaceholders"] == {
        "ADMOB_APP_ID": "ca-app-pub-123"
    }
    assert data["android"]["ndkVersion"] == "27.0.12077973"
    assert _console(ctx).find("wrote")
