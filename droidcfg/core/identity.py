"""Application identity and the Flutter versioning provider.

Version code and name are written into ``local.properties`` by the Flutter
tool (``flutter.versionCode`` / ``flutter.versionName``). Everything else
about the identity is fixed for this application.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from .properties import PropertiesError, load_properties
from .result import Err, Ok, Result
from .structured import get_str

__all__ = [
    "APPLICATION_ID",
    "MIN_SDK",
    "TARGET_SDK",
    "ApplicationIdentity",
    "IdentityInvalid",
    "VersioningInfo",
    "identity_from_properties",
    "load_application_identity",
]

APPLICATION_ID = "com.manoooz.syria_jobs"
MIN_SDK = 23
TARGET_SDK = 34

# Flutter's defaults when local.properties carries no version.
DEFAULT_VERSION_CODE = 1
DEFAULT_VERSION_NAME = "1.0"


@dataclass(frozen=True, slots=True)
class ApplicationIdentity:
    application_id: str
    min_platform_version: int
    target_platform_version: int
    version_code: int
    version_name: str

    def to_dict(self) -> dict[str, object]:
        return {
            "applicationId": self.application_id,
            "minSdk": self.min_platform_version,
            "targetSdk": self.target_platform_version,
            "versionCode": self.version_code,
            "versionName": self.version_name,
        }


@dataclass(frozen=True, slots=True)
class IdentityInvalid:
    """``local.properties`` holds version values that cannot be used."""

    message: str
    path: Path | None = None


@dataclass(frozen=True, slots=True)
class VersioningInfo:
    """What the versioning provider yields: identity plus the SDK location."""

    identity: ApplicationIdentity
    flutter_sdk: Path | None = None


def _version_code(raw: str | None) -> int | None:
    if raw is None:
        return DEFAULT_VERSION_CODE
    try:
        code = int(raw)
    except ValueError:
        return None
    return code if code > 0 else None


def identity_from_properties(
    values: Mapping[str, str],
    *,
    application_id: str = APPLICATION_ID,
    path: Path | None = None,
) -> Result[VersioningInfo, IdentityInvalid]:
    raw_code = get_str(values, "flutter.versionCode")
    code = _version_code(raw_code)
    if code is None:
        return Err(
            IdentityInvalid(
                f"flutter.versionCode must be a positive integer, got {raw_code!r}",
                path=path,
            )
        )

    sdk = get_str(values, "flutter.sdk")
    identity = ApplicationIdentity(
        application_id=application_id,
        min_platform_version=MIN_SDK,
        target_platform_version=TARGET_SDK,
        version_code=code,
        version_name=get_str(values, "flutter.versionName") or DEFAULT_VERSION_NAME,
    )
    return Ok(VersioningInfo(identity=identity, flutter_sdk=Path(sdk) if sdk else None))


def load_application_identity(
    local_properties: Path,
    *,
    application_id: str = APPLICATION_ID,
) -> Result[VersioningInfo, PropertiesError | IdentityInvalid]:
    """Read the versioning provider; a missing file means Flutter defaults."""
    values: dict[str, str] = {}
    if local_properties.is_file():
        loaded = load_properties(local_properties)
        if isinstance(loaded, Err):
            return loaded
        values = loaded.value
    return identity_from_properties(values, application_id=application_id, path=local_properties)
