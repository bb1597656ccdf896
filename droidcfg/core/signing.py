"""Release signing credentials.

``key.properties`` sits at the Android project root and is usually kept out
of version control. Loading it is lenient (a missing file is an empty
credential set); assembling the release signing config is strict (every
field must be present).
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from .properties import PropertiesError, load_properties
from .result import Err, Ok, Result

if TYPE_CHECKING:
    from droidcfg.output.console import ConsoleProtocol

__all__ = [
    "KEY_PROPERTIES_FILE",
    "SIGNING_FIELDS",
    "SigningCredentials",
    "ReleaseSigningConfig",
    "SigningFieldsMissing",
    "REDACTED",
    "load_signing_credentials",
    "resolve_store_file",
    "assemble_release_signing",
]

KEY_PROPERTIES_FILE = "key.properties"
REDACTED = "****"

# Property names, in the order they are assigned to the signing config.
SIGNING_FIELDS = ("keyAlias", "keyPassword", "storeFile", "storePassword")


def _present(value: str | None) -> str | None:
    if value is None or value == "":
        return None
    return value


@dataclass(frozen=True, slots=True)
class SigningCredentials:
    """Signing values as read from ``key.properties``; any may be unset."""

    key_alias: str | None = None
    key_password: str | None = None
    store_file: str | None = None
    store_password: str | None = None

    @classmethod
    def from_properties(cls, values: Mapping[str, str]) -> SigningCredentials:
        return cls(
            key_alias=_present(values.get("keyAlias")),
            key_password=_present(values.get("keyPassword")),
            store_file=_present(values.get("storeFile")),
            store_password=_present(values.get("storePassword")),
        )

    def as_properties(self) -> dict[str, str | None]:
        values = (self.key_alias, self.key_password, self.store_file, self.store_password)
        return dict(zip(SIGNING_FIELDS, values, strict=True))

    @property
    def is_empty(self) -> bool:
        return all(v is None for v in self.as_properties().values())

    def missing_fields(self) -> tuple[str, ...]:
        return tuple(name for name, v in self.as_properties().items() if v is None)


@dataclass(frozen=True, slots=True)
class ReleaseSigningConfig:
    """Complete signing config handed to the packaging toolchain."""

    key_alias: str
    key_password: str
    store_file: Path
    store_password: str

    def to_dict(self, *, redact: bool = True) -> dict[str, str]:
        return {
            "keyAlias": self.key_alias,
            "keyPassword": REDACTED if redact else self.key_password,
            "storeFile": str(self.store_file),
            "storePassword": REDACTED if redact else self.store_password,
        }


@dataclass(frozen=True, slots=True)
class SigningFieldsMissing:
    """Release signing requested with incomplete credentials."""

    missing: tuple[str, ...]
    source: Path | None = None

    @property
    def message(self) -> str:
        return f"release signing config is missing: {', '.join(self.missing)}"

    @property
    def hint(self) -> str:
        where = str(self.source) if self.source else KEY_PROPERTIES_FILE
        return f"Set {', '.join(self.missing)} in {where}"


def load_signing_credentials(
    path: Path,
    *,
    console: ConsoleProtocol,
) -> Result[SigningCredentials, PropertiesError]:
    """Load signing credentials from a ``key.properties`` file.

    A missing file yields empty credentials. A malformed file is an error
    that must abort the build. On success the resolved key alias is written
    to the build log exactly as read (``null`` when the key is absent), as
    the Gradle script did.
    """
    values: dict[str, str] = {}
    if path.exists():
        loaded = load_properties(path)
        if isinstance(loaded, Err):
            return loaded
        values = loaded.value
    credentials = SigningCredentials.from_properties(values)

    # Raw value: an empty alias logs as empty, only an absent key as null.
    alias = values.get("keyAlias", "null")
    console.print(f"Key Alias: {alias}")
    return Ok(credentials)


def resolve_store_file(store_file: str, module_dir: Path) -> Path:
    """Resolve ``storeFile`` like Gradle's ``file()``: relative to the module."""
    candidate = Path(store_file).expanduser()
    if candidate.is_absolute():
        return candidate
    return module_dir / candidate


def assemble_release_signing(
    credentials: SigningCredentials,
    *,
    module_dir: Path,
    source: Path | None = None,
) -> Result[ReleaseSigningConfig, SigningFieldsMissing]:
    """Build the release signing config, failing on any unset field."""
    alias = credentials.key_alias
    key_password = credentials.key_password
    store_file = credentials.store_file
    store_password = credentials.store_password
    if alias is None or key_password is None or store_file is None or store_password is None:
        return Err(SigningFieldsMissing(missing=credentials.missing_fields(), source=source))

    return Ok(
        ReleaseSigningConfig(
            key_alias=alias,
            key_password=key_password,
            store_file=resolve_store_file(store_file, module_dir),
            store_password=store_password,
        )
    )
