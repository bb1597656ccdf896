"""Project property provider.

Builds the map ``project.findProperty`` would see, lowest precedence first:

1. ``<project>/gradle.properties``
2. ``<GRADLE_USER_HOME>/gradle.properties`` (default ``~/.gradle``)
3. ``ORG_GRADLE_PROJECT_<name>`` environment variables
4. explicit ``-P name=value`` overrides

The result is passed explicitly to the resolvers; nothing reads it from
global state.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from pathlib import Path

from .properties import PropertiesError, load_properties
from .result import Err, Ok, Result

__all__ = [
    "ENV_PREFIX",
    "InvalidOverride",
    "gradle_user_home",
    "parse_override",
    "parse_overrides",
    "load_project_properties",
]

ENV_PREFIX = "ORG_GRADLE_PROJECT_"


@dataclass(frozen=True, slots=True)
class InvalidOverride:
    """A ``-P`` argument that is not ``NAME=value``."""

    raw: str

    @property
    def message(self) -> str:
        return f"invalid property override {self.raw!r} (expected NAME=value)"


def parse_override(raw: str) -> Result[tuple[str, str], InvalidOverride]:
    name, sep, value = raw.partition("=")
    name = name.strip()
    if not sep or not name:
        return Err(InvalidOverride(raw))
    return Ok((name, value))


def parse_overrides(raws: Iterable[str]) -> Result[dict[str, str], InvalidOverride]:
    out: dict[str, str] = {}
    for raw in raws:
        parsed = parse_override(raw)
        if isinstance(parsed, Err):
            return parsed
        name, value = parsed.value
        out[name] = value
    return Ok(out)


def gradle_user_home(environ: Mapping[str, str], *, home: Path | None = None) -> Path:
    configured = environ.get("GRADLE_USER_HOME")
    if configured:
        return Path(configured).expanduser()
    return (home or Path.home()) / ".gradle"


def _load_optional(path: Path) -> Result[dict[str, str], PropertiesError]:
    if not path.is_file():
        return Ok({})
    return load_properties(path)


def load_project_properties(
    project_root: Path,
    *,
    overrides: Mapping[str, str] | None = None,
    environ: Mapping[str, str] | None = None,
    user_home: Path | None = None,
) -> Result[dict[str, str], PropertiesError]:
    """Merge every property source into one map.

    Args:
        project_root: Android project root.
        overrides: ``-P`` values; these win over everything else.
        environ: Environment to read; pass ``os.environ`` explicitly.
        user_home: Gradle user home; defaults from ``environ``.
    """
    env = environ or {}
    merged: dict[str, str] = {}

    gradle_home = user_home or gradle_user_home(env)
    for path in (project_root / "gradle.properties", gradle_home / "gradle.properties"):
        loaded = _load_optional(path)
        if isinstance(loaded, Err):
            return loaded
        merged.update(loaded.value)

    for key, value in env.items():
        if key.startswith(ENV_PREFIX) and len(key) > len(ENV_PREFIX):
            merged[key[len(ENV_PREFIX) :]] = value

    if overrides:
        merged.update(overrides)
    return Ok(merged)
