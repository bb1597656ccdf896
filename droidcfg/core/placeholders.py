"""Manifest placeholders resolved from project properties."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

__all__ = [
    "ADMOB_APP_ID",
    "MANIFEST_PLACEHOLDERS",
    "ManifestPlaceholder",
    "PlaceholderSource",
    "resolve_placeholder",
    "resolve_manifest_placeholders",
]


@dataclass(frozen=True, slots=True)
class PlaceholderSource:
    """A declared placeholder: read property ``name``, else use ``fallback``."""

    name: str
    fallback: str


@dataclass(frozen=True, slots=True)
class ManifestPlaceholder:
    """A resolved substitution injected into the application manifest."""

    name: str
    value: str
    from_fallback: bool = False


ADMOB_APP_ID = PlaceholderSource(name="ADMOB_APP_ID", fallback="default_admob_app_id")

MANIFEST_PLACEHOLDERS: tuple[PlaceholderSource, ...] = (ADMOB_APP_ID,)


def resolve_placeholder(properties: Mapping[str, str], name: str, fallback: str) -> str:
    """Return the property's value if set, else ``fallback``.

    A property that is present with an empty value counts as set.
    """
    value = properties.get(name)
    if value is None:
        return fallback
    return value


def resolve_manifest_placeholders(
    properties: Mapping[str, str],
    sources: tuple[PlaceholderSource, ...] = MANIFEST_PLACEHOLDERS,
) -> tuple[ManifestPlaceholder, ...]:
    return tuple(
        ManifestPlaceholder(
            name=src.name,
            value=resolve_placeholder(properties, src.name, src.fallback),
            from_fallback=src.name not in properties,
        )
        for src in sources
    )
