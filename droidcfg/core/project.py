"""Android project detection and paths.

The project root is the directory Gradle calls ``rootProject``: the one
holding ``settings.gradle.kts`` (or ``settings.gradle``), ``key.properties``
and ``local.properties``. In a Flutter checkout that is ``<root>/android``.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from .result import Err, Ok, Result

__all__ = [
    "AndroidProject",
    "ProjectNotFound",
    "PROJECT_ROOT_ENV",
    "detect_project",
    "is_project_root",
]

PROJECT_ROOT_ENV = "DROIDCFG_PROJECT_ROOT"

_SETTINGS_FILES = ("settings.gradle.kts", "settings.gradle")


@dataclass(frozen=True, slots=True)
class ProjectNotFound:
    """Error when the Android project root cannot be located."""

    message: str
    searched_from: Path | None = None
    hint: str | None = f"Run from inside the android/ project or set ${PROJECT_ROOT_ENV}"


@dataclass(frozen=True, slots=True)
class AndroidProject:
    """A detected Android (Gradle) project.

    Layout:
    - settings.gradle(.kts)
    - key.properties (optional, release signing)
    - gradle.properties (optional, project properties)
    - local.properties (optional, Flutter SDK path and version)
    - app/ (application module)
    """

    root: Path

    @property
    def key_properties_path(self) -> Path:
        return self.root / "key.properties"

    @property
    def gradle_properties_path(self) -> Path:
        return self.root / "gradle.properties"

    @property
    def local_properties_path(self) -> Path:
        return self.root / "local.properties"

    @property
    def app_dir(self) -> Path:
        """Application module directory; relative ``storeFile`` paths start here."""
        return self.root / "app"

    def __str__(self) -> str:
        return str(self.root)


def is_project_root(path: Path) -> bool:
    return any((path / name).is_file() for name in _SETTINGS_FILES)


def _project_at(path: Path) -> Path | None:
    if is_project_root(path):
        return path
    android = path / "android"
    if android.is_dir() and is_project_root(android):
        return android
    return None


def detect_project(
    *,
    start_dir: Path | None = None,
    env_var: str = PROJECT_ROOT_ENV,
) -> Result[AndroidProject, ProjectNotFound]:
    """Detect the Android project root.

    Detection order:
    1. ``env_var`` (if set it must point at a valid project)
    2. Search upward from start_dir (or cwd); a Flutter root resolves to
       its ``android/`` directory
    """
    env_value = os.environ.get(env_var)
    if env_value:
        env_path = Path(env_value).expanduser().resolve()
        found = _project_at(env_path) if env_path.is_dir() else None
        if found is not None:
            return Ok(AndroidProject(root=found))
        return Err(
            ProjectNotFound(
                message=f"${env_var} is set to '{env_value}' but it is not an Android project",
                searched_from=env_path if env_path.is_dir() else None,
            )
        )

    search_start = (start_dir or Path.cwd()).resolve()
    for parent in (search_start, *search_start.parents):
        found = _project_at(parent)
        if found is not None:
            return Ok(AndroidProject(root=found))

    return Err(
        ProjectNotFound(
            message="Could not find an Android project (settings.gradle.kts not found)",
            searched_from=search_start,
        )
    )
