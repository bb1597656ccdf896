"""Core domain types and loaders."""

from .errors import ErrorCode
from .placeholders import ManifestPlaceholder, resolve_placeholder
from .project import AndroidProject, ProjectNotFound, detect_project
from .properties import PropertiesParseError, PropertiesReadError, load_properties, parse_properties
from .result import Err, Ok, Result, is_err, is_ok
from .signing import (
    ReleaseSigningConfig,
    SigningCredentials,
    SigningFieldsMissing,
    assemble_release_signing,
    load_signing_credentials,
)

__all__ = [
    # errors
    "ErrorCode",
    # placeholders
    "ManifestPlaceholder",
    "resolve_placeholder",
    # project
    "AndroidProject",
    "ProjectNotFound",
    "detect_project",
    # properties
    "PropertiesParseError",
    "PropertiesReadError",
    "load_properties",
    "parse_properties",
    # result
    "Err",
    "Ok",
    "Result",
    "is_err",
    "is_ok",
    # signing
    "ReleaseSigningConfig",
    "SigningCredentials",
    "SigningFieldsMissing",
    "assemble_release_signing",
    "load_signing_credentials",
]
