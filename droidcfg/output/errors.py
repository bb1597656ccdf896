"""Error presentation utilities.

Centralized error formatting and exit code mapping for consistent UX.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from droidcfg.core.descriptor import PluginOrderInvalid
from droidcfg.core.errors import ErrorCode
from droidcfg.core.identity import IdentityInvalid
from droidcfg.core.properties import PropertiesParseError, PropertiesReadError
from droidcfg.core.signing import SigningFieldsMissing
from droidcfg.output.console import Style
from droidcfg.services.descriptor import BuildTypeNotFound, DescriptorError

if TYPE_CHECKING:
    from droidcfg.output.console import ConsoleProtocol

__all__ = ["print_descriptor_error", "descriptor_error_exit_code"]


def print_descriptor_error(error: DescriptorError, console: ConsoleProtocol) -> None:
    """Print a descriptor error to the build log."""
    match error:
        case PropertiesParseError():
            console.error(f"malformed properties: {error.pretty()}")
        case PropertiesReadError(message=message):
            console.error(message)
        case IdentityInvalid(message=message, path=path):
            console.error(message)
            if path is not None:
                console.print(f"in: {path}", Style.DIM)
        case PluginOrderInvalid():
            console.error(error.message)
        case SigningFieldsMissing():
            console.error(error.message)
            console.print(f"hint: {error.hint}", Style.DIM)
        case BuildTypeNotFound():
            console.error(error.message)


def descriptor_error_exit_code(error: DescriptorError) -> int:
    """Get exit code for a descriptor error."""
    match error:
        case PropertiesParseError() | IdentityInvalid() | PluginOrderInvalid():
            return int(ErrorCode.CONFIG_ERROR)
        case PropertiesReadError():
            return int(ErrorCode.IO_ERROR)
        case SigningFieldsMissing():
            return int(ErrorCode.SIGNING_ERROR)
        case BuildTypeNotFound():
            return int(ErrorCode.USER_ERROR)
    return int(ErrorCode.CONFIG_ERROR)
