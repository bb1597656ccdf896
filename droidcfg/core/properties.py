"""Line-oriented ``key=value`` properties codec.

This is the format of ``key.properties``, ``gradle.properties`` and
``local.properties``. The reader follows the familiar properties conventions
(``#``/``!`` comments, backslash continuations, backslash escapes) with one
deliberate tightening: every entry must contain an ``=`` separator. A line
without one is a parse error instead of a key with an empty value, so a
truncated or hand-mangled credentials file aborts the build early.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

from .result import Err, Ok, Result

__all__ = [
    "PropertiesParseError",
    "PropertiesReadError",
    "PropertiesError",
    "parse_properties",
    "load_properties",
]

_COMMENT_CHARS = ("#", "!")
_SIMPLE_ESCAPES = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}


@dataclass(frozen=True, slots=True)
class PropertiesParseError:
    """Malformed properties content."""

    message: str
    path: Path | None = None
    line: int | None = None

    def pretty(self) -> str:
        where = str(self.path) if self.path else "<text>"
        if self.line is not None:
            where = f"{where}:{self.line}"
        return f"{where}: {self.message}"


@dataclass(frozen=True, slots=True)
class PropertiesReadError:
    """Properties file exists in name only: missing, or not readable."""

    message: str
    path: Path

    def pretty(self) -> str:
        return self.message


PropertiesError = PropertiesParseError | PropertiesReadError


class _EscapeError(ValueError):
    pass


def _trailing_backslashes(line: str) -> int:
    count = 0
    for ch in reversed(line):
        if ch != "\\":
            break
        count += 1
    return count


def _logical_lines(text: str) -> Iterator[tuple[int, str]]:
    """Yield (first physical line number, logical line) pairs.

    Comments and blank lines are dropped. A line ending in an odd number of
    backslashes is joined with the next one, minus its leading whitespace.
    """
    physical = text.splitlines()
    index = 0
    while index < len(physical):
        start = index + 1
        line = physical[index].lstrip()
        index += 1
        if not line or line.startswith(_COMMENT_CHARS):
            continue

        while _trailing_backslashes(line) % 2 == 1:
            line = line[:-1]
            if index >= len(physical):
                break
            line += physical[index].lstrip()
            index += 1

        yield start, line


def _rstrip_unescaped(text: str) -> str:
    """Drop trailing whitespace unless it is escaped (``a\\ `` keeps its space)."""
    while text and text[-1] in " \t\f" and _trailing_backslashes(text[:-1]) % 2 == 0:
        text = text[:-1]
    return text


def _separator_index(line: str) -> int:
    i = 0
    while i < len(line):
        ch = line[i]
        if ch == "\\":
            i += 2
            continue
        if ch == "=":
            return i
        i += 1
    return -1


def _unescape(raw: str) -> str:
    out: list[str] = []
    i = 0
    while i < len(raw):
        ch = raw[i]
        if ch != "\\":
            out.append(ch)
            i += 1
            continue

        if i + 1 >= len(raw):
            # Dangling backslash left by a continuation at end of input.
            break
        nxt = raw[i + 1]
        if nxt == "u":
            digits = raw[i + 2 : i + 6]
            if len(digits) != 4 or any(c not in "0123456789abcdefABCDEF" for c in digits):
                raise _EscapeError(f"malformed \\u escape: \\u{digits}")
            out.append(chr(int(digits, 16)))
            i += 6
            continue
        out.append(_SIMPLE_ESCAPES.get(nxt, nxt))
        i += 2
    return "".join(out)


def parse_properties(
    text: str,
    *,
    path: Path | None = None,
) -> Result[dict[str, str], PropertiesParseError]:
    """Parse properties text into an insertion-ordered dict.

    Keys lose surrounding whitespace unless it is escaped. Values lose
    leading whitespace only; anything after the first non-blank character is
    kept verbatim. When a key repeats, the last occurrence wins.

    Args:
        text: Properties file content.
        path: Source path, used in error messages only.

    Returns:
        Ok(dict) on success, Err(PropertiesParseError) on the first bad line.
    """
    values: dict[str, str] = {}
    for line_no, line in _logical_lines(text):
        sep = _separator_index(line)
        if sep < 0:
            return Err(
                PropertiesParseError(
                    f"expected 'key=value', got {line.strip()!r}",
                    path=path,
                    line=line_no,
                )
            )

        raw_key = _rstrip_unescaped(line[:sep])
        if not raw_key:
            return Err(PropertiesParseError("empty key before '='", path=path, line=line_no))

        try:
            key = _unescape(raw_key)
            value = _unescape(line[sep + 1 :].lstrip())
        except _EscapeError as e:
            return Err(PropertiesParseError(str(e), path=path, line=line_no))

        values[key] = value
    return Ok(values)


def load_properties(path: Path) -> Result[dict[str, str], PropertiesError]:
    """Read and parse a properties file.

    The file handle is closed before returning on every path, including
    parse failure.
    """
    try:
        with path.open("r", encoding="utf-8") as handle:
            text = handle.read()
    except FileNotFoundError:
        return Err(PropertiesReadError(f"Properties file not found: {path}", path=path))
    except PermissionError:
        return Err(PropertiesReadError(f"Permission denied reading: {path}", path=path))
    except IsADirectoryError:
        return Err(PropertiesReadError(f"Expected a file, found a directory: {path}", path=path))
    except UnicodeDecodeError as e:
        return Err(PropertiesParseError(f"file is not valid UTF-8: {e}", path=path))

    return parse_properties(text, path=path)
