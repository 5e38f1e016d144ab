"""
Key/value text parser for .properties, .ini and .env content.

Parses text into a dict following the .properties conventions:
- '=' or ':' (or the first whitespace) separates a key from its value
- a trailing backslash continues the entry on the next physical line
- \\t, \\n, \\r, \\f and \\uXXXX escapes are decoded
- comment markers default to '#' and '!'

With sections enabled, '[name]' lines open a section and the following
entries are collected in a nested dict under that name.
"""

import re
import string
from typing import Any, Dict, Iterator, Optional, Tuple

from core.data_models import ParseOptions

DEFAULT_COMMENTS: Tuple[str, ...] = ('#', '!')
SEPARATORS: Tuple[str, ...] = ('=', ':')

_LINE_BREAK = re.compile(r'\r\n|\r|\n')
_ESCAPES = {'t': '\t', 'n': '\n', 'r': '\r', 'f': '\f'}


class KVParseError(ValueError):
    """Raised when key/value text is malformed."""

    def __init__(self, message: str, line_number: Optional[int] = None):
        self.line_number = line_number
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)


def parse(text: str, options: Optional[ParseOptions] = None) -> Dict[str, Any]:
    """
    Parse key/value text.

    Args:
        text: Raw file content
        options: Parser configuration (None for parser defaults)

    Returns:
        Dict of key -> value, with nested dicts per section when
        options.sections is set

    Raises:
        KVParseError: If a section header, key or escape is malformed
    """
    options = options or ParseOptions()
    comments = options.comments if options.comments is not None else DEFAULT_COMMENTS
    comments = tuple(marker for marker in comments if marker)

    result: Dict[str, Any] = {}
    target = result
    for line_number, line in _logical_lines(text, comments):
        line = line.strip()
        if options.sections and line.startswith('['):
            target = _open_section(result, line, line_number)
            continue
        key, value = _split_entry(line, line_number)
        target[key] = value
    return result


def _logical_lines(text: str, comments: Tuple[str, ...]) -> Iterator[Tuple[int, str]]:
    """Yield (first line number, logical line), joining continued lines."""
    pending = None
    start = 0
    for line_number, physical in enumerate(_LINE_BREAK.split(text), start=1):
        if pending is None:
            stripped = physical.strip()
            if not stripped or stripped.startswith(comments):
                continue
            pending, start = physical.lstrip(), line_number
        else:
            pending += physical.lstrip()

        if _is_continued(pending):
            pending = pending[:-1]
            continue
        yield start, pending
        pending = None

    if pending is not None:
        yield start, pending


def _is_continued(line: str) -> bool:
    # An even run of backslashes is escaped backslashes, not a continuation
    trailing = len(line) - len(line.rstrip('\\'))
    return trailing % 2 == 1


def _open_section(result: Dict[str, Any], line: str, line_number: int) -> Dict[str, Any]:
    end = line.find(']')
    if end < 0:
        raise KVParseError(f"unterminated section header: {line}", line_number)
    name = line[1:end].strip()
    if not name:
        raise KVParseError("empty section name", line_number)

    section = result.setdefault(name, {})
    if not isinstance(section, dict):
        raise KVParseError(f"section '{name}' conflicts with an existing key", line_number)
    return section


def _split_entry(line: str, line_number: int) -> Tuple[str, str]:
    index = 0
    while index < len(line):
        char = line[index]
        if char == '\\':
            index += 2
            continue
        if char in SEPARATORS or char.isspace():
            break
        index += 1

    raw_key = line[:index]
    rest = line[index:].lstrip()
    if rest[:1] in SEPARATORS:
        rest = rest[1:].lstrip()

    key = _unescape(raw_key, line_number)
    if not key:
        raise KVParseError(f"missing key: {line}", line_number)
    return key, _unescape(rest, line_number)


def _unescape(raw: str, line_number: int) -> str:
    if '\\' not in raw:
        return raw

    chars = []
    index = 0
    while index < len(raw):
        char = raw[index]
        if char != '\\':
            chars.append(char)
            index += 1
            continue
        if index + 1 >= len(raw):
            break

        escaped = raw[index + 1]
        if escaped == 'u':
            digits = raw[index + 2:index + 6]
            if len(digits) != 4 or any(c not in string.hexdigits for c in digits):
                raise KVParseError(f"malformed \\uXXXX escape: \\u{digits}", line_number)
            chars.append(chr(int(digits, 16)))
            index += 6
            continue

        chars.append(_ESCAPES.get(escaped, escaped))
        index += 2
    return ''.join(chars)
