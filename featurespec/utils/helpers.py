"""Helper utilities"""
import re
from typing import Any, Dict, Iterable, Tuple, Union

LINE_BREAK = re.compile(r'\r\n|\r|\n')


def deep_get(dictionary: Dict, keys: str, default: Any = None) -> Any:
    """Get nested dictionary value using dot notation"""
    value = dictionary

    for key in keys.split('.'):
        if isinstance(value, dict) and key in value:
            value = value[key]
        else:
            return default

    return value


def to_lines(source: Union[str, Iterable[str]]) -> Tuple[str, ...]:
    """Materialize a document as an immutable tuple of lines without line breaks"""
    if isinstance(source, str):
        # Only CR, LF and CRLF end a line
        lines = LINE_BREAK.split(source)
        if lines and lines[-1] == '':
            lines.pop()
        return tuple(lines)
    return tuple(line.rstrip('\r\n') for line in source)
