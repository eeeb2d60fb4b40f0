"""
Parse failures and the tagged parse outcome
"""

from dataclasses import dataclass, field
from typing import List, Optional


class ParseError(Exception):
    """Base class for a rejected document"""

    kind = 'parse_error'
    line: Optional[int] = None


class FeatureSyntaxError(ParseError):
    """A line does not satisfy a mandatory grammar expectation"""

    kind = 'syntax_error'

    def __init__(self, line: int, reason: str = 'Syntax error'):
        super().__init__(f"{reason} at line {line}")
        self.line = line
        self.reason = reason


class UnexpectedEndOfInput(ParseError):
    """A mandatory continuation is missing because the input ran out"""

    kind = 'unexpected_eof'

    def __init__(self, reason: str = 'Unexpected end of file'):
        super().__init__(reason)
        self.reason = reason


class CursorExhaustedError(IndexError):
    """A line was requested from a reader that is already at end-of-input"""


class KeywordDatasetError(ValueError):
    """The localized keyword dataset is malformed"""


class UnknownLanguageError(KeywordDatasetError):
    """No keyword table is registered for the requested language code"""

    def __init__(self, language: str, available: List[str]):
        super().__init__(
            f"Unknown language code '{language}' (available: {', '.join(available) or 'none'})"
        )
        self.language = language
        self.available = available


@dataclass
class ParseResult:
    """Outcome of parsing one document: the features it added, or the error that rejected it"""
    features: List = field(default_factory=list)
    error: Optional[ParseError] = None
    source_name: str = ''

    @property
    def ok(self) -> bool:
        return self.error is None

    def raise_for_error(self):
        """Re-raise the stored error, if any"""
        if self.error is not None:
            raise self.error

    def describe(self) -> str:
        if self.ok:
            return f"{self.source_name or '<document>'}: {len(self.features)} feature(s)"
        return f"{self.source_name or '<document>'}: {self.error}"
