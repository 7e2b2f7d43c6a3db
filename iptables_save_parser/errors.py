"""Exceptions raised while parsing iptables-save output."""
from __future__ import annotations

from typing import Optional


class ParserError(RuntimeError):
    """Base class for every parse failure.

    ``line_number`` (1-based) and ``raw_line`` are filled in by the line
    classifier before the error leaves a parse call.
    """

    def __init__(self, message: str, raw_line: Optional[str] = None, line_number: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.raw_line = raw_line
        self.line_number = line_number

    def __str__(self) -> str:
        text = self.message
        if self.line_number is not None:
            text = f"line {self.line_number}: {text}"
        if self.raw_line is not None:
            text = f"{text} [{self.raw_line!r}]"
        return text


class MalformedChainLine(ParserError):
    def __init__(self, raw_line: str):
        super().__init__(f"Cannot parse chain: {raw_line}", raw_line=raw_line)


class UnhandledFlag(ParserError):
    def __init__(self, token: str, position: int):
        super().__init__(f"Unhandled arg {token} at position {position}")
        self.token = token
        self.position = position


class MissingArgument(ParserError):
    def __init__(self, flag: str, position: int):
        super().__init__(f"Flag {flag} at position {position} expects a value")
        self.flag = flag
        self.position = position


class TokenizeError(ParserError):
    pass


class SourceError(RuntimeError):
    """Reading the dump from a file or process failed."""
