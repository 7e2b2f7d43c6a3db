"""Split raw command lines into argument vectors."""
from __future__ import annotations

import shlex
from typing import List

from .errors import TokenizeError


def split_arguments(line: str, quoted: bool = False) -> List[str]:
    """Return the whitespace-separated tokens of ``line``.

    With ``quoted`` the line is split shell-style, so ``--comment "a b"``
    yields a single ``a b`` token.
    """
    if not quoted:
        return line.split()
    try:
        return shlex.split(line)
    except ValueError as exc:
        raise TokenizeError(f"Cannot tokenize command: {exc}") from exc
