"""Readers that hand raw iptables-save lines to the parser."""
from __future__ import annotations

import logging
import subprocess
import sys
from pathlib import Path
from typing import List, Optional

from .errors import SourceError

logger = logging.getLogger(__name__)

STDIN_PATH = "-"


def read_rules_file(path: Path | str) -> List[str]:
    """Return the lines of a saved rule set; ``-`` reads stdin."""
    try:
        if str(path) == STDIN_PATH:
            return sys.stdin.read().splitlines()
        return Path(path).read_text(encoding="utf-8").splitlines()
    except (OSError, UnicodeDecodeError) as exc:
        raise SourceError(f"Cannot read {path}: {exc}") from exc


def run_iptables_save(
    binary: str = "iptables-save",
    table: Optional[str] = None,
    timeout: float = 30,
) -> List[str]:
    """Capture the live rule set from ``iptables-save`` (needs root)."""
    cmd = [binary]
    if table:
        cmd += ["-t", table]
    logger.debug("Running %s", " ".join(cmd))
    try:
        result = subprocess.run(cmd, capture_output=True, encoding="utf-8", timeout=timeout, check=False)
    except (subprocess.TimeoutExpired, OSError, UnicodeDecodeError) as exc:
        raise SourceError(f"Cannot run {binary}: {exc}") from exc
    if result.returncode != 0:
        raise SourceError(f"{binary} exited with {result.returncode}: {result.stderr.strip()}")
    return result.stdout.splitlines()
