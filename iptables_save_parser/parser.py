"""iptables-save line classifier."""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, List, Optional

from .errors import MalformedChainLine, ParserError
from .matches import MatchRegistry
from .model import Chain, Command, LineType, ParsedLine, Table
from .rules import RuleArgumentParser
from .tokenizer import split_arguments

logger = logging.getLogger(__name__)

# Format: :CHAIN POLICY [packet:byte]
CHAIN_PATTERN = re.compile(r"^:([a-z0-9_-]+)\s+([a-z0-9_-]+)\s+", re.IGNORECASE)
NO_POLICY = "-"


@dataclass
class ParseSession:
    """State carried from one line to the next within a single parse call."""

    current_table: Optional[str] = None


class IptablesSaveParser:
    """Classify iptables-save lines and interpret rule commands.

    The parser itself is stateless between calls; every ``parse_lines`` or
    ``iter_lines`` call gets its own ``ParseSession``.
    """

    def __init__(self, registry: Optional[MatchRegistry] = None, quoted: bool = False):
        self.rules = RuleArgumentParser(registry)
        self.quoted = quoted

    @property
    def registry(self) -> MatchRegistry:
        return self.rules.registry

    def parse_text(self, text: str) -> List[ParsedLine]:
        return self.parse_lines(text.splitlines())

    def parse_lines(self, raw_lines: Iterable[str]) -> List[ParsedLine]:
        return list(self.iter_lines(raw_lines))

    def iter_lines(self, raw_lines: Iterable[str]) -> Iterator[ParsedLine]:
        session = ParseSession()
        for line_number, raw_line in enumerate(raw_lines, start=1):
            logger.debug("Start parsing the raw line %d", line_number)
            try:
                yield self._classify(raw_line, session)
            except ParserError as exc:
                if exc.line_number is None:
                    exc.line_number = line_number
                if exc.raw_line is None:
                    exc.raw_line = raw_line
                raise

    def _classify(self, raw_line: str, session: ParseSession) -> ParsedLine:
        if not raw_line.strip():
            return ParsedLine(LineType.EMPTY, raw_line)
        if raw_line.lower() == "commit":
            session.current_table = None
            return ParsedLine(LineType.COMMIT, raw_line)

        prefix = raw_line[0]
        if prefix == "#":
            return ParsedLine(
                LineType.COMMENT,
                raw_line,
                comment=raw_line[1:].strip(),
                original_table_name=session.current_table,
            )
        if prefix == "*":
            table = Table(name=raw_line[1:].strip())
            session.current_table = table.name or None
            return ParsedLine(LineType.TABLE, raw_line, table=table)
        if prefix == ":":
            return ParsedLine(
                LineType.CHAIN,
                raw_line,
                chain=_parse_chain_def(raw_line),
                original_table_name=session.current_table,
            )

        raw_arguments = split_arguments(raw_line, quoted=self.quoted)
        command = Command(raw_arguments=raw_arguments, arguments=self.rules.parse(raw_arguments))
        return ParsedLine(
            LineType.COMMAND,
            raw_line,
            command=command,
            original_table_name=session.current_table,
        )


def _parse_chain_def(raw_line: str) -> Chain:
    match = CHAIN_PATTERN.match(raw_line)
    if not match:
        raise MalformedChainLine(raw_line)
    name, policy = match.groups()
    return Chain(name=name, default_policy=None if policy == NO_POLICY else policy)


def parse_iptables_save(
    text: str,
    registry: Optional[MatchRegistry] = None,
    quoted: bool = False,
) -> List[ParsedLine]:
    return IptablesSaveParser(registry, quoted=quoted).parse_text(text)


def read_iptables_file(
    path: Path,
    registry: Optional[MatchRegistry] = None,
    quoted: bool = False,
) -> List[ParsedLine]:
    """Load a file containing iptables-save contents."""
    return parse_iptables_save(path.read_text(), registry, quoted=quoted)
