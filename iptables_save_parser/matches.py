"""Match extension dispatch (``-m <name> ...`` groups)."""
from __future__ import annotations

import logging
from typing import Dict, Optional, Protocol, Sequence

logger = logging.getLogger(__name__)

NEGATION = "!"


class MatchParser(Protocol):
    """Turns the option tokens of one match group into option -> value pairs.

    ``tokens`` excludes the leading ``-m <name>`` pair.
    """

    def parse(self, name: str, tokens: Sequence[str]) -> Dict[str, str]:
        ...


class GenericMatchParser:
    """Key/value fallback used for any extension without a dedicated parser.

    ``--key value`` pairs become ``{"key": "value"}``; a ``!`` prefixes the
    next stored value. A bare token seen before any key becomes the key
    itself. A key that is never followed by a value is not stored.
    """

    def parse(self, name: str, tokens: Sequence[str]) -> Dict[str, str]:
        options: Dict[str, str] = {}
        current_key: Optional[str] = None
        negate = False
        previous: Optional[str] = None
        for token in tokens:
            if token == NEGATION:
                negate = True
                previous = token
                continue
            if token.startswith("--"):
                # A "!" only reaches the value of the key right after it.
                if previous != NEGATION:
                    negate = False
                current_key = token[2:]
            elif current_key is None:
                current_key = token
            else:
                options[current_key] = NEGATION + token if negate else token
                negate = False
            previous = token
        return options


class MatchRegistry:
    """Maps extension names to parsers, falling back to ``fallback``."""

    def __init__(self, fallback: Optional[MatchParser] = None):
        self._parsers: Dict[str, MatchParser] = {}
        self.fallback: MatchParser = fallback or GenericMatchParser()

    def register(self, name: str, parser: MatchParser) -> None:
        self._parsers[name] = parser

    def unregister(self, name: str) -> None:
        self._parsers.pop(name, None)

    def parser_for(self, name: str) -> MatchParser:
        return self._parsers.get(name, self.fallback)

    def __contains__(self, name: object) -> bool:
        return name in self._parsers

    def parse(self, name: str, tokens: Sequence[str], matches: Dict[str, Dict[str, str]]) -> None:
        """Parse one group and merge its options into ``matches[name]``."""
        parser = self.parser_for(name)
        logger.debug("Dispatching match %s to %s", name, type(parser).__name__)
        options = matches.setdefault(name, {})
        options.update(parser.parse(name, tokens))


def default_registry() -> MatchRegistry:
    return MatchRegistry()
