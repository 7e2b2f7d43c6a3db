"""Interpretation of a rule command's argument vector."""
from __future__ import annotations

from typing import Optional, Sequence

from .errors import MissingArgument, UnhandledFlag
from .matches import NEGATION, MatchRegistry, default_registry
from .model import CommandArguments, InsertType
from .targets import parse_goto, parse_jump

# Flags taking one value that may be negated, mapped to the attribute they set.
VALUE_FLAGS: dict[str, str] = {
    "-p": "protocol",
    "--protocol": "protocol",
    "-s": "source",
    "--source": "source",
    "-d": "destination",
    "--destination": "destination",
    "-i": "in_interface",
    "--in-interface": "in_interface",
    "-o": "out_interface",
    "--out-interface": "out_interface",
    "-f": "fragment",
    "--fragment": "fragment",
}

APPEND_FLAGS = {"-A", "--append"}
COUNTER_FLAGS = {"-c", "--set-counters"}
JUMP_FLAGS = {"-j", "--jump"}
GOTO_FLAGS = {"-g", "--goto"}
MATCH_FLAGS = {"-m", "--match"}
MATCH_BOUNDARY = JUMP_FLAGS | GOTO_FLAGS | MATCH_FLAGS


class RuleArgumentParser:
    """Walks a command's tokens left to right and fills ``CommandArguments``."""

    def __init__(self, registry: Optional[MatchRegistry] = None):
        self.registry = registry or default_registry()

    def parse(self, tokens: Sequence[str]) -> CommandArguments:
        arguments = CommandArguments()
        negate = False
        i = 0
        while i < len(tokens):
            token = tokens[i]
            if token == NEGATION:
                negate = True
                i += 1
                continue
            if token in APPEND_FLAGS:
                arguments.insert_type = InsertType.APPEND
                arguments.chain_name = _value(tokens, i)
                i += 2
            elif token in VALUE_FLAGS:
                value = _value(tokens, i)
                setattr(arguments, VALUE_FLAGS[token], NEGATION + value if negate else value)
                i += 2
            elif token in COUNTER_FLAGS:
                # Fields are read two and three tokens after the flag.
                arguments.packet_per_bytes = _optional(tokens, i + 2)
                arguments.packet_counter = _optional(tokens, i + 3)
                i += 3
            elif token in JUMP_FLAGS:
                i = parse_jump(tokens, i, arguments)
            elif token in GOTO_FLAGS:
                i = parse_goto(tokens, i, arguments)
            elif token in MATCH_FLAGS:
                name = _value(tokens, i)
                end = _match_end(tokens, i)
                self.registry.parse(name, tokens[i + 2 : end], arguments.matches)
                i = end
            else:
                raise UnhandledFlag(token, i)
            negate = False
        return arguments


def _value(tokens: Sequence[str], index: int) -> str:
    if index + 1 >= len(tokens):
        raise MissingArgument(tokens[index], index)
    return tokens[index + 1]


def _optional(tokens: Sequence[str], index: int) -> Optional[str]:
    return tokens[index] if index < len(tokens) else None


def _match_end(tokens: Sequence[str], index: int) -> int:
    for position in range(index + 1, len(tokens)):
        if tokens[position] in MATCH_BOUNDARY:
            return position
    return len(tokens)
