"""Terminal ``-j`` / ``-g`` actions.

Both consume the rest of the argument vector: the token after the flag is
the target, anything following it is kept verbatim as target options.
"""
from __future__ import annotations

from typing import Sequence, Tuple

from .errors import MissingArgument
from .model import CommandArguments, Goto, Jump


def _split_target(tokens: Sequence[str], index: int) -> Tuple[str, list]:
    if index + 1 >= len(tokens):
        raise MissingArgument(tokens[index], index)
    return tokens[index + 1], list(tokens[index + 2 :])


def parse_jump(tokens: Sequence[str], index: int, arguments: CommandArguments) -> int:
    """Record the jump target; return the new cursor (end of ``tokens``)."""
    target, extra = _split_target(tokens, index)
    arguments.jump = Jump(target_name=target, arguments=extra)
    return len(tokens)


def parse_goto(tokens: Sequence[str], index: int, arguments: CommandArguments) -> int:
    """Record the goto chain; return the new cursor (end of ``tokens``)."""
    chain, extra = _split_target(tokens, index)
    arguments.goto = Goto(chain_name=chain, arguments=extra)
    return len(tokens)
