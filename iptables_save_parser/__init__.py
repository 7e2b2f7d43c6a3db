"""iptables-save parser public API surface."""

from .errors import MalformedChainLine, MissingArgument, ParserError, TokenizeError, UnhandledFlag
from .matches import GenericMatchParser, MatchParser, MatchRegistry, default_registry
from .model import Chain, Command, CommandArguments, Goto, Jump, LineType, ParsedLine, Table
from .parser import IptablesSaveParser, parse_iptables_save, read_iptables_file
from .rules import RuleArgumentParser

__all__ = [
    "Chain",
    "Command",
    "CommandArguments",
    "GenericMatchParser",
    "Goto",
    "IptablesSaveParser",
    "Jump",
    "LineType",
    "MalformedChainLine",
    "MatchParser",
    "MatchRegistry",
    "MissingArgument",
    "ParsedLine",
    "ParserError",
    "RuleArgumentParser",
    "Table",
    "TokenizeError",
    "UnhandledFlag",
    "default_registry",
    "parse_iptables_save",
    "read_iptables_file",
]
