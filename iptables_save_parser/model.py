"""Data structures produced by the iptables-save parser."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class LineType(Enum):
    EMPTY = "empty"
    COMMIT = "commit"
    COMMENT = "comment"
    TABLE = "table"
    CHAIN = "chain"
    COMMAND = "command"
    UNKNOWN = "unknown"


class InsertType(Enum):
    APPEND = "append"


@dataclass(frozen=True)
class Table:
    name: str


@dataclass(frozen=True)
class Chain:
    name: str
    default_policy: Optional[str] = None


@dataclass
class Jump:
    target_name: Optional[str]
    arguments: List[str] = field(default_factory=list)


@dataclass
class Goto:
    chain_name: Optional[str]
    arguments: List[str] = field(default_factory=list)


@dataclass
class CommandArguments:
    insert_type: Optional[InsertType] = None
    chain_name: Optional[str] = None
    protocol: Optional[str] = None
    source: Optional[str] = None
    destination: Optional[str] = None
    in_interface: Optional[str] = None
    out_interface: Optional[str] = None
    fragment: Optional[str] = None
    packet_counter: Optional[str] = None
    packet_per_bytes: Optional[str] = None
    jump: Optional[Jump] = None
    goto: Optional[Goto] = None
    matches: Dict[str, Dict[str, str]] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {}
        if self.insert_type is not None:
            payload["insert_type"] = self.insert_type.value
        for name in (
            "chain_name",
            "protocol",
            "source",
            "destination",
            "in_interface",
            "out_interface",
            "fragment",
            "packet_counter",
            "packet_per_bytes",
        ):
            value = getattr(self, name)
            if value is not None:
                payload[name] = value
        if self.jump is not None:
            payload["jump"] = {"target_name": self.jump.target_name, "arguments": list(self.jump.arguments)}
        if self.goto is not None:
            payload["goto"] = {"chain_name": self.goto.chain_name, "arguments": list(self.goto.arguments)}
        payload["matches"] = {name: dict(options) for name, options in self.matches.items()}
        return payload


@dataclass
class Command:
    raw_arguments: List[str]
    arguments: CommandArguments = field(default_factory=CommandArguments)


@dataclass
class ParsedLine:
    """One classified line of an iptables-save dump."""

    line_type: LineType
    raw_text: str
    comment: Optional[str] = None
    table: Optional[Table] = None
    chain: Optional[Chain] = None
    original_table_name: Optional[str] = None
    command: Optional[Command] = None

    def summary(self) -> str:
        if self.line_type == LineType.COMMENT:
            return self.comment or ""
        if self.line_type == LineType.TABLE and self.table:
            return self.table.name
        if self.line_type == LineType.CHAIN and self.chain:
            return f"{self.chain.name} ({self.chain.default_policy or '-'})"
        if self.line_type == LineType.COMMAND and self.command:
            args = self.command.arguments
            if args.jump:
                action = f"-> {args.jump.target_name}"
            elif args.goto:
                action = f"goto {args.goto.chain_name}"
            else:
                action = "(no action)"
            return f"{args.chain_name or '?'} {action}"
        return ""

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "line_type": self.line_type.value,
            "raw_text": self.raw_text,
        }
        if self.comment is not None:
            payload["comment"] = self.comment
        if self.table is not None:
            payload["table"] = {"name": self.table.name}
        if self.chain is not None:
            chain: Dict[str, Any] = {"name": self.chain.name}
            if self.chain.default_policy is not None:
                chain["default_policy"] = self.chain.default_policy
            payload["chain"] = chain
        if self.original_table_name is not None:
            payload["original_table_name"] = self.original_table_name
        if self.command is not None:
            payload["command"] = {
                "raw_arguments": list(self.command.raw_arguments),
                "arguments": self.command.arguments.to_dict(),
            }
        return payload
