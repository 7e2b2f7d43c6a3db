"""CLI that parses an iptables-save dump and prints the classified lines."""
from __future__ import annotations

import json
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table

from ..errors import ParserError, SourceError
from ..log import configure_logging
from ..model import ParsedLine
from ..parser import IptablesSaveParser
from ..source import read_rules_file, run_iptables_save

app = typer.Typer(help="Parse iptables-save output into structured records")
console = Console()
err_console = Console(stderr=True)


@app.command()
def main(
    rules: Path = typer.Argument(Path("-"), help="iptables-save file, '-' for stdin"),
    system: bool = typer.Option(False, "--system", help="Read the live rule set via iptables-save"),
    binary: str = typer.Option("iptables-save", envvar="IPTABLES_SAVE_BINARY", help="iptables-save executable"),
    table: Optional[str] = typer.Option(None, "--table", "-t", help="Only dump this table (with --system)"),
    quoted: bool = typer.Option(False, "--quoted", help="Honour shell quoting inside rules"),
    json_output: bool = typer.Option(False, "--json", help="Emit JSON instead of a table"),
    log_level: str = typer.Option("WARNING", envvar="IPTABLES_SAVE_PARSER_LOG_LEVEL", help="Logging level"),
) -> None:
    try:
        configure_logging(log_level)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--log-level") from exc

    try:
        raw_lines = run_iptables_save(binary, table) if system else read_rules_file(rules)
    except SourceError as exc:
        err_console.print(f"[red]{exc}[/red]")
        raise typer.Exit(code=2) from exc

    try:
        parsed = IptablesSaveParser(quoted=quoted).parse_lines(raw_lines)
    except ParserError as exc:
        err_console.print(f"[red]Parse error: {exc}[/red]")
        raise typer.Exit(code=1) from exc

    if json_output:
        typer.echo(_to_json(parsed))
    else:
        console.print(_to_table(parsed))


def _to_json(parsed: List[ParsedLine]) -> str:
    return json.dumps([line.to_dict() for line in parsed], indent=2)


def _to_table(parsed: List[ParsedLine]) -> Table:
    output = Table(title="iptables-save")
    output.add_column("#", justify="right")
    output.add_column("Type")
    output.add_column("Table")
    output.add_column("Detail")
    for number, line in enumerate(parsed, start=1):
        table_name = line.table.name if line.table else line.original_table_name
        output.add_row(str(number), line.line_type.value, table_name or "", line.summary())
    return output


if __name__ == "__main__":
    app()
