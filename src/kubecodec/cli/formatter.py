# src/kubecodec/cli/formatter.py
import json
from decimal import Decimal
from typing import List

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

from kubecodec.codec.context import DecodeWarning
from kubecodec.codec.exporter import exponent_literal
from kubecodec.core.config import MAX_NUMBER_DIGITS
from kubecodec.core.models import (
    BoolValue, ListValue, MappingValue, NullValue, NumberValue, StringValue, Value,
)


def _number_text(number: Decimal) -> str:
    if number.is_nan():
        return "NaN"
    if number.is_infinite():
        return "Infinity" if number > 0 else "-Infinity"
    if abs(number.adjusted()) >= MAX_NUMBER_DIGITS:
        return exponent_literal(number)
    if number == number.to_integral_value():
        return format(number.to_integral_value(), 'f')
    return format(number, 'f')


def to_json(value: Value, indent: int = 2, level: int = 0) -> str:
    """
    JSON text for a structured value. Numbers are written from their
    Decimal digits, so nothing is rounded on the way out.
    """
    pad = " " * (indent * (level + 1))
    close = " " * (indent * level)
    if isinstance(value, NullValue):
        return "null"
    if isinstance(value, BoolValue):
        return "true" if value.value else "false"
    if isinstance(value, NumberValue):
        return _number_text(value.value)
    if isinstance(value, StringValue):
        return json.dumps(value.value, ensure_ascii=False)
    if isinstance(value, ListValue):
        if not value.items:
            return "[]"
        body = ",\n".join(pad + to_json(item, indent, level + 1) for item in value.items)
        return f"[\n{body}\n{close}]"
    if isinstance(value, MappingValue):
        if not value.items:
            return "{}"
        body = ",\n".join(
            f"{pad}{json.dumps(key, ensure_ascii=False)}: {to_json(item, indent, level + 1)}"
            for key, item in value.items
        )
        return f"{{\n{body}\n{close}}}"
    raise TypeError(f"Not a structured value: {type(value).__name__}")


def _text(value) -> str:
    if isinstance(value, (StringValue, BoolValue, NumberValue)):
        return str(value.to_python())
    return "-"


class CodecFormatter:
    """
    Renders decode summaries, skipped-document warnings and YAML output.
    """

    def __init__(self, console: Console = None, err_console: Console = None):
        self.console = console or Console()
        self.err_console = err_console or Console(stderr=True)

    def print_documents_table(self, documents: List[MappingValue]):
        table = Table(title="Decoded Manifests", show_lines=True, header_style="bold magenta")
        table.add_column("#", justify="right", style="dim")
        table.add_column("apiVersion", style="cyan")
        table.add_column("Kind", style="white")
        table.add_column("Name", style="green")
        table.add_column("Keys", justify="right")

        for i, doc in enumerate(documents):
            metadata = doc.get("metadata")
            name = metadata.get("name") if isinstance(metadata, MappingValue) else None
            table.add_row(
                str(i), _text(doc.get("apiVersion")), _text(doc.get("kind")),
                _text(name), str(len(doc)),
            )

        self.console.print(table)

    def show_warnings(self, warnings: List[DecodeWarning]):
        for warning in warnings:
            self.err_console.print(Panel(
                f"[white]{escape(warning.message)}[/white]",
                title=f"[bold yellow]⚠️  Skipped document {warning.index}[/bold yellow]",
                border_style="yellow",
                expand=False,
            ))

    def print_yaml(self, text: str):
        """Highlighted when attached to a terminal, raw text when piped."""
        if self.console.is_terminal:
            self.console.print(Syntax(text.rstrip("\n"), "yaml", theme="monokai", line_numbers=False))
        else:
            self.console.file.write(text)

    def print_error(self, message: str):
        self.err_console.print(f"[bold red]Error:[/bold red] {escape(message)}")
