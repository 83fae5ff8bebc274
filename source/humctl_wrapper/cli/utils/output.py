# ABOUTME: Output formatting for command results
# ABOUTME: Renders applications and messages as table, JSON or YAML and prints errors

"""Shared output formatting utilities for consistent results across commands."""

import json
from collections.abc import Sequence
from enum import Enum
from typing import Any

import yaml
from rich.console import Console
from rich.markup import escape

from humctl_wrapper.errors import UnsupportedFormatError
from humctl_wrapper.models import Application

TABLE_HEADER = "NAME\tID\n----\t--\n"


class OutputFormat(str, Enum):
    """Supported output formats."""

    TABLE = "table"
    JSON = "json"
    YAML = "yaml"


SUPPORTED_FORMATS = ", ".join(f.value for f in OutputFormat)


def validate_format(value: str | None) -> OutputFormat:
    """Return the OutputFormat for a user-supplied name (case-insensitive).

    Raises:
        UnsupportedFormatError: If the name is not one of table, json, yaml.
    """
    try:
        return OutputFormat((value or "").lower())
    except ValueError:
        raise UnsupportedFormatError(
            f"unsupported output format: {value}. Supported formats: {SUPPORTED_FORMATS}", value=value
        ) from None


def format_app(app: Application, output_format: OutputFormat) -> str:
    """Format a single application.

    JSON and table output get an explicit trailing newline; YAML keeps the
    newline emitted by the YAML dumper.
    """
    if output_format == OutputFormat.TABLE:
        return TABLE_HEADER + _table_row(app)
    return _serialize(app.to_dict(), output_format)


def format_apps(apps: Sequence[Application], output_format: OutputFormat) -> str:
    """Format a list of applications."""
    if output_format == OutputFormat.TABLE:
        return TABLE_HEADER + "".join(_table_row(app) for app in apps)
    return _serialize([app.to_dict() for app in apps], output_format)


def format_message(message: str, output_format: OutputFormat) -> str:
    """Format a plain status message."""
    if output_format == OutputFormat.TABLE:
        return message + "\n"
    return _serialize({"message": message}, output_format)


def format_output(value: Application | Sequence[Application] | str, output_format: OutputFormat) -> str:
    """Format any command result: one application, a list of them, or a message."""
    if isinstance(value, Application):
        return format_app(value, output_format)
    if isinstance(value, str):
        return format_message(value, output_format)
    return format_apps(value, output_format)


def print_error(error: Exception) -> None:
    """Print an error message to standard error."""
    console = Console(stderr=True)
    console.print(f"[red]Error: {escape(str(error))}[/red]", soft_wrap=True)


def _table_row(app: Application) -> str:
    return f"{app.name}\t{app.id}\n"


def _serialize(data: Any, output_format: OutputFormat) -> str:
    if output_format == OutputFormat.JSON:
        return json.dumps(data, indent=2, ensure_ascii=False) + "\n"
    if output_format == OutputFormat.YAML:
        return yaml.safe_dump(
            data, default_flow_style=False, sort_keys=False, allow_unicode=True, width=float("inf")
        )
    raise UnsupportedFormatError(
        f"unsupported output format: {output_format}. Supported formats: {SUPPORTED_FORMATS}",
        value=str(output_format),
    )
