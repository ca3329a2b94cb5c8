"""Output formatting utilities for CLI"""

import json
from io import StringIO
from typing import Any, Dict, List

import yaml
from rich.console import Console
from rich.table import Table
from rich.text import Text

from parcel import util


# Column titles for the keys of dataset, mount and profile rows
COLUMN_TITLES = {
    "id": "ID",
    "name": "Name",
    "url": "URL",
    "description": "Description",
    "dataset_id": "Dataset ID",
    "dataset_name": "Dataset",
    "volume": "Volume",
    "claim": "Claim",
    "namespace": "Namespace",
    "phase": "Phase",
    "client": "Driver",
    "catalog_service_url": "Catalog URL",
    "kubernetes_config_path": "Kubeconfig",
}

# Claim phases as reported by the control plane
PHASE_STYLES = {
    "Bound": "green",
    "Pending": "yellow",
    "Lost": "red",
}

# Object names and URLs are folded, never cut
FOLDED_COLUMNS = {"url", "volume", "claim", "kubernetes_config_path"}


class OutputFormatter:
    """Format dataset and mount rows for the terminal"""

    def format(self, data: Any, format_type: str = "table") -> str:
        """
        Format data according to specified format type

        # Arguments
            data: A row dict or a list of row dicts
            format_type: Output format (json, yaml, table)

        # Returns
            Formatted string
        """
        if format_type == "json":
            return self._format_json(data)
        elif format_type == "yaml":
            return self._format_yaml(data)
        elif format_type == "table":
            return self._format_table(data)
        else:
            return str(data)

    def _format_json(self, data: Any) -> str:
        return json.dumps(data, indent=2, cls=util.Encoder)

    def _format_yaml(self, data: Any) -> str:
        return yaml.safe_dump(
            json.loads(self._format_json(data)),
            default_flow_style=False,
            sort_keys=False,
        )

    def _format_table(self, data: Any) -> str:
        if not data:
            return "No data to display"

        # A single mount or profile is shown as a one-row table
        if isinstance(data, dict):
            data = [data]

        if not isinstance(data, list):
            return str(data)

        return self._format_rich_table(data)

    def _format_rich_table(self, rows: List[Dict]) -> str:
        keys = list(rows[0].keys())

        table = Table(show_header=True, header_style="bold cyan")
        for key in keys:
            table.add_column(
                COLUMN_TITLES.get(key, key.replace("_", " ").title()),
                overflow="fold" if key in FOLDED_COLUMNS else "ellipsis",
            )

        for row in rows:
            table.add_row(*[self._cell(key, row.get(key)) for key in keys])

        string_io = StringIO()
        Console(file=string_io, width=160).print(table)
        return string_io.getvalue()

    @staticmethod
    def _cell(key: str, value: Any) -> Text:
        if value is None:
            return Text("")
        if key == "phase":
            return Text(str(value), style=PHASE_STYLES.get(value, ""))
        if isinstance(value, bool):
            return Text("yes" if value else "no")
        return Text(str(value))


def _print_status(symbol: str, message: str, style: str):
    Console().print(f"{symbol} {message}", style=style, highlight=False, markup=False, soft_wrap=True)


def print_success(message: str):
    """Print success message in green"""
    _print_status("✓", message, "bold green")


def print_error(message: str):
    """Print error message in red"""
    _print_status("✗", message, "bold red")


def print_warning(message: str):
    """Print warning message in yellow"""
    _print_status("⚠", message, "bold yellow")
