from __future__ import annotations

import html
import os
from datetime import datetime
from typing import Iterable, List, Sequence, Tuple

from .models import PortProbeResult

OPEN_COLUMNS = ("Port", "Service", "Status", "Recommendation", "Example Command")
CLOSED_COLUMNS = ("Port", "Service", "Status")

_STYLE = """
body { font-family: Arial, sans-serif; margin: 24px; color: #1f2937; }
h1 { color: #2c3e50; }
table { border-collapse: collapse; width: 100%; margin-bottom: 24px; }
th, td { border: 1px solid #d1d5db; padding: 8px; text-align: left; }
th { background: #f3f4f6; }
.open { color: #047857; font-weight: bold; }
.closed { color: #b91c1c; }
code { background: #f3f4f6; padding: 2px 4px; }
.meta { color: #6b7280; font-size: 13px; }
"""


def partition(
    results: Iterable[PortProbeResult],
) -> Tuple[List[PortProbeResult], List[PortProbeResult]]:
    ordered = sorted(results, key=lambda r: r.port)
    return [r for r in ordered if r.is_open], [r for r in ordered if not r.is_open]


def format_row(r: PortProbeResult) -> str:
    row = f"Port {r.port}: {r.status.value.lower()} | Service: {r.service}"
    if r.recommendation:
        row += f" | {r.recommendation}"
    return row


def print_results(results: Sequence[PortProbeResult]) -> None:
    open_results, closed_results = partition(results)
    print(f"Found {len(open_results)} open ports")
    for r in open_results + closed_results:
        print(format_row(r))


def _cell(value: object) -> str:
    return f"<td>{html.escape(str(value))}</td>"


def _table(columns: Sequence[str], rows: List[str]) -> str:
    head = "".join(f"<th>{html.escape(c)}</th>" for c in columns)
    return f"<table>\n<tr>{head}</tr>\n" + "".join(rows) + "</table>\n"


def render_html(host: str, results: Iterable[PortProbeResult]) -> str:
    open_results, closed_results = partition(results)
    generated = datetime.now().strftime("%Y-%m-%d %H:%M:%S")

    open_rows = [
        "<tr>"
        + _cell(r.port)
        + _cell(r.service)
        + f'<td class="open">{r.status.value}</td>'
        + _cell(r.recommendation)
        + (f"<td><code>{html.escape(r.example_command)}</code></td>" if r.example_command else "<td></td>")
        + "</tr>\n"
        for r in open_results
    ]
    closed_rows = [
        "<tr>"
        + _cell(r.port)
        + _cell(r.service)
        + f'<td class="closed">{r.status.value}</td>'
        + "</tr>\n"
        for r in closed_results
    ]

    parts = [
        "<!doctype html>\n<html>\n<head>\n<meta charset=\"utf-8\">\n",
        f"<title>Port Scan Report - {html.escape(host)}</title>\n",
        f"<style>{_STYLE}</style>\n</head>\n<body>\n",
        f"<h1>Port Scan Report for {html.escape(host)}</h1>\n",
        f'<p class="meta">Generated: {generated}</p>\n',
        "<h2>Open Ports</h2>\n",
        _table(OPEN_COLUMNS, open_rows),
        "<h2>Closed Ports</h2>\n",
        _table(CLOSED_COLUMNS, closed_rows),
        f"<p>Total closed ports: {len(closed_results)}</p>\n",
        "</body>\n</html>\n",
    ]
    return "".join(parts)


def save_report(
    host: str,
    results: Iterable[PortProbeResult],
    path: str = "PortScanReport.html",
) -> str:
    out_dir = os.path.dirname(path)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)

    with open(path, "w", encoding="utf-8") as f:
        f.write(render_html(host, results))

    return os.path.abspath(path)
