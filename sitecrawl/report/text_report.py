# sitecrawl/report/text_report.py

"""
Plain-text report: a box-drawn, coloured two-column table of pages and
their internal link counts.
"""
from __future__ import annotations

from typing import List, Mapping, Sequence

import click

from sitecrawl.report.base import ensure_pages

HEADERS = ("URL", "Internal Links")
BANNER = "==========\nREPORT\n=========="


def _row(cells: Sequence[str], widths: Sequence[int], colours: Sequence[str], color: bool) -> str:
    parts = []
    for cell, width, colour in zip(cells, widths, colours):
        # pad before styling so ANSI codes do not skew the width
        padded = cell.ljust(width)
        parts.append(click.style(padded, fg=colour) if color else padded)
    return "│ " + " │ ".join(parts) + " │"


def _rule(left: str, mid: str, right: str, widths: Sequence[int]) -> str:
    return left + mid.join("─" * (w + 2) for w in widths) + right


def render_text(pages: Mapping[str, int], *, color: bool = True) -> str:
    """
    Render the report as text.

    :param pages: mapping normalized URL -> internal link count
    :param color: add ANSI colours (cyan headers, yellow URLs, green counts)
    :raises EmptyReportError: if *pages* is empty
    """
    rows = [(url, str(count)) for url, count in ensure_pages(pages)]
    widths = [
        max(len(HEADERS[0]), *(len(url) for url, _ in rows)),
        max(len(HEADERS[1]), *(len(count) for _, count in rows)),
    ]

    lines: List[str] = [BANNER, _rule("┌", "┬", "┐", widths)]
    lines.append(_row(HEADERS, widths, ("cyan", "cyan"), color))
    lines.append(_rule("├", "┼", "┤", widths))
    for row in rows:
        lines.append(_row(row, widths, ("yellow", "green"), color))
    lines.append(_rule("└", "┴", "┘", widths))
    return "\n".join(lines)


def print_report(pages: Mapping[str, int], *, color: bool = True) -> None:
    """Echo the text report to stdout."""
    click.echo(render_text(pages, color=color))
