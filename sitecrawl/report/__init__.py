# File: sitecrawl/report/__init__.py
"""sitecrawl.report: renderers for the finished crawl ledger (text table, JSON, HTML)."""

from sitecrawl.report.base import ensure_pages, sort_pages
from sitecrawl.report.html_report import render_html
from sitecrawl.report.json_report import render_json
from sitecrawl.report.text_report import print_report, render_text

__all__ = ["sort_pages", "ensure_pages", "render_text", "print_report", "render_json", "render_html"]
