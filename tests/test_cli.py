# File: tests/test_cli.py
"""Tests for the CLI (`sitecrawl.cli`) using click.testing.CliRunner.
The crawl itself is patched out; these check arguments, output and exit codes.
"""
import json
import logging

import pytest
from click.testing import CliRunner

import sitecrawl.cli as cli_module
from sitecrawl.cli import cli
from sitecrawl.exceptions import FatalSeedError
from sitecrawl.logger import configure

PAGES = {"example.com": 3, "example.com/about": 1}


@pytest.fixture(autouse=True)
def patch_start_crawl(monkeypatch):
    """Patch start_crawl to return a fixed ledger without touching the network."""
    calls = []

    async def fake_crawl(seed_url, cfg):
        calls.append((seed_url, cfg))
        return dict(PAGES)

    monkeypatch.setattr(cli_module, "start_crawl", fake_crawl)
    return calls


def test_version_option():
    result = CliRunner().invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert "SiteCrawl" in result.output


def test_missing_seed_is_usage_error():
    result = CliRunner().invoke(cli, [])
    assert result.exit_code == 2
    assert "SEED_URL" in result.output


def test_too_many_arguments_is_usage_error():
    result = CliRunner().invoke(cli, ["https://example.com", "https://example.org"])
    assert result.exit_code == 2


def test_crawl_prints_report(patch_start_crawl):
    result = CliRunner().invoke(cli, ["https://example.com", "--max-depth", "1", "--breadth-first"])
    assert result.exit_code == 0, result.output
    assert "starting crawl of: https://example.com..." in result.output
    assert "REPORT" in result.output
    assert result.output.index("example.com/about") > result.output.index("│ example.com ")

    seed, cfg = patch_start_crawl[0]
    assert seed == "https://example.com"
    assert cfg.max_depth == 1
    assert cfg.traversal == "breadth-first"


def test_fatal_seed_error_exits_non_zero(monkeypatch):
    async def failing(seed_url, cfg):
        raise FatalSeedError(seed_url, "returned status code 500")

    monkeypatch.setattr(cli_module, "start_crawl", failing)
    result = CliRunner().invoke(cli, ["https://example.com"])
    assert result.exit_code == 1
    assert "500" in result.output
    assert "REPORT" not in result.output


def test_empty_ledger_exits_non_zero(monkeypatch):
    async def empty(seed_url, cfg):
        return {}

    monkeypatch.setattr(cli_module, "start_crawl", empty)
    result = CliRunner().invoke(cli, ["https://example.com"])
    assert result.exit_code == 1
    assert "no pages found" in result.output


def test_invalid_settings_exit_non_zero():
    result = CliRunner().invoke(cli, ["https://example.com", "--max-depth", "-1"])
    assert result.exit_code == 1
    assert "Invalid settings" in result.output


def test_json_and_html_reports(tmp_path):
    out_json = tmp_path / "report.json"
    out_html = tmp_path / "report.html"
    result = CliRunner().invoke(
        cli, ["https://example.com", "--json", str(out_json), "--html", str(out_html)]
    )
    assert result.exit_code == 0, result.output
    data = json.loads(out_json.read_text(encoding="utf-8"))
    assert data["pages"][0] == {"url": "example.com", "internal_links": 3}
    assert "example.com/about" in out_html.read_text(encoding="utf-8")
    assert f"JSON report: {out_json}" in result.output


def test_log_file(tmp_path):
    log_file = tmp_path / "crawl.log"
    result = CliRunner().invoke(
        cli, ["https://example.com", "--log-file", str(log_file), "--log-level", "DEBUG"]
    )
    assert result.exit_code == 0, result.output
    assert log_file.exists()


def test_html_has_no_short_flag(tmp_path):
    result = CliRunner().invoke(cli, ["https://example.com", "-h", str(tmp_path / "r.html")])
    assert result.exit_code == 2
    assert not (tmp_path / "r.html").exists()


def test_reconfiguring_logger_does_not_duplicate_handlers(tmp_path):
    configure(level="DEBUG", log_file=tmp_path / "a.log")
    configured = configure(level="INFO")
    assert len(configured.handlers) == 1
    assert configured.level == logging.INFO
    assert configured.propagate is False
