# sitecrawl/report/json_report.py

"""
JSON report for SiteCrawl.

Serializes the crawl ledger to a file.
"""
import json
from pathlib import Path
from typing import Mapping

from sitecrawl.report.base import ensure_pages


def report_data(pages: Mapping[str, int]) -> dict:
    """Build the serializable report structure, pages sorted by link count."""
    return {
        'pages': [{'url': url, 'internal_links': count} for url, count in ensure_pages(pages)],
        'total_pages': len(pages),
    }


def render_json(pages: Mapping[str, int], output_path: Path | str, *, pretty: bool = True) -> Path:
    """
    Save the report for *pages* as JSON at the given path.

    :param pages: mapping normalized URL -> internal link count
    :param output_path: path of the JSON file
    :param pretty: indent the output (2 spaces)
    :return: Path of the saved file

    Example:
    ```python
    from sitecrawl.report.json_report import render_json
    report_path = render_json(ledger.snapshot(), 'reports/report.json')
    print(f"JSON report saved to: {report_path}")
    ```
    """
    data = report_data(pages)

    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)

    with output.open('w', encoding='utf-8') as f:
        json.dump(data, f, ensure_ascii=False, indent=2 if pretty else None)

    return output
