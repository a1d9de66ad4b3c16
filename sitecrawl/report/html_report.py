"""sitecrawl.report.html_report: HTML report rendered with Jinja2."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping, Optional, Union

from jinja2 import Environment, FileSystemLoader, select_autoescape

from sitecrawl.report.base import ensure_pages

DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"
TEMPLATE_NAME = "report.html.j2"


def render_html(
    pages: Mapping[str, int],
    output_path: Union[Path, str],
    template_dir: Optional[Union[Path, str]] = None,
    *,
    seed_url: str = "",
) -> Path:
    """Render the HTML report from the template and save it at the given path.

    Args:
        pages: mapping normalized URL -> internal link count.
        output_path: path of the resulting HTML file.
        template_dir: directory holding ``report.html.j2``; the template
            shipped with the package is used by default.
        seed_url: shown in the report title.

    Returns:
        Path of the saved HTML file.

    Example:
    ```python
    from sitecrawl.report.html_report import render_html
    html_path = render_html(ledger.snapshot(), 'reports/report.html')
    ```
    """
    rows = ensure_pages(pages)
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    env = Environment(
        loader=FileSystemLoader(str(template_dir or DEFAULT_TEMPLATE_DIR)),
        autoescape=select_autoescape(["html", "xml", "j2"]),
    )
    template = env.get_template(TEMPLATE_NAME)

    context: dict[str, Any] = {
        "pages": rows,
        "total_pages": len(rows),
        "total_links": sum(count for _, count in rows),
        "seed_url": seed_url,
    }

    output_path.write_text(template.render(**context), encoding="utf-8")
    return output_path
