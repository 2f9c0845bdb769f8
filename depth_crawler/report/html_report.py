# File: depth_crawler/report/html_report.py
"""depth_crawler.report.html_report: HTML report rendered with Jinja2."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional, Union

from jinja2 import Environment, FileSystemLoader, select_autoescape

from depth_crawler.stats import CrawlReport

DEFAULT_TEMPLATE_DIR = Path(__file__).resolve().parent / "templates"


def render_html(
    report: CrawlReport,
    template_dir: Optional[Union[Path, str]],
    output_path: Union[Path, str],
) -> Path:
    """Renders the HTML report from a template and saves it to *output_path*.

    Args:
        report: CrawlReport of a finished run.
        template_dir: directory holding ``report.html.j2``; None uses the bundled one.
        output_path: path of the resulting HTML file.

    Returns:
        Path of the saved HTML file.

    Example:
    ```python
    from depth_crawler.report.html_report import render_html
    html_path = render_html(report, template_dir=None, output_path='reports/report.html')
    ```
    """
    template_dir = Path(template_dir) if template_dir is not None else DEFAULT_TEMPLATE_DIR
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    env = Environment(
        loader=FileSystemLoader(str(template_dir)),
        autoescape=select_autoescape(["html", "xml", "j2"]),
    )
    template = env.get_template("report.html.j2")

    context: dict[str, Any] = report.to_dict()

    html_content = template.render(**context)
    output_path.write_text(html_content, encoding="utf-8")

    return output_path
