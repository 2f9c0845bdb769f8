"""depth_crawler.report: JSON and HTML report writers used by the CLI."""

from depth_crawler.report.html_report import render_html
from depth_crawler.report.json_report import render_json

__all__ = ["render_json", "render_html"]
