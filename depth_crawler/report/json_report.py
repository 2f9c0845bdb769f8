# depth_crawler/report/json_report.py

"""
JSON report of a DepthCrawler run.

Serializes a CrawlReport to a file.
"""
import json
from pathlib import Path

from depth_crawler.stats import CrawlReport


def render_json(report: CrawlReport, output_path: Path | str) -> Path:
    """
    Saves *report* as JSON to the given path.

    :param report: CrawlReport of a finished run
    :param output_path: path of the JSON file
    :return: Path of the saved file

    Example:
    ```python
    from depth_crawler.report.json_report import render_json
    report_path = render_json(report, 'reports/report.json')
    print(f"JSON report saved to: {report_path}")
    ```
    """
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)

    with output.open('w', encoding='utf-8') as f:
        json.dump(report.to_dict(), f, ensure_ascii=False, indent=2)

    return output
