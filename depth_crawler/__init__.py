"""
DepthCrawler package initializer.
Defines the package version and exposes the main entry points.
"""
__version__ = "0.1.0"

from depth_crawler.config import CrawlConfig, load_config
from depth_crawler.engine import run, start_crawl
from depth_crawler.stats import CrawlReport

__all__ = ["__version__", "CrawlConfig", "CrawlReport", "load_config", "run", "start_crawl"]
