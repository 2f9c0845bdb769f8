# === FILE: depth_crawler/config.py ===
"""
Loading and validation of the DepthCrawler run configuration.
The schema is described with Pydantic; every check runs before any page is fetched.
"""
from __future__ import annotations

import errno
import json
import os
from pathlib import Path
from typing import Any, Union

import yaml
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
    model_validator,
)

from depth_crawler.utils import is_valid_location


class CrawlConfig(BaseModel):
    """Settings of a single crawl run."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    seed: str = Field(..., description="Absolute http(s) URL to start crawling from.")
    max_fanout: int = Field(..., ge=0, description="Max new URLs accepted from one page.")
    max_depth: int = Field(..., ge=0, description="How deep the crawl goes.")
    unique_across_depths: bool = Field(
        False, description="A URL visited at some depth is never visited again deeper."
    )
    output_dir: Path = Field(Path("."), description="Root directory for the <depth>/ folders.")
    timeout: float = Field(10.0, gt=0, description="Timeout of a single request (seconds).")
    user_agent: str = Field("Mozilla", min_length=1, description="User-Agent header.")

    @field_validator("seed")
    @classmethod
    def _check_seed(cls, v: str) -> str:
        if not is_valid_location(v):
            raise ValueError(f"{v} is not a valid url")
        return v

    @model_validator(mode="after")
    def _check_fanout(self) -> CrawlConfig:
        if self.max_fanout == 0 and self.max_depth > 0:
            raise ValueError("max_fanout cannot be 0 if max_depth is greater than 0")
        return self


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Invalid YAML in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Top level of YAML must be a mapping, got {type(data).__name__}")
    return data


def _read_json(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8")) or {}
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Top level of JSON must be a mapping, got {type(data).__name__}")
    return data


def load_config(path: Union[str, Path, None] = None, **overrides: Any) -> CrawlConfig:
    """
    Reads YAML or JSON, applies the non-None *overrides* and returns a validated CrawlConfig.
    With ``path=None`` the config is built from *overrides* alone.
    """
    data: dict[str, Any] = {}
    if path is not None:
        path_obj = Path(path).expanduser().resolve()
        if not path_obj.is_file():
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path_obj))

        suffix = path_obj.suffix.lower()
        if suffix in (".yaml", ".yml"):
            data = _read_yaml(path_obj)
        elif suffix == ".json":
            data = _read_json(path_obj)
        else:
            raise ValueError(f"Unsupported config format: {suffix}")

    data.update({k: v for k, v in overrides.items() if v is not None})
    return CrawlConfig(**data)


__all__ = ["CrawlConfig", "ValidationError", "load_config"]
