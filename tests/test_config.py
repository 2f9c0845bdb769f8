# File: tests/test_config.py
import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from depth_crawler.config import CrawlConfig, load_config


def write_file(tmp_path: Path, content: str, suffix: str) -> Path:
    path = tmp_path / f"config{suffix}"
    path.write_text(content, encoding="utf-8")
    return path


def test_defaults():
    cfg = CrawlConfig(seed="https://example.com", max_fanout=3, max_depth=2)
    assert cfg.unique_across_depths is False
    assert cfg.output_dir == Path(".")
    assert cfg.user_agent == "Mozilla"
    assert cfg.timeout > 0


def test_seed_is_kept_verbatim():
    # no trailing-slash or query normalization
    cfg = CrawlConfig(seed="https://example.com/a/?b=2&a=1", max_fanout=1, max_depth=1)
    assert cfg.seed == "https://example.com/a/?b=2&a=1"


def test_config_is_frozen():
    cfg = CrawlConfig(seed="https://example.com", max_fanout=1, max_depth=1)
    with pytest.raises(ValidationError):
        cfg.max_depth = 5


@pytest.mark.parametrize(
    "kwargs",
    [
        {"seed": "example.com", "max_fanout": 1, "max_depth": 1},
        {"seed": "ftp://example.com", "max_fanout": 1, "max_depth": 1},
        {"seed": "https://example.com", "max_fanout": -1, "max_depth": 1},
        {"seed": "https://example.com", "max_fanout": 1, "max_depth": -1},
        {"seed": "https://example.com", "max_fanout": 0, "max_depth": 1},
        {"seed": "https://example.com", "max_fanout": 1, "max_depth": 1, "unknown": True},
    ],
)
def test_invalid_configs_are_rejected(kwargs):
    with pytest.raises(ValidationError):
        CrawlConfig(**kwargs)


def test_zero_fanout_allowed_at_depth_zero():
    cfg = CrawlConfig(seed="https://example.com", max_fanout=0, max_depth=0)
    assert cfg.max_fanout == 0


@pytest.mark.parametrize(
    "content,suffix,expect_exc",
    [
        ("seed: http://example.com\nmax_fanout: 2\nmax_depth: 1", ".yaml", None),
        (json.dumps({"seed": "http://example.com", "max_fanout": 2, "max_depth": 1}), ".json", None),
        ("{}", ".json", ValidationError),
        ("- a\n- b", ".yml", TypeError),
        ("key: [unclosed", ".yaml", ValueError),
        ("{not json", ".json", ValueError),
        ("seed = 1", ".toml", ValueError),
    ],
)
def test_load_config_variants(tmp_path, content, suffix, expect_exc):
    cfg_path = write_file(tmp_path, content, suffix)
    if expect_exc:
        with pytest.raises(expect_exc):
            load_config(cfg_path)
    else:
        cfg = load_config(cfg_path)
        assert isinstance(cfg, CrawlConfig)
        assert cfg.seed == "http://example.com"
        assert cfg.max_fanout == 2


def test_load_config_overrides_win(tmp_path):
    cfg_path = write_file(
        tmp_path,
        "seed: http://example.com\nmax_fanout: 2\nmax_depth: 1\nuser_agent: FromFile/1.0",
        ".yaml",
    )
    cfg = load_config(cfg_path, max_depth=3, user_agent=None, unique_across_depths=True)
    assert cfg.max_depth == 3
    assert cfg.user_agent == "FromFile/1.0"
    assert cfg.unique_across_depths is True


def test_load_config_without_file():
    cfg = load_config(None, seed="https://example.com", max_fanout=1, max_depth=0)
    assert cfg.max_depth == 0


def test_load_config_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "absent.yaml")
