# File: tests/test_config.py
import json
from pathlib import Path

import pytest
from pydantic import ValidationError
from link_scout.config import CheckerConfig, load_config


def write_file(tmp_path: Path, content: str, suffix: str) -> Path:
    path = tmp_path / f"config{suffix}"
    path.write_text(content, encoding="utf-8")
    return path


@pytest.mark.parametrize(
    "content,expect_exc",
    [
        ("url: http://example.com\nfind_broken_links: true", None),
        (json.dumps({"url": "http://example.com", "find_broken_links": True}), None),
        ("{}", ValidationError),
        ("not: a: mapping", ValueError),
        ("::invalid yaml", TypeError),
    ],
)
def test_load_config_variants(tmp_path, content, expect_exc):
    suffix = ".yaml" if not content.strip().startswith("{") else ".json"
    cfg_path = write_file(tmp_path, content, suffix)
    if expect_exc:
        with pytest.raises(expect_exc):
            load_config(cfg_path)
    else:
        cfg = load_config(cfg_path)
        assert isinstance(cfg, CheckerConfig)
        assert str(cfg.url).rstrip("/") == "http://example.com"
        assert cfg.find_broken_links is True
        assert cfg.find_broken_images is False


def test_defaults():
    cfg = CheckerConfig(url="https://x.test/index.html")
    assert str(cfg.url) == "https://x.test/index.html"
    assert not cfg.is_xml_sitemap
    assert not cfg.exact_host_match
    assert not cfg.accept_2xx
    assert cfg.timeout is None
    assert cfg.user_agent.startswith("LinkScout/")


def test_hyphenated_keys(tmp_path):
    cfg_path = write_file(
        tmp_path, "url: https://x.test/sitemap.xml\nis-xml-sitemap: true\nfind-broken-images: true", ".yml"
    )
    cfg = load_config(cfg_path)
    assert cfg.is_xml_sitemap
    assert cfg.find_broken_images


def test_overrides_win_and_none_is_ignored(tmp_path):
    cfg_path = write_file(tmp_path, "url: https://x.test/\ntimeout: 3", ".yaml")
    cfg = load_config(cfg_path, {"url": "https://y.test/", "timeout": None, "accept_2xx": True})
    assert str(cfg.url) == "https://y.test/"
    assert cfg.timeout == 3
    assert cfg.accept_2xx


def test_overrides_without_file():
    cfg = load_config(None, {"url": "https://x.test/", "find_broken_links": True})
    assert cfg.find_broken_links


def test_missing_url_is_invalid():
    with pytest.raises(ValidationError):
        load_config(None, {"find_broken_links": True})


@pytest.mark.parametrize("url", ["not a url", "ftp://x.test/file", "/relative"])
def test_malformed_root_url(url):
    with pytest.raises(ValidationError):
        load_config(None, {"url": url})


def test_unknown_key_rejected(tmp_path):
    cfg_path = write_file(tmp_path, "url: https://x.test/\nmax_depth: 3", ".yaml")
    with pytest.raises(ValidationError):
        load_config(cfg_path)


def test_non_positive_timeout_rejected():
    with pytest.raises(ValidationError):
        CheckerConfig(url="https://x.test/", timeout=0)


def test_config_file_not_found(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "missing.yaml")


def test_unsupported_suffix(tmp_path):
    cfg_path = write_file(tmp_path, "url = 'https://x.test/'", ".toml")
    with pytest.raises(ValueError):
        load_config(cfg_path)


def test_config_is_frozen():
    cfg = CheckerConfig(url="https://x.test/")
    with pytest.raises(ValidationError):
        cfg.find_broken_links = True
