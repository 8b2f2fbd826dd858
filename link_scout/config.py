# === FILE: link_scout/config.py ===
"""
Loading and validation of the LinkScout run configuration.
Pydantic describes the schema; values come from an optional YAML/JSON file
overridden by command-line options.
"""
from __future__ import annotations

import errno
import json
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, HttpUrl

from link_scout import __version__


class CheckerConfig(BaseModel):
    """Configuration of one check run."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    url: HttpUrl = Field(..., description="Page or sitemap to start from.")
    find_broken_links: bool = Field(False, description="Check <a href> references.")
    find_broken_images: bool = Field(False, description="Check <img src> references.")
    is_xml_sitemap: bool = Field(False, description="Treat the root URL as a sitemap.")
    exact_host_match: bool = Field(
        False, description="Follow only sitemap locations whose host equals the root host."
    )
    accept_2xx: bool = Field(False, description="Count any 2xx status as OK, not only 200.")
    user_agent: str = Field(f"LinkScout/{__version__}", min_length=1, description="User-Agent header.")
    timeout: Optional[float] = Field(
        None, gt=0, description="Total timeout per request (seconds); transport default if unset."
    )


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


def read_config_file(path: Union[str, Path]) -> Dict[str, Any]:
    """Read a YAML or JSON mapping; hyphenated keys are accepted."""
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
    return {str(k).replace("-", "_"): v for k, v in data.items()}


def load_config(
    path: Union[str, Path, None] = None,
    overrides: Optional[Mapping[str, Any]] = None,
) -> CheckerConfig:
    """
    Build a validated CheckerConfig from *path* (optional) and *overrides*.
    Override values that are None are ignored. Raises FileNotFoundError for a
    missing file and pydantic's ValidationError for invalid values.
    """
    data: Dict[str, Any] = read_config_file(path) if path is not None else {}
    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return CheckerConfig(**data)
