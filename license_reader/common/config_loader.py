"""Configuration loading and validation."""

from __future__ import annotations

import copy
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from license_reader.common.constants import (
    DEFAULT_BINDINGS,
    DEFAULT_HEADER_LENGTH,
    DEFAULT_LEDGER_FILENAME,
    DEFAULT_MAX_ALLOWED_SCANS,
    DEFAULT_MINIMUM_AGE,
    DEFAULT_START_SENTINEL,
    DEFAULT_TAGS,
)
from license_reader.common.errors import ConfigError
from license_reader.common.fs import read_yaml
from license_reader.common.schema import validate_reader_config

CONFIG_FILENAME = "reader.yml"

DEFAULT_CONFIG: dict[str, Any] = {
    "catalog": {
        "tags": list(DEFAULT_TAGS),
        "bindings": dict(DEFAULT_BINDINGS),
    },
    "policy": {
        "minimum_age": DEFAULT_MINIMUM_AGE,
        "max_allowed_scans": DEFAULT_MAX_ALLOWED_SCANS,
    },
    "ledger": {
        "filename": DEFAULT_LEDGER_FILENAME,
    },
    "reader": {
        "start_sentinel": DEFAULT_START_SENTINEL,
        "header_length": DEFAULT_HEADER_LENGTH,
    },
}


@dataclass(frozen=True)
class ReaderConfig:
    tags: tuple[str, ...]
    bindings: dict[str, str]
    minimum_age: int
    max_allowed_scans: int
    ledger_filename: str
    start_sentinel: str
    header_length: int


def _deep_merge(base: Any, overlay: Any) -> Any:
    if isinstance(base, dict) and isinstance(overlay, dict):
        merged = dict(base)
        for key, value in overlay.items():
            if key in merged:
                merged[key] = _deep_merge(merged[key], value)
            else:
                merged[key] = value
        return merged
    return overlay


def _load_yaml_with_overlay(path: Path, overlay_path: Path | None) -> dict:
    if path.exists():
        base = read_yaml(path)
        if base is None:
            raise ConfigError(f"Config file is empty: {path}")
    else:
        base = copy.deepcopy(DEFAULT_CONFIG)
    if overlay_path is None or not overlay_path.exists():
        return base
    overlay = read_yaml(overlay_path)
    if overlay is None:
        return base
    return _deep_merge(base, overlay)


def build_reader_config(cfg: dict, *, allow_unknown: bool = False) -> ReaderConfig:
    cfg = validate_reader_config(cfg, allow_unknown=allow_unknown)
    return ReaderConfig(
        tags=tuple(cfg["catalog"]["tags"]),
        bindings=dict(cfg["catalog"]["bindings"]),
        minimum_age=cfg["policy"]["minimum_age"],
        max_allowed_scans=cfg["policy"]["max_allowed_scans"],
        ledger_filename=cfg["ledger"]["filename"],
        start_sentinel=cfg["reader"]["start_sentinel"],
        header_length=cfg["reader"]["header_length"],
    )


def load_reader_config(
    config_dir: Path,
    *,
    allow_unknown: bool = False,
    overlay_config_dir: Path | None = None,
) -> ReaderConfig:
    overlay_path = None
    if overlay_config_dir is not None:
        overlay_path = overlay_config_dir / CONFIG_FILENAME
    cfg = _load_yaml_with_overlay(config_dir / CONFIG_FILENAME, overlay_path)
    return build_reader_config(cfg, allow_unknown=allow_unknown)


def default_reader_config() -> ReaderConfig:
    return build_reader_config(copy.deepcopy(DEFAULT_CONFIG))
