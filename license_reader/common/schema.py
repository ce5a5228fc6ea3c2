"""Minimal strict schemas for YAML config validation."""

from __future__ import annotations

import re

from license_reader.common.errors import ConfigError
from license_reader.common.models import BINDABLE_FIELDS

TAG_RE = re.compile(r"^[A-Z]{3}$")

_TOP_KEYS = {"catalog", "policy", "ledger", "reader"}
_CATALOG_KEYS = {"tags", "bindings"}
_POLICY_KEYS = {"minimum_age", "max_allowed_scans"}
_LEDGER_KEYS = {"filename"}
_READER_KEYS = {"start_sentinel", "header_length"}


def _assert_required_keys(obj: dict, required: set[str], ctx: str) -> None:
    if not isinstance(obj, dict):
        raise ConfigError(f"{ctx} must be a mapping")
    missing = required - set(obj)
    if missing:
        missing_str = ", ".join(sorted(missing))
        raise ConfigError(f"Missing keys in {ctx}: {missing_str}")


def _assert_no_unknown_keys(obj: dict, known: set[str], ctx: str, allow_unknown: bool) -> None:
    if allow_unknown:
        return
    unknown = set(obj) - known
    if unknown:
        unknown_str = ", ".join(sorted(unknown))
        raise ConfigError(f"Unknown keys in {ctx}: {unknown_str}")


def _assert_non_negative_int(value, ctx: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ConfigError(f"{ctx} must be a non-negative integer")


def validate_catalog_config(cfg: dict, *, allow_unknown: bool = False) -> dict:
    _assert_required_keys(cfg, _CATALOG_KEYS, "catalog")
    _assert_no_unknown_keys(cfg, _CATALOG_KEYS, "catalog", allow_unknown)
    tags = cfg["tags"]
    if not isinstance(tags, list) or not tags:
        raise ConfigError("catalog.tags must be a non-empty list")

    for idx, tag in enumerate(tags):
        if not isinstance(tag, str) or not TAG_RE.match(tag):
            raise ConfigError(f"catalog.tags[{idx}] must be three uppercase letters, got {tag!r}")

    dupes = {tag for tag in tags if tags.count(tag) > 1}
    if dupes:
        raise ConfigError(f"Duplicate catalog tags: {', '.join(sorted(dupes))}")

    bindings = cfg["bindings"]
    if not isinstance(bindings, dict):
        raise ConfigError("catalog.bindings must be a mapping")
    unknown_fields = set(bindings) - set(BINDABLE_FIELDS)
    if unknown_fields:
        raise ConfigError(f"Unknown record fields in catalog.bindings: {', '.join(sorted(unknown_fields))}")
    unbound = {name: tag for name, tag in bindings.items() if tag not in tags}
    if unbound:
        listed = ", ".join(f"{name}={tag}" for name, tag in sorted(unbound.items()))
        raise ConfigError(f"catalog.bindings refer to tags missing from catalog.tags: {listed}")

    return cfg


def validate_reader_config(cfg: dict, *, allow_unknown: bool = False) -> dict:
    _assert_required_keys(cfg, _TOP_KEYS, "reader config")
    _assert_no_unknown_keys(cfg, _TOP_KEYS, "reader config", allow_unknown)

    validate_catalog_config(cfg["catalog"], allow_unknown=allow_unknown)

    _assert_required_keys(cfg["policy"], _POLICY_KEYS, "policy")
    _assert_no_unknown_keys(cfg["policy"], _POLICY_KEYS, "policy", allow_unknown)
    _assert_non_negative_int(cfg["policy"]["minimum_age"], "policy.minimum_age")
    _assert_non_negative_int(cfg["policy"]["max_allowed_scans"], "policy.max_allowed_scans")

    _assert_required_keys(cfg["ledger"], _LEDGER_KEYS, "ledger")
    _assert_no_unknown_keys(cfg["ledger"], _LEDGER_KEYS, "ledger", allow_unknown)
    if not isinstance(cfg["ledger"]["filename"], str) or not cfg["ledger"]["filename"]:
        raise ConfigError("ledger.filename must be a non-empty string")

    _assert_required_keys(cfg["reader"], _READER_KEYS, "reader")
    _assert_no_unknown_keys(cfg["reader"], _READER_KEYS, "reader", allow_unknown)
    if not isinstance(cfg["reader"]["start_sentinel"], str):
        raise ConfigError("reader.start_sentinel must be a string")
    _assert_non_negative_int(cfg["reader"]["header_length"], "reader.header_length")

    return cfg
