"""Tag catalog: the fixed set of element tags the parser may extract."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from license_reader.common.config_loader import ReaderConfig, default_reader_config
from license_reader.common.constants import DEFAULT_HEADER_LENGTH, DEFAULT_START_SENTINEL
from license_reader.common.schema import validate_catalog_config


@dataclass(frozen=True)
class TagCatalog:
    """Ordered tags plus the record field each one feeds.

    Tags are fixed-length and disjoint, so one alternation pattern finds
    every occurrence in a single pass regardless of order.
    """

    tags: tuple[str, ...]
    bindings: Mapping[str, str]
    start_sentinel: str = DEFAULT_START_SENTINEL
    header_length: int = DEFAULT_HEADER_LENGTH
    pattern: re.Pattern = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        validate_catalog_config({"tags": list(self.tags), "bindings": dict(self.bindings)})
        object.__setattr__(self, "tags", tuple(self.tags))
        object.__setattr__(self, "bindings", MappingProxyType(dict(self.bindings)))
        object.__setattr__(self, "pattern", re.compile("|".join(re.escape(tag) for tag in self.tags)))

    def tag_for(self, field_name: str) -> str | None:
        return self.bindings.get(field_name)

    @classmethod
    def from_config(cls, config: ReaderConfig) -> "TagCatalog":
        return cls(
            tags=config.tags,
            bindings=config.bindings,
            start_sentinel=config.start_sentinel,
            header_length=config.header_length,
        )


def default_catalog() -> TagCatalog:
    return TagCatalog.from_config(default_reader_config())
