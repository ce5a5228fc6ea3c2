"""Order-agnostic parser for concatenated TAG+VALUE payloads."""

from __future__ import annotations

from license_reader.reader.catalog import TagCatalog

_TRAILING_CONTROL = "\r\n\x00"


def strip_header(raw: str, start_sentinel: str, header_length: int) -> str:
    if start_sentinel and raw.startswith(start_sentinel):
        raw = raw[len(start_sentinel):]
    if len(raw) > header_length:
        raw = raw[header_length:]
    return raw


def parse_tagged_fields(raw: str, catalog: TagCatalog) -> dict[str, str]:
    """Recover a tag -> value mapping from one scan payload.

    Each value runs from the end of its tag to the start of the next catalog
    tag, or to the end of the text. Tags may appear in any order; missing
    tags are simply absent and a repeated tag keeps its last value. Never
    raises.
    """
    if not isinstance(raw, str) or not raw:
        return {}

    body = strip_header(raw, catalog.start_sentinel, catalog.header_length)
    matches = list(catalog.pattern.finditer(body))

    result: dict[str, str] = {}
    for idx, match in enumerate(matches):
        value_end = matches[idx + 1].start() if idx + 1 < len(matches) else len(body)
        result[match.group(0)] = body[match.end():value_end].rstrip(_TRAILING_CONTROL)
    return result
