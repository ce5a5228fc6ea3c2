"""Map parsed tag values onto a normalised DriverLicense record."""

from __future__ import annotations

from typing import Mapping

from license_reader.common.models import BINDABLE_FIELDS, DriverLicense
from license_reader.common.postcode import split_postal_code
from license_reader.reader.catalog import TagCatalog

MIDDLE_NAME_PLACEHOLDER = "NONE"


def build_full_name(first: str, middle: str, last: str, suffix: str) -> str:
    full = f"{last}, {first}".strip()
    if middle and middle != MIDDLE_NAME_PLACEHOLDER:
        full += f" {middle}"
    if suffix:
        full += f" {suffix}"
    return full


def _bound_values(fields: Mapping[str, str], catalog: TagCatalog) -> dict[str, str]:
    values = {}
    for name in BINDABLE_FIELDS:
        tag = catalog.tag_for(name)
        values[name] = fields.get(tag, "") if tag else ""
    return values


def map_to_license(fields: Mapping[str, str], raw: str, catalog: TagCatalog) -> DriverLicense:
    values = _bound_values(fields, catalog)
    postal_code, postal_code_ext = split_postal_code(values["postal_code"])
    values["postal_code"] = postal_code
    return DriverLicense(
        **values,
        full_name=build_full_name(
            values["first_name"],
            values["middle_name"],
            values["last_name"],
            values["suffix"],
        ),
        postal_code_ext=postal_code_ext,
        raw_data=raw,
    )
