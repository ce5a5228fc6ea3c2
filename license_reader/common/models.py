"""Data models shared by the reader stages."""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from enum import Enum
from typing import Any


@dataclass(frozen=True)
class DriverLicense:
    first_name: str = ""
    middle_name: str = ""
    last_name: str = ""
    suffix: str = ""
    full_name: str = ""
    license_number: str = ""

    # MMDDYYYY, kept as text
    issue_date: str = ""
    expiration_date: str = ""
    date_of_birth: str = ""

    street_line1: str = ""
    street_line2: str = ""
    city: str = ""
    state: str = ""
    postal_code: str = ""
    postal_code_ext: str = ""
    country: str = ""

    sex: str = ""
    eye_color: str = ""
    height: str = ""
    weight_kg: str = ""
    vehicle_class: str = ""
    restrictions: str = ""
    endorsements: str = ""
    issuer_id: str = ""

    raw_data: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {key: value for key, value in asdict(self).items() if value}


# Fields filled by the mapper rather than copied from a bound tag.
DERIVED_FIELDS = frozenset({"full_name", "postal_code_ext", "raw_data"})
BINDABLE_FIELDS = tuple(f.name for f in fields(DriverLicense) if f.name not in DERIVED_FIELDS)


@dataclass(frozen=True)
class Eligibility:
    age: int
    is_adult: bool
    is_currently_valid: bool


class ScanDecision(str, Enum):
    ALLOW = "allow"
    DENY = "deny"
    NO_IDENTIFIER = "no_identifier"


@dataclass(frozen=True)
class ScanOutcome:
    license_number: str
    count_before: int
    decision: ScanDecision

    @property
    def count_after(self) -> int:
        if self.decision is ScanDecision.NO_IDENTIFIER:
            return self.count_before
        return self.count_before + 1
