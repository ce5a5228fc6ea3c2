"""Console rendering for parsed licenses."""

from __future__ import annotations

import json

from license_reader.common.models import DriverLicense, Eligibility, ScanOutcome

RESET = "\033[0m"
RED = "\033[31m"
GREEN = "\033[32m"

PASS_MARK = "✅"
FAIL_MARK = "\U0001F6AB"

HEADER = "--- Parsed License ---"
FOOTER = "-----------------------"

BANNER = (
    "=== Driver License PDF417 Text Reader (hidden input) ===",
    "Scan the barcode; the raw data will NOT be shown on screen.",
    "Type 'q' (or Ctrl-C) to quit.",
    "Start with --json to get JSON output.",
)


def _marked(label: str, value: object, passed: bool, color: bool) -> str:
    line = f"{label:<16}: {value} {PASS_MARK if passed else FAIL_MARK}"
    if not color:
        return line
    return f"{GREEN if passed else RED}{line}{RESET}"


def render_text(record: DriverLicense, eligibility: Eligibility, *, color: bool = True) -> str:
    lines = [
        "",
        HEADER,
        f"{'Full Name':<16}: {record.full_name}",
        f"{'License Number':<16}: {record.license_number}",
        _marked("Age", eligibility.age, eligibility.is_adult, color),
        f"{'DOB':<16}: {record.date_of_birth}",
        f"{'Issued':<16}: {record.issue_date}",
        _marked("Expires", record.expiration_date, eligibility.is_currently_valid, color),
        FOOTER,
        "",
    ]
    return "\n".join(lines)


def render_json(record: DriverLicense) -> str:
    return json.dumps(record.to_dict(), ensure_ascii=False, indent=2)


def render_denied(outcome: ScanOutcome) -> str:
    return f"License {outcome.license_number} has been scanned {outcome.count_after} times; entry denied."


def render_missing_identifier() -> str:
    return "No license number found; skipping scan count check."
