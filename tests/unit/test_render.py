import json

from license_reader.common.models import DriverLicense, Eligibility, ScanDecision, ScanOutcome
from license_reader.reader.render import (
    GREEN,
    RED,
    RESET,
    render_denied,
    render_json,
    render_missing_identifier,
    render_text,
)

RECORD = DriverLicense(
    full_name="PUBLIC, JOHN",
    license_number="D1234562",
    date_of_birth="10172005",
    issue_date="01012020",
    expiration_date="10172030",
)


def test_text_block_marks_passing_checks():
    text = render_text(RECORD, Eligibility(age=21, is_adult=True, is_currently_valid=True), color=False)
    lines = text.splitlines()
    assert "--- Parsed License ---" in lines
    assert "Full Name       : PUBLIC, JOHN" in lines
    assert "License Number  : D1234562" in lines
    assert "Age             : 21 ✅" in lines
    assert "DOB             : 10172005" in lines
    assert "Issued          : 01012020" in lines
    assert "Expires         : 10172030 ✅" in lines


def test_text_block_colours_failing_checks_red():
    text = render_text(RECORD, Eligibility(age=20, is_adult=False, is_currently_valid=False))
    assert f"{RED}Age             : 20 \U0001F6AB{RESET}" in text
    assert f"{RED}Expires         : 10172030 \U0001F6AB{RESET}" in text
    assert GREEN not in text


def test_json_omits_empty_fields():
    payload = json.loads(render_json(RECORD))
    assert payload == {
        "full_name": "PUBLIC, JOHN",
        "license_number": "D1234562",
        "date_of_birth": "10172005",
        "issue_date": "01012020",
        "expiration_date": "10172030",
    }


def test_denied_message_reports_count_including_this_scan():
    outcome = ScanOutcome(license_number="D1234562", count_before=2, decision=ScanDecision.DENY)
    assert render_denied(outcome) == "License D1234562 has been scanned 3 times; entry denied."


def test_missing_identifier_message():
    assert "No license number found" in render_missing_identifier()
