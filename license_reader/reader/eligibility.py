"""Age and expiration checks against the current date."""

from __future__ import annotations

from datetime import datetime

from license_reader.common.constants import DEFAULT_MINIMUM_AGE
from license_reader.common.models import DriverLicense, Eligibility
from license_reader.common.time_utils import parse_mmddyyyy, whole_years_between


def evaluate_eligibility(
    record: DriverLicense,
    *,
    now: datetime | None = None,
    minimum_age: int = DEFAULT_MINIMUM_AGE,
) -> Eligibility:
    """Compute age, adult status and validity for ``record``.

    Unparseable dates never raise: a bad birth date gives age 0 and not
    adult, a bad expiration date gives not valid. An expiration on today's
    date is already expired.
    """
    today = (now or datetime.now()).date()

    age = 0
    dob = parse_mmddyyyy(record.date_of_birth)
    if dob is not None:
        age = whole_years_between(dob, today)

    expires = parse_mmddyyyy(record.expiration_date)
    is_currently_valid = expires is not None and expires > today

    return Eligibility(
        age=age,
        is_adult=dob is not None and age >= minimum_age,
        is_currently_valid=is_currently_valid,
    )
