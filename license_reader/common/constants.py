"""Application constants."""

EXIT_SUCCESS = 0
EXIT_HARD_FAIL = 20

QUIT_COMMANDS = ("q", "quit")
READY_PROMPT = "Ready for Scan"

DEFAULT_LEDGER_FILENAME = "scanned.json"
DEFAULT_MINIMUM_AGE = 21
DEFAULT_MAX_ALLOWED_SCANS = 2
DEFAULT_START_SENTINEL = "@"
DEFAULT_HEADER_LENGTH = 5

# Reference element order; DDF, DDG and DDE are unbound but still end the
# value of the element before them.
DEFAULT_TAGS = (
    "DAC",
    "DAD",
    "DCS",
    "DCE",
    "DDF",
    "DDG",
    "DAQ",
    "DBD",
    "DBA",
    "DBB",
    "DAG",
    "DAH",
    "DAI",
    "DAJ",
    "DAK",
    "DCF",
    "DBC",
    "DAY",
    "DAU",
    "DAW",
    "DCB",
    "DCR",
    "DDE",
    "DDI",
)

DEFAULT_BINDINGS = {
    "first_name": "DAC",
    "middle_name": "DAD",
    "last_name": "DCS",
    "suffix": "DCE",
    "license_number": "DAQ",
    "issue_date": "DBD",
    "expiration_date": "DBA",
    "date_of_birth": "DBB",
    "street_line1": "DAG",
    "street_line2": "DAH",
    "city": "DAI",
    "state": "DAJ",
    "postal_code": "DAK",
    "country": "DCF",
    "sex": "DBC",
    "eye_color": "DAY",
    "height": "DAU",
    "weight_kg": "DAW",
    "vehicle_class": "DCB",
    "restrictions": "DCR",
    "endorsements": "DCE",
    "issuer_id": "DDI",
}

JSON_LOG_FIELDS = (
    "timestamp",
    "level",
    "session_id",
    "event",
    "status",
    "license_number",
    "scan_count",
    "decision",
    "tag_count",
    "error_code",
    "message",
)
