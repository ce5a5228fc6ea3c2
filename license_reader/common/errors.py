"""Domain errors and failure typing."""


class ReaderError(Exception):
    """Base class for reader failures."""

    error_code = "READER_ERROR"


class ConfigError(ReaderError):
    """Raised for invalid or missing configuration."""

    error_code = "CONFIG_ERROR"


class LedgerError(ReaderError):
    """Raised when the scan ledger file exists but cannot be read or decoded."""

    error_code = "LEDGER_ERROR"


class InputReadError(ReaderError):
    """Raised when the scan input channel is unusable."""

    error_code = "INPUT_ERROR"
