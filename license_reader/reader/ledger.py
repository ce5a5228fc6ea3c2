"""Persistent per-license scan counts with an allow/deny policy."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_exponential_jitter

from license_reader.common.constants import DEFAULT_MAX_ALLOWED_SCANS
from license_reader.common.errors import LedgerError
from license_reader.common.fs import read_json, write_json_atomic
from license_reader.common.logging import log_warning
from license_reader.common.models import ScanDecision, ScanOutcome


@dataclass(frozen=True)
class SaveRetryConfig:
    max_attempts: int = 3
    initial_wait: float = 0.05
    max_wait: float = 0.5


class ScanLedger:
    """File-backed mapping of license number to observation count.

    The ledger owns its counts: `save()` always writes the full in-memory
    mapping rather than taking one as an argument. One process owns one
    ledger file; concurrent writers are not guarded against and may lose
    updates.
    """

    def __init__(
        self,
        path: Path,
        *,
        max_allowed_scans: int = DEFAULT_MAX_ALLOWED_SCANS,
        logger: logging.Logger | None = None,
        save_retry: SaveRetryConfig | None = None,
    ) -> None:
        self.path = Path(path)
        self.max_allowed_scans = max_allowed_scans
        self.logger = logger or logging.getLogger(__name__)
        self.save_retry = save_retry or SaveRetryConfig()
        self._counts: dict[str, int] = {}

    @property
    def counts(self) -> dict[str, int]:
        return dict(self._counts)

    def load(self) -> dict[str, int]:
        self._counts = _read_counts(self.path)
        return self.counts

    def record_scan(self, license_number: str) -> ScanOutcome:
        if not license_number:
            return ScanOutcome(license_number="", count_before=0, decision=ScanDecision.NO_IDENTIFIER)

        count_before = self._counts.get(license_number, 0)
        if count_before >= self.max_allowed_scans:
            decision = ScanDecision.DENY
        else:
            decision = ScanDecision.ALLOW

        # Denied scans still count, so later runs see every attempt.
        self._counts[license_number] = count_before + 1
        self.save()
        return ScanOutcome(license_number=license_number, count_before=count_before, decision=decision)

    def save(self) -> bool:
        @retry(
            stop=stop_after_attempt(self.save_retry.max_attempts),
            wait=wait_exponential_jitter(
                initial=self.save_retry.initial_wait,
                max=self.save_retry.max_wait,
                jitter=self.save_retry.initial_wait,
            ),
            retry=retry_if_exception_type(OSError),
            reraise=True,
        )
        def _wrapped() -> None:
            write_json_atomic(self.path, self._counts)

        try:
            _wrapped()
        except OSError as exc:
            log_warning(
                self.logger,
                f"could not write scan ledger {self.path}: {exc}",
                event="LEDGER_SAVE",
                status="error",
                error_code="LEDGER_WRITE_ERROR",
            )
            return False
        return True


def _read_counts(path: Path) -> dict[str, int]:
    try:
        if not path.read_text(encoding="utf-8").strip():
            return {}
        payload = read_json(path)
    except FileNotFoundError:
        return {}
    except ValueError as exc:
        raise LedgerError(f"cannot decode {path}: {exc}") from exc
    except OSError as exc:
        raise LedgerError(f"cannot open {path}: {exc}") from exc

    if not isinstance(payload, dict):
        raise LedgerError(f"cannot decode {path}: expected a mapping of license number to count")

    counts: dict[str, int] = {}
    for key, value in payload.items():
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise LedgerError(f"cannot decode {path}: count for {key!r} is not a non-negative integer")
        counts[key] = value
    return counts
