"""JSON logging with stable schema."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from license_reader.common.constants import JSON_LOG_FIELDS
from license_reader.common.fs import ensure_dir
from license_reader.common.time_utils import utc_timestamp_iso


class JsonLineFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": utc_timestamp_iso(),
            "level": record.levelname,
            "session_id": getattr(record, "session_id", None),
            "event": getattr(record, "event", None),
            "status": getattr(record, "status", None),
            "license_number": getattr(record, "license_number", None),
            "scan_count": getattr(record, "scan_count", None),
            "decision": getattr(record, "decision", None),
            "tag_count": getattr(record, "tag_count", None),
            "error_code": getattr(record, "error_code", None),
            "message": record.getMessage(),
        }
        for field in JSON_LOG_FIELDS:
            payload.setdefault(field, None)
        return json.dumps(payload, ensure_ascii=False)


def build_logger(session_id: str, data_dir: Path, level: str = "INFO") -> logging.Logger:
    logger = logging.getLogger(f"license_reader.{session_id}")
    logger.setLevel(_level_name(level))
    logger.handlers.clear()
    logger.propagate = False

    # Console only carries problems; the scan terminal stays readable.
    stream = logging.StreamHandler()
    stream.setLevel(logging.WARNING)
    stream.setFormatter(JsonLineFormatter())
    logger.addHandler(stream)

    log_path = data_dir / "logs" / f"{session_id}.log.jsonl"
    ensure_dir(log_path.parent)
    file_handler = logging.FileHandler(log_path, encoding="utf-8")
    file_handler.setFormatter(JsonLineFormatter())
    logger.addHandler(file_handler)

    return logger


def close_logger(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)


def log_event(logger: logging.Logger, message: str, **event_fields: Any) -> None:
    logger.info(message, extra=event_fields)


def log_warning(logger: logging.Logger, message: str, **event_fields: Any) -> None:
    logger.warning(message, extra=event_fields)


def _level_name(level: str) -> str:
    name = level.upper()
    return "WARNING" if name == "WARN" else name
