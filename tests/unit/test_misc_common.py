import json
import logging
from pathlib import Path

from license_reader.common.constants import JSON_LOG_FIELDS
from license_reader.common.fs import read_json, write_json_atomic
from license_reader.common.ids import generate_session_id
from license_reader.common.logging import JsonLineFormatter, build_logger, close_logger, log_event


def test_generate_session_id_prefix():
    assert generate_session_id().startswith("session-")


def test_write_json_atomic_creates_parent_and_leaves_no_temp(tmp_path: Path):
    path = tmp_path / "nested" / "state.json"
    write_json_atomic(path, {"b": 1, "a": 2})
    assert read_json(path) == {"a": 2, "b": 1}
    assert path.read_text(encoding="utf-8").endswith("\n")
    assert not (path.parent / "state.json.tmp").exists()


def test_json_formatter_emits_stable_schema():
    record = logging.LogRecord("x", logging.INFO, __file__, 1, "hello", None, None)
    record.event = "SCAN"
    payload = json.loads(JsonLineFormatter().format(record))
    assert set(JSON_LOG_FIELDS) <= set(payload)
    assert payload["event"] == "SCAN"
    assert payload["message"] == "hello"
    assert payload["decision"] is None


def test_build_logger_writes_session_log_file(tmp_path: Path):
    logger = build_logger("session-abc", tmp_path, level="WARN")
    log_event(logger, "ignored below warning", event="SCAN")
    logger.warning("kept", extra={"event": "LEDGER_SAVE"})
    close_logger(logger)

    lines = (tmp_path / "logs" / "session-abc.log.jsonl").read_text(encoding="utf-8").splitlines()
    assert len(lines) == 1
    assert json.loads(lines[0])["event"] == "LEDGER_SAVE"
