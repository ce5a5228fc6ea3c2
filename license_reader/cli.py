"""CLI entrypoint for the driver license barcode reader."""

from __future__ import annotations

import argparse
import getpass
import logging
import sys
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Callable, TextIO

from license_reader.common.config_loader import ReaderConfig, load_reader_config
from license_reader.common.constants import EXIT_HARD_FAIL, EXIT_SUCCESS, QUIT_COMMANDS, READY_PROMPT
from license_reader.common.errors import InputReadError, ReaderError
from license_reader.common.ids import generate_session_id
from license_reader.common.logging import build_logger, close_logger, log_event, log_warning
from license_reader.common.models import ScanDecision
from license_reader.reader.catalog import TagCatalog
from license_reader.reader.eligibility import evaluate_eligibility
from license_reader.reader.ledger import ScanLedger
from license_reader.reader.record_mapper import map_to_license
from license_reader.reader.render import (
    BANNER,
    render_denied,
    render_json,
    render_missing_identifier,
    render_text,
)
from license_reader.reader.tagged_fields import parse_tagged_fields


@dataclass(frozen=True)
class ReaderContext:
    session_id: str
    config: ReaderConfig
    catalog: TagCatalog
    ledger: ScanLedger
    logger: logging.Logger
    output_json: bool = False
    color: bool = True


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--json", action="store_true", dest="output_json")
    parser.add_argument("--config-dir", default="./config")
    parser.add_argument("--overlay-config-dir", default=None)
    parser.add_argument("--data-dir", default=".")
    parser.add_argument("--ledger-path", default=None)
    parser.add_argument("--session-id", default=None)
    parser.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARN", "ERROR"])
    parser.add_argument("--no-color", action="store_true")
    return parser.parse_args(argv)


def read_hidden_line() -> str:
    return getpass.getpass(prompt="")


def process_scan(line: str, ctx: ReaderContext, *, now: datetime | None = None) -> list[str]:
    """Run one payload through parse, map, ledger and evaluation.

    Returns the lines to show for this scan. Never raises for a malformed
    payload.
    """
    fields = parse_tagged_fields(line, ctx.catalog)
    record = map_to_license(fields, line, ctx.catalog)
    outcome = ctx.ledger.record_scan(record.license_number)
    log_event(
        ctx.logger,
        "scan processed",
        session_id=ctx.session_id,
        event="SCAN",
        status="ok",
        license_number=record.license_number or None,
        scan_count=outcome.count_after,
        decision=outcome.decision.value,
        tag_count=len(fields),
    )

    output: list[str] = []
    if outcome.decision is ScanDecision.DENY:
        output.append(render_denied(outcome))
        if not ctx.output_json:
            output.append(READY_PROMPT)
        return output
    if outcome.decision is ScanDecision.NO_IDENTIFIER:
        output.append(render_missing_identifier())

    if ctx.output_json:
        output.append(render_json(record))
        return output

    eligibility = evaluate_eligibility(record, now=now, minimum_age=ctx.config.minimum_age)
    output.append(render_text(record, eligibility, color=ctx.color))
    output.append(READY_PROMPT)
    return output


def _read_next(read_line: Callable[[], str]) -> str | None:
    try:
        return read_line()
    except (EOFError, KeyboardInterrupt):
        return None
    except OSError as exc:
        raise InputReadError(f"input error: {exc}") from exc


def run_scan_loop(
    ctx: ReaderContext,
    read_line: Callable[[], str],
    out: TextIO,
    *,
    now: datetime | None = None,
) -> int:
    scans = 0
    while True:
        line = _read_next(read_line)
        if line is None or line.strip().lower() in QUIT_COMMANDS:
            print("Bye!", file=out)
            break
        if not line.strip():
            continue
        for text in process_scan(line, ctx, now=now):
            print(text, file=out)
        scans += 1
    return scans


def run_command(
    args: argparse.Namespace,
    *,
    read_line: Callable[[], str] = read_hidden_line,
    out: TextIO | None = None,
    now: datetime | None = None,
) -> int:
    out = out or sys.stdout
    session_id = args.session_id or generate_session_id()
    data_dir = Path(args.data_dir)
    overlay_config_dir = Path(args.overlay_config_dir) if args.overlay_config_dir else None

    logger = build_logger(session_id, data_dir=data_dir, level=args.log_level)
    try:
        config = load_reader_config(Path(args.config_dir), overlay_config_dir=overlay_config_dir)
        ledger_path = Path(args.ledger_path) if args.ledger_path else data_dir / config.ledger_filename
        ledger = ScanLedger(ledger_path, max_allowed_scans=config.max_allowed_scans, logger=logger)
        ledger.load()
        ctx = ReaderContext(
            session_id=session_id,
            config=config,
            catalog=TagCatalog.from_config(config),
            ledger=ledger,
            logger=logger,
            output_json=args.output_json,
            color=not args.no_color,
        )

        for text in BANNER:
            print(text, file=out)
        print("", file=out)
        print(READY_PROMPT, file=out)
        log_event(
            logger,
            f"session start with {len(ledger.counts)} known licenses",
            session_id=session_id,
            event="SESSION_START",
            status="ok",
        )

        scans = run_scan_loop(ctx, read_line, out, now=now)
        log_event(logger, "session end", session_id=session_id, event="SESSION_END", status="ok", scan_count=scans)
        return EXIT_SUCCESS
    except ReaderError as exc:
        log_warning(
            logger,
            f"fatal: {exc}",
            session_id=session_id,
            event="SESSION_FAIL",
            status="error",
            error_code=exc.error_code,
        )
        raise
    finally:
        close_logger(logger)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    try:
        return run_command(args)
    except ReaderError as exc:
        print(f"fatal: {exc}", file=sys.stderr)
        return EXIT_HARD_FAIL
    except Exception as exc:
        print(f"fatal: unexpected error: {exc}", file=sys.stderr)
        return EXIT_HARD_FAIL


if __name__ == "__main__":
    raise SystemExit(main())
