from __future__ import annotations

import json
import logging

import pytest
import structlog

from urls_core.logging import configure_logging, scan_scope
from urls_core.scanner import extract_urls


@pytest.fixture(autouse=True)
def _restore_logging():
    yield
    structlog.reset_defaults()
    logging.getLogger().handlers.clear()


def _records(err: str) -> list[dict]:
    return [json.loads(line) for line in err.splitlines() if line.startswith("{")]


def test_records_carry_scan_scope(capsys: pytest.CaptureFixture[str]) -> None:
    configure_logging("info")
    log = structlog.get_logger("urls_core.scanner.scope_check")
    with scan_scope("toml", "toml"):
        log.info("inside", detail=1)
    log.info("outside")

    inside, outside = _records(capsys.readouterr().err)
    assert inside["msg"] == "inside"
    assert inside["format"] == "toml"
    assert inside["scanner"] == "toml"
    assert inside["component"] == "scanner"
    assert inside["level"] == "info"
    assert "ts" in inside
    assert "format" not in outside


def test_level_filters_records(capsys: pytest.CaptureFixture[str]) -> None:
    configure_logging("warning")
    log = structlog.get_logger("urls_core.cli.level_check")
    log.info("quiet")
    log.warning("loud")
    (record,) = _records(capsys.readouterr().err)
    assert record["msg"] == "loud"
    assert record["component"] == "cli"


def test_fallback_record_names_format(capsys: pytest.CaptureFixture[str]) -> None:
    configure_logging("info")
    extract_urls('= = =\nhome = "https://example.com"', "toml")
    records = [record for record in _records(capsys.readouterr().err) if record["msg"] == "scanner.fallback"]
    (record,) = records
    assert record["format"] == "toml"
    assert record["scanner"] == "toml"
    assert record["component"] == "scanner"
    assert record["level"] == "warning"
