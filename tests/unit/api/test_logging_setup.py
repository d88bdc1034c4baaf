"""Tests for the loguru sinks and the stdlib bridge."""

import json
import logging
import sys
from pathlib import Path

import pytest
from loguru import logger

from src.bookshelf.api.utils.app_startup import configure_logging
from src.bookshelf.runtime.config.config_data import ConfigData


@pytest.fixture
def log_config(tmp_path: Path) -> ConfigData:
    config = ConfigData()
    config.logging.file = str(tmp_path / "logs" / "api.log")
    config.logging.format = "plain"
    return config


@pytest.fixture(autouse=True)
def _restore_loguru():
    yield
    logger.remove()
    logger.add(sys.stderr)


def _log_text(config: ConfigData) -> str:
    return Path(config.logging.file).read_text(encoding="utf-8")


def test_file_sink_and_directory_are_created(log_config: ConfigData):
    configure_logging(log_config)

    logger.info("book.created")

    assert "book.created" in _log_text(log_config)


def test_plain_lines_carry_request_id(log_config: ConfigData):
    configure_logging(log_config)

    logger.info("outside a request")
    with logger.contextualize(request_id="req-42"):
        logger.info("inside a request")

    lines = _log_text(log_config).splitlines()
    outside = next(line for line in lines if "outside a request" in line)
    inside = next(line for line in lines if "inside a request" in line)
    assert "[-]" in outside
    assert "[req-42]" in inside


def test_json_format_serializes_records(log_config: ConfigData):
    log_config.logging.format = "json"
    configure_logging(log_config)

    with logger.contextualize(request_id="req-7"):
        logger.warning("book.missing")

    records = [json.loads(line)["record"] for line in _log_text(log_config).splitlines()]
    missing = next(r for r in records if r["message"] == "book.missing")
    assert missing["level"]["name"] == "WARNING"
    assert missing["extra"]["request_id"] == "req-7"


def test_level_filters_records(log_config: ConfigData):
    log_config.logging.level = "WARNING"
    configure_logging(log_config)

    logger.info("quiet")
    logger.error("loud")

    text = _log_text(log_config)
    assert "quiet" not in text
    assert "loud" in text


def test_stdlib_records_are_forwarded(log_config: ConfigData):
    configure_logging(log_config)

    logging.getLogger("bookshelf.stdlib").warning("from the logging module")

    assert "from the logging module" in _log_text(log_config)


def test_uvicorn_access_lines_are_dropped(log_config: ConfigData):
    configure_logging(log_config)

    logging.getLogger("uvicorn.access").info("GET /api/books 200")

    assert "GET /api/books 200" not in _log_text(log_config)


@pytest.mark.parametrize(("echo", "level"), [(True, logging.INFO), (False, logging.WARNING)])
def test_sql_echo_sets_sqlalchemy_level(log_config: ConfigData, echo, level):
    log_config.database.echo = echo

    configure_logging(log_config)

    assert logging.getLogger("sqlalchemy.engine").level == level
