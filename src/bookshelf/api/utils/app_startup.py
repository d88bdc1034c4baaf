"""Logging setup for the Book Management API.

Everything logs through loguru. Records emitted with the standard ``logging``
module (uvicorn, SQLAlchemy) are forwarded into it, so every line carries the
request id bound by the request middleware.
"""

import inspect
import logging
import sys
from pathlib import Path

from loguru import logger

from src.bookshelf.runtime.config.config_data import ConfigData
from src.bookshelf.runtime.context import get_config

_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "[<cyan>{extra[request_id]}</cyan>] | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)


def _stdlib_levels(config: ConfigData) -> dict[str, int]:
    return {
        "sqlalchemy.engine": logging.INFO if config.database.echo else logging.WARNING,
        "sqlalchemy.pool": logging.WARNING,
        "uvicorn": logging.INFO,
        "uvicorn.error": logging.INFO,
        # The request middleware logs request.start / request.end instead
        "uvicorn.access": logging.CRITICAL,
    }


class InterceptHandler(logging.Handler):
    """Forward standard ``logging`` records to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Report the caller of logging, not the logging module itself
        frame, depth = inspect.currentframe(), 0
        while frame and (depth == 0 or frame.f_code.co_filename == logging.__file__):
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).bind(
            logger_name=record.name
        ).log(level, record.getMessage())


def configure_logging(config: ConfigData | None = None) -> None:
    """Install the loguru sinks described by ``config.logging``.

    ``format: json`` serializes each record on every sink, ``plain`` writes the
    human-readable line (colourised on stderr). A file sink is added only when
    ``logging.file`` is set, rotating at ``max_size_mb`` and keeping
    ``backup_count`` archives.
    """
    config = config or get_config()
    cfg = config.logging
    serialize = cfg.format == "json"
    # No variable values in production tracebacks
    diagnose = config.app.environment != "production"

    logger.remove()
    logger.configure(extra={"request_id": "-"})

    logger.add(
        sys.stderr,
        level=cfg.level,
        format=_FORMAT,
        serialize=serialize,
        colorize=not serialize,
        diagnose=diagnose,
    )

    if cfg.file:
        path = Path(cfg.file)
        path.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            path,
            level=cfg.level,
            format=_FORMAT,
            serialize=serialize,
            colorize=False,
            rotation=f"{cfg.max_size_mb} MB",
            retention=cfg.backup_count,
            compression="zip",
            diagnose=diagnose,
        )

    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
    for name, level in _stdlib_levels(config).items():
        stdlib_logger = logging.getLogger(name)
        stdlib_logger.handlers = []
        stdlib_logger.propagate = True
        stdlib_logger.setLevel(level)

    logger.bind(
        level=cfg.level,
        format=cfg.format,
        file=cfg.file,
        sql_echo=config.database.echo,
    ).info("Logging configured")
