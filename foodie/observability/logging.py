"""
Logging for the pattern catalogue.

Every line a demo prints is tagged with the pattern that produced it and,
while ``Catalogue.run`` is active, with the catalogue session, so a run can
be followed on the console or grepped out of the JSON log file.
"""

import json
import logging
import sys
from contextlib import contextmanager
from contextvars import ContextVar
from functools import partialmethod
from pathlib import Path
from typing import Any, Dict, Iterator, Optional, Union

ROOT_LOGGER_NAME = "foodie"

# Record attributes that PatternLogger sets and the formatters render
CONTEXT_FIELDS = ("pattern", "session_id", "step", "duration_ms")

_active_session: ContextVar[Optional[str]] = ContextVar("foodie_session", default=None)


@contextmanager
def session_scope(session_id: str) -> Iterator[None]:
    """Tag every pattern log line emitted inside the block with ``session_id``."""
    token = _active_session.set(session_id)
    try:
        yield
    finally:
        _active_session.reset(token)


def record_context(record: logging.LogRecord) -> Dict[str, Any]:
    """Context fields present on ``record``, in display order."""
    return {
        name: getattr(record, name)
        for name in CONTEXT_FIELDS
        if getattr(record, name, None) is not None
    }


class JsonLineFormatter(logging.Formatter):
    """One JSON object per line, used for log files and ``json_logs``."""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "time": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **record_context(record),
        }
        if getattr(record, "extra_data", None):
            payload["data"] = record.extra_data
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


class ConsoleFormatter(logging.Formatter):
    """``time | LEVEL | [pattern=..., session=...] message`` for terminals."""

    LEVEL_COLORS = {
        logging.DEBUG: "\033[36m",
        logging.INFO: "\033[32m",
        logging.WARNING: "\033[33m",
        logging.ERROR: "\033[31m",
        logging.CRITICAL: "\033[35m",
    }
    RESET = "\033[0m"

    def __init__(self, use_colors: bool = True) -> None:
        super().__init__(datefmt="%Y-%m-%d %H:%M:%S")
        self.use_colors = use_colors

    def format(self, record: logging.LogRecord) -> str:
        level = f"{record.levelname:8}"
        if self.use_colors and record.levelno in self.LEVEL_COLORS:
            level = f"{self.LEVEL_COLORS[record.levelno]}{level}{self.RESET}"

        tags = []
        for name, value in record_context(record).items():
            if name == "session_id":
                tags.append(f"session={value[:8]}")
            elif name == "duration_ms":
                tags.append(f"duration={value}ms")
            else:
                tags.append(f"{name}={value}")
        context = f" [{', '.join(tags)}]" if tags else ""

        line = f"{self.formatTime(record, self.datefmt)} | {level} |{context} {record.getMessage()}"
        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        return line


class PatternLogger:
    """Thin wrapper around a ``foodie.*`` logger that adds pattern context.

    Usage:
        logger = get_logger("behavioral.state", pattern="state")
        logger.info("En cocina", step=1)
    """

    def __init__(
        self,
        name: str,
        pattern: Optional[str] = None,
        session_id: Optional[str] = None,
    ) -> None:
        self._logger = logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
        self.pattern = pattern
        self.session_id = session_id

    @property
    def name(self) -> str:
        return self._logger.name

    def log(
        self,
        level: int,
        message: str,
        *,
        pattern: Optional[str] = None,
        step: Optional[int] = None,
        duration_ms: Optional[float] = None,
        extra: Optional[Dict[str, Any]] = None,
        exc_info: bool = False,
    ) -> None:
        context = {
            "pattern": pattern or self.pattern,
            "session_id": self.session_id or _active_session.get(),
            "step": step,
            "duration_ms": None if duration_ms is None else round(duration_ms, 2),
        }
        fields: Dict[str, Any] = {k: v for k, v in context.items() if v is not None}
        if extra:
            fields["extra_data"] = extra
        self._logger.log(level, message, extra=fields, exc_info=exc_info)

    debug = partialmethod(log, logging.DEBUG)
    info = partialmethod(log, logging.INFO)
    warning = partialmethod(log, logging.WARNING)
    error = partialmethod(log, logging.ERROR)


def configure_logging(
    level: str = "INFO",
    log_file: Optional[Union[str, Path]] = None,
    json_format: bool = False,
    use_colors: bool = True,
) -> None:
    """Route ``foodie.*`` logs to stdout and, optionally, a JSON log file.

    Args:
        level: Minimum level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional path that receives JSON lines
        json_format: Emit JSON lines on the console too
        use_colors: Color the level column of console output

    Raises:
        ValueError: If ``level`` is not a level name
    """
    numeric_level = logging.getLevelName(str(level).upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level: {level}")

    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(numeric_level)
    root.handlers.clear()

    console = logging.StreamHandler(sys.stdout)
    console.setFormatter(
        JsonLineFormatter() if json_format else ConsoleFormatter(use_colors=use_colors)
    )
    root.addHandler(console)

    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(path, encoding="utf-8")
        file_handler.setFormatter(JsonLineFormatter())
        root.addHandler(file_handler)


def get_logger(
    name: str,
    session_id: Optional[str] = None,
    pattern: Optional[str] = None,
) -> PatternLogger:
    return PatternLogger(name=name, pattern=pattern, session_id=session_id)
