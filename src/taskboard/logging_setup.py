# src/taskboard/logging_setup.py

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOG_FILE_NAME = "taskboard.log"

# Minimum console level per taskboard logger; unlisted taskboard.* loggers pass through.
_CONSOLE_THRESHOLDS: dict[str, int] = {
    # facade failures already come back to the user as the command reply
    "taskboard.tasks.task_api": logging.WARNING,
    # per-mutation debug lines would redraw under the board on every command
    "taskboard.tasks.task_registry": logging.WARNING,
    # save/load outcomes are printed by /save and /load themselves
    "taskboard.tasks.task_store": logging.WARNING,
    # the REPL prints to stdout; only its crash reports belong on stderr
    "taskboard.connectors.console_connector": logging.ERROR,
}


class _ConsoleNoiseFilter(logging.Filter):
    """Keep stderr quiet while the board is on screen; the file handler gets everything."""

    def filter(self, record: logging.LogRecord) -> bool:
        name = record.name

        if name == "taskboard" or name.startswith("taskboard."):
            return record.levelno >= _CONSOLE_THRESHOLDS.get(name, logging.NOTSET)

        # third-party loggers and py.warnings
        return record.levelno >= logging.ERROR


def resolve_level(level: int | str, default: int = logging.INFO) -> int:
    """`TASKBOARD_LOG_LEVEL` accepts names ("debug") or numbers ("10"); junk -> default."""
    if isinstance(level, int):
        return level
    text = str(level).strip().upper()
    if text.isdigit():
        return int(text)
    value = logging.getLevelName(text)
    return value if isinstance(value, int) else default


def setup_logging(
    *,
    log_dir: str | Path = ".local/taskboard",
    console_level: int | str = logging.INFO,
    file_level: int | str = logging.DEBUG,
) -> Path:
    """
    Route logs to two places:
    - stderr, filtered per module, so the board on stdout stays readable
    - <log_dir>/taskboard.log with every record (mutations, saves, loads)

    Call once from main() before the first log line. Returns the log file path.
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / LOG_FILE_NAME

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    # re-running (tests, repeated main()) must not stack handlers
    for h in list(root.handlers):
        root.removeHandler(h)
        h.close()

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(resolve_level(console_level))
    console.setFormatter(fmt)
    console.addFilter(_ConsoleNoiseFilter())
    root.addHandler(console)

    to_file = logging.FileHandler(str(log_file), encoding="utf-8")
    to_file.setLevel(resolve_level(file_level, logging.DEBUG))
    to_file.setFormatter(fmt)
    root.addHandler(to_file)

    logging.captureWarnings(True)
    logging.getLogger(__name__).debug("Logging ready (file=%s).", log_file)
    return log_file
