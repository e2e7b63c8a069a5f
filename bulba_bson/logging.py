"""
Logging configuration for Bulba BSON.

Records about a document carry ``document`` (its filename) and, for format
errors, ``line``. Handlers installed here fold both into ``%(location)s``,
so a failure reads as ``settings.bson:12`` in console and file output.
"""

import logging
import logging.handlers
import sys
from collections.abc import MutableMapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any


class Colors:
    """ANSI color codes."""

    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    CYAN = "\033[36m"

    BRIGHT_RED = "\033[91m"


LEVEL_COLORS = {
    logging.DEBUG: Colors.DIM + Colors.CYAN,
    logging.INFO: Colors.GREEN,
    logging.WARNING: Colors.YELLOW,
    logging.ERROR: Colors.RED,
    logging.CRITICAL: Colors.BOLD + Colors.BRIGHT_RED,
}

ROOT_LOGGER = "bulba_bson"

DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s %(location)s: %(message)s"

NO_LOCATION = "-"


class DocumentFilter(logging.Filter):
    """Set ``record.location`` from the record's document and line."""

    def filter(self, record: logging.LogRecord) -> bool:
        document = getattr(record, "document", None)
        line = getattr(record, "line", None)

        if document and line:
            record.location = f"{document}:{line}"
        elif document:
            record.location = document
        else:
            record.location = NO_LOCATION
        return True


class DocumentAdapter(logging.LoggerAdapter):
    """
    Logger bound to one document.

    Per-call ``extra`` is merged over the bound document, so
    ``log.warning(text, extra={"line": 3})`` keeps the filename.
    """

    def __init__(self, logger: logging.Logger, document: str):
        super().__init__(logger, {"document": document})

    def process(self, msg: Any, kwargs: MutableMapping[str, Any]) -> tuple[Any, MutableMapping[str, Any]]:
        kwargs["extra"] = {**self.extra, **kwargs.get("extra", {})}
        return msg, kwargs


class ColoredFormatter(logging.Formatter):
    """Formatter that colors the whole line by log level."""

    def __init__(
        self,
        fmt: str | None = None,
        datefmt: str | None = None,
        use_colors: bool = True,
    ):
        super().__init__(fmt, datefmt)
        self.use_colors = use_colors

    def format(self, record: logging.LogRecord) -> str:
        result = super().format(record)
        color = LEVEL_COLORS.get(record.levelno, "")
        if not (self.use_colors and color):
            return result
        return f"{color}{result}{Colors.RESET}"


@dataclass
class LogConfig:
    """Logging configuration."""

    # Console settings
    console_level: str = "WARNING"
    console_colors: bool = True

    # File settings, disabled while file_path is None
    file_path: str | None = None
    file_level: str = "DEBUG"
    file_max_bytes: int = 1024 * 1024  # 1 MB
    file_backup_count: int = 3

    format: str = DEFAULT_FORMAT
    date_format: str = "%Y-%m-%d %H:%M:%S"


def get_log_level(level_str: str) -> int:
    """Convert a level name such as ``"debug"`` or ``"WARN"`` to its number, INFO if unknown."""
    level = logging.getLevelName(level_str.upper())
    if isinstance(level, int):
        return level
    return logging.INFO


def setup_logging(config: LogConfig | None = None) -> None:
    """
    Configure logging for the application.

    Args:
        config: Logging configuration (uses defaults if None)
    """
    if config is None:
        config = LogConfig()

    root_logger = logging.getLogger(ROOT_LOGGER)
    root_logger.setLevel(logging.DEBUG)  # Capture all, filter at handlers
    for handler in list(root_logger.handlers):
        handler.close()
    root_logger.handlers.clear()

    # Logs go to stderr so rendered documents on stdout stay clean
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(get_log_level(config.console_level))
    console_handler.addFilter(DocumentFilter())

    use_colors = config.console_colors and hasattr(sys.stderr, "isatty") and sys.stderr.isatty()
    console_handler.setFormatter(
        ColoredFormatter(
            fmt=config.format,
            datefmt=config.date_format,
            use_colors=use_colors,
        )
    )
    root_logger.addHandler(console_handler)

    if config.file_path:
        log_path = Path(config.file_path)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            log_path,
            maxBytes=config.file_max_bytes,
            backupCount=config.file_backup_count,
            encoding="utf-8",
        )
        file_handler.setLevel(get_log_level(config.file_level))
        file_handler.addFilter(DocumentFilter())
        file_handler.setFormatter(logging.Formatter(fmt=config.format, datefmt=config.date_format))
        root_logger.addHandler(file_handler)


def setup_logging_from_args(
    verbose: bool = False,
    debug: bool = False,
    quiet: bool = False,
    no_color: bool = False,
    log_file: str | None = None,
) -> LogConfig:
    """
    Setup logging from command-line arguments.

    Args:
        verbose: Enable INFO level logging
        debug: Enable DEBUG level logging
        quiet: Only log errors
        no_color: Disable ANSI colors
        log_file: Optional log file path

    Returns:
        The applied configuration
    """
    config = LogConfig(file_path=log_file or None)

    if debug:
        config.console_level = "DEBUG"
    elif verbose:
        config.console_level = "INFO"
    elif quiet:
        config.console_level = "ERROR"

    if no_color:
        config.console_colors = False

    setup_logging(config)
    return config


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for a component.

    Args:
        name: Component name (will be prefixed with bulba_bson)

    Returns:
        Logger instance
    """
    if name.startswith(ROOT_LOGGER):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")
