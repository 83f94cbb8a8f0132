"""
Logging for the effects sandbox.

Every module logs under the "vfx" namespace. Console output is on by
default; main.py turns on the file handler with --log-file.

Usage:
    from src.utils.logger import get_logger

    logger = get_logger(__name__)
    logger.info("Glitch applied")
    logger.debug("Explosion: 50 particles")

Configuration:
    Set LOG_LEVEL in config.py (or pass --log-level to main.py):
    - DEBUG: Every burst and particle-count report
    - INFO: Session events such as glitches (default)
    - WARNING: Warnings and errors only
    - ERROR: Errors only
"""

import logging
import sys
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Optional


ROOT_LOGGER_NAME = 'vfx'


class LogLevel(Enum):
    """Levels accepted by --log-level and Config.LOG_LEVEL."""
    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR


# Module-level state
_initialized = False
_file_handler: Optional[logging.FileHandler] = None


class ColoredFormatter(logging.Formatter):
    """Tints the level name on a TTY console."""

    COLORS = {
        'DEBUG': '\033[36m',     # Cyan
        'INFO': '\033[32m',      # Green
        'WARNING': '\033[33m',   # Yellow
        'ERROR': '\033[31m',     # Red
        'CRITICAL': '\033[35m',  # Magenta
        'RESET': '\033[0m',
    }

    def __init__(self, fmt: str, use_colors: bool = True):
        super().__init__(fmt)
        self.use_colors = use_colors and sys.stdout.isatty()

    def format(self, record: logging.LogRecord) -> str:
        if self.use_colors:
            # Work on a copy so file handlers still see the plain level name
            record = logging.makeLogRecord(record.__dict__)
            color = self.COLORS.get(record.levelname, self.COLORS['RESET'])
            record.levelname = f"{color}{record.levelname}{self.COLORS['RESET']}"
        return super().format(record)


def setup_logging(
    log_dir: str = 'logs',
    level: LogLevel = LogLevel.INFO,
    console_output: bool = True,
    file_output: bool = False,
    log_filename: Optional[str] = None,
    force: bool = False,
) -> None:
    """
    Configure the "vfx" logger tree.

    Args:
        log_dir: Directory for log files
        level: Minimum log level to capture
        console_output: Whether to output to console
        file_output: Whether to output to file
        log_filename: Custom log filename (default: vfx_YYYYMMDD_HHMMSS.log)
        force: Reconfigure even if logging was already set up
    """
    global _initialized, _file_handler

    if _initialized and not force:
        return

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level.value)
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()
    _file_handler = None

    if console_output:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level.value)
        console_handler.setFormatter(ColoredFormatter(
            '%(asctime)s | %(levelname)-8s | %(name)s | %(message)s',
            use_colors=True
        ))
        root_logger.addHandler(console_handler)

    if file_output:
        path = Path(log_dir)
        path.mkdir(parents=True, exist_ok=True)
        if log_filename is None:
            timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')
            log_filename = f'vfx_{timestamp}.log'

        _file_handler = logging.FileHandler(path / log_filename, mode='a', encoding='utf-8')
        _file_handler.setLevel(logging.DEBUG)  # Capture everything in file
        _file_handler.setFormatter(logging.Formatter(
            '%(asctime)s | %(levelname)-8s | %(name)s | %(message)s'
        ))
        root_logger.addHandler(_file_handler)

    _initialized = True
    root_logger.debug(f"Logging initialized (level={level.name}, file={file_output})")


def get_logger(name: str) -> logging.Logger:
    """
    Return the namespaced logger for a module.

    Args:
        name: Module name (typically __name__)

    Returns:
        Logger under the project namespace, e.g. 'vfx.effects.particles'
    """
    # Auto-initialize with defaults if not already done
    if not _initialized:
        setup_logging()

    # Strip 'src.' prefix for cleaner names
    if name.startswith('src.'):
        name = name[4:]

    return logging.getLogger(f'{ROOT_LOGGER_NAME}.{name}')


def get_log_path() -> Optional[Path]:
    """Path of the active log file, or None when logging to console only."""
    if _file_handler is not None:
        return Path(_file_handler.baseFilename)
    return None
