"""Utility modules for the effects project."""

from .logger import get_logger, get_log_path, setup_logging, LogLevel

__all__ = ['get_logger', 'get_log_path', 'setup_logging', 'LogLevel']
