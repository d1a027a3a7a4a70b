"""
Centralized logging configuration for the Plagiarism Tracer.

Library code only obtains loggers; handlers are installed once by the
entry points (Streamlit page, command line) through ``setup_logging``.
"""

import json
import logging
import logging.handlers
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

# Attributes passed through ``extra=`` that end up in the JSON record
EXTRA_FIELDS = (
    'operation',
    'duration',
    'window_size',
    'effective_window_size',
    'source_words',
    'suspect_words',
    'percentage',
)


class StructuredFormatter(logging.Formatter):
    """Custom formatter for structured JSON logging."""

    def format(self, record):
        log_entry = {
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'module': record.module,
            'function': record.funcName,
            'line': record.lineno,
        }

        if record.exc_info:
            log_entry['exception'] = self.formatException(record.exc_info)

        for name in EXTRA_FIELDS:
            if hasattr(record, name):
                log_entry[name] = getattr(record, name)

        return json.dumps(log_entry, ensure_ascii=False, separators=(',', ':'))


class ProductionLogger:
    """Root logger configuration shared by the UI and the command line."""

    def __init__(self,
                 log_level: str = "INFO",
                 log_dir: str = "logs",
                 max_file_size: int = 10 * 1024 * 1024,  # 10MB
                 backup_count: int = 5,
                 enable_console: bool = True,
                 enable_file: bool = False,
                 structured_logging: bool = True,
                 stream=None):
        """
        Initialize production logger.

        Args:
            log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            log_dir: Directory for log files
            max_file_size: Maximum size of each log file in bytes
            backup_count: Number of backup files to keep
            enable_console: Whether to log to the console
            enable_file: Whether to log to rotating files
            structured_logging: Whether to use structured JSON logging
            stream: Console stream (default: stderr)
        """
        self.log_level = getattr(logging, log_level.upper())
        self.log_dir = Path(log_dir)
        self.max_file_size = max_file_size
        self.backup_count = backup_count
        self.enable_console = enable_console
        self.enable_file = enable_file
        self.structured_logging = structured_logging
        self.stream = stream or sys.stderr

        if self.enable_file:
            self.log_dir.mkdir(parents=True, exist_ok=True)

        self._setup_logging()

    def _setup_logging(self):
        """Install handlers on the root logger, replacing existing ones."""
        root_logger = logging.getLogger()
        for handler in root_logger.handlers[:]:
            root_logger.removeHandler(handler)

        root_logger.setLevel(self.log_level)

        if self.structured_logging:
            formatter = StructuredFormatter()
        else:
            formatter = logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(module)s:%(funcName)s:%(lineno)d - %(message)s'
            )

        if self.enable_console:
            console_handler = logging.StreamHandler(self.stream)
            console_handler.setLevel(self.log_level)
            console_handler.setFormatter(formatter)
            root_logger.addHandler(console_handler)

        if self.enable_file:
            app_handler = logging.handlers.RotatingFileHandler(
                self.log_dir / "app.log",
                maxBytes=self.max_file_size,
                backupCount=self.backup_count,
                encoding='utf-8'
            )
            app_handler.setLevel(self.log_level)
            app_handler.setFormatter(formatter)
            root_logger.addHandler(app_handler)

            # WARNING and above
            error_handler = logging.handlers.RotatingFileHandler(
                self.log_dir / "errors.log",
                maxBytes=self.max_file_size,
                backupCount=self.backup_count,
                encoding='utf-8'
            )
            error_handler.setLevel(logging.WARNING)
            error_handler.setFormatter(formatter)
            root_logger.addHandler(error_handler)

    def get_logger(self, name: str) -> logging.Logger:
        return logging.getLogger(name)


class LoggerMixin:
    """Mixin class to add logging capabilities to any class."""

    @property
    def logger(self) -> logging.Logger:
        """Get logger instance for this class."""
        if not hasattr(self, '_logger'):
            self._logger = logging.getLogger(f"{self.__class__.__module__}.{self.__class__.__name__}")
        return self._logger

    def log_operation(self, operation: str, **kwargs):
        """Log an operation with additional context."""
        extra = {'operation': operation}
        extra.update(kwargs)
        return OperationLogger(self.logger, extra)


class OperationLogger:
    """Context manager for logging operations with timing."""

    def __init__(self, logger: logging.Logger, extra: dict):
        self.logger = logger
        self.extra = extra
        self.start_time = None

    def __enter__(self):
        self.start_time = datetime.now(timezone.utc)
        self.logger.debug(f"Starting operation: {self.extra.get('operation', 'unknown')}", extra=self.extra)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        duration = (datetime.now(timezone.utc) - self.start_time).total_seconds()
        self.extra['duration'] = duration

        if exc_type is None:
            self.logger.info(f"Completed operation: {self.extra.get('operation', 'unknown')}", extra=self.extra)
        else:
            self.logger.warning(f"Failed operation: {self.extra.get('operation', 'unknown')}: {exc_val}",
                                extra=self.extra)


# Global logger instance
_production_logger: Optional[ProductionLogger] = None


def setup_logging(log_level: str = "INFO",
                  log_dir: str = "logs",
                  structured_logging: bool = True,
                  **kwargs) -> ProductionLogger:
    """
    Setup global logging configuration.

    Args:
        log_level: Logging level
        log_dir: Directory for log files
        structured_logging: Whether to use structured JSON logging
        **kwargs: Additional arguments for ProductionLogger

    Returns:
        ProductionLogger instance
    """
    global _production_logger
    _production_logger = ProductionLogger(
        log_level=log_level,
        log_dir=log_dir,
        structured_logging=structured_logging,
        **kwargs
    )
    return _production_logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance, configuring logging with defaults on first use.
    """
    if _production_logger is None:
        setup_logging()
    return _production_logger.get_logger(name)
