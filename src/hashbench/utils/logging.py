"""
Logging Configuration

Centralized logging setup with configurable levels and file rotation
for the hash benchmarking harness.
"""

import logging
import logging.handlers
import sys
from pathlib import Path
from datetime import datetime

from hashbench.core.config import get_config


class BenchmarkLoggerAdapter(logging.LoggerAdapter):
    """Logger adapter that adds benchmark context to log records and messages."""

    def process(self, msg: str, kwargs: dict) -> tuple:
        """Add extra context to log record and prefix the message with it."""
        extra = kwargs.get('extra', {})
        extra.update(self.extra)
        kwargs['extra'] = extra

        context = self.extra['algorithm']
        if 'run_count' in self.extra:
            context = f"{context} x{self.extra['run_count']}"
        return f"[{context}] {msg}", kwargs


def setup_logging(config=None) -> None:
    """
    Set up logging configuration for the application.

    Console output goes to stderr so that anything the CLI prints on
    stdout is left untouched.

    Args:
        config: Optional configuration object (uses default if None)
    """
    if config is None:
        config = get_config()

    # Ensure logs directory exists
    log_file = Path(config.logging.file)
    log_file.parent.mkdir(parents=True, exist_ok=True)

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, config.logging.level.upper()))

    # Clear any existing handlers
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(getattr(logging, config.logging.console_level.upper()))

    file_handler = logging.handlers.RotatingFileHandler(
        filename=log_file,
        maxBytes=_parse_size(config.logging.max_size),
        backupCount=config.logging.backup_count,
        encoding='utf-8'
    )
    file_handler.setLevel(getattr(logging, config.logging.level.upper()))

    console_handler.setFormatter(logging.Formatter(config.logging.format))
    file_handler.setFormatter(logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(module)s:%(funcName)s:%(lineno)d - %(message)s'
    ))

    root_logger.addHandler(console_handler)
    root_logger.addHandler(file_handler)

    logger = logging.getLogger(__name__)
    logger.info(f"Logging configured - Console: {config.logging.console_level}, File: {config.logging.level}, Path: {log_file}")


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for the given name.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured logger instance
    """
    return logging.getLogger(name)


def get_benchmark_logger(algorithm: str, run_count: int = None) -> BenchmarkLoggerAdapter:
    """
    Get a logger adapter with benchmark context.

    Args:
        algorithm: Algorithm name for context
        run_count: Optional run count for context

    Returns:
        Logger adapter with benchmark context
    """
    logger = get_logger('hashbench.benchmark')
    extra = {'algorithm': algorithm}

    if run_count is not None:
        extra['run_count'] = run_count

    return BenchmarkLoggerAdapter(logger, extra)


def _parse_size(size_str: str) -> int:
    """
    Parse size string (e.g., '10MB') to bytes.

    Args:
        size_str: Size string like '10MB', '1GB', etc.

    Returns:
        Size in bytes
    """
    size_str = size_str.upper().strip()

    # Longest suffixes first so 'MB' is not read as 'B'
    multipliers = {
        'GB': 1024 ** 3,
        'MB': 1024 ** 2,
        'KB': 1024,
        'B': 1,
    }

    for unit, multiplier in multipliers.items():
        if size_str.endswith(unit):
            number_str = size_str[:-len(unit)].strip()
            try:
                number = float(number_str)
                return int(number * multiplier)
            except ValueError:
                break

    # Default to 10MB if parsing fails
    return 10 * 1024 * 1024


class PerformanceTimer:
    """Context manager for timing operations."""

    def __init__(self, operation: str, logger: logging.Logger = None):
        """
        Initialize performance timer.

        Args:
            operation: Description of the operation being timed
            logger: Logger instance to use
        """
        self.operation = operation
        self.logger = logger or get_logger(__name__)
        self.start_time = None
        self.duration = None

    def __enter__(self):
        """Start timing."""
        self.start_time = datetime.now()
        self.logger.debug(f"Started {self.operation}")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """End timing and log duration."""
        self.duration = (datetime.now() - self.start_time).total_seconds()

        if exc_type is None:
            self.logger.info(f"Completed {self.operation} in {self.duration:.3f}s")
        else:
            self.logger.error(f"Failed {self.operation} after {self.duration:.3f}s: {exc_val}")
