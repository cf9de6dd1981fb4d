"""
Logging Configuration and Progress Reporting

Configurable logging levels, optional rotating log file output, and a
lightweight progress indicator for batch runs.
"""

import logging
import logging.handlers
import sys
import time
from contextlib import contextmanager
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional


SECRET_KEY_MARKERS = ("api_key", "password", "secret", "token")


class LogLevel(Enum):
    """Supported logging levels."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class ProgressIndicator:
    """
    Single-line batch progress on stderr.

    The line is redrawn in place so it never mixes with CSV or JSON written
    to stdout. Redraws are throttled to one every ``REDRAW_INTERVAL`` seconds.
    """

    REDRAW_INTERVAL = 0.5
    BAR_WIDTH = 20

    def __init__(self, description: str, total_steps: Optional[int] = None, stream=None):
        self.description = description
        self.total_steps = total_steps
        self.current_step = 0
        self.start_time = time.time()
        self.stream = stream or sys.stderr
        self._last_draw = 0.0

    @property
    def elapsed(self) -> float:
        return time.time() - self.start_time

    def update(self, step: Optional[int] = None, message: Optional[str] = None):
        """Advance to ``step`` (or by one) and redraw, labelled with ``message``."""
        self.current_step = self.current_step + 1 if step is None else step

        now = time.time()
        if now - self._last_draw < self.REDRAW_INTERVAL:
            return
        self._last_draw = now

        label = message or self.description
        self.stream.write(f"\r{label} {self._status()} [{self.elapsed:.1f}s]")
        self.stream.flush()

    def finish(self, message: Optional[str] = None):
        """Terminate the progress line."""
        final_message = message or f"{self.description} completed"
        self.stream.write(f"\r{final_message} [OK] [{self.elapsed:.1f}s]\n")
        self.stream.flush()

    def _status(self) -> str:
        if not self.total_steps:
            return f"{self.current_step} done"
        percentage = min(self.current_step / self.total_steps, 1.0) * 100
        return (
            f"{self._create_progress_bar(percentage)} {percentage:.0f}% "
            f"({self.current_step}/{self.total_steps})"
        )

    def _create_progress_bar(self, percentage: float, width: Optional[int] = None) -> str:
        width = width or self.BAR_WIDTH
        filled = round(width * percentage / 100)
        return f"[{'#' * filled}{'.' * (width - filled)}]"


class LoggingConfig:
    """
    Centralized logging configuration.

    Provides configurable logging levels, optional file output with
    rotation, and progress reporting helpers.
    """

    def __init__(self):
        self._configured = False
        self._log_file_handler: Optional[logging.Handler] = None
        self._console_handler: Optional[logging.Handler] = None

    def configure_logging(
        self,
        level: str = "info",
        log_file: Optional[str] = None,
        include_timestamps: bool = True,
        max_log_file_size: int = 10 * 1024 * 1024,  # 10MB
        backup_count: int = 5,
        force: bool = False,
    ) -> None:
        """
        Configure logging for the application.

        Args:
            level: Logging level (debug, info, warning, error)
            log_file: Optional log file path
            include_timestamps: Whether to include timestamps in console output
            max_log_file_size: Maximum log file size before rotation
            backup_count: Number of rotated log files to keep
            force: Reconfigure even if logging was already set up
        """
        if self._configured and not force:
            return

        log_level = self.get_log_level(level)

        root_logger = logging.getLogger()
        root_logger.setLevel(log_level)
        root_logger.handlers.clear()

        debug_mode = log_level == logging.DEBUG
        self._console_handler = logging.StreamHandler(sys.stderr)
        self._console_handler.setLevel(log_level)
        self._console_handler.setFormatter(
            self._create_console_formatter(include_timestamps, debug_mode)
        )
        root_logger.addHandler(self._console_handler)

        if log_file:
            self._configure_file_logging(log_file, log_level, max_log_file_size, backup_count)

        self._configured = True
        logging.getLogger(__name__).debug(f"Logging configured: level={level}, file={log_file}")

    @staticmethod
    def get_log_level(level_str: str) -> int:
        """Convert string log level to logging constant."""
        level_map = {
            "debug": logging.DEBUG,
            "info": logging.INFO,
            "warning": logging.WARNING,
            "error": logging.ERROR,
        }
        return level_map.get((level_str or "").lower(), logging.INFO)

    def _create_console_formatter(self, include_timestamps: bool, debug_mode: bool) -> logging.Formatter:
        parts = []
        if include_timestamps:
            parts.append("%(asctime)s")
        if debug_mode:
            parts.append("%(name)s")
        parts.extend(["%(levelname)s", "%(message)s"])

        return logging.Formatter(
            " - ".join(parts),
            datefmt="%Y-%m-%d %H:%M:%S" if debug_mode else "%H:%M:%S",
        )

    def _configure_file_logging(
        self,
        log_file: str,
        log_level: int,
        max_size: int,
        backup_count: int,
    ) -> None:
        """Configure file logging with rotation."""
        try:
            Path(log_file).parent.mkdir(parents=True, exist_ok=True)
            self._log_file_handler = logging.handlers.RotatingFileHandler(
                log_file,
                maxBytes=max_size,
                backupCount=backup_count,
                encoding="utf-8",
            )
        except OSError as e:
            # Log file setup failed, continue with console only
            logging.getLogger(__name__).warning(f"Failed to setup log file {log_file}: {e}")
            return

        self._log_file_handler.setLevel(log_level)
        self._log_file_handler.setFormatter(logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        ))
        logging.getLogger().addHandler(self._log_file_handler)

    @contextmanager
    def progress_context(self, description: str, total_steps: Optional[int] = None):
        """
        Context manager for progress indication.

        Usage:
            with logging_config.progress_context("Processing images", 10) as progress:
                for i in range(10):
                    progress.update(message=f"Processing image {i+1}")
        """
        progress = ProgressIndicator(description, total_steps)
        try:
            yield progress
        except Exception as e:
            progress.finish(f"{description} failed: {e}")
            raise
        else:
            progress.finish()

    def log_configuration_details(self, config: Dict[str, Any], prefix: str = "") -> None:
        """Log effective settings at debug level, one line per leaf value.

        Nested sections are flattened to dotted keys; values whose key looks
        like a credential are masked.
        """
        logger = logging.getLogger(__name__)
        if not logger.isEnabledFor(logging.DEBUG):
            return

        for key, value in config.items():
            dotted = f"{prefix}{key}"
            if isinstance(value, dict):
                self.log_configuration_details(value, prefix=f"{dotted}.")
                continue
            if any(marker in key.lower() for marker in SECRET_KEY_MARKERS) and value:
                value = "***MASKED***"
            logger.debug(f"config {dotted} = {value!r}")


# Global logging configuration instance
logging_config = LoggingConfig()


def configure_logging(level: str = "info", log_file: Optional[str] = None, force: bool = False) -> None:
    """Convenience wrapper around the global LoggingConfig."""
    logging_config.configure_logging(level=level, log_file=log_file, force=force)


def get_progress_context(description: str, total_steps: Optional[int] = None):
    """Convenience wrapper returning a progress context manager."""
    return logging_config.progress_context(description, total_steps)
