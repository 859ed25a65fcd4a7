"""
Logging Utilities
=================
Centralized logging configuration and utilities.
"""
import os
import logging
from logging.handlers import RotatingFileHandler
from typing import Optional
from interleave.config import config


class AppLogger:
    """Application logger with multiple handlers."""

    def __init__(self, log_dir: str = None):
        self.log_dir = log_dir or config.paths.log_folder
        if config.logging.log_to_file:
            os.makedirs(self.log_dir, exist_ok=True)

        # Create loggers
        self.app_logger = self._setup_logger('interleave.app', 'app.log')
        self.api_logger = self._setup_logger('interleave.api', 'api.log')
        self.db_logger = self._setup_logger('interleave.database', 'database.log')
        self.llm_logger = self._setup_logger('interleave.llm', 'llm.log')

    def _setup_logger(self, name: str, filename: str) -> logging.Logger:
        """Set up a logger with file and console handlers."""
        logger = logging.getLogger(name)
        logger.setLevel(logging.DEBUG if config.logging.verbose_debug else logging.INFO)

        # Prevent duplicate handlers
        if logger.handlers:
            return logger

        if config.logging.log_to_file:
            file_path = os.path.join(self.log_dir, filename)
            file_handler = RotatingFileHandler(
                file_path,
                maxBytes=config.logging.log_file_max_bytes,
                backupCount=config.logging.log_file_backup_count,
                encoding='utf-8'
            )
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            ))
            logger.addHandler(file_handler)

        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.DEBUG if config.logging.verbose_debug else logging.INFO)
        console_handler.setFormatter(logging.Formatter(
            '%(asctime)s - %(levelname)s - %(message)s',
            datefmt='%H:%M:%S'
        ))
        logger.addHandler(console_handler)

        return logger


# Global logger instance
_logger_instance: Optional[AppLogger] = None


def get_logger() -> AppLogger:
    """Get or create the global logger instance."""
    global _logger_instance
    if _logger_instance is None:
        _logger_instance = AppLogger()
    return _logger_instance
