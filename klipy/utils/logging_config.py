"""
Centralized logging configuration with categorized loggers.

This module provides a flexible logging system with:
- Named categories for different subsystems
- Per-category log level control
- Level overrides from the environment (KLIPY_LOG_LEVEL_<CATEGORY>)
"""
import logging
import os
from typing import Dict, Optional
from pathlib import Path
from logging.handlers import TimedRotatingFileHandler


# Logger categories for different subsystems
class LoggerCategory:
    """Named categories for SDK loggers"""
    CORE = "core"                  # Config, context, services
    API = "api"                    # Request pipeline and endpoints
    NETWORK = "network"            # HTTP sessions, user agent, ad parameters
    LAYOUT = "layout"              # Row packing and sizing


# Default log levels for each category
DEFAULT_LOG_LEVELS = {
    LoggerCategory.CORE: logging.INFO,
    LoggerCategory.API: logging.INFO,
    LoggerCategory.NETWORK: logging.INFO,
    LoggerCategory.LAYOUT: logging.WARNING,  # Per-item skip messages are noisy
}


# Map module names to categories
MODULE_TO_CATEGORY = {
    # Core
    'klipy.core': LoggerCategory.CORE,
    'klipy.core.config': LoggerCategory.CORE,
    'klipy.core.context': LoggerCategory.CORE,
    'klipy.core.media_service': LoggerCategory.CORE,

    # API
    'klipy.core.api': LoggerCategory.API,
    'klipy.core.api.base': LoggerCategory.API,

    # Network
    'klipy.core.http_client': LoggerCategory.NETWORK,
    'klipy.core.user_agent': LoggerCategory.NETWORK,
    'klipy.core.ad_parameters': LoggerCategory.NETWORK,

    # Layout
    'klipy.layout': LoggerCategory.LAYOUT,
    'klipy.layout.rows': LoggerCategory.LAYOUT,
}


class LoggingManager:
    """Manages SDK-wide logging configuration"""

    def __init__(self, log_dir: Optional[Path] = None):
        """
        Initialize logging manager.

        Args:
            log_dir: Directory for log files; console only when None
        """
        self.log_dir = log_dir
        self._category_levels: Dict[str, int] = {}
        self._load_levels_from_env()

    def _load_levels_from_env(self):
        """Load log levels from KLIPY_LOG_LEVEL_<CATEGORY> variables"""
        for category, default_level in DEFAULT_LOG_LEVELS.items():
            level_name = os.getenv(f"KLIPY_LOG_LEVEL_{category.upper()}")
            if not level_name:
                self._category_levels[category] = default_level
                continue
            level = logging.getLevelName(level_name.upper())
            if isinstance(level, int):
                self._category_levels[category] = level
            else:
                self._category_levels[category] = default_level

    def get_category_level(self, category: str) -> int:
        """Get log level for a category"""
        return self._category_levels.get(category, logging.INFO)

    def set_category_level(self, category: str, level: int):
        """Set log level for a category"""
        self._category_levels[category] = level
        self._apply_category_level(category, level)

    def _apply_category_level(self, category: str, level: int):
        """Apply level to all loggers in a category"""
        for module_name, cat in MODULE_TO_CATEGORY.items():
            if cat == category:
                logging.getLogger(module_name).setLevel(level)

    def setup_logging(self, root_level: int = logging.INFO):
        """
        Setup logging with categories.

        Args:
            root_level: Root logger level (default: INFO)
        """
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )

        root_logger = logging.getLogger()
        root_logger.setLevel(root_level)

        # Remove existing handlers
        for handler in list(root_logger.handlers):
            root_logger.removeHandler(handler)

        # File handler with rotation
        if self.log_dir is not None:
            self.log_dir.mkdir(parents=True, exist_ok=True)
            file_handler = TimedRotatingFileHandler(
                self.log_dir / "klipy.log",
                when="midnight",
                interval=1,
                backupCount=7,
                encoding="utf-8",
            )
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)

        # Console handler
        stream_handler = logging.StreamHandler()
        stream_handler.setFormatter(formatter)
        root_logger.addHandler(stream_handler)

        # Apply category levels
        for category, level in self._category_levels.items():
            self._apply_category_level(category, level)

        # Silence noisy third-party loggers
        logging.getLogger('aiohttp').setLevel(logging.WARNING)
        logging.getLogger('asyncio').setLevel(logging.WARNING)


# Global instance
_logging_manager: Optional[LoggingManager] = None


def get_logging_manager(log_dir: Optional[Path] = None) -> LoggingManager:
    """Get or create the global logging manager"""
    global _logging_manager
    if _logging_manager is None:
        _logging_manager = LoggingManager(log_dir=log_dir)
    return _logging_manager


def setup_logging(log_dir: Optional[Path] = None, root_level: int = logging.INFO):
    """Setup logging (convenience function)"""
    manager = get_logging_manager(log_dir)
    manager.setup_logging(root_level)
    return manager
