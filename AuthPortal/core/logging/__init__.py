"""
Logging setup for AuthPortal.

Every module obtains its logger through ``get_logger(__name__)``; the
application configures handlers once at start-up.

Usage:
    from AuthPortal.core.logging import get_logger

    logger = get_logger(__name__)
    logger.info("Login submitted for %s", username)

Configuration:
    from AuthPortal.core.logging import configure_logging, LogConfig

    configure_logging(LogConfig(level="DEBUG", file_output=False))
"""

import logging
import logging.handlers
import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional


@dataclass
class LogConfig:
    """
    Configuration for the logging system.

    Attributes:
        level: Minimum log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_dir: Directory for log files
        console_output: Whether to output to console
        file_output: Whether to output to a rotating file
        max_bytes: Maximum size of log file before rotation (bytes)
        backup_count: Number of backup files to keep
        format_string: Custom format string for log messages
        date_format: Custom date format string
        component_levels: Dict mapping logger names to log levels
    """
    level: str = "INFO"
    log_dir: str = "./logs"
    console_output: bool = True
    file_output: bool = False
    max_bytes: int = 5 * 1024 * 1024  # 5MB
    backup_count: int = 3
    format_string: Optional[str] = None
    date_format: str = "%Y-%m-%d %H:%M:%S"
    component_levels: Dict[str, str] = field(default_factory=dict)


class ColoredFormatter(logging.Formatter):
    """Formatter that colours the level name on console output."""

    COLORS = {
        'DEBUG': '\033[36m',
        'INFO': '\033[32m',
        'WARNING': '\033[33m',
        'ERROR': '\033[31m',
        'CRITICAL': '\033[35m',
    }
    RESET = '\033[0m'

    def __init__(self, fmt: str, datefmt: str = None, use_colors: bool = True):
        super().__init__(fmt, datefmt)
        self.use_colors = use_colors and sys.platform != 'win32'

    def format(self, record: logging.LogRecord) -> str:
        if not self.use_colors or record.levelname not in self.COLORS:
            return super().format(record)
        original = record.levelname
        record.levelname = f"{self.COLORS[original]}{original}{self.RESET}"
        try:
            return super().format(record)
        finally:
            record.levelname = original


DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DETAILED_FORMAT = (
    "%(asctime)s - %(name)s - %(levelname)s - "
    "[%(filename)s:%(lineno)d - %(funcName)s] - %(message)s"
)


class LoggingManager:
    """
    Process-wide owner of the root logger's handlers.

    Re-configuring replaces the handlers installed by a previous call.
    """

    _instance: Optional['LoggingManager'] = None
    _initialized: bool = False

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if self._initialized:
            return
        self._config: Optional[LogConfig] = None
        self._handlers: List[logging.Handler] = []
        self._initialized = True

    @property
    def config(self) -> Optional[LogConfig]:
        return self._config

    def configure(self, config: LogConfig) -> None:
        """
        Configure the logging system.

        Args:
            config: Logging configuration
        """
        self._config = config
        level = getattr(logging, config.level.upper())

        root_logger = logging.getLogger()
        root_logger.setLevel(level)
        for handler in self._handlers:
            root_logger.removeHandler(handler)
        self._handlers = []

        if config.console_output:
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setFormatter(
                ColoredFormatter(config.format_string or DEFAULT_FORMAT, config.date_format)
            )
            self._install(console_handler, level)

        if config.file_output:
            Path(config.log_dir).mkdir(parents=True, exist_ok=True)
            file_handler = logging.handlers.RotatingFileHandler(
                os.path.join(config.log_dir, "authportal.log"),
                maxBytes=config.max_bytes,
                backupCount=config.backup_count,
                encoding='utf-8'
            )
            file_handler.setFormatter(
                logging.Formatter(config.format_string or DETAILED_FORMAT, config.date_format)
            )
            self._install(file_handler, level)

        for component, component_level in config.component_levels.items():
            logging.getLogger(component).setLevel(getattr(logging, component_level.upper()))

        logging.getLogger(__name__).debug("Logging configured with level: %s", config.level)

    def _install(self, handler: logging.Handler, level: int) -> None:
        handler.setLevel(level)
        logging.getLogger().addHandler(handler)
        self._handlers.append(handler)

    def get_logger(self, name: str) -> logging.Logger:
        return logging.getLogger(name)


# Global logging manager instance
_logging_manager = LoggingManager()


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    return _logging_manager.get_logger(name)


def configure_logging(config: LogConfig) -> None:
    """Configure the logging system."""
    _logging_manager.configure(config)


def get_logging_manager() -> LoggingManager:
    """Get the global logging manager instance."""
    return _logging_manager


def create_development_config() -> LogConfig:
    return LogConfig(
        level="DEBUG",
        log_dir="./logs/dev",
        file_output=True,
        format_string=DETAILED_FORMAT,
        component_levels={"aiohttp": "WARNING"},
    )


def create_production_config() -> LogConfig:
    return LogConfig(
        level="INFO",
        log_dir="./logs/prod",
        console_output=False,
        file_output=True,
        max_bytes=20 * 1024 * 1024,
        backup_count=10,
        format_string=DETAILED_FORMAT,
        component_levels={"aiohttp": "ERROR"},
    )


def create_testing_config() -> LogConfig:
    return LogConfig(
        level="DEBUG",
        file_output=False,
        format_string="%(levelname)s - %(name)s - %(message)s",
        component_levels={"aiohttp": "ERROR"},
    )


def auto_configure(env: Optional[str] = None) -> LogConfig:
    """
    Configure logging for a named environment.

    Args:
        env: development, production or testing. Read from
             ``AUTHPORTAL_ENV`` when omitted.

    Returns:
        The configuration that was applied
    """
    if env is None:
        env = os.environ.get("AUTHPORTAL_ENV", "development")
    env = env.lower()

    factories = {
        "development": create_development_config,
        "dev": create_development_config,
        "production": create_production_config,
        "prod": create_production_config,
        "testing": create_testing_config,
        "test": create_testing_config,
    }
    config = factories.get(env, create_development_config)()
    configure_logging(config)
    get_logger(__name__).info("Logging auto-configured for environment: %s", env)
    return config


__all__ = [
    'LogConfig',
    'LoggingManager',
    'ColoredFormatter',
    'DEFAULT_FORMAT',
    'DETAILED_FORMAT',
    'get_logger',
    'configure_logging',
    'get_logging_manager',
    'create_development_config',
    'create_production_config',
    'create_testing_config',
    'auto_configure',
]
