"""Logging system with Rich support."""

import logging
import sys

from rich.console import Console
from rich.logging import RichHandler

from superai.core.config.settings import LoggingSettings, get_settings
from superai.core.exceptions.errors import ConfigurationError

_loggers: dict[str, logging.Logger] = {}


def setup_logging(settings: LoggingSettings | None = None, verbose: bool = False) -> None:
    """Setup logging configuration.

    Args:
        settings: Logging settings. Uses global settings if not provided.
        verbose: Force DEBUG level regardless of settings.

    Raises:
        ConfigurationError: If settings are invalid or the log file cannot be opened.
    """
    if settings is None:
        settings = get_settings().logging

    level = logging.DEBUG if verbose else getattr(logging, settings.level)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    handler: RichHandler | logging.StreamHandler
    if settings.use_rich:
        handler = RichHandler(
            console=Console(stderr=True),
            show_path=verbose,
            show_time=verbose,
            rich_tracebacks=True,
            markup=True,
        )
    else:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(settings.format))

    root_logger.addHandler(handler)

    if settings.file:
        try:
            settings.file.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(settings.file, encoding="utf-8")
        except OSError as e:
            raise ConfigurationError(
                f"Cannot open log file: {settings.file}",
                config_key="logging.file",
                details={"error": str(e)},
            ) from e
        file_handler.setLevel(level)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )
        root_logger.addHandler(file_handler)


def get_logger(name: str) -> logging.Logger:
    """Get or create a logger by name.

    Args:
        name: Logger name (typically __name__).

    Returns:
        Configured logger instance.
    """
    if name not in _loggers:
        logger = logging.getLogger(name)
        _loggers[name] = logger

        if not logging.getLogger().handlers:
            try:
                setup_logging()
            except ConfigurationError:
                # Reported by the command that loads the settings.
                setup_logging(LoggingSettings.model_construct())

    return _loggers[name]

