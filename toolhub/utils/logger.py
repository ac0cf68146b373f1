# This file is part of the toolhub project for logging and console management.
# Date: 2026-10-16
# Version: 0.1.0

import json
import logging
from typing import Any, Dict, Optional
from rich.logging import RichHandler
from rich.console import Console
from rich.theme import Theme
from toolhub.core.config import get_settings

# Define a custom logging level for success messages
SUCCESS_LEVEL_NUM = 25

logging.addLevelName(SUCCESS_LEVEL_NUM, "SUCCESS")

def success_log(self, message, *args, **kwargs):
    if self.isEnabledFor(SUCCESS_LEVEL_NUM):
        self._log(SUCCESS_LEVEL_NUM, message, args, **kwargs)

# Register the custom success method to the logging.Logger class
if not hasattr(logging.Logger, 'success'):
    setattr(logging.Logger, 'success', success_log)


def _render_context(context: Optional[Dict[str, Any]]) -> str:
    """Renders a context mapping as a compact JSON suffix for a log line."""
    if not context:
        return ""
    try:
        return " " + json.dumps(context, default=str, ensure_ascii=False)
    except (TypeError, ValueError):
        return f" {context!r}"


class ConsoleManager:
    """
    A singleton class that manages the console output for toolhub.
    It uses Rich for readable logging output. Every method is fire-and-forget:
    a failing handler is reported by the logging module itself and never
    raises into the caller.
    """
    def __init__(self, logger_name: str = "toolhub"):
        custom_theme = Theme({
            "logging.level.success": "bold green"
        })
        self._console = Console(theme=custom_theme, stderr=True)
        self._logger = self._setup_logger(logger_name)

    def _setup_logger(self, logger_name: str) -> logging.Logger:
        logger = logging.getLogger(logger_name)
        if logger.handlers:
            # If logger is already configured, don't add handlers again
            return logger

        logger.setLevel(get_settings().LOG_LEVEL.upper())
        handler = RichHandler(
            console=self._console,
            rich_tracebacks=True,
            tracebacks_show_locals=False,
            keywords=["INFO", "SUCCESS", "WARNING", "ERROR", "DEBUG", "CRITICAL"],
            show_path=False
        )
        handler.setFormatter(logging.Formatter(fmt="%(message)s", datefmt="[%X]"))
        logger.addHandler(handler)
        return logger

    def info(self, message: str, context: Optional[Dict[str, Any]] = None):
        self._logger.info(message + _render_context(context))

    def success(self, message: str):
        # The custom level name is already "SUCCESS", no need to add a prefix
        self._logger.success(message)

    def error(self, message: str, cause: Any = None):
        """
        Logs an error. An exception cause is logged with its traceback,
        anything else is appended to the message as context.
        """
        if isinstance(cause, BaseException):
            self._logger.error(f"{message}: {cause}", exc_info=(type(cause), cause, cause.__traceback__))
        elif isinstance(cause, dict):
            self._logger.error(message + _render_context(cause))
        elif cause is not None:
            self._logger.error(f"{message}: {cause}")
        else:
            self._logger.error(message)

    def rule(self, title: str, style: str = "cyan"):
        self._console.rule(f"[bold {style}]{title}[/bold {style}]", style=style)

# Create a singleton instance for global use
console = ConsoleManager()
