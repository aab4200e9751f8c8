"""
Rich-based logging system
"""
import sys
import logging
from typing import Optional
from pathlib import Path

from rich.logging import RichHandler
from rich.console import Console
from rich.text import Text
from rich.traceback import install as install_traceback

from .constants import COLOR_STYLES
from .interfaces import DeployLogger


# Global console instances
_stdout_console = Console(file=sys.stdout, force_terminal=True)
_stderr_console = Console(file=sys.stderr, force_terminal=True)

# Install rich traceback handler
install_traceback(show_locals=False, width=120)


def setup_logging(
    level: str = "INFO",
    log_file: Optional[Path] = None,
    rich_tracebacks: bool = True,
) -> None:
    """
    Setup Rich logging system.
    
    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional log file path
        rich_tracebacks: Enable rich tracebacks
    """
    log_level = getattr(logging, level.upper(), logging.INFO)
    
    # Configure root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    
    # Remove existing handlers
    root_logger.handlers.clear()
    
    # Create Rich handler for stderr
    rich_handler = RichHandler(
        console=_stderr_console,
        show_time=True,
        show_path=True,
        rich_tracebacks=rich_tracebacks,
        markup=True,
        show_level=True,
    )
    rich_handler.setLevel(log_level)
    root_logger.addHandler(rich_handler)
    
    # Add file handler if specified
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(log_level)
        file_formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )
        file_handler.setFormatter(file_formatter)
        root_logger.addHandler(file_handler)


def get_logger(name: str) -> logging.Logger:
    """
    Get logger instance.
    
    Args:
        name: Logger name (usually __name__)
    
    Returns:
        Logger instance
    """
    return logging.getLogger(name)


def get_stdout_console() -> Console:
    """Get stdout console for user-facing output"""
    return _stdout_console


def get_stderr_console() -> Console:
    """Get stderr console for errors and logs"""
    return _stderr_console


# ============================================================
# Deployment transcript sinks
# ============================================================

class ConsoleLogger(DeployLogger):
    """Transcript printed to a Rich console"""

    def __init__(self, console: Optional[Console] = None, use_colors: bool = True):
        self.console = console or get_stdout_console()
        self.use_colors = use_colors

    def log(self, message: str, color: Optional[str] = None) -> None:
        style = None
        if color and self.use_colors:
            style = COLOR_STYLES.get(color, color)
        self.console.print(Text(message, style=style or ""))


class FileLogger(DeployLogger):
    """Transcript appended to a plain text file, colors are ignored"""

    def __init__(self, path: Path, use_colors: bool = False):
        self.path = Path(path).expanduser()
        self.use_colors = use_colors
        self.path.parent.mkdir(parents=True, exist_ok=True)

    def log(self, message: str, color: Optional[str] = None) -> None:
        with open(self.path, "a", encoding="utf-8") as f:
            f.write(message + "\n")


def create_deploy_logger(log_file: Optional[Path], use_colors: bool) -> DeployLogger:
    """File sink if a log file is configured, console otherwise"""
    if log_file is not None:
        return FileLogger(log_file, use_colors=use_colors)
    return ConsoleLogger(use_colors=use_colors)
