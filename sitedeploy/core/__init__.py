"""
Core infrastructure layer
"""
from .constants import *
from .exceptions import *
from .logging import (
    setup_logging,
    get_logger,
    get_stdout_console,
    get_stderr_console,
    ConsoleLogger,
    FileLogger,
    create_deploy_logger,
)
from .interfaces import DeployLogger, Server
from .telemetry import Telemetry, get_telemetry

__all__ = [
    "setup_logging",
    "get_logger",
    "get_stdout_console",
    "get_stderr_console",
    "ConsoleLogger",
    "FileLogger",
    "create_deploy_logger",
    "DeployLogger",
    "Server",
    "Telemetry",
    "get_telemetry",
]
