"""
Configuration adapters
"""
from .loader import ConfigLoader
from .hooks import resolve_hook, resolve_hooks
from .section_parser import parse_config, parse_section, parse_sections

__all__ = [
    "ConfigLoader",
    "resolve_hook",
    "resolve_hooks",
    "parse_config",
    "parse_section",
    "parse_sections",
]
