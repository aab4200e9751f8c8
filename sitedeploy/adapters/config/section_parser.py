"""
Deployment configuration parser
"""
from pathlib import Path
from typing import Dict, Any, List, Optional, Tuple

from ...core.constants import MODE_DEPLOY, RUN_MODES
from ...core.exceptions import ConfigError
from ...core.utils import parse_permissions, resolve_local_path
from ...domain.deploy.models import Config, Section
from .hooks import resolve_hooks


SECTION_KEYS = {
    "remote",
    "local",
    "passive_mode",
    "file_permissions",
    "dir_permissions",
    "preprocess",
    "preprocess_masks",
    "ignore",
    "deploy_file",
    "allow_delete",
    "purge",
    "test_mode",
    "before",
    "after",
}


def _string_list(value: Any, key: str) -> Tuple[str, ...]:
    """Accept a list of strings or a single newline/space separated string"""
    if value is None:
        return ()
    if isinstance(value, str):
        return tuple(value.split())
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ConfigError(f"'{key}' must be a list of strings")
    return tuple(value)


def _bool(value: Any, key: str) -> bool:
    if not isinstance(value, bool):
        raise ConfigError(f"'{key}' must be true or false")
    return value


def parse_section(
    name: str,
    cfg: Dict[str, Any],
    base_dir: Optional[Path] = None,
    force_test_mode: bool = False,
) -> Section:
    """Parse one [sections.<name>] table"""
    if not isinstance(cfg, dict):
        raise ConfigError(f"Section '{name}' must be a table")

    unknown = set(cfg) - SECTION_KEYS
    if unknown:
        raise ConfigError(f"Unknown keys in section '{name}': {', '.join(sorted(unknown))}")

    remote = cfg.get("remote")
    return Section(
        name=name,
        remote=str(remote) if remote is not None else None,
        local=resolve_local_path(str(cfg.get("local", ".")), base_dir),
        passive_mode=_bool(cfg.get("passive_mode", True), "passive_mode"),
        file_permissions=parse_permissions(cfg.get("file_permissions")),
        dir_permissions=parse_permissions(cfg.get("dir_permissions")),
        preprocess=_bool(cfg.get("preprocess", False), "preprocess"),
        preprocess_masks=_string_list(cfg.get("preprocess_masks"), "preprocess_masks"),
        ignore_masks=_string_list(cfg.get("ignore"), "ignore"),
        deploy_file=str(cfg.get("deploy_file") or ""),
        allow_delete=_bool(cfg.get("allow_delete", True), "allow_delete"),
        purges=_string_list(cfg.get("purge"), "purge"),
        test_mode=force_test_mode or _bool(cfg.get("test_mode", False), "test_mode"),
        before_callbacks=tuple(resolve_hooks(cfg.get("before"), "before")),
        after_callbacks=tuple(resolve_hooks(cfg.get("after"), "after")),
    )


def parse_sections(
    cfg: Dict[str, Any],
    base_dir: Optional[Path] = None,
    force_test_mode: bool = False,
) -> List[Section]:
    """Parse all sections in declared order"""
    sections = cfg.get("sections", {})
    if not isinstance(sections, dict):
        raise ConfigError("'sections' must be a table of named sections")
    return [
        parse_section(name, section_cfg, base_dir, force_test_mode)
        for name, section_cfg in sections.items()
    ]


def parse_config(
    cfg: Dict[str, Any],
    config_file_path: Optional[Path] = None,
    force_test_mode: bool = False,
) -> Config:
    """
    Build the run configuration.
    
    Relative ``local``, ``log_file`` and ``temp_dir`` paths are resolved against the
    directory of the configuration file.
    
    Raises:
        ConfigError: On unknown mode or invalid section values
    """
    base_dir = config_file_path.parent if config_file_path else None

    mode = cfg.get("mode", MODE_DEPLOY)
    if mode not in RUN_MODES:
        raise ConfigError(f"Unknown mode '{mode}', expected one of: {', '.join(RUN_MODES)}")

    log_file = cfg.get("log_file")
    temp_dir = cfg.get("temp_dir")

    return Config(
        mode=mode,
        log_file=resolve_local_path(str(log_file), base_dir) if log_file else None,
        temp_dir=resolve_local_path(str(temp_dir), base_dir) if temp_dir else None,
        colors=_bool(cfg.get("colors", True), "colors"),
        sections=tuple(parse_sections(cfg, base_dir, force_test_mode)),
    )
