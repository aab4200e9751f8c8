"""
Job assembler: turn a section into a fully configured Deployer
"""
from typing import Any, Callable, Dict, Tuple

from ...core.constants import BUILTIN_IGNORE_MASKS
from ...core.interfaces import DeployLogger, Server
from ...core.logging import get_logger
from ...core.utils import RemoteUrl, parse_remote_url
from ..engine.deployer import Deployer
from ..engine.models import DeploySettings
from .filters import build_filters, resolve_preprocess_masks
from .hooks import build_hook_units
from .models import Config, Section
from .servers import create_server

logger = get_logger(__name__)

ServerFactory = Callable[[Section], Server]


def validate_remote(section: Section) -> RemoteUrl:
    """
    Raises:
        ConfigError: If the remote URL is missing or invalid
    """
    return parse_remote_url(section.remote)


def merge_ignore_masks(section: Section) -> Tuple[str, ...]:
    """Built-in masks first, then the declared ones (duplicates kept)"""
    return BUILTIN_IGNORE_MASKS + tuple(section.ignore_masks)


def build_settings(config: Config, section: Section) -> DeploySettings:
    before, after = build_hook_units(config, section)
    options: Dict[str, Any] = {
        "ignore_masks": merge_ignore_masks(section),
        "preprocess_masks": resolve_preprocess_masks(section),
        "allow_delete": section.allow_delete,
        "to_purge": tuple(section.purges),
        "test_mode": section.test_mode,
        "temp_dir": config.temp_dir,
        "run_before": (before,),
        "run_after": (after,),
    }
    if section.deploy_file:
        options["deployment_file"] = section.deploy_file
    return DeploySettings(**options)


def create_deployer(
    config: Config,
    section: Section,
    deploy_logger: DeployLogger,
    server_factory: ServerFactory = create_server,
) -> Deployer:
    """
    Assemble the deployment job for one section. The job is not executed.
    
    Process:
    1. Validate the remote URL (before any resource is created)
    2. Create the server client with its permission settings
    3. Build the filter chain when preprocessing is enabled
    4. Build the settings: masks, manifest name, delete/purge policy, test mode, hooks
    
    Raises:
        ConfigError: If the remote URL is missing or invalid
    """
    url = validate_remote(section)
    server = server_factory(section)
    filters = build_filters(section, deploy_logger)
    settings = build_settings(config, section)
    logger.debug(f"[assemble] {section.name}: {url.scheme}://{url.host}{url.path} ← {section.local}")
    return Deployer(server, section.local, deploy_logger, settings=settings, filters=filters)
