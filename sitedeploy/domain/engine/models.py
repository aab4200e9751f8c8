"""
Transfer engine models
"""
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Optional, Tuple, TYPE_CHECKING

from ...core.constants import BUILTIN_IGNORE_MASKS, DEFAULT_DEPLOYMENT_FILE
from ...core.interfaces import DeployLogger, Server

if TYPE_CHECKING:
    from .deployer import Deployer

HookUnit = Callable[[Server, DeployLogger, "Deployer"], Any]


@dataclass(frozen=True)
class DeploySettings:
    """
    Everything the engine needs besides the server, local root, logger and filters.
    
    Attributes:
        ignore_masks: Masks of local entries never deployed
        preprocess_masks: Masks of files passed through the filter chain
        deployment_file: Manifest file name, stored in the local and remote root
        allow_delete: Remove remote files that no longer exist locally
        to_purge: Remote directories whose content is always deleted
        test_mode: Report the change set without touching the remote
        temp_dir: Directory for staged uploads and downloaded manifests
        run_before: Hook units run before uploading
        run_after: Hook units run after deleting and purging
    """
    ignore_masks: Tuple[str, ...] = BUILTIN_IGNORE_MASKS
    preprocess_masks: Tuple[str, ...] = ()
    deployment_file: str = DEFAULT_DEPLOYMENT_FILE
    allow_delete: bool = True
    to_purge: Tuple[str, ...] = ()
    test_mode: bool = False
    temp_dir: Optional[Path] = None
    run_before: Tuple[HookUnit, ...] = ()
    run_after: Tuple[HookUnit, ...] = ()
