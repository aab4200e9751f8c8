"""
Deployment orchestration domain
"""
from .models import (
    Config,
    Section,
    FunctionHook,
    MethodHook,
    Hook,
    HookWarning,
    TempDirWarning,
)
from .servers import create_server
from .filters import build_filters, resolve_preprocess_masks
from .hooks import HookUnit, build_hook_units
from .assembler import create_deployer, merge_ignore_masks
from .jobs import GenerateJob, SyncJob, job_type_for
from .runner import Runner, RunResult, prepare_temp_dir

__all__ = [
    "Config",
    "Section",
    "FunctionHook",
    "MethodHook",
    "Hook",
    "HookWarning",
    "TempDirWarning",
    "create_server",
    "build_filters",
    "resolve_preprocess_masks",
    "HookUnit",
    "build_hook_units",
    "create_deployer",
    "merge_ignore_masks",
    "GenerateJob",
    "SyncJob",
    "job_type_for",
    "Runner",
    "RunResult",
    "prepare_temp_dir",
]
