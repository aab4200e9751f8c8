"""
Deployment domain models
"""
import inspect
from dataclasses import dataclass, field
from pathlib import Path
from types import ModuleType
from typing import Any, Callable, Literal, Optional, Tuple, Union

from ...core.constants import MODE_DEPLOY


# ============================================================
# Hooks
# ============================================================

@dataclass(frozen=True)
class FunctionHook:
    """Free function reference"""
    func: Any

    def resolve(self) -> Optional[Callable]:
        return self.func if callable(self.func) else None

    def describe(self) -> str:
        return getattr(self.func, "__qualname__", None) or type(self.func).__name__


@dataclass(frozen=True)
class MethodHook:
    """(target, member name) pair, resolved at invocation time"""
    target: Any
    member: str

    def resolve(self) -> Optional[Callable]:
        attr = getattr(self.target, self.member, None)
        return attr if callable(attr) else None

    def describe(self) -> str:
        if isinstance(self.target, ModuleType):
            owner = self.target.__name__
        elif inspect.isclass(self.target):
            owner = self.target.__qualname__
        else:
            owner = type(self.target).__qualname__
        return f"{owner}.{self.member}"


Hook = Union[FunctionHook, MethodHook]
HookDirection = Literal["before", "after"]


@dataclass(frozen=True)
class HookWarning:
    """A declared hook that is not invocable"""
    direction: HookDirection
    hook: Hook

    @property
    def message(self) -> str:
        return f"{self.direction.capitalize()} callback '{self.hook.describe()}' does not exist."


# ============================================================
# Configuration
# ============================================================

@dataclass(frozen=True)
class Section:
    """
    One named deployment target.
    
    Attributes:
        name: Section identifier, used for logging
        remote: Remote URL (``ftp://``, ``ftps://``, ``sftp://``)
        local: Local source directory
        passive_mode: FTP passive mode
        file_permissions: Mask applied to uploaded files
        dir_permissions: Mask applied to created directories
        preprocess: Run js/css files through the preprocessor
        preprocess_masks: Files eligible for preprocessing (empty means ``*.js``, ``*.css``)
        ignore_masks: Additional ignore masks, merged with the built-in ones
        deploy_file: Manifest file name override (empty keeps the engine default)
        allow_delete: Remove remote files missing locally
        purges: Remote directories whose content is always deleted
        test_mode: Report changes without touching the remote
        before_callbacks: Hooks run before the transfer
        after_callbacks: Hooks run after the transfer
    """
    name: str
    remote: Optional[str] = None
    local: Path = Path(".")
    passive_mode: bool = True
    file_permissions: Optional[int] = None
    dir_permissions: Optional[int] = None
    preprocess: bool = False
    preprocess_masks: Tuple[str, ...] = ()
    ignore_masks: Tuple[str, ...] = ()
    deploy_file: str = ""
    allow_delete: bool = True
    purges: Tuple[str, ...] = ()
    test_mode: bool = False
    before_callbacks: Tuple[Hook, ...] = ()
    after_callbacks: Tuple[Hook, ...] = ()


@dataclass(frozen=True)
class Config:
    """Process-wide run configuration"""
    mode: Literal["generate", "deploy"] = MODE_DEPLOY
    log_file: Optional[Path] = None
    temp_dir: Optional[Path] = None
    colors: bool = True
    sections: Tuple[Section, ...] = field(default_factory=tuple)

    @property
    def section_names(self) -> list[str]:
        return [s.name for s in self.sections]


@dataclass(frozen=True)
class TempDirWarning:
    """Temp directory could not be created"""
    path: Path
    reason: str

    @property
    def message(self) -> str:
        return f"Unable to create temporary directory {self.path}: {self.reason}"
