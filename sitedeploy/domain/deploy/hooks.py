"""
Hook dispatcher
"""
from typing import List, Sequence

from ...core.interfaces import DeployLogger, Server
from ...core.logging import get_logger
from ..engine.deployer import Deployer
from .models import Config, Hook, HookDirection, HookWarning, Section

logger = get_logger(__name__)


class HookUnit:
    """
    Runs a section's before or after callbacks as one engine hook.
    
    Each invocable callback is called with ``(config, section, server, logger, deployer)``
    in declared order. Non-invocable entries are logged and skipped, never raised.
    """

    def __init__(
        self,
        direction: HookDirection,
        hooks: Sequence[Hook],
        config: Config,
        section: Section,
    ):
        self.direction = direction
        self.hooks = tuple(hooks)
        self.config = config
        self.section = section
        self.warnings: List[HookWarning] = []

    def __call__(self, server: Server, deploy_logger: DeployLogger, deployer: Deployer) -> List[HookWarning]:
        warnings = []
        for hook in self.hooks:
            func = hook.resolve()
            if func is None:
                warning = HookWarning(direction=self.direction, hook=hook)
                deploy_logger.log(warning.message, "red")
                warnings.append(warning)
                continue
            logger.debug(f"[hook] {self.direction} {hook.describe()}")
            func(self.config, self.section, server, deploy_logger, deployer)
        self.warnings.extend(warnings)
        return warnings

    def __repr__(self) -> str:
        return f"HookUnit({self.direction!r}, {[h.describe() for h in self.hooks]})"


def build_hook_units(config: Config, section: Section) -> tuple[HookUnit, HookUnit]:
    """(before, after) units for a section"""
    return (
        HookUnit("before", section.before_callbacks, config, section),
        HookUnit("after", section.after_callbacks, config, section),
    )
