"""
Per-section jobs, one variant per run mode
"""
from abc import ABC, abstractmethod
from typing import Dict, Type

from ...core.constants import MODE_DEPLOY, MODE_GENERATE
from ...core.exceptions import ConfigError
from ...core.interfaces import DeployLogger
from ..engine.deployer import Deployer


class Job(ABC):
    """Runs an assembled Deployer"""

    def __init__(self, deployer: Deployer, deploy_logger: DeployLogger):
        self.deployer = deployer
        self.logger = deploy_logger

    @abstractmethod
    def run(self) -> None:
        pass


class GenerateJob(Job):
    """Write the local manifest, never contacts the server"""

    def run(self) -> None:
        self.logger.log("Scanning files")
        paths = self.deployer.collect_paths()
        self.logger.log("Saved " + self.deployer.write_deployment_file(paths))


class SyncJob(Job):
    """Synchronize the remote with the local tree"""

    def run(self) -> None:
        self.logger.log("Test mode" if self.deployer.test_mode else "Live mode")
        if not self.deployer.allow_delete:
            self.logger.log("Deleting disabled")
        self.deployer.deploy()


JOB_TYPES: Dict[str, Type[Job]] = {
    MODE_GENERATE: GenerateJob,
    MODE_DEPLOY: SyncJob,
}


def job_type_for(mode: str) -> Type[Job]:
    """
    Raises:
        ConfigError: If the mode is unknown
    """
    try:
        return JOB_TYPES[mode]
    except KeyError:
        raise ConfigError(f"Unknown mode '{mode}', expected one of: {', '.join(JOB_TYPES)}") from None
