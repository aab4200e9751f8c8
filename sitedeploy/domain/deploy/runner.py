"""
Orchestrator run loop
"""
import tempfile
import time
from dataclasses import dataclass, field, replace
from datetime import datetime
from pathlib import Path
from typing import Callable, List, Optional

from ...core.constants import DATE_FORMAT, DEFAULT_TEMP_DIR_NAME
from ...core.interfaces import DeployLogger
from ...core.logging import create_deploy_logger, get_logger
from ...core.telemetry import Telemetry, get_telemetry
from ..engine.deployer import Deployer
from .assembler import ServerFactory, create_deployer
from .jobs import job_type_for
from .models import Config, Section, TempDirWarning
from .servers import create_server

logger = get_logger(__name__)

Assembler = Callable[[Config, Section, DeployLogger, ServerFactory], Deployer]


@dataclass
class RunResult:
    """Outcome of a completed run"""
    elapsed: int
    sections: List[str] = field(default_factory=list)
    temp_dir_warning: Optional[TempDirWarning] = None


def default_temp_dir() -> Path:
    return Path(tempfile.gettempdir()) / DEFAULT_TEMP_DIR_NAME


def prepare_temp_dir(path: Path, deploy_logger: DeployLogger) -> Optional[TempDirWarning]:
    """Create the temp directory if missing, failure is reported and not raised"""
    if path.is_dir():
        return None

    deploy_logger.log(f"Creating temporary directory {path}")
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        warning = TempDirWarning(path=path, reason=e.strerror or str(e))
        deploy_logger.log(warning.message, "red")
        return warning
    return None


def format_time(timestamp: float) -> str:
    return datetime.fromtimestamp(timestamp).strftime(DATE_FORMAT)


class Runner:
    """
    Processes all sections in declared order.
    
    Sections are independent: a failure aborts the rest of the run but never
    rolls back sections already deployed.
    """

    def __init__(
        self,
        deploy_logger: Optional[DeployLogger] = None,
        assembler: Assembler = create_deployer,
        server_factory: ServerFactory = create_server,
        clock: Callable[[], float] = time.time,
        telemetry: Optional[Telemetry] = None,
    ):
        """
        Initialize runner.
        
        Args:
            deploy_logger: Transcript sink (default: file or console from the config)
            assembler: Builds the Deployer of a section
            server_factory: Creates the server client of a section
            clock: Wall clock in seconds, used for the start/finish banners
            telemetry: Metrics collector (default: global instance)
        """
        self.deploy_logger = deploy_logger
        self.assembler = assembler
        self.server_factory = server_factory
        self.clock = clock
        self.telemetry = telemetry or get_telemetry()

    def run(self, config: Config) -> RunResult:
        """
        Run all sections.
        
        Raises:
            ConfigError: On invalid mode or section configuration
            ServerError, TransferError: When a section fails, the remaining sections are skipped
        """
        # Init
        deploy_logger = self.deploy_logger or create_deploy_logger(config.log_file, config.colors)
        deploy_logger.use_colors = config.colors
        job_type = job_type_for(config.mode)

        temp_dir = Path(config.temp_dir) if config.temp_dir else default_temp_dir()
        temp_dir_warning = prepare_temp_dir(temp_dir, deploy_logger)
        config = replace(config, temp_dir=temp_dir)

        started = self.clock()
        deploy_logger.log(f"Started at {format_time(started)}")

        names = config.section_names
        deploy_logger.log(f"Found sections: {len(names)} ({','.join(names)})")

        # Sections
        for section in config.sections:
            deploy_logger.log(f"\nDeploying section [{section.name}]")
            section_started = time.perf_counter()

            deployer = self.assembler(config, section, deploy_logger, self.server_factory)
            job_type(deployer, deploy_logger).run()

            self.telemetry.record_metric(
                "section.duration",
                time.perf_counter() - section_started,
                tags={"section": section.name, "mode": config.mode},
            )

        # Done
        finished = self.clock()
        elapsed = int(finished) - int(started)
        deploy_logger.log(f"\nFinished at {format_time(finished)} (in {elapsed} seconds)", "lime")
        self.telemetry.record_event("run.finished", {"elapsed": elapsed, "sections": names})
        logger.debug(f"[run] {len(names)} sections in {elapsed}s")

        return RunResult(elapsed=elapsed, sections=names, temp_dir_warning=temp_dir_warning)
