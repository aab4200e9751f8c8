"""
sitedeploy - multi-target file deployment tool

Deploys local directories to remote servers, one named section per target:
- FTP, FTPS and SFTP transports
- Incremental uploads driven by a deployment manifest
- Optional js/css preprocessing (import expansion, compression)
- Remote deletion and purge policies, test mode
- Before/after callbacks around each transfer
"""

__version__ = "0.1.0"

# Export core components
from .core import (
    ConsoleLogger,
    FileLogger,
    DeployLogger,
    Server,
)
from .core.exceptions import (
    DeployError,
    ConfigError,
    ServerError,
    RemoteFileNotFound,
    TransferError,
)

# Export domain models
from .domain.deploy import (
    Config,
    Section,
    FunctionHook,
    MethodHook,
    HookWarning,
    TempDirWarning,
    Runner,
    RunResult,
    create_deployer,
    create_server,
)

from .domain.engine import (
    Deployer,
    DeploySettings,
    FilterChain,
    Preprocessor,
)

__all__ = [
    # Version
    "__version__",
    # Logging
    "ConsoleLogger",
    "FileLogger",
    "DeployLogger",
    # Servers
    "Server",
    "create_server",
    # Errors
    "DeployError",
    "ConfigError",
    "ServerError",
    "RemoteFileNotFound",
    "TransferError",
    # Configuration models
    "Config",
    "Section",
    "FunctionHook",
    "MethodHook",
    "HookWarning",
    "TempDirWarning",
    # Orchestration
    "Runner",
    "RunResult",
    "create_deployer",
    # Engine
    "Deployer",
    "DeploySettings",
    "FilterChain",
    "Preprocessor",
]
