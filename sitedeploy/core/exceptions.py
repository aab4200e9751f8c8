"""
Unified exception definitions
"""


class DeployError(Exception):
    """Base exception class"""
    pass


class ConfigError(DeployError):
    """Configuration error"""
    pass


class ServerError(DeployError):
    """Remote server error"""
    pass


class RemoteFileNotFound(ServerError):
    """Remote file does not exist"""
    pass


class TransferError(DeployError):
    """Transfer error"""
    pass
