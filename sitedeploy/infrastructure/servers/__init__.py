"""
Remote server clients
"""
from .models import ServerSettings
from .ftp import FtpServer
from .ssh import SshServer

__all__ = [
    "ServerSettings",
    "FtpServer",
    "SshServer",
]
