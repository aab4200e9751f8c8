"""
Server factory: pick the transport client from the remote URL scheme
"""
from ...core.constants import SSH_SCHEMES
from ...core.interfaces import Server
from ...core.utils import parse_remote_url
from ...infrastructure.servers import FtpServer, ServerSettings, SshServer
from .models import Section


def server_settings(section: Section) -> ServerSettings:
    return ServerSettings(
        file_permissions=section.file_permissions,
        dir_permissions=section.dir_permissions,
        passive_mode=section.passive_mode,
    )


def create_server(section: Section) -> Server:
    """
    Create the server client for a section.
    
    ``sftp://`` and ``ssh://`` select the SSH client, every other scheme selects FTP.
    
    Raises:
        ConfigError: If the remote URL is missing or invalid
    """
    url = parse_remote_url(section.remote)
    settings = server_settings(section)
    if url.scheme in SSH_SCHEMES:
        return SshServer(section.remote, settings)
    return FtpServer(section.remote, settings)
