"""
Server configuration models
"""
from dataclasses import dataclass
from typing import Optional

from ...core.constants import DEFAULT_TIMEOUT


@dataclass(frozen=True)
class ServerSettings:
    """
    Settings applied by a server client after each upload.
    
    Attributes:
        file_permissions: Mask applied to uploaded files (None keeps server default)
        dir_permissions: Mask applied to created directories (None keeps server default)
        passive_mode: FTP passive mode, ignored by SSH servers
        timeout: Connection timeout in seconds
    """
    file_permissions: Optional[int] = None
    dir_permissions: Optional[int] = None
    passive_mode: bool = True
    timeout: int = DEFAULT_TIMEOUT
