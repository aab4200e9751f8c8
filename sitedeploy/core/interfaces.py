"""
Core interfaces for dependency injection
"""
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional


class DeployLogger(ABC):
    """Deployment transcript sink"""

    use_colors: bool = True

    @abstractmethod
    def log(self, message: str, color: Optional[str] = None) -> None:
        """Append a message, with an optional color hint"""
        pass


class Server(ABC):
    """
    Remote server client.

    Remote paths are relative to the root path of the remote URL and always start with '/'.
    """

    @abstractmethod
    def connect(self) -> None:
        """Open the connection"""
        pass

    @abstractmethod
    def close(self) -> None:
        """Close the connection"""
        pass

    @abstractmethod
    def read_file(self, remote: str, local: Path) -> None:
        """Download remote file to local path"""
        pass

    @abstractmethod
    def write_file(self, local: Path, remote: str) -> None:
        """Upload local file to remote path"""
        pass

    @abstractmethod
    def rename(self, old: str, new: str) -> None:
        """Rename remote file, replacing the target"""
        pass

    @abstractmethod
    def remove_file(self, remote: str) -> None:
        """Remove remote file"""
        pass

    @abstractmethod
    def create_dir(self, remote: str) -> None:
        """Create remote directory including parents"""
        pass

    @abstractmethod
    def remove_dir(self, remote: str) -> None:
        """Remove empty remote directory"""
        pass

    @abstractmethod
    def purge(self, remote: str) -> None:
        """Recursively delete the contents of a remote directory"""
        pass

    @abstractmethod
    def execute(self, command: str) -> str:
        """Run a command on the server and return its output"""
        pass
