"""
SSH / SFTP server client
"""
from __future__ import annotations

import stat
from pathlib import Path
from typing import Optional

import paramiko

from ...core.constants import DEFAULT_SSH_PORT
from ...core.exceptions import ServerError, RemoteFileNotFound
from ...core.interfaces import Server
from ...core.logging import get_logger
from ...core.utils import parse_remote_url, join_remote
from .models import ServerSettings

logger = get_logger(__name__)


class SshServer(Server):
    """
    Paramiko SSHClient wrapper:
    - password login when the URL carries a password
    - private key login via ``?key=~/.ssh/id_ed25519`` (Ed25519 or RSA)
    - otherwise agent and default keys
    - SFTP for file operations, exec for remote commands
    """

    def __init__(self, remote: str, settings: Optional[ServerSettings] = None):
        self.url = parse_remote_url(remote)
        self.settings = settings or ServerSettings()
        self.client = paramiko.SSHClient()
        self.client.set_missing_host_key_policy(paramiko.AutoAddPolicy())
        self._sftp: Optional[paramiko.SFTPClient] = None

    @property
    def file_permissions(self) -> Optional[int]:
        return self.settings.file_permissions

    @property
    def dir_permissions(self) -> Optional[int]:
        return self.settings.dir_permissions

    # --------------------
    # Connection management
    # --------------------
    def connect(self) -> None:
        url = self.url
        kwargs = {
            "hostname": url.host,
            "port": url.port or DEFAULT_SSH_PORT,
            "username": url.user,
            "timeout": self.settings.timeout,
        }
        if url.password is not None:
            kwargs["password"] = url.password
        elif url.query.get("key"):
            kwargs["pkey"] = self._load_private_key(url.query["key"])

        try:
            self.client.connect(**kwargs)
            self._sftp = self.client.open_sftp()
        except (paramiko.SSHException, OSError) as e:
            raise ServerError(f"Failed to connect to {url.host}: {e}") from e
        logger.debug(f"[ssh] connected to {url.user}@{url.host}")

    def _load_private_key(self, path: str) -> paramiko.PKey:
        """Try Ed25519 first, then RSA"""
        p = Path(path).expanduser()

        try:
            return paramiko.Ed25519Key.from_private_key_file(str(p))
        except (paramiko.SSHException, OSError):
            try:
                return paramiko.RSAKey.from_private_key_file(str(p))
            except (paramiko.SSHException, OSError) as e:
                raise ServerError(f"Failed to load private key at {p}") from e

    def close(self) -> None:
        if self._sftp is not None:
            self._sftp.close()
            self._sftp = None
        self.client.close()

    @property
    def sftp(self) -> paramiko.SFTPClient:
        if self._sftp is None:
            raise ServerError("SSH server is not connected")
        return self._sftp

    def _path(self, remote: str) -> str:
        return join_remote(self.url.path, remote)

    # --------------------
    # File operations
    # --------------------
    def read_file(self, remote: str, local: Path) -> None:
        local.parent.mkdir(parents=True, exist_ok=True)
        try:
            self.sftp.get(self._path(remote), local.as_posix())
        except FileNotFoundError as e:
            raise RemoteFileNotFound(f"Remote file not found: {remote}") from e
        except IOError as e:
            raise ServerError(f"Failed to download {remote}: {e}") from e

    def write_file(self, local: Path, remote: str) -> None:
        path = self._path(remote)
        try:
            self.sftp.put(local.as_posix(), path)
            if self.file_permissions is not None:
                self.sftp.chmod(path, self.file_permissions)
        except IOError as e:
            raise ServerError(f"Failed to upload {remote}: {e}") from e
        logger.debug(f"[push] {local} → {path}")

    def rename(self, old: str, new: str) -> None:
        try:
            self.sftp.posix_rename(self._path(old), self._path(new))
        except IOError as e:
            raise ServerError(f"Failed to rename {old} to {new}: {e}") from e

    def remove_file(self, remote: str) -> None:
        try:
            self.sftp.remove(self._path(remote))
        except FileNotFoundError:
            logger.debug(f"[ssh] {remote} already removed")
        except IOError as e:
            raise ServerError(f"Failed to remove {remote}: {e}") from e

    def create_dir(self, remote: str) -> None:
        """Create remote directory and missing parents (mkdir -p)"""
        current = ""
        for part in self._path(remote).split("/"):
            if not part:
                continue
            current = f"{current}/{part}"
            try:
                self.sftp.stat(current)
                continue
            except IOError:
                pass
            try:
                self.sftp.mkdir(current)
                if self.dir_permissions is not None:
                    self.sftp.chmod(current, self.dir_permissions)
            except IOError as e:
                raise ServerError(f"Failed to create directory {current}: {e}") from e

    def remove_dir(self, remote: str) -> None:
        try:
            self.sftp.rmdir(self._path(remote))
        except FileNotFoundError:
            pass
        except IOError as e:
            raise ServerError(f"Failed to remove directory {remote}: {e}") from e

    def purge(self, remote: str) -> None:
        self._purge(self._path(remote))

    def _purge(self, path: str) -> None:
        try:
            entries = self.sftp.listdir_attr(path)
        except FileNotFoundError:
            return
        except IOError as e:
            raise ServerError(f"Failed to list {path}: {e}") from e
        for entry in entries:
            child = f"{path.rstrip('/')}/{entry.filename}"
            try:
                if stat.S_ISDIR(entry.st_mode or 0):
                    self._purge(child)
                    self.sftp.rmdir(child)
                else:
                    self.sftp.remove(child)
            except IOError as e:
                raise ServerError(f"Failed to purge {child}: {e}") from e

    def execute(self, command: str) -> str:
        """Run command and return stdout, non-zero exit status is an error"""
        try:
            _, stdout, stderr = self.client.exec_command(command)
            out = stdout.read().decode()
            err = stderr.read().decode()
            exit_code = stdout.channel.recv_exit_status()
        except paramiko.SSHException as e:
            raise ServerError(f"Failed to execute '{command}': {e}") from e
        if exit_code != 0:
            raise ServerError(f"Command '{command}' failed (exit code: {exit_code}): {err.strip()}")
        return out
