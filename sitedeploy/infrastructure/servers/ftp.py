"""
FTP / FTPS server client
"""
import ftplib
from pathlib import Path
from typing import Optional

from ...core.constants import DEFAULT_FTP_PORT, FTP_TLS_SCHEME
from ...core.exceptions import ServerError, RemoteFileNotFound
from ...core.interfaces import Server
from ...core.logging import get_logger
from ...core.utils import parse_remote_url, join_remote
from .models import ServerSettings

logger = get_logger(__name__)


def _is_missing(e: ftplib.Error) -> bool:
    """550 is the reply for missing files and directories"""
    return str(e).startswith("550")


class FtpServer(Server):
    """
    FTP server client built on ftplib.
    
    The ``ftps`` scheme switches to explicit TLS with a protected data channel.
    """

    def __init__(self, remote: str, settings: Optional[ServerSettings] = None):
        self.url = parse_remote_url(remote)
        self.settings = settings or ServerSettings()
        self._ftp: Optional[ftplib.FTP] = None

    @property
    def file_permissions(self) -> Optional[int]:
        return self.settings.file_permissions

    @property
    def dir_permissions(self) -> Optional[int]:
        return self.settings.dir_permissions

    @property
    def passive_mode(self) -> bool:
        return self.settings.passive_mode

    # --------------------
    # Connection management
    # --------------------
    def connect(self) -> None:
        url = self.url
        ftp = ftplib.FTP_TLS(timeout=self.settings.timeout) if url.scheme == FTP_TLS_SCHEME \
            else ftplib.FTP(timeout=self.settings.timeout)
        try:
            ftp.connect(url.host, url.port or DEFAULT_FTP_PORT)
            ftp.login(url.user or "anonymous", url.password or "")
            if isinstance(ftp, ftplib.FTP_TLS):
                ftp.prot_p()
            ftp.set_pasv(self.settings.passive_mode)
        except ftplib.all_errors as e:
            raise ServerError(f"Failed to connect to {url.host}: {e}") from e
        self._ftp = ftp
        logger.debug(f"[ftp] connected to {url.host}")

    def close(self) -> None:
        if self._ftp is None:
            return
        try:
            self._ftp.quit()
        except ftplib.all_errors:
            self._ftp.close()
        self._ftp = None

    @property
    def client(self) -> ftplib.FTP:
        if self._ftp is None:
            raise ServerError("FTP server is not connected")
        return self._ftp

    def _path(self, remote: str) -> str:
        return join_remote(self.url.path, remote)

    # --------------------
    # File operations
    # --------------------
    def read_file(self, remote: str, local: Path) -> None:
        local.parent.mkdir(parents=True, exist_ok=True)
        try:
            with open(local, "wb") as f:
                self.client.retrbinary(f"RETR {self._path(remote)}", f.write)
        except ftplib.error_perm as e:
            if _is_missing(e):
                raise RemoteFileNotFound(f"Remote file not found: {remote}") from e
            raise ServerError(f"Failed to download {remote}: {e}") from e
        except ftplib.all_errors as e:
            raise ServerError(f"Failed to download {remote}: {e}") from e

    def write_file(self, local: Path, remote: str) -> None:
        path = self._path(remote)
        try:
            with open(local, "rb") as f:
                self.client.storbinary(f"STOR {path}", f)
        except ftplib.all_errors as e:
            raise ServerError(f"Failed to upload {remote}: {e}") from e
        if self.file_permissions is not None:
            self._chmod(path, self.file_permissions)
        logger.debug(f"[push] {local} → {path}")

    def rename(self, old: str, new: str) -> None:
        try:
            self.client.delete(self._path(new))
        except ftplib.error_perm:
            pass
        try:
            self.client.rename(self._path(old), self._path(new))
        except ftplib.all_errors as e:
            raise ServerError(f"Failed to rename {old} to {new}: {e}") from e

    def remove_file(self, remote: str) -> None:
        try:
            self.client.delete(self._path(remote))
        except ftplib.error_perm as e:
            if not _is_missing(e):
                raise ServerError(f"Failed to remove {remote}: {e}") from e
            logger.debug(f"[ftp] {remote} already removed")
        except ftplib.all_errors as e:
            raise ServerError(f"Failed to remove {remote}: {e}") from e

    def create_dir(self, remote: str) -> None:
        current = ""
        for part in self._path(remote).split("/"):
            if not part:
                continue
            current = f"{current}/{part}"
            try:
                self.client.mkd(current)
            except ftplib.error_perm as e:
                if self._dir_exists(current):
                    continue
                raise ServerError(f"Failed to create directory {current}: {e}") from e
            except ftplib.all_errors as e:
                raise ServerError(f"Failed to create directory {current}: {e}") from e
            if self.dir_permissions is not None:
                self._chmod(current, self.dir_permissions)

    def _dir_exists(self, path: str) -> bool:
        previous = self.client.pwd()
        try:
            self.client.cwd(path)
        except ftplib.error_perm:
            return False
        self.client.cwd(previous)
        return True

    def remove_dir(self, remote: str) -> None:
        try:
            self.client.rmd(self._path(remote))
        except ftplib.error_perm as e:
            if not _is_missing(e):
                raise ServerError(f"Failed to remove directory {remote}: {e}") from e
        except ftplib.all_errors as e:
            raise ServerError(f"Failed to remove directory {remote}: {e}") from e

    def purge(self, remote: str) -> None:
        self._purge(self._path(remote))

    def _purge(self, path: str) -> None:
        try:
            names = self.client.nlst(path)
        except ftplib.error_perm as e:
            if _is_missing(e):
                return
            raise ServerError(f"Failed to list {path}: {e}") from e
        for name in names:
            base = name.rstrip("/").rsplit("/", 1)[-1]
            if base in (".", ".."):
                continue
            child = f"{path.rstrip('/')}/{base}"
            try:
                self.client.delete(child)
            except ftplib.error_perm:
                self._purge(child)
                try:
                    self.client.rmd(child)
                except ftplib.error_perm as e:
                    raise ServerError(f"Failed to purge {child}: {e}") from e

    def execute(self, command: str) -> str:
        raise ServerError("FTP server does not support command execution")

    def _chmod(self, path: str, mode: int) -> None:
        try:
            self.client.sendcmd(f"SITE CHMOD {mode:o} {path}")
        except ftplib.error_perm as e:
            logger.warning(f"[ftp] chmod {mode:o} {path} failed: {e}")
