"""
Transfer engine: local tree vs remote manifest synchronization
"""
import tempfile
import uuid
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple

from ...core.constants import DEFAULT_TEMP_DIR_NAME, SOURCE_ENCODING, SOURCE_ERRORS, TEMP_UPLOAD_SUFFIX
from ...core.exceptions import RemoteFileNotFound, TransferError
from ...core.interfaces import DeployLogger, Server
from ...core.logging import get_logger
from .filters import FilterChain
from .manifest import file_digest, read_manifest, write_manifest
from .masks import matches_mask
from .models import DeploySettings, HookUnit

logger = get_logger(__name__)


class Deployer:
    """
    Deploys one local directory to one server.
    
    The remote state is known only through the deployment file (manifest) kept in
    the remote root, so files changed on the server by other means are not detected.
    """

    def __init__(
        self,
        server: Server,
        local: Path,
        deploy_logger: DeployLogger,
        settings: Optional[DeploySettings] = None,
        filters: Optional[FilterChain] = None,
    ):
        self.server = server
        self.local = Path(local)
        self.logger = deploy_logger
        self.settings = settings or DeploySettings()
        self.filters = filters or FilterChain()

    # --------------------
    # Settings shortcuts
    # --------------------
    @property
    def ignore_masks(self) -> Tuple[str, ...]:
        return self.settings.ignore_masks

    @property
    def preprocess_masks(self) -> Tuple[str, ...]:
        return self.settings.preprocess_masks

    @property
    def deployment_file(self) -> str:
        return self.settings.deployment_file

    @property
    def allow_delete(self) -> bool:
        return self.settings.allow_delete

    @property
    def to_purge(self) -> Tuple[str, ...]:
        return self.settings.to_purge

    @property
    def test_mode(self) -> bool:
        return self.settings.test_mode

    @property
    def temp_dir(self) -> Path:
        return self.settings.temp_dir or Path(tempfile.gettempdir()) / DEFAULT_TEMP_DIR_NAME

    # ============================================================
    # Local scan
    # ============================================================

    def collect_paths(self) -> Dict[str, str]:
        """
        Scan the local root.
        
        Returns:
            Ordered mapping of '/relative/path' to MD5 digest, directories end with '/'
        
        Raises:
            TransferError: If the local root is not a directory
        """
        if not self.local.is_dir():
            raise TransferError(f"Local directory {self.local} does not exist")

        own_files = {f"/{self.deployment_file}"}
        paths: Dict[str, str] = {}
        self._collect(self.local, "", own_files, paths)
        return paths

    def _collect(self, directory: Path, prefix: str, own_files: set, paths: Dict[str, str]) -> None:
        try:
            entries = sorted(directory.iterdir(), key=lambda p: p.name)
        except OSError as e:
            raise TransferError(f"Unable to read directory {directory}: {e}") from e

        for entry in entries:
            rel = f"{prefix}/{entry.name}"
            is_dir = entry.is_dir()
            if rel in own_files or matches_mask(rel, self.ignore_masks, is_dir):
                logger.debug(f"[scan] ignored {rel}")
                continue
            if is_dir:
                paths[rel + "/"] = ""
                self._collect(entry, rel, own_files, paths)
            else:
                paths[rel] = file_digest(entry)

    def write_deployment_file(self, paths: Dict[str, str]) -> str:
        """Write the manifest into the local root and describe what was written"""
        target = self.local / self.deployment_file
        write_manifest(target, paths)
        return f"{len(paths)} entries to {target}"

    # ============================================================
    # Deployment
    # ============================================================

    def deploy(self) -> None:
        """
        Synchronize the remote with the local root.
        
        Raises:
            ServerError: On transport failures
            TransferError: On manifest or local file failures
        """
        self.logger.log("Connecting to server")
        self.server.connect()
        try:
            self._deploy()
        finally:
            self.server.close()

    def _deploy(self) -> None:
        remote_paths = self._load_remote_manifest()
        self.logger.log("Scanning files")
        local_paths = self.collect_paths()

        to_upload = [p for p, digest in local_paths.items() if remote_paths.get(p) != digest]
        to_delete = [p for p in remote_paths if p not in local_paths] if self.allow_delete else []
        self.logger.log(f"{len(to_upload)} entries to upload, {len(to_delete)} to delete")

        if not to_upload and not to_delete and not self.to_purge:
            self.logger.log("Already synchronized.", "lime")
            return

        if self.test_mode:
            self._report(to_upload, to_delete)
            return

        self._run_hooks(self.settings.run_before)
        self._upload(to_upload)
        self._write_remote_manifest(local_paths)
        self._delete(to_delete)
        self._purge()
        self._run_hooks(self.settings.run_after)

    def _report(self, to_upload: List[str], to_delete: List[str]) -> None:
        for path in to_upload:
            self.logger.log(f"Would upload {path}", "navy")
        for path in to_delete:
            self.logger.log(f"Would delete {path}", "maroon")
        for path in self.to_purge:
            self.logger.log(f"Would purge {path}", "maroon")

    def _run_hooks(self, units: Iterable[HookUnit]) -> None:
        for unit in units:
            unit(self.server, self.logger, self)

    # --------------------
    # Remote manifest
    # --------------------
    def _load_remote_manifest(self) -> Dict[str, str]:
        local = self._temp_file()
        try:
            self.server.read_file(f"/{self.deployment_file}", local)
        except RemoteFileNotFound:
            self.logger.log("Remote deployment file not found, uploading everything")
            local.unlink(missing_ok=True)
            return {}
        try:
            return read_manifest(local)
        finally:
            local.unlink(missing_ok=True)

    def _write_remote_manifest(self, paths: Dict[str, str]) -> None:
        local = self._temp_file()
        remote = f"/{self.deployment_file}"
        try:
            write_manifest(local, paths)
            self.server.write_file(local, remote + TEMP_UPLOAD_SUFFIX)
            self.server.rename(remote + TEMP_UPLOAD_SUFFIX, remote)
        finally:
            local.unlink(missing_ok=True)

    def _temp_file(self) -> Path:
        self._ensure_dir(self.temp_dir)
        return self.temp_dir / f"{uuid.uuid4().hex}-{self.deployment_file}"

    # --------------------
    # Changes
    # --------------------
    def _upload(self, paths: List[str]) -> None:
        dirs = [p for p in paths if p.endswith("/")]
        files = [p for p in paths if not p.endswith("/")]

        for path in dirs:
            self.logger.log(f"Creating directory {path}", "gray")
            self.server.create_dir(path.rstrip("/"))

        staged = []
        try:
            for i, path in enumerate(files, 1):
                source = self._prepare_file(path)
                self.logger.log(f"Uploading [{i}/{len(files)}] {path}")
                self.server.write_file(source, path + TEMP_UPLOAD_SUFFIX)
                staged.append(path)
                if self._is_staged(source):
                    source.unlink(missing_ok=True)
        except OSError as e:
            raise TransferError(f"Failed to prepare upload: {e}") from e

        if staged:
            self.logger.log("Renaming uploaded files")
        for path in staged:
            self.server.rename(path + TEMP_UPLOAD_SUFFIX, path)

    def _prepare_file(self, path: str) -> Path:
        """Local file to upload, passed through the filter chain when it matches the preprocess masks"""
        source = self.local / path.lstrip("/")
        if not len(self.filters) or not matches_mask(path, self.preprocess_masks):
            return source

        tag = source.suffix.lstrip(".").lower()
        if not self.filters.steps(tag):
            return source

        text = source.read_text(encoding=SOURCE_ENCODING, errors=SOURCE_ERRORS)
        content = self.filters.apply(tag, text, source)
        staged = self._staging_dir() / path.lstrip("/")
        self._ensure_dir(staged.parent)
        staged.write_text(content, encoding=SOURCE_ENCODING, errors=SOURCE_ERRORS)
        return staged

    def _ensure_dir(self, directory: Path) -> None:
        try:
            directory.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise TransferError(f"Temporary directory {self.temp_dir} is not usable: {e}") from e

    def _staging_dir(self) -> Path:
        return self.temp_dir / "upload"

    def _is_staged(self, source: Path) -> bool:
        return self._staging_dir() in source.parents

    def _delete(self, paths: List[str]) -> None:
        # children sort after their parent, so reverse order removes files before directories
        for path in sorted(paths, reverse=True):
            self.logger.log(f"Deleting {path}", "maroon")
            if path.endswith("/"):
                self.server.remove_dir(path.rstrip("/"))
            else:
                self.server.remove_file(path)

    def _purge(self) -> None:
        for path in self.to_purge:
            path = "/" + path.strip("/")
            self.logger.log(f"Cleaning {path}", "maroon")
            self.server.purge(path)
