"""
Deployment manifest codec

A manifest maps '/relative/path' to the MD5 digest of the file. Directories end
with '/' and have an empty digest. Stored as gzip-compressed ``digest=path`` lines.
"""
import gzip
import hashlib
from pathlib import Path
from typing import Dict, Mapping

from ...core.exceptions import TransferError

GZIP_MAGIC = b"\x1f\x8b"


def file_digest(path: Path, chunk_size: int = 65536) -> str:
    """MD5 hex digest of a local file"""
    md5 = hashlib.md5()
    with open(path, "rb") as f:
        for chunk in iter(lambda: f.read(chunk_size), b""):
            md5.update(chunk)
    return md5.hexdigest()


def encode_manifest(paths: Mapping[str, str]) -> bytes:
    text = "".join(f"{digest}={path}\n" for path, digest in paths.items())
    return gzip.compress(text.encode("utf-8"))


def decode_manifest(data: bytes) -> Dict[str, str]:
    """
    Decode manifest bytes, accepting plain text as well as gzip.
    
    Raises:
        TransferError: If the data is not a valid manifest
    """
    try:
        if data[:2] == GZIP_MAGIC:
            data = gzip.decompress(data)
        text = data.decode("utf-8")
    except (OSError, EOFError, UnicodeDecodeError) as e:
        raise TransferError(f"Deployment file is corrupted: {e}") from e

    paths: Dict[str, str] = {}
    for line in text.splitlines():
        if not line.strip():
            continue
        digest, sep, path = line.partition("=")
        if not sep or not path.startswith("/"):
            raise TransferError(f"Deployment file is corrupted: invalid line {line!r}")
        paths[path] = digest
    return paths


def write_manifest(target: Path, paths: Mapping[str, str]) -> None:
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(encode_manifest(paths))
    except OSError as e:
        raise TransferError(f"Failed to write deployment file {target}: {e}") from e


def read_manifest(source: Path) -> Dict[str, str]:
    try:
        data = source.read_bytes()
    except OSError as e:
        raise TransferError(f"Failed to read deployment file {source}: {e}") from e
    return decode_manifest(data)
