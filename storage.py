# storage.py
"""Flat-directory file store: the directory listing is the only index."""
import os
import uuid
from dataclasses import dataclass, field
from pathlib import Path
from typing import BinaryIO, List, Optional

from utils import FilenameError


class StorageError(Exception):
    pass


class FileTooLarge(StorageError):
    def __init__(self, size: int, limit: int):
        super().__init__(f"file is {size} bytes, limit is {limit} bytes")
        self.size = size
        self.limit = limit


@dataclass(frozen=True)
class StoredFile:
    name: str
    size: int
    modified: float
    path: Path


@dataclass
class Listing:
    files: List[StoredFile] = field(default_factory=list)
    error: Optional[str] = None
    skipped: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.error is None


def list_files(upload_dir: Path) -> Listing:
    """Stat every regular file in ``upload_dir``, in directory iteration order.

    An unreadable directory yields an empty listing with ``error`` set; entries
    that vanish or fail to stat mid-scan are reported in ``skipped``.
    """
    listing = Listing()
    try:
        entries = list(os.scandir(upload_dir))
    except OSError as exc:
        listing.error = f"{upload_dir}: {exc.strerror or exc}"
        return listing

    for entry in entries:
        try:
            if not entry.is_file(follow_symlinks=False):
                continue
            st = entry.stat(follow_symlinks=False)
        except OSError:
            listing.skipped.append(entry.name)
            continue
        listing.files.append(
            StoredFile(name=entry.name, size=st.st_size, modified=st.st_mtime, path=Path(entry.path))
        )
    return listing


def save_upload(stream: BinaryIO, upload_dir: Path, incoming_dir: Path, filename: str, max_size: int) -> StoredFile:
    """Copy ``stream`` to ``upload_dir/filename``, replacing any existing file.

    The bytes land in ``incoming_dir`` first and are moved into place once
    complete, so readers never see a partial file. Nothing is kept on failure.
    """
    final_path = upload_dir / filename
    if final_path == incoming_dir:
        raise FilenameError(f"reserved filename: {filename}")
    if final_path.is_dir():
        raise FilenameError(f"a directory named {filename} already exists")

    incoming_dir.mkdir(parents=True, exist_ok=True)
    tmp_path = incoming_dir / f"{uuid.uuid4().hex}.part"
    written = 0
    try:
        with open(tmp_path, "wb") as out:
            while True:
                buf = stream.read(1024 * 1024)
                if not buf:
                    break
                written += len(buf)
                if written > max_size:
                    raise FileTooLarge(written, max_size)
                out.write(buf)
        os.replace(tmp_path, final_path)
    except BaseException:
        tmp_path.unlink(missing_ok=True)
        raise

    st = final_path.stat()
    return StoredFile(name=filename, size=written, modified=st.st_mtime, path=final_path)
