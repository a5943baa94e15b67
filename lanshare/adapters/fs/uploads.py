"""
Uploads Directory Store.

Implements the ContentStorePort using a single local directory.
Each stored item is one file named ``<id><extension>``.

Invariants:
- Items are written completely or not at all (temp file + os.replace)
- The directory is created lazily and idempotently
- Download names are validated as a single safe segment before touching disk
"""

from __future__ import annotations

import logging
import os
import re
import shutil
import tempfile
from pathlib import Path
from typing import BinaryIO

from lanshare.adapters.ids import IdGenerator, generate_id
from lanshare.core.entities import ResolvedItem, StoredItem
from lanshare.core.ports.storage import InvalidNameError, ItemNotFoundError, StorageError

logger = logging.getLogger(__name__)

DEFAULT_TEXT_EXTENSION = ".txt"
COPY_BUFFER_SIZE = 64 * 1024

# Extensions kept from uploaded file names: a dot plus word characters/dashes
_SAFE_EXTENSION = re.compile(r"^\.[A-Za-z0-9_-]{1,32}$")


def extension_of(filename: str) -> str:
    """
    Extract the extension to keep from an uploaded file name.

    Only the last path component is considered. Returns "" when the name has
    no suffix or the suffix contains anything unsafe for a file name.
    """
    base = re.split(r"[\\/]", filename)[-1]
    _, ext = os.path.splitext(base)
    if not ext or not _SAFE_EXTENSION.match(ext):
        return ""
    return ext


def validate_item_name(name: str) -> None:
    """
    Check that ``name`` is a single, non-hidden path segment.

    Raises InvalidNameError otherwise. Does not touch the filesystem.
    """
    if not name:
        raise InvalidNameError(name, "empty name")
    if "\x00" in name:
        raise InvalidNameError(name, "embedded NUL")
    if "/" in name or "\\" in name:
        raise InvalidNameError(name, "path separator")
    if name in (".", ".."):
        raise InvalidNameError(name, "parent or current directory reference")
    if name.startswith("."):
        raise InvalidNameError(name, "hidden name")
    if os.path.isabs(name) or Path(name).drive:
        raise InvalidNameError(name, "absolute path")


class UploadsDirectoryStore:
    """
    Local directory implementation of ContentStorePort.

    Example: put_text("hi") -> {root}/3f0c...e1.txt, relative path
    "uploads/3f0c...e1.txt".
    """

    def __init__(
        self,
        root: str | Path,
        *,
        id_generator: IdGenerator = generate_id,
        text_extension: str = DEFAULT_TEXT_EXTENSION,
    ) -> None:
        self.root = Path(root)
        self._generate_id = id_generator
        self.text_extension = text_extension

    def ensure_root(self) -> Path:
        """Create the storage directory if absent. Safe to call concurrently."""
        try:
            self.root.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.exception("Could not create uploads directory %s", self.root)
            raise StorageError(f"Cannot create uploads directory {self.root}: {e}") from e
        return self.root

    def put_text(self, raw: str) -> StoredItem:
        """Store ``raw`` as UTF-8 text under a new id."""
        return self._write(raw.encode("utf-8"), self.text_extension)

    def put_file(self, name: str, content: bytes | BinaryIO) -> StoredItem:
        """Store ``content`` unmodified, keeping only the extension of ``name``."""
        return self._write(content, extension_of(name))

    def resolve(self, name: str) -> ResolvedItem:
        validate_item_name(name)

        root = self.root.resolve()
        target = (root / name).resolve()
        # Symlinks inside the directory must not point outside it
        if target.parent != root:
            raise InvalidNameError(name, "outside uploads directory")

        try:
            st = target.stat()
        except FileNotFoundError:
            logger.debug("Stored item %s not found", name)
            raise ItemNotFoundError(name) from None
        except OSError as e:
            logger.exception("Could not stat stored item %s", name)
            raise StorageError(f"Cannot access stored item {name}: {e}") from e

        if not target.is_file():
            raise ItemNotFoundError(name)

        return ResolvedItem(name=name, path=target, size_bytes=st.st_size)

    def read(self, name: str) -> bytes:
        item = self.resolve(name)
        try:
            return item.path.read_bytes()
        except OSError as e:
            logger.exception("Could not read stored item %s", name)
            raise StorageError(f"Cannot read stored item {name}: {e}") from e

    def _write(self, content: bytes | BinaryIO, extension: str) -> StoredItem:
        root = self.ensure_root()
        item_id = self._generate_id()
        target = root / f"{item_id}{extension}"

        tmp_name: str | None = None
        try:
            fd, tmp_name = tempfile.mkstemp(prefix=".upload-", suffix=".part", dir=root)
            with os.fdopen(fd, "wb") as f:
                if isinstance(content, bytes):
                    f.write(content)
                else:
                    shutil.copyfileobj(content, f, COPY_BUFFER_SIZE)
                f.flush()
                os.fsync(f.fileno())
                size = f.tell()
            os.chmod(tmp_name, 0o644)
            os.replace(tmp_name, target)
            tmp_name = None
        except OSError as e:
            logger.exception("Failed to write stored item %s", target.name)
            raise StorageError(f"Cannot write stored item {target.name}: {e}") from e
        finally:
            if tmp_name is not None:
                _remove_quietly(tmp_name)

        logger.info("Stored item %s (%d bytes)", target.name, size)
        return StoredItem(id=item_id, extension=extension, size_bytes=size)


def _remove_quietly(path: str) -> None:
    try:
        os.remove(path)
    except FileNotFoundError:
        pass
    except OSError:
        logger.warning("Could not remove temporary file %s", path)

