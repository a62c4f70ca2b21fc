"""
Package reader for Office zip packages.

Opens an in-memory package and gives access to its parts by name.
"""

import io
import logging
import posixpath
import zipfile
import zlib
from typing import List, Optional, Tuple

from ..exceptions import BadContainerError, PartReadError

logger = logging.getLogger(__name__)


def normalize_part_name(name: str) -> str:
    """
    Normalize a part name to the form used as zip entry name.

    ``/xl/workbook.xml``, ``xl/./workbook.xml`` and ``xl/worksheets/../workbook.xml``
    all become ``xl/workbook.xml``.
    """
    cleaned = posixpath.normpath(name.replace("\\", "/")).lstrip("/")
    return "" if cleaned == "." else cleaned


class PackageReader:
    """
    Reads parts out of an Office package held in memory.

    Entries are read lazily; nothing is kept once the reader is closed.
    """

    def __init__(self, data: bytes):
        """
        Initialize package reader.

        Args:
            data: Package bytes
        """
        self._zip_file: Optional[zipfile.ZipFile] = None
        self._index = {}

        if not data:
            raise BadContainerError("Package is empty")

        try:
            self._zip_file = zipfile.ZipFile(io.BytesIO(data), "r")
        except (zipfile.BadZipFile, zipfile.LargeZipFile, ValueError, EOFError) as exc:
            raise BadContainerError("Package is not a valid zip archive", str(exc)) from exc

        for info in self._zip_file.infolist():
            if info.is_dir():
                continue
            self._index.setdefault(normalize_part_name(info.filename), info)

        logger.debug(f"Opened package with {len(self._index)} parts")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def close(self) -> None:
        """Close the underlying archive."""
        if self._zip_file is not None:
            self._zip_file.close()
            self._zip_file = None
        self._index = {}

    def names(self) -> List[str]:
        """Get part names in archive order."""
        return list(self._index)

    def has_part(self, name: str) -> bool:
        return normalize_part_name(name) in self._index

    def read(self, name: str) -> Optional[bytes]:
        """
        Read a part.

        Args:
            name: Part name, with or without leading slash

        Returns:
            Part bytes, or None if the package has no such part
        """
        info = self._index.get(normalize_part_name(name))
        if info is None:
            return None
        if self._zip_file is None:
            raise PartReadError("Package is closed", part_name=name)

        try:
            return self._zip_file.read(info)
        except (zipfile.BadZipFile, zlib.error, EOFError, OSError,
                NotImplementedError, RuntimeError) as exc:
            raise PartReadError(f"Cannot read part {info.filename}", part_name=info.filename,
                                details=str(exc)) from exc

    def entries(self) -> List[Tuple[str, bytes]]:
        """
        Read every part.

        Returns:
            List of (part name, contents) in archive order
        """
        return [(name, self.read(name)) for name in self.names()]
