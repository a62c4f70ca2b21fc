"""
Package writer for Office zip packages.

Builds a package in memory. Entries keep the order they were added in and
carry fixed metadata, so the same entries always produce the same bytes.
"""

import io
import logging
import zipfile
import zlib
from typing import List, Union

from ..exceptions import WriteFailureError
from ..parser.package_reader import normalize_part_name
from ..utils.xml_utils import NAMESPACES

logger = logging.getLogger(__name__)

# Earliest timestamp a zip entry can carry.
FIXED_DATE_TIME = (1980, 1, 1, 0, 0, 0)
FIXED_FILE_MODE = 0o644 << 16

CONTENT_TYPES_PART = "[Content_Types].xml"

RELATIONSHIPS_CONTENT_TYPE = "application/vnd.openxmlformats-package.relationships+xml"
XML_CONTENT_TYPE = "application/xml"


def content_types_xml(overrides: List[tuple]) -> str:
    """
    Build ``[Content_Types].xml``.

    Args:
        overrides: (part name, content type) pairs; part names get a leading slash

    Returns:
        Content types XML
    """
    parts = [
        '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>',
        f'<Types xmlns="{NAMESPACES["ct"]}">',
        f'<Default Extension="rels" ContentType="{RELATIONSHIPS_CONTENT_TYPE}"/>',
        f'<Default Extension="xml" ContentType="{XML_CONTENT_TYPE}"/>',
    ]
    for part_name, content_type in overrides:
        parts.append(f'<Override PartName="/{normalize_part_name(part_name)}" ContentType="{content_type}"/>')
    parts.append("</Types>")
    return "".join(parts)


def relationships_xml(relationships: List[tuple]) -> str:
    """
    Build a relationship part.

    Args:
        relationships: (id, type, target) triples

    Returns:
        Relationships XML
    """
    parts = [
        '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>',
        f'<Relationships xmlns="{NAMESPACES["rels"]}">',
    ]
    for rel_id, rel_type, target in relationships:
        parts.append(f'<Relationship Id="{rel_id}" Type="{rel_type}" Target="{target}"/>')
    parts.append("</Relationships>")
    return "".join(parts)


class PackageWriter:
    """
    Writes parts into an in-memory zip package.
    """

    def __init__(self, compression: int = zipfile.ZIP_DEFLATED):
        """
        Initialize package writer.

        Args:
            compression: ``zipfile.ZIP_DEFLATED`` or ``zipfile.ZIP_STORED``
        """
        if compression not in (zipfile.ZIP_DEFLATED, zipfile.ZIP_STORED):
            raise ValueError(f"Unsupported compression method: {compression}")
        self.compression = compression
        self._buffer = io.BytesIO()
        self._zip_file = zipfile.ZipFile(self._buffer, "w", compression)
        self._names: List[str] = []
        self._finished = False

    @property
    def names(self) -> List[str]:
        """Entry names in write order."""
        return list(self._names)

    def add_entry(self, name: str, data: Union[str, bytes]) -> None:
        """
        Add a part.

        Args:
            name: Part name
            data: Part content; text is written as UTF-8
        """
        if self._finished:
            raise WriteFailureError("Package is already finished", name)

        part_name = normalize_part_name(name)
        if not part_name:
            raise WriteFailureError("Part name is empty")
        if part_name in self._names:
            raise WriteFailureError("Duplicate part name", part_name)

        if isinstance(data, str):
            data = data.encode("utf-8")

        info = zipfile.ZipInfo(part_name, date_time=FIXED_DATE_TIME)
        info.compress_type = self.compression
        info.external_attr = FIXED_FILE_MODE
        try:
            self._zip_file.writestr(info, data)
        except (OSError, ValueError, zlib.error, zipfile.LargeZipFile) as exc:
            raise WriteFailureError(f"Cannot write part {part_name}", str(exc)) from exc

        self._names.append(part_name)

    def finish(self) -> bytes:
        """
        Close the archive.

        Returns:
            Package bytes
        """
        if self._finished:
            raise WriteFailureError("Package is already finished")
        self._finished = True
        try:
            self._zip_file.close()
        except (OSError, ValueError, zlib.error, zipfile.LargeZipFile) as exc:
            raise WriteFailureError("Cannot finalize package", str(exc)) from exc

        data = self._buffer.getvalue()
        logger.debug(f"Wrote package with {len(self._names)} parts ({len(data)} bytes)")
        return data
