"""Relationships parser for Office packages."""

from __future__ import annotations

import logging
import posixpath
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from typing import Dict, Optional

from ..exceptions import MalformedXMLError
from ..utils.xml_utils import local_name
from .package_reader import normalize_part_name

logger = logging.getLogger(__name__)

ROOT_RELATIONSHIPS_PART = "_rels/.rels"

OFFICE_DOCUMENT_TYPE = "http://schemas.openxmlformats.org/officeDocument/2006/relationships/officeDocument"
WORKSHEET_TYPE = "http://schemas.openxmlformats.org/officeDocument/2006/relationships/worksheet"
SHARED_STRINGS_TYPE = "http://schemas.openxmlformats.org/officeDocument/2006/relationships/sharedStrings"


@dataclass(frozen=True)
class Relationship:
    """A single ``<Relationship>`` entry with its target resolved to a part name."""

    id: str
    type: str
    target: str
    target_mode: str = "Internal"


def relationships_part_for(source_part: str) -> str:
    """
    Get the relationship part name belonging to a source part.

    ``xl/workbook.xml`` -> ``xl/_rels/workbook.xml.rels``
    """
    directory, filename = posixpath.split(normalize_part_name(source_part))
    return posixpath.join(directory, "_rels", f"{filename}.rels")


def resolve_relationship_target(target: str, source_part: str) -> str:
    """
    Resolve a relationship target against the part that owns it.

    Absolute targets are taken from the package root; relative ones from the
    source part's directory.
    """
    if not target:
        return ""
    if target.startswith("/"):
        return normalize_part_name(target)
    base = posixpath.dirname(normalize_part_name(source_part))
    return normalize_part_name(posixpath.join(base, target))


class RelationshipsParser:
    """Parse a ``_rels/*.rels`` part."""

    def __init__(self, source_part: str = ""):
        """
        Initialize relationships parser.

        Args:
            source_part: Part the relationships belong to; empty for the
                package root relationships
        """
        self.source_part = source_part
        self.rels_path = relationships_part_for(source_part) if source_part else ROOT_RELATIONSHIPS_PART

    def parse(self, xml_bytes: bytes) -> Dict[str, Relationship]:
        """
        Parse relationship XML.

        Args:
            xml_bytes: Content of the relationship part

        Returns:
            Mapping of relationship id to relationship
        """
        try:
            root = ET.fromstring(xml_bytes)
        except ET.ParseError as exc:
            raise MalformedXMLError("Malformed relationship part", part_name=self.rels_path,
                                    details=str(exc)) from exc

        relationships: Dict[str, Relationship] = {}
        for element in root.iter():
            if local_name(element.tag) != "Relationship":
                continue
            rel_id = element.get("Id", "")
            target = element.get("Target", "")
            if not rel_id or not target:
                continue
            mode = element.get("TargetMode", "Internal")
            if mode != "External":
                target = resolve_relationship_target(target, self.source_part)
            relationships.setdefault(rel_id, Relationship(rel_id, element.get("Type", ""), target, mode))

        logger.debug(f"Parsed {len(relationships)} relationships from {self.rels_path}")
        return relationships


def find_target_by_type(relationships: Dict[str, Relationship], rel_type: str) -> Optional[str]:
    """Get the target of the first relationship of the given type."""
    for rel in relationships.values():
        if rel.type == rel_type:
            return rel.target
    return None
