"""Custom exceptions for the Office package codec.

Every exception carries a ``kind`` naming the error category callers surface
verbatim (for example as the body of a 400-class response).
"""

from typing import Any, Dict, Optional


class OfficeCodecError(Exception):
    """Base exception for codec errors."""

    kind = "OfficeCodecError"

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def get_error_info(self) -> Dict[str, Any]:
        """
        Get error information.

        Returns:
            Dictionary with error kind, message and details
        """
        return {
            "kind": self.kind,
            "message": self.message,
            "details": self.details,
        }

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class BadContainerError(OfficeCodecError):
    """Input buffer is empty or not a zip archive."""

    kind = "BadContainer"


class PackageUnreadableError(BadContainerError):
    """A decoder could not open the package it was given."""

    kind = "PackageUnreadable"


class PartReadError(OfficeCodecError):
    """A present entry could not be read out of the archive."""

    kind = "PartUnreadable"

    def __init__(self, message: str, part_name: Optional[str] = None,
                 details: Optional[str] = None):
        super().__init__(message, details)
        self.part_name = part_name


class SheetUnreadableError(PartReadError):
    """A worksheet part is missing from the archive or cannot be read."""

    kind = "SheetUnreadable"


class MissingPartError(OfficeCodecError):
    """A mandatory part is absent."""

    kind = "MissingPart"

    def __init__(self, message: str, part_name: Optional[str] = None,
                 details: Optional[str] = None):
        super().__init__(message, details)
        self.part_name = part_name


class DescriptorMissingError(MissingPartError):
    """The workbook descriptor part is absent."""

    kind = "DescriptorMissing"


class DocumentPartMissingError(MissingPartError):
    """The word-processing body part is absent."""

    kind = "DocumentPartMissing"


class MalformedXMLError(OfficeCodecError):
    """A present part failed to parse as XML."""

    kind = "MalformedXML"

    def __init__(self, message: str, part_name: Optional[str] = None,
                 details: Optional[str] = None):
        super().__init__(message, details)
        self.part_name = part_name


class MalformedSharedStringsError(MalformedXMLError):
    """The shared-string part failed to parse."""

    kind = "MalformedSharedStrings"


class MalformedSheetXMLError(MalformedXMLError):
    """A worksheet part failed to parse."""

    kind = "MalformedSheetXML"


class StructureError(OfficeCodecError):
    """Descriptor and relationships disagree."""

    kind = "StructureError"


class NoSheetsDeclaredError(StructureError):
    """The workbook descriptor declares no sheets."""

    kind = "NoSheetsDeclared"


class RelationshipsMissingError(StructureError):
    """The workbook relationship part is absent."""

    kind = "RelationshipsMissing"


class UnresolvedSheetTargetError(StructureError):
    """A declared sheet references a relationship id with no target."""

    kind = "UnresolvedSheetTarget"

    def __init__(self, message: str, relationship_id: Optional[str] = None,
                 details: Optional[str] = None):
        super().__init__(message, details)
        self.relationship_id = relationship_id


class WriteFailureError(OfficeCodecError):
    """The package writer failed."""

    kind = "WriteFailure"


class EntrySerializationError(WriteFailureError):
    """An encoder could not serialize one of its parts."""

    kind = "EntrySerializationFailure"
