"""
HTML normalizer - turns lightweight HTML (or plain text) into paragraphs.

Handles the markup produced by the document decoder (``<p>`` blocks with
``<br />`` line breaks) as well as hand-written input. Block-level closing
tags end a paragraph, every other tag is dropped and entities are unescaped.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from html import unescape
from typing import List

logger = logging.getLogger(__name__)

BLOCK_TAGS = r"p|div|section|li|h[1-6]|tr"


@dataclass(frozen=True)
class HTMLNormalizer:
    """
    Compiled normalization rules.

    Build once and share; instances are immutable and safe to use from many
    threads at the same time.

    Attributes:
        line_joiner: Joins consecutive non-blank lines of one paragraph.
            ``"\\n"`` keeps them as explicit line breaks, ``" "`` folds them
            into a single line.
    """

    line_joiner: str = "\n"
    br_pattern: re.Pattern = field(default=re.compile(r"(?i)<br\s*/?>"), repr=False)
    closing_block_pattern: re.Pattern = field(
        default=re.compile(rf"(?i)</({BLOCK_TAGS})\s*>"), repr=False
    )
    opening_block_pattern: re.Pattern = field(
        default=re.compile(rf"(?i)<({BLOCK_TAGS})\b[^>]*>"), repr=False
    )
    generic_tag_pattern: re.Pattern = field(default=re.compile(r"(?s)<[^>]+>"), repr=False)

    def normalize(self, content: str) -> str:
        """
        Reduce markup to plain text with ``\\n`` line breaks and ``\\n\\n``
        paragraph separators.
        """
        text = content.replace("\r\n", "\n").replace("\r", "\n")
        text = self.br_pattern.sub("\n", text)
        text = self.closing_block_pattern.sub("\n\n", text)
        text = self.opening_block_pattern.sub("", text)
        text = self.generic_tag_pattern.sub("", text)
        return unescape(text)

    def to_paragraphs(self, content: str) -> List[str]:
        """
        Split content into paragraphs.

        Args:
            content: HTML fragment or plain text

        Returns:
            Paragraph strings; at least one, possibly empty
        """
        paragraphs: List[str] = []
        current: List[str] = []
        for line in self.normalize(content or "").split("\n"):
            stripped = line.strip()
            if stripped:
                current.append(stripped)
            elif current:
                paragraphs.append(self.line_joiner.join(current))
                current = []
        if current:
            paragraphs.append(self.line_joiner.join(current))

        if not paragraphs:
            paragraphs.append("")
        logger.debug(f"Normalized input into {len(paragraphs)} paragraphs")
        return paragraphs


DEFAULT_NORMALIZER = HTMLNormalizer()

SINGLE_LINE_NORMALIZER = HTMLNormalizer(line_joiner=" ")
