"""
Section splitting for resume.md.

Level-1 headings carry the header (name, then title). Each level-2 heading
opens a section whose body runs until the next level-2 heading. Text that is
not inside any level-2 section is discarded.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from resumesync.contexts.markdown.logger import _log_debug, log_sections_found
from resumesync.contexts.markdown.markdown_patterns import MarkdownPatterns
from resumesync.contexts.markdown.nomenclature import (
    SectionKey,
    SectionKind,
    section_key_for_heading,
    section_key_name,
)


@dataclass
class SectionMap:
    """
    Sections of a resume in order of first appearance.

    Attributes:
        header: Level-1 heading texts in source order (name, title, ...)
        bodies: Section key -> trimmed markdown body. A repeated heading
            overwrites the earlier body.
        warnings: Notes about discarded content
    """

    header: List[str] = field(default_factory=list)
    bodies: Dict[SectionKey, str] = field(default_factory=dict)
    warnings: List[str] = field(default_factory=list)

    def get(self, key: SectionKey) -> Optional[str]:
        """Body for a section, or None if the heading never appeared."""
        return self.bodies.get(key)

    def __contains__(self, key: SectionKey) -> bool:
        if key is SectionKind.HEADER:
            return bool(self.header)
        return key in self.bodies

    def section_names(self) -> List[str]:
        return [section_key_name(key) for key in self.bodies]


def split_sections(markdown: str) -> SectionMap:
    """
    Split resume markdown into header lines and section bodies.

    Args:
        markdown: Full text of resume.md

    Returns:
        SectionMap with the header lines and one body per level-2 heading.
        Bodies are trimmed. The final section is kept only if its body is
        non-empty; earlier sections are kept even when empty.
    """
    sections = SectionMap()
    current_section: Optional[SectionKey] = None
    content: List[str] = []
    preamble: List[str] = []

    for line in markdown.split("\n"):
        if line.startswith(MarkdownPatterns.HEADING_1):
            sections.header.append(line[len(MarkdownPatterns.HEADING_1):].strip())
            continue

        if line.startswith(MarkdownPatterns.HEADING_2):
            if current_section is not None:
                sections.bodies[current_section] = _join_body(content)
                content = []

            current_section = section_key_for_heading(line[len(MarkdownPatterns.HEADING_2):])
            _log_debug(f"Heading '{line.strip()}' -> {section_key_name(current_section)}")
            continue

        if current_section is not None:
            content.append(line)
        else:
            preamble.append(line)

    if current_section is not None:
        body = _join_body(content)
        if body:
            sections.bodies[current_section] = body

    preamble_text = "\n".join(preamble).strip()
    if preamble_text:
        sections.warnings.append(
            f"Discarded content before first section heading: '{preamble_text[:80]}...'"
            if len(preamble_text) > 80
            else f"Discarded content before first section heading: '{preamble_text}'"
        )

    log_sections_found(sections.section_names(), len(sections.header))
    return sections


def _join_body(lines: List[str]) -> str:
    return "\n".join(lines).strip()
