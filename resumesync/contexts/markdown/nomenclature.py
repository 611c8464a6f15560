"""
Section nomenclature for the Markdown context.

Maps level-2 heading text in resume.md onto the fixed set of resume sections
the site knows how to render. Headings outside the table keep a derived
identifier so their content is still available to callers.

Examples:
    >>> section_key_for_heading("Professional Summary")
    <SectionKind.SUMMARY: 'summary'>
    >>> section_key_for_heading("Open Source   Work")
    'open_source_work'
"""

from enum import Enum
from typing import Union

from resumesync.utils.text_processing import collapse_whitespace


class SectionKind(Enum):
    """Logical resume section with a dedicated updater on the site."""

    HEADER = "header"
    SUMMARY = "summary"
    EXPERIENCE = "experience"
    EDUCATION = "education"
    SKILLS = "skills"
    CERTIFICATIONS = "certifications"
    LEARNING = "learning"


# Either a known section or the derived identifier of an unrecognized heading
SectionKey = Union[SectionKind, str]

# Lower-cased heading text -> section
HEADING_TO_SECTION = {
    "professional summary": SectionKind.SUMMARY,
    "professional experience": SectionKind.EXPERIENCE,
    "education": SectionKind.EDUCATION,
    "skills": SectionKind.SKILLS,
    "technical skills": SectionKind.SKILLS,
    "certifications": SectionKind.CERTIFICATIONS,
    "continuous learning": SectionKind.LEARNING,
}

# Sections fed by a level-2 body; the header comes from level-1 lines only
BODY_SECTION_VALUES = {kind.value for kind in SectionKind if kind is not SectionKind.HEADER}


def section_key_for_heading(heading: str) -> SectionKey:
    """
    Resolve a level-2 heading to its section key.

    Args:
        heading: Heading text without the marker (case and padding ignored)

    Returns:
        SectionKind for known headings, otherwise the lower-cased heading with
        whitespace runs collapsed to underscores. A derived identifier that
        names a body section (e.g. "## Summary") resolves to that section.
    """
    normalized = heading.strip().lower()
    if normalized in HEADING_TO_SECTION:
        return HEADING_TO_SECTION[normalized]

    derived = collapse_whitespace(normalized, "_")
    if derived in BODY_SECTION_VALUES:
        return SectionKind(derived)
    return derived


def section_key_name(key: SectionKey) -> str:
    """Plain string form of a section key, for logging and reports."""
    return key.value if isinstance(key, SectionKind) else key
