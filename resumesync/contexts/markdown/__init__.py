"""
Markdown Context

Responsibilities:
- Splits resume.md into header lines and named sections
- Formats free-form section bodies (summary, learning) as HTML blocks
- Parses experience, education and certifications into structured records

Owns: The markdown grammar of resume.md
Never: Reads or writes the destination page
"""

from resumesync.contexts.markdown.block_formatter import ListRunMachine, format_blocks
from resumesync.contexts.markdown.entry_data_structure import (
    CertificationEntry,
    EducationEntry,
    ExperienceEntry,
    RecordKind,
)
from resumesync.contexts.markdown.entry_parser import (
    parse_certifications,
    parse_education,
    parse_experience,
)
from resumesync.contexts.markdown.inline_formatter import format_inline
from resumesync.contexts.markdown.nomenclature import SectionKind, section_key_for_heading
from resumesync.contexts.markdown.section_splitter import SectionMap, split_sections

__all__ = [
    # Section splitting
    "split_sections",
    "SectionMap",
    "SectionKind",
    "section_key_for_heading",
    # Formatting
    "format_inline",
    "format_blocks",
    "ListRunMachine",
    # Entry parsing
    "parse_experience",
    "parse_education",
    "parse_certifications",
    "ExperienceEntry",
    "EducationEntry",
    "CertificationEntry",
    "RecordKind",
]
