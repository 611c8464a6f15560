"""
Markdown Pattern Constants

Centralized markdown markers and regex strings used for parsing resume.md.
Organized into frozen dataclasses by category for immutability and clear grouping.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class MarkdownPatterns:
    """
    Structural markers recognized at the start of a line.

    Only the subset of markdown used by resume-shaped content.
    """
    HEADING_1: str = '# '
    HEADING_2: str = '## '
    HEADING_3: str = '### '
    HEADING_4: str = '#### '
    BULLET: str = '- '
    BULLET_CHAR: str = '-'
    HORIZONTAL_RULE: str = '---'

    # Paragraph separator inside a section body
    PARAGRAPH_BREAK: str = r'\n\n+'

    # Entry separator for education (blank lines may contain whitespace)
    ENTRY_BREAK: str = r'\n\s*\n+'

    # Zero-width split point in front of each job heading
    JOB_BOUNDARY: str = r'(?=### )'


@dataclass(frozen=True)
class InlinePatterns:
    """
    Inline span patterns, applied in declaration order.

    Bold must run before italic so doubled markers are consumed first.
    """
    BOLD: str = r'(\*\*|__)(.*?)\1'
    ITALIC: str = r'(\*|_)(.*?)\1'
    LINK: str = r'\[([^\]]+)\]\(([^)]+)\)'

    # Lines that are left as raw markdown by the inline formatter
    RAW_BOLD_BULLET: str = '- **'


@dataclass(frozen=True)
class EntryPatterns:
    """
    Patterns for the structured sections (experience, education, certifications).
    """
    # **Company** | Location | Period
    BOLD_LEAD: str = r'\*\*(.+?)\*\*(.*)'
    BOLD_RUN: str = r'\*\*(.+?)\*\*'
    BOLD_RUN_ANY: str = r'\*\*(.*?)\*\*'
    BOLD_MARKER: str = '**'
    PIPE: str = '|'

    # Degree, Program (2016 - 2020)
    DEGREE_WITH_PERIOD: str = r'(.*?)\((\d{4})\s*-\s*(\d{4})\)'
    LOOSE_PERIOD: str = r'(\d{4})\s*-\s*(\d{4})'
    HONORS_PREFIX: str = 'Honors:'

    # **Name** - Issuer (Month Year)
    CERTIFICATION_DATE: str = r'\(([A-Za-z]+ \d{4})\)$'
    CERTIFICATION_ISSUER: str = r'\*\*.*?\*\*\s*[-–—]?\s*(.*?)\s*(?:\([A-Za-z]+ \d{4}\))?$'

    # Heading echoes that sometimes survive copy/paste into a section body
    EDUCATION_HEADING_ECHO: str = '## EDUCATION'
    CERTIFICATIONS_HEADING_ECHO: str = '## CERTIFICATIONS'
