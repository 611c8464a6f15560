"""
Structured records parsed from the experience, education and certifications sections.

Parsers in entry_parser.py produce these; the site context renders them.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class RecordKind(Enum):
    """Record shapes; each value names its fragment template (<value>_entry)."""

    EXPERIENCE = "experience"
    EDUCATION = "education"
    CERTIFICATION = "certification"


@dataclass
class ExperienceEntry:
    """
    One job under Professional Experience.

    Attributes:
        title: Job title from the ### heading (None if the chunk had no heading)
        organization: Company plus location qualifiers, joined with " | "
        period: Date range from the pipe-delimited tail of the company line
        separate_period: Date range written on its own line under the company line
        bullets: Responsibility bullets, marker removed
    """

    title: Optional[str] = None
    organization: Optional[str] = None
    period: Optional[str] = None
    separate_period: Optional[str] = None
    bullets: List[str] = field(default_factory=list)

    kind = RecordKind.EXPERIENCE

    @property
    def date_range(self) -> Optional[str]:
        """Pipe-delimited date if present, otherwise the separate-line period."""
        return self.period or self.separate_period


@dataclass
class EducationEntry:
    """
    One degree under Education.

    Attributes:
        institution: Institution name from the bold run on the first line
        degree: Degree/program text
        period: "YYYY - YYYY" when found on the degree line
        honors: Full honors line, including its "Honors:" prefix
    """

    institution: str
    degree: str
    period: Optional[str] = None
    honors: Optional[str] = None

    kind = RecordKind.EDUCATION


@dataclass
class CertificationEntry:
    """
    One certification bullet.

    The issuer is parsed for completeness but is not part of the rendered output.
    """

    name: str
    date: Optional[str] = None
    issuer: Optional[str] = None

    kind = RecordKind.CERTIFICATION
