"""
Parsers for the sections that do not fit the generic block model.

Each parser takes one section body (as produced by split_sections) and returns
records in source order. Records that do not fit their grammar are dropped
and logged at DEBUG; nothing here raises on malformed content.

Expected shapes:

    Experience                      Education
    ----------                      ---------
    ### Title                       **Institution**
    **Company** | Location | Dates  Degree, Program (2016 - 2020)
                                    Honors: Cum Laude
    - Bullet
    - Bullet                        Certifications
                                    --------------
                                    - **Name** - Issuer (Month Year)
"""

import re
from typing import List, Optional, Tuple

from resumesync.contexts.markdown.entry_data_structure import (
    CertificationEntry,
    EducationEntry,
    ExperienceEntry,
)
from resumesync.contexts.markdown.logger import log_record_dropped
from resumesync.contexts.markdown.markdown_patterns import EntryPatterns, MarkdownPatterns


# =============================================================================
# EXPERIENCE
# =============================================================================


def split_company_line(line: str) -> Tuple[str, Optional[str]]:
    """
    Split a company line into (organization, date range).

    The bold run is the company. The remainder is split on "|"; the last
    non-empty segment is the date range and the others are location
    qualifiers appended to the company with " | ".

    Args:
        line: Trimmed company line

    Returns:
        (organization, period). period is None when the line has no pipe or
        the bold run is missing, in which case organization is the line as written.

    Example:
        >>> split_company_line("**Acme** | Remote | 2020 - 2022")
        ('Acme | Remote', '2020 - 2022')
        >>> split_company_line("**Acme** (contract)")
        ('Acme (contract)', None)
    """
    match = re.search(EntryPatterns.BOLD_LEAD, line)
    if not match:
        return line, None

    company = match.group(1).strip()
    rest = match.group(2).strip()
    parts = rest.split(EntryPatterns.PIPE)

    if len(parts) < 2:
        return company + (f" {rest}" if rest else ""), None

    segments = [part.strip() for part in parts if part.strip()]
    if not segments:
        return company, None

    period = segments[-1]
    location = " | ".join(segments[:-1])
    organization = f"{company} | {location}" if location else company
    return organization, period


def parse_experience_entry(chunk: str) -> Optional[ExperienceEntry]:
    """
    Parse one job chunk (starting at its ### heading).

    Line layout:
        0: ### Title
        1: company line (see split_company_line)
        2: legacy period line, used only when line 1 carried no date
        3+: bullets
    """
    if not chunk.strip():
        return None

    lines = chunk.split("\n")
    entry = ExperienceEntry()

    if lines[0].startswith(MarkdownPatterns.HEADING_3):
        entry.title = lines[0][len(MarkdownPatterns.HEADING_3):].strip()

    if len(lines) > 1 and lines[1].strip():
        entry.organization, entry.period = split_company_line(lines[1].strip())

    if entry.period is None and len(lines) > 2:
        candidate = lines[2].strip()
        if candidate and not candidate.startswith(MarkdownPatterns.BULLET):
            entry.separate_period = candidate

    for line in lines[3:]:
        stripped = line.strip()
        if stripped.startswith(MarkdownPatterns.BULLET):
            entry.bullets.append(stripped[len(MarkdownPatterns.BULLET):].strip())

    return entry


def parse_experience(markdown: str) -> List[ExperienceEntry]:
    """Parse the Professional Experience body into one entry per ### heading."""
    entries = []
    for chunk in re.split(MarkdownPatterns.JOB_BOUNDARY, markdown):
        entry = parse_experience_entry(chunk)
        if entry is not None:
            entries.append(entry)
    return entries


# =============================================================================
# EDUCATION
# =============================================================================


def split_degree_line(line: str) -> Tuple[str, Optional[str]]:
    """
    Split a degree line into (degree, period).

    Example:
        >>> split_degree_line("BS, Computer Science (2016 - 2020)")
        ('BS, Computer Science', '2016 - 2020')
        >>> split_degree_line("MBA 2019-2021, evening program")
        ('MBA 2019-2021, evening program', '2019 - 2021')
    """
    match = re.search(EntryPatterns.DEGREE_WITH_PERIOD, line)
    if match:
        return match.group(1).strip(), f"{match.group(2)} - {match.group(3)}"

    loose = re.search(EntryPatterns.LOOSE_PERIOD, line)
    if loose:
        return line, f"{loose.group(1)} - {loose.group(2)}"

    return line, None


def parse_education_entry(chunk: str) -> Optional[EducationEntry]:
    """
    Parse one blank-line separated education chunk.

    Returns None unless both the institution and the degree are present.
    """
    if not chunk.strip() or chunk.strip() == EntryPatterns.EDUCATION_HEADING_ECHO:
        return None

    lines = [line.strip() for line in chunk.split("\n")]
    if len(lines) < 2:
        log_record_dropped("education", "no degree line", chunk.strip())
        return None

    institution_match = re.search(EntryPatterns.BOLD_RUN, lines[0])
    institution = institution_match.group(1) if institution_match else ""
    degree, period = split_degree_line(lines[1])

    honors = None
    if len(lines) > 2 and lines[2].startswith(EntryPatterns.HONORS_PREFIX):
        honors = lines[2]

    if not institution or not degree:
        log_record_dropped("education", "missing institution or degree", chunk.strip())
        return None

    return EducationEntry(institution=institution, degree=degree, period=period, honors=honors)


def parse_education(markdown: str) -> List[EducationEntry]:
    """Parse the Education body into entries, dropping incomplete chunks."""
    entries = []
    for chunk in re.split(MarkdownPatterns.ENTRY_BREAK, markdown):
        entry = parse_education_entry(chunk)
        if entry is not None:
            entries.append(entry)
    return entries


# =============================================================================
# CERTIFICATIONS
# =============================================================================


def parse_certification_line(line: str) -> Optional[CertificationEntry]:
    """
    Parse one trimmed certification bullet.

    Example:
        >>> parse_certification_line("- **CKA** - CNCF (March 2023)")
        CertificationEntry(name='CKA', date='March 2023', issuer='CNCF')
    """
    if (
        not line
        or line == EntryPatterns.CERTIFICATIONS_HEADING_ECHO
        or line == MarkdownPatterns.HORIZONTAL_RULE
        or not line.startswith(MarkdownPatterns.BULLET_CHAR)
    ):
        return None

    cert_line = line[len(MarkdownPatterns.BULLET_CHAR):].strip()

    name_match = re.search(EntryPatterns.BOLD_RUN_ANY, cert_line)
    if not name_match:
        log_record_dropped("certifications", "no bold name", cert_line)
        return None

    date_match = re.search(EntryPatterns.CERTIFICATION_DATE, cert_line)
    issuer_match = re.search(EntryPatterns.CERTIFICATION_ISSUER, cert_line)

    return CertificationEntry(
        name=name_match.group(1).strip(),
        date=date_match.group(1) if date_match else None,
        issuer=(issuer_match.group(1) or None) if issuer_match else None,
    )


def parse_certifications(markdown: str) -> List[CertificationEntry]:
    """
    Parse every certification bullet in the body.

    All lines are scanned and every valid bullet is returned; how many of
    them reach the page is decided by the site's rendering cap.
    """
    entries = []
    for line in markdown.split("\n"):
        entry = parse_certification_line(line.strip())
        if entry is not None:
            entries.append(entry)
    return entries
