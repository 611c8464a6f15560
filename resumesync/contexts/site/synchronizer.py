"""
Document synchronization.

Applies parsed resume sections to the parsed destination page. Each known
section kind has one updater; the updater locates its anchor through the
anchor contract (site_schema.yaml) and replaces the anchor's content.

A missing anchor or an empty section is skipped quietly: the page keeps
whatever it had there and the remaining sections are still updated.
"""

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

from bs4 import BeautifulSoup, Tag

from resumesync.contexts.markdown.block_formatter import format_blocks
from resumesync.contexts.markdown.entry_parser import (
    parse_certifications,
    parse_education,
    parse_experience,
)
from resumesync.contexts.markdown.markdown_patterns import EntryPatterns, MarkdownPatterns
from resumesync.contexts.markdown.nomenclature import SectionKind, section_key_name
from resumesync.contexts.markdown.section_splitter import SectionMap
from resumesync.contexts.site.logger import _log_debug, _log_info, log_section_skipped
from resumesync.contexts.site.registries import FragmentTemplateRegistry, SiteSchemaRegistry
from resumesync.contexts.site.targets import HeadingPreservingTarget, parse_fragment
from resumesync.utils.text_processing import separate_bullet_lines


@dataclass
class SyncReport:
    """
    Which sections were written into the page and which were left alone.

    Attributes:
        updated: Section names whose anchor was found and replaced
        skipped: Section names that were present in the source but not applied
    """

    updated: List[str] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)


class DocumentSynchronizer:
    """
    Writes resume sections into anchors of a parsed HTML page.

    The page (a BeautifulSoup tree) is mutated in place and owned by the
    synchronizer for the duration of sync().
    """

    def __init__(
        self,
        document: BeautifulSoup,
        schema_registry: SiteSchemaRegistry = None,
        template_registry: FragmentTemplateRegistry = None,
    ):
        self.document = document
        self.schema = schema_registry or SiteSchemaRegistry()
        self.templates = template_registry or FragmentTemplateRegistry()

        self._updaters: Dict[SectionKind, Callable[[SectionMap], bool]] = {
            SectionKind.HEADER: self.update_header,
            SectionKind.SUMMARY: lambda sections: self.update_block_section(
                SectionKind.SUMMARY, sections.get(SectionKind.SUMMARY)
            ),
            SectionKind.EXPERIENCE: lambda sections: self.update_experience(
                sections.get(SectionKind.EXPERIENCE)
            ),
            SectionKind.EDUCATION: lambda sections: self.update_education(
                sections.get(SectionKind.EDUCATION)
            ),
            SectionKind.SKILLS: lambda sections: self.update_skills(
                sections.get(SectionKind.SKILLS)
            ),
            SectionKind.CERTIFICATIONS: lambda sections: self.update_certifications(
                sections.get(SectionKind.CERTIFICATIONS)
            ),
            SectionKind.LEARNING: lambda sections: self.update_block_section(
                SectionKind.LEARNING, sections.get(SectionKind.LEARNING)
            ),
        }

        missing = set(SectionKind) - set(self._updaters)
        if missing:
            raise NotImplementedError(
                f"No updater for section kinds: {', '.join(sorted(k.value for k in missing))}"
            )

    # =========================================================================
    # DRIVER
    # =========================================================================

    def sync(self, sections: SectionMap) -> SyncReport:
        """
        Apply every populated section to the page.

        Known sections are applied in SectionKind order. Sections under
        unrecognized headings have no anchor and are reported as skipped.

        Args:
            sections: Output of split_sections()

        Returns:
            SyncReport listing updated and skipped sections
        """
        report = SyncReport()

        for kind in SectionKind:
            if kind not in sections:
                continue

            if kind is not SectionKind.HEADER and not sections.get(kind):
                log_section_skipped(kind.value, "empty section")
                report.skipped.append(kind.value)
                continue

            if self._updaters[kind](sections):
                _log_info(f"Updated {kind.value}")
                report.updated.append(kind.value)
            else:
                report.skipped.append(kind.value)

        for key in sections.bodies:
            if not isinstance(key, SectionKind):
                log_section_skipped(section_key_name(key), "no updater for this heading")
                report.skipped.append(section_key_name(key))

        return report

    # =========================================================================
    # ANCHOR LOOKUP
    # =========================================================================

    def find_sidebar_container(self, marker: str) -> Optional[Tag]:
        """
        Find the sidebar block whose heading contains marker.

        Returns:
            Parent element of the first matching sidebar heading, or None
        """
        sidebar_schema = self.schema.get("sidebar")
        sidebar = self.document.select_one(sidebar_schema["selector"])
        if sidebar is None:
            return None

        for heading in sidebar.find_all(sidebar_schema["heading_tag"]):
            if marker in heading.get_text():
                return heading.parent

        return None

    def _render_all(self, entries) -> List:
        nodes = []
        for entry in entries:
            template_name = f"{entry.kind.value}_entry"
            nodes.extend(parse_fragment(self.templates.render(template_name, entry=entry)))
        return nodes

    # =========================================================================
    # UPDATERS
    # =========================================================================

    def update_header(self, sections: SectionMap) -> bool:
        """
        Write the name (first header line) and title (second header line).

        Name and title are separate anchors; either one may be missing.
        Header lines beyond the second are ignored.
        """
        header_schema = self.schema.get("header")
        selectors = [header_schema["name_selector"], header_schema["title_selector"]]

        written = False
        for selector, text in zip(selectors, sections.header):
            anchor = self.document.select_one(selector)
            if anchor is None:
                log_section_skipped("header", f"no anchor '{selector}'")
                continue
            anchor.string = text
            written = True

        return written

    def update_block_section(self, kind: SectionKind, markdown: str) -> bool:
        """
        Replace a free-form section (summary, learning) with formatted blocks.

        The anchor is the element whose id is the section name.
        """
        section_schema = self.schema.get("sections")

        anchor = self.document.find(id=kind.value)
        if anchor is None:
            log_section_skipped(kind.value, f"no element with id '{kind.value}'")
            return False

        target = HeadingPreservingTarget.from_anchor(
            anchor, section_schema["heading_tag"], section_schema["heading_class"]
        )
        html = format_blocks(separate_bullet_lines(markdown), kind.value)
        target.replace_with_html(html)
        return True

    def update_experience(self, markdown: str) -> bool:
        """Replace the experience section with one block per job."""
        section_schema = self.schema.get("sections")
        anchor_id = self.schema.get("experience")["anchor_id"]

        anchor = self.document.find(id=anchor_id)
        if anchor is None:
            log_section_skipped("experience", f"no element with id '{anchor_id}'")
            return False

        entries = parse_experience(markdown)
        _log_debug(f"Parsed {len(entries)} experience entries")

        target = HeadingPreservingTarget.from_anchor(
            anchor, section_schema["heading_tag"], section_schema["heading_class"]
        )
        target.replace_children(self._render_all(entries))
        return True

    def update_skills(self, markdown: str) -> bool:
        """
        Replace the skills list with one item per bullet.

        Bold markers are removed; the text is kept.
        """
        selector = self.schema.get("skills")["list_selector"]

        skills_list = self.document.select_one(selector)
        if skills_list is None:
            log_section_skipped("skills", f"no anchor '{selector}'")
            return False

        nodes = []
        for line in markdown.split("\n"):
            stripped = line.strip()
            if not stripped.startswith(MarkdownPatterns.BULLET):
                continue
            skill = stripped[len(MarkdownPatterns.BULLET):].strip()
            skill = skill.replace(EntryPatterns.BOLD_MARKER, "")
            nodes.extend(parse_fragment(self.templates.render("skill_item", skill=skill)))

        HeadingPreservingTarget(skills_list).replace_children(nodes)
        return True

    def update_education(self, markdown: str) -> bool:
        """Replace the sidebar education block with one item per degree."""
        marker = self.schema.get("education")["heading_marker"]

        container = self.find_sidebar_container(marker)
        if container is None:
            log_section_skipped("education", f"no sidebar heading containing '{marker}'")
            return False

        entries = parse_education(markdown)
        _log_debug(f"Parsed {len(entries)} education entries")

        target = HeadingPreservingTarget.from_anchor(
            container, self.schema.get("sidebar")["heading_tag"]
        )
        target.replace_children(self._render_all(entries))
        return True

    def update_certifications(self, markdown: str) -> bool:
        """
        Replace the sidebar certifications list.

        The existing list is cleared and reused; if the block has no list yet,
        one is created at the end of the block. Only the first max_rendered
        certifications are shown.
        """
        cert_schema = self.schema.get("certifications")
        marker = cert_schema["heading_marker"]

        container = self.find_sidebar_container(marker)
        if container is None:
            log_section_skipped("certifications", f"no sidebar heading containing '{marker}'")
            return False

        certs_list = container.select_one(f".{cert_schema['list_class']}")
        if certs_list is None:
            certs_list = self.document.new_tag(
                cert_schema["list_tag"], attrs={"class": cert_schema["list_class"]}
            )
            container.append(certs_list)

        entries = parse_certifications(markdown)
        shown = entries[: cert_schema["max_rendered"]]
        _log_debug(f"Parsed {len(entries)} certifications, rendering {len(shown)}")

        HeadingPreservingTarget(certs_list).replace_children(self._render_all(shown))
        return True
