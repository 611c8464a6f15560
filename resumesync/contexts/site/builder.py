"""
Site build pipeline.

Reads resume.md and index.html, applies the markdown sections to the page,
and writes the page back. Any I/O failure aborts the whole run; content that
does not fit the expected shapes is dropped section by section instead.
"""

import os
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from bs4 import BeautifulSoup, Doctype, Tag
from bs4.dammit import EntitySubstitution
from bs4.formatter import HTMLFormatter
from dotenv import load_dotenv

from resumesync.contexts.markdown.section_splitter import split_sections
from resumesync.contexts.site.exceptions import (
    DocumentReadError,
    DocumentWriteError,
    SiteSyncError,
    SourceReadError,
)
from resumesync.contexts.site.logger import _log_debug, _log_error, _log_info, log_build_result
from resumesync.contexts.site.registries import FragmentTemplateRegistry, SiteSchemaRegistry
from resumesync.contexts.site.synchronizer import DocumentSynchronizer
from resumesync.utils.text_processing import unified_text_diff

load_dotenv()

RESUME_MARKDOWN_PATH = Path(os.getenv("RESUME_MARKDOWN_PATH", "resume.md"))
SITE_HTML_PATH = Path(os.getenv("SITE_HTML_PATH", "index.html"))


class PageFormatter(HTMLFormatter):
    """
    Output formatter that leaves untouched markup as it was written.

    Minimal escaping, no "/>" on void elements, and attributes in source
    order (the stock formatter sorts them).
    """

    def __init__(self):
        super().__init__(
            entity_substitution=EntitySubstitution.substitute_xml,
            void_element_close_prefix=None,
        )

    def attributes(self, tag):
        return list(tag.attrs.items())


PAGE_FORMATTER = PageFormatter()


@dataclass
class BuildResult:
    """
    Result of a synchronization run.

    Attributes:
        success: Whether the page was updated (or, for dry runs, would be)
        output_path: Where the page was written (None for dry runs and failures)
        updated_sections: Sections written into the page
        skipped_sections: Sections present in the source but not applied
        warnings: Notes about discarded source content
        diff: Unified diff of the page change (dry runs only)
        error: Error message if the run failed
    """

    success: bool
    output_path: Optional[Path] = None
    updated_sections: List[str] = field(default_factory=list)
    skipped_sections: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    diff: List[str] = field(default_factory=list)
    error: Optional[str] = None


def read_source(path: Path) -> str:
    """Read the markdown resume as UTF-8."""
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SourceReadError("Could not read markdown resume", path, e) from e


def read_document(path: Path) -> str:
    """Read the destination page as UTF-8."""
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise DocumentReadError("Could not read HTML page", path, e) from e


def write_document(path: Path, html: str) -> None:
    """Write the updated page as UTF-8."""
    try:
        path.write_text(html, encoding="utf-8")
    except OSError as e:
        raise DocumentWriteError("Could not write HTML page", path, e) from e


def serialize_document(document: BeautifulSoup) -> str:
    """
    Serialize the page, keeping its doctype and untouched markup.

    bs4 writes a newline after the doctype on its own; the whitespace that
    followed it in the source is a separate node, so that newline is dropped.
    """
    parts = []
    for node in document.contents:
        if isinstance(node, Doctype):
            parts.append(node.output_ready(PAGE_FORMATTER).rstrip("\n"))
        elif isinstance(node, Tag):
            parts.append(node.decode(formatter=PAGE_FORMATTER))
        else:
            parts.append(node.output_ready(PAGE_FORMATTER))
    return "".join(parts)


def update_html_from_markdown(
    html: str,
    markdown: str,
    schema_registry: SiteSchemaRegistry = None,
    template_registry: FragmentTemplateRegistry = None,
) -> tuple[str, BuildResult]:
    """
    Apply a markdown resume to an HTML page, in memory.

    Args:
        html: Destination page source
        markdown: Markdown resume source
        schema_registry: Anchor contract (defaults to the packaged schema)
        template_registry: Fragment templates (defaults to the packaged templates)

    Returns:
        (updated_html, result) where result lists updated and skipped sections
    """
    document = BeautifulSoup(html, "html.parser")
    sections = split_sections(markdown)

    synchronizer = DocumentSynchronizer(document, schema_registry, template_registry)
    report = synchronizer.sync(sections)

    result = BuildResult(
        success=True,
        updated_sections=report.updated,
        skipped_sections=report.skipped,
        warnings=sections.warnings,
    )
    return serialize_document(document), result


def build_site(
    source: Path = RESUME_MARKDOWN_PATH,
    target: Path = SITE_HTML_PATH,
    output: Optional[Path] = None,
    dry_run: bool = False,
    schema_path: Optional[Path] = None,
) -> BuildResult:
    """
    Regenerate the resume fragments of an HTML page from a markdown resume.

    Args:
        source: Markdown resume
        target: HTML page to update
        output: Where to write the updated page (default: overwrite target)
        dry_run: Compute the change and its diff without writing anything
        schema_path: Alternative anchor contract YAML

    Returns:
        BuildResult. success is False if reading or writing failed; the
        target is left untouched in that case.
    """
    start_time = time.time()
    output = output or target

    try:
        _log_info("Reading Markdown and HTML files...")
        markdown = read_source(source)
        html = read_document(target)

        _log_info("Updating HTML with markdown content...")
        updated_html, result = update_html_from_markdown(
            html, markdown, schema_registry=SiteSchemaRegistry(schema_path)
        )

        for warning in result.warnings:
            _log_debug(warning)

        if dry_run:
            result.diff = unified_text_diff(html, updated_html, str(target), str(output))
            _log_info(f"Dry run: {len(result.diff)} diff lines, nothing written")
        else:
            write_document(output, updated_html)
            result.output_path = output

    except SiteSyncError as e:
        _log_error(e.message)
        result = BuildResult(success=False, error=str(e))

    log_build_result(result, time.time() - start_time)
    return result
