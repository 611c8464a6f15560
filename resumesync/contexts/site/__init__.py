"""
Site Context

Responsibilities:
- Loads and serializes the hand-authored resume page
- Locates anchors through the anchor contract (site_schema.yaml)
- Renders structured records through fragment templates
- Replaces anchor content while keeping headings and unrelated markup

Owns: The destination page for the duration of a run, the anchor contract
Never: Interprets markdown grammar (delegates to the markdown context)
"""

from resumesync.contexts.site.builder import BuildResult, build_site, update_html_from_markdown
from resumesync.contexts.site.exceptions import (
    DocumentReadError,
    DocumentWriteError,
    SiteSyncError,
    SourceReadError,
)
from resumesync.contexts.site.registries import FragmentTemplateRegistry, SiteSchemaRegistry
from resumesync.contexts.site.synchronizer import DocumentSynchronizer, SyncReport
from resumesync.contexts.site.targets import HeadingPreservingTarget

__all__ = [
    # Pipeline
    "build_site",
    "update_html_from_markdown",
    "BuildResult",
    # Synchronization
    "DocumentSynchronizer",
    "SyncReport",
    "HeadingPreservingTarget",
    # Registries
    "SiteSchemaRegistry",
    "FragmentTemplateRegistry",
    # Errors
    "SiteSyncError",
    "SourceReadError",
    "DocumentReadError",
    "DocumentWriteError",
]
