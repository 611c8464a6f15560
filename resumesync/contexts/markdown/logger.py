"""
Markdown context logger.

Provides logging interface for the markdown context with automatic [markdown] prefix.
All markdown modules should import from this module, not from utils.logger directly.
"""

from loguru import logger

CONTEXT_PREFIX = "[markdown]"


def _log_info(message: str) -> None:
    """Log info message with [markdown] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [markdown] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_sections_found(section_names: list[str], header_lines: int) -> None:
    """Log the outcome of splitting the source into sections."""
    _log_info(f"Found {len(section_names)} sections ({header_lines} header lines)")
    for name in section_names:
        _log_debug(f"  section: {name}")


def log_record_dropped(section_name: str, reason: str, snippet: str) -> None:
    """Log a record that was skipped because it did not fit its section grammar."""
    preview = snippet if len(snippet) <= 60 else snippet[:57] + "..."
    _log_debug(f"Dropped {section_name} record ({reason}): '{preview}'")
