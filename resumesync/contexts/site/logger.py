"""
Site context logger.

Provides logging interface for the site context with automatic [site] prefix.
All site modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from resumesync.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[site]"


def setup_site_logger(log_dir: Path, source: Path, target: Path, verbose: bool = False) -> Path:
    """
    Setup logger for a synchronization run.

    Args:
        log_dir: Directory for this run
        source: Markdown resume being read
        target: Page being updated
        verbose: Echo DEBUG messages to the console as well

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="site",
        log_dir=log_dir,
        extra_provenance={"Source": source, "Target": target},
        console_level="DEBUG" if verbose else "INFO",
    )


# Wrapper functions with automatic [site] prefix


def _log_info(message: str) -> None:
    """Log info message with [site] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [site] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [site] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [site] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_section_skipped(section_name: str, reason: str) -> None:
    """Sections without an anchor or without content are skipped quietly."""
    _log_debug(f"Skipped {section_name}: {reason}")


def log_build_result(result, elapsed_time: float) -> None:
    """
    Log the outcome of a synchronization run.

    Args:
        result: BuildResult from build_site()
        elapsed_time: Time taken
    """
    if result.success:
        _log_success(f"Successfully updated HTML from Markdown! ({elapsed_time:.2f}s)")
        _log_info(f"  Updated: {', '.join(result.updated_sections) or '(none)'}")
        if result.output_path:
            _log_info(f"  Output: {result.output_path}")
    else:
        _log_error(f"Error converting Markdown to HTML ({elapsed_time:.2f}s)")
        _log_error(f"  Error: {result.error}")
