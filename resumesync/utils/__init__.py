"""
Shared utilities for resumesync.

Common functionality used across contexts:
- Logger setup
- Text processing
"""

from resumesync.utils.logger import setup_logger
from resumesync.utils.text_processing import collapse_whitespace, split_paragraphs

__all__ = ["setup_logger", "collapse_whitespace", "split_paragraphs"]
