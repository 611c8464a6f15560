"""
Text processing utilities shared by the parsing and site contexts.
"""

import difflib
import re
from typing import List

# Blank-line run separating paragraphs
PARAGRAPH_BREAK = r"\n\n+"
BULLET = "- "


def split_paragraphs(content: str, pattern: str = PARAGRAPH_BREAK) -> List[str]:
    """
    Split text into paragraph candidates on runs of blank lines.

    Candidates are returned untrimmed; callers decide how to treat empties.

    Args:
        content: Raw multi-line text
        pattern: Regex matching a paragraph separator

    Returns:
        List of paragraph candidates in source order

    Example:
        >>> split_paragraphs("one\\n\\n\\ntwo")
        ['one', 'two']
    """
    return re.split(pattern, content)


def collapse_whitespace(text: str, replacement: str = " ") -> str:
    """
    Replace every whitespace run with a single replacement string.

    Example:
        >>> collapse_whitespace("core   open source", "_")
        'core_open_source'
    """
    return re.sub(r"\s+", replacement, text)


def separate_bullet_lines(content: str, bullet: str = BULLET) -> str:
    """
    Insert a paragraph break before every bullet line that follows another line.

    A bullet directly under a sentence ("Intro\\n- a") becomes its own
    paragraph candidate instead of being folded into the sentence's paragraph.

    Example:
        >>> separate_bullet_lines("Intro\\n- a\\n- b")
        'Intro\\n\\n- a\\n\\n- b'
    """
    return content.replace(f"\n{bullet}", f"\n\n{bullet}")


def unified_text_diff(before: str, after: str, from_name: str, to_name: str) -> List[str]:
    """
    Produce unified diff lines between two versions of a document.

    Args:
        before: Original text
        after: Updated text
        from_name: Label for the original
        to_name: Label for the update

    Returns:
        List of diff lines (empty if texts are identical)
    """
    if before == after:
        return []

    return list(
        difflib.unified_diff(
            before.split("\n"),
            after.split("\n"),
            fromfile=from_name,
            tofile=to_name,
            lineterm="",
        )
    )
