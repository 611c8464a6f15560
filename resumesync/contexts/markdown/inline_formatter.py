"""
Inline span formatting.

Converts bold, italic and link markdown on a single line into inline HTML.
No block-level wrapping is added and no escaping is done; callers insert the
result as markup.
"""

import re

from resumesync.contexts.markdown.markdown_patterns import InlinePatterns


def format_inline(text: str) -> str:
    """
    Convert inline markdown spans to HTML.

    Order is fixed: bold (``**x**`` / ``__x__``), then italic (``*x*`` / ``_x_``),
    then links (``[label](url)``). Lines starting with ``- **`` are raw bullet
    lines that their caller re-splits itself, so they are returned untouched.

    Args:
        text: One line or paragraph of markdown

    Returns:
        Text with inline spans converted

    Example:
        >>> format_inline("**Bold** and *italic* and [x](http://y)")
        '<strong>Bold</strong> and <em>italic</em> and <a href="http://y">x</a>'
        >>> format_inline("- **Foo**")
        '- **Foo**'
    """
    if text.startswith(InlinePatterns.RAW_BOLD_BULLET):
        return text

    text = re.sub(InlinePatterns.BOLD, r"<strong>\2</strong>", text)
    text = re.sub(InlinePatterns.ITALIC, r"<em>\2</em>", text)
    text = re.sub(InlinePatterns.LINK, r'<a href="\2">\1</a>', text)

    return text
