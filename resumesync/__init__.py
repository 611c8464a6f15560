"""
resumesync - keep a hand-authored resume page in sync with a markdown resume

Reads resume.md and regenerates the resume fragments of index.html in place,
leaving every other part of the page untouched.

Architecture:
- Markdown Context: Splitting the source into sections and parsing section bodies
- Site Context: Locating anchors in the destination page and replacing their content
"""

__version__ = "0.1.0"
