"""
Replacement targets in the destination page.

Every section update has the same shape: find an anchor element, keep its
heading, throw away everything else inside it, append freshly rendered
nodes. HeadingPreservingTarget implements that once.
"""

from typing import Iterable, List, Optional, Union

from bs4 import BeautifulSoup, NavigableString, Tag

Fragment = Union[Tag, NavigableString]


def parse_fragment(html: str) -> List[Fragment]:
    """
    Parse an HTML snippet into top-level nodes ready to append elsewhere.

    Example:
        >>> [str(n) for n in parse_fragment("<p>a</p><p>b</p>")]
        ['<p>a</p>', '<p>b</p>']
    """
    fragment = BeautifulSoup(html, "html.parser")
    return [node.extract() for node in list(fragment.contents)]


def add_class(tag: Tag, class_name: str) -> None:
    """Add a CSS class to a tag if it isn't already there."""
    classes = tag.get("class", [])
    if isinstance(classes, str):
        classes = classes.split()
    if class_name not in classes:
        tag["class"] = list(classes) + [class_name]


class HeadingPreservingTarget:
    """
    An anchor whose children can be replaced while keeping its heading.

    Attributes:
        container: Anchor element whose children are replaced
        heading: Element re-attached as the first child after clearing (optional)
    """

    def __init__(self, container: Tag, heading: Optional[Tag] = None):
        self.container = container
        self.heading = heading

    @classmethod
    def from_anchor(
        cls, container: Tag, heading_tag: Optional[str] = None, heading_class: Optional[str] = None
    ) -> "HeadingPreservingTarget":
        """
        Build a target from an anchor, keeping the first heading_tag found inside it.

        Args:
            container: Anchor element
            heading_tag: Tag name of the heading to keep (e.g., 'h2'); None keeps nothing
            heading_class: Extra class added to the kept heading
        """
        heading = container.find(heading_tag) if heading_tag else None
        if heading is not None and heading_class:
            add_class(heading, heading_class)
        return cls(container, heading)

    def replace_children(self, nodes: Iterable[Fragment]) -> None:
        """
        Clear the container, re-attach the heading, then append nodes in order.

        Args:
            nodes: Parsed nodes (see parse_fragment)
        """
        if self.heading is not None:
            self.heading.extract()

        self.container.clear()

        if self.heading is not None:
            self.container.append(self.heading)

        for node in nodes:
            self.container.append(node)

    def replace_with_html(self, html: str) -> None:
        """Replace children with the nodes parsed from an HTML snippet."""
        self.replace_children(parse_fragment(html))
