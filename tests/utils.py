"""Test utilities for the bvmarkup test suite.

Helpers for parsing markup fragments and inspecting the children of
transformed nodes.
"""

from bs4.element import Tag

from bvmarkup.constants import SLOT_NAME_ATTRIBUTE
from bvmarkup.nodes import iter_child_tags, parse_html


def node_from(markup: str, name: str | None = None) -> Tag:
    """Parse ``markup`` and return its first element (or first ``name`` element)."""
    soup = parse_html(markup)
    return soup.find(name) if name else soup.find(True)


def child_tags(node: Tag) -> list[Tag]:
    """Return the direct element children of ``node``."""
    return list(iter_child_tags(node))


def slot_children(node: Tag) -> dict[str, Tag]:
    """Map slot names to the normalized slot children of ``node``, in order."""
    return {
        child[SLOT_NAME_ATTRIBUTE]: child for child in iter_child_tags(node) if SLOT_NAME_ATTRIBUTE in child.attrs
    }
