#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/bvmarkup/nodes.py
"""Helpers for working with BeautifulSoup tags as component nodes.

A node is a :class:`bs4.element.Tag`: ``.name`` is the tag name, ``.attrs``
the insertion-ordered attribute mapping and ``.children`` the ordered
children. Only element children count as "direct children" here; text and
comments are never slot carriers.
"""

from __future__ import annotations

from typing import Iterable, Iterator, Optional, Tuple

from bs4 import BeautifulSoup
from bs4.dammit import EntitySubstitution
from bs4.element import PageElement, Tag
from bs4.formatter import HTMLFormatter

from bvmarkup.constants import DEFAULT_HTML_PARSER, SLOT_SHORTHAND_PREFIX, SLOT_TEMPLATE_TAG


class InsertionOrderFormatter(HTMLFormatter):
    """Minimal HTML formatter that keeps attributes in insertion order.

    bs4's default formatters sort attributes alphabetically; component
    output keeps the order in which attributes were written or added.
    """

    def __init__(self) -> None:
        super().__init__(entity_substitution=EntitySubstitution.substitute_xml)

    def attributes(self, tag: Tag) -> Iterable[Tuple[str, Optional[str]]]:
        if tag.attrs is None:
            return []
        return list(tag.attrs.items())


INSERTION_ORDER_FORMATTER = InsertionOrderFormatter()


def parse_html(markup: str) -> BeautifulSoup:
    """Parse markup so that every attribute value stays a plain string.

    ``multi_valued_attributes=None`` keeps ``class`` as a single string,
    and the ``html.parser`` builder accepts ``#name`` attribute names.
    ``string_containers={}`` stores text inside ``<template>`` as ordinary
    strings, so slot content stays visible to ``get_text()`` after the
    template is renamed.
    """
    return BeautifulSoup(markup, DEFAULT_HTML_PARSER, multi_valued_attributes=None, string_containers={})


def serialize_html(node: Tag) -> str:
    """Serialize a parsed document or tag, keeping attribute order."""
    return node.decode(formatter=INSERTION_ORDER_FORMATTER)


def iter_child_tags(node: Tag) -> Iterator[Tag]:
    """Yield the direct element children of ``node``."""
    for child in node.children:
        if isinstance(child, Tag):
            yield child


def get_shorthand_slot_name(node: PageElement) -> str | None:
    """Return the slot name of a ``#name`` shorthand attribute on ``node``.

    When a tag carries several shorthand attributes the first one in
    attribute order wins. A bare ``#`` is not a slot.

    Examples
    --------
    >>> tag = parse_html('<template #footer>Bye</template>').template
    >>> get_shorthand_slot_name(tag)
    'footer'

    """
    if not isinstance(node, Tag) or not node.attrs:
        return None
    for key in node.attrs:
        if key.startswith(SLOT_SHORTHAND_PREFIX) and len(key) > len(SLOT_SHORTHAND_PREFIX):
            return key[len(SLOT_SHORTHAND_PREFIX) :]
    return None


def shorthand_attribute(slot_name: str) -> str:
    """Return the attribute name declaring ``slot_name`` (``header`` -> ``#header``)."""
    return f"{SLOT_SHORTHAND_PREFIX}{slot_name}"


def has_shorthand_slot(node: Tag, slot_name: str) -> bool:
    """Check whether any direct child of ``node`` fills ``slot_name``."""
    return any(get_shorthand_slot_name(child) == slot_name for child in iter_child_tags(node))


def get_class_string(node: Tag) -> str | None:
    """Return the ``class`` attribute as a string, joining list values."""
    value = node.attrs.get("class")
    if value is None:
        return None
    if isinstance(value, (list, tuple)):
        return " ".join(value)
    return value


def create_slot_template(slot_name: str, inner_html: str) -> Tag:
    """Build a detached ``<template #slot_name>`` tag holding ``inner_html``.

    The template and its content are parsed as one fragment, so the result
    is indistinguishable from a slot written by the author.
    """
    fragment = parse_html(
        f"<{SLOT_TEMPLATE_TAG} {shorthand_attribute(slot_name)}>{inner_html}</{SLOT_TEMPLATE_TAG}>"
    )
    return fragment.find(SLOT_TEMPLATE_TAG).extract()
