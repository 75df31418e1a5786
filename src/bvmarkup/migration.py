#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/bvmarkup/migration.py
"""Attribute and slot migration primitives.

These are the building blocks the component transformers compose:

- :func:`process_attribute_without_override` moves an attribute into a
  shorthand slot unless the author already filled that slot
- :func:`rename_attribute` renames an attribute, overwriting the target
- :func:`rename_slot` relabels shorthand slots on direct children

"""

from __future__ import annotations

import logging
from typing import Optional

from bs4.element import Tag

from bvmarkup.nodes import (
    create_slot_template,
    get_shorthand_slot_name,
    has_shorthand_slot,
    iter_child_tags,
    shorthand_attribute,
)
from bvmarkup.rendering import ContentRenderer

logger = logging.getLogger(__name__)


def process_attribute_without_override(
    node: Tag,
    attribute: str,
    inline: bool = True,
    slot_name: Optional[str] = None,
    renderer: Optional[ContentRenderer] = None,
) -> bool:
    """Move ``attribute`` into a ``<template #slot_name>`` child.

    Explicit author content always wins: if a direct child already fills
    ``slot_name``, the attribute value is dropped. The source attribute is
    removed in every case.

    Parameters
    ----------
    node : Tag
        Node owning the attribute
    attribute : str
        Source attribute name
    inline : bool, default True
        Render the value as inline rather than block Markdown
    slot_name : str, optional
        Destination slot; defaults to ``attribute``
    renderer : ContentRenderer, optional
        Renders the value before slotting; raw value is used when omitted

    Returns
    -------
    bool
        True if a new slot child was inserted

    """
    if slot_name is None:
        slot_name = attribute

    migrated = False
    if attribute in node.attrs and not has_shorthand_slot(node, slot_name):
        value = node.attrs[attribute]
        content = renderer.render(value, inline=inline) if renderer is not None else value
        node.insert(0, create_slot_template(slot_name, content))
        migrated = True
        logger.debug(f"Moved '{attribute}' attribute of <{node.name}> into slot '{slot_name}'")
    elif attribute in node.attrs:
        logger.debug(f"Dropped '{attribute}' attribute of <{node.name}>: slot '{slot_name}' already set")

    node.attrs.pop(attribute, None)
    return migrated


def rename_attribute(node: Tag, original_attribute: str, new_attribute: str) -> None:
    """Rename an attribute if present; an existing ``new_attribute`` is overwritten."""
    if original_attribute in node.attrs:
        node.attrs[new_attribute] = node.attrs[original_attribute]
        del node.attrs[original_attribute]


def rename_slot(node: Tag, original_name: str, new_name: str) -> int:
    """Relabel direct children filling ``original_name`` to fill ``new_name``.

    The shorthand form is preserved: ``#header`` becomes ``#modal-header``.

    Returns
    -------
    int
        Number of children relabelled

    """
    renamed = 0
    if original_name == new_name:
        return renamed
    for child in iter_child_tags(node):
        if get_shorthand_slot_name(child) != original_name:
            continue
        child.attrs[shorthand_attribute(new_name)] = ""
        del child.attrs[shorthand_attribute(original_name)]
        renamed += 1
    return renamed
