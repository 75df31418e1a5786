#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/bvmarkup/transforms/slots.py
"""Normalization of shorthand-slot children into hidden content sources."""

from __future__ import annotations

from bs4.element import Tag

from bvmarkup.constants import DEFAULT_INLINE_TAG, SLOT_NAME_ATTRIBUTE
from bvmarkup.nodes import get_shorthand_slot_name, iter_child_tags, shorthand_attribute


def transform_slotted_components(node: Tag, inline_tag: str = DEFAULT_INLINE_TAG) -> int:
    """Turn direct ``#name`` slot children into ``data-mb-slot-name`` elements.

    ``<template #content>...`` becomes ``<span data-mb-slot-name="content">...``
    so the templating layer no longer treats it as a slot declaration, while
    the runtime can still look the content up by name. Only direct children
    are rewritten.

    Returns
    -------
    int
        Number of children rewritten

    """
    rewritten = 0
    for child in iter_child_tags(node):
        slot_name = get_shorthand_slot_name(child)
        if slot_name is None:
            continue
        child.attrs[SLOT_NAME_ATTRIBUTE] = slot_name
        del child.attrs[shorthand_attribute(slot_name)]
        child.name = inline_tag
        rewritten += 1
    return rewritten
