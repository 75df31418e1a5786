#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/bvmarkup/transforms/trigger.py
"""Trigger classification.

Whether a trigger opens a modal, popover or tooltip is only known at runtime,
so at build time every triggering node just gets a class encoding its
activation mode.
"""

from __future__ import annotations

from bs4.element import Tag

from bvmarkup.constants import CLICK_TRIGGER, TRIGGER_CLASS, TRIGGER_CLICK_CLASS
from bvmarkup.nodes import get_class_string
from bvmarkup.transforms.base import ComponentKind, ComponentTransformer


def trigger_class_for(trigger: str) -> str:
    """Return ``trigger-click`` for click mode and ``trigger`` for anything else."""
    return TRIGGER_CLICK_CLASS if trigger == CLICK_TRIGGER else TRIGGER_CLASS


def add_trigger_class(node: Tag, trigger: str) -> None:
    """Append the trigger class to ``node``'s ``class``, creating it if needed.

    Examples
    --------
    >>> from bvmarkup.nodes import parse_html
    >>> node = parse_html('<span class="foo"></span>').span
    >>> add_trigger_class(node, "click")
    >>> node["class"]
    'foo trigger-click'

    """
    trigger_class = trigger_class_for(trigger)
    existing = get_class_string(node)
    node.attrs["class"] = f"{existing} {trigger_class}" if existing else trigger_class


class TriggerTransformer(ComponentTransformer):
    """Classify ``<trigger>`` nodes by activation mode.

    The tag is left as is; the runtime component reads the class to decide
    how to attach itself.
    """

    kind = ComponentKind.TRIGGER

    def is_transformed(self, node: Tag) -> bool:
        classes = (get_class_string(node) or "").split()
        return TRIGGER_CLASS in classes or TRIGGER_CLICK_CLASS in classes

    def apply(self, node: Tag) -> None:
        trigger = node.attrs.get("trigger") or self.options.trigger_default
        add_trigger_class(node, trigger)
