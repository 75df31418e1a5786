#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/bvmarkup/transforms/floating.py
"""Popover and tooltip transformers.

Popovers and tooltips are not rendered as components of their own. The node
becomes an inline element carrying a directive (``v-b-popover.hover.top.html``)
bound to a runtime content getter, and its content moves into hidden
``[data-mb-slot-name]`` children that the getter reads when the affordance
opens.

Examples
--------
>>> from bvmarkup.nodes import parse_html
>>> node = parse_html('<popover content="Hi">hover me</popover>').popover
>>> PopoverTransformer().transform(node)
>>> node.name, node["data-mb-component-type"]
('span', 'popover')

"""

from __future__ import annotations

from typing import ClassVar

from bs4.element import Tag

from bvmarkup.constants import (
    COMPONENT_TYPE_ATTRIBUTE,
    DEPRECATED_HEADER_ATTRIBUTES,
    DIRECTIVE_MODIFIER_SUFFIX,
    POPOVER_DIRECTIVE,
    TOOLTIP_DIRECTIVE,
)
from bvmarkup.diagnostics import warn_deprecated_attributes
from bvmarkup.transforms.base import ComponentKind, ComponentTransformer
from bvmarkup.transforms.slots import transform_slotted_components
from bvmarkup.transforms.trigger import add_trigger_class


class FloatingComponentTransformer(ComponentTransformer):
    """Shared rules for directive-driven affordances (popover, tooltip)."""

    directive: ClassVar[str]

    def is_transformed(self, node: Tag) -> bool:
        return COMPONENT_TYPE_ATTRIBUTE in node.attrs

    def content_getter(self) -> str:
        """Name of the runtime getter bound to the directive."""
        raise NotImplementedError

    def migrate_content(self, node: Tag) -> None:
        """Move author attributes into slots before the node is rewritten."""
        raise NotImplementedError

    def directive_attribute(self, trigger: str, placement: str) -> str:
        """Return e.g. ``v-b-popover.click.bottom.html``."""
        return f"{self.directive}.{trigger}.{placement}.{DIRECTIVE_MODIFIER_SUFFIX}"

    def apply(self, node: Tag) -> None:
        self.migrate_content(node)

        node.name = self.options.inline_tag
        defaults = self.options.defaults_for(self.kind.value)
        trigger = node.attrs.get("trigger") or defaults.trigger
        placement = node.attrs.get("placement") or defaults.placement
        node.attrs[COMPONENT_TYPE_ATTRIBUTE] = self.kind.value
        node.attrs[self.directive_attribute(trigger, placement)] = self.content_getter()
        add_trigger_class(node, trigger)
        transform_slotted_components(node, self.options.inline_tag)


class PopoverTransformer(FloatingComponentTransformer):
    """Popovers: ``content`` and ``header`` (formerly ``title``) become slots.

    ``header`` is migrated before ``title``, so when both are given the
    ``header`` attribute wins and ``title`` is dropped.
    """

    kind = ComponentKind.POPOVER
    directive = POPOVER_DIRECTIVE

    def content_getter(self) -> str:
        return self.options.popover_content_getter

    def migrate_content(self, node: Tag) -> None:
        warn_deprecated_attributes(node, DEPRECATED_HEADER_ATTRIBUTES, self.sink)

        self.migrate_attribute(node, "content")
        self.migrate_attribute(node, "header")
        self.migrate_attribute(node, "title", slot_name="header")


class TooltipTransformer(FloatingComponentTransformer):
    """Tooltips: ``content`` becomes the ``_content`` slot; there is no header."""

    kind = ComponentKind.TOOLTIP
    directive = TOOLTIP_DIRECTIVE

    def content_getter(self) -> str:
        return self.options.tooltip_content_getter

    def migrate_content(self, node: Tag) -> None:
        self.migrate_attribute(node, "content", slot_name="_content")
