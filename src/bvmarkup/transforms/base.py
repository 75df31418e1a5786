#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/bvmarkup/transforms/base.py
"""Base class and kinds for component transformers.

A transformer owns the rule set for one kind of component node. It mutates
the node it is given in place and returns nothing; all state lives on the
node, so one transformer instance can be reused across a whole document.

Examples
--------
>>> class UppercaseTransformer(ComponentTransformer):
...     kind = ComponentKind.PLAIN
...     def apply(self, node):
...         node.name = node.name.upper()

"""

from __future__ import annotations

import logging
from enum import Enum
from typing import ClassVar, Optional

from bs4.element import Tag

from bvmarkup.diagnostics import DiagnosticSink
from bvmarkup.migration import process_attribute_without_override
from bvmarkup.options import ComponentOptions
from bvmarkup.rendering import ContentRenderer, MarkdownContentRenderer

logger = logging.getLogger(__name__)


class ComponentKind(str, Enum):
    """Closed set of node kinds the pipeline dispatches on."""

    POPOVER = "popover"
    TOOLTIP = "tooltip"
    MODAL = "modal"
    TRIGGER = "trigger"
    PLAIN = "plain"


def classify_node(node: Tag) -> ComponentKind:
    """Map a node onto its declared kind by tag name.

    Anything that is not ``popover``, ``tooltip``, ``modal`` or ``trigger``
    is :attr:`ComponentKind.PLAIN`.
    """
    name = (node.name or "").lower()
    try:
        return ComponentKind(name)
    except ValueError:
        return ComponentKind.PLAIN


class ComponentTransformer:
    """Base class for in-place component node transformers.

    Subclasses set :attr:`kind` and implement :meth:`apply`; they may
    override :meth:`is_transformed` so that a second run over the same node
    is skipped.

    Parameters
    ----------
    options : ComponentOptions, optional
        Defaults and tag names; a default instance is used when omitted
    sink : callable, optional
        Receives deprecation diagnostics in addition to the log
    renderer : ContentRenderer, optional
        Renders migrated attribute text. When omitted, a Markdown renderer
        is used if ``options.render_markdown`` is set

    """

    kind: ClassVar[ComponentKind]

    def __init__(
        self,
        options: Optional[ComponentOptions] = None,
        sink: Optional[DiagnosticSink] = None,
        renderer: Optional[ContentRenderer] = None,
    ) -> None:
        self.options = options if options is not None else ComponentOptions()
        self.sink = sink
        if renderer is None and self.options.render_markdown:
            renderer = MarkdownContentRenderer()
        self.renderer = renderer

    def transform(self, node: Tag) -> None:
        """Rewrite ``node`` in place unless it was already transformed."""
        if self.options.skip_transformed and self.is_transformed(node):
            logger.debug(f"Skipping <{node.name}>: already transformed as {self.kind.value}")
            return
        self.apply(node)

    def is_transformed(self, node: Tag) -> bool:
        """Return True if ``node`` already has this transformer's output shape."""
        return False

    def apply(self, node: Tag) -> None:
        """Apply this transformer's rules to ``node``."""
        raise NotImplementedError

    def migrate_attribute(self, node: Tag, attribute: str, slot_name: Optional[str] = None) -> bool:
        """Move an attribute into a slot as inline content, never overriding."""
        return process_attribute_without_override(
            node, attribute, inline=True, slot_name=slot_name, renderer=self.renderer
        )
