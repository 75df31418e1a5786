#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/bvmarkup/transforms/pipeline.py
"""Pipeline dispatching component transformers over a document.

The pipeline classifies each element by its declared kind and hands it to the
transformer registered for that kind. Elements are snapshotted in document
order before any rewriting starts, so every original element is visited once.
Slot templates created during migration are dispatched after their owner,
which normalizes components written inside attribute text.

Examples
--------
Normalize a fragment:

    >>> from bvmarkup.transforms import normalize_html
    >>> normalize_html('<modal id="m">Body</modal>')
    '<b-modal id="m" hide-footer="" size="" modal-class="mb-zoom" ref="m">Body</b-modal>'

Collect deprecation diagnostics:

    >>> collector = DiagnosticCollector()
    >>> pipeline = ComponentPipeline(sink=collector)
    >>> counts = pipeline.transform_tree(parse_html(markup))

"""

from __future__ import annotations

import logging
from collections import Counter
from typing import Optional

from bs4.element import Tag

from bvmarkup.diagnostics import DiagnosticSink
from bvmarkup.nodes import iter_child_tags, parse_html, serialize_html
from bvmarkup.options import ComponentOptions
from bvmarkup.rendering import ContentRenderer, MarkdownContentRenderer
from bvmarkup.transforms.base import ComponentKind, ComponentTransformer, classify_node
from bvmarkup.transforms.registry import TransformRegistry, transform_registry

logger = logging.getLogger(__name__)


class ComponentPipeline:
    """Dispatch component nodes to their transformers.

    Parameters
    ----------
    options : ComponentOptions, optional
        Options shared by all transformers
    registry : TransformRegistry, optional
        Kind -> transformer mapping; the global registry by default
    sink : callable, optional
        Receives deprecation diagnostics
    renderer : ContentRenderer, optional
        Renderer for migrated attribute text; a Markdown renderer is shared
        across transformers when ``options.render_markdown`` is set

    """

    def __init__(
        self,
        options: Optional[ComponentOptions] = None,
        registry: Optional[TransformRegistry] = None,
        sink: Optional[DiagnosticSink] = None,
        renderer: Optional[ContentRenderer] = None,
    ) -> None:
        self.options = options if options is not None else ComponentOptions()
        self.registry = registry if registry is not None else transform_registry
        self.sink = sink
        if renderer is None and self.options.render_markdown:
            renderer = MarkdownContentRenderer()
        self.renderer = renderer
        self._transformers: dict[ComponentKind, ComponentTransformer] = {}

    def _transformer_for(self, kind: ComponentKind) -> ComponentTransformer | None:
        if kind not in self._transformers:
            if not self.registry.has_transformer(kind):
                return None
            self._transformers[kind] = self.registry.get_transformer(
                kind, options=self.options, sink=self.sink, renderer=self.renderer
            )
        return self._transformers[kind]

    def transform_node(self, node: Tag) -> ComponentKind:
        """Transform a single node according to its kind.

        Returns
        -------
        ComponentKind
            The kind the node was classified as (plain nodes are untouched)

        """
        kind = classify_node(node)
        if kind is ComponentKind.PLAIN:
            return kind

        transformer = self._transformer_for(kind)
        if transformer is None:
            logger.debug(f"No transformer registered for <{node.name}>, leaving it unchanged")
            return kind

        transformer.transform(node)
        return kind

    def transform_tree(self, root: Tag) -> Counter[ComponentKind]:
        """Transform ``root`` and all of its descendant elements.

        Elements are snapshotted in document order before rewriting. Slot
        templates a transformer creates from attribute text are dispatched
        right after their owner, so components written inside ``content`` or
        ``header`` text are normalized too.

        Returns
        -------
        Counter
            Number of nodes seen per non-plain kind

        """
        counts: Counter[ComponentKind] = Counter()
        self._dispatch([root, *root.find_all(True)], counts)
        logger.debug(f"Transformed components: {dict((k.value, v) for k, v in counts.items())}")
        return counts

    def _dispatch(self, nodes: list[Tag], counts: Counter[ComponentKind]) -> None:
        known = {id(node) for node in nodes}
        for node in nodes:
            kind = self.transform_node(node)
            if kind is ComponentKind.PLAIN:
                continue
            counts[kind] += 1
            # Migration only ever inserts direct children
            for child in list(iter_child_tags(node)):
                if id(child) not in known:
                    self._dispatch([child, *child.find_all(True)], counts)


def normalize_html(
    markup: str,
    options: Optional[ComponentOptions] = None,
    sink: Optional[DiagnosticSink] = None,
) -> str:
    """Parse ``markup``, normalize every component in it and serialize it back."""
    soup = parse_html(markup)
    ComponentPipeline(options=options, sink=sink).transform_tree(soup)
    return serialize_html(soup)
