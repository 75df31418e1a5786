#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/bvmarkup/transforms/registry.py
"""Registry mapping component kinds to their transformer classes.

The set of kinds is closed (:class:`ComponentKind`); the registry only decides
which transformer class handles each of them, so callers can swap in a
customised transformer for one kind without touching the pipeline.

Examples
--------
Look up the transformer for a node:

    >>> from bvmarkup.transforms import transform_registry, classify_node
    >>> transformer = transform_registry.get_transformer(classify_node(node))
    >>> transformer.transform(node)

Replace the modal rules:

    >>> transform_registry.register(ComponentKind.MODAL, MyModalTransformer)

"""

from __future__ import annotations

import logging
from typing import Any

from bvmarkup.transforms.base import ComponentKind, ComponentTransformer
from bvmarkup.transforms.floating import PopoverTransformer, TooltipTransformer
from bvmarkup.transforms.modal import ModalTransformer
from bvmarkup.transforms.trigger import TriggerTransformer

logger = logging.getLogger(__name__)

BUILTIN_TRANSFORMERS: dict[ComponentKind, type[ComponentTransformer]] = {
    ComponentKind.POPOVER: PopoverTransformer,
    ComponentKind.TOOLTIP: TooltipTransformer,
    ComponentKind.MODAL: ModalTransformer,
    ComponentKind.TRIGGER: TriggerTransformer,
}


class TransformRegistry:
    """Registry of transformer classes keyed by component kind.

    Parameters
    ----------
    include_builtins : bool, default True
        Pre-populate with the popover, tooltip, modal and trigger transformers

    """

    def __init__(self, include_builtins: bool = True) -> None:
        self._transformers: dict[ComponentKind, type[ComponentTransformer]] = {}
        if include_builtins:
            self._transformers.update(BUILTIN_TRANSFORMERS)

    def register(self, kind: ComponentKind | str, transformer_class: type[ComponentTransformer]) -> None:
        """Register ``transformer_class`` for ``kind``.

        Raises
        ------
        ValueError
            If ``kind`` is plain (plain nodes are never transformed) or unknown
        TypeError
            If ``transformer_class`` is not a ComponentTransformer subclass

        """
        kind = ComponentKind(kind)
        if kind is ComponentKind.PLAIN:
            raise ValueError("Plain nodes cannot have a transformer")
        if not (isinstance(transformer_class, type) and issubclass(transformer_class, ComponentTransformer)):
            raise TypeError(f"{transformer_class!r} is not a ComponentTransformer subclass")

        if kind in self._transformers:
            logger.warning(f"Transformer for '{kind.value}' already registered, overwriting")

        self._transformers[kind] = transformer_class
        logger.debug(f"Registered transformer for {kind.value}: {transformer_class.__name__}")

    def unregister(self, kind: ComponentKind | str) -> bool:
        """Remove the transformer for ``kind``; return False if none was registered."""
        kind = ComponentKind(kind)
        if kind in self._transformers:
            del self._transformers[kind]
            logger.debug(f"Unregistered transformer for {kind.value}")
            return True
        return False

    def has_transformer(self, kind: ComponentKind | str) -> bool:
        return ComponentKind(kind) in self._transformers

    def get_transformer_class(self, kind: ComponentKind | str) -> type[ComponentTransformer]:
        """Return the class registered for ``kind``.

        Raises
        ------
        KeyError
            If no transformer is registered for ``kind``

        """
        kind = ComponentKind(kind)
        if kind not in self._transformers:
            raise KeyError(f"No transformer registered for '{kind.value}'")
        return self._transformers[kind]

    def get_transformer(self, kind: ComponentKind | str, **kwargs: Any) -> ComponentTransformer:
        """Instantiate the transformer for ``kind`` with ``kwargs``."""
        return self.get_transformer_class(kind)(**kwargs)

    def list_kinds(self) -> list[ComponentKind]:
        return list(self._transformers)


transform_registry = TransformRegistry()
