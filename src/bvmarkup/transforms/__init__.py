#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/bvmarkup/transforms/__init__.py
"""Component transformers for popovers, tooltips, modals and triggers.

This package contains:

- The transformer base class and the closed set of component kinds
- One transformer per kind
- A registry mapping kinds to transformer classes
- A pipeline that classifies and dispatches every node of a document

Examples
--------
Transform one node directly:

    >>> from bvmarkup.transforms import ModalTransformer
    >>> ModalTransformer().transform(node)

Normalize a whole document:

    >>> from bvmarkup.transforms import normalize_html
    >>> html = normalize_html('<popover content="Hi">?</popover>')

"""

from __future__ import annotations

from .base import ComponentKind, ComponentTransformer, classify_node
from .floating import FloatingComponentTransformer, PopoverTransformer, TooltipTransformer
from .modal import ModalTransformer
from .pipeline import ComponentPipeline, normalize_html
from .registry import BUILTIN_TRANSFORMERS, TransformRegistry, transform_registry
from .slots import transform_slotted_components
from .trigger import TriggerTransformer, add_trigger_class, trigger_class_for

__all__ = [
    # Core
    "ComponentKind",
    "ComponentTransformer",
    "classify_node",
    # Transformers
    "FloatingComponentTransformer",
    "PopoverTransformer",
    "TooltipTransformer",
    "ModalTransformer",
    "TriggerTransformer",
    # Helpers
    "add_trigger_class",
    "trigger_class_for",
    "transform_slotted_components",
    # Registry
    "BUILTIN_TRANSFORMERS",
    "TransformRegistry",
    "transform_registry",
    # Pipeline
    "ComponentPipeline",
    "normalize_html",
]
