#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/bvmarkup/diagnostics.py
"""Deprecation diagnostics for author-facing component syntax.

Deprecated attributes and shorthand slot names are still rewritten; these
helpers only report them. Every diagnostic is logged at WARNING level and,
when a sink is supplied, also handed to that sink so callers can collect or
display them.

Examples
--------
Collect diagnostics while transforming:

    >>> collector = DiagnosticCollector()
    >>> warn_deprecated_attributes(node, {"title": "header"}, sink=collector)
    >>> [d.deprecated_name for d in collector]
    ['title']

"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Iterator, Literal, Mapping, Optional

from bs4.element import Tag

from bvmarkup.nodes import get_shorthand_slot_name, iter_child_tags

logger = logging.getLogger(__name__)

DiagnosticKind = Literal["attribute", "slot"]


@dataclass(frozen=True)
class DeprecationDiagnostic:
    """A single use of deprecated syntax on a component node.

    Parameters
    ----------
    component : str
        Tag name of the node at the time the usage was found
    kind : {"attribute", "slot"}
        Whether an attribute or a shorthand slot name is deprecated
    deprecated_name : str
        The name the author used
    replacement_name : str
        The name that should be used instead

    """

    component: str
    kind: DiagnosticKind
    deprecated_name: str
    replacement_name: str

    @property
    def message(self) -> str:
        """Human-readable warning text."""
        what = "attribute" if self.kind == "attribute" else "shorthand slot name"
        return (
            f"{self.component} {what} '{self.deprecated_name}' is deprecated and may be removed "
            f"in the future. Please use '{self.replacement_name}'"
        )


DiagnosticSink = Callable[[DeprecationDiagnostic], None]


class DiagnosticCollector:
    """Sink that keeps every diagnostic it receives, in order."""

    def __init__(self) -> None:
        self.diagnostics: list[DeprecationDiagnostic] = []

    def __call__(self, diagnostic: DeprecationDiagnostic) -> None:
        self.diagnostics.append(diagnostic)

    def __iter__(self) -> Iterator[DeprecationDiagnostic]:
        return iter(self.diagnostics)

    def __len__(self) -> int:
        return len(self.diagnostics)

    def clear(self) -> None:
        self.diagnostics.clear()


def emit_diagnostic(diagnostic: DeprecationDiagnostic, sink: Optional[DiagnosticSink] = None) -> None:
    """Log ``diagnostic`` and forward it to ``sink`` if one is given."""
    logger.warning(diagnostic.message)
    if sink is not None:
        sink(diagnostic)


def warn_deprecated_attributes(
    node: Tag,
    attribute_pairs: Mapping[str, str],
    sink: Optional[DiagnosticSink] = None,
) -> list[DeprecationDiagnostic]:
    """Report each deprecated attribute present on ``node``.

    Parameters
    ----------
    node : Tag
        Node to inspect; never modified
    attribute_pairs : Mapping[str, str]
        Deprecated attribute name -> replacement name
    sink : callable, optional
        Receives each diagnostic after it has been logged

    Returns
    -------
    list of DeprecationDiagnostic
        The diagnostics emitted, in ``attribute_pairs`` order

    """
    emitted = []
    for deprecated_name, replacement_name in attribute_pairs.items():
        if deprecated_name not in node.attrs:
            continue
        diagnostic = DeprecationDiagnostic(node.name, "attribute", deprecated_name, replacement_name)
        emit_diagnostic(diagnostic, sink)
        emitted.append(diagnostic)
    return emitted


def warn_deprecated_slot_names(
    node: Tag,
    slot_name_pairs: Mapping[str, str],
    sink: Optional[DiagnosticSink] = None,
) -> list[DeprecationDiagnostic]:
    """Report each direct child that fills a deprecated shorthand slot.

    One diagnostic is emitted per offending child, in child order.
    """
    emitted = []
    for child in iter_child_tags(node):
        slot_name = get_shorthand_slot_name(child)
        if slot_name is None or slot_name not in slot_name_pairs:
            continue
        diagnostic = DeprecationDiagnostic(node.name, "slot", slot_name, slot_name_pairs[slot_name])
        emit_diagnostic(diagnostic, sink)
        emitted.append(diagnostic)
    return emitted
