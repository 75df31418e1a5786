#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/bvmarkup/transforms/modal.py
"""Modal transformer.

Modals map onto ``<b-modal>`` with purely syntactic rewrites. The rules run
in a fixed order because later ones read attributes and slots produced by
earlier ones (e.g. the footer policy looks for ``ok-title``, which only
exists after ``ok-text`` was renamed, and for the relabelled
``#modal-footer`` slot).
"""

from __future__ import annotations

import logging

from bs4.element import Tag

from bvmarkup.constants import (
    DEPRECATED_HEADER_ATTRIBUTES,
    DEPRECATED_MODAL_SLOT_NAMES,
    MODAL_FADE_EFFECT,
    MODAL_FOOTER_SLOT,
    MODAL_HEADER_SLOT,
    MODAL_HIDE_FOOTER,
    MODAL_NO_CLOSE_ON_BACKDROP,
    MODAL_OK_ONLY,
    MODAL_OK_TITLE,
    MODAL_SIZE_LARGE,
    MODAL_SIZE_SMALL,
    MODAL_TITLE_SLOT,
)
from bvmarkup.diagnostics import warn_deprecated_attributes, warn_deprecated_slot_names
from bvmarkup.migration import rename_attribute, rename_slot
from bvmarkup.nodes import has_shorthand_slot
from bvmarkup.transforms.base import ComponentKind, ComponentTransformer

logger = logging.getLogger(__name__)


class ModalTransformer(ComponentTransformer):
    """Rewrite ``<modal>`` into a configured ``<b-modal>``.

    Resulting attributes always include ``size`` and ``modal-class``;
    ``hide-footer`` or ``ok-only`` (never both) depending on whether a footer
    or OK label was given; ``no-close-on-backdrop`` for ``backdrop="false"``;
    and ``ref`` mirroring ``id``.
    """

    kind = ComponentKind.MODAL

    def is_transformed(self, node: Tag) -> bool:
        return node.name == self.options.modal_tag

    def apply(self, node: Tag) -> None:
        warn_deprecated_attributes(node, DEPRECATED_HEADER_ATTRIBUTES, self.sink)
        warn_deprecated_slot_names(node, DEPRECATED_MODAL_SLOT_NAMES, self.sink)

        self.migrate_attribute(node, "header", slot_name=MODAL_TITLE_SLOT)
        self.migrate_attribute(node, "title", slot_name=MODAL_TITLE_SLOT)

        rename_slot(node, "header", MODAL_HEADER_SLOT)
        rename_slot(node, "footer", MODAL_FOOTER_SLOT)

        node.name = self.options.modal_tag

        rename_attribute(node, "ok-text", MODAL_OK_TITLE)
        rename_attribute(node, "center", "centered")

        self._apply_footer_policy(node)
        self._apply_backdrop_policy(node)
        self._apply_size_policy(node)
        self._apply_effect_policy(node)

        if "id" in node.attrs:
            node.attrs["ref"] = node.attrs["id"]

        logger.debug(f"Rewrote modal '{node.attrs.get('id', '')}' as <{node.name}> (size={node.attrs['size']!r})")

    def _apply_footer_policy(self, node: Tag) -> None:
        # The footer is hidden unless the author customised it; a bare OK
        # label means OK without Cancel.
        has_ok_title = MODAL_OK_TITLE in node.attrs
        has_footer = has_shorthand_slot(node, MODAL_FOOTER_SLOT)

        if not has_footer and not has_ok_title:
            node.attrs[MODAL_HIDE_FOOTER] = ""
        elif has_ok_title:
            node.attrs[MODAL_OK_ONLY] = ""

    def _apply_backdrop_policy(self, node: Tag) -> None:
        if node.attrs.get("backdrop") == "false":
            node.attrs[MODAL_NO_CLOSE_ON_BACKDROP] = ""
        node.attrs.pop("backdrop", None)

    def _apply_size_policy(self, node: Tag) -> None:
        size = ""
        if "large" in node.attrs:
            size = MODAL_SIZE_LARGE
            del node.attrs["large"]
        elif "small" in node.attrs:
            size = MODAL_SIZE_SMALL
            del node.attrs["small"]
        node.attrs["size"] = size

    def _apply_effect_policy(self, node: Tag) -> None:
        # bootstrap-vue fades by default; zoom is the default here
        is_fade = node.attrs.get("effect") == MODAL_FADE_EFFECT
        node.attrs["modal-class"] = "" if is_fade else self.options.modal_effect_class
