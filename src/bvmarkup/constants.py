#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/bvmarkup/constants.py
"""Attribute names, tag names and defaults shared across bvmarkup.

The marker attributes and directive/getter names form the contract with the
runtime layer that renders the normalized markup, so they must stay in sync
with it.
"""

from __future__ import annotations

from typing import Final

# Shorthand slot syntax: ``<template #header>``
SLOT_SHORTHAND_PREFIX: Final = "#"

# Marker attributes read by the runtime layer
SLOT_NAME_ATTRIBUTE: Final = "data-mb-slot-name"
COMPONENT_TYPE_ATTRIBUTE: Final = "data-mb-component-type"

# Tag names
DEFAULT_INLINE_TAG: Final = "span"
DEFAULT_MODAL_TAG: Final = "b-modal"
SLOT_TEMPLATE_TAG: Final = "template"

# Author-facing component tags; output tags must not reuse them
COMPONENT_TAG_NAMES: Final = frozenset({"popover", "tooltip", "modal", "trigger"})

# Trigger modes and the classes that encode them
CLICK_TRIGGER: Final = "click"
DEFAULT_TRIGGER: Final = "hover"
DEFAULT_PLACEMENT: Final = "top"
TRIGGER_CLASS: Final = "trigger"
TRIGGER_CLICK_CLASS: Final = "trigger-click"

# Directive attributes: ``v-b-popover.<trigger>.<placement>.html``
POPOVER_DIRECTIVE: Final = "v-b-popover"
TOOLTIP_DIRECTIVE: Final = "v-b-tooltip"
DIRECTIVE_MODIFIER_SUFFIX: Final = "html"
DEFAULT_POPOVER_CONTENT_GETTER: Final = "popoverInnerGetters"
DEFAULT_TOOLTIP_CONTENT_GETTER: Final = "tooltipInnerContentGetter"

# Modal attribute vocabulary
MODAL_TITLE_SLOT: Final = "modal-title"
MODAL_HEADER_SLOT: Final = "modal-header"
MODAL_FOOTER_SLOT: Final = "modal-footer"
MODAL_OK_TITLE: Final = "ok-title"
MODAL_HIDE_FOOTER: Final = "hide-footer"
MODAL_OK_ONLY: Final = "ok-only"
MODAL_NO_CLOSE_ON_BACKDROP: Final = "no-close-on-backdrop"
MODAL_SIZE_LARGE: Final = "lg"
MODAL_SIZE_SMALL: Final = "sm"
MODAL_FADE_EFFECT: Final = "fade"
DEFAULT_MODAL_EFFECT_CLASS: Final = "mb-zoom"

# Deprecated author syntax and its replacement
DEPRECATED_HEADER_ATTRIBUTES: Final = {"title": "header"}
DEPRECATED_MODAL_SLOT_NAMES: Final = {
    "modal-header": "header",
    "modal-footer": "footer",
}

# Parsing
DEFAULT_HTML_PARSER: Final = "html.parser"
