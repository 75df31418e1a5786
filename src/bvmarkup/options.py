#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/bvmarkup/options.py
"""Option dataclasses for component transforms.

All defaults the transforms fall back on (trigger mode, placement, tag names,
runtime getter names) live here rather than inline, so callers and tests can
override them per affordance.

Examples
--------
Open popovers on click by default:

    >>> options = ComponentOptions(popover=AffordanceDefaults(trigger="click"))

Derive a variant of existing options:

    >>> plain = options.create_updated(render_markdown=False)

"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, fields, replace
from typing import Any, Mapping

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from bvmarkup.constants import (
    COMPONENT_TAG_NAMES,
    DEFAULT_INLINE_TAG,
    DEFAULT_MODAL_EFFECT_CLASS,
    DEFAULT_MODAL_TAG,
    DEFAULT_PLACEMENT,
    DEFAULT_POPOVER_CONTENT_GETTER,
    DEFAULT_TOOLTIP_CONTENT_GETTER,
    DEFAULT_TRIGGER,
)
from bvmarkup.exceptions import ValidationError


def _require_name(value: Any, parameter_name: str) -> None:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(
            f"Option '{parameter_name}' must be a non-empty string, got {value!r}",
            parameter_name=parameter_name,
            parameter_value=value,
        )


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class AffordanceDefaults(CloneFrozenMixin):
    """Fallback trigger mode and placement for one floating affordance.

    Parameters
    ----------
    trigger : str, default "hover"
        Activation mode used when the node has no (or an empty) ``trigger``
    placement : str, default "top"
        Placement used when the node has no (or an empty) ``placement``

    """

    trigger: str = field(default=DEFAULT_TRIGGER, metadata={"help": "Default activation mode"})
    placement: str = field(default=DEFAULT_PLACEMENT, metadata={"help": "Default placement"})

    def __post_init__(self) -> None:
        _require_name(self.trigger, "trigger")
        _require_name(self.placement, "placement")


@dataclass(frozen=True)
class ComponentOptions(CloneFrozenMixin):
    """Configuration shared by every component transformer.

    Parameters
    ----------
    popover : AffordanceDefaults
        Trigger/placement fallbacks for popovers
    tooltip : AffordanceDefaults
        Trigger/placement fallbacks for tooltips
    trigger_default : str, default "hover"
        Activation mode assumed for ``<trigger>`` nodes without a ``trigger``
    inline_tag : str, default "span"
        Tag popovers, tooltips and normalized slot children are renamed to
    modal_tag : str, default "b-modal"
        Tag modals are renamed to; neither tag may be one of the
        component tags (popover, tooltip, modal, trigger)
    modal_effect_class : str, default "mb-zoom"
        ``modal-class`` value used unless the author asked for ``effect="fade"``
    popover_content_getter : str
        Runtime getter bound to the popover directive
    tooltip_content_getter : str
        Runtime getter bound to the tooltip directive
    render_markdown : bool, default True
        Render migrated attribute text as Markdown before slotting it
    skip_transformed : bool, default True
        Leave nodes that already carry post-transform markers untouched

    """

    popover: AffordanceDefaults = field(default_factory=AffordanceDefaults)
    tooltip: AffordanceDefaults = field(default_factory=AffordanceDefaults)
    trigger_default: str = DEFAULT_TRIGGER
    inline_tag: str = DEFAULT_INLINE_TAG
    modal_tag: str = DEFAULT_MODAL_TAG
    modal_effect_class: str = DEFAULT_MODAL_EFFECT_CLASS
    popover_content_getter: str = DEFAULT_POPOVER_CONTENT_GETTER
    tooltip_content_getter: str = DEFAULT_TOOLTIP_CONTENT_GETTER
    render_markdown: bool = True
    skip_transformed: bool = True

    def __post_init__(self) -> None:
        for name in (
            "trigger_default",
            "inline_tag",
            "modal_tag",
            "modal_effect_class",
            "popover_content_getter",
            "tooltip_content_getter",
        ):
            _require_name(getattr(self, name), name)
        for name in ("inline_tag", "modal_tag"):
            value = getattr(self, name)
            if value.lower() in COMPONENT_TAG_NAMES:
                raise ValidationError(
                    f"Option '{name}' cannot be the component tag '{value}'",
                    parameter_name=name,
                    parameter_value=value,
                )
        for name in ("popover", "tooltip"):
            if not isinstance(getattr(self, name), AffordanceDefaults):
                raise ValidationError(
                    f"Option '{name}' must be AffordanceDefaults",
                    parameter_name=name,
                    parameter_value=getattr(self, name),
                )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ComponentOptions:
        """Build options from a plain mapping, e.g. a parsed config file.

        Keys may use dashes or underscores. ``popover`` and ``tooltip`` take
        nested mappings with ``trigger``/``placement``.

        Raises
        ------
        ValidationError
            If a key is unknown or a value is invalid

        """
        known = {f.name for f in fields(cls)}
        kwargs: dict[str, Any] = {}
        for raw_key, value in data.items():
            key = str(raw_key).replace("-", "_")
            if key not in known:
                raise ValidationError(f"Unknown option '{raw_key}'", parameter_name=str(raw_key), parameter_value=value)
            if key in ("popover", "tooltip") and isinstance(value, Mapping):
                try:
                    value = AffordanceDefaults(**value)
                except TypeError as e:
                    raise ValidationError(
                        f"Invalid '{raw_key}' defaults: {e}", parameter_name=key, parameter_value=value, original_error=e
                    ) from e
            elif key in ("render_markdown", "skip_transformed") and not isinstance(value, bool):
                raise ValidationError(f"Option '{raw_key}' must be a boolean", parameter_name=key, parameter_value=value)
            kwargs[key] = value
        return cls(**kwargs)

    def defaults_for(self, kind: str) -> AffordanceDefaults:
        """Return the trigger/placement defaults for ``"popover"`` or ``"tooltip"``."""
        if kind == "popover":
            return self.popover
        if kind == "tooltip":
            return self.tooltip
        raise KeyError(f"No affordance defaults for '{kind}'")
