"""bvmarkup - normalize popover, tooltip and modal markup for bootstrap-vue.

Authors write a small, stable syntax for interactive affordances::

    <popover header="Note" content="**Hi**" trigger="click">hover me</popover>
    <modal id="m" large ok-text="Got it">
      <template #header>Title</template>
      Body
    </modal>

bvmarkup rewrites the parsed document tree in place into the attribute and
slot shape the bootstrap-vue based runtime expects: attributes move into
slots without overriding explicit author slots, slots are relabelled,
defaults are synthesized, deprecated syntax is reported and tags are renamed.

Key Features
------------
- Popover and tooltip rewriting into directive-bound inline elements
- Modal attribute and slot normalization for ``<b-modal>``
- Trigger classification by activation mode
- Markdown rendering of attribute text moved into slots
- Deprecation diagnostics via logging and pluggable sinks
- Configurable defaults from TOML, YAML, JSON or ``pyproject.toml``

Examples
--------
Normalize an HTML fragment:

    >>> from bvmarkup import normalize_html
    >>> normalize_html('<tooltip content="Hi">?</tooltip>')

Transform a single parsed node:

    >>> from bvmarkup import parse_html, ModalTransformer
    >>> soup = parse_html('<modal backdrop="false">Body</modal>')
    >>> ModalTransformer().transform(soup.modal)

See Also
--------
bvmarkup.transforms : transformers, registry and pipeline

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

from bvmarkup.diagnostics import (
    DeprecationDiagnostic,
    DiagnosticCollector,
    warn_deprecated_attributes,
    warn_deprecated_slot_names,
)
from bvmarkup.exceptions import BvMarkupError, FileError, ParsingError, ValidationError
from bvmarkup.migration import process_attribute_without_override, rename_attribute, rename_slot
from bvmarkup.nodes import get_shorthand_slot_name, parse_html, serialize_html
from bvmarkup.options import AffordanceDefaults, ComponentOptions
from bvmarkup.rendering import MarkdownContentRenderer
from bvmarkup.transforms import (
    ComponentKind,
    ComponentPipeline,
    ModalTransformer,
    PopoverTransformer,
    TooltipTransformer,
    TriggerTransformer,
    add_trigger_class,
    classify_node,
    normalize_html,
    transform_registry,
    transform_slotted_components,
)

__version__ = "0.1.0"

__all__ = [
    # Entry points
    "normalize_html",
    "parse_html",
    "serialize_html",
    "ComponentPipeline",
    # Transformers
    "ComponentKind",
    "classify_node",
    "PopoverTransformer",
    "TooltipTransformer",
    "ModalTransformer",
    "TriggerTransformer",
    "transform_registry",
    # Primitives
    "add_trigger_class",
    "transform_slotted_components",
    "get_shorthand_slot_name",
    "process_attribute_without_override",
    "rename_attribute",
    "rename_slot",
    # Diagnostics
    "DeprecationDiagnostic",
    "DiagnosticCollector",
    "warn_deprecated_attributes",
    "warn_deprecated_slot_names",
    # Options
    "AffordanceDefaults",
    "ComponentOptions",
    "MarkdownContentRenderer",
    # Exceptions
    "BvMarkupError",
    "FileError",
    "ParsingError",
    "ValidationError",
]
