#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/bvmarkup/rendering.py
"""Markdown rendering for attribute text that is moved into slots.

Authors may write Markdown in attributes such as ``content="**Hi**"``. When
the attribute becomes a slot, the text is rendered to HTML first so that the
slot holds the same markup an explicit ``<template #content>`` would.
"""

from __future__ import annotations

import re
from typing import Protocol

import mistune

_SINGLE_PARAGRAPH = re.compile(r"^<p>(?P<inner>.*)</p>$", re.DOTALL)


class ContentRenderer(Protocol):
    """Anything able to turn attribute text into slot HTML."""

    def render(self, text: str, inline: bool = True) -> str: ...


class MarkdownContentRenderer:
    """Render attribute text with mistune, keeping embedded raw HTML.

    Parameters
    ----------
    plugins : list of str, optional
        mistune plugins to enable; defaults to strikethrough and tables

    Examples
    --------
    >>> MarkdownContentRenderer().render("**Hi**")
    '<strong>Hi</strong>'

    """

    def __init__(self, plugins: list[str] | None = None) -> None:
        if plugins is None:
            plugins = ["strikethrough", "table"]
        self._markdown = mistune.create_markdown(escape=False, plugins=plugins)

    def render(self, text: str, inline: bool = True) -> str:
        """Render ``text``; ``inline`` drops a lone wrapping paragraph."""
        html = str(self._markdown(text)).strip()
        if inline:
            match = _SINGLE_PARAGRAPH.match(html)
            if match and "<p>" not in match.group("inner"):
                return match.group("inner")
        return html
