"""Markdown rendering helpers for Qt rich-text labels.

Question text and result lines are authored as CommonMark and converted to
HTML fragments. Qt labels only understand a subset of HTML, so raw HTML in the
source is disabled and the output stays within plain block and inline tags.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from markdown_it import MarkdownIt

_EMPTY_PLACEHOLDER = "<p><em>No content provided.</em></p>"


@dataclass(slots=True)
class MarkdownRenderer:
    """Converts markdown into HTML fragments."""

    enable_html: bool = False
    _markdown: MarkdownIt = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._markdown = MarkdownIt("commonmark", {"html": self.enable_html}).enable("strikethrough")

    def render_fragment(self, markdown_text: str) -> str:
        """Render a markdown string into an HTML fragment."""

        sanitized = markdown_text.strip()
        if not sanitized:
            return _EMPTY_PLACEHOLDER
        return self._markdown.render(sanitized)

    def render_emphasis(self, text: str) -> str:
        """Render text as a bold paragraph, escaping markdown control characters."""

        stripped = text.strip()
        if not stripped:
            return _EMPTY_PLACEHOLDER
        return self.render_fragment(f"**{_escape_markdown(stripped)}**")


def _escape_markdown(text: str) -> str:
    return "".join(f"\\{char}" if char in "\\`*_[]<>#" else char for char in text)


renderer = MarkdownRenderer()
# Shared instance; the Qt UI renders from the main thread only.
