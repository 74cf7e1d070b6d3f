"""Convert rendered Storybook docs markup into Markdown.

:class:`StorybookMarkdownConverter` extends ``markdownify`` with the rules
needed for MDX docs pages: GitHub-flavoured strikethrough, tables, and task
list checkboxes, language-tagged fenced code blocks, and removal of in-page
anchors, buttons, images, and embedded scripts or styles. Text is never
escaped because the docs content is authored prose.

Example
-------
>>> convert_html_to_markdown('<pre><code class="language-tsx">const x = 1;</code></pre>')
'```tsx\\nconst x = 1;\\n```'
>>> convert_html_to_markdown('<a href="#top">top</a>')
''
"""

from __future__ import annotations

import re
import typing as typ

from markdownify import ATX, MarkdownConverter, abstract_inline_conversion

if typ.TYPE_CHECKING:
    from bs4 import Tag

FENCE = "```"
LANGUAGE_CLASS_PREFIX = "language-"
EXCESS_NEWLINES = re.compile(r"\n{3,}")


def _detect_language(el: Tag) -> str:
    """Return the ``language-*`` name from the first tagged descendant."""
    for node in el.select(f'[class*="{LANGUAGE_CLASS_PREFIX}"]'):
        for cls in node.get("class") or []:
            if cls.startswith(LANGUAGE_CLASS_PREFIX):
                return cls.removeprefix(LANGUAGE_CLASS_PREFIX)
    return ""


def _is_navigation_anchor(el: Tag) -> bool:
    """Return ``True`` for anchors that only make sense on the original page."""
    href = el.get("href")
    return (
        href is None
        or str(href).startswith("#")
        or el.get("aria-hidden") == "true"
        or el.get("tabindex") == "-1"
    )


def _drop(self: MarkdownConverter, el: Tag, text: str, parent_tags: set[str]) -> str:  # noqa: ARG001
    return ""


class StorybookMarkdownConverter(MarkdownConverter):
    """Markdownify converter tuned for Storybook docs pages."""

    class Options(MarkdownConverter.DefaultOptions):
        heading_style = ATX
        bullets = "-"
        strong_em_symbol = "*"
        autolinks = False
        escape_asterisks = False
        escape_underscores = False
        escape_misc = False

    convert_em = abstract_inline_conversion(lambda self: "_")  # noqa: ARG005
    convert_i = convert_em
    convert_del = abstract_inline_conversion(lambda self: "~~")  # noqa: ARG005
    convert_s = convert_del
    convert_strike = convert_del

    convert_button = _drop
    convert_style = _drop
    convert_script = _drop
    convert_img = _drop

    def convert_pre(self, el: Tag, text: str, parent_tags: set[str]) -> str:  # noqa: ARG002
        """Emit a fenced block tagged with the detected language."""
        content = text.strip()
        if not content:
            return ""
        if content.startswith(FENCE):
            return f"\n\n{content}\n\n"
        return f"\n\n{FENCE}{_detect_language(el)}\n{content}\n{FENCE}\n\n"

    def convert_a(self, el: Tag, text: str, parent_tags: set[str]) -> str:
        """Drop in-page navigation anchors, otherwise emit an inline link."""
        if _is_navigation_anchor(el):
            return ""
        return super().convert_a(el, text, parent_tags)

    def convert_input(self, el: Tag, text: str, parent_tags: set[str]) -> str:  # noqa: ARG002
        """Render task-list checkboxes as ``[x]`` / ``[ ]`` markers."""
        if el.get("type") != "checkbox" or el.parent is None or el.parent.name != "li":
            return text
        marker = "[x]" if el.has_attr("checked") else "[ ]"
        following = el.next_sibling
        if isinstance(following, str) and following[:1].isspace():
            return marker
        return f"{marker} "


def convert_html_to_markdown(html: str) -> str:
    """Convert an HTML fragment into Markdown.

    Parameters
    ----------
    html : str
        Inner markup of the docs container.

    Returns
    -------
    str
        Trimmed Markdown with at most one blank line between blocks.
    """
    markdown = StorybookMarkdownConverter().convert(html)
    return EXCESS_NEWLINES.sub("\n\n", markdown).strip()


__all__ = ["StorybookMarkdownConverter", "convert_html_to_markdown"]
