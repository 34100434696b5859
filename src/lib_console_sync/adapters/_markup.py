"""Helpers turning console markup back into plain text.

Why
---
The terminal display and the text dump both show entries without a browser.
Converting in one place keeps their output identical.

Contents
--------
* :func:`markup_to_text` – ``<br>`` to newlines, tags stripped, entities unescaped.
* :func:`leading_css_class` – CSS class of the outermost span, if any.
"""

from __future__ import annotations

import html
import re

_BREAK = re.compile(r"<br\s*/?>", re.IGNORECASE)
_TAG = re.compile(r"<[^>]+>")
_LEADING_CLASS = re.compile(r"""^\s*<span\b[^>]*\bclass=["']([^"']+)["']""")


def markup_to_text(markup: str) -> str:
    """Return the visible text of ``markup``.

    >>> markup_to_text("<span class='trace'>-> &lt;module&gt;<br></span>")
    '-> <module>'
    >>> markup_to_text('<span class="log" style=""> a &amp; b</span>')
    ' a & b'
    """

    text = _BREAK.sub("\n", markup)
    text = _TAG.sub("", text)
    return html.unescape(text).rstrip("\n")


def leading_css_class(markup: str) -> str | None:
    """Return the class of the first span in ``markup``.

    >>> leading_css_class('<span class="warn" style="">(w) x</span>')
    'warn'
    >>> leading_css_class('<span style="">x</span>') is None
    True
    """

    match = _LEADING_CLASS.match(markup)
    return match.group(1) if match else None


__all__ = ["leading_css_class", "markup_to_text"]
