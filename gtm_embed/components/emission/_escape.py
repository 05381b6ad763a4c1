"""
Output escaping for the emitted markup.

Each function covers exactly one output context. Do not chain them.
"""

from __future__ import annotations

import html
from urllib.parse import quote


def escape_js(text: str) -> str:
    """
    Escape text for use inside a single-quoted string in an inline script.

    HTML special characters become entities so the value can never close
    the surrounding <script> element; quotes, backslashes and newlines are
    escaped for the JavaScript string itself.
    """
    safe = html.escape(text, quote=False).replace('"', "&quot;")
    safe = safe.replace("\r", "")
    safe = safe.replace("\\", "\\\\").replace("'", "\\'")
    return safe.replace("\n", "\\n")


def escape_url_component(text: str) -> str:
    """Percent-encode text for a URL query value (RFC 3986)."""
    return quote(text, safe="")


def escape_attr(text: str) -> str:
    """Escape text for use inside a double- or single-quoted HTML attribute."""
    return html.escape(text, quote=True)
