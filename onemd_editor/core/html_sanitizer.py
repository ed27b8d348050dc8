from __future__ import annotations

import html

from onemd_editor.logging_setup import log

# optional dependency
try:
    import bleach
except Exception:  # pragma: no cover
    bleach = None

_BLEACH_MISSING_WARNED = False

ALLOWED_TAGS = [
    "a", "p", "br", "hr", "img",
    "strong", "em", "code", "pre", "blockquote",
    "ul", "ol", "li",
    "h1", "h2", "h3", "h4", "h5", "h6",
    "table", "thead", "tbody", "tr", "th", "td",
]
ALLOWED_ATTRS = {
    "a": ["href", "title"],
    "img": ["src", "alt", "title"],
    "h1": ["id"], "h2": ["id"], "h3": ["id"], "h4": ["id"], "h5": ["id"], "h6": ["id"],
    "code": ["class"],
    "th": ["align"], "td": ["align"],
}
# file: is needed for images resolved into the note's images/ folder
ALLOWED_PROTOCOLS = ["http", "https", "mailto", "file"]


def sanitize_rendered_html(rendered_html: str) -> str:
    global _BLEACH_MISSING_WARNED

    if bleach is None:
        if not _BLEACH_MISSING_WARNED:
            log.warning("bleach is not installed; preview will be plain text for safety.")
            _BLEACH_MISSING_WARNED = True
        return html.escape(rendered_html)

    return bleach.clean(
        rendered_html,
        tags=ALLOWED_TAGS,
        attributes=ALLOWED_ATTRS,
        protocols=ALLOWED_PROTOCOLS,
        strip=True,
    )
