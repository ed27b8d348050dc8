from __future__ import annotations

import html
from pathlib import Path

import markdown as md

from onemd_editor.core.html_sanitizer import sanitize_rendered_html
from onemd_editor.core.links import to_display_markdown


class MarkdownRenderer:
    def __init__(self, *, title: str = "Preview"):
        self.title = title

    def render_body(self, text: str, *, note_path: Path | str | None = None) -> str:
        if note_path is not None:
            text = to_display_markdown(text, note_path)
        rendered = md.markdown(text, extensions=["fenced_code", "tables", "toc"])
        return sanitize_rendered_html(rendered)

    def render_page(self, text: str, *, note_path: Path | str | None = None) -> str:
        rendered = self.render_body(text, note_path=note_path)

        return f"""\
<html>
<head>
  <meta charset="utf-8"/>
  <title>{html.escape(self.title)}</title>
  <style>
    body {{ font-family: sans-serif; padding: 16px; line-height: 1.5; }}
    code, pre {{ background: #f5f5f5; }}
    pre {{ padding: 12px; overflow-x: auto; }}
    img {{ max-width: 100%; }}
    a {{ text-decoration: none; }}
    a:hover {{ text-decoration: underline; }}
  </style>
</head>
<body>{rendered}</body>
</html>
"""
