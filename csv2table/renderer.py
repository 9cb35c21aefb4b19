# csv2table/renderer.py
import html
from typing import List, Optional

from csv2table.models import HtmlTableOptions
from csv2table.parser import Table


def escape_html(text: str) -> str:
    """Escape cell text for use between tags (&, <, >)."""
    return html.escape(text, quote=False)


def render_rows(table: Table, has_header: bool) -> str:
    """
    Render the <thead>/<tbody> part of a table.
    - has_header: row 0 becomes <th> cells in a <thead>
    - the <tbody> is always present, even when it has no rows
    """
    parts: List[str] = []

    if has_header and table:
        parts.append("<thead><tr>")
        for cell in table[0]:
            parts.append(f"<th>{escape_html(cell)}</th>")
        parts.append("</tr></thead>")

    parts.append("<tbody>")
    start = 1 if has_header else 0
    for row in table[start:]:
        parts.append("<tr>")
        for cell in row:
            parts.append(f"<td>{escape_html(cell)}</td>")
        parts.append("</tr>")
    parts.append("</tbody>")

    return "".join(parts)


def render_html_table(table: Table, options: Optional[HtmlTableOptions] = None) -> Optional[str]:
    """
    Render parsed CSV rows as a plain HTML <table>.
    Returns None when there is nothing to render so the caller can report "no data".
    """
    options = options or HtmlTableOptions()
    if not table:
        return None

    class_attr = html.escape(options.class_name, quote=True)
    return f'<table class="{class_attr}">{render_rows(table, options.has_header)}</table>'
