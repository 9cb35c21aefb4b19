# csv2table/blocks.py
import re
from typing import List, Optional

from csv2table.models import BlockTableOptions
from csv2table.parser import Table
from csv2table.renderer import render_rows

BLOCK_OPEN = "<!-- wp:table -->"
BLOCK_CLOSE = "<!-- /wp:table -->"
FIGURE_CLASS = "wp-block-table"

_FIGURE_RE = re.compile(r"<figure[^>]*>(.*?)</figure>", re.DOTALL)


def block_class_names(options: BlockTableOptions) -> List[str]:
    classes = []
    if options.has_fixed_layout:
        classes.append("has-fixed-layout")
    if options.has_stripes:
        classes.append("has-stripes")
    return classes


def render_block_table(table: Table, options: Optional[BlockTableOptions] = None) -> Optional[str]:
    """
    Render parsed CSV rows as WordPress table block markup.

    The HTML table is wrapped in a <figure class="wp-block-table"> between the
    wp:table comment markers, which is the form the block editor stores.
    Returns None for an empty table.
    """
    options = options or BlockTableOptions()
    if not table:
        return None

    classes = block_class_names(options)
    class_attr = f' class="{" ".join(classes)}"' if classes else ""
    table_html = f"<table{class_attr}>{render_rows(table, options.has_header)}</table>"

    return f'{BLOCK_OPEN}\n<figure class="{FIGURE_CLASS}">{table_html}</figure>\n{BLOCK_CLOSE}'


def extract_preview(markup: str) -> Optional[str]:
    """Return the HTML inside the block's <figure>, or None if there is none."""
    match = _FIGURE_RE.search(markup)
    if match is None:
        return None
    return match.group(1)
