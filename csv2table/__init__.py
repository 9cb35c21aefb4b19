"""
csv2table - convert CSV text into HTML tables and WordPress table blocks.

- parser   : parse_csv, the quote-aware CSV reader
- renderer : plain HTML <table> output
- blocks   : WordPress wp:table block output
- formatter: indented markup for display
- service  : converters used by the API and the Streamlit app
"""

from csv2table.blocks import extract_preview, render_block_table
from csv2table.exceptions import ConversionError, Csv2TableError, EmptyInputError, NoDataError
from csv2table.formatter import format_block_markup, format_html
from csv2table.models import BlockTableOptions, HtmlTableOptions
from csv2table.parser import parse_csv
from csv2table.renderer import escape_html, render_html_table
from csv2table.service import BlockTableConverter, HtmlTableConverter, TableConverter

__version__ = "0.1.0"

__all__ = [
    "parse_csv",
    "render_html_table",
    "escape_html",
    "render_block_table",
    "extract_preview",
    "format_html",
    "format_block_markup",
    "HtmlTableOptions",
    "BlockTableOptions",
    "TableConverter",
    "HtmlTableConverter",
    "BlockTableConverter",
    "Csv2TableError",
    "ConversionError",
    "EmptyInputError",
    "NoDataError",
]
