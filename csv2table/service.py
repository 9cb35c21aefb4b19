# csv2table/service.py
"""
Conversion service: CSV text in, table markup out.

A converter is built once by its host (the API, a script, a test) and called
directly; it holds no per-call state, so one instance can serve many requests.
"""
import logging
from typing import Callable, Optional

from pydantic import BaseModel

from csv2table.blocks import extract_preview, render_block_table
from csv2table.exceptions import EmptyInputError, NoDataError
from csv2table.formatter import format_block_markup, format_html
from csv2table.models import BlockTableOptions, HtmlTableOptions
from csv2table.parser import TRIM_CHARS, Table, parse_csv
from csv2table.renderer import render_html_table
from csv2table.schemas import ConversionResult

logger = logging.getLogger(__name__)

ParseFunc = Callable[[str], Table]


class TableConverter:
    """Base converter; subclasses supply render/format/preview for one output format."""

    name = "table"

    def __init__(self, parser: ParseFunc = parse_csv):
        self._parse = parser

    def render(self, table: Table, options: Optional[BaseModel]) -> Optional[str]:
        """Render the table as markup, or None when empty. Subclasses must override."""
        raise NotImplementedError

    def format(self, markup: str) -> str:
        """Indent markup for display. Subclasses must override."""
        raise NotImplementedError

    def preview(self, markup: str) -> Optional[str]:
        return markup

    def parse(self, text: str) -> Table:
        return self._parse(text)

    def convert(self, text: str, options: Optional[BaseModel] = None) -> ConversionResult:
        """
        Parse `text` and render it.
        Raises EmptyInputError for blank input and NoDataError when nothing survives parsing.
        """
        if not text or not text.strip(TRIM_CHARS):
            raise EmptyInputError()

        rows = self.parse(text)
        markup = self.render(rows, options)
        if markup is None:
            raise NoDataError()

        logger.debug("%s conversion: %d rows, %d chars of markup", self.name, len(rows), len(markup))
        return ConversionResult(
            rows=rows,
            markup=markup,
            formatted=self.format(markup),
            preview=self.preview(markup),
        )


class HtmlTableConverter(TableConverter):
    name = "html"

    def __init__(self, parser: ParseFunc = parse_csv, default_options: Optional[HtmlTableOptions] = None):
        super().__init__(parser)
        self.default_options = default_options or HtmlTableOptions()

    def render(self, table: Table, options: Optional[HtmlTableOptions]) -> Optional[str]:
        return render_html_table(table, options or self.default_options)

    def format(self, markup: str) -> str:
        return format_html(markup)


class BlockTableConverter(TableConverter):
    name = "block"

    def __init__(self, parser: ParseFunc = parse_csv, default_options: Optional[BlockTableOptions] = None):
        super().__init__(parser)
        self.default_options = default_options or BlockTableOptions()

    def render(self, table: Table, options: Optional[BlockTableOptions]) -> Optional[str]:
        return render_block_table(table, options or self.default_options)

    def format(self, markup: str) -> str:
        return format_block_markup(markup)

    def preview(self, markup: str) -> Optional[str]:
        return extract_preview(markup)
