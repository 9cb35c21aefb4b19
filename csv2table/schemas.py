from pydantic import BaseModel, Field
from typing import List, Optional

from csv2table.models import BlockTableOptions, HtmlTableOptions


class ParseRequest(BaseModel):
    text: str


class HtmlRequest(ParseRequest):
    options: Optional[HtmlTableOptions] = None


class BlockRequest(ParseRequest):
    options: Optional[BlockTableOptions] = None


class ParseResponse(BaseModel):
    ok: bool = True
    rows: List[List[str]] = Field(default_factory=list)


class ConversionResult(BaseModel):
    rows: List[List[str]]
    markup: str                     # raw output, what gets copied
    formatted: str                  # indented for display
    preview: Optional[str] = None   # renderable HTML for a preview pane


class ConversionResponse(ConversionResult):
    ok: bool = True
