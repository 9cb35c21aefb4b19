# csv2table/models.py
from pydantic import BaseModel


class HtmlTableOptions(BaseModel):
    has_header: bool = True
    class_name: str = "csv-table"


class BlockTableOptions(BaseModel):
    # WordPress table block defaults: no header row, fixed layout on
    has_header: bool = False
    has_fixed_layout: bool = True
    has_stripes: bool = False
