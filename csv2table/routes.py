# csv2table/routes.py
import logging

from fastapi import APIRouter, Depends, HTTPException

from csv2table.config import Settings, get_settings
from csv2table.exceptions import EmptyInputError, NoDataError
from csv2table.models import HtmlTableOptions
from csv2table.parser import parse_csv
from csv2table.schemas import (
    BlockRequest,
    ConversionResponse,
    HtmlRequest,
    ParseRequest,
    ParseResponse,
)
from csv2table.service import BlockTableConverter, HtmlTableConverter, TableConverter

logger = logging.getLogger(__name__)

router = APIRouter()

GENERIC_ERROR = "Error processing CSV data"


# ------------------------------
# Dependencies
# ------------------------------
def get_html_converter(settings: Settings = Depends(get_settings)) -> HtmlTableConverter:
    return HtmlTableConverter(default_options=HtmlTableOptions(class_name=settings.table_class))


def get_block_converter() -> BlockTableConverter:
    return BlockTableConverter()


def run_conversion(converter: TableConverter, req: ParseRequest, options) -> ConversionResponse:
    try:
        result = converter.convert(req.text, options)
    except EmptyInputError as e:
        raise HTTPException(status_code=400, detail=e.message)
    except NoDataError as e:
        raise HTTPException(status_code=422, detail=e.message)
    except Exception:
        logger.exception("%s conversion failed", converter.name)
        raise HTTPException(status_code=500, detail=GENERIC_ERROR)

    return ConversionResponse(**result.model_dump())


# ------------------------------
# Endpoints
# ------------------------------
@router.get("/health")
def health():
    return {"status": "ok"}


@router.post("/parse", response_model=ParseResponse)
def parse(req: ParseRequest):
    """Parse CSV text and return the rows as JSON. Blank input yields no rows."""
    return ParseResponse(rows=parse_csv(req.text))


@router.post("/html", response_model=ConversionResponse)
def convert_html(req: HtmlRequest, converter: HtmlTableConverter = Depends(get_html_converter)):
    """Convert CSV text to an HTML <table>."""
    return run_conversion(converter, req, req.options)


@router.post("/block", response_model=ConversionResponse)
def convert_block(req: BlockRequest, converter: BlockTableConverter = Depends(get_block_converter)):
    """Convert CSV text to WordPress table block markup."""
    return run_conversion(converter, req, req.options)
