# backend/routers/properties.py

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, File, HTTPException, Response, UploadFile
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import PlainTextResponse

from models.property_models import PropertyView
from routers.dependencies import get_settings, get_store
from services.csv_parser import CsvParseError, parse_csv_bytes
from services.presenters.property_presenter import present_properties, present_property
from utils.data_store import PropertyStore
from utils.settings import Settings

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/properties", tags=["Properties"])


@router.get("", response_model=List[PropertyView])
def list_properties(
    store: PropertyStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
):
    """
    All current properties, ordered by id. Empty store -> [].
    """
    return present_properties(store.list_all(), settings.address_format)


@router.post("/upload", response_model=List[PropertyView])
async def upload_csv(
    response: Response,
    file: Optional[UploadFile] = File(None),
    store: PropertyStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
):
    """
    Replace every stored property with the rows of the uploaded CSV.
    The store only changes once the whole file has been read and parsed.
    """
    if file is None:
        # No "file" part: nothing to do, keep what we have.
        logger.info("Upload without a file part; store left unchanged")
        response.headers["X-Skipped-Rows"] = "0"
        current = await run_in_threadpool(store.list_all)
        return present_properties(current, settings.address_format)

    content = await file.read()

    try:
        result = parse_csv_bytes(content, strict=settings.row_failure_policy == "strict")
    except CsvParseError as e:
        raise HTTPException(status_code=400, detail=str(e))

    await run_in_threadpool(store.replace_all, result.properties)

    logger.info(
        "Loaded %d properties from %s (%d rows skipped)",
        len(result.properties),
        file.filename,
        result.skipped_count,
    )
    response.headers["X-Skipped-Rows"] = str(result.skipped_count)

    return present_properties(
        sorted(result.properties, key=lambda p: p.id),
        settings.address_format,
    )


@router.get(
    "/{property_id}",
    response_model=PropertyView,
    responses={404: {"description": "Property not found"}},
)
def get_property(
    property_id: int,
    store: PropertyStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
):
    prop = store.get(property_id)
    if prop is None:
        return PlainTextResponse("Property not found", status_code=404)
    return present_property(prop, settings.address_format)
