import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse, PlainTextResponse

import config
from errors import ServiceError, StorageFailure

from .storage import CharacterCatalog

logger = logging.getLogger(__name__)

router = APIRouter()

READ_FAILURE = "Something went wrong while parsing file"


def get_catalog() -> CharacterCatalog:
    return CharacterCatalog(config.CATALOG_FILE)


@router.get("/getSanrio/")
def list_characters(catalog: CharacterCatalog = Depends(get_catalog)):
    try:
        data = catalog.list_all()
    except StorageFailure as err:
        logger.error("Catalog read failed: %s", err, exc_info=err)
        return PlainTextResponse(READ_FAILURE, status_code=500)

    return JSONResponse(data, status_code=200)


@router.get("/getSanrio/{name}")
def get_character(name: str, catalog: CharacterCatalog = Depends(get_catalog)):
    try:
        entry = catalog.get(name)
    except StorageFailure as err:
        logger.error("Catalog read failed: %s", err, exc_info=err)
        return PlainTextResponse(READ_FAILURE, status_code=500)
    except ServiceError as err:
        return PlainTextResponse(str(err), status_code=400)

    return JSONResponse(entry, status_code=200)
