import logging

from fastapi import APIRouter, Depends, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse, PlainTextResponse

import config
from errors import ServiceError, StorageFailure

from .service import AccountService, LoginResult
from .storage import JsonAccountStore

logger = logging.getLogger(__name__)

router = APIRouter()


# Store I/O is blocking, so service calls run in the threadpool.
def get_account_service() -> AccountService:
    return AccountService(JsonAccountStore(config.ACCOUNTS_FILE))


# ------------------------------------------------------------
# Helper: request body -> dict
# The frontend sends JSON for login and FormData for the
# character calls, so both are accepted everywhere.
# ------------------------------------------------------------
async def read_body(request: Request) -> dict:
    content_type = request.headers.get("content-type", "")

    try:
        if content_type.startswith("application/json"):
            data = await request.json()
            return data if isinstance(data, dict) else {}

        if content_type.startswith(("application/x-www-form-urlencoded", "multipart/form-data")):
            form = await request.form()
            return {key: value for key, value in form.items() if isinstance(value, str)}
    except ValueError:
        logger.warning("Unparseable %s body on %s", content_type, request.url.path)

    return {}


def _error_response(err: ServiceError, server_message: str) -> PlainTextResponse:
    if isinstance(err, StorageFailure):
        logger.error("%s: %s", server_message, err, exc_info=err)
        return PlainTextResponse(server_message, status_code=500)
    return PlainTextResponse(str(err), status_code=400)


# ============================================================
#  LOGIN / REGISTER
# ============================================================
@router.post("/login")
async def login_handler(
    request: Request,
    service: AccountService = Depends(get_account_service),
):
    data = await read_body(request)

    try:
        result = await run_in_threadpool(
            service.identify, data.get("username"), data.get("password")
        )
    except ServiceError as err:
        return _error_response(err, "some server side error")

    if result is LoginResult.REGISTERED:
        return PlainTextResponse("account created successfully", status_code=200)
    return PlainTextResponse("successfully logged in", status_code=200)


# ============================================================
#  SET CHARACTER
# ============================================================
@router.post("/setcharacter")
async def set_character_handler(
    request: Request,
    service: AccountService = Depends(get_account_service),
):
    data = await read_body(request)

    try:
        character = await run_in_threadpool(
            service.set_character,
            data.get("username"),
            data.get("character"),
            data.get("level"),
            data.get("img"),
        )
    except ServiceError as err:
        return _error_response(err, "Server-side error")

    return JSONResponse(character.to_dict(), status_code=200)


# ============================================================
#  GET CHARACTER
# ============================================================
@router.post("/getcharacter")
async def get_character_handler(
    request: Request,
    service: AccountService = Depends(get_account_service),
):
    data = await read_body(request)

    try:
        character = await run_in_threadpool(service.get_character, data.get("username"))
    except ServiceError as err:
        return _error_response(err, "Server-side error")

    return JSONResponse(character.to_dict() if character else None, status_code=200)
