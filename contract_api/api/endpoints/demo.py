"""
Demonstration endpoints: plain-text echo, JSON echo, query parameters and
multipart upload.
"""
import base64
import logging
from typing import Optional

from fastapi import APIRouter, File, Query, Request, UploadFile
from fastapi.responses import JSONResponse, Response

from ...core.errors import MissingParameterError

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/handleSimpleTextRequest")
async def handle_simple_text_request(request: Request):
    """Returns the request body unchanged as plain text."""
    body = await request.body()
    logger.info(f"Request received with simple text {body!r}!")
    return Response(content=body, media_type="text/html")


@router.post("/handleJsonBody")
async def handle_json_body(request: Request):
    """Echoes the `name` field of a JSON body."""
    try:
        payload = await request.json()
    except ValueError:
        payload = None
    logger.info(f"Request received with body {payload}!")

    if not isinstance(payload, dict) or not payload.get("name"):
        raise MissingParameterError("Missing parameter name")

    return JSONResponse(
        status_code=201,
        content={"name": payload["name"]},
        headers={"testHeader": "testHeaderValue", "statusDescription": "Ok"},
    )


@router.api_route("/handleQueryParams", methods=["GET", "POST"])
async def handle_query_params(request: Request, name: Optional[str] = Query(None)):
    logger.info(f"Request received with query params {dict(request.query_params)}!")
    if not name:
        raise MissingParameterError("Missing parameter name")

    return Response(content="Ok", media_type="text/html")


@router.post("/handleMultipartData")
async def handle_multipart_data(
    my_file: Optional[UploadFile] = File(None, alias="myFile"),
):
    """
    Receives a file part named `myFile` and returns its content base64-encoded.
    """
    logger.info("Request received with multipart data")
    if my_file is None:
        raise MissingParameterError("File not found!")

    data = await my_file.read()
    return Response(
        content=base64.b64encode(data),
        media_type="application/octet-stream",
        headers={"Content-Transfer-Encoding": "base64"},
    )
