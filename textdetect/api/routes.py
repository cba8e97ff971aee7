from __future__ import annotations

import json
import logging

from fastapi import APIRouter, Request, Response
from fastapi.responses import PlainTextResponse
from starlette.requests import ClientDisconnect

from textdetect.core.config import settings
from textdetect.errors import (
    AnnotationServiceError,
    ClientConstructionError,
    ClientDisconnectedError,
    DetectTextError,
    EncodingError,
    ImageDecodeError,
    MethodNotAllowedError,
    PayloadTooLargeError,
)
from textdetect.ocr import factory

logger = logging.getLogger(__name__)
router = APIRouter()

MAX_RESULTS = 2000
NO_TEXT_FOUND = "No text found."

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "OPTIONS, GET, POST, PUT, PATCH, DELETE",
}

# Every method reaches the handler so that non-POST requests get our own 405.
ROUTED_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


async def read_body(request: Request, limit: int) -> bytes:
    """Read the whole request body, failing once it grows past *limit* bytes."""
    body = bytearray()
    try:
        async for chunk in request.stream():
            body.extend(chunk)
            if limit and len(body) > limit:
                raise PayloadTooLargeError(f"request body exceeds {limit} bytes")
    except ClientDisconnect as exc:
        raise ClientDisconnectedError("client disconnected before the request body was read") from exc
    return bytes(body)


@router.api_route("/detect_text", methods=ROUTED_METHODS)
async def detect_text(request: Request) -> Response:
    if request.method != "POST":
        raise MethodNotAllowedError("Method not allowed")

    try:
        client = factory.get_ocr_client()
    except Exception as exc:
        raise ClientConstructionError(str(exc)) from exc

    async with client:
        raw = await read_body(request, settings.max_body_bytes)
        try:
            image = client.image_from_bytes(raw)
        except DetectTextError:
            raise
        except Exception as exc:
            raise ImageDecodeError(str(exc)) from exc
        try:
            annotations = await client.detect_texts(image, max_results=MAX_RESULTS)
        except DetectTextError:
            raise
        except Exception as exc:
            raise AnnotationServiceError(str(exc)) from exc

    if not annotations:
        logger.info("no_text_found", extra={"image_bytes": len(raw)})
        return PlainTextResponse(NO_TEXT_FOUND)

    texts = [annotation.description for annotation in annotations]
    try:
        content = json.dumps(texts, ensure_ascii=False, separators=(",", ":")).encode("utf-8")
    except (TypeError, ValueError) as exc:
        raise EncodingError(str(exc)) from exc

    logger.info("text_detected", extra={"image_bytes": len(raw), "annotations": len(texts)})
    return Response(content=content, media_type="application/json", headers=CORS_HEADERS)
