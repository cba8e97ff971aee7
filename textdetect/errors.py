"""Failure kinds of the text detection endpoint and their HTTP rendering.

Every failure is terminal for the request: it is logged once and reported to
the caller as a status code with the error message as a plain-text body.
"""
from __future__ import annotations

from fastapi.responses import PlainTextResponse


class DetectTextError(Exception):
    status_code: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class MethodNotAllowedError(DetectTextError):
    status_code = 405


class ClientConstructionError(DetectTextError):
    status_code = 500


class ImageDecodeError(DetectTextError):
    status_code = 400


class PayloadTooLargeError(DetectTextError):
    status_code = 413


class ClientDisconnectedError(DetectTextError):
    status_code = 400


class AnnotationServiceError(DetectTextError):
    status_code = 500


class EncodingError(DetectTextError):
    status_code = 500


def error_response(exc: DetectTextError) -> PlainTextResponse:
    return PlainTextResponse(exc.message, status_code=exc.status_code)
