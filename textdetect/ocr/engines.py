"""VisionOCRClient backed by the Google Cloud Vision REST API."""
from __future__ import annotations

import base64
import logging

import httpx
from pydantic import ValidationError

from textdetect.errors import AnnotationServiceError
from textdetect.ocr.base_ocr import ImagePayload, OCRClient, TextAnnotation
from textdetect.schemas import VisionAnnotateResponse, VisionErrorBody

logger = logging.getLogger(__name__)


class VisionOCRClient(OCRClient):
    """OCR client for Cloud Vision ``TEXT_DETECTION``.

    Config (via .env):
        OCR_PROVIDER=vision
        VISION_API_KEY=...               (or VISION_ACCESS_TOKEN=...)
        VISION_ENDPOINT=https://vision.googleapis.com
        VISION_INSECURE_SKIP_VERIFY=false
        VISION_TIMEOUT_SECONDS=30

    Server certificates are verified unless ``insecure_skip_verify`` is set.
    """

    def __init__(
        self,
        api_key: str | None = None,
        access_token: str | None = None,
        endpoint: str = "https://vision.googleapis.com",
        insecure_skip_verify: bool = False,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        if not api_key and not access_token:
            raise ValueError(
                "Cloud Vision credentials are missing: set VISION_API_KEY or VISION_ACCESS_TOKEN"
            )
        if insecure_skip_verify:
            logger.warning("vision_tls_verification_disabled", extra={"endpoint": endpoint})

        self._url = f"{endpoint.rstrip('/')}/v1/images:annotate"
        self._params = {"key": api_key} if api_key else {}
        self._headers = {"Authorization": f"Bearer {access_token}"} if access_token else {}
        self.verify_tls = not insecure_skip_verify
        self._client = httpx.AsyncClient(
            timeout=timeout,
            verify=self.verify_tls,
            transport=transport,
        )

    async def aclose(self) -> None:
        await self._client.aclose()

    async def detect_texts(self, image: ImagePayload, max_results: int) -> list[TextAnnotation]:
        payload = {
            "requests": [
                {
                    "image": {"content": base64.b64encode(image.content).decode("ascii")},
                    "features": [{"type": "TEXT_DETECTION", "maxResults": max_results}],
                }
            ]
        }

        try:
            response = await self._client.post(
                self._url,
                params=self._params,
                headers=self._headers,
                json=payload,
            )
        except httpx.HTTPError as exc:
            raise AnnotationServiceError(str(exc) or type(exc).__name__) from exc

        if response.is_error:
            raise AnnotationServiceError(self._error_message(response))

        try:
            body = VisionAnnotateResponse.model_validate_json(response.content)
        except ValidationError as exc:
            raise AnnotationServiceError(f"malformed Cloud Vision response: {exc}") from exc

        if not body.responses:
            return []

        result = body.responses[0]
        if result.error is not None and result.error.code:
            raise AnnotationServiceError(result.error.message or f"Cloud Vision error code {result.error.code}")

        annotations = [
            TextAnnotation(description=a.description, locale=a.locale)
            for a in result.text_annotations
        ]
        logger.info("vision_text_detection_complete", extra={"annotations": len(annotations)})
        return annotations

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        try:
            return VisionErrorBody.model_validate_json(response.content).error.message
        except ValidationError:
            return f"Cloud Vision returned HTTP {response.status_code}"
