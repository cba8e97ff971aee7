from __future__ import annotations

from textdetect.core.config import settings
from textdetect.ocr.base_ocr import OCRClient
from textdetect.ocr.mock_ocr import MockOCRClient


def get_ocr_client() -> OCRClient:
    """Return a new client for the configured OCR provider.

    OCR_PROVIDER options:
        vision: VisionOCRClient (Cloud Vision REST API, needs credentials)
        mock  : fixed annotations (dev/test, no network)
    """
    provider = settings.ocr_provider.lower().strip()

    if provider == "mock":
        return MockOCRClient()

    if provider == "vision":
        from textdetect.ocr.engines import VisionOCRClient
        return VisionOCRClient(
            api_key=settings.vision_api_key,
            access_token=settings.vision_access_token,
            endpoint=settings.vision_endpoint,
            insecure_skip_verify=settings.vision_insecure_skip_verify,
            timeout=settings.vision_timeout_seconds,
        )

    raise ValueError(f"Unknown OCR_PROVIDER={settings.ocr_provider!r}")
