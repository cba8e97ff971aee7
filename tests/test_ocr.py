"""OCR client tests: base contract, mock client and factory."""
from __future__ import annotations

import pytest

from textdetect.core.config import settings
from textdetect.errors import ImageDecodeError
from textdetect.ocr.base_ocr import ImagePayload, OCRClient, TextAnnotation
from textdetect.ocr.engines import VisionOCRClient
from textdetect.ocr.factory import get_ocr_client
from textdetect.ocr.mock_ocr import MockOCRClient


# ---------------------------------------------------------------------------
# Base OCRClient
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_base_client_raises_not_implemented() -> None:
    client = OCRClient()
    with pytest.raises(NotImplementedError):
        await client.detect_texts(ImagePayload(b"fake bytes"), max_results=10)


def test_image_from_bytes_keeps_content() -> None:
    image = OCRClient().image_from_bytes(b"\x89PNG")
    assert image.content == b"\x89PNG"


def test_image_from_empty_bytes_fails() -> None:
    with pytest.raises(ImageDecodeError, match="empty"):
        ImagePayload.from_bytes(b"")


@pytest.mark.asyncio
async def test_base_client_context_manager_closes() -> None:
    closed = []

    class Closing(OCRClient):
        async def aclose(self) -> None:
            closed.append(True)

    async with Closing() as client:
        assert isinstance(client, Closing)
    assert closed == [True]


# ---------------------------------------------------------------------------
# MockOCRClient
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_mock_client_returns_annotations() -> None:
    client = MockOCRClient()
    annotations = await client.detect_texts(ImagePayload(b"any bytes"), max_results=2000)
    assert annotations
    assert all(isinstance(a, TextAnnotation) for a in annotations)
    assert annotations[1].description == "INVOICE"


@pytest.mark.asyncio
async def test_mock_client_honours_max_results() -> None:
    client = MockOCRClient()
    annotations = await client.detect_texts(ImagePayload(b"x"), max_results=2)
    assert len(annotations) == 2


# ---------------------------------------------------------------------------
# OCR factory
# ---------------------------------------------------------------------------

def test_ocr_factory_returns_mock(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(settings, "ocr_provider", "mock")
    assert isinstance(get_ocr_client(), MockOCRClient)


@pytest.mark.asyncio
async def test_ocr_factory_returns_vision(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(settings, "ocr_provider", "Vision ")
    monkeypatch.setattr(settings, "vision_api_key", "test-key")
    monkeypatch.setattr(settings, "vision_insecure_skip_verify", True)

    client = get_ocr_client()
    try:
        assert isinstance(client, VisionOCRClient)
        assert client.verify_tls is False
    finally:
        await client.aclose()


def test_ocr_factory_vision_without_credentials(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(settings, "ocr_provider", "vision")
    monkeypatch.setattr(settings, "vision_api_key", None)
    monkeypatch.setattr(settings, "vision_access_token", None)
    with pytest.raises(ValueError, match="credentials"):
        get_ocr_client()


def test_ocr_factory_raises_on_unknown_provider(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(settings, "ocr_provider", "unknown_engine")
    with pytest.raises(ValueError, match="Unknown OCR_PROVIDER"):
        get_ocr_client()
