from __future__ import annotations

from textdetect.ocr.base_ocr import ImagePayload, OCRClient, TextAnnotation


class MockOCRClient(OCRClient):
    async def detect_texts(self, image: ImagePayload, max_results: int) -> list[TextAnnotation]:
        # Mock OCR for development/testing: first entry is the full text block,
        # the rest are the individual words, like the Vision API returns them.
        annotations = [
            TextAnnotation(description="INVOICE\nAcme Corp\n", locale="en"),
            TextAnnotation(description="INVOICE"),
            TextAnnotation(description="Acme"),
            TextAnnotation(description="Corp"),
        ]
        return annotations[:max_results]
