from __future__ import annotations

from dataclasses import dataclass
from types import TracebackType

from textdetect.errors import ImageDecodeError


@dataclass(frozen=True)
class ImagePayload:
    content: bytes

    @classmethod
    def from_bytes(cls, raw: bytes) -> ImagePayload:
        if not raw:
            raise ImageDecodeError("image payload is empty")
        return cls(content=raw)


@dataclass(frozen=True)
class TextAnnotation:
    description: str
    locale: str | None = None


class OCRClient:
    """A text detection capability; one instance serves one request."""

    def image_from_bytes(self, raw: bytes) -> ImagePayload:
        return ImagePayload.from_bytes(raw)

    async def detect_texts(self, image: ImagePayload, max_results: int) -> list[TextAnnotation]:
        raise NotImplementedError

    async def aclose(self) -> None:
        return None

    async def __aenter__(self) -> OCRClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()
