"""Wire models for the Cloud Vision ``images:annotate`` REST call."""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class VisionStatus(BaseModel):
    code: int = 0
    message: str = ""
    status: str | None = None


class VisionTextAnnotation(BaseModel):
    description: str = ""
    locale: str | None = None


class VisionImageResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    text_annotations: list[VisionTextAnnotation] = Field(default_factory=list, alias="textAnnotations")
    error: VisionStatus | None = None


class VisionAnnotateResponse(BaseModel):
    responses: list[VisionImageResponse] = Field(default_factory=list)


class VisionErrorBody(BaseModel):
    """Envelope Google APIs use for non-2xx responses."""
    error: VisionStatus
