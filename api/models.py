"""Pydantic request/response models for the REST API."""

from typing import List, Optional

from pydantic import BaseModel, Field

from stockmeta.schemas.metadata import ImageResult, ProcessingMode


# --- Response Models ---

class HealthResponse(BaseModel):
    status: str = "ok"
    version: str
    categories: int


class CategoryInfo(BaseModel):
    code: int
    name: str
    aliases: List[str] = Field(default_factory=list)


# --- Request Models ---

class ProcessRequest(BaseModel):
    text: str = Field(..., description="Raw metadata-mode response from a vision model")
    filename: Optional[str] = None

    class Config:
        json_schema_extra = {
            "example": {
                "text": "TITLE: Red fox in snow\nKEYWORDS: fox, wildlife, snow\n"
                        "CATEGORY: Animals\nDESCRIPTION: A red fox standing in fresh snow.",
                "filename": "fox.jpg",
            }
        }


class PromptProcessRequest(BaseModel):
    text: str = Field(..., description="Raw prompt-mode response from a vision model")


class MetadataRequest(BaseModel):
    image_base64: str = Field(..., min_length=1, description="Base64 image bytes, no data-URI prefix")
    mime_type: str = Field("image/jpeg", description="image/jpeg, image/png, image/webp or image/gif")
    filename: str = "image"
    mode: ProcessingMode = ProcessingMode.METADATA
    provider: str = "auto"
    model: Optional[str] = None


class ExportRequest(BaseModel):
    results: List[ImageResult]
    target_extension: Optional[str] = Field(None, description="original, .jpg, .jpeg, .png, .eps, .ai or .svg")
