"""Offline post-processing endpoints for saved model responses."""

from fastapi import APIRouter, Depends

from api.auth import verify_api_key
from api.dependencies import get_processor
from api.models import ProcessRequest, PromptProcessRequest
from stockmeta.processing.processor import MetadataProcessor
from stockmeta.schemas.metadata import MetadataResult, PromptResult

router = APIRouter()


@router.post("/process", response_model=MetadataResult)
async def process(
    request: ProcessRequest,
    processor: MetadataProcessor = Depends(get_processor),
    _key=Depends(verify_api_key),
):
    """Parse, classify and curate one metadata-mode response."""
    return processor.process(request.text, request.filename)


@router.post("/prompt/process", response_model=PromptResult)
async def process_prompt(
    request: PromptProcessRequest,
    processor: MetadataProcessor = Depends(get_processor),
    _key=Depends(verify_api_key),
):
    """Extract the prompt from one prompt-mode response."""
    return processor.process_prompt(request.text)
