"""Image metadata endpoint: vision model call plus post-processing."""

import logging

from fastapi import APIRouter, Depends, HTTPException

from api.auth import verify_api_key
from api.dependencies import get_processor, get_provider_factory
from api.models import MetadataRequest
from stockmeta.batch import BatchProcessor
from stockmeta.llm.errors import ConfigurationError
from stockmeta.llm.factory import LEGACY_PROVIDER_NAMES, VisionProviderFactory
from stockmeta.llm.instructions import instructions_for
from stockmeta.llm.providers.base import VisionRequest
from stockmeta.processing.processor import MetadataProcessor
from stockmeta.schemas.metadata import ImageResult

router = APIRouter()

logger = logging.getLogger(__name__)


@router.post("/metadata", response_model=ImageResult)
def generate_metadata(
    request: MetadataRequest,
    processor: MetadataProcessor = Depends(get_processor),
    factory: VisionProviderFactory = Depends(get_provider_factory),
    _key=Depends(verify_api_key),
):
    """Describe one base64 image with a vision model and post-process the answer.

    Provider failures come back as an ImageResult with status "error" and a
    classified message; only an unusable provider configuration is an HTTP error.
    """
    try:
        vision_request = VisionRequest(
            image_base64=request.image_base64,
            mime_type=request.mime_type,
            prompt=instructions_for(request.mode, processor.taxonomy),
            model=request.model,
        )
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))

    provider_id = LEGACY_PROVIDER_NAMES.get(request.provider, request.provider)
    try:
        provider = factory.create_provider(provider_id)
    except ConfigurationError as e:
        logger.error(f"Vision provider unavailable: {e}")
        raise HTTPException(status_code=503, detail=str(e))

    batch = BatchProcessor(provider, processor, model=request.model)
    return batch.process_request(request.filename, vision_request, request.mode)
