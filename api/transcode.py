import logging

from fastapi import APIRouter

from schemas.transcode import (
    SpecialCaseSchema,
    StringTranscodeRequest,
    StringTranscodeResponse,
    TranscodeRequest,
    TranscodeResponse,
)
from utils.special_cases import DEFAULT_REGISTRY
from utils.transcoding import transcode, transcode_string

router = APIRouter(prefix="/api/transcode", tags=["transcode"])

logger = logging.getLogger(__name__)


@router.post("/keys", response_model=TranscodeResponse)
async def transcode_keys(body: TranscodeRequest):
    """Rewrite every object key in ``payload`` for the requested direction."""
    logger.debug("Transcoding payload %s", body.direction.value)
    return TranscodeResponse(direction=body.direction, payload=transcode(body.payload, body.direction))


@router.post("/string", response_model=StringTranscodeResponse)
async def transcode_identifier(body: StringTranscodeRequest):
    return StringTranscodeResponse(direction=body.direction, value=transcode_string(body.value, body.direction))


@router.get("/special-cases", response_model=list[SpecialCaseSchema])
async def list_special_cases():
    """Identifiers that bypass the generic conversion in both directions."""
    return [SpecialCaseSchema(camel=camel, snake=snake) for camel, snake in DEFAULT_REGISTRY.pairs()]
