from schemas.transcode import (
    SpecialCaseSchema,
    StringTranscodeRequest,
    StringTranscodeResponse,
    TranscodeRequest,
    TranscodeResponse,
)

__all__ = [
    "SpecialCaseSchema",
    "StringTranscodeRequest",
    "StringTranscodeResponse",
    "TranscodeRequest",
    "TranscodeResponse",
]
