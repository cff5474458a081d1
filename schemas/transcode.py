from typing import Any

from pydantic import BaseModel, Field

from utils.special_cases import Direction


class TranscodeRequest(BaseModel):
    """Structural transcode of an arbitrary JSON payload."""
    direction: Direction
    payload: Any = Field(None, description="Any JSON value; only object keys are rewritten")


class TranscodeResponse(BaseModel):
    direction: Direction
    payload: Any = None


class StringTranscodeRequest(BaseModel):
    direction: Direction
    value: str = Field(..., description="A single identifier, e.g. 'user_name' or 'userName'")


class StringTranscodeResponse(BaseModel):
    direction: Direction
    value: str


class SpecialCaseSchema(BaseModel):
    camel: str
    snake: str
