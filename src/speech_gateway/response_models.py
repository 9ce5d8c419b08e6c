"""Request and response models for the speech gateway API."""

from pydantic import BaseModel


class TranscriptionResponse(BaseModel):
    """Transcript returned by /transcribe."""

    text: str


class SpeakRequest(BaseModel):
    """Body accepted by /speak."""

    text: str | None = None


class ErrorResponse(BaseModel):
    """JSON error body returned by /speak."""

    error: str
