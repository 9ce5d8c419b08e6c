"""Domain models for the speech gateway."""

import os

from pydantic import BaseModel


class UploadedAudio(BaseModel, frozen=True):
    """An uploaded file written to the transient upload directory."""

    path: str
    original_filename: str
    content_type: str | None = None
    size: int = 0

    @property
    def extension(self) -> str:
        return os.path.splitext(self.original_filename)[1].lower()


class CanonicalAudio(BaseModel, frozen=True):
    """The local file handed to the recognition service."""

    path: str
    sample_rate: int
    channels: int = 1
    content_type: str = "audio/wav"
    transcoded: bool = False


class RemoteObject(BaseModel, frozen=True):
    """An object in the hand-off bucket."""

    bucket_name: str
    object_name: str
    uri_scheme: str = "gs"

    @property
    def uri(self) -> str:
        return f"{self.uri_scheme}://{self.bucket_name}/{self.object_name}"


class RecognitionAlternative(BaseModel, frozen=True):
    """One candidate transcript for a recognized segment."""

    transcript: str = ""
    confidence: float = 0.0


class RecognitionResult(BaseModel, frozen=True):
    """A recognized audio segment with its alternatives, best first."""

    alternatives: list[RecognitionAlternative] = []


class CleanupReport(BaseModel):
    """Outcome of deleting a request's local and remote artifacts."""

    deleted: list[str] = []
    missing: list[str] = []
    failed: list[str] = []

    @property
    def ok(self) -> bool:
        return not self.failed
