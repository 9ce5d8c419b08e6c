"""Request handlers."""

from .artifact_cleaner import ArtifactCleaner
from .transcription_handler import TranscriptionHandler

__all__ = ["ArtifactCleaner", "TranscriptionHandler"]
