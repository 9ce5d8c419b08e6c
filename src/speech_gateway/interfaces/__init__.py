"""Abstract interfaces for external collaborators."""

from .recognition_service import RecognitionService
from .storage import StorageClient
from .synthesis_service import SynthesisService
from .transcoder import AudioTranscoder

__all__ = ["AudioTranscoder", "RecognitionService", "StorageClient", "SynthesisService"]
