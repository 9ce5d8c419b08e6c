"""Domain layer exports."""

from .models import (
    CanonicalAudio,
    CleanupReport,
    RecognitionAlternative,
    RecognitionResult,
    RemoteObject,
    UploadedAudio,
)
from .transcript_builder import TranscriptBuilder
from .upload_receiver import UploadReceiver

__all__ = [
    "CanonicalAudio",
    "CleanupReport",
    "RecognitionAlternative",
    "RecognitionResult",
    "RemoteObject",
    "TranscriptBuilder",
    "UploadReceiver",
    "UploadedAudio",
]
