"""Infrastructure layer exports."""

from .google_speech_recognizer import GoogleSpeechRecognizer
from .google_speech_synthesizer import GoogleSpeechSynthesizer
from .minio_storage import MinioStorage
from .moviepy_transcoder import MoviepyTranscoder

__all__ = [
    "GoogleSpeechRecognizer",
    "GoogleSpeechSynthesizer",
    "MinioStorage",
    "MoviepyTranscoder",
]
