"""FastAPI dependency injection configuration."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends
from google.cloud import speech, texttospeech
from minio import Minio

from speech_gateway.config import AppConfig, load_config
from speech_gateway.domain import TranscriptBuilder, UploadReceiver
from speech_gateway.handlers import ArtifactCleaner, TranscriptionHandler
from speech_gateway.infrastructure import (
    GoogleSpeechRecognizer,
    GoogleSpeechSynthesizer,
    MinioStorage,
    MoviepyTranscoder,
)
from speech_gateway.interfaces import (
    AudioTranscoder,
    RecognitionService,
    StorageClient,
    SynthesisService,
)


@lru_cache
def get_config() -> AppConfig:
    """Returns the application configuration."""
    return load_config()


@lru_cache
def get_storage() -> StorageClient:
    """Returns the hand-off storage client."""
    config = get_config().storage
    client = Minio(
        endpoint=config.endpoint,
        access_key=config.access_key,
        secret_key=config.secret_key,
        secure=config.secure,
    )
    return MinioStorage(client, config.bucket_name, config.uri_scheme)


@lru_cache
def get_recognizer() -> RecognitionService:
    """Returns the speech recognition service."""
    return GoogleSpeechRecognizer(speech.SpeechClient(), get_config().recognition)


@lru_cache
def get_synthesizer() -> SynthesisService:
    """Returns the speech synthesis service."""
    return GoogleSpeechSynthesizer(
        texttospeech.TextToSpeechClient(), get_config().synthesis
    )


def get_transcoder(config: Annotated[AppConfig, Depends(get_config)]) -> AudioTranscoder:
    """Returns the audio transcoder."""
    return MoviepyTranscoder(config.audio)


def get_upload_receiver(
    config: Annotated[AppConfig, Depends(get_config)],
) -> UploadReceiver:
    """Returns the upload receiver for the configured upload directory."""
    return UploadReceiver(config.server.upload_dir)


def get_transcription_handler(
    config: Annotated[AppConfig, Depends(get_config)],
    transcoder: Annotated[AudioTranscoder, Depends(get_transcoder)],
    storage: Annotated[StorageClient, Depends(get_storage)],
    recognizer: Annotated[RecognitionService, Depends(get_recognizer)],
) -> TranscriptionHandler:
    """Returns a transcription handler wired to the configured services."""
    return TranscriptionHandler(
        bucket_name=config.storage.bucket_name,
        transcoder=transcoder,
        storage=storage,
        recognizer=recognizer,
        transcript_builder=TranscriptBuilder(),
        cleaner=ArtifactCleaner(storage),
    )
