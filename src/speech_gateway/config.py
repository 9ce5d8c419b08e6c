"""Application configuration loaded from environment variables."""

import os
import tempfile

from pydantic import BaseModel


class StorageConfig(BaseModel, frozen=True):
    """S3-compatible object storage configuration for the hand-off bucket."""

    endpoint: str
    access_key: str
    secret_key: str
    bucket_name: str = ""
    secure: bool = True
    uri_scheme: str = "gs"


class AudioConfig(BaseModel, frozen=True):
    """Canonical waveform format expected by the recognition service."""

    sample_rate: int = 16000
    channels: int = 1
    codec: str = "pcm_s16le"
    extension: str = ".wav"
    content_type: str = "audio/wav"


class RecognitionConfig(BaseModel, frozen=True):
    """Speech-to-text request configuration."""

    encoding: str = "LINEAR16"
    language_code: str = "en-US"
    enable_automatic_punctuation: bool = True


class SynthesisConfig(BaseModel, frozen=True):
    """Text-to-speech voice and output configuration."""

    language_code: str = "en-US"
    voice_gender: str = "FEMALE"
    audio_encoding: str = "MP3"


class ServerConfig(BaseModel, frozen=True):
    """HTTP server configuration."""

    host: str = "0.0.0.0"
    port: int = 3001
    cors_origins: list[str] = ["*"]
    upload_dir: str


class AppConfig(BaseModel, frozen=True):
    """Root application configuration."""

    server: ServerConfig
    storage: StorageConfig
    audio: AudioConfig = AudioConfig()
    recognition: RecognitionConfig = RecognitionConfig()
    synthesis: SynthesisConfig = SynthesisConfig()


def _split_origins(value: str) -> list[str]:
    return [origin.strip() for origin in value.split(",") if origin.strip()]


def load_config() -> AppConfig:
    """Loads configuration from environment variables."""
    return AppConfig(
        server=ServerConfig(
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "3001")),
            cors_origins=_split_origins(os.getenv("CORS_ORIGINS", "*")),
            upload_dir=os.getenv(
                "UPLOAD_DIR",
                os.path.join(tempfile.gettempdir(), "speech-gateway-uploads"),
            ),
        ),
        storage=StorageConfig(
            endpoint=os.getenv("STORAGE_ENDPOINT", "storage.googleapis.com"),
            access_key=os.getenv("STORAGE_ACCESS_KEY", ""),
            secret_key=os.getenv("STORAGE_SECRET_KEY", ""),
            bucket_name=os.getenv("GCP_BUCKET_NAME", ""),
            secure=os.getenv("STORAGE_SECURE", "true").lower() != "false",
            uri_scheme=os.getenv("STORAGE_URI_SCHEME", "gs"),
        ),
        recognition=RecognitionConfig(
            language_code=os.getenv("RECOGNITION_LANGUAGE", "en-US"),
        ),
        synthesis=SynthesisConfig(
            language_code=os.getenv("SYNTHESIS_LANGUAGE", "en-US"),
            voice_gender=os.getenv("SYNTHESIS_VOICE_GENDER", "FEMALE"),
        ),
    )
