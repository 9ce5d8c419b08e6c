import os

import pytest
from fastapi.testclient import TestClient

from speech_gateway.config import AppConfig, ServerConfig, StorageConfig
from speech_gateway.dependencies import (
    get_config,
    get_recognizer,
    get_storage,
    get_synthesizer,
    get_transcoder,
)
from speech_gateway.domain import RecognitionAlternative, RecognitionResult, RemoteObject
from speech_gateway.exceptions import (
    RecognitionError,
    StorageDeleteError,
    StorageUploadError,
)
from speech_gateway.infrastructure import MoviepyTranscoder
from speech_gateway.interfaces import RecognitionService, StorageClient, SynthesisService
from speech_gateway.main import app


class StubStorage(StorageClient):
    def __init__(self, fail_upload: bool = False, fail_delete: bool = False) -> None:
        self.fail_upload = fail_upload
        self.fail_delete = fail_delete
        self.uploads: list[dict] = []
        self.deleted: list[str] = []

    def upload(self, local_path: str, object_name: str, content_type: str) -> RemoteObject:
        self.uploads.append(
            {
                "local_path": local_path,
                "object_name": object_name,
                "content_type": content_type,
                "existed": os.path.exists(local_path),
            }
        )
        if self.fail_upload:
            raise StorageUploadError(object_name)
        return RemoteObject(bucket_name="test-bucket", object_name=object_name)

    def delete(self, object_name: str) -> None:
        if self.fail_delete:
            raise StorageDeleteError(object_name)
        self.deleted.append(object_name)


class StubRecognizer(RecognitionService):
    def __init__(self, results: list[RecognitionResult] | None = None, fail: bool = False) -> None:
        self.results = results or []
        self.fail = fail
        self.calls: list[tuple[str, int]] = []

    def recognize(self, uri: str, sample_rate: int) -> list[RecognitionResult]:
        self.calls.append((uri, sample_rate))
        if self.fail:
            raise RecognitionError(uri)
        return self.results


class StubSynthesizer(SynthesisService):
    def __init__(self, audio: bytes = b"ID3-fake-mp3", error: Exception | None = None) -> None:
        self.audio = audio
        self.error = error
        self.calls: list[str] = []

    def synthesize(self, text: str) -> bytes:
        self.calls.append(text)
        if self.error is not None:
            raise self.error
        return self.audio


class FakeTranscoder(MoviepyTranscoder):
    """Keeps the format decision, replaces the ffmpeg run with a file write."""

    def __init__(self, config, fail: bool = False) -> None:
        super().__init__(config)
        self.fail = fail
        self.conversions: list[tuple[str, str]] = []

    def _convert(self, input_path: str, output_path: str) -> None:
        self.conversions.append((input_path, output_path))
        with open(output_path, "wb") as f:
            f.write(b"RIFF-partial")
        if self.fail:
            raise RuntimeError("ffmpeg exited with status 1")


def transcript_results(*texts: str) -> list[RecognitionResult]:
    return [
        RecognitionResult(alternatives=[RecognitionAlternative(transcript=t, confidence=0.9)])
        for t in texts
    ]


@pytest.fixture
def upload_dir(tmp_path):
    path = tmp_path / "uploads"
    path.mkdir()
    return path


@pytest.fixture
def config(upload_dir) -> AppConfig:
    return AppConfig(
        server=ServerConfig(upload_dir=str(upload_dir)),
        storage=StorageConfig(
            endpoint="localhost:9000",
            access_key="key",
            secret_key="secret",
            bucket_name="test-bucket",
        ),
    )


@pytest.fixture
def storage() -> StubStorage:
    return StubStorage()


@pytest.fixture
def recognizer() -> StubRecognizer:
    return StubRecognizer(transcript_results("hello there"))


@pytest.fixture
def synthesizer() -> StubSynthesizer:
    return StubSynthesizer()


@pytest.fixture
def transcoder(config) -> FakeTranscoder:
    return FakeTranscoder(config.audio)


@pytest.fixture
def client(config, storage, recognizer, synthesizer, transcoder):
    app.dependency_overrides[get_config] = lambda: config
    app.dependency_overrides[get_storage] = lambda: storage
    app.dependency_overrides[get_recognizer] = lambda: recognizer
    app.dependency_overrides[get_synthesizer] = lambda: synthesizer
    app.dependency_overrides[get_transcoder] = lambda: transcoder
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
