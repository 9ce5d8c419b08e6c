from types import SimpleNamespace

import pytest
from google.cloud import speech

from speech_gateway.config import RecognitionConfig
from speech_gateway.exceptions import RecognitionError
from speech_gateway.infrastructure import GoogleSpeechRecognizer


class FakeSpeechClient:
    def __init__(self, response=None, error: Exception | None = None) -> None:
        self.response = response
        self.error = error
        self.requests: list[dict] = []

    def recognize(self, config, audio):
        self.requests.append({"config": config, "audio": audio})
        if self.error is not None:
            raise self.error
        return self.response


def alternative(text: str, confidence: float = 0.9):
    return SimpleNamespace(transcript=text, confidence=confidence)


def test_recognize_sends_uri_and_fixed_config():
    client = FakeSpeechClient(SimpleNamespace(results=[]))

    GoogleSpeechRecognizer(client, RecognitionConfig()).recognize(
        "gs://bucket/abc.wav", 16000
    )

    request = client.requests[0]
    assert request["audio"].uri == "gs://bucket/abc.wav"
    assert request["config"].encoding == speech.RecognitionConfig.AudioEncoding.LINEAR16
    assert request["config"].sample_rate_hertz == 16000
    assert request["config"].language_code == "en-US"
    assert request["config"].enable_automatic_punctuation is True


def test_recognize_keeps_alternative_order():
    response = SimpleNamespace(
        results=[
            SimpleNamespace(alternatives=[alternative("best", 0.95), alternative("worse", 0.4)]),
            SimpleNamespace(alternatives=[]),
        ]
    )

    results = GoogleSpeechRecognizer(
        FakeSpeechClient(response), RecognitionConfig()
    ).recognize("gs://bucket/abc", 16000)

    assert [a.transcript for a in results[0].alternatives] == ["best", "worse"]
    assert results[0].alternatives[0].confidence == pytest.approx(0.95)
    assert results[1].alternatives == []


def test_recognize_wraps_client_errors():
    client = FakeSpeechClient(error=RuntimeError("quota exceeded"))

    with pytest.raises(RecognitionError) as exc_info:
        GoogleSpeechRecognizer(client, RecognitionConfig()).recognize("gs://b/o", 16000)

    assert exc_info.value.uri == "gs://b/o"
    assert isinstance(exc_info.value.cause, RuntimeError)
