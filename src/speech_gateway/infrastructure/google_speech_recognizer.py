"""Google Cloud Speech-to-Text implementation of the RecognitionService interface."""

from google.cloud import speech

from speech_gateway.config import RecognitionConfig
from speech_gateway.domain.models import RecognitionAlternative, RecognitionResult
from speech_gateway.exceptions import RecognitionError
from speech_gateway.interfaces import RecognitionService
from speech_gateway.logging import setup_logging

logger = setup_logging()


class GoogleSpeechRecognizer(RecognitionService):
    """Runs synchronous recognition on audio stored in Cloud Storage."""

    def __init__(self, client: speech.SpeechClient, config: RecognitionConfig):
        self._client = client
        self._config = config

    def recognize(self, uri: str, sample_rate: int) -> list[RecognitionResult]:
        # recognize() only reads remote audio through a storage URI here
        config = speech.RecognitionConfig(
            encoding=speech.RecognitionConfig.AudioEncoding[self._config.encoding],
            sample_rate_hertz=sample_rate,
            language_code=self._config.language_code,
            enable_automatic_punctuation=self._config.enable_automatic_punctuation,
        )
        audio = speech.RecognitionAudio(uri=uri)

        try:
            response = self._client.recognize(config=config, audio=audio)
        except Exception as e:
            logger.exception("Speech recognition failed", extra={"uri": uri})
            raise RecognitionError(uri, e) from e

        results = [
            RecognitionResult(
                alternatives=[
                    RecognitionAlternative(
                        transcript=alternative.transcript,
                        confidence=alternative.confidence,
                    )
                    for alternative in result.alternatives
                ]
            )
            for result in response.results
        ]

        logger.info(
            "Speech recognition successful",
            extra={"uri": uri, "sample_rate": sample_rate, "result_count": len(results)},
        )
        return results
