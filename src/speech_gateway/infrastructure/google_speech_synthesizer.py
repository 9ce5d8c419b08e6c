"""Google Cloud Text-to-Speech implementation of the SynthesisService interface."""

from google.cloud import texttospeech

from speech_gateway.config import SynthesisConfig
from speech_gateway.exceptions import EmptyAudioError, SynthesisError
from speech_gateway.interfaces import SynthesisService
from speech_gateway.logging import setup_logging

logger = setup_logging()


class GoogleSpeechSynthesizer(SynthesisService):
    """Synthesizes speech with a fixed voice and output encoding."""

    def __init__(
        self, client: texttospeech.TextToSpeechClient, config: SynthesisConfig
    ):
        self._client = client
        self._voice = texttospeech.VoiceSelectionParams(
            language_code=config.language_code,
            ssml_gender=texttospeech.SsmlVoiceGender[config.voice_gender],
        )
        self._audio_config = texttospeech.AudioConfig(
            audio_encoding=texttospeech.AudioEncoding[config.audio_encoding],
        )

    def synthesize(self, text: str) -> bytes:
        try:
            response = self._client.synthesize_speech(
                input=texttospeech.SynthesisInput(text=text),
                voice=self._voice,
                audio_config=self._audio_config,
            )
        except Exception as e:
            logger.exception("Speech synthesis failed", extra={"text_length": len(text)})
            raise SynthesisError(cause=e) from e

        if not response.audio_content:
            logger.error("Speech synthesis returned no audio", extra={"text_length": len(text)})
            raise EmptyAudioError()

        logger.info(
            "Speech synthesis successful",
            extra={"text_length": len(text), "audio_bytes": len(response.audio_content)},
        )
        return response.audio_content
