"""Abstract interface for speech recognition."""

from abc import ABC, abstractmethod

from speech_gateway.domain.models import RecognitionResult


class RecognitionService(ABC):
    """Abstract base class for remote speech-to-text backends."""

    @abstractmethod
    def recognize(self, uri: str, sample_rate: int) -> list[RecognitionResult]:
        """
        Recognizes speech in a remotely stored LINEAR16 waveform.

        Args:
            uri: Storage URI of the audio object.
            sample_rate: Sample rate of the audio in hertz.

        Returns:
            One result per recognized segment, alternatives best first.

        Raises:
            RecognitionError: If recognition fails.
        """
