"""Abstract interface for speech synthesis."""

from abc import ABC, abstractmethod


class SynthesisService(ABC):
    """Abstract base class for remote text-to-speech backends."""

    @abstractmethod
    def synthesize(self, text: str) -> bytes:
        """
        Synthesizes speech for the given text.

        Returns:
            Encoded audio bytes.

        Raises:
            EmptyAudioError: If the service returns no audio.
            SynthesisError: If synthesis fails.
        """
