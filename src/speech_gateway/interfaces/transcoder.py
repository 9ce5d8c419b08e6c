"""Abstract interface for audio transcoding."""

from abc import ABC, abstractmethod

from speech_gateway.domain.models import CanonicalAudio, UploadedAudio


class AudioTranscoder(ABC):
    """Converts uploads to the canonical waveform format when needed."""

    @abstractmethod
    def to_canonical(self, upload: UploadedAudio) -> CanonicalAudio:
        """
        Returns the canonical waveform for an upload.

        Uploads already in a supported format pass through unchanged.

        Raises:
            TranscodingError: If conversion fails.
        """
