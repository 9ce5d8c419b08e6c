"""ffmpeg-backed transcoding through moviepy."""

import moviepy

from speech_gateway.config import AudioConfig
from speech_gateway.domain.models import CanonicalAudio, UploadedAudio
from speech_gateway.exceptions import TranscodingError
from speech_gateway.interfaces import AudioTranscoder
from speech_gateway.logging import setup_logging

logger = setup_logging()

CONVERTIBLE_EXTENSIONS = frozenset({".m4a"})


class MoviepyTranscoder(AudioTranscoder):
    """Converts m4a uploads to mono 16-bit PCM wav; passes other formats through."""

    def __init__(self, config: AudioConfig):
        self._config = config

    def to_canonical(self, upload: UploadedAudio) -> CanonicalAudio:
        if upload.extension not in CONVERTIBLE_EXTENSIONS:
            return CanonicalAudio(
                path=upload.path,
                sample_rate=self._config.sample_rate,
                channels=self._config.channels,
                content_type=upload.content_type or "application/octet-stream",
            )

        output_path = upload.path + self._config.extension
        logger.info(
            "Converting audio",
            extra={
                "original_filename": upload.original_filename,
                "input_path": upload.path,
                "output_path": output_path,
            },
        )

        try:
            self._convert(upload.path, output_path)
        except Exception as e:
            logger.exception(
                "Audio conversion failed",
                extra={"original_filename": upload.original_filename},
            )
            raise TranscodingError(upload.original_filename, output_path, e) from e

        return CanonicalAudio(
            path=output_path,
            sample_rate=self._config.sample_rate,
            channels=self._config.channels,
            content_type=self._config.content_type,
            transcoded=True,
        )

    def _convert(self, input_path: str, output_path: str) -> None:
        """Runs ffmpeg to resample and downmix the input."""
        clip = moviepy.AudioFileClip(input_path)
        try:
            clip.write_audiofile(
                output_path,
                fps=self._config.sample_rate,
                nbytes=2,
                codec=self._config.codec,
                ffmpeg_params=["-ac", str(self._config.channels)],
                logger=None,
            )
        finally:
            clip.close()
