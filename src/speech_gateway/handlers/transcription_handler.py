"""Handler for the upload-to-transcript pipeline."""

import os

from speech_gateway.domain import RemoteObject, TranscriptBuilder, UploadedAudio
from speech_gateway.exceptions import MissingBucketError, TranscodingError
from speech_gateway.interfaces import AudioTranscoder, RecognitionService, StorageClient
from speech_gateway.logging import setup_logging

from .artifact_cleaner import ArtifactCleaner

logger = setup_logging()


class TranscriptionHandler:
    """Orchestrates transcoding, hand-off upload, recognition and cleanup."""

    def __init__(
        self,
        bucket_name: str,
        transcoder: AudioTranscoder,
        storage: StorageClient,
        recognizer: RecognitionService,
        transcript_builder: TranscriptBuilder,
        cleaner: ArtifactCleaner,
    ):
        self._bucket_name = bucket_name
        self._transcoder = transcoder
        self._storage = storage
        self._recognizer = recognizer
        self._transcript_builder = transcript_builder
        self._cleaner = cleaner

    def process(self, upload: UploadedAudio) -> str:
        """
        Transcribes an uploaded file.

        Local files and the remote object are removed before returning, on
        success and on every failure.

        Returns:
            The transcript, one line per recognized segment.

        Raises:
            TranscodingError: If conversion to wav fails.
            MissingBucketError: If no hand-off bucket is configured.
            StorageUploadError: If the hand-off upload fails.
            RecognitionError: If recognition fails.
        """
        local_paths = [upload.path]
        remote: RemoteObject | None = None

        try:
            try:
                canonical = self._transcoder.to_canonical(upload)
            except TranscodingError as e:
                if e.output_path:
                    local_paths.append(e.output_path)
                raise
            local_paths.append(canonical.path)

            if not self._bucket_name:
                raise MissingBucketError()

            remote = self._storage.upload(
                canonical.path,
                object_name=os.path.basename(canonical.path),
                content_type=canonical.content_type,
            )

            results = self._recognizer.recognize(remote.uri, canonical.sample_rate)
            transcript = self._transcript_builder.build(results)

            logger.info(
                "Transcription complete",
                extra={
                    "original_filename": upload.original_filename,
                    "uri": remote.uri,
                    "segments": len(results),
                    "transcript_length": len(transcript),
                },
            )
            return transcript
        finally:
            self._cleaner.clean(local_paths, remote)
