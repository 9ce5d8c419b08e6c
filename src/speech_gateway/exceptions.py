"""Custom exceptions for the speech gateway."""


class MissingBucketError(Exception):
    """Raised when no hand-off bucket is configured."""

    def __init__(self):
        super().__init__("No storage bucket configured (set GCP_BUCKET_NAME)")


class TranscodingError(Exception):
    """Raised when converting audio to the canonical format fails."""

    def __init__(
        self,
        file_name: str,
        output_path: str | None = None,
        cause: Exception | None = None,
    ):
        self.file_name = file_name
        self.output_path = output_path
        self.cause = cause
        super().__init__(f"Failed to convert '{file_name}' to wav")


class StorageUploadError(Exception):
    """Raised when uploading a file to storage fails."""

    def __init__(self, object_name: str, cause: Exception | None = None):
        self.object_name = object_name
        self.cause = cause
        super().__init__(f"Failed to upload '{object_name}' to storage")


class StorageDeleteError(Exception):
    """Raised when deleting an object from storage fails."""

    def __init__(self, object_name: str, cause: Exception | None = None):
        self.object_name = object_name
        self.cause = cause
        super().__init__(f"Failed to delete '{object_name}' from storage")


class RecognitionError(Exception):
    """Raised when the speech recognition call fails."""

    def __init__(self, uri: str, cause: Exception | None = None):
        self.uri = uri
        self.cause = cause
        super().__init__(f"Failed to recognize speech in '{uri}'")


class SynthesisError(Exception):
    """Raised when speech synthesis fails."""

    def __init__(self, message: str = "Speech synthesis failed", cause: Exception | None = None):
        self.cause = cause
        super().__init__(message)


class EmptyAudioError(SynthesisError):
    """Raised when the synthesis service returns no audio content."""

    def __init__(self):
        super().__init__("Synthesis returned no audio content")
