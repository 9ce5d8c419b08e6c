"""Core business logic for transcript building."""

from .models import RecognitionResult


class TranscriptBuilder:
    """Builds a transcript from ranked recognition results."""

    def build(self, results: list[RecognitionResult]) -> str:
        """
        Joins the top-ranked alternative of every result with newlines.

        A result without alternatives contributes an empty line, and an empty
        result list yields an empty transcript.
        """
        return "\n".join(self._top_transcript(result) for result in results)

    def _top_transcript(self, result: RecognitionResult) -> str:
        if not result.alternatives:
            return ""
        return result.alternatives[0].transcript
