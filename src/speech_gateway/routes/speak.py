"""Text-to-speech endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from speech_gateway.dependencies import get_synthesizer
from speech_gateway.exceptions import EmptyAudioError
from speech_gateway.interfaces import SynthesisService
from speech_gateway.logging import setup_logging
from speech_gateway.response_models import ErrorResponse, SpeakRequest

logger = setup_logging()

router = APIRouter(tags=["speech"])


async def _get_speak_text(request: Request) -> str | None:
    """Returns the non-empty `text` of the JSON body, or None for anything else."""
    try:
        payload = await request.json()
        body = SpeakRequest.model_validate(payload)
    except (ValueError, ValidationError) as e:
        logger.warning("Invalid speak request body", extra={"error": str(e)})
        return None
    return body.text or None


SynthesizerDep = Annotated[SynthesisService, Depends(get_synthesizer)]
TextDep = Annotated[str | None, Depends(_get_speak_text)]


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code, content=ErrorResponse(error=message).model_dump()
    )


@router.post(
    "/speak",
    response_class=Response,
    responses={
        200: {"content": {"audio/mpeg": {}}},
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
def speak(synthesizer: SynthesizerDep, text: TextDep):
    """Returns MP3 speech for the `text` field of the JSON body."""
    if text is None:
        return _error(400, 'Missing "text" in request body')

    try:
        audio = synthesizer.synthesize(text)
    except EmptyAudioError:
        return _error(500, "Failed to synthesize speech")
    except Exception:
        logger.exception("Text-to-Speech failed", extra={"text_length": len(text)})
        return _error(500, "Text-to-Speech failed")

    return Response(
        content=audio,
        media_type="audio/mpeg",
        headers={"Content-Disposition": 'attachment; filename="speech.mp3"'},
    )
