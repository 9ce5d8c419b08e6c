"""Speech-to-text endpoint."""

from collections.abc import AsyncGenerator
from typing import Annotated

from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse
from starlette.datastructures import UploadFile

from speech_gateway.dependencies import get_transcription_handler, get_upload_receiver
from speech_gateway.domain import UploadReceiver
from speech_gateway.exceptions import TranscodingError
from speech_gateway.handlers import TranscriptionHandler
from speech_gateway.logging import setup_logging
from speech_gateway.response_models import TranscriptionResponse

logger = setup_logging()

router = APIRouter(tags=["speech"])

AUDIO_FIELD = "audio"


async def _get_audio_upload(request: Request) -> AsyncGenerator[UploadFile | None, None]:
    """Yields the `audio` file part; text parts and nameless files count as missing."""
    form = await request.form()
    try:
        value = form.get(AUDIO_FIELD)
        if isinstance(value, UploadFile) and value.filename:
            yield value
        else:
            yield None
    finally:
        await form.close()


HandlerDep = Annotated[TranscriptionHandler, Depends(get_transcription_handler)]
ReceiverDep = Annotated[UploadReceiver, Depends(get_upload_receiver)]
AudioDep = Annotated[UploadFile | None, Depends(_get_audio_upload)]


@router.post(
    "/transcribe",
    response_model=TranscriptionResponse,
    responses={
        400: {"content": {"text/plain": {}}},
        500: {"content": {"text/plain": {}}},
    },
)
def transcribe(handler: HandlerDep, receiver: ReceiverDep, audio: AudioDep):
    """Transcribes an uploaded audio file (form field `audio`)."""
    if audio is None:
        logger.warning("No audio file uploaded or file path is missing")
        return PlainTextResponse("No audio file uploaded", status_code=400)

    try:
        uploaded = receiver.receive(audio.file, audio.filename, audio.content_type)
        transcript = handler.process(uploaded)
    except TranscodingError:
        return PlainTextResponse("Could not convert m4a to wav", status_code=500)
    except Exception:
        logger.exception(
            "There was an error transcribing the audio file",
            extra={"original_filename": audio.filename},
        )
        return PlainTextResponse("Transcription failed.", status_code=500)

    return TranscriptionResponse(text=transcript)
