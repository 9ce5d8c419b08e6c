"""API routers."""

from .speak import router as speak_router
from .transcribe import router as transcribe_router

__all__ = ["speak_router", "transcribe_router"]
