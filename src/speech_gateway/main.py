"""FastAPI application entry point."""

import uvicorn
from ddtrace import patch_all
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from speech_gateway.dependencies import get_config
from speech_gateway.logging import setup_logging
from speech_gateway.routes import speak_router, transcribe_router

patch_all()

logger = setup_logging()

app = FastAPI(title="Speech Gateway")
app.add_middleware(
    CORSMiddleware,
    allow_origins=get_config().server.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.include_router(transcribe_router)
app.include_router(speak_router)


def run():
    """Runs the gateway with uvicorn."""
    config = get_config().server
    logger.info("Server starting", extra={"host": config.host, "port": config.port})
    uvicorn.run(app, host=config.host, port=config.port, log_config=None)


if __name__ == "__main__":
    run()
