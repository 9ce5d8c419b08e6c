import logging
import os
import sys

from pythonjsonlogger import jsonlogger

_UVICORN_LOGGERS = ("uvicorn", "uvicorn.access", "uvicorn.error")
_configured = False


def setup_logging() -> logging.Logger:
    """
    Configures structured JSON logging for the gateway and returns the root logger.

    Records carry timestamp, level, logger name, message and the Datadog
    trace_id/span_id injected by ddtrace. The root logger and the uvicorn
    loggers share one stdout handler so request logs and application logs use
    the same format. Safe to call from every module; the handler is only
    installed once. The level comes from LOG_LEVEL (default INFO).
    """
    global _configured

    root_logger = logging.getLogger()
    if _configured:
        return root_logger

    level = os.getenv("LOG_LEVEL", "INFO").upper()
    formatter = jsonlogger.JsonFormatter(
        "%(asctime)s %(levelname)s %(name)s %(message)s %(trace_id)s %(span_id)s"
    )
    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setFormatter(formatter)

    root_logger.setLevel(level)
    root_logger.handlers = [stream_handler]

    for logger_name in _UVICORN_LOGGERS:
        u_logger = logging.getLogger(logger_name)
        u_logger.setLevel(level)
        u_logger.handlers = [stream_handler]
        u_logger.propagate = False

    _configured = True
    return root_logger
