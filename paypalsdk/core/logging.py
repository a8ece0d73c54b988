import logging
import os
import sys

import structlog


def get_log_level():
    """LOG_LEVEL from the environment, INFO when unset."""
    return os.getenv("LOG_LEVEL", "INFO").upper()


def get_log_renderer():
    """JSON lines under test/production, colored console output otherwise."""
    env = os.getenv("ENVIRONMENT", "development")
    if env in ["test", "production"]:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=True, sort_keys=False)


def configure_logging():
    """Render paypalsdk events (and the host's structlog events) through one stdlib handler.

    Optional: without it the client logs through stdlib loggers under
    `paypalsdk.*` and follows whatever logging the host application set up.
    """
    shared_processors = [
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.format_exc_info,
    ]

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *shared_processors,
            get_log_renderer(),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    env = os.getenv("ENVIRONMENT", "development")
    # stdout under test so pytest's capsys sees the lines
    handler = logging.StreamHandler(sys.stdout if env == "test" else sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))

    root_logger = logging.getLogger()
    root_logger.handlers = [handler]
    root_logger.setLevel(get_log_level())

    # urllib3 connection chatter duplicates paypal.request/paypal.response
    logging.getLogger("urllib3").setLevel(logging.WARNING)


class ClientEvents:
    """Event names emitted by the client"""

    REQUEST = "paypal.request"
    RESPONSE = "paypal.response"
    TOKEN_REFRESHED = "paypal.token.refreshed"
    API_ERROR = "paypal.api_error"
    DECODE_ERROR = "paypal.decode_error"
