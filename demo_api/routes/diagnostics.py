"""Endpoints for exercising HTTP clients: echo, delayed reply, field validation."""

import logging
import threading
import time
from datetime import datetime, timezone

from flask import Blueprint, current_app, request

from ..errors import ValidationError
from ..utils import envelope, get_fields, get_payload, parse_int

logger = logging.getLogger(__name__)

bp = Blueprint("diagnostics", __name__, url_prefix="/api/test")

MIN_USERNAME_LENGTH = 3
MIN_PASSWORD_LENGTH = 6

# Longest wait time.sleep accepts; larger delays are reported as given but sleep this long
MAX_SLEEP_MS = int(threading.TIMEOUT_MAX * 1000)


def utc_timestamp() -> str:
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@bp.post("/echo")
def echo():
    return envelope({"received": get_payload(), "timestamp": utc_timestamp()}, "Payload received")


@bp.get("/delay")
def delay():
    ms = parse_int(request.args.get("ms")) or current_app.config["DEFAULT_DELAY_MS"]
    # Runs in the request's own thread; other requests are not held up
    time.sleep(min(max(ms, 0), MAX_SLEEP_MS) / 1000.0)
    return envelope(message=f"Responded after {ms}ms", delay=ms)


def _too_short(value, minimum: int) -> bool:
    return not isinstance(value, str) or len(value) < minimum


@bp.post("/validate")
def validate():
    data = get_fields()
    errors = []

    if _too_short(data.get("username"), MIN_USERNAME_LENGTH):
        errors.append(f"username must be at least {MIN_USERNAME_LENGTH} characters")

    if _too_short(data.get("password"), MIN_PASSWORD_LENGTH):
        errors.append(f"password must be at least {MIN_PASSWORD_LENGTH} characters")

    if errors:
        logger.debug("Validation failed: %s", errors)
        raise ValidationError("validation failed", errors=errors)

    return envelope(message="validation passed")
