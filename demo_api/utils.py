import re
from typing import Any, Dict, Optional

from flask import jsonify, request

_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


def parse_int(value: Any) -> Optional[int]:
    """Leniently parse an integer from the start of ``value``.

    ``"42"`` and ``"42abc"`` both give 42; anything without leading digits
    gives ``None``.
    """
    if value is None:
        return None
    match = _LEADING_INT.match(str(value))
    if not match:
        return None
    try:
        return int(match.group(1))
    except ValueError:
        # past the interpreter's digit limit; such an id can never match
        return None


def get_payload() -> Any:
    """Request body as JSON, falling back to URL-encoded form fields."""
    data = request.get_json(silent=True)
    if data is not None:
        return data
    if request.form:
        return request.form.to_dict()
    return {}


def get_fields() -> Dict[str, Any]:
    data = get_payload()
    return data if isinstance(data, dict) else {}


def envelope(data: Any = None, message: Optional[str] = None, status: int = 200, **extra):
    body: Dict[str, Any] = {"success": True}
    if data is not None:
        body["data"] = data
    if message:
        body["message"] = message
    body.update(extra)
    return jsonify(body), status
