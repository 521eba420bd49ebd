import logging

from flask import Blueprint

from ..errors import ValidationError
from ..extensions import get_store
from ..utils import envelope, get_fields, parse_int

logger = logging.getLogger(__name__)

bp = Blueprint("users", __name__, url_prefix="/api/users")


@bp.get("")
def list_users():
    return envelope(get_store().list_users(), "Users retrieved")


@bp.get("/<user_id>")
def get_user(user_id: str):
    user = get_store().get_user(parse_int(user_id))
    return envelope(user, "User retrieved")


@bp.post("")
def create_user():
    data = get_fields()
    if not data.get("name") or not data.get("email"):
        logger.debug("Rejected user without name or email: %r", data)
        raise ValidationError("name and email required")

    user = get_store().add_user(data["name"], data["email"], data.get("age"))
    logger.info("Created user %s", user["id"])
    return envelope(user, "User created", status=201)


@bp.put("/<user_id>")
def update_user(user_id: str):
    # Only the fields present in the body are overwritten
    user = get_store().update_user(parse_int(user_id), get_fields())
    logger.info("Updated user %s", user["id"])
    return envelope(user, "User updated")


@bp.delete("/<user_id>")
def delete_user(user_id: str):
    uid = parse_int(user_id)
    get_store().delete_user(uid)
    logger.info("Deleted user %s", uid)
    return envelope(message="User deleted")
