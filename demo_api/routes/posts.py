import logging

from flask import Blueprint

from ..errors import ValidationError
from ..extensions import get_store
from ..utils import envelope, get_fields, parse_int

logger = logging.getLogger(__name__)

bp = Blueprint("posts", __name__, url_prefix="/api/posts")


@bp.get("")
def list_posts():
    return envelope(get_store().list_posts(), "Posts retrieved")


@bp.get("/<post_id>")
def get_post(post_id: str):
    return envelope(get_store().get_post(parse_int(post_id)), "Post retrieved")


@bp.post("")
def create_post():
    data = get_fields()
    if not data.get("title") or not data.get("content"):
        logger.debug("Rejected post without title or content: %r", data)
        raise ValidationError("title and content required")

    # authorId is stored as given; it is not checked against users
    post = get_store().add_post(data["title"], data["content"], data.get("authorId"))
    logger.info("Created post %s by author %s", post["id"], post["authorId"])
    return envelope(post, "Post created", status=201)
