import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from .errors import NotFoundError

logger = logging.getLogger(__name__)

USER_FIELDS = ("name", "email", "age")

SAMPLE_USERS = [
    {"name": "Zhang San", "email": "zhangsan@example.com", "age": 25},
    {"name": "Li Si", "email": "lisi@example.com", "age": 30},
    {"name": "Wang Wu", "email": "wangwu@example.com", "age": 28},
]

SAMPLE_POSTS = [
    {"title": "First post", "content": "Content of the first post", "authorId": 1, "createdAt": "2024-01-01"},
    {"title": "Second post", "content": "Content of the second post", "authorId": 2, "createdAt": "2024-01-02"},
]


def today() -> str:
    return datetime.now(timezone.utc).date().isoformat()


class Store:
    """In-memory users and posts, keyed by id in insertion order.

    Each collection has its own counter, so ids are never handed out twice
    even after records are deleted.
    """

    def __init__(self):
        self.users: Dict[int, Dict[str, Any]] = {}
        self.posts: Dict[int, Dict[str, Any]] = {}
        self._user_counter = 0
        self._post_counter = 0

    def next_user_id(self) -> int:
        self._user_counter += 1
        return self._user_counter

    def next_post_id(self) -> int:
        self._post_counter += 1
        return self._post_counter

    def seed(self) -> None:
        if self.users or self.posts:
            return
        for user in SAMPLE_USERS:
            self.add_user(**user)
        for post in SAMPLE_POSTS:
            self.add_post(**post)
        logger.debug("Seeded %d users and %d posts", len(self.users), len(self.posts))

    def reset(self) -> None:
        self.users.clear()
        self.posts.clear()
        self._user_counter = 0
        self._post_counter = 0

    # Users

    def list_users(self) -> List[Dict[str, Any]]:
        return list(self.users.values())

    def get_user(self, user_id: Optional[int]) -> Dict[str, Any]:
        user = self.users.get(user_id)
        if user is None:
            raise NotFoundError("User not found")
        return user

    def add_user(self, name: str, email: str, age: Any = None) -> Dict[str, Any]:
        uid = self.next_user_id()
        user = {"id": uid, "name": name, "email": email, "age": age or 18}
        self.users[uid] = user
        return user

    def update_user(self, user_id: Optional[int], changes: Dict[str, Any]) -> Dict[str, Any]:
        user = self.get_user(user_id)
        user.update({k: changes[k] for k in USER_FIELDS if k in changes})
        return user

    def delete_user(self, user_id: Optional[int]) -> None:
        if user_id not in self.users:
            raise NotFoundError("User not found")
        del self.users[user_id]

    # Posts

    def list_posts(self) -> List[Dict[str, Any]]:
        return list(self.posts.values())

    def get_post(self, post_id: Optional[int]) -> Dict[str, Any]:
        post = self.posts.get(post_id)
        if post is None:
            raise NotFoundError("Post not found")
        return post

    def add_post(self, title: str, content: str, authorId: Any = None, createdAt: Optional[str] = None) -> Dict[str, Any]:
        pid = self.next_post_id()
        post = {
            "id": pid,
            "title": title,
            "content": content,
            "authorId": authorId or 1,
            "createdAt": createdAt or today(),
        }
        self.posts[pid] = post
        return post
