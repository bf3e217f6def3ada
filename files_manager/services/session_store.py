import logging
from datetime import timedelta
from typing import Optional
from uuid import uuid4

import redis

logger = logging.getLogger(__name__)

SESSION_TTL = timedelta(hours=24)
KEY_PREFIX = "auth_"


def create_redis_client(redis_url: str):
    return redis.from_url(redis_url, decode_responses=True)


class SessionStore:
    """Maps session tokens to user ids in the key-value store.

    Expiry is left entirely to the store through the TTL set on each key.
    """

    def __init__(self, client):
        self.client = client

    @staticmethod
    def _key(token: str) -> str:
        return f"{KEY_PREFIX}{token}"

    def create(self, user_id: int) -> str:
        token = str(uuid4())
        self.client.setex(self._key(token), int(SESSION_TTL.total_seconds()), str(user_id))
        return token

    def get_user_id(self, token: str) -> Optional[int]:
        value = self.client.get(self._key(token))
        if value is None:
            return None
        if isinstance(value, bytes):
            value = value.decode("utf-8")
        return int(value)

    def delete(self, token: str) -> None:
        self.client.delete(self._key(token))

    def is_alive(self) -> bool:
        try:
            return bool(self.client.ping())
        except redis.RedisError:
            return False
