import base64
import binascii
import logging

from sqlalchemy import func
from sqlalchemy.orm import Session

from files_manager.exceptions import Unauthorized
from files_manager.models.user_model import User
from files_manager.services.session_store import SessionStore
from files_manager.utils.auth import verify_password

logger = logging.getLogger(__name__)

BASIC_PREFIX = "Basic "


def parse_basic_auth(authorization: str):
    """Return the ``(email, password)`` pair carried by a Basic Authorization header.

    Every malformed header raises the same :class:`Unauthorized` as a wrong password.
    """
    if not authorization or not authorization.startswith(BASIC_PREFIX):
        raise Unauthorized()
    try:
        decoded = base64.b64decode(authorization[len(BASIC_PREFIX):].strip(), validate=True).decode("utf-8")
    except (binascii.Error, ValueError):
        raise Unauthorized()

    email, separator, password = decoded.partition(":")
    if not separator or not email or not password:
        raise Unauthorized()
    return email, password


class AuthService:
    def __init__(self, db: Session, sessions: SessionStore):
        self.db = db
        self.sessions = sessions

    def sign_in(self, authorization: str) -> str:
        email, password = parse_basic_auth(authorization)

        db_user = self.db.query(User).filter(func.lower(User.email) == func.lower(email)).first()
        if not db_user or not verify_password(password, db_user.password_hash):
            logger.info("Rejected sign in attempt")
            raise Unauthorized()

        token = self.sessions.create(db_user.id)
        logger.info("User %s signed in", db_user.id)
        return token

    def sign_out(self, token: str) -> None:
        user_id = self.resolve_session(token)
        self.sessions.delete(token)
        logger.info("User %s signed out", user_id)

    def resolve_session(self, token: str) -> int:
        if not token:
            raise Unauthorized()
        user_id = self.sessions.get_user_id(token)
        if user_id is None:
            raise Unauthorized()
        return user_id
