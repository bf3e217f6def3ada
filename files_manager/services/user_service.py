import logging

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from files_manager.exceptions import AlreadyExists, MissingField, Unauthorized
from files_manager.models.file_model import FileRecord
from files_manager.models.user_model import User
from files_manager.utils.auth import hash_password

logger = logging.getLogger(__name__)


class UserService:
    def __init__(self, db: Session):
        self.db = db

    def register(self, email: str, password: str) -> User:
        if not email:
            raise MissingField("Missing email")
        if not password:
            raise MissingField("Missing password")

        existing_user = self.db.query(User).filter(func.lower(User.email) == func.lower(email)).first()
        if existing_user:
            raise AlreadyExists()

        new_user = User(email=email, password_hash=hash_password(password))
        self.db.add(new_user)
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise AlreadyExists()
        self.db.refresh(new_user)

        logger.info("Registered user %s", new_user.id)
        return new_user

    def get_by_id(self, user_id: int) -> User:
        user = self.db.query(User).filter(User.id == user_id).first()
        if user is None:
            raise Unauthorized()
        return user

    def count_users(self) -> int:
        return self.db.query(User).count()

    def count_files(self) -> int:
        return self.db.query(FileRecord).count()
