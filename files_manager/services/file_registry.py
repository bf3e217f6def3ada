"""Owner-scoped file metadata: creation, lookup, listing and visibility."""

import logging
import os
from typing import List, Optional, Union

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from files_manager.exceptions import (
    InvalidField,
    MissingField,
    NotFound,
    ParentNotFolder,
    ParentNotFound,
)
from files_manager.models.file_model import FILE_TYPES, FOLDER, ROOT_ID, FileRecord
from files_manager.utils.storage import decode_payload, save_payload

logger = logging.getLogger(__name__)

PAGE_SIZE = 20

# Largest value the record store keeps in an INTEGER column
MAX_ID = 2 ** 63 - 1


def _parse_int(value: Union[int, str, None]) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if value >= 0 else None
    if isinstance(value, str) and value.isascii() and value.isdigit():
        return int(value)
    return None


def parse_id(value: Union[int, str, None]) -> Optional[int]:
    """Turn a wire identifier into a store id, or ``None`` when it is ill-formed."""
    number = _parse_int(value)
    if number is None or number > MAX_ID:
        return None
    return number


def parse_page(value: Union[int, str, None]) -> int:
    page = _parse_int(value)
    if page is None:
        return 0
    return min(page, MAX_ID // PAGE_SIZE)


class FileRegistry:
    def __init__(self, db: Session, folder_path: str):
        self.db = db
        self.folder_path = folder_path

    def create(self, user_id: int, name: Optional[str], file_type: Optional[str],
               parent_id: Union[int, str] = ROOT_ID, is_public: bool = False,
               data: Optional[str] = None) -> FileRecord:
        """Validate and persist a new record, storing its content for non-folders.

        Raises:
            MissingField: name, type, or data (for non-folders) is absent.
            InvalidField: type is unknown or data is not base64.
            ParentNotFound: parent id is ill-formed or names no record of this user.
            ParentNotFolder: parent record is a file or an image.
        """
        if not name:
            raise MissingField("Missing name")
        if not file_type:
            raise MissingField("Missing type")
        if file_type not in FILE_TYPES:
            raise InvalidField("Invalid type")
        if file_type != FOLDER and not data:
            raise MissingField("Missing data")

        parent = parse_id(parent_id)
        if parent is None:
            raise ParentNotFound()
        if parent != ROOT_ID:
            parent_record = self._find(user_id, parent)
            if parent_record is None:
                raise ParentNotFound()
            if parent_record.type != FOLDER:
                raise ParentNotFolder()

        record = FileRecord(
            user_id=user_id,
            name=name,
            type=file_type,
            is_public=is_public,
            parent_id=parent,
        )
        if file_type != FOLDER:
            record.local_path = save_payload(self.folder_path, decode_payload(data))

        self.db.add(record)
        try:
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            if record.local_path:
                os.remove(record.local_path)
            raise
        self.db.refresh(record)

        logger.info("User %s created %s %s", user_id, file_type, record.id)
        return record

    def get_by_id(self, user_id: int, file_id: Union[int, str]) -> FileRecord:
        record_id = parse_id(file_id)
        record = self._find(user_id, record_id) if record_id is not None else None
        if record is None:
            raise NotFound()
        return record

    def list(self, user_id: int, parent_id: Union[int, str] = ROOT_ID,
             page: Union[int, str] = 0) -> List[FileRecord]:
        query = self.db.query(FileRecord).filter(FileRecord.user_id == user_id)

        parent = parse_id(parent_id)
        if parent is None:
            return []
        if parent != ROOT_ID:
            query = query.filter(FileRecord.parent_id == parent)

        return (query.order_by(FileRecord.id)
                .offset(parse_page(page) * PAGE_SIZE)
                .limit(PAGE_SIZE)
                .all())

    def set_visibility(self, user_id: int, file_id: Union[int, str], is_public: bool) -> FileRecord:
        record = self.get_by_id(user_id, file_id)
        record.is_public = is_public
        self.db.commit()
        self.db.refresh(record)

        logger.info("User %s set file %s public=%s", user_id, record.id, is_public)
        return record

    def _find(self, user_id: int, record_id: int) -> Optional[FileRecord]:
        return (self.db.query(FileRecord)
                .filter(FileRecord.id == record_id, FileRecord.user_id == user_id)
                .first())
