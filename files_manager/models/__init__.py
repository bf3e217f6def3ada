from files_manager.models.user_model import User
from files_manager.models.file_model import FileRecord

__all__ = ["User", "FileRecord"]
