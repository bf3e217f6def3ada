from typing import Optional

from fastapi import Depends, Header, Request
from sqlalchemy.orm import Session

from files_manager.database import get_db
from files_manager.services.auth_service import AuthService
from files_manager.services.file_registry import FileRegistry
from files_manager.services.session_store import SessionStore
from files_manager.services.user_service import UserService


def get_session_store(request: Request) -> SessionStore:
    return SessionStore(request.app.state.redis)


def get_auth_service(db: Session = Depends(get_db),
                     sessions: SessionStore = Depends(get_session_store)) -> AuthService:
    return AuthService(db, sessions)


def get_user_service(db: Session = Depends(get_db)) -> UserService:
    return UserService(db)


def get_file_registry(request: Request, db: Session = Depends(get_db)) -> FileRegistry:
    return FileRegistry(db, request.app.state.settings.folder_path)


def get_current_user_id(x_token: Optional[str] = Header(None),
                        auth: AuthService = Depends(get_auth_service)) -> int:
    return auth.resolve_session(x_token)
