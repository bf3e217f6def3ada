from fastapi import APIRouter, Depends, Request

from files_manager.database import is_alive
from files_manager.dependencies import get_session_store, get_user_service
from files_manager.schemas.user_schema import StatsResponse, StatusResponse
from files_manager.services.session_store import SessionStore
from files_manager.services.user_service import UserService

router = APIRouter()


@router.get("/status", response_model=StatusResponse,
            summary="Reachability of the backing stores",
            description="""
                Reports whether the session store and the record store currently answer.
            """)
def get_status(request: Request, sessions: SessionStore = Depends(get_session_store)):
    return {"redis": sessions.is_alive(), "db": is_alive(request.app.state.engine)}


@router.get("/stats", response_model=StatsResponse,
            summary="Number of users and files",
            responses={
                500: {"description": "Record store unavailable"}
            })
def get_stats(users: UserService = Depends(get_user_service)):
    return {"users": users.count_users(), "files": users.count_files()}
