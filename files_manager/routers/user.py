from typing import Optional

from fastapi import APIRouter, Depends, status

from files_manager.dependencies import get_current_user_id, get_user_service
from files_manager.schemas.user_schema import ErrorResponse, UserCreate, UserResponse
from files_manager.services.user_service import UserService

router = APIRouter()


@router.post("", response_model=UserResponse, summary="New user registration",
             description="""
                Creates a new user. The email address must be unique
                and the password is stored in hashed form.
             """,
             responses={
                 400: {"model": ErrorResponse, "description": "Missing email, missing password or already exist"},
                 201: {"description": "User created"},
             },
             status_code=status.HTTP_201_CREATED)
def register_user(user: Optional[UserCreate] = None, users: UserService = Depends(get_user_service)):
    user = user or UserCreate()
    return users.register(user.email, user.password)


@router.get("/me", response_model=UserResponse, summary="Displaying user information",
            responses={
                401: {"model": ErrorResponse, "description": "Unauthorized"}
            })
def get_me(user_id: int = Depends(get_current_user_id), users: UserService = Depends(get_user_service)):
    return users.get_by_id(user_id)
