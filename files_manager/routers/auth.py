from typing import Optional

from fastapi import APIRouter, Depends, Header, Response, status

from files_manager.dependencies import get_auth_service
from files_manager.schemas.user_schema import ErrorResponse, TokenResponse
from files_manager.services.auth_service import AuthService

router = APIRouter()


@router.get("/connect", response_model=TokenResponse, summary="User sign in",
            description="""
                Signs the user in with HTTP Basic credentials (email:password).
                Returns a session token valid for 24 hours.
            """,
            responses={
                401: {"model": ErrorResponse, "description": "Unauthorized"}
            })
def connect(authorization: Optional[str] = Header(None), auth: AuthService = Depends(get_auth_service)):
    return {"token": auth.sign_in(authorization)}


@router.get("/disconnect", status_code=status.HTTP_204_NO_CONTENT, response_class=Response,
            summary="User sign out",
            description="""
                Revokes the session token given in the X-Token header.
            """,
            responses={
                401: {"model": ErrorResponse, "description": "Unauthorized"}
            })
def disconnect(x_token: Optional[str] = Header(None), auth: AuthService = Depends(get_auth_service)):
    auth.sign_out(x_token)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
