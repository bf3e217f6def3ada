from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class UserCreate(BaseModel):
    email: Optional[str] = Field(None, examples=["user@example.com"], description="Unique email of the user")
    password: Optional[str] = Field(None, examples=["pw123"], description="Password for the user account")


class UserResponse(BaseModel):
    id: int = Field(..., examples=[1], description="User identification number")
    email: str = Field(..., examples=["user@example.com"], description="User's email address")

    model_config = ConfigDict(from_attributes=True)


class TokenResponse(BaseModel):
    token: str = Field(..., examples=["031bffac-3edc-4e51-aaae-1c121317da8a"],
                       description="Session token to send back in the X-Token header")


class StatusResponse(BaseModel):
    redis: bool = Field(..., description="Whether the session store answers")
    db: bool = Field(..., description="Whether the record store answers")


class StatsResponse(BaseModel):
    users: int = Field(..., examples=[4], description="Number of registered users")
    files: int = Field(..., examples=[30], description="Number of file records of all users")


class ErrorResponse(BaseModel):
    error: str = Field(..., examples=["Unauthorized"])
