from typing import Optional, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from files_manager.models.file_model import ROOT_ID


class FileCreate(BaseModel):
    name: Optional[str] = Field(None, examples=["a.txt"], description="Name of the file or folder")
    type: Optional[str] = Field(None, validation_alias=AliasChoices("type", "kind"), examples=["file"],
                                description="One of folder, file or image")
    parent_id: Union[int, str] = Field(ROOT_ID, validation_alias=AliasChoices("parentId", "parent_id"),
                                       examples=[0], description="Id of the parent folder, 0 for the root")
    is_public: bool = Field(False, validation_alias=AliasChoices("isPublic", "is_public"),
                            description="Whether the file is visible to everyone")
    data: Optional[str] = Field(None, examples=["aGVsbG8="],
                                description="Base64 encoded content, required unless type is folder")


class FileResponse(BaseModel):
    id: int = Field(..., examples=[5], description="File identification number")
    user_id: int = Field(..., serialization_alias="userId", examples=[1], description="Owner of the file")
    name: str = Field(..., examples=["a.txt"])
    type: str = Field(..., examples=["file"])
    is_public: bool = Field(..., serialization_alias="isPublic", examples=[False])
    parent_id: int = Field(..., serialization_alias="parentId", examples=[0])

    model_config = ConfigDict(from_attributes=True)
