# Pydantic schemas for music catalog project

from pydantic import AliasChoices, BaseModel, Field
from typing import Optional, Union

# Any JSON scalar or null, stored without interpretation
Opaque = Optional[Union[bool, int, float, str]]


# Album schemas
class AlbumPayload(BaseModel):
    title: str = ""
    image: Opaque = None
    description: Opaque = None


class AlbumResponse(AlbumPayload):
    id: int

    class Config:
        from_attributes = True


# Singer schemas
class SingerPayload(BaseModel):
    name: str = ""
    profile: Opaque = None


class SingerResponse(SingerPayload):
    id: int

    class Config:
        from_attributes = True


# Category schemas
class CategoryPayload(BaseModel):
    name: str = ""
    description: Opaque = None


class CategoryResponse(CategoryPayload):
    id: int

    class Config:
        from_attributes = True


# Song schemas
class SongBase(BaseModel):
    title: str = ""
    album_id: Optional[int] = None
    singer_id: Optional[int] = None
    category_id: Optional[int] = None
    description: Opaque = None
    is_favorite: Opaque = None


class SongPayload(SongBase):
    # Older clients send the description as "songs_description"
    description: Opaque = Field(
        default=None,
        validation_alias=AliasChoices("description", "songs_description"),
    )


class SongResponse(SongBase):
    id: int

    class Config:
        from_attributes = True


# Greeting schema
class MessageResponse(BaseModel):
    message: str


# Error response schema
class ErrorResponse(BaseModel):
    detail: str
