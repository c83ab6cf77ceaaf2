# Resource descriptors for music catalog project

from dataclasses import dataclass
from typing import List, Type

from pydantic import BaseModel

from api_catalog.config.config import Base
from api_catalog.model.model import Album, Singer, Category, Song
from api_catalog.schema.schema import (
    AlbumPayload, AlbumResponse,
    SingerPayload, SingerResponse,
    CategoryPayload, CategoryResponse,
    SongPayload, SongResponse,
)


@dataclass(frozen=True)
class Resource:
    """Everything the generic CRUD layers need to know about one table.

    ``name`` is the human readable entity name used in logs and error
    messages, ``path`` the URL collection path the router mounts it on.
    """

    name: str
    path: str
    model: Type[Base]
    payload_schema: Type[BaseModel]
    response_schema: Type[BaseModel]

    @property
    def mutable_fields(self) -> List[str]:
        return [field for field in self.response_schema.model_fields if field != "id"]


ALBUMS = Resource("Album", "/albums", Album, AlbumPayload, AlbumResponse)
SINGERS = Resource("Singer", "/singers", Singer, SingerPayload, SingerResponse)
CATEGORIES = Resource("Category", "/categories", Category, CategoryPayload, CategoryResponse)
SONGS = Resource("Song", "/songs", Song, SongPayload, SongResponse)

RESOURCES = [ALBUMS, SINGERS, CATEGORIES, SONGS]
