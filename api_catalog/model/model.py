# SQLAlchemy models for music catalog project

from sqlalchemy import JSON, Column, Integer, String
from api_catalog.config.config import Base

# Opaque values keep their JSON scalar type; None is stored as SQL NULL
OpaqueColumn = JSON(none_as_null=True)


class Album(Base):
    __tablename__ = "album_table"

    id = Column("album_id", Integer, primary_key=True, autoincrement=True)
    title = Column("album_title", String(255), nullable=False)
    image = Column("album_image", OpaqueColumn)
    description = Column("album_description", OpaqueColumn)


class Singer(Base):
    __tablename__ = "singers_table"

    id = Column("singer_id", Integer, primary_key=True, autoincrement=True)
    name = Column("singer_name", String(255), nullable=False)
    profile = Column("singer_profile", OpaqueColumn)


class Category(Base):
    __tablename__ = "song_category_table"

    id = Column("category_id", Integer, primary_key=True, autoincrement=True)
    name = Column("category_name", String(255), nullable=False)
    description = Column("category_description", OpaqueColumn)


class Song(Base):
    __tablename__ = "songs_table"

    id = Column("songs_id", Integer, primary_key=True, autoincrement=True)
    title = Column("song_title", String(255), nullable=False)

    # Plain references, no foreign key constraints
    album_id = Column(Integer)
    singer_id = Column(Integer)
    category_id = Column(Integer)

    description = Column("song_description", OpaqueColumn)
    is_favorite = Column(OpaqueColumn)
