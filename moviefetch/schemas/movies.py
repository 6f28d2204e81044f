"""Pydantic schemas for movie records and the upstream payload elements they are built from."""
from typing import Union

from pydantic import BaseModel, ConfigDict, Field


class NewMovie(BaseModel):
    """A movie entered locally; the backend assigns its id."""
    model_config = ConfigDict(populate_by_name=True)

    title: str
    opening_text: str = Field(alias="openingText")
    release_date: str = Field(alias="releaseDate")


class MovieRecord(NewMovie):
    id: str


class FilmResult(BaseModel):
    """Element of a `results` list (episode-numbered films)."""

    episode_id: Union[int, str]
    title: str
    opening_crawl: str
    release_date: str


class StoredMovie(BaseModel):
    """Value of an id-keyed collection, as written by NewMovie."""
    model_config = ConfigDict(populate_by_name=True)

    title: str
    opening_text: str = Field(alias="openingText")
    release_date: str = Field(alias="releaseDate")
