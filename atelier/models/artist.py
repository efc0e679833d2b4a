"""Artist models - composers/artists and their external links."""

import uuid as uuid_module
from typing import Dict, Optional

from sqlmodel import Column, Field, SQLModel

from .base import JSONType, TimestampMixin


class Artist(TimestampMixin, table=True):
    """Artist database model."""

    __tablename__ = "artists"

    id: str = Field(
        default_factory=lambda: uuid_module.uuid4().hex,
        primary_key=True,
    )
    slug: str = Field(index=True, max_length=255)
    names: Dict[str, Optional[str]] = Field(
        default_factory=dict, sa_column=Column(JSONType, default={})
    )
    bios: Dict[str, Optional[str]] = Field(
        default_factory=dict, sa_column=Column(JSONType, default={})
    )
    photo_asset_id: Optional[str] = Field(default=None, foreign_key="assets.id")


class ArtistLink(SQLModel, table=True):
    """ArtistLink database model - external profile links (site, streaming...)."""

    __tablename__ = "artist_links"

    id: int = Field(default=None, primary_key=True)
    artist_id: str = Field(foreign_key="artists.id")
    url: str
    label: Optional[str] = Field(default=None, max_length=100)
