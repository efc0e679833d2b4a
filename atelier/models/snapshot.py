"""Snapshot records - read-only views of the catalog fed to the audit engine.

Snapshots are plain (non-table) models built once per analysis run by a
snapshot provider. Analyzers only read them.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Dict, List, Optional

from pydantic import field_validator
from sqlmodel import Field, SQLModel

from .base import PRIMARY_LOCALE


class RelationKind(str, Enum):
    """Places in the catalog that can reference an asset."""

    WORK_COVER = "work_cover"
    WORK_GALLERY = "work_gallery"
    CATEGORY_IMAGE = "category_image"
    LABEL_IMAGE = "label_image"
    ARTIST_PHOTO = "artist_photo"


def as_utc(value: datetime) -> datetime:
    """Read naive timestamps as UTC so every snapshot timestamp compares."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def localized(values: Dict[str, Optional[str]], locale: str) -> Optional[str]:
    """Return the stripped text for a locale, or None when blank/missing."""
    text = values.get(locale)
    if text is None:
        return None
    text = text.strip()
    return text or None


class CatalogRecord(SQLModel):
    """Shape shared by works, artists, categories and labels."""

    id: str
    slug: str
    created_at: datetime
    names: Dict[str, Optional[str]] = Field(default_factory=dict)

    @field_validator("created_at")
    @classmethod
    def created_at_utc(cls, value: datetime) -> datetime:
        return as_utc(value)

    def name(self, locale: str = PRIMARY_LOCALE) -> Optional[str]:
        return localized(self.names, locale)


class WorkRecord(CatalogRecord):
    """Work snapshot. ``names`` holds the localized titles."""

    category_id: str
    year: Optional[int] = None


class ArtistRecord(CatalogRecord):
    """Artist snapshot with the completeness attributes."""

    has_photo: bool = False
    bios: Dict[str, Optional[str]] = Field(default_factory=dict)
    external_link_count: int = 0

    def bio(self, locale: str) -> Optional[str]:
        return localized(self.bios, locale)


class AssetRecord(SQLModel):
    """Asset snapshot with one usage ref per catalog reference."""

    id: str
    path: str
    alt: Optional[str] = None
    width: Optional[int] = None
    height: Optional[int] = None
    created_at: datetime
    usage_refs: List[RelationKind] = Field(default_factory=list)

    @field_validator("created_at")
    @classmethod
    def created_at_utc(cls, value: datetime) -> datetime:
        return as_utc(value)


class CatalogSnapshot(SQLModel):
    """All five snapshot slices, as stored in a JSON snapshot file."""

    assets: List[AssetRecord] = Field(default_factory=list)
    works: List[WorkRecord] = Field(default_factory=list)
    artists: List[ArtistRecord] = Field(default_factory=list)
    categories: List[CatalogRecord] = Field(default_factory=list)
    labels: List[CatalogRecord] = Field(default_factory=list)
