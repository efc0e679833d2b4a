"""Work models - creative works and their gallery images."""

import uuid as uuid_module
from typing import Dict, Optional

from sqlmodel import Column, Field, SQLModel

from .base import JSONType, TimestampMixin


class Work(TimestampMixin, table=True):
    """Work database model."""

    __tablename__ = "works"

    id: str = Field(
        default_factory=lambda: uuid_module.uuid4().hex,
        primary_key=True,
    )
    slug: str = Field(index=True, max_length=255)
    titles: Dict[str, Optional[str]] = Field(
        default_factory=dict, sa_column=Column(JSONType, default={})
    )
    category_id: str = Field(foreign_key="categories.id")
    year: Optional[int] = None
    cover_asset_id: Optional[str] = Field(default=None, foreign_key="assets.id")


class WorkImage(SQLModel, table=True):
    """WorkImage database model - links gallery assets to works."""

    __tablename__ = "work_images"

    work_id: str = Field(foreign_key="works.id", primary_key=True)
    asset_id: str = Field(foreign_key="assets.id", primary_key=True)
    position: int = 0
