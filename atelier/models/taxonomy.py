"""Category and Label models - classify works."""

import uuid as uuid_module
from typing import Dict, Optional

from sqlmodel import Field, SQLModel

from .base import JSONType, TimestampMixin


class TaxonomyBase(SQLModel):
    """Shared category/label fields."""

    slug: str = Field(index=True, max_length=255)
    # sa_type, not sa_column: each table needs its own Column
    names: Dict[str, Optional[str]] = Field(default_factory=dict, sa_type=JSONType)
    image_asset_id: Optional[str] = Field(default=None, foreign_key="assets.id")


class Category(TaxonomyBase, TimestampMixin, table=True):
    """Category database model."""

    __tablename__ = "categories"

    id: str = Field(
        default_factory=lambda: uuid_module.uuid4().hex,
        primary_key=True,
    )


class Label(TaxonomyBase, TimestampMixin, table=True):
    """Label (record label / production company) database model."""

    __tablename__ = "labels"

    id: str = Field(
        default_factory=lambda: uuid_module.uuid4().hex,
        primary_key=True,
    )
