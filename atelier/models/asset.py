"""Asset model - represents a stored media file."""

import uuid as uuid_module
from typing import Optional

from sqlmodel import Field, SQLModel

from .base import TimestampMixin


class AssetBase(SQLModel):
    """Shared asset fields."""

    # Not unique: duplicated paths are exactly what the audit reports
    path: str = Field(index=True)
    alt: Optional[str] = None
    width: Optional[int] = None
    height: Optional[int] = None


class Asset(AssetBase, TimestampMixin, table=True):
    """Asset database model."""

    __tablename__ = "assets"

    id: str = Field(
        default_factory=lambda: uuid_module.uuid4().hex,
        primary_key=True,
    )
