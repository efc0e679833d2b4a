"""Unified SQLModel definitions for Atelier."""

from .artist import Artist, ArtistLink
from .asset import Asset
from .base import PRIMARY_LOCALE, SECONDARY_LOCALE, TimestampMixin
from .report import (
    AggregateReport,
    ArtistReport,
    AssetReport,
    DuplicateGroup,
    EntityKind,
    EntityReport,
    GroupMember,
    IntegrityIssue,
    IssueKind,
    MatchType,
    OrphanAsset,
    Severity,
    SlugReport,
    WorkReport,
)
from .snapshot import (
    ArtistRecord,
    AssetRecord,
    CatalogRecord,
    CatalogSnapshot,
    RelationKind,
    WorkRecord,
)
from .taxonomy import Category, Label
from .work import Work, WorkImage

__all__ = [
    "AggregateReport",
    "Artist",
    "ArtistLink",
    "ArtistRecord",
    "ArtistReport",
    "Asset",
    "AssetRecord",
    "AssetReport",
    "CatalogRecord",
    "CatalogSnapshot",
    "Category",
    "DuplicateGroup",
    "EntityKind",
    "EntityReport",
    "GroupMember",
    "IntegrityIssue",
    "IssueKind",
    "Label",
    "MatchType",
    "OrphanAsset",
    "PRIMARY_LOCALE",
    "RelationKind",
    "SECONDARY_LOCALE",
    "Severity",
    "SlugReport",
    "TimestampMixin",
    "Work",
    "WorkImage",
    "WorkRecord",
    "WorkReport",
]
