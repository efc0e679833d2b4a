"""Snapshot repository - builds audit snapshots from the catalog tables."""

from collections import Counter, defaultdict
from typing import Any, Dict, List, Type

from sqlalchemy import func
from sqlmodel import select

from atelier.models.artist import Artist, ArtistLink
from atelier.models.asset import Asset
from atelier.models.snapshot import (
    ArtistRecord,
    AssetRecord,
    CatalogRecord,
    RelationKind,
    WorkRecord,
)
from atelier.models.taxonomy import Category, Label
from atelier.models.work import Work, WorkImage

from .base import BaseRepository

# Every column that can point at an asset, per relation kind
ASSET_REFERENCES: Dict[RelationKind, Any] = {
    RelationKind.WORK_COVER: Work.cover_asset_id,
    RelationKind.WORK_GALLERY: WorkImage.asset_id,
    RelationKind.CATEGORY_IMAGE: Category.image_asset_id,
    RelationKind.LABEL_IMAGE: Label.image_asset_id,
    RelationKind.ARTIST_PHOTO: Artist.photo_asset_id,
}


class SnapshotRepository:
    """Database-backed snapshot provider.

    Each fetch runs its own queries; the five fetches are not isolated from
    each other, which is acceptable for an advisory report.
    """

    def __init__(self, session: Any):
        """Initialize snapshot repository.

        Args:
            session: SQLModel database session
        """
        self.session = session

    def _all(self, model: Type[Any]) -> List[Any]:
        return BaseRepository(self.session, model).list_all()

    def asset_references(self) -> Dict[str, List[RelationKind]]:
        """Map asset id -> one relation kind per reference to it."""
        refs: Dict[str, List[RelationKind]] = defaultdict(list)
        for kind, column in ASSET_REFERENCES.items():
            stmt = (
                select(column, func.count())
                .where(column.isnot(None))
                .group_by(column)
            )
            for asset_id, count in self.session.exec(stmt).all():
                refs[asset_id].extend([kind] * count)
        return refs

    def fetch_assets(self) -> List[AssetRecord]:
        refs = self.asset_references()
        return [
            AssetRecord(
                id=asset.id,
                path=asset.path,
                alt=asset.alt,
                width=asset.width,
                height=asset.height,
                created_at=asset.created_at,
                usage_refs=refs.get(asset.id, []),
            )
            for asset in self._all(Asset)
        ]

    def fetch_works(self) -> List[WorkRecord]:
        return [
            WorkRecord(
                id=work.id,
                slug=work.slug,
                created_at=work.created_at,
                names=dict(work.titles or {}),
                category_id=work.category_id,
                year=work.year,
            )
            for work in self._all(Work)
        ]

    def link_counts(self) -> Counter:
        """Map artist id -> number of external links."""
        stmt = select(ArtistLink.artist_id, func.count()).group_by(
            ArtistLink.artist_id
        )
        return Counter(dict(self.session.exec(stmt).all()))

    def fetch_artists(self) -> List[ArtistRecord]:
        links = self.link_counts()
        return [
            ArtistRecord(
                id=artist.id,
                slug=artist.slug,
                created_at=artist.created_at,
                names=dict(artist.names or {}),
                bios=dict(artist.bios or {}),
                has_photo=artist.photo_asset_id is not None,
                external_link_count=links.get(artist.id, 0),
            )
            for artist in self._all(Artist)
        ]

    def _taxonomy(self, model: Type[Any]) -> List[CatalogRecord]:
        return [
            CatalogRecord(
                id=record.id,
                slug=record.slug,
                created_at=record.created_at,
                names=dict(record.names or {}),
            )
            for record in self._all(model)
        ]

    def fetch_categories(self) -> List[CatalogRecord]:
        return self._taxonomy(Category)

    def fetch_labels(self) -> List[CatalogRecord]:
        return self._taxonomy(Label)
