"""Shared fixtures: snapshot record factories."""

from datetime import datetime, timedelta
from typing import Callable, Dict, List, Optional

import pytest

from atelier.models.snapshot import (
    ArtistRecord,
    AssetRecord,
    CatalogRecord,
    RelationKind,
    WorkRecord,
)

BASE_TIME = datetime(2024, 1, 15, 12, 0, 0)


@pytest.fixture
def make_asset() -> Callable[..., AssetRecord]:
    def factory(
        id: str,
        path: str,
        usage_refs: Optional[List[RelationKind]] = None,
        minutes: int = 0,
        alt: Optional[str] = None,
    ) -> AssetRecord:
        return AssetRecord(
            id=id,
            path=path,
            alt=alt,
            width=1200,
            height=800,
            created_at=BASE_TIME + timedelta(minutes=minutes),
            usage_refs=usage_refs or [],
        )

    return factory


@pytest.fixture
def make_work() -> Callable[..., WorkRecord]:
    def factory(
        id: str,
        slug: str,
        category_id: str = "cat-1",
        title: Optional[str] = None,
        minutes: int = 0,
    ) -> WorkRecord:
        return WorkRecord(
            id=id,
            slug=slug,
            category_id=category_id,
            names={"fr": title, "en": title},
            created_at=BASE_TIME + timedelta(minutes=minutes),
        )

    return factory


@pytest.fixture
def make_artist() -> Callable[..., ArtistRecord]:
    def factory(
        id: str,
        slug: str,
        name: Optional[str] = None,
        bios: Optional[Dict[str, Optional[str]]] = None,
        has_photo: bool = True,
        external_link_count: int = 1,
        minutes: int = 0,
    ) -> ArtistRecord:
        return ArtistRecord(
            id=id,
            slug=slug,
            names={"fr": name, "en": name},
            bios=bios if bios is not None else {"fr": "Bio", "en": "Bio"},
            has_photo=has_photo,
            external_link_count=external_link_count,
            created_at=BASE_TIME + timedelta(minutes=minutes),
        )

    return factory


@pytest.fixture
def make_record() -> Callable[..., CatalogRecord]:
    def factory(id: str, slug: str, name: Optional[str] = None) -> CatalogRecord:
        return CatalogRecord(
            id=id,
            slug=slug,
            names={"fr": name},
            created_at=BASE_TIME,
        )

    return factory
