"""Snapshot providers - where the audit engine gets its records from."""

import json
from pathlib import Path
from typing import List, Optional, Protocol, Sequence, Union

from atelier.models.snapshot import (
    ArtistRecord,
    AssetRecord,
    CatalogRecord,
    CatalogSnapshot,
    WorkRecord,
)


class SnapshotProvider(Protocol):
    """Supplies read-only snapshots of each catalog entity kind."""

    def fetch_assets(self) -> List[AssetRecord]: ...

    def fetch_works(self) -> List[WorkRecord]: ...

    def fetch_artists(self) -> List[ArtistRecord]: ...

    def fetch_categories(self) -> List[CatalogRecord]: ...

    def fetch_labels(self) -> List[CatalogRecord]: ...


class StaticSnapshotProvider:
    """Provider over records already in memory (fixtures, exported files)."""

    def __init__(
        self,
        assets: Optional[Sequence[AssetRecord]] = None,
        works: Optional[Sequence[WorkRecord]] = None,
        artists: Optional[Sequence[ArtistRecord]] = None,
        categories: Optional[Sequence[CatalogRecord]] = None,
        labels: Optional[Sequence[CatalogRecord]] = None,
    ):
        self._snapshot = CatalogSnapshot(
            assets=list(assets or []),
            works=list(works or []),
            artists=list(artists or []),
            categories=list(categories or []),
            labels=list(labels or []),
        )

    @classmethod
    def from_snapshot(cls, snapshot: CatalogSnapshot) -> "StaticSnapshotProvider":
        return cls(
            assets=snapshot.assets,
            works=snapshot.works,
            artists=snapshot.artists,
            categories=snapshot.categories,
            labels=snapshot.labels,
        )

    @classmethod
    def from_json_file(cls, path: Union[str, Path]) -> "StaticSnapshotProvider":
        """Load a snapshot exported as JSON (see CatalogSnapshot).

        Raises:
            OSError: If the file cannot be read
            ValueError: If the content is not a valid snapshot
        """
        data = json.loads(Path(path).read_text(encoding="utf-8"))
        return cls.from_snapshot(CatalogSnapshot.model_validate(data))

    def fetch_assets(self) -> List[AssetRecord]:
        return list(self._snapshot.assets)

    def fetch_works(self) -> List[WorkRecord]:
        return list(self._snapshot.works)

    def fetch_artists(self) -> List[ArtistRecord]:
        return list(self._snapshot.artists)

    def fetch_categories(self) -> List[CatalogRecord]:
        return list(self._snapshot.categories)

    def fetch_labels(self) -> List[CatalogRecord]:
        return list(self._snapshot.labels)
