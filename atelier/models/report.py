"""Report models - derived duplicate/integrity findings, never persisted."""

from datetime import datetime
from enum import Enum
from typing import Dict, Iterator, List, Optional

from pydantic import computed_field
from sqlmodel import Field, SQLModel


class Severity(str, Enum):
    """How certain/critical a finding is."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class MatchType(str, Enum):
    """Grouping strategy that produced a duplicate group."""

    EXACT_SLUG = "exact-slug"
    EXACT_NAME = "exact-name"
    NORMALIZED_NAME = "normalized-name"
    EXACT_PATH = "exact-path"


class EntityKind(str, Enum):
    """Catalog entity kinds covered by the audit."""

    ASSET = "asset"
    WORK = "work"
    ARTIST = "artist"
    CATEGORY = "category"
    LABEL = "label"


class IssueKind(str, Enum):
    """Single-record completeness violations."""

    MISSING_BIO_FR = "missing-bio-fr"
    MISSING_BIO_EN = "missing-bio-en"
    MISSING_BIO_BOTH = "missing-bio-both"
    MISSING_PHOTO = "missing-photo"
    MISSING_LINKS = "missing-links"


class GroupMember(SQLModel):
    """A record as listed inside a duplicate group."""

    id: str
    key: str  # slug, or storage path for assets
    name: Optional[str] = None
    category_id: Optional[str] = None
    usage_count: Optional[int] = None
    created_at: datetime


class DuplicateGroup(SQLModel):
    """Two or more records sharing a key under one matching strategy."""

    identifier: str
    match_type: MatchType
    severity: Severity
    reason: str
    members: List[GroupMember]
    primary_id: Optional[str] = None

    @computed_field
    @property
    def count(self) -> int:
        return len(self.members)


class IntegrityIssue(SQLModel):
    """A data-completeness violation on one record."""

    record_id: str
    slug: str
    issue_kind: IssueKind
    severity: Severity
    reason: str


class OrphanAsset(SQLModel):
    """An asset referenced by nothing in the catalog."""

    id: str
    path: str
    alt: Optional[str] = None
    width: Optional[int] = None
    height: Optional[int] = None
    created_at: datetime


class EntityReport(SQLModel):
    """Counters shared by every per-entity report."""

    total_duplicates: int = 0
    total_errors: int = 0
    total_warnings: int = 0
    total_info: int = 0

    def groups(self) -> Iterator[DuplicateGroup]:
        """Iterate over the groups of every bucket in this report."""
        return iter(())


class AssetReport(EntityReport):
    duplicates_by_path: List[DuplicateGroup] = Field(default_factory=list)
    unused_assets: List[OrphanAsset] = Field(default_factory=list)
    total_unused: int = 0

    def groups(self) -> Iterator[DuplicateGroup]:
        return iter(self.duplicates_by_path)


class WorkReport(EntityReport):
    duplicates_by_slug: List[DuplicateGroup] = Field(default_factory=list)
    duplicates_by_title: List[DuplicateGroup] = Field(default_factory=list)

    def groups(self) -> Iterator[DuplicateGroup]:
        yield from self.duplicates_by_slug
        yield from self.duplicates_by_title


class ArtistReport(EntityReport):
    duplicates_by_slug: List[DuplicateGroup] = Field(default_factory=list)
    duplicates_by_name: List[DuplicateGroup] = Field(default_factory=list)
    similar_names: List[DuplicateGroup] = Field(default_factory=list)
    integrity_issues: List[IntegrityIssue] = Field(default_factory=list)
    total_integrity_issues: int = 0

    def groups(self) -> Iterator[DuplicateGroup]:
        yield from self.duplicates_by_slug
        yield from self.duplicates_by_name
        yield from self.similar_names


class SlugReport(EntityReport):
    """Report for entities only checked by slug (categories, labels)."""

    duplicates_by_slug: List[DuplicateGroup] = Field(default_factory=list)

    def groups(self) -> Iterator[DuplicateGroup]:
        return iter(self.duplicates_by_slug)


class AggregateReport(SQLModel):
    """The five per-entity reports of one analysis run."""

    assets: AssetReport
    works: WorkReport
    artists: ArtistReport
    categories: SlugReport
    labels: SlugReport

    def entity_reports(self) -> Dict[EntityKind, EntityReport]:
        return {
            EntityKind.ASSET: self.assets,
            EntityKind.WORK: self.works,
            EntityKind.ARTIST: self.artists,
            EntityKind.CATEGORY: self.categories,
            EntityKind.LABEL: self.labels,
        }

    def grand_totals(self) -> Dict[str, int]:
        """Sum the per-entity counters; derived, never stored."""
        reports = self.entity_reports().values()
        return {
            "total_duplicates": sum(r.total_duplicates for r in reports),
            "total_errors": sum(r.total_errors for r in reports),
            "total_warnings": sum(r.total_warnings for r in reports),
            "total_info": sum(r.total_info for r in reports),
        }

    @property
    def is_clean(self) -> bool:
        totals = self.grand_totals()
        return (
            totals["total_duplicates"] == 0
            and self.assets.total_unused == 0
            and self.artists.total_integrity_issues == 0
        )
