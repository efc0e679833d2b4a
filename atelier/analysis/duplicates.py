"""Pure functions for catalog duplicate detection.

Each analyzer takes one snapshot slice and returns that entity's report:
group the records under one or more keys, classify every group once, then
derive the totals from the classified groups in a single fold. Nothing
here touches the database.
"""

import re
from datetime import datetime
from typing import Callable, Dict, List, Optional, Sequence, Tuple, TypeVar

from atelier.models.report import (
    ArtistReport,
    AssetReport,
    DuplicateGroup,
    EntityKind,
    GroupMember,
    IntegrityIssue,
    MatchType,
    Severity,
    SlugReport,
    WorkReport,
)
from atelier.models.snapshot import (
    ArtistRecord,
    AssetRecord,
    CatalogRecord,
    WorkRecord,
)

from .grouping import find_duplicates
from .integrity import check_artists
from .normalize import exact_key, normalized_key
from .severity import classify, tally_severities
from .usage import find_orphans, usage_count

R = TypeVar("R", bound=CatalogRecord)

_ACCENTED = re.compile(r"[àâäçéèêëïîôùûüÿæœ]", re.IGNORECASE)


def slug_key(record: CatalogRecord) -> Optional[str]:
    return record.slug or None


def name_key(record: CatalogRecord) -> Optional[str]:
    return exact_key(record.name())


def similar_name_key(record: CatalogRecord) -> Optional[str]:
    return normalized_key(record.name())


def _record_member(record: CatalogRecord) -> GroupMember:
    return GroupMember(
        id=record.id,
        key=record.slug,
        name=record.name(),
        category_id=getattr(record, "category_id", None),
        created_at=record.created_at,
    )


def _asset_member(asset: AssetRecord) -> GroupMember:
    return GroupMember(
        id=asset.id,
        key=asset.path,
        usage_count=usage_count(asset),
        created_at=asset.created_at,
    )


def select_primary_member(members: Sequence[GroupMember]) -> str:
    """Suggest which member of a group to keep.

    Selection criteria (in order):
    1. Most catalog references (assets)
    2. A name that differs from the slug
    3. A name with capitals
    4. A name with accents
    5. Oldest record
    6. First seen (deterministic)

    Args:
        members: Members of a duplicate group

    Returns:
        ID of the suggested member
    """
    if not members:
        raise ValueError("Cannot select from empty group")

    def sort_key(
        indexed: Tuple[int, GroupMember],
    ) -> Tuple[int, bool, bool, bool, datetime, int]:
        index, member = indexed
        name = member.name or ""
        return (
            -(member.usage_count or 0),
            not (name and name != member.key),
            not (name and name != name.lower()),
            not _ACCENTED.search(name),
            member.created_at,
            index,
        )

    _, best = min(enumerate(members), key=sort_key)
    return best.id


def build_group(
    identifier: str,
    match_type: MatchType,
    entity: EntityKind,
    members: List[GroupMember],
    same_context: Optional[bool] = None,
) -> DuplicateGroup:
    """Classify a set of members and wrap them in a DuplicateGroup."""
    severity, reason = classify(entity, match_type, same_context)
    return DuplicateGroup(
        identifier=identifier,
        match_type=match_type,
        severity=severity,
        reason=reason,
        members=members,
        primary_id=select_primary_member(members),
    )


def group_records(
    records: Sequence[R],
    key_fn: Callable[[R], Optional[str]],
    match_type: MatchType,
    entity: EntityKind,
    context_fn: Optional[Callable[[R], str]] = None,
) -> List[DuplicateGroup]:
    """Group catalog records by key and classify each duplicate group.

    Args:
        records: Snapshot slice
        key_fn: Grouping key, None to skip a record
        match_type: Strategy reported on the groups
        entity: Entity kind used for classification
        context_fn: Optional attribute whose agreement across members
                    changes the severity (category for works)

    Returns:
        Duplicate groups in first-seen key order
    """
    groups = []
    for key, members in find_duplicates(records, key_fn):
        same_context = None
        if context_fn is not None:
            same_context = len({context_fn(m) for m in members}) == 1
        groups.append(
            build_group(
                key,
                match_type,
                entity,
                [_record_member(m) for m in members],
                same_context,
            )
        )
    return groups


def suppress_covered(
    candidates: List[DuplicateGroup],
    covering: List[DuplicateGroup],
) -> List[DuplicateGroup]:
    """Drop candidate groups whose member set is already a covering group."""
    covered = {frozenset(m.id for m in g.members) for g in covering}
    return [
        g for g in candidates if frozenset(m.id for m in g.members) not in covered
    ]


def _totals(
    groups: List[DuplicateGroup],
    issues: Sequence[IntegrityIssue] = (),
) -> Dict[str, int]:
    """Derive report counters from already-classified findings."""
    severities = tally_severities(
        [g.severity for g in groups] + [i.severity for i in issues]
    )
    return {
        "total_duplicates": sum(g.count for g in groups),
        "total_errors": severities[Severity.ERROR],
        "total_warnings": severities[Severity.WARNING],
        "total_info": severities[Severity.INFO],
    }


def analyze_assets(assets: Sequence[AssetRecord]) -> AssetReport:
    """Find assets sharing a storage path, and assets nothing uses.

    Duplicate and orphan status are independent: an unused duplicate
    appears in both lists.
    """
    by_path = [
        build_group(
            path,
            MatchType.EXACT_PATH,
            EntityKind.ASSET,
            [_asset_member(a) for a in members],
        )
        for path, members in find_duplicates(assets, lambda a: a.path or None)
    ]
    orphans = find_orphans(assets)

    return AssetReport(
        duplicates_by_path=by_path,
        unused_assets=orphans,
        total_unused=len(orphans),
        **_totals(by_path),
    )


def analyze_works(works: Sequence[WorkRecord]) -> WorkReport:
    """Find works sharing a slug or a primary-locale title."""
    by_slug = group_records(
        works,
        slug_key,
        MatchType.EXACT_SLUG,
        EntityKind.WORK,
        context_fn=lambda w: w.category_id,
    )
    by_title = group_records(
        works,
        name_key,
        MatchType.EXACT_NAME,
        EntityKind.WORK,
        context_fn=lambda w: w.category_id,
    )

    return WorkReport(
        duplicates_by_slug=by_slug,
        duplicates_by_title=by_title,
        **_totals(by_slug + by_title),
    )


def analyze_artists(artists: Sequence[ArtistRecord]) -> ArtistReport:
    """Find duplicate artists and incomplete artist records."""
    by_slug = group_records(
        artists, slug_key, MatchType.EXACT_SLUG, EntityKind.ARTIST
    )
    by_name = group_records(
        artists, name_key, MatchType.EXACT_NAME, EntityKind.ARTIST
    )
    similar = suppress_covered(
        group_records(
            artists,
            similar_name_key,
            MatchType.NORMALIZED_NAME,
            EntityKind.ARTIST,
        ),
        by_name,
    )
    issues = check_artists(artists)

    return ArtistReport(
        duplicates_by_slug=by_slug,
        duplicates_by_name=by_name,
        similar_names=similar,
        integrity_issues=issues,
        total_integrity_issues=len(issues),
        **_totals(by_slug + by_name + similar, issues),
    )


def analyze_categories(categories: Sequence[CatalogRecord]) -> SlugReport:
    by_slug = group_records(
        categories, slug_key, MatchType.EXACT_SLUG, EntityKind.CATEGORY
    )
    return SlugReport(duplicates_by_slug=by_slug, **_totals(by_slug))


def analyze_labels(labels: Sequence[CatalogRecord]) -> SlugReport:
    by_slug = group_records(labels, slug_key, MatchType.EXACT_SLUG, EntityKind.LABEL)
    return SlugReport(duplicates_by_slug=by_slug, **_totals(by_slug))
