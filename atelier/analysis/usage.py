"""Asset usage counting and orphan detection."""

from collections import Counter
from typing import Dict, List, Sequence

from atelier.models.report import OrphanAsset
from atelier.models.snapshot import AssetRecord, RelationKind


def usage_count(asset: AssetRecord) -> int:
    """Total number of catalog references to an asset, all relation kinds."""
    return sum(usage_by_kind(asset).values())


def usage_by_kind(asset: AssetRecord) -> Dict[RelationKind, int]:
    """Reference count per relation kind, zero for kinds never used."""
    counts = Counter(asset.usage_refs)
    return {kind: counts.get(kind, 0) for kind in RelationKind}


def find_orphans(assets: Sequence[AssetRecord]) -> List[OrphanAsset]:
    """List assets referenced by nothing, oldest first.

    The sort is stable, so assets created at the same instant keep their
    snapshot order.

    Args:
        assets: Asset snapshot

    Returns:
        Full orphan list sorted by created_at ascending
    """
    orphans = [asset for asset in assets if usage_count(asset) == 0]
    orphans = sorted(orphans, key=lambda asset: asset.created_at)
    return [
        OrphanAsset(
            id=asset.id,
            path=asset.path,
            alt=asset.alt,
            width=asset.width,
            height=asset.height,
            created_at=asset.created_at,
        )
        for asset in orphans
    ]
