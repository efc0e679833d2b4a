"""Tests for asset usage counting."""

from atelier.analysis.usage import find_orphans, usage_by_kind, usage_count
from atelier.models.snapshot import RelationKind


def test_usage_count_sums_all_kinds(make_asset):
    asset = make_asset(
        "a1",
        "/img/a.jpg",
        usage_refs=[
            RelationKind.WORK_COVER,
            RelationKind.WORK_GALLERY,
            RelationKind.WORK_GALLERY,
            RelationKind.ARTIST_PHOTO,
        ],
    )

    assert usage_count(asset) == 4
    by_kind = usage_by_kind(asset)
    assert by_kind[RelationKind.WORK_GALLERY] == 2
    assert by_kind[RelationKind.LABEL_IMAGE] == 0


def test_usage_count_zero(make_asset):
    assert usage_count(make_asset("a1", "/img/a.jpg")) == 0


def test_find_orphans_sorted_oldest_first(make_asset):
    assets = [
        make_asset("new", "/img/new.jpg", minutes=30),
        make_asset("used", "/img/used.jpg", [RelationKind.CATEGORY_IMAGE], minutes=0),
        make_asset("old", "/img/old.jpg", minutes=-30),
        make_asset("mid", "/img/mid.jpg", minutes=0),
    ]

    orphans = find_orphans(assets)

    assert [o.id for o in orphans] == ["old", "mid", "new"]
    assert orphans[0].path == "/img/old.jpg"


def test_find_orphans_ties_keep_snapshot_order(make_asset):
    assets = [make_asset("b", "/b.jpg"), make_asset("a", "/a.jpg")]
    assert [o.id for o in find_orphans(assets)] == ["b", "a"]


def test_find_orphans_returns_full_list(make_asset):
    assets = [make_asset(f"a{i}", f"/img/{i}.jpg", minutes=i) for i in range(250)]
    assert len(find_orphans(assets)) == 250
