"""Pytest configuration for API tests."""

import pytest
from fastapi.testclient import TestClient

from atelier.providers import StaticSnapshotProvider


@pytest.fixture
def snapshot_provider(make_asset, make_work, make_artist, make_record):
    return StaticSnapshotProvider(
        assets=[make_asset("a1", "/img/a.jpg"), make_asset("a2", "/img/a.jpg")],
        works=[
            make_work("w1", "album-x", "cat-1", "Album X"),
            make_work("w2", "album-x", "cat-2", "Autre"),
        ],
        artists=[make_artist("p1", "solo", "Solo", external_link_count=0)],
        categories=[make_record("c1", "films")],
        labels=[make_record("l1", "label"), make_record("l2", "label")],
    )


@pytest.fixture
def client(snapshot_provider):
    """Create a test client with the snapshot provider overridden."""
    from atelier.api.app import app
    from atelier.api.routers.monitoring import get_snapshot_provider

    app.dependency_overrides[get_snapshot_provider] = lambda: snapshot_provider

    with TestClient(app) as test_client:
        yield test_client

    # Cleanup
    app.dependency_overrides.clear()
