import json
from datetime import datetime, timezone

import pytest
import responses

from civoclient.api import CivoError
from civoclient.resource_snapshots import (
    ResourceSnapshot,
    ResourceSnapshotsAPI,
    RestoreInstanceSnapshotRequest,
    RestoreResourceSnapshotRequest,
    UpdateResourceSnapshotRequest,
)

BASE = "https://api.example.com"
STAMP = "2023-01-01T12:00:00Z"


def _snapshot_doc(name="test-snapshot", description="Test snapshot", **extra):
    doc = dict(
        id="12345",
        name=name,
        description=description,
        resource_type="instance",
        created_at=STAMP,
    )
    doc.update(extra)
    return doc


@pytest.fixture
def mocked():
    with responses.RequestsMock(assert_all_requests_are_fired=False) as rsps:
        yield rsps


@pytest.fixture
def client():
    with ResourceSnapshotsAPI(api_key="placeholder", region="TEST", base_url=BASE) as api:
        yield api


def test_list_resource_snapshots(mocked, client):
    instance = dict(
        id="inst-12345",
        name="test-instance",
        description="Test instance",
        status=dict(state="available"),
        created_at=STAMP,
    )
    mocked.add(
        responses.GET,
        BASE + "/v2/resourcesnapshots",
        body=json.dumps([_snapshot_doc(instance=instance)]),
    )
    got = client.list_resource_snapshots()
    assert len(got) == 1
    assert got[0].id == "12345"
    assert got[0].instance is not None
    assert got[0].instance.id == "inst-12345"
    assert got[0].instance.state == "available"
    assert "region=TEST" in mocked.calls[0].request.url


def test_get_resource_snapshot(mocked, client):
    mocked.add(
        responses.GET,
        BASE + "/v2/resourcesnapshots/12345",
        body=json.dumps(_snapshot_doc()),
    )
    got = client.get_resource_snapshot("12345")
    expected = ResourceSnapshot(
        id="12345",
        name="test-snapshot",
        description="Test snapshot",
        resource_type="instance",
        created_at=datetime(2023, 1, 1, 12, 0, 0, tzinfo=timezone.utc),
    )
    assert got == expected


def test_update_resource_snapshot(mocked, client):
    mocked.add(
        responses.PUT,
        BASE + "/v2/resourcesnapshots/12345",
        body=json.dumps(_snapshot_doc("updated-snapshot", "Updated description")),
    )
    request = UpdateResourceSnapshotRequest(
        name="updated-snapshot", description="Updated description"
    )
    got = client.update_resource_snapshot("12345", request)
    assert got.name == "updated-snapshot"
    assert json.loads(mocked.calls[0].request.body) == {
        "name": "updated-snapshot",
        "description": "Updated description",
    }


def test_update_request_omits_empty_fields():
    assert UpdateResourceSnapshotRequest(name="only").to_dict() == {"name": "only"}


def test_delete_resource_snapshot(mocked, client):
    mocked.add(
        responses.DELETE,
        BASE + "/v2/resourcesnapshots/12345",
        body=json.dumps(dict(result="success")),
    )
    got = client.delete_resource_snapshot("12345")
    assert got.result == "success"


def test_restore_resource_snapshot(mocked, client):
    restore_doc = dict(
        resource_type="instance",
        instance=dict(
            id="restore-op-67890",
            name="restored-snapshot-op-name",
            hostname="restored-instance",
            description="Restored snapshot",
            from_snapshot="12345",
            private_ipv4="10.0.0.5",
            overwrite_existing=False,
            status=dict(state="in_progress"),
            created_at=STAMP,
            completed_at=None,
        ),
    )
    mocked.add(
        responses.POST,
        BASE + "/v2/resourcesnapshots/12345/restore",
        body=json.dumps(restore_doc),
    )
    request = RestoreResourceSnapshotRequest(
        instance=RestoreInstanceSnapshotRequest(
            description="Restored snapshot",
            hostname="restored-instance",
            include_volumes=True,
        )
    )
    got = client.restore_resource_snapshot("12345", request)
    assert got.instance is not None
    assert got.resource_type == "instance"
    assert got.instance.name == "restored-snapshot-op-name"
    assert got.instance.hostname == "restored-instance"
    assert got.instance.from_snapshot == "12345"
    assert got.instance.state == "in_progress"
    assert got.instance.completed_at is None
    assert json.loads(mocked.calls[0].request.body) == {
        "instance": {
            "description": "Restored snapshot",
            "hostname": "restored-instance",
            "include_volumes": True,
        }
    }


def test_get_resource_snapshot_error(mocked, client):
    mocked.add(
        responses.GET,
        BASE + "/v2/resourcesnapshots/missing",
        status=404,
        body='{"code": "not_found"}',
    )
    with pytest.raises(CivoError) as info:
        client.get_resource_snapshot("missing")
    assert info.value.status_code == 404