import json
from datetime import datetime, timezone

import pytest
import responses

from civoclient.api import MultipleMatchesError, ZeroMatchesError
from civoclient.snapshot_schedules import (
    CreateSnapshotInstance,
    CreateSnapshotScheduleRequest,
    SnapshotRetention,
    SnapshotSchedulesAPI,
    UpdateSnapshotScheduleRequest,
)

BASE = "https://api.example.com"

SCHEDULE = """{
    "id": "schedule-123",
    "name": "daily-schedule",
    "description": "Daily snapshot schedule",
    "cron_expression": "0 0 * * *",
    "paused": false,
    "retention": {
        "period": "48h",
        "max_snapshots": 7
    },
    "instances": [],
    "status": {
        "state": "active",
        "last_snapshot": {
            "id": "",
            "name": "",
            "state": ""
        }
    },
    "created_at": "2025-04-01T09:11:14Z"
}"""


@pytest.fixture
def mocked():
    with responses.RequestsMock(assert_all_requests_are_fired=False) as rsps:
        yield rsps


@pytest.fixture
def client():
    with SnapshotSchedulesAPI(api_key="placeholder", region="TEST", base_url=BASE) as api:
        yield api


def test_create_snapshot_schedule(mocked, client):
    mocked.add(
        responses.POST,
        BASE + "/v2/resourcesnapshotschedules",
        body="""{
            "id": "schedule-123",
            "name": "daily-schedule",
            "description": "Daily snapshot schedule for instances",
            "cron_expression": "0 0 * * *",
            "paused": false,
            "retention": {"period": "48h", "max_snapshots": 7},
            "instances": [
                {
                    "id": "instance-123",
                    "size": "g3.small",
                    "included_volumes": ["volume-1", "volume-2"]
                }
            ],
            "status": {
                "state": "active",
                "last_snapshot": {"id": "", "name": "", "state": ""}
            },
            "created_at": "2025-04-01T09:11:14Z"
        }""",
    )
    request = CreateSnapshotScheduleRequest(
        name="daily-schedule",
        description="Daily snapshot schedule for instances",
        cron_expression="0 0 * * *",
        retention=SnapshotRetention(period="48h", max_snapshots=7),
        instances=[CreateSnapshotInstance(instance_id="instance-123", include_volumes=True)],
    )
    got = client.create_snapshot_schedule(request)
    assert got.name == "daily-schedule"
    assert got.cron_expression == "0 0 * * *"
    assert got.instances[0].included_volumes == ["volume-1", "volume-2"]
    assert got.instances[0].size == "g3.small"
    assert got.status.state == "active"
    assert got.created_at == datetime(2025, 4, 1, 9, 11, 14, tzinfo=timezone.utc)
    assert json.loads(mocked.calls[0].request.body) == {
        "name": "daily-schedule",
        "description": "Daily snapshot schedule for instances",
        "cron_expression": "0 0 * * *",
        "retention": {"period": "48h", "max_snapshots": 7},
        "instances": [{"instance_id": "instance-123", "include_volumes": True}],
    }


def test_list_snapshot_schedules(mocked, client):
    mocked.add(responses.GET, BASE + "/v2/resourcesnapshotschedules", body=f"[{SCHEDULE}]")
    got = client.list_snapshot_schedules()
    assert len(got) == 1
    assert got[0].name == "daily-schedule"
    assert got[0].retention.max_snapshots == 7


def test_get_snapshot_schedule(mocked, client):
    mocked.add(
        responses.GET, BASE + "/v2/resourcesnapshotschedules/schedule-123", body=SCHEDULE
    )
    got = client.get_snapshot_schedule("schedule-123")
    assert got.id == "schedule-123"
    assert got.retention.period == "48h"


def test_delete_snapshot_schedule(mocked, client):
    mocked.add(
        responses.DELETE,
        BASE + "/v2/resourcesnapshotschedules/schedule-123",
        body='{"result": "success"}',
    )
    got = client.delete_snapshot_schedule("schedule-123")
    assert got.result == "success"


def test_update_snapshot_schedule(mocked, client):
    mocked.add(
        responses.PUT, BASE + "/v2/resourcesnapshotschedules/schedule-123", body=SCHEDULE
    )
    got = client.update_snapshot_schedule(
        "schedule-123", UpdateSnapshotScheduleRequest(name="daily-schedule")
    )
    assert got.name == "daily-schedule"
    assert json.loads(mocked.calls[0].request.body) == {"name": "daily-schedule"}


def test_find_snapshot_schedule(mocked, client):
    mocked.add(
        responses.GET,
        BASE + "/v2/resourcesnapshotschedules",
        body="""[
            {"id": "schedule-123", "name": "daily"},
            {"id": "schedule-456", "name": "weekly"}
        ]""",
    )
    assert client.find_snapshot_schedule("daily").id == "schedule-123"
    assert client.find_snapshot_schedule("45").name == "weekly"
    with pytest.raises(MultipleMatchesError) as many:
        client.find_snapshot_schedule("schedule")
    assert str(many.value) == (
        "MultipleMatchesError: unable to find schedule because there were multiple matches"
    )
    with pytest.raises(ZeroMatchesError) as none:
        client.find_snapshot_schedule("missing")
    assert str(none.value) == "ZeroMatchesError: unable to find missing, zero matches"