# civoclient

A Python client for the Civo cloud API. It covers account quotas, regions,
roles, teams and team members, SSH keys, volumes and volume types, volume
snapshots, resource snapshots, snapshot schedules and webhooks.

Every call returns plain dataclasses built from the API's JSON; timestamps
become `datetime` objects. Failures are raised as exceptions.

## Installation

```
pip install civoclient
```

To run the test suite:

```
pip install "civoclient[test]"
pytest
```

## Getting started

`civoclient.client.Client` offers every call. It is created with an API key,
an optional region (sent as the `region` query parameter on every request)
and an optional `base_url`. It can be used as a context manager, which closes
its HTTP session on exit.

```python
from civoclient.client import Client

with Client(api_key="placeholder", region="LON1") as client:
    quota = client.get_quota()
    print(quota.instance_count_usage, "/", quota.instance_count_limit)

    for region in client.list_regions():
        print(region.code, region.name, region.features.kubernetes)

    default = client.get_default_region()
```

The groups of calls are also available on their own, as `RegionsAPI`,
`RolesAPI`, `SSHKeysAPI`, `TeamsAPI`, `VolumesAPI`, `VolumeSnapshotsAPI`,
`ResourceSnapshotsAPI`, `SnapshotSchedulesAPI` and `WebhooksAPI` in the
modules of the same names. The low-level `send_get_request`,
`send_post_request`, `send_put_request` and `send_delete_request` methods
return the raw response body.

## Volumes and snapshots

```python
from civoclient.volumes import VolumeConfig, VolumeAttachConfig
from civoclient.volume_snapshots import VolumeSnapshotConfig

result = client.new_volume(VolumeConfig(name="data", size_gb=25))
volume = client.find_volume("data")

client.attach_volume(volume.id, VolumeAttachConfig(instance_id="instance-123"))
client.resize_volume(volume.id, 50)

snapshot = client.create_volume_snapshot(
    volume.id, VolumeSnapshotConfig(name="nightly")
)
client.list_volume_snapshots_by_volume_id(volume.id)

client.detach_volume(volume.id)
client.delete_volume_and_all_snapshots(volume.id)

for volume_type in client.list_volume_types():
    print(volume_type.name, volume_type.enabled)
```

## Resource snapshots and schedules

```python
from civoclient.resource_snapshots import (
    RestoreInstanceSnapshotRequest,
    RestoreResourceSnapshotRequest,
)
from civoclient.snapshot_schedules import (
    CreateSnapshotInstance,
    CreateSnapshotScheduleRequest,
    SnapshotRetention,
)

schedule = client.create_snapshot_schedule(
    CreateSnapshotScheduleRequest(
        name="daily-schedule",
        cron_expression="0 0 * * *",
        retention=SnapshotRetention(period="48h", max_snapshots=7),
        instances=[CreateSnapshotInstance(instance_id="instance-123", include_volumes=True)],
    )
)

for snap in client.list_resource_snapshots():
    print(snap.id, snap.resource_type, snap.created_at)

restore = client.restore_resource_snapshot(
    "snapshot-id",
    RestoreResourceSnapshotRequest(
        instance=RestoreInstanceSnapshotRequest(hostname="restored-instance")
    ),
)
print(restore.instance.state)
```

## Finding things by name or ID

The `find_*` methods (`find_region`, `find_volume`, `find_ssh_key`,
`find_team`, `find_webhook`, `find_snapshot_schedule`) accept either a full or
partial name or ID (a URL or ID for webhooks, a name or code for regions). An
exact match always wins; otherwise a single partial match is returned. Region
searches ignore case.

When the search is ambiguous or matches nothing, an exception is raised:

```python
from civoclient.api import MultipleMatchesError, ZeroMatchesError

try:
    key = client.find_ssh_key("laptop")
except MultipleMatchesError:
    print("be more specific")
except ZeroMatchesError:
    print("no such key")
```

Both derive from `civoclient.api.CivoError`, the base class for errors raised
by this package. A response with an HTTP status of 400 or above also raises
`CivoError`, carrying `status_code` and `body`; so do network failures and
responses that are not the expected JSON.

## Teams and roles

```python
team = client.create_team("Operations")
client.add_team_member(team.id, "user-id", "*.*", "")
members = client.list_team_members(team.id)

role = client.create_role("Org Admin", "organisation.*")
client.delete_role(role.id)
```

## Webhooks

```python
from civoclient.webhooks import WebhookConfig

hook = client.create_webhook(
    WebhookConfig(events=["*"], url="https://api.example.com/webhook", secret="secret")
)
client.delete_webhook(hook.id)
```

## Helpers

`civoclient.names.random_name()` returns a random "adjective-noun" name such
as `misty-river`, handy for naming instances or clusters.
`civoclient.names.get_version()` reports the installed version of the package,
or `dev` when it is not installed.

## What this package does not do

It has no calls for instances, Kubernetes clusters, networks, firewalls,
load balancers or databases, so it cannot list the volumes belonging to a
cluster or find volumes left behind by deleted clusters. There is no
command-line tool; it is a library only.