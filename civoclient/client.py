"""The full API client, with every group of calls, and volume types."""

from __future__ import annotations

from dataclasses import dataclass, field

from .api import _scalar_kwargs
from .regions import RegionsAPI
from .resource_snapshots import ResourceSnapshotsAPI
from .roles import RolesAPI
from .snapshot_schedules import SnapshotSchedulesAPI
from .ssh_keys import SSHKeysAPI
from .teams import TeamsAPI
from .volume_snapshots import VolumeSnapshotsAPI
from .volumes import VolumesAPI
from .webhooks import WebhooksAPI


@dataclass
class VolumeType:
    """A storage class that volumes can be created with."""

    name: str = ""
    description: str = ""
    enabled: bool = False
    labels: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict) -> "VolumeType":
        kwargs = _scalar_kwargs(cls, data, skip=("labels",))
        return cls(labels=list(data.get("labels") or []), **kwargs)


class Client(
    RegionsAPI,
    RolesAPI,
    SSHKeysAPI,
    ResourceSnapshotsAPI,
    SnapshotSchedulesAPI,
    TeamsAPI,
    VolumeSnapshotsAPI,
    VolumesAPI,
    WebhooksAPI,
):
    """A client offering every API call, scoped to one region."""

    def list_volume_types(self) -> list[VolumeType]:
        """Return every volume type available."""
        body = self.send_get_request("/v2/volumetypes")
        return [VolumeType.from_dict(item) for item in self._decode_list(body)]