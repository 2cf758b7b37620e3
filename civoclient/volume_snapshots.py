"""Point-in-time copies of volumes."""

from __future__ import annotations

from dataclasses import dataclass

from .api import APIClient, SimpleResponse, _scalar_kwargs


@dataclass
class VolumeSnapshot:
    """A point-in-time copy of a volume."""

    name: str = ""
    snapshot_id: str = ""
    snapshot_description: str = ""
    volume_id: str = ""
    instance_id: str = ""
    source_volume_name: str = ""
    restore_size: int = 0
    state: str = ""
    creation_time: str = ""

    @classmethod
    def from_dict(cls, data: dict) -> "VolumeSnapshot":
        return cls(**_scalar_kwargs(cls, data))


@dataclass
class VolumeSnapshotConfig:
    """The settings for a new volume snapshot."""

    name: str = ""
    description: str = ""
    region: str = ""

    def to_dict(self) -> dict:
        return {"name": self.name, "description": self.description, "region": self.region}


class VolumeSnapshotsAPI(APIClient):
    """Volume snapshot calls."""

    def list_volume_snapshots(self) -> list[VolumeSnapshot]:
        """Return every volume snapshot of the account."""
        body = self.send_get_request("/v2/snapshots?resource_type=volume")
        return [VolumeSnapshot.from_dict(item) for item in self._decode_list(body)]

    def get_volume_snapshot(self, snapshot_id: str) -> VolumeSnapshot:
        """Return one volume snapshot by ID."""
        body = self.send_get_request(f"/v2/snapshots/{snapshot_id}?resource_type=volume")
        return VolumeSnapshot.from_dict(self._decode_object(body))

    def delete_volume_snapshot(self, snapshot_id: str) -> SimpleResponse:
        """Delete a volume snapshot."""
        return self.decode_simple_response(self.send_delete_request(f"/v2/snapshots/{snapshot_id}"))