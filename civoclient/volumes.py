"""Attachable block storage volumes and their snapshots."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from .api import APIClient, SimpleResponse, _parse_time, _scalar_kwargs, find_match
from .volume_snapshots import VolumeSnapshot, VolumeSnapshotConfig


@dataclass
class Volume:
    """A block of attachable storage."""

    id: str = ""
    name: str = ""
    instance_id: str = ""
    cluster_id: str = ""
    network_id: str = ""
    mountpoint: str = ""
    status: str = ""
    volume_type: str = ""
    size_gb: int = 0
    bootable: bool = False
    created_at: datetime | None = None

    @classmethod
    def from_dict(cls, data: dict) -> "Volume":
        kwargs = _scalar_kwargs(cls, data, skip=("created_at",))
        return cls(created_at=_parse_time(data.get("created_at")), **kwargs)


@dataclass
class VolumeResult:
    """The response to creating a volume."""

    id: str = ""
    name: str = ""
    result: str = ""

    @classmethod
    def from_dict(cls, data: dict) -> "VolumeResult":
        return cls(**_scalar_kwargs(cls, data))


@dataclass
class VolumeConfig:
    """The settings for a new volume."""

    name: str = ""
    namespace: str = ""
    cluster_id: str = ""
    network_id: str = ""
    region: str = ""
    size_gb: int = 0
    bootable: bool = False
    volume_type: str = ""
    snapshot_id: str = ""

    def to_dict(self) -> dict:
        payload = {
            "name": self.name,
            "namespace": self.namespace,
            "cluster_id": self.cluster_id,
            "network_id": self.network_id,
            "region": self.region,
            "size_gb": self.size_gb,
            "bootable": self.bootable,
            "volume_type": self.volume_type,
        }
        if self.snapshot_id:
            payload["snapshot_id"] = self.snapshot_id
        return payload


@dataclass
class VolumeAttachConfig:
    """How to attach a volume to an instance."""

    instance_id: str = ""
    attach_at_boot: bool = False
    region: str = ""

    def to_dict(self) -> dict:
        return {
            "instance_id": self.instance_id,
            "attach_at_boot": self.attach_at_boot,
            "region": self.region,
        }


class VolumesAPI(APIClient):
    """Volume calls."""

    def list_volumes(self) -> list[Volume]:
        """Return every volume of the account."""
        body = self.send_get_request("/v2/volumes")
        return [Volume.from_dict(item) for item in self._decode_list(body)]

    def get_volume(self, volume_id: str) -> Volume:
        """Return a volume by its full ID."""
        body = self.send_get_request(f"/v2/volumes/{volume_id}")
        return Volume.from_dict(self._decode_object(body))

    def find_volume(self, search: str) -> Volume:
        """Find a volume by part of its ID or name."""
        return find_match(self.list_volumes(), search, ("name", "id"))

    def new_volume(self, config: VolumeConfig) -> VolumeResult:
        """Create a volume."""
        body = self.send_post_request("/v2/volumes", config)
        return VolumeResult.from_dict(self._decode_object(body))

    def resize_volume(self, volume_id: str, size: int) -> SimpleResponse:
        """Resize a volume to ``size`` gigabytes."""
        body = self.send_put_request(
            f"/v2/volumes/{volume_id}/resize", {"size_gb": size, "region": self.region}
        )
        return self.decode_simple_response(body)

    def attach_volume(self, volume_id: str, config: VolumeAttachConfig) -> SimpleResponse:
        """Attach a volume to an instance."""
        body = self.send_put_request(f"/v2/volumes/{volume_id}/attach", config)
        return self.decode_simple_response(body)

    def detach_volume(self, volume_id: str) -> SimpleResponse:
        """Detach a volume from any instance."""
        body = self.send_put_request(f"/v2/volumes/{volume_id}/detach", {"region": self.region})
        return self.decode_simple_response(body)

    def delete_volume(self, volume_id: str) -> SimpleResponse:
        """Delete a volume."""
        return self.decode_simple_response(self.send_delete_request(f"/v2/volumes/{volume_id}"))

    def get_volume_snapshot_by_volume_id(self, volume_id: str, snapshot_id: str) -> VolumeSnapshot:
        """Return one snapshot of a volume."""
        body = self.send_get_request(f"/v2/volumes/{volume_id}/snapshots/{snapshot_id}")
        return VolumeSnapshot.from_dict(self._decode_object(body))

    def list_volume_snapshots_by_volume_id(self, volume_id: str) -> list[VolumeSnapshot]:
        """Return every snapshot of a volume."""
        body = self.send_get_request(f"/v2/volumes/{volume_id}/snapshots")
        return [VolumeSnapshot.from_dict(item) for item in self._decode_list(body)]

    def create_volume_snapshot(self, volume_id: str, config: VolumeSnapshotConfig) -> VolumeSnapshot:
        """Take a snapshot of a volume."""
        body = self.send_post_request(f"/v2/volumes/{volume_id}/snapshots", config)
        return VolumeSnapshot.from_dict(self._decode_object(body))

    def delete_volume_and_all_snapshots(self, volume_id: str) -> SimpleResponse:
        """Delete a volume together with all of its snapshots."""
        body = self.send_delete_request(f"/v2/volumes/{volume_id}?delete_snapshot=true")
        return self.decode_simple_response(body)