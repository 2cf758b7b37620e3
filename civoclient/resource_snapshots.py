"""Snapshots of any resource type, and restoring from them."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from .api import APIClient, SimpleResponse, _parse_time, _scalar_kwargs


@dataclass
class VolumeStatus:
    """The state of one volume within a snapshot."""

    id: str = ""
    state: str = ""

    @classmethod
    def from_dict(cls, data: dict) -> "VolumeStatus":
        return cls(**_scalar_kwargs(cls, data))


@dataclass
class InstanceSnapshotInfo:
    """Instance details of a resource snapshot; state and volumes come from its status."""

    id: str = ""
    name: str = ""
    description: str = ""
    included_volumes: list[str] = field(default_factory=list)
    state: str = ""
    volumes: list[VolumeStatus] = field(default_factory=list)
    created_at: datetime | None = None

    @classmethod
    def from_dict(cls, data: dict) -> "InstanceSnapshotInfo":
        status = data.get("status") or {}
        kwargs = _scalar_kwargs(
            cls, data, skip=("included_volumes", "state", "volumes", "created_at")
        )
        return cls(
            included_volumes=list(data.get("included_volumes") or []),
            state=status.get("state") or "",
            volumes=[VolumeStatus.from_dict(item) for item in status.get("volumes") or []],
            created_at=_parse_time(data.get("created_at")),
            **kwargs,
        )


@dataclass
class ResourceSnapshot:
    """A snapshot of a resource of any type."""

    id: str = ""
    name: str = ""
    description: str = ""
    resource_type: str = ""
    created_at: datetime | None = None
    instance: InstanceSnapshotInfo | None = None

    @classmethod
    def from_dict(cls, data: dict) -> "ResourceSnapshot":
        kwargs = _scalar_kwargs(cls, data, skip=("created_at", "instance"))
        instance = data.get("instance")
        return cls(
            created_at=_parse_time(data.get("created_at")),
            instance=None if instance is None else InstanceSnapshotInfo.from_dict(instance),
            **kwargs,
        )


@dataclass
class InstanceRestoreInfo:
    """Instance details of a restore operation; state comes from its status."""

    id: str = ""
    name: str = ""
    hostname: str = ""
    description: str = ""
    from_snapshot: str = ""
    private_ipv4: str = ""
    overwrite_existing: bool = False
    state: str = ""
    created_at: datetime | None = None
    completed_at: datetime | None = None

    @classmethod
    def from_dict(cls, data: dict) -> "InstanceRestoreInfo":
        status = data.get("status") or {}
        kwargs = _scalar_kwargs(cls, data, skip=("state", "created_at", "completed_at"))
        return cls(
            state=status.get("state") or "",
            created_at=_parse_time(data.get("created_at")),
            completed_at=_parse_time(data.get("completed_at")),
            **kwargs,
        )


@dataclass
class ResourceSnapshotRestore:
    """The response to a restore request."""

    resource_type: str = ""
    instance: InstanceRestoreInfo | None = None

    @classmethod
    def from_dict(cls, data: dict) -> "ResourceSnapshotRestore":
        instance = data.get("instance")
        return cls(
            resource_type=data.get("resource_type") or "",
            instance=None if instance is None else InstanceRestoreInfo.from_dict(instance),
        )


@dataclass
class UpdateResourceSnapshotRequest:
    """New name and description for a snapshot; empty values are left unchanged."""

    name: str = ""
    description: str = ""

    def to_dict(self) -> dict:
        return {key: value for key, value in (("name", self.name), ("description", self.description)) if value}


@dataclass
class RestoreInstanceSnapshotRequest:
    """Options for restoring an instance snapshot."""

    description: str = ""
    hostname: str = ""
    private_ipv4: str = ""
    include_volumes: bool = False
    overwrite_existing: bool = False

    def to_dict(self) -> dict:
        items = (
            ("description", self.description),
            ("hostname", self.hostname),
            ("private_ipv4", self.private_ipv4),
            ("include_volumes", self.include_volumes),
            ("overwrite_existing", self.overwrite_existing),
        )
        return {key: value for key, value in items if value}


@dataclass
class RestoreResourceSnapshotRequest:
    """A restore request for a resource snapshot."""

    instance: RestoreInstanceSnapshotRequest | None = None

    def to_dict(self) -> dict:
        return {} if self.instance is None else {"instance": self.instance.to_dict()}


class ResourceSnapshotsAPI(APIClient):
    """Resource snapshot calls."""

    def list_resource_snapshots(self) -> list[ResourceSnapshot]:
        """Return every resource snapshot."""
        body = self.send_get_request("/v2/resourcesnapshots")
        return [ResourceSnapshot.from_dict(item) for item in self._decode_list(body)]

    def get_resource_snapshot(self, snapshot_id: str) -> ResourceSnapshot:
        """Return one resource snapshot by ID."""
        body = self.send_get_request(f"/v2/resourcesnapshots/{snapshot_id}")
        return ResourceSnapshot.from_dict(self._decode_object(body))

    def update_resource_snapshot(
        self, snapshot_id: str, request: UpdateResourceSnapshotRequest
    ) -> ResourceSnapshot:
        """Change the name or description of a resource snapshot."""
        body = self.send_put_request(f"/v2/resourcesnapshots/{snapshot_id}", request)
        return ResourceSnapshot.from_dict(self._decode_object(body))

    def delete_resource_snapshot(self, snapshot_id: str) -> SimpleResponse:
        """Delete a resource snapshot."""
        body = self.send_delete_request(f"/v2/resourcesnapshots/{snapshot_id}")
        return self.decode_simple_response(body)

    def restore_resource_snapshot(
        self, snapshot_id: str, request: RestoreResourceSnapshotRequest
    ) -> ResourceSnapshotRestore:
        """Restore a resource from a snapshot."""
        body = self.send_post_request(f"/v2/resourcesnapshots/{snapshot_id}/restore", request)
        return ResourceSnapshotRestore.from_dict(self._decode_object(body))