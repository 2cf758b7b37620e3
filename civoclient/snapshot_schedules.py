"""Schedules that take resource snapshots periodically."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from .api import APIClient, SimpleResponse, _parse_time, _scalar_kwargs, find_match


@dataclass
class SnapshotRetention:
    """How long, or how many, snapshots are kept."""

    period: str = ""
    max_snapshots: int = 0

    @classmethod
    def from_dict(cls, data: dict) -> "SnapshotRetention":
        return cls(**_scalar_kwargs(cls, data))

    def to_dict(self) -> dict:
        payload: dict = {}
        if self.period:
            payload["period"] = self.period
        if self.max_snapshots:
            payload["max_snapshots"] = self.max_snapshots
        return payload


@dataclass
class SnapshotInstance:
    """An instance covered by a schedule."""

    id: str = ""
    size: str = ""
    included_volumes: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict) -> "SnapshotInstance":
        kwargs = _scalar_kwargs(cls, data, skip=("included_volumes",))
        return cls(included_volumes=list(data.get("included_volumes") or []), **kwargs)


@dataclass
class LastSnapshotInfo:
    """The most recent snapshot taken by a schedule."""

    id: str = ""
    name: str = ""
    state: str = ""

    @classmethod
    def from_dict(cls, data: dict) -> "LastSnapshotInfo":
        return cls(**_scalar_kwargs(cls, data))


@dataclass
class SnapshotScheduleStatus:
    """The current state of a schedule."""

    state: str = ""
    last_snapshot: LastSnapshotInfo = field(default_factory=LastSnapshotInfo)

    @classmethod
    def from_dict(cls, data: dict) -> "SnapshotScheduleStatus":
        return cls(
            state=data.get("state") or "",
            last_snapshot=LastSnapshotInfo.from_dict(data.get("last_snapshot") or {}),
        )


@dataclass
class SnapshotSchedule:
    """A snapshot schedule."""

    id: str = ""
    name: str = ""
    description: str = ""
    cron_expression: str = ""
    paused: bool = False
    retention: SnapshotRetention = field(default_factory=SnapshotRetention)
    instances: list[SnapshotInstance] = field(default_factory=list)
    status: SnapshotScheduleStatus = field(default_factory=SnapshotScheduleStatus)
    created_at: datetime | None = None

    @classmethod
    def from_dict(cls, data: dict) -> "SnapshotSchedule":
        kwargs = _scalar_kwargs(
            cls, data, skip=("retention", "instances", "status", "created_at")
        )
        return cls(
            retention=SnapshotRetention.from_dict(data.get("retention") or {}),
            instances=[SnapshotInstance.from_dict(item) for item in data.get("instances") or []],
            status=SnapshotScheduleStatus.from_dict(data.get("status") or {}),
            created_at=_parse_time(data.get("created_at")),
            **kwargs,
        )


@dataclass
class CreateSnapshotInstance:
    """An instance to add to a new schedule."""

    instance_id: str
    include_volumes: bool = False

    def to_dict(self) -> dict:
        return {"instance_id": self.instance_id, "include_volumes": self.include_volumes}


@dataclass
class CreateSnapshotScheduleRequest:
    """The settings for a new snapshot schedule."""

    name: str
    cron_expression: str
    description: str = ""
    retention: SnapshotRetention = field(default_factory=SnapshotRetention)
    instances: list[CreateSnapshotInstance] = field(default_factory=list)

    def to_dict(self) -> dict:
        payload: dict = {"name": self.name}
        if self.description:
            payload["description"] = self.description
        payload["cron_expression"] = self.cron_expression
        payload["retention"] = self.retention.to_dict()
        payload["instances"] = [instance.to_dict() for instance in self.instances]
        return payload


@dataclass
class UpdateSnapshotScheduleRequest:
    """Changes to a schedule; empty or false values are left out."""

    name: str = ""
    description: str = ""
    paused: bool = False

    def to_dict(self) -> dict:
        items = (("name", self.name), ("description", self.description), ("paused", self.paused))
        return {key: value for key, value in items if value}


class SnapshotSchedulesAPI(APIClient):
    """Snapshot schedule calls."""

    def create_snapshot_schedule(self, request: CreateSnapshotScheduleRequest) -> SnapshotSchedule:
        """Create a snapshot schedule."""
        body = self.send_post_request("/v2/resourcesnapshotschedules", request)
        return SnapshotSchedule.from_dict(self._decode_object(body))

    def list_snapshot_schedules(self) -> list[SnapshotSchedule]:
        """Return every snapshot schedule."""
        body = self.send_get_request("/v2/resourcesnapshotschedules")
        return [SnapshotSchedule.from_dict(item) for item in self._decode_list(body)]

    def find_snapshot_schedule(self, search: str) -> SnapshotSchedule:
        """Find a schedule by part of its ID or name."""
        return find_match(self.list_snapshot_schedules(), search, ("name", "id"))

    def get_snapshot_schedule(self, schedule_id: str) -> SnapshotSchedule:
        """Return one schedule by ID."""
        body = self.send_get_request(f"/v2/resourcesnapshotschedules/{schedule_id}")
        return SnapshotSchedule.from_dict(self._decode_object(body))

    def delete_snapshot_schedule(self, schedule_id: str) -> SimpleResponse:
        """Delete a schedule."""
        body = self.send_delete_request(f"/v2/resourcesnapshotschedules/{schedule_id}")
        return self.decode_simple_response(body)

    def update_snapshot_schedule(
        self, schedule_id: str, request: UpdateSnapshotScheduleRequest
    ) -> SnapshotSchedule:
        """Update a schedule."""
        body = self.send_put_request(f"/v2/resourcesnapshotschedules/{schedule_id}", request)
        return SnapshotSchedule.from_dict(self._decode_object(body))