"""Roles: named sets of permissions."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from .api import APIClient, SimpleResponse, _parse_time, _scalar_kwargs


@dataclass
class Role:
    """A set of permissions, built in or user defined."""

    id: str = ""
    name: str = ""
    permissions: str = ""
    built_in: bool = False
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_dict(cls, data: dict) -> "Role":
        kwargs = _scalar_kwargs(cls, data, skip=("created_at", "updated_at"))
        return cls(
            created_at=_parse_time(data.get("created_at")),
            updated_at=_parse_time(data.get("updated_at")),
            **kwargs,
        )


class RolesAPI(APIClient):
    """Role calls."""

    def list_roles(self) -> list[Role]:
        """Return all roles, built in and user defined."""
        body = self.send_get_request("/v2/roles")
        return [Role.from_dict(item) for item in self._decode_list(body)]

    def create_role(self, name: str, permissions: str) -> Role:
        """Create a role with the given permissions."""
        body = self.send_post_request("/v2/roles", {"name": name, "permissions": permissions})
        return Role.from_dict(self._decode_object(body))

    def delete_role(self, role_id: str) -> SimpleResponse:
        """Remove a role that is not built in."""
        return self.decode_simple_response(self.send_delete_request("/v2/roles/" + role_id))