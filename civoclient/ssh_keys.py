"""SSH public keys uploaded for access to instances."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from .api import APIClient, SimpleResponse, _parse_time, _scalar_kwargs, find_match


@dataclass
class SSHKey:
    """An uploaded SSH public key."""

    id: str = ""
    name: str = ""
    fingerprint: str = ""
    public_key: str = ""
    created_at: datetime | None = None

    @classmethod
    def from_dict(cls, data: dict) -> "SSHKey":
        kwargs = _scalar_kwargs(cls, data, skip=("created_at",))
        return cls(created_at=_parse_time(data.get("created_at")), **kwargs)


class SSHKeysAPI(APIClient):
    """SSH key calls."""

    def list_ssh_keys(self) -> list[SSHKey]:
        """Return every SSH key of the account."""
        body = self.send_get_request("/v2/sshkeys")
        return [SSHKey.from_dict(item) for item in self._decode_list(body)]

    def new_ssh_key(self, name: str, public_key: str) -> SimpleResponse:
        """Upload a new SSH key."""
        body = self.send_post_request("/v2/sshkeys", {"name": name, "public_key": public_key})
        return self.decode_simple_response(body)

    def update_ssh_key(self, name: str, ssh_key_id: str) -> SSHKey:
        """Rename an SSH key."""
        body = self.send_put_request(f"/v2/sshkeys/{ssh_key_id}", {"name": name})
        return SSHKey.from_dict(self._decode_object(body))

    def find_ssh_key(self, search: str) -> SSHKey:
        """Find an SSH key by part of its ID or name."""
        return find_match(self.list_ssh_keys(), search, ("name", "id"))

    def delete_ssh_key(self, key_id: str) -> SimpleResponse:
        """Delete an SSH key."""
        return self.decode_simple_response(self.send_delete_request(f"/v2/sshkeys/{key_id}"))