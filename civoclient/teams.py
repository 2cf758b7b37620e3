"""Teams of users and their members."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from .api import APIClient, SimpleResponse, _parse_time, _scalar_kwargs, find_match

_TIMES = ("created_at", "updated_at")


@dataclass
class Team:
    """A named group of users."""

    id: str = ""
    name: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_dict(cls, data: dict) -> "Team":
        kwargs = _scalar_kwargs(cls, data, skip=_TIMES)
        return cls(
            created_at=_parse_time(data.get("created_at")),
            updated_at=_parse_time(data.get("updated_at")),
            **kwargs,
        )


@dataclass
class TeamMember:
    """The link between a user and a team."""

    id: str = ""
    team_id: str = ""
    user_id: str = ""
    permissions: str = ""
    roles: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_dict(cls, data: dict) -> "TeamMember":
        kwargs = _scalar_kwargs(cls, data, skip=_TIMES)
        return cls(
            created_at=_parse_time(data.get("created_at")),
            updated_at=_parse_time(data.get("updated_at")),
            **kwargs,
        )


class TeamsAPI(APIClient):
    """Team and team member calls."""

    def list_teams(self) -> list[Team]:
        """Return every team of the account."""
        body = self.send_get_request("/v2/teams")
        return [Team.from_dict(item) for item in self._decode_list(body)]

    def create_team(self, name: str) -> Team:
        """Create a team."""
        body = self.send_post_request("/v2/teams", {"name": name})
        return Team.from_dict(self._decode_object(body))

    def find_team(self, search: str) -> Team:
        """Find a team by part of its ID or name."""
        return find_match(self.list_teams(), search, ("name", "id"), label="team")

    def rename_team(self, team_id: str, name: str) -> Team:
        """Change the name of a team."""
        body = self.send_put_request("/v2/teams/" + team_id, {"name": name})
        return Team.from_dict(self._decode_object(body))

    def delete_team(self, team_id: str) -> SimpleResponse:
        """Remove a team and all of its members' access."""
        return self.decode_simple_response(self.send_delete_request("/v2/teams/" + team_id))

    def list_team_members(self, team_id: str) -> list[TeamMember]:
        """Return the members of a team with their permissions."""
        body = self.send_get_request("/v2/teams/" + team_id + "/members")
        return [TeamMember.from_dict(item) for item in self._decode_list(body)]

    def add_team_member(
        self, team_id: str, user_id: str, permissions: str, roles: str
    ) -> list[TeamMember]:
        """Add a user to a team and return the team's members."""
        self.send_post_request(
            "/v2/teams/" + team_id + "/members",
            {"user_id": user_id, "permissions": permissions, "roles": roles},
        )
        return self.list_team_members(team_id)

    def update_team_member(
        self, team_id: str, team_member_id: str, permissions: str, roles: str
    ) -> TeamMember:
        """Change the permissions or roles of a team member."""
        body = self.send_post_request(
            "/v2/teams/" + team_id + "/members/" + team_member_id,
            {"permissions": permissions, "roles": roles},
        )
        return TeamMember.from_dict(self._decode_object(body))

    def remove_team_member(self, team_id: str, team_member_id: str) -> SimpleResponse:
        """Remove a member from a team."""
        body = self.send_delete_request("/v2/teams/" + team_id + "/members/" + team_member_id)
        return self.decode_simple_response(body)