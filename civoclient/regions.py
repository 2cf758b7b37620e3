"""Regions: listing, lookup, creation and connection."""

from __future__ import annotations

from dataclasses import dataclass, field

from .api import APIClient, CivoError, _scalar_kwargs, find_match


@dataclass
class Feature:
    """The products available in a region."""

    iaas: bool = False
    kubernetes: bool = False
    object_store: bool = False
    loadbalancer: bool = False
    gpu: bool = False
    dbaas: bool = False
    volume: bool = False
    paas: bool = False
    kfaas: bool = False
    public_ip_node_pools: bool = False

    @classmethod
    def from_dict(cls, data: dict) -> "Feature":
        return cls(**_scalar_kwargs(cls, data))


@dataclass
class Region:
    """A geographical or data-centre region."""

    code: str = ""
    name: str = ""
    type: str = ""
    out_of_capacity: bool = False
    country: str = ""
    country_name: str = ""
    features: Feature = field(default_factory=Feature)
    default: bool = False

    @classmethod
    def from_dict(cls, data: dict) -> "Region":
        kwargs = _scalar_kwargs(cls, data, skip=("features",))
        return cls(features=Feature.from_dict(data.get("features") or {}), **kwargs)


@dataclass
class CreateRegionRequest:
    """The settings for a new region; kubeconfig is base64 encoded."""

    code: str
    country_iso_code: str
    private: bool = False
    account_ids: list[str] = field(default_factory=list)
    kubeconfig: str = ""
    compute_soft_deletion_hours: int | None = None
    features: dict[str, bool] | None = None

    def to_dict(self) -> dict:
        payload: dict = {"code": self.code, "country_iso_code": self.country_iso_code}
        if self.private:
            payload["private"] = True
        if self.account_ids:
            payload["account_ids"] = list(self.account_ids)
        payload["kubeconfig"] = self.kubeconfig
        payload["compute_soft_deletion_hours"] = self.compute_soft_deletion_hours
        payload["features"] = None if self.features is None else dict(self.features)
        return payload


@dataclass
class ConnectRegionRequest:
    """Names the region to connect."""

    code: str

    def to_dict(self) -> dict:
        return {"code": self.code}


@dataclass
class DisconnectRegionRequest:
    """Names the region to disconnect."""

    code: str

    def to_dict(self) -> dict:
        return {"code": self.code}


class RegionsAPI(APIClient):
    """Region calls."""

    def list_regions(self) -> list[Region]:
        """Return every region available to the account."""
        body = self.send_get_request("/v2/regions")
        return [Region.from_dict(item) for item in self._decode_list(body)]

    def find_region(self, search: str) -> Region:
        """Find a region by name or code, ignoring case."""
        return find_match(
            self.list_regions(),
            search.upper(),
            (lambda region: region.name.upper(), lambda region: region.code.upper()),
        )

    def get_default_region(self) -> Region:
        """Return the account's default region."""
        for region in self.list_regions():
            if region.default:
                return region
        raise CivoError("no default region found")

    def create_region(self, request: CreateRegionRequest) -> Region:
        """Create a region and return it."""
        body = self.send_post_request("/v2/regions", request)
        return Region.from_dict(self._decode_object(body))

    def connect_region(self, request: ConnectRegionRequest) -> None:
        """Connect a region to the API."""
        self.send_post_request("/v2/regions/connect", request)

    def disconnect_region(self, request: DisconnectRegionRequest) -> None:
        """Disconnect a region from the API."""
        self.send_post_request("/v2/regions/disconnect", request)