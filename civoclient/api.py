"""HTTP plumbing, error types and account quota for the Civo API."""

from __future__ import annotations

import json
import re
from dataclasses import MISSING, asdict, dataclass, fields, is_dataclass
from datetime import datetime
from typing import Any, Callable, Iterable, Sequence, TypeVar, Union

import requests

DEFAULT_BASE_URL = "https://api.civo.com"
DEFAULT_TIMEOUT = 30.0

T = TypeVar("T")
FieldSpec = Union[str, Callable[[Any], Any]]


class CivoError(Exception):
    """Raised when a request fails or a response cannot be understood."""

    prefix = ""

    def __init__(self, message: str, status_code: int | None = None, body: bytes = b"") -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.body = body

    def __str__(self) -> str:
        return f"{self.prefix}: {self.message}" if self.prefix else self.message


class MultipleMatchesError(CivoError):
    """A search matched more than one resource."""

    prefix = "MultipleMatchesError"


class ZeroMatchesError(CivoError):
    """A search matched no resource at all."""

    prefix = "ZeroMatchesError"


_FRACTION = re.compile(r"\.(\d+)")


def _parse_time(value: Any) -> datetime | None:
    """Parse an RFC 3339 timestamp; empty values give None."""
    if not value:
        return None
    text = str(value).strip()
    if text[-1:] in ("Z", "z"):
        text = text[:-1] + "+00:00"
    text = _FRACTION.sub(lambda m: "." + (m.group(1) + "000000")[:6], text, count=1)
    try:
        return datetime.fromisoformat(text)
    except ValueError as exc:
        raise CivoError(f"invalid timestamp {value!r}") from exc


def _value(data: dict, key: str, default: Any) -> Any:
    found = data.get(key)
    return default if found is None else found


def _scalar_kwargs(cls: type, data: dict, skip: Iterable[str] = ()) -> dict[str, Any]:
    """Pick the dataclass fields of ``cls`` out of ``data``, falling back to defaults."""
    skipped = set(skip)
    kwargs: dict[str, Any] = {}
    for f in fields(cls):
        if f.name in skipped:
            continue
        if f.default is not MISSING:
            default = f.default
        elif f.default_factory is not MISSING:
            default = f.default_factory()
        else:
            default = None
        kwargs[f.name] = _value(data, f.name, default)
    return kwargs


def _to_payload(data: Any) -> Any:
    if hasattr(data, "to_dict"):
        return data.to_dict()
    if is_dataclass(data) and not isinstance(data, type):
        return asdict(data)
    return data


def _getter(spec: FieldSpec) -> Callable[[Any], Any]:
    if isinstance(spec, str):
        return lambda item: getattr(item, spec)
    return spec


def find_match(
    items: Iterable[T],
    search: str,
    fields: Sequence[FieldSpec],
    label: str = "",
) -> T:
    """Find one item whose fields equal ``search``, or a single one containing it.

    An exact match always wins. Several partial matches raise
    MultipleMatchesError, none at all raise ZeroMatchesError.
    """
    getters = [_getter(spec) for spec in fields]
    exact_found = False
    exact: T | None = None
    partial: list[T] = []
    for item in items:
        values = [str(getter(item)) for getter in getters]
        if search in values:
            exact_found = True
            exact = item
        elif not exact_found and any(search in value for value in values):
            partial.append(item)

    if exact_found:
        return exact  # type: ignore[return-value]
    if len(partial) == 1:
        return partial[0]
    subject = f"{search} {label}" if label else search
    if partial:
        raise MultipleMatchesError(f"unable to find {subject} because there were multiple matches")
    raise ZeroMatchesError(f"unable to find {subject}, zero matches")


@dataclass
class SimpleResponse:
    """The short result document returned by many API calls."""

    id: str = ""
    result: str = ""

    @classmethod
    def from_dict(cls, data: dict) -> "SimpleResponse":
        return cls(**_scalar_kwargs(cls, data))


@dataclass
class Quota:
    """Limits and current usage of an account."""

    id: str = ""
    default_user_id: str = ""
    default_user_email_address: str = ""
    instance_count_limit: int = 0
    instance_count_usage: int = 0
    cpu_core_limit: int = 0
    cpu_core_usage: int = 0
    ram_mb_limit: int = 0
    ram_mb_usage: int = 0
    disk_gb_limit: int = 0
    disk_gb_usage: int = 0
    disk_volume_count_limit: int = 0
    disk_volume_count_usage: int = 0
    disk_snapshot_count_limit: int = 0
    disk_snapshot_count_usage: int = 0
    public_ip_address_limit: int = 0
    public_ip_address_usage: int = 0
    subnet_count_limit: int = 0
    subnet_count_usage: int = 0
    network_count_limit: int = 0
    network_count_usage: int = 0
    security_group_limit: int = 0
    security_group_usage: int = 0
    security_group_rule_limit: int = 0
    security_group_rule_usage: int = 0
    port_count_limit: int = 0
    port_count_usage: int = 0
    loadbalancer_count_limit: int = 0
    loadbalancer_count_usage: int = 0
    objectstore_gb_limit: int = 0
    objectstore_gb_usage: int = 0
    database_count_limit: int = 0
    database_count_usage: int = 0
    database_snapshot_count_limit: int = 0
    database_snapshot_count_usage: int = 0
    database_cpu_core_limit: int = 0
    database_cpu_core_usage: int = 0
    database_ram_mb_limit: int = 0
    database_ram_mb_usage: int = 0
    database_disk_gb_limit: int = 0
    database_disk_gb_usage: int = 0

    @classmethod
    def from_dict(cls, data: dict) -> "Quota":
        return cls(**_scalar_kwargs(cls, data))


class APIClient:
    """Authenticated access to the API, scoped to one region."""

    timeout = DEFAULT_TIMEOUT

    def __init__(self, api_key: str, region: str = "", base_url: str = DEFAULT_BASE_URL) -> None:
        self.api_key = api_key
        self.region = region
        self.base_url = base_url.rstrip("/")
        self._session = requests.Session()
        self._session.headers.update(
            {"Authorization": f"bearer {api_key}", "Accept": "application/json"}
        )

    def __enter__(self) -> "APIClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self._session.close()

    def _request(self, method: str, path: str, data: Any = None) -> bytes:
        params = {"region": self.region} if self.region else None
        payload = None if data is None else _to_payload(data)
        try:
            response = self._session.request(
                method, self.base_url + path, params=params, json=payload, timeout=self.timeout
            )
        except requests.RequestException as exc:
            raise CivoError(f"{method} {path} failed: {exc}") from exc
        if response.status_code >= 400:
            raise CivoError(
                f"{method} {path} returned {response.status_code}: {response.text}",
                status_code=response.status_code,
                body=response.content,
            )
        return response.content

    def _decode(self, body: bytes) -> Any:
        try:
            return json.loads(body)
        except ValueError as exc:
            raise CivoError(f"invalid JSON in response: {exc}", body=body) from exc

    def _decode_object(self, body: bytes) -> dict:
        data = self._decode(body)
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise CivoError("expected a JSON object in response", body=body)
        return data

    def _decode_list(self, body: bytes) -> list:
        data = self._decode(body)
        if data is None:
            return []
        if not isinstance(data, list):
            raise CivoError("expected a JSON array in response", body=body)
        return data

    def send_get_request(self, path: str) -> bytes:
        """Send a GET request and return the raw response body."""
        return self._request("GET", path)

    def send_post_request(self, path: str, data: Any) -> bytes:
        """Send a POST request with a JSON body and return the raw response body."""
        return self._request("POST", path, data)

    def send_put_request(self, path: str, data: Any) -> bytes:
        """Send a PUT request with a JSON body and return the raw response body."""
        return self._request("PUT", path, data)

    def send_delete_request(self, path: str) -> bytes:
        """Send a DELETE request and return the raw response body."""
        return self._request("DELETE", path)

    def decode_simple_response(self, body: bytes) -> SimpleResponse:
        """Decode a short result document."""
        return SimpleResponse.from_dict(self._decode_object(body))

    def get_quota(self) -> Quota:
        """Return the quota limits and usage of the account."""
        return Quota.from_dict(self._decode_object(self.send_get_request("/v2/quota")))