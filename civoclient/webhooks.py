"""Webhook callbacks for changes in the account."""

from __future__ import annotations

from dataclasses import dataclass, field

from .api import APIClient, SimpleResponse, _scalar_kwargs, find_match


@dataclass
class Webhook:
    """A saved webhook callback."""

    id: str = ""
    events: list[str] = field(default_factory=list)
    url: str = ""
    secret: str = ""
    disabled: bool = False
    failures: int = 0
    last_failure_reason: str = ""

    @classmethod
    def from_dict(cls, data: dict) -> "Webhook":
        kwargs = _scalar_kwargs(cls, data, skip=("events",))
        return cls(events=list(data.get("events") or []), **kwargs)


@dataclass
class WebhookConfig:
    """The settings for creating or updating a webhook."""

    events: list[str] = field(default_factory=list)
    url: str = ""
    secret: str = ""

    def to_dict(self) -> dict:
        return {"events": list(self.events), "url": self.url, "secret": self.secret}


class WebhooksAPI(APIClient):
    """Webhook calls."""

    def create_webhook(self, config: WebhookConfig) -> Webhook:
        """Create a webhook."""
        body = self.send_post_request("/v2/webhooks", config)
        return Webhook.from_dict(self._decode_object(body))

    def list_webhooks(self) -> list[Webhook]:
        """Return every webhook of the account."""
        body = self.send_get_request("/v2/webhooks")
        return [Webhook.from_dict(item) for item in self._decode_list(body)]

    def find_webhook(self, search: str) -> Webhook:
        """Find a webhook by part of its ID or URL."""
        return find_match(self.list_webhooks(), search, ("url", "id"))

    def update_webhook(self, webhook_id: str, config: WebhookConfig) -> Webhook:
        """Update a webhook."""
        body = self.send_put_request(f"/v2/webhooks/{webhook_id}", config)
        return Webhook.from_dict(self._decode_object(body))

    def delete_webhook(self, webhook_id: str) -> SimpleResponse:
        """Delete a webhook."""
        return self.decode_simple_response(self.send_delete_request(f"/v2/webhooks/{webhook_id}"))