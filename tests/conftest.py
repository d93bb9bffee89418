"""
Pytest configuration and shared fixtures for the Easiware piece tests.
"""

import json
from typing import Any, Dict, List, Optional

import httpx
import pytest

from easiware_piece.framework import ActionContext, InMemoryStore, TriggerContext
from easiware_piece.integrations.easiware import EasiwareAuth, WebhookPayload


class FakeEasiwareApi:
    """Records outgoing requests and answers each with a canned response."""

    def __init__(self, status_code: int = 200, json_body: Any = None):
        self.status_code = status_code
        self.json_body = json_body
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, json=self.json_body)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        content = self.last_request.content
        return json.loads(content) if content else None


@pytest.fixture
def auth() -> EasiwareAuth:
    """Credentials with a trailing slash on the base URL."""
    return EasiwareAuth(app_url="https://x.test/", api_key="test-key")


@pytest.fixture
def fake_api() -> FakeEasiwareApi:
    """Fake Easiware API answering 200 with an empty object."""
    return FakeEasiwareApi(status_code=200, json_body={})


@pytest.fixture
def store() -> InMemoryStore:
    """Empty host store."""
    return InMemoryStore()


@pytest.fixture
def make_context(auth, fake_api, store):
    """Factory for action contexts wired to the fake API."""

    def _make(props: Optional[Dict[str, Any]] = None) -> ActionContext:
        return ActionContext(
            auth=auth,
            props_value=props or {},
            store=store,
            transport=fake_api.transport,
        )

    return _make


@pytest.fixture
def make_trigger_context(auth, fake_api, store):
    """Factory for trigger contexts wired to the fake API."""

    def _make(props: Optional[Dict[str, Any]] = None, payload_body: Any = None) -> TriggerContext:
        return TriggerContext(
            auth=auth,
            props_value=props or {},
            store=store,
            transport=fake_api.transport,
            webhook_url="https://host.test/webhooks/abc",
            payload=WebhookPayload(body=payload_body),
        )

    return _make
