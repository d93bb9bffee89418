"""
Run contexts handed to actions and triggers by the host.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

import httpx

from easiware_piece.integrations.easiware import EasiwareAuth, EasiwareClient, WebhookPayload
from .store import InMemoryStore, Store


@dataclass
class ActionContext:
    """Everything a single action invocation may touch."""
    auth: EasiwareAuth
    props_value: Dict[str, Any] = field(default_factory=dict)
    store: Store = field(default_factory=InMemoryStore)
    # Lets hosts and tests swap the network layer
    transport: Optional[httpx.AsyncBaseTransport] = None

    def client(self) -> EasiwareClient:
        return EasiwareClient(self.auth, transport=self.transport)


@dataclass
class TriggerContext(ActionContext):
    """Action context plus the webhook endpoint and the delivered payload."""
    webhook_url: str = ""
    payload: WebhookPayload = field(default_factory=WebhookPayload)
