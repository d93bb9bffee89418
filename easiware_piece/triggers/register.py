"""
Webhook trigger factory.

Enabling a trigger subscribes a webhook on Easiware and keeps the returned
subscription in the host store; disabling detaches it again.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Union

from loguru import logger

from easiware_piece.framework import Property, TriggerContext, TriggerDefinition, TriggerStrategy
from easiware_piece.integrations.easiware import ApiRequest, EasiwareWebhookError, HttpMethod


@dataclass(frozen=True)
class FixedEventType:
    """Event type baked into the trigger definition."""
    value: str

    def props(self) -> Dict[str, Property]:
        return {}

    def resolve(self, props: Mapping[str, Any]) -> str:
        return self.value


@dataclass(frozen=True)
class SelectableEventType:
    """Event type picked by the user from a dropdown of value -> label choices."""
    label: str
    choices: Mapping[str, str]

    def props(self) -> Dict[str, Property]:
        return {
            "eventType": Property.static_dropdown(
                self.label,
                description="Choose the event type to listen for",
                options=self.choices,
                required=True,
            ),
        }

    def resolve(self, props: Mapping[str, Any]) -> str:
        return props["eventType"]


EventType = Union[FixedEventType, SelectableEventType]


def store_key(name: str) -> str:
    """Store key under which a trigger keeps its subscription."""
    return f"easiware_{name}_trigger"


def subscription_id(subscription: Any) -> Optional[str]:
    """Extract ``data.id`` from a stored subscription, if any."""
    if not isinstance(subscription, dict):
        return None
    data = subscription.get("data")
    if not isinstance(data, dict):
        return None
    return data.get("id") or None


def register_trigger(name: str,
                     display_name: str,
                     description: str,
                     event_type: EventType,
                     event_category: str,
                     sample_data: Any = None,
                     type: TriggerStrategy = TriggerStrategy.WEBHOOK) -> TriggerDefinition:
    """
    Build a webhook trigger for one Easiware event category.

    Args:
        name: Short trigger name, used for the host name and the store key
        display_name: Name shown to users
        description: Description shown to users
        event_type: Fixed event type or a selectable one
        event_category: Easiware resource class, e.g. "ticket" or "contact"
        sample_data: Example payload shown by the host
        type: Trigger strategy

    Returns:
        TriggerDefinition named ``easiware_trigger_<name>``
    """
    key = store_key(name)
    trigger_name = f"easiware_trigger_{name}"

    async def on_enable(context: TriggerContext, props: Dict[str, Any]) -> None:
        request = ApiRequest(
            method=HttpMethod.POST,
            path="/v1/webhooks",
            body={
                "url": context.webhook_url,
                "eventType": event_type.resolve(props),
                "category": event_category,
            },
            expected_status=None,
        )

        async with context.client() as client:
            response = await client.send(request)

        if not response.is_success:
            logger.error(f"Webhook subscription for {trigger_name} failed: {response.status}")
            raise EasiwareWebhookError(
                f"Failed to subscribe webhook for {trigger_name}",
                trigger_name=trigger_name,
                status_code=response.status,
                response=response.body,
            )

        await context.store.put(key, response.body)
        logger.info(f"Enabled {trigger_name}, subscription {subscription_id(response.body)}")

    async def on_disable(context: TriggerContext, props: Dict[str, Any]) -> None:
        webhook_id = subscription_id(await context.store.get(key))
        if not webhook_id:
            logger.info(f"No subscription stored for {trigger_name}, nothing to detach")
            return

        async with context.client() as client:
            response = await client.send(
                ApiRequest(
                    method=HttpMethod.POST,
                    path=f"/v1/webhooks/{webhook_id}/detach",
                    expected_status=None,
                )
            )

        if not response.is_success:
            logger.error(f"Detaching webhook {webhook_id} for {trigger_name} failed: {response.status}")
            raise EasiwareWebhookError(
                f"Failed to detach webhook {webhook_id}",
                trigger_name=trigger_name,
                status_code=response.status,
                response=response.body,
            )

        await context.store.delete(key)
        logger.info(f"Disabled {trigger_name}, detached subscription {webhook_id}")

    async def on_run(context: TriggerContext, props: Dict[str, Any]) -> List[Any]:
        return [context.payload.body]

    return TriggerDefinition(
        name=trigger_name,
        display_name=display_name,
        description=description,
        props=event_type.props(),
        type=type,
        sample_data=sample_data,
        on_enable=on_enable,
        on_disable=on_disable,
        on_run=on_run,
    )
