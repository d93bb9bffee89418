"""
Easiware webhook triggers.
"""

from .register import (
    EventType,
    FixedEventType,
    SelectableEventType,
    register_trigger,
    store_key,
    subscription_id,
)

TICKET_EVENT_CHOICES = {
    "create": "Ticket is Created",
    "note": "Note has changed",
    "subject": "Subject has changed",
    "status": "Status has changed",
    "category": "Category has changed",
    "priority": "Priority has changed",
    "agent": "Agent has changed",
    "currentChannel": "Current channel has changed",
    "contact": "Ticket has changed",
    "message": "New message has arrived",
    "solicitation": "Solicitation was sent",
    "delete": "Ticket was deleted",
    "restore": "Ticket was restored",
}


def _sample(event_class: str) -> dict:
    return {
        "class": event_class,
        "id": "61b3549b-0d5a-4555-b918-a090c149f2ea",
        "eventType": "create",
        "eventId": "78d67def-8073-4eda-8a1f-b19b5100e8bf",
    }


triggers = [
    register_trigger(
        name="ticket_created",
        display_name="Ticket Created",
        description="Triggered when a new ticket is created.",
        event_type=FixedEventType("create"),
        event_category="ticket",
        sample_data=_sample("ticket"),
    ),
    register_trigger(
        name="contact_created",
        display_name="Contact Created",
        description="Triggered when a new contact is created.",
        event_type=FixedEventType("create"),
        event_category="contact",
        sample_data=_sample("contact"),
    ),
    register_trigger(
        name="ticket_event",
        display_name="Ticket Event",
        description="Triggered when a new event is received for the ticket.",
        event_type=SelectableEventType("Select the Event Type", TICKET_EVENT_CHOICES),
        event_category="ticket",
        sample_data=_sample("ticket"),
    ),
]

__all__ = [
    "EventType",
    "FixedEventType",
    "SelectableEventType",
    "TICKET_EVENT_CHOICES",
    "register_trigger",
    "store_key",
    "subscription_id",
    "triggers",
]
