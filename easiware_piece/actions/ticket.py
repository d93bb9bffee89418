"""
Ticket, ticket message, ticket event and ticket custom field actions.
"""

from typing import Any, Dict

from easiware_piece.framework import Property, create_action
from easiware_piece.integrations.easiware import ApiRequest, HttpMethod
from easiware_piece.integrations.easiware.request_builder import (
    build_query,
    compact,
    csv_fields,
    split_csv,
)
from .options import (
    BOOLEAN_STRING_OPTIONS,
    TICKET_EVENT_TYPES,
    TICKET_PRIORITY_OPTIONS,
    TICKET_SOURCE_OPTIONS,
    TICKET_STATUS_OPTIONS,
)


def _date_filters() -> Dict[str, Property]:
    return {
        "createdAfter": Property.short_text(
            "Created after",
            description="ISO-8601 date-time (e.g. 2025-05-01T00:00:00Z).",
        ),
        "createdBefore": Property.short_text("Created before", description="ISO-8601 date-time."),
        "updatedAfter": Property.short_text("Updated after", description="ISO-8601 date-time."),
        "updatedBefore": Property.short_text("Updated before", description="ISO-8601 date-time."),
    }


def _custom_fields(description: str) -> Property:
    return Property.json_object("Custom fields (JSON)", description=description, default_value={})


@create_action(
    name="get_ticket_from_id",
    display_name="Get a Ticket",
    description="Retrieve a ticket by its ID.",
    group="ticket",
    props={
        "ticketId": Property.short_text("Ticket ID", description="The ID number of the ticket", required=True),
    },
)
def get_ticket_from_id(props: Dict[str, Any]) -> ApiRequest:
    return ApiRequest(method=HttpMethod.GET, path=f"/v1/tickets/{props['ticketId']}")


SEARCH_TICKETS_CSV_FIELDS = ["contactId", "agentId", "categoryId", "originalRecipientEmailAddress"]


# Not registered on the piece; find_tickets_body covers the same filters through a POST body.
@create_action(
    name="search_tickets",
    display_name="Search Tickets",
    description="Search your organization's tickets with all available filters.",
    group="ticket",
    props={
        "search": Property.short_text(
            "Free text",
            description="Full-text search on subject, messages and contact fields.",
        ),
        "contactId": Property.short_text("Contact IDs", description="Comma-separated list of contact IDs."),
        "agentId": Property.short_text("Agent IDs", description="Comma-separated list of agent IDs."),
        "categoryId": Property.short_text("Category IDs", description="Comma-separated list of category IDs."),
        "originalRecipientEmailAddress": Property.short_text(
            "Original recipient emails",
            description="Filter email tickets by the original \"To:\" address.",
        ),
        "status": Property.static_multi_select_dropdown(
            "Status",
            description="Ticket status: new, in_progress, waiting, closed.",
            options=TICKET_STATUS_OPTIONS,
        ),
        "priority": Property.static_multi_select_dropdown(
            "Priority",
            description="Ticket priority: low, medium, high.",
            options=TICKET_PRIORITY_OPTIONS,
        ),
        "source": Property.static_multi_select_dropdown(
            "Source",
            description="Channel that created the ticket.",
            options=TICKET_SOURCE_OPTIONS,
        ),
        "deleted": Property.static_dropdown(
            "Include deleted tickets",
            description="true = include soft-deleted tickets.",
            options=BOOLEAN_STRING_OPTIONS,
        ),
        "unassigned": Property.static_dropdown(
            "Only unassigned",
            description="true = tickets with no agent assigned.",
            options=BOOLEAN_STRING_OPTIONS,
        ),
        **_date_filters(),
        "customFieldsValues": _custom_fields(
            "Key-value filters on custom ticket fields (must exist beforehand)."
        ),
    },
)
def search_tickets(props: Dict[str, Any]) -> ApiRequest:
    values = dict(props)
    for key in SEARCH_TICKETS_CSV_FIELDS:
        values[key] = split_csv(props.get(key))

    return ApiRequest(method=HttpMethod.GET, path="/v1/tickets", params=build_query(values))


CREATE_TICKET_FIELDS = [
    "source",
    "subject",
    "status",
    "priority",
    "contactId",
    "agentId",
    "categoryId",
    "originalRecipientEmailAddress",
    "customFieldsValues",
]


@create_action(
    name="create_ticket",
    display_name="Create Ticket",
    description="Create a new ticket in Easiware.",
    group="ticket",
    props={
        "source": Property.static_dropdown(
            "Source*",
            description="Channel that originated the ticket.",
            options=TICKET_SOURCE_OPTIONS,
            required=True,
        ),
        "subject": Property.short_text("Subject", description="Ticket title or subject line."),
        "status": Property.static_dropdown(
            "Status",
            description="Initial workflow status of the ticket.",
            options=TICKET_STATUS_OPTIONS,
        ),
        "priority": Property.static_dropdown(
            "Priority",
            description="Initial importance level of the ticket.",
            options=TICKET_PRIORITY_OPTIONS,
        ),
        "contactId": Property.short_text("Contact ID", description="Identifier of the contact linked to the ticket."),
        "agentId": Property.short_text(
            "Agent ID",
            description="Identifier of the agent assigned to the ticket (optional).",
        ),
        "categoryId": Property.short_text(
            "Category ID",
            description="Identifier of the category assigned to the ticket.",
        ),
        "originalRecipientEmailAddress": Property.short_text(
            "Original recipient (email)",
            description="Original \"To\" address when the source is Email.",
        ),
        "customFieldsValues": _custom_fields(
            "Key-value map of custom field values. The fields must exist in Easiware beforehand."
        ),
    },
)
def create_ticket(props: Dict[str, Any]) -> ApiRequest:
    return ApiRequest(
        method=HttpMethod.POST,
        path="/v1/tickets",
        body=compact(props, CREATE_TICKET_FIELDS, always=["source"]),
        expected_status=201,
    )


UPDATE_TICKET_FIELDS = ["subject", "status", "priority", "contactId", "categoryId", "customFieldsValues"]


@create_action(
    name="update_ticket",
    display_name="Update Ticket",
    description="Partially update an existing ticket.",
    group="ticket",
    props={
        "ticketId": Property.short_text(
            "Ticket ID",
            description="Unique identifier of the ticket to update.",
            required=True,
        ),
        "subject": Property.short_text(
            "Subject",
            description="New subject of the ticket (leave empty to keep current one).",
        ),
        "status": Property.static_dropdown(
            "Status",
            description="Lifecycle status to set for the ticket.",
            options=TICKET_STATUS_OPTIONS,
        ),
        "priority": Property.static_dropdown(
            "Priority",
            description="Priority level to apply.",
            options=TICKET_PRIORITY_OPTIONS,
        ),
        "contactId": Property.short_text("Contact ID", description="Identifier of the contact linked to the ticket."),
        "categoryId": Property.short_text(
            "Category ID",
            description="Identifier of the category (folder) in which the ticket is filed.",
        ),
        "customFieldsValues": _custom_fields(
            "Key-value map of custom field identifiers and their new values."
        ),
    },
)
def update_ticket(props: Dict[str, Any]) -> ApiRequest:
    return ApiRequest(
        method=HttpMethod.PATCH,
        path=f"/v1/tickets/{props['ticketId']}",
        body=compact(props, UPDATE_TICKET_FIELDS),
    )


@create_action(
    name="get_ticket_messages",
    display_name="Get Ticket Messages",
    description="Retrieve every message (emails, chats, notes, etc.) that belongs to a ticket by its Easiware ID.",
    group="ticket",
    props={
        "ticketId": Property.short_text(
            "Ticket ID",
            description="The Easiware internal identifier of the ticket whose message history you wish to fetch.",
            required=True,
        ),
    },
)
def get_ticket_messages(props: Dict[str, Any]) -> ApiRequest:
    return ApiRequest(method=HttpMethod.GET, path=f"/v1/tickets/{props['ticketId']}/messages")


MESSAGE_FIELDS = ["source", "subject", "content", "contentHtml", "agentId", "originalRecipientEmailAddress"]


@create_action(
    name="add_ticket_message",
    display_name="Add Ticket Message",
    description="Append a new message to the specified ticket.",
    group="ticket",
    props={
        "ticketId": Property.short_text(
            "Ticket ID",
            description="Easiware internal identifier of the ticket that will receive the message.",
            required=True,
        ),
        "source": Property.static_dropdown(
            "Source*",
            description="Channel used to send the message, required by the API.",
            options=TICKET_SOURCE_OPTIONS,
            required=True,
        ),
        "subject": Property.short_text(
            "Subject",
            description="Optional subject of the message (mostly for email-like channels).",
        ),
        "content": Property.long_text(
            "Content (Plain-text)*",
            description="Plain-text body of the message.",
            required=True,
        ),
        "contentHtml": Property.long_text(
            "Content (HTML)",
            description="Rich-text/HTML version of the message. The API sanitises it to avoid XSS.",
        ),
        "agentId": Property.short_text(
            "Agent ID",
            description="Identifier of the agent author. Leave empty to mark the message as coming from the ticket's contact.",
        ),
        "originalRecipientEmailAddress": Property.short_text(
            "Original recipient (Email channel)",
            description="The original \"To\" email address, useful when a ticket aggregates several aliases.",
        ),
    },
)
def add_ticket_message(props: Dict[str, Any]) -> ApiRequest:
    return ApiRequest(
        method=HttpMethod.POST,
        path=f"/v1/tickets/{props['ticketId']}/messages",
        body=compact(props, MESSAGE_FIELDS, always=["source", "content"]),
        expected_status=201,
    )


@create_action(
    name="search_ticket_events",
    display_name="Search Ticket Events",
    description="Retrieve ticket-history events (creation, notes, status changes, messages, etc.)",
    group="ticket",
    props={
        "createdAfter": Property.short_text(
            "Created After (ISO-8601)",
            description="Return only events strictly after this date/time (ISO-8601), e.g. 2025-05-01T00:00:00Z.",
        ),
        "createdBefore": Property.short_text(
            "Created Before (ISO-8601)",
            description="Return only events strictly before this date/time (ISO-8601), e.g. 2025-05-31T23:59:59Z.",
        ),
        "type": Property.static_multi_select_dropdown(
            "Event Type(s)",
            description="Filter on one or several event categories. If left empty, all types are returned.",
            options={event_type: event_type for event_type in TICKET_EVENT_TYPES},
        ),
        "ticketId": Property.short_text(
            "Ticket ID",
            description="Restrict the search to a single ticket's timeline (Easiware internal ticket identifier).",
        ),
    },
)
def search_ticket_events(props: Dict[str, Any]) -> ApiRequest:
    return ApiRequest(method=HttpMethod.GET, path="/v1/ticket-events", params=build_query(props))


@create_action(
    name="get_ticket_event_from_id",
    display_name="Get Ticket Event",
    description="Retrieve a single ticket event using its Easiware ID.",
    group="ticket",
    props={
        "eventId": Property.short_text(
            "Ticket Event ID",
            description="The Easiware internal identifier of the ticket event (value of the id field).",
            required=True,
        ),
    },
)
def get_ticket_event_from_id(props: Dict[str, Any]) -> ApiRequest:
    return ApiRequest(method=HttpMethod.GET, path=f"/v1/ticket-events/{props['eventId']}")


@create_action(
    name="list_ticket_custom_fields",
    display_name="List Ticket Custom Fields",
    description="Return the definitions of all custom fields configured for tickets.",
    group="ticket",
    props={
        "search": Property.short_text(
            "Search term",
            description="Text to match in the custom-field label or customId. "
                        "Minimum one character; use \"*\" to list every field.",
            required=True,
            default_value="*",
        ),
    },
)
def list_ticket_custom_fields(props: Dict[str, Any]) -> ApiRequest:
    return ApiRequest(
        method=HttpMethod.GET,
        path="/v1/ticket-custom-fields",
        params=[("search", props["search"])],
    )


@create_action(
    name="get_ticket_custom_field_choices",
    display_name="Get Ticket Custom-Field Choices",
    description="Return the list of choices defined for a ticket custom-field of type one or multiple.",
    group="ticket",
    props={
        "customId": Property.short_text(
            "Custom Field ID",
            description="The customId of the ticket custom-field whose choices you want to retrieve.",
            required=True,
        ),
    },
)
def get_ticket_custom_field_choices(props: Dict[str, Any]) -> ApiRequest:
    return ApiRequest(
        method=HttpMethod.GET,
        path=f"/v1/ticket-custom-fields/{props['customId']}/choices",
    )


# Plural prop names carry comma-separated lists; the API wants arrays under the singular key
FIND_TICKETS_CSV_FIELDS = {
    "contactIds": "contactId",
    "agentIds": "agentId",
    "categoryIds": "categoryId",
    "originalRecipientEmailAddresses": "originalRecipientEmailAddress",
}

FIND_TICKETS_FILTERS = [
    "status",
    "priority",
    "source",
    "createdAfter",
    "createdBefore",
    "updatedAfter",
    "updatedBefore",
    "customFieldsValues",
]


@create_action(
    name="find_tickets_body",
    display_name="Find Tickets (POST body)",
    description="Search your organisation's tickets using all available filters. "
                "The request is sent in the body, mirroring the parameters of GET /tickets.",
    group="ticket",
    props={
        "search": Property.short_text(
            "Free-text search",
            description="Matches subject, contact names, email addresses, etc.",
        ),
        "deleted": Property.checkbox(
            "Include deleted tickets",
            description="When enabled, soft-deleted tickets are returned as well.",
            default_value=False,
        ),
        "unassigned": Property.checkbox(
            "Only unassigned tickets",
            description="Return tickets that have no agent assigned (agentId is null).",
            default_value=False,
        ),
        "contactIds": Property.short_text("Contact IDs", description="Comma-separated list of contact identifiers."),
        "agentIds": Property.short_text("Agent IDs", description="Comma-separated list of agent identifiers."),
        "categoryIds": Property.short_text(
            "Category IDs",
            description="Comma-separated list of category identifiers.",
        ),
        "originalRecipientEmailAddresses": Property.long_text(
            "Original recipient addresses",
            description="Comma-separated list of \"To:\" addresses (mainly useful for the email channel).",
        ),
        "status": Property.static_multi_select_dropdown("Status", options=TICKET_STATUS_OPTIONS),
        "priority": Property.static_multi_select_dropdown("Priority", options=TICKET_PRIORITY_OPTIONS),
        "source": Property.static_multi_select_dropdown("Source", options=TICKET_SOURCE_OPTIONS),
        **_date_filters(),
        "customFieldsValues": _custom_fields(
            "Key/value object for custom fields (must match the custom field definitions configured in Easiware)."
        ),
    },
)
def find_tickets_body(props: Dict[str, Any]) -> ApiRequest:
    body: Dict[str, Any] = compact(props, ["search"])
    # Flags are only sent when switched on
    if props.get("deleted"):
        body["deleted"] = True
    if props.get("unassigned"):
        body["unassigned"] = True
    body.update(csv_fields(props, FIND_TICKETS_CSV_FIELDS))
    body.update(compact(props, FIND_TICKETS_FILTERS))

    return ApiRequest(method=HttpMethod.POST, path="/v1/tickets/find", body=body, expected_status=201)


ticket_actions = [
    get_ticket_from_id,
    create_ticket,
    update_ticket,
    get_ticket_messages,
    add_ticket_message,
    search_ticket_events,
    get_ticket_event_from_id,
    list_ticket_custom_fields,
    get_ticket_custom_field_choices,
    find_tickets_body,
]
