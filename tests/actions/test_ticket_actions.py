"""
Tests for the ticket actions.
"""

import pytest

from easiware_piece.actions.ticket import (
    add_ticket_message,
    create_ticket,
    find_tickets_body,
    get_ticket_custom_field_choices,
    get_ticket_event_from_id,
    get_ticket_from_id,
    get_ticket_messages,
    list_ticket_custom_fields,
    search_ticket_events,
    search_tickets,
    update_ticket,
)
from easiware_piece.integrations.easiware import HttpMethod, HttpResponse
from easiware_piece.utils.exceptions import PropValidationError


class TestTicketRequests:
    """Test the requests built by ticket actions."""

    def test_get_ticket_from_id(self):
        request = get_ticket_from_id.build_request({"ticketId": "t-1"})
        assert request.path == "/v1/tickets/t-1"

    def test_create_ticket_minimal_body(self):
        request = create_ticket.build_request({"source": "email"})

        assert request.method == HttpMethod.POST
        assert request.path == "/v1/tickets"
        assert request.body == {"source": "email"}
        assert request.expected_status == 201

    def test_create_ticket_requires_source(self):
        with pytest.raises(PropValidationError) as exc_info:
            create_ticket.build_request({"subject": "Broken parcel"})
        assert exc_info.value.prop == "source"

    def test_create_ticket_rejects_unknown_priority(self):
        with pytest.raises(PropValidationError):
            create_ticket.build_request({"source": "email", "priority": "urgent"})

    def test_create_ticket_full_body_order(self):
        request = create_ticket.build_request({
            "customFieldsValues": {"orderRef": "A-12"},
            "subject": "Broken parcel",
            "source": "phone",
            "priority": "high",
        })

        assert list(request.body.keys()) == ["source", "subject", "priority", "customFieldsValues"]

    @pytest.mark.parametrize("action,props", [
        (create_ticket, {"source": "email"}),
        (update_ticket, {"ticketId": "t-9"}),
        (find_tickets_body, {}),
        (search_tickets, {}),
    ])
    def test_custom_fields_must_be_an_object(self, action, props):
        with pytest.raises(PropValidationError) as exc_info:
            action.build_request({**props, "customFieldsValues": [1, 2]})
        assert exc_info.value.prop == "customFieldsValues"

    def test_update_ticket(self):
        request = update_ticket.build_request({"ticketId": "t-9", "status": "closed", "subject": ""})

        assert request.method == HttpMethod.PATCH
        assert request.path == "/v1/tickets/t-9"
        assert request.body == {"status": "closed"}

    def test_get_ticket_messages(self):
        request = get_ticket_messages.build_request({"ticketId": "t-9"})
        assert request.path == "/v1/tickets/t-9/messages"

    def test_add_ticket_message(self):
        request = add_ticket_message.build_request({
            "ticketId": "t-9",
            "source": "email",
            "content": "Hello",
            "contentHtml": "",
            "agentId": "u-3",
        })

        assert request.method == HttpMethod.POST
        assert request.path == "/v1/tickets/t-9/messages"
        assert request.body == {"source": "email", "content": "Hello", "agentId": "u-3"}
        assert request.expected_status == 201

    def test_add_ticket_message_requires_content(self):
        with pytest.raises(PropValidationError):
            add_ticket_message.build_request({"ticketId": "t-9", "source": "chat"})

    def test_search_ticket_events_repeats_type(self):
        request = search_ticket_events.build_request({"type": ["status", "message"], "ticketId": "t-1"})

        assert request.path == "/v1/ticket-events"
        assert request.params == [("type", "status"), ("type", "message"), ("ticketId", "t-1")]

    def test_search_ticket_events_rejects_unknown_type(self):
        with pytest.raises(PropValidationError):
            search_ticket_events.build_request({"type": ["reopen"]})

    def test_get_ticket_event_from_id(self):
        request = get_ticket_event_from_id.build_request({"eventId": "e-5"})
        assert request.path == "/v1/ticket-events/e-5"

    def test_list_ticket_custom_fields_defaults_to_wildcard(self):
        request = list_ticket_custom_fields.build_request({})

        assert request.path == "/v1/ticket-custom-fields"
        assert request.params == [("search", "*")]

    def test_get_ticket_custom_field_choices(self):
        request = get_ticket_custom_field_choices.build_request({"customId": "reason"})
        assert request.path == "/v1/ticket-custom-fields/reason/choices"


class TestFindTicketsBody:
    """Test the POST body search."""

    def test_defaults_give_empty_body(self):
        request = find_tickets_body.build_request({})

        assert request.method == HttpMethod.POST
        assert request.path == "/v1/tickets/find"
        assert request.body == {}
        assert request.expected_status == 201

    def test_flags_and_lists(self):
        request = find_tickets_body.build_request({
            "search": "refund",
            "deleted": True,
            "unassigned": False,
            "contactIds": "c1, c2,",
            "originalRecipientEmailAddresses": "support@acme.test",
            "status": ["new", "waiting"],
            "createdAfter": "2025-05-01T00:00:00Z",
        })

        assert request.body == {
            "search": "refund",
            "deleted": True,
            "contactId": ["c1", "c2"],
            "originalRecipientEmailAddress": ["support@acme.test"],
            "status": ["new", "waiting"],
            "createdAfter": "2025-05-01T00:00:00Z",
        }


class TestSearchTickets:
    """Test the query-string ticket search."""

    def test_csv_filters_become_repeated_params(self):
        request = search_tickets.build_request({
            "agentId": "u1,u2",
            "status": ["new"],
            "deleted": "true",
        })

        assert request.path == "/v1/tickets"
        assert request.params == [
            ("agentId", "u1"),
            ("agentId", "u2"),
            ("status", "new"),
            ("deleted", "true"),
        ]

    def test_custom_fields_sent_as_json(self):
        request = search_tickets.build_request({"customFieldsValues": {"vip": True}})
        assert request.params == [("customFieldsValues", '{"vip": true}')]


class TestTicketRun:
    """Test running ticket actions against the fake API."""

    @pytest.mark.asyncio
    async def test_create_ticket_sends_minimal_body(self, make_context, fake_api):
        fake_api.status_code = 201
        fake_api.json_body = {"id": "t-new", "source": "email"}

        result = await create_ticket.run(make_context({"source": "email"}))

        assert result == {"id": "t-new", "source": "email"}
        assert fake_api.last_request.method == "POST"
        assert str(fake_api.last_request.url) == "https://x.test/v1/tickets"
        assert fake_api.last_json() == {"source": "email"}

    @pytest.mark.asyncio
    async def test_not_found_is_returned_not_raised(self, make_context, fake_api):
        fake_api.status_code = 404
        fake_api.json_body = {"message": "Ticket not found"}

        result = await get_ticket_from_id.run(make_context({"ticketId": "missing"}))

        assert isinstance(result, HttpResponse)
        assert result.status == 404
