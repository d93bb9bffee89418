"""
Tests for the contact actions.
"""

import pytest

from easiware_piece.actions.contact import (
    CONTACT_FIELDS,
    create_contact,
    get_contact_custom_field_choices,
    get_contact_from_id,
    list_contact_custom_fields,
    search_contact,
    update_contact,
)
from easiware_piece.integrations.easiware import HttpMethod, HttpResponse
from easiware_piece.utils.exceptions import PropValidationError


class TestContactRequests:
    """Test the requests built by contact actions."""

    def test_get_contact_from_id(self):
        request = get_contact_from_id.build_request({"contactid": "c-42"})

        assert request.method == HttpMethod.GET
        assert request.path == "/v1/contacts/c-42"
        assert request.expected_status == 200

    def test_get_contact_requires_id(self):
        with pytest.raises(PropValidationError):
            get_contact_from_id.build_request({})

    def test_search_contact_sends_only_supplied_filters(self):
        request = search_contact.build_request({"email": "jane@acme.test", "civility": "Mrs", "cityName": ""})

        assert request.path == "/v1/contacts"
        assert request.params == [("civility", "Mrs"), ("email", "jane@acme.test")]

    def test_search_contact_rejects_unknown_civility(self):
        with pytest.raises(PropValidationError):
            search_contact.build_request({"civility": "Dr"})

    def test_create_contact_body_is_sparse(self):
        request = create_contact.build_request({
            "email": "jane@acme.test",
            "firstName": "Jane",
            "lastName": "",
            "customFieldsValues": {"vip": True},
        })

        assert request.method == HttpMethod.POST
        assert request.path == "/v1/contacts"
        assert request.expected_status == 201
        assert request.body == {
            "email": "jane@acme.test",
            "firstName": "Jane",
            "customFieldsValues": {"vip": True},
        }

    def test_create_contact_requires_email(self):
        with pytest.raises(PropValidationError) as exc_info:
            create_contact.build_request({"firstName": "Jane"})
        assert exc_info.value.prop == "email"

    def test_create_contact_rejects_custom_fields_array(self):
        with pytest.raises(PropValidationError, match="must be a JSON object"):
            create_contact.build_request({"email": "jane@acme.test", "customFieldsValues": '["vip"]'})

    def test_update_contact_patches_only_supplied_fields(self):
        request = update_contact.build_request({"id": "c-1", "notes": "Prefers phone"})

        assert request.method == HttpMethod.PATCH
        assert request.path == "/v1/contacts/c-1"
        assert request.body == {"notes": "Prefers phone"}
        assert "id" not in request.body

    def test_contact_fields_order(self):
        assert CONTACT_FIELDS[0] == "email"
        assert CONTACT_FIELDS[-1] == "customFieldsValues"

    @pytest.mark.parametrize("search,expected", [("  vip ", [("search", "vip")]), ("   ", []), (None, [])])
    def test_list_contact_custom_fields_trims_search(self, search, expected):
        request = list_contact_custom_fields.build_request({"search": search})

        assert request.path == "/v1/contact-custom-fields"
        assert request.params == expected

    def test_get_contact_custom_field_choices(self):
        request = get_contact_custom_field_choices.build_request({"customId": "segment"})
        assert request.path == "/v1/contact-custom-fields/segment/choices"


class TestContactRun:
    """Test running contact actions against the fake API."""

    @pytest.mark.asyncio
    async def test_returns_body_on_expected_status(self, make_context, fake_api):
        fake_api.json_body = {"id": "c-42", "email": "jane@acme.test"}

        result = await get_contact_from_id.run(make_context({"contactid": "c-42"}))

        assert result == {"id": "c-42", "email": "jane@acme.test"}
        assert str(fake_api.last_request.url) == "https://x.test/v1/contacts/c-42"

    @pytest.mark.asyncio
    async def test_create_returns_body_on_201(self, make_context, fake_api):
        fake_api.status_code = 201
        fake_api.json_body = {"id": "c-new"}

        result = await create_contact.run(make_context({"email": "new@acme.test"}))

        assert result == {"id": "c-new"}
        assert fake_api.last_json() == {"email": "new@acme.test"}

    @pytest.mark.asyncio
    async def test_create_returns_response_on_other_status(self, make_context, fake_api):
        fake_api.status_code = 409
        fake_api.json_body = {"message": "Email already used"}

        result = await create_contact.run(make_context({"email": "dup@acme.test"}))

        assert isinstance(result, HttpResponse)
        assert result.status == 409
        assert result.body == {"message": "Email already used"}

    @pytest.mark.asyncio
    async def test_success_status_other_than_expected_is_returned_raw(self, make_context, fake_api):
        fake_api.status_code = 200

        result = await create_contact.run(make_context({"email": "new@acme.test"}))

        assert isinstance(result, HttpResponse)
        assert result.status == 200
