"""
Contact actions.
"""

from typing import Any, Dict

from easiware_piece.framework import Property, create_action
from easiware_piece.integrations.easiware import ApiRequest, HttpMethod
from easiware_piece.integrations.easiware.request_builder import build_query, compact
from .options import CIVILITY_OPTIONS


def _contact_fields(email_required: bool) -> Dict[str, Property]:
    """Writable contact fields, shared by create and update."""
    return {
        "email": Property.short_text(
            "Email address",
            description="Unique email address of the contact",
            required=email_required,
        ),
        "firstName": Property.short_text("First name", description="The contact's first name."),
        "lastName": Property.short_text("Last name", description="The contact's last name."),
        "phoneNumber": Property.short_text(
            "Phone number (E.164)",
            description="Phone in E.164 format, e.g. +33782453467",
        ),
        "civilStatus": Property.static_dropdown("Civility", options=CIVILITY_OPTIONS),
        "birthday": Property.date_time("Birthday", description="YYYY-MM-DD"),
        "companyName": Property.short_text("Company name"),
        "streetName": Property.short_text("Street address"),
        "cityName": Property.short_text("City"),
        "stateName": Property.short_text("State / Region"),
        "zipCode": Property.short_text("Postal code"),
        "countryCode": Property.short_text(
            "Country code",
            description="The country code iso3166 alpha-2 example: FR",
        ),
        "languageCode": Property.short_text(
            "Language code",
            description="The language code iso3166 alpha-2 example: fr",
        ),
        "notes": Property.long_text("Notes", description="Additional information about the contact"),
        "customFieldsValues": Property.json_object(
            "Custom fields values (JSON)",
            description="JSON object containing custom fields (must match fields defined in your solution).",
        ),
    }


CONTACT_FIELDS = list(_contact_fields(email_required=True).keys())


@create_action(
    name="get_contact_from_id",
    display_name="Get a Contact",
    description="Get contacts details from ID number.",
    group="contact",
    props={
        "contactid": Property.short_text(
            "Contact ID number",
            description="The ID number of the contact",
            required=True,
        ),
    },
)
def get_contact_from_id(props: Dict[str, Any]) -> ApiRequest:
    return ApiRequest(method=HttpMethod.GET, path=f"/v1/contacts/{props['contactid']}")


@create_action(
    name="search_contact",
    display_name="Search a Contact",
    description="Search contacts and get details.",
    group="contact",
    props={
        "cityName": Property.short_text("City Name", description="The name of city"),
        "civility": Property.static_dropdown(
            "Civility",
            description="Civility of the contact",
            options=CIVILITY_OPTIONS,
        ),
        "countryCode": Property.short_text(
            "Country code",
            description="The country code iso3166 alpha-2 example: FR",
        ),
        "createdAfter": Property.date_time("Created after", description="Return contacts created after this date"),
        "createdBefore": Property.date_time("Created before", description="Return contacts created before this date"),
        "email": Property.short_text("Email Address", description="The email address of the contact"),
        "firstName": Property.short_text("First name", description="The first name of the contact"),
        "languageCode": Property.short_text(
            "Language code",
            description="The language code of the contact iso3166 alpha-2 example: fr",
        ),
        "lastName": Property.short_text("Last name", description="The last name of the contact"),
        "phoneNumber": Property.short_text(
            "Phone number",
            description="The phone number of the contact in E.164 standard. Example: +33723456789",
        ),
        "postalCode": Property.short_text("Postal code", description="The postal code of the contact"),
        "search": Property.short_text("Global search", description="Use global search on contact with this text"),
        "updatedAfter": Property.date_time("Updated after", description="Return contacts updated after this date"),
        "updatedBefore": Property.date_time("Updated before", description="Return contacts updated before this date"),
    },
)
def search_contact(props: Dict[str, Any]) -> ApiRequest:
    return ApiRequest(method=HttpMethod.GET, path="/v1/contacts", params=build_query(props))


@create_action(
    name="create_contact",
    display_name="Create a Contact",
    description="Create a new contact in Easiware.",
    group="contact",
    props=_contact_fields(email_required=True),
)
def create_contact(props: Dict[str, Any]) -> ApiRequest:
    return ApiRequest(
        method=HttpMethod.POST,
        path="/v1/contacts",
        body=compact(props, CONTACT_FIELDS),
        expected_status=201,
    )


@create_action(
    name="update_contact",
    display_name="Update a Contact",
    description="Update an existing contact by ID.",
    group="contact",
    props={
        "id": Property.short_text(
            "Contact ID",
            description="Easiware internal identifier for the contact to update",
            required=True,
        ),
        **_contact_fields(email_required=False),
    },
)
def update_contact(props: Dict[str, Any]) -> ApiRequest:
    return ApiRequest(
        method=HttpMethod.PATCH,
        path=f"/v1/contacts/{props['id']}",
        body=compact(props, CONTACT_FIELDS),
    )


@create_action(
    name="list_contact_custom_fields",
    display_name="List Contact Custom Fields",
    description="Retrieve the list of custom field definitions for contacts.",
    group="contact",
    props={
        "search": Property.short_text("Search Text", description="Search string to filter custom fields."),
    },
)
def list_contact_custom_fields(props: Dict[str, Any]) -> ApiRequest:
    search = (props.get("search") or "").strip()
    params = [("search", search)] if search else []
    return ApiRequest(method=HttpMethod.GET, path="/v1/contact-custom-fields", params=params)


@create_action(
    name="get_contact_custom_field_choices",
    display_name="Get Contact Custom Field Choices",
    description="Retrieve available choices for the specified contact custom field.",
    group="contact",
    props={
        "customId": Property.short_text(
            "Custom Field ID",
            description="The customId of the contact custom field.",
            required=True,
        ),
    },
)
def get_contact_custom_field_choices(props: Dict[str, Any]) -> ApiRequest:
    return ApiRequest(
        method=HttpMethod.GET,
        path=f"/v1/contact-custom-fields/{props['customId']}/choices",
    )


contact_actions = [
    get_contact_from_id,
    search_contact,
    create_contact,
    update_contact,
    list_contact_custom_fields,
    get_contact_custom_field_choices,
]
