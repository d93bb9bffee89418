"""
Status, auth info, category and user actions.
"""

from typing import Any, Dict

from easiware_piece.framework import Property, create_action
from easiware_piece.integrations.easiware import ApiRequest, HttpMethod
from easiware_piece.integrations.easiware.request_builder import build_query
from .options import USER_ROLE_OPTIONS


# Status & auth info

@create_action(
    name="get_api_status",
    display_name="Get API Status",
    description="Retrieve the public API status",
)
def get_api_status(props: Dict[str, Any]) -> ApiRequest:
    return ApiRequest(method=HttpMethod.GET, path="/v1/status")


@create_action(
    name="get_auth_info",
    display_name="Get Auth Info",
    description="Retrieve details about the current API key",
)
def get_auth_info(props: Dict[str, Any]) -> ApiRequest:
    return ApiRequest(method=HttpMethod.GET, path="/v1/auth/info")


# Categories

@create_action(
    name="search_categories",
    display_name="Search Categories",
    description="Search your organization's categories",
    group="category",
    props={
        "search": Property.short_text("Search"),
        "active": Property.checkbox("Active only"),
        "public": Property.checkbox("Public only"),
    },
)
def search_categories(props: Dict[str, Any]) -> ApiRequest:
    return ApiRequest(method=HttpMethod.GET, path="/v1/categories", params=build_query(props))


@create_action(
    name="get_category_from_id",
    display_name="Get Category by ID",
    description="Retrieve a category using its Easiware internal ID",
    group="category",
    props={
        "id": Property.short_text("Category ID", required=True),
    },
)
def get_category_from_id(props: Dict[str, Any]) -> ApiRequest:
    return ApiRequest(method=HttpMethod.GET, path=f"/v1/categories/{props['id']}")


# Users

@create_action(
    name="search_users",
    display_name="Search Users",
    description="Search your organization's users",
    group="user",
    props={
        "search": Property.short_text("Search"),
        "email": Property.short_text("Email"),
        "enabled": Property.checkbox("Enabled only"),
        "role": Property.static_dropdown("Role", options=USER_ROLE_OPTIONS),
    },
)
def search_users(props: Dict[str, Any]) -> ApiRequest:
    return ApiRequest(method=HttpMethod.GET, path="/v1/users", params=build_query(props))


@create_action(
    name="get_user_from_id",
    display_name="Get User by ID",
    description="Retrieve a user by Easiware internal ID",
    group="user",
    props={
        "id": Property.short_text("User ID", required=True),
    },
)
def get_user_from_id(props: Dict[str, Any]) -> ApiRequest:
    return ApiRequest(method=HttpMethod.GET, path=f"/v1/users/{props['id']}")


misc_actions = [
    get_api_status,
    get_auth_info,
    search_categories,
    get_category_from_id,
    search_users,
    get_user_from_id,
]
