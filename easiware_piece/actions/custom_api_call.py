"""
Generic action for endpoints the dedicated actions do not cover.
"""

from typing import Any, Dict

from easiware_piece.framework import Property, create_action
from easiware_piece.integrations.easiware import ApiRequest, HttpMethod
from easiware_piece.integrations.easiware.request_builder import build_query
from easiware_piece.utils.exceptions import PropValidationError


def _json_map(props: Dict[str, Any], name: str) -> Dict[str, Any]:
    value = props.get(name) or {}
    if not isinstance(value, dict):
        raise PropValidationError(f"Property '{name}' must be a JSON object", prop=name)
    return value


@create_action(
    name="custom_api_call",
    display_name="Custom API Call",
    description="Make a custom API call to a specific Easiware endpoint",
    props={
        "url": Property.short_text(
            "URL",
            description="Path relative to the API URL (e.g. /v1/tickets) or a full URL",
            required=True,
        ),
        "method": Property.static_dropdown(
            "Method",
            options={method.value: method.value for method in HttpMethod},
            required=True,
            default_value=HttpMethod.GET.value,
        ),
        "headers": Property.json_object(
            "Headers",
            description="Extra headers. Authorization is added automatically.",
            default_value={},
        ),
        "queryParams": Property.json_object("Query Parameters", default_value={}),
        "body": Property.json_object("Body", allow_array=True),
    },
)
def custom_api_call(props: Dict[str, Any]) -> ApiRequest:
    headers = {str(key): str(value) for key, value in _json_map(props, "headers").items()}
    query = _json_map(props, "queryParams")

    return ApiRequest(
        method=HttpMethod(props["method"]),
        path=props["url"],
        params=build_query(query),
        body=props.get("body") or None,
        headers=headers,
        expected_status=None,
    )
