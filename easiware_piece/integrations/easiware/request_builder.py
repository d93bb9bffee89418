"""
Helpers shared by every action when turning props into a query or a body.

Only fields that were actually supplied are sent, so partial updates never
overwrite server-side values with blanks.
"""

import json
from datetime import date, datetime
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple


def is_empty(value: Any) -> bool:
    """True for values that must not be transmitted: None, "", [] and {}."""
    if value is None:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, (list, tuple, dict)):
        return len(value) == 0
    return False


def compact(values: Mapping[str, Any],
            keys: Optional[Iterable[str]] = None,
            always: Iterable[str] = ()) -> Dict[str, Any]:
    """
    Keep the non-empty entries of ``values``.

    Args:
        values: Prop values keyed by field name
        keys: Fields to consider, in output order. Defaults to every key of ``values``.
        always: Fields sent even when empty (the API rejects the request without them)

    Returns:
        New dict ordered like ``keys``
    """
    if keys is None:
        keys = values.keys()
    always = set(always)

    return {
        key: values.get(key)
        for key in keys
        if key in always or (key in values and not is_empty(values[key]))
    }


def split_csv(text: Optional[str]) -> List[str]:
    """Split a comma-separated identifier list, trimming blanks: "a, b ,,c" -> ["a", "b", "c"]."""
    if not text:
        return []
    return [token.strip() for token in text.split(",") if token.strip()]


def to_query_value(value: Any) -> str:
    """Render a scalar the way the API expects it in a query string."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, (dict, list)):
        return json.dumps(value)
    return str(value)


def build_query(values: Mapping[str, Any], keys: Optional[Iterable[str]] = None) -> List[Tuple[str, str]]:
    """
    Build query parameters from prop values.

    Lists become one repeated parameter per element. Empty values are dropped.
    """
    params: List[Tuple[str, str]] = []
    for key, value in compact(values, keys).items():
        if isinstance(value, (list, tuple)):
            params.extend((key, to_query_value(item)) for item in value if not is_empty(item))
        else:
            params.append((key, to_query_value(value)))
    return params


def csv_fields(values: Mapping[str, Any], mapping: Mapping[str, str]) -> Dict[str, List[str]]:
    """
    Split comma-separated props into lists.

    Args:
        values: Prop values
        mapping: Prop name -> key to use in the outgoing request

    Returns:
        Outgoing key -> list of identifiers, for props that yielded at least one
    """
    result: Dict[str, List[str]] = {}
    for prop_name, target in mapping.items():
        items = split_csv(values.get(prop_name))
        if items:
            result[target] = items
    return result
