"""
Typed input properties for actions and triggers.
"""

import json
from datetime import date, datetime
from enum import Enum
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple, Union

from pydantic import BaseModel, Field

from easiware_piece.integrations.easiware.request_builder import is_empty
from easiware_piece.utils.exceptions import PropValidationError


class PropertyType(str, Enum):
    """Property type enumeration."""
    SHORT_TEXT = "SHORT_TEXT"
    LONG_TEXT = "LONG_TEXT"
    CHECKBOX = "CHECKBOX"
    DATE_TIME = "DATE_TIME"
    JSON = "JSON"
    STATIC_DROPDOWN = "STATIC_DROPDOWN"
    STATIC_MULTI_SELECT_DROPDOWN = "STATIC_MULTI_SELECT_DROPDOWN"


class DropdownOption(BaseModel):
    """One selectable entry of a dropdown."""
    label: str
    value: Any


OptionsSpec = Union[Mapping[str, str], Iterable[Tuple[str, Any]]]


def _to_options(options: OptionsSpec) -> List[DropdownOption]:
    """Accept either a value -> label mapping or (label, value) pairs."""
    if isinstance(options, Mapping):
        return [DropdownOption(label=label, value=value) for value, label in options.items()]
    return [DropdownOption(label=label, value=value) for label, value in options]


class Property(BaseModel):
    """Property definition."""
    type: PropertyType
    display_name: str
    description: Optional[str] = None
    required: bool = False
    default_value: Optional[Any] = None
    options: List[DropdownOption] = Field(default_factory=list)
    # JSON props only: accept a top-level array as well as an object
    allow_array: bool = False

    @classmethod
    def short_text(cls, display_name: str, **kwargs) -> "Property":
        return cls(type=PropertyType.SHORT_TEXT, display_name=display_name, **kwargs)

    @classmethod
    def long_text(cls, display_name: str, **kwargs) -> "Property":
        return cls(type=PropertyType.LONG_TEXT, display_name=display_name, **kwargs)

    @classmethod
    def checkbox(cls, display_name: str, **kwargs) -> "Property":
        return cls(type=PropertyType.CHECKBOX, display_name=display_name, **kwargs)

    @classmethod
    def date_time(cls, display_name: str, **kwargs) -> "Property":
        return cls(type=PropertyType.DATE_TIME, display_name=display_name, **kwargs)

    @classmethod
    def json_object(cls, display_name: str, **kwargs) -> "Property":
        return cls(type=PropertyType.JSON, display_name=display_name, **kwargs)

    @classmethod
    def static_dropdown(cls, display_name: str, options: OptionsSpec, **kwargs) -> "Property":
        return cls(
            type=PropertyType.STATIC_DROPDOWN,
            display_name=display_name,
            options=_to_options(options),
            **kwargs,
        )

    @classmethod
    def static_multi_select_dropdown(cls, display_name: str, options: OptionsSpec, **kwargs) -> "Property":
        return cls(
            type=PropertyType.STATIC_MULTI_SELECT_DROPDOWN,
            display_name=display_name,
            options=_to_options(options),
            **kwargs,
        )

    @property
    def allowed_values(self) -> List[Any]:
        return [option.value for option in self.options]

    def clean(self, name: str, value: Any) -> Any:
        """
        Validate and normalize a supplied value.

        Absent values fall back to the default. Required props that are still
        empty afterwards raise PropValidationError.
        """
        if value is None:
            value = self.default_value

        if is_empty(value):
            if self.required:
                raise PropValidationError(f"Required property '{name}' missing", prop=name)
            return value

        if self.type in (PropertyType.SHORT_TEXT, PropertyType.LONG_TEXT):
            if isinstance(value, (dict, list)):
                raise PropValidationError(f"Property '{name}' must be text", prop=name)
            return value if isinstance(value, str) else str(value)

        if self.type == PropertyType.CHECKBOX:
            if not isinstance(value, bool):
                raise PropValidationError(f"Property '{name}' must be a boolean", prop=name)
            return value

        if self.type == PropertyType.DATE_TIME:
            if isinstance(value, (datetime, date)):
                return value.isoformat()
            if not isinstance(value, str):
                raise PropValidationError(f"Property '{name}' must be an ISO-8601 date-time", prop=name)
            return value

        if self.type == PropertyType.JSON:
            if isinstance(value, str):
                try:
                    value = json.loads(value)
                except ValueError as e:
                    raise PropValidationError(f"Property '{name}' is not valid JSON: {e}", prop=name) from e
            allowed = (dict, list) if self.allow_array else dict
            if not isinstance(value, allowed):
                kind = "a JSON object or array" if self.allow_array else "a JSON object"
                raise PropValidationError(f"Property '{name}' must be {kind}", prop=name)
            return value

        if self.type == PropertyType.STATIC_DROPDOWN:
            if value not in self.allowed_values:
                raise PropValidationError(
                    f"Property '{name}' must be one of: {self.allowed_values}", prop=name
                )
            return value

        # Multi-select: a single string counts as a one-element selection
        if isinstance(value, str):
            value = [value]
        if not isinstance(value, (list, tuple)):
            raise PropValidationError(f"Property '{name}' must be a list", prop=name)
        invalid = [item for item in value if item not in self.allowed_values]
        if invalid:
            raise PropValidationError(
                f"Property '{name}' must be a subset of: {self.allowed_values}", prop=name
            )
        return list(value)


def clean_props(schema: Mapping[str, Property], values: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """Validate ``values`` against ``schema``. Output follows declaration order; undeclared keys are dropped."""
    values = values or {}
    return {name: prop.clean(name, values.get(name)) for name, prop in schema.items()}
