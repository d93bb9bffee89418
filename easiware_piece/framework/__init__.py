"""
Host contract: properties, action and trigger definitions, run contexts and the piece registry.
"""

from .actions import ActionDefinition, create_action
from .context import ActionContext, TriggerContext
from .piece import CustomAuth, Piece
from .properties import DropdownOption, Property, PropertyType, clean_props
from .store import InMemoryStore, Store
from .triggers import TriggerDefinition, TriggerStrategy

__all__ = [
    "ActionDefinition",
    "create_action",
    "ActionContext",
    "TriggerContext",
    "CustomAuth",
    "Piece",
    "DropdownOption",
    "Property",
    "PropertyType",
    "clean_props",
    "InMemoryStore",
    "Store",
    "TriggerDefinition",
    "TriggerStrategy",
]
