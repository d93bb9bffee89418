"""
Piece registry: the unit the automation host loads.
"""

from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Dict, List, Optional

from loguru import logger

from easiware_piece.integrations.easiware import AuthValidationResult, EasiwareAuth
from easiware_piece.utils.exceptions import NotFoundError
from .actions import ActionDefinition
from .context import ActionContext
from .properties import Property
from .triggers import TriggerDefinition


AuthValidator = Callable[[EasiwareAuth], Awaitable[AuthValidationResult]]


@dataclass
class CustomAuth:
    """Credential form shown by the host, with its validation probe."""
    props: Dict[str, Property]
    validate: AuthValidator
    description: str = ""
    required: bool = True


class Piece:
    """Registry for a piece's actions and triggers."""

    def __init__(self,
                 display_name: str,
                 description: str,
                 auth: CustomAuth,
                 actions: List[ActionDefinition],
                 triggers: List[TriggerDefinition],
                 categories: Optional[List[str]] = None,
                 authors: Optional[List[str]] = None,
                 logo_url: Optional[str] = None,
                 minimum_supported_release: Optional[str] = None):
        self.display_name = display_name
        self.description = description
        self.auth = auth
        self.categories = categories or []
        self.authors = authors or []
        self.logo_url = logo_url
        self.minimum_supported_release = minimum_supported_release
        self.actions: Dict[str, ActionDefinition] = {action.name: action for action in actions}
        self.triggers: Dict[str, TriggerDefinition] = {trigger.name: trigger for trigger in triggers}

    def get_action(self, name: str) -> ActionDefinition:
        """Get an action definition by name."""
        action = self.actions.get(name)
        if action is None:
            raise NotFoundError(f"Action '{name}' not found")
        return action

    def get_all_actions(self) -> Dict[str, ActionDefinition]:
        """Get all action definitions."""
        return self.actions

    def get_actions_by_group(self, group: str) -> Dict[str, ActionDefinition]:
        """Get actions filtered by resource group."""
        return {
            name: action for name, action in self.actions.items()
            if action.group == group
        }

    def get_trigger(self, name: str) -> TriggerDefinition:
        """Get a trigger definition by name."""
        trigger = self.triggers.get(name)
        if trigger is None:
            raise NotFoundError(f"Trigger '{name}' not found")
        return trigger

    async def validate_auth(self, auth: EasiwareAuth) -> AuthValidationResult:
        """Probe credentials at configuration time."""
        return await self.auth.validate(auth)

    async def execute_action(self, name: str, context: ActionContext) -> Any:
        """Look up and run an action."""
        action = self.get_action(name)
        logger.debug(f"Executing action {name} on {self.display_name}")
        return await action.run(context)
