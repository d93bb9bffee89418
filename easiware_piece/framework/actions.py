"""
Action definitions: a typed prop schema plus a pure request builder.
"""

import time
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Mapping, Optional

from loguru import logger

from easiware_piece.integrations.easiware import ApiRequest
from .context import ActionContext
from .properties import Property, clean_props


RequestBuilder = Callable[[Dict[str, Any]], ApiRequest]


@dataclass
class ActionDefinition:
    """Action definition."""
    name: str
    display_name: str
    description: str
    build: RequestBuilder
    props: Dict[str, Property] = field(default_factory=dict)
    group: str = "misc"

    def validate_props(self, props_value: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
        """Check required props and enumerations, apply defaults."""
        return clean_props(self.props, props_value)

    def build_request(self, props_value: Optional[Mapping[str, Any]]) -> ApiRequest:
        """Validate props and build the outgoing request without sending it."""
        return self.build(self.validate_props(props_value))

    async def run(self, context: ActionContext) -> Any:
        """
        Send the action's request.

        Returns:
            The parsed body when the status is the expected one, otherwise the
            full HttpResponse so the workflow can branch on it
        """
        request = self.build_request(context.props_value)

        start_time = time.time()
        async with context.client() as client:
            response = await client.send(request)
        elapsed_ms = (time.time() - start_time) * 1000

        if request.expected_status is not None and response.status == request.expected_status:
            logger.info(f"Action {self.name} succeeded in {elapsed_ms:.0f}ms")
            return response.body

        if request.expected_status is not None:
            logger.warning(
                f"Action {self.name} got status {response.status}, expected {request.expected_status}"
            )
        return response


def create_action(name: str,
                  display_name: str,
                  description: str,
                  props: Optional[Dict[str, Property]] = None,
                  group: str = "misc") -> Callable[[RequestBuilder], ActionDefinition]:
    """Decorator turning a request builder into an ActionDefinition."""

    def decorator(build: RequestBuilder) -> ActionDefinition:
        return ActionDefinition(
            name=name,
            display_name=display_name,
            description=description,
            build=build,
            props=dict(props or {}),
            group=group,
        )

    return decorator
