"""
Trigger definitions with an enable/disable/run lifecycle.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Awaitable, Callable, Dict, List

from .context import TriggerContext
from .properties import Property, clean_props


class TriggerStrategy(str, Enum):
    """How the host learns about new events."""
    WEBHOOK = "WEBHOOK"
    POLLING = "POLLING"


LifecycleHook = Callable[[TriggerContext, Dict[str, Any]], Awaitable[Any]]


@dataclass
class TriggerDefinition:
    """Trigger definition."""
    name: str
    display_name: str
    description: str
    on_enable: LifecycleHook
    on_disable: LifecycleHook
    on_run: LifecycleHook
    props: Dict[str, Property] = field(default_factory=dict)
    type: TriggerStrategy = TriggerStrategy.WEBHOOK
    sample_data: Any = None

    async def enable(self, context: TriggerContext) -> None:
        await self.on_enable(context, clean_props(self.props, context.props_value))

    async def disable(self, context: TriggerContext) -> None:
        # Props may have been removed from the flow since enabling; no validation here
        await self.on_disable(context, dict(context.props_value or {}))

    async def run(self, context: TriggerContext) -> List[Any]:
        return await self.on_run(context, dict(context.props_value or {}))
