"""
Tool registry for osm-tools.

Tools are registered once at startup, in order, and never change afterwards.
"""

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel

from ..constants import ErrorMessages
from ..models.envelope import Envelope

logger = logging.getLogger(__name__)

ToolHandler = Callable[[Any], Awaitable[Envelope]]


@dataclass(frozen=True)
class ToolDescriptor:
    """A named tool: description, input model, and async handler."""

    name: str
    description: str
    input_model: type[BaseModel]
    handler: ToolHandler

    def input_schema(self) -> dict[str, Any]:
        """JSON Schema for the tool arguments."""
        return self.input_model.model_json_schema()

    def validate(self, arguments: Any) -> BaseModel:
        """Validate raw arguments.

        Raises:
            pydantic.ValidationError: If the arguments do not match the model
        """
        return self.input_model.model_validate(arguments)


class ToolRegistry:
    """Ordered collection of tool descriptors, looked up by exact name."""

    def __init__(self):
        self._tools: dict[str, ToolDescriptor] = {}

    def register(self, descriptor: ToolDescriptor) -> ToolDescriptor:
        if descriptor.name in self._tools:
            raise ValueError(ErrorMessages.DUPLICATE_TOOL.format(descriptor.name))
        self._tools[descriptor.name] = descriptor
        logger.debug("Registered tool %s", descriptor.name)
        return descriptor

    def tool(self, name: str, description: str, input_model: type[BaseModel]):
        """Decorator registering an async handler as a tool."""

        def decorator(fn: ToolHandler) -> ToolHandler:
            self.register(
                ToolDescriptor(
                    name=name, description=description, input_model=input_model, handler=fn
                )
            )
            return fn

        return decorator

    def list(self) -> tuple[ToolDescriptor, ...]:
        """All tools in registration order."""
        return tuple(self._tools.values())

    def find(self, name: str) -> ToolDescriptor | None:
        """Case-sensitive lookup; None when absent."""
        return self._tools.get(name)

    def __len__(self) -> int:
        return len(self._tools)
