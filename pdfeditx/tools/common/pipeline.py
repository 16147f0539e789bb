"""Registry mapping tool names to the classes that run them."""

from __future__ import annotations

from typing import Any, Callable, Iterator

from ...core.utils import get_logger
from .interfaces import BaseTool, ToolContext

LOGGER = get_logger("pdfeditx.tools")


class ToolRegistry:
    """Name-keyed collection of :class:`BaseTool` subclasses."""

    def __init__(self) -> None:
        self._tools: dict[str, type[BaseTool]] = {}

    def register(self, name: str, tool_class: type[BaseTool]) -> None:
        if name in self._tools:
            raise ValueError(f"Tool '{name}' is already registered")
        self._tools[name] = tool_class

    def create(self, name: str, context: ToolContext) -> BaseTool:
        try:
            tool_class = self._tools[name]
        except KeyError as exc:
            raise KeyError(f"Tool '{name}' is not registered") from exc
        return tool_class(context)

    def run(self, name: str, context: ToolContext) -> Any:
        """Create the tool called *name* and run it against *context*."""

        context.resources["tool_name"] = name
        LOGGER.debug("Running tool %s (input=%s, output=%s)", name, context.input_path, context.output_path)
        return self.create(name, context).run()

    def names(self) -> list[str]:
        return sorted(self._tools)

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())


registry = ToolRegistry()


def register_tool(name: str) -> Callable[[type[BaseTool]], type[BaseTool]]:
    def decorator(cls: type[BaseTool]) -> type[BaseTool]:
        registry.register(name, cls)
        return cls

    return decorator


__all__ = ["ToolRegistry", "registry", "register_tool"]
