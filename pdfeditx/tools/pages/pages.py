"""Plugins exposing single-document page operations through the registry."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

from ...core.document import DocumentInfo, load_info
from ...core.utils import get_logger
from ...pages.operations import delete_pages, extract_pages, reorder_pages, rotate_page
from ..common.interfaces import BaseTool
from ..common.pipeline import register_tool

LOGGER = get_logger("pdfeditx.tools.pages")


def _required_pages(tool: BaseTool, key: str = "pages") -> Sequence[int]:
    pages = tool.context.config.get(key)
    if pages is None:
        raise ValueError(f"'{key}' configuration is required for the {tool.name} tool")
    return list(pages)


@register_tool("info")
class InfoTool(BaseTool):
    name = "info"

    def run(self) -> DocumentInfo:
        info = load_info(self.context.read_input())
        self.context.resources["result"] = info
        return info


@register_tool("reorder")
class ReorderTool(BaseTool):
    name = "reorder"

    def run(self) -> Path:
        order = _required_pages(self, "order")
        LOGGER.debug("Reordering %s as %s", self.context.input_path, order)
        output = self.context.write_output(reorder_pages(self.context.read_input(), order))
        self.context.resources["result"] = output
        return output


@register_tool("extract")
class ExtractTool(BaseTool):
    name = "extract"

    def run(self) -> Path:
        pages = _required_pages(self)
        LOGGER.debug("Extracting pages %s from %s", pages, self.context.input_path)
        output = self.context.write_output(extract_pages(self.context.read_input(), pages))
        self.context.resources["result"] = output
        return output


@register_tool("delete")
class DeleteTool(BaseTool):
    name = "delete"

    def run(self) -> Path:
        pages = _required_pages(self)
        LOGGER.debug("Deleting pages %s from %s", pages, self.context.input_path)
        output = self.context.write_output(delete_pages(self.context.read_input(), pages))
        self.context.resources["result"] = output
        return output


@register_tool("rotate")
class RotateTool(BaseTool):
    name = "rotate"

    def run(self) -> Path:
        config = self.context.config
        if "page" not in config or "degrees" not in config:
            raise ValueError("'page' and 'degrees' configuration are required for the rotate tool")
        data = rotate_page(self.context.read_input(), int(config["page"]), int(config["degrees"]))
        output = self.context.write_output(data)
        self.context.resources["result"] = output
        return output
