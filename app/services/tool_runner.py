from __future__ import annotations

import logging
from typing import Any

from app.services.tooling import ToolRegistry

logger = logging.getLogger(__name__)


class ToolRunner:
    def __init__(self, *, registry: ToolRegistry):
        self._registry = registry

    @property
    def registry(self) -> ToolRegistry:
        return self._registry

    async def run(self, *, name: str, args: dict[str, Any] | None) -> dict[str, Any]:
        tool = self._registry.get(name)
        if tool is None:
            return {
                "success": False,
                "error": f"Unknown tool: {name}",
            }

        logger.info("Tool called: %s", name)
        try:
            safe_args = dict(args or {})
            result = await tool.handler(safe_args)
            if not isinstance(result, dict):
                raise TypeError("Tool handler must return dict")
            return result
        except Exception as e:
            logger.exception("Tool execution failed: %s", name)
            return {
                "success": False,
                "error": str(e),
            }
