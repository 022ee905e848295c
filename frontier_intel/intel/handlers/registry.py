"""Registry mapping intel type discriminators to their handlers."""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional

from .base import IntelTypeHandler
from .fleet import FleetHandler
from .ore import OreHandler
from .rift import RiftHandler
from .site import SiteHandler

logger = logging.getLogger(__name__)


class IntelTypeRegistry:
    """Holds one handler per intel type, in registration order."""

    def __init__(self) -> None:
        self._handlers: Dict[str, IntelTypeHandler] = {}

    def register(self, intel_type: str, handler: IntelTypeHandler) -> None:
        """Register ``handler`` for ``intel_type``, replacing any previous one."""

        if not isinstance(handler, IntelTypeHandler):
            raise TypeError(
                f"Handler for {intel_type!r} must be an IntelTypeHandler, "
                f"got {type(handler).__name__}"
            )
        if not intel_type or "-" in intel_type:
            raise ValueError(f"Intel type must be non-empty without hyphens: {intel_type!r}")
        if intel_type in self._handlers:
            logger.info("Replacing handler for intel type %s", intel_type)
        self._handlers[intel_type] = handler

    def get_handler(self, intel_type: str) -> Optional[IntelTypeHandler]:
        return self._handlers.get(intel_type)

    def has_handler(self, intel_type: str) -> bool:
        return intel_type in self._handlers

    is_supported_type = has_handler

    def registered_types(self) -> List[str]:
        return list(self._handlers)

    def handler_for_content(self, content: Any) -> Optional[IntelTypeHandler]:
        for handler in self._handlers.values():
            if handler.is_of_type(content):
                return handler
        return None


BUILTIN_HANDLERS = (RiftHandler, OreHandler, FleetHandler, SiteHandler)


def default_registry() -> IntelTypeRegistry:
    registry = IntelTypeRegistry()
    for handler_cls in BUILTIN_HANDLERS:
        handler = handler_cls()
        registry.register(handler.type, handler)
    return registry


_BUILTIN_REGISTRY = default_registry()


def content_from_dict(data: Mapping[str, Any]) -> Any:
    """Rebuild typed content from a stored mapping.

    Content matching no built-in shape is returned as a plain dict.
    """

    handler = _BUILTIN_REGISTRY.handler_for_content(data)
    if handler is None:
        return dict(data)
    return handler.content_from_dict(data)


__all__ = [
    "BUILTIN_HANDLERS",
    "IntelTypeRegistry",
    "content_from_dict",
    "default_registry",
]
