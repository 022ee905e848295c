"""Intel reports: data models, type handlers and the service tying them to storage."""

from .errors import IntelError, IntelInputError, UnknownIntelTypeError
from .types import (
    FleetIntel,
    IntelContent,
    IntelEntity,
    IntelItem,
    OreIntel,
    RiftIntel,
    SiteIntel,
    is_intel_item,
)
from .handlers import IntelTypeHandler, IntelTypeRegistry, default_registry
from .service import IntelReport, IntelService

__all__ = [
    "FleetIntel",
    "IntelContent",
    "IntelEntity",
    "IntelError",
    "IntelInputError",
    "IntelItem",
    "IntelReport",
    "IntelService",
    "IntelTypeHandler",
    "IntelTypeRegistry",
    "OreIntel",
    "RiftIntel",
    "SiteIntel",
    "UnknownIntelTypeError",
    "default_registry",
    "is_intel_item",
]
