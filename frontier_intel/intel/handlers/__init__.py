"""Intel type handler system.

Each intel type (rift, ore, fleet, site) implements :class:`IntelTypeHandler`
and is looked up by its discriminator through an :class:`IntelTypeRegistry`.
"""

from .base import IntelTypeHandler, OptionSpec
from .fleet import FleetHandler
from .ids import generate_intel_id, generate_random_string, parse_intel_id
from .ore import OreHandler
from .registry import IntelTypeRegistry, content_from_dict, default_registry
from .rift import RiftHandler
from .site import SiteHandler

__all__ = [
    "FleetHandler",
    "IntelTypeHandler",
    "IntelTypeRegistry",
    "OptionSpec",
    "OreHandler",
    "RiftHandler",
    "SiteHandler",
    "content_from_dict",
    "default_registry",
    "generate_intel_id",
    "generate_random_string",
    "parse_intel_id",
]
