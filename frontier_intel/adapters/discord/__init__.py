"""Discord presentation helpers."""

from __future__ import annotations

from .builders import build_default_intel_embed, build_intel_embed, display_value

__all__ = ["build_default_intel_embed", "build_intel_embed", "display_value"]
