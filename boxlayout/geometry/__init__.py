"""Geometry resolver for layout nodes."""

from .lib import ResolvedBox, resolve, resolve_box

__all__ = ["ResolvedBox", "resolve", "resolve_box"]
