"""Layout pass entry points."""

from .lib import compute_layout, resolve_and_distribute

__all__ = ["compute_layout", "resolve_and_distribute"]
