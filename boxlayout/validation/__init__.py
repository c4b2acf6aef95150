"""Validation module for layout trees."""

from .lib import ValidationError, is_valid, validate_layout

__all__ = ["ValidationError", "is_valid", "validate_layout"]
