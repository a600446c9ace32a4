"""Validation helpers for externally supplied board data."""

from .data_checks import BoardDataError, validate_board_array, validate_placement, validate_text_layout

__all__ = ["BoardDataError", "validate_board_array", "validate_placement", "validate_text_layout"]
