"""Formatting utilities for step labels and text output."""

from .label_formatter import (
    NO_DESCRIPTION_LABEL,
    RETURN_CALL_LABEL,
    format_step_message,
    format_step_with_ordinal,
)
from .tree_formatter import format_code_flows

__all__ = [
    "NO_DESCRIPTION_LABEL",
    "RETURN_CALL_LABEL",
    "format_step_message",
    "format_step_with_ordinal",
    "format_code_flows",
]
