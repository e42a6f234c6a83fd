"""
Label formatting for code flow steps.
"""

from typing import Optional

RETURN_CALL_LABEL = '[return call]'
NO_DESCRIPTION_LABEL = '[no description]'


def format_step_message(text: Optional[str], is_last_child: bool) -> str:
    """
    Choose the display label for a step.

    Args:
        text: Parsed message text (may be None or empty)
        is_last_child: Whether the step returns from a call

    Returns:
        The text itself, or a placeholder label when it is empty
    """
    if text:
        return text
    if is_last_child:
        return RETURN_CALL_LABEL
    return NO_DESCRIPTION_LABEL


def format_step_with_ordinal(message: str, step_id: Optional[int]) -> str:
    """
    Prefix a step label with its ordinal.

    Example:
        format_step_with_ordinal("foo", 5) -> "Step 5: foo"
    """
    if step_id is None:
        return message
    return f"Step {step_id}: {message}"
