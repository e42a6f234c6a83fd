"""
Call/return classification of thread flow steps from nesting levels.
"""

from typing import Optional, Tuple


def classify_nesting(
    current_level: Optional[int],
    next_level: Optional[int],
    has_next: bool = True
) -> Tuple[bool, bool]:
    """
    Classify a step by comparing its nesting level with the next step's.

    A step is a parent (call entry) when the next step is nested deeper, and
    a last child (return) when the next step is shallower. A missing level
    counts as shallower than any present one. The flags are exclusive; the
    parent check runs first.

    Args:
        current_level: nestingLevel of the step (None if absent)
        next_level: nestingLevel of the following step (None if absent)
        has_next: False for the final step of a thread

    Returns:
        Tuple of (is_parent, is_last_child)
    """
    if not has_next:
        return False, False

    if current_level is None and next_level is None:
        return False, False

    if current_level is None:
        return True, False
    if next_level is None:
        return False, True

    if current_level < next_level:
        return True, False
    if current_level > next_level:
        return False, True
    return False, False
