"""
Builder for individual code flow steps.
"""

import inspect
from typing import Callable, Dict, Optional

from ..core.models import CodeFlowStep, SelectionCommand
from ..core.types import Importance
from ..formatters.label_formatter import format_step_message, format_step_with_ordinal
from .step_classifier import classify_nesting


async def parse_message_text(message_parser, message: Optional[Dict]) -> Optional[str]:
    """
    Run a message parser (sync or async) and return the parsed text.

    Returns None when there is no message or the parser yields nothing.
    """
    if not message:
        return None
    parsed = message_parser.parse(message)
    if inspect.isawaitable(parsed):
        parsed = await parsed
    if parsed is None:
        return None
    return parsed.text


class StepBuilder:
    """Converts one SARIF thread flow location into a CodeFlowStep."""

    def __init__(
        self,
        location_resolver,
        message_parser,
        command_factory: Optional[Callable[[str, str], object]] = None
    ):
        """
        Initialize with the collaborators used for every step.

        Args:
            location_resolver: Object with an async resolve(physical_location) method
            message_parser: Object with a parse(message) method returning ParsedMessage or None
            command_factory: Callable (title, traversal_id) -> selection command.
                             Defaults to SelectionCommand.for_step
        """
        self.location_resolver = location_resolver
        self.message_parser = message_parser
        self.command_factory = command_factory or SelectionCommand.for_step

    async def create(
        self,
        trace_location: Dict,
        next_trace_location: Optional[Dict],
        traversal_id: str
    ) -> CodeFlowStep:
        """
        Build a step from a thread flow location and its successor.

        The successor is only read for its nesting level.

        Args:
            trace_location: SARIF threadFlowLocation being converted
            next_trace_location: Following threadFlowLocation, None for the last step
            traversal_id: "<flow>_<thread>_<step>" id of this step

        Returns:
            CodeFlowStep
        """
        sarif_location = trace_location['location']
        location = await self.location_resolver.resolve(sarif_location.get('physicalLocation'))

        has_next = next_trace_location is not None
        is_parent, is_last_child = classify_nesting(
            trace_location.get('nestingLevel'),
            next_trace_location.get('nestingLevel') if has_next else None,
            has_next
        )

        text = await parse_message_text(self.message_parser, sarif_location.get('message'))
        message = format_step_message(text, is_last_child)

        step_id = trace_location.get('step')
        message_with_step = format_step_with_ordinal(message, step_id)

        return CodeFlowStep(
            traversal_id=traversal_id,
            location=location,
            message=message,
            message_with_step=message_with_step,
            is_parent=is_parent,
            is_last_child=is_last_child,
            importance=trace_location.get('importance') or Importance.DEFAULT,
            step_id=step_id,
            state=trace_location.get('state'),
            selection_command=self.command_factory(message_with_step, traversal_id),
        )
