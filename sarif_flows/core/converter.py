"""
Code flow converter orchestrator.
"""

import asyncio
from typing import Callable, Dict, List, Optional, Tuple

from ..core.models import CodeFlow, CodeFlowStep, SelectionCommand
from ..core.types import FlowConfig
from ..extractors import LocationResolver, MessageParser
from ..processors import (
    StepBuilder,
    ThreadFlowBuilder,
    CodeFlowBuilder,
    CodeFlowSetBuilder,
    LocationRemapper
)


class CodeFlowConverter:
    """Converts the codeFlows of a SARIF result and repairs unmapped locations."""

    def __init__(
        self,
        config: Optional[FlowConfig] = None,
        location_resolver=None,
        message_parser=None,
        command_factory: Optional[Callable[[str, str], object]] = None
    ):
        """
        Initialize the CodeFlowConverter.

        Args:
            config: FlowConfig instance (defaults to FlowConfig())
            location_resolver: Resolver with async resolve(physical_location).
                               Defaults to a LocationResolver built from config
            message_parser: Parser with parse(message). Defaults to MessageParser
            command_factory: Callable (title, traversal_id) -> selection command.
                             Defaults to a SelectionCommand using config.selection_command
        """
        self.config = config or FlowConfig()

        self.location_resolver = location_resolver or LocationResolver(
            self.config.source_root,
            self.config.uri_base_ids
        )
        self.message_parser = message_parser or MessageParser()

        if command_factory is None:
            command_name = self.config.selection_command

            def command_factory(title, traversal_id):
                return SelectionCommand.for_step(title, traversal_id, command_name)

        # Builders, innermost first
        self.step_builder = StepBuilder(self.location_resolver, self.message_parser, command_factory)
        self.thread_flow_builder = ThreadFlowBuilder(self.step_builder, self.message_parser)
        self.code_flow_builder = CodeFlowBuilder(self.thread_flow_builder, self.message_parser)
        self.code_flow_set_builder = CodeFlowSetBuilder(self.code_flow_builder)

        self.remapper = LocationRemapper(
            self.location_resolver,
            validate_shape=self.config.validate_remap_shape
        )

    async def create(self, sarif_code_flows: Optional[List[Dict]]) -> Optional[List[CodeFlow]]:
        """
        Convert the codeFlows array of one result.

        Args:
            sarif_code_flows: SARIF codeFlows array (may be None)

        Returns:
            List of CodeFlow, or None for an absent or empty array
        """
        return await self.code_flow_set_builder.create(sarif_code_flows)

    async def try_remap(
        self,
        code_flows: Optional[List[CodeFlow]],
        sarif_code_flows: List[Dict]
    ) -> int:
        """
        Retry resolution of not-mapped step locations in place.

        Must only be called once create() for the same tree has finished.

        Returns:
            Number of steps that became mapped
        """
        return await self.remapper.try_remap(code_flows, sarif_code_flows)

    def create_sync(self, sarif_code_flows: Optional[List[Dict]]) -> Optional[List[CodeFlow]]:
        """Blocking wrapper around create() for callers without an event loop."""
        return asyncio.run(self.create(sarif_code_flows))

    def try_remap_sync(self, code_flows: Optional[List[CodeFlow]], sarif_code_flows: List[Dict]) -> int:
        """Blocking wrapper around try_remap()."""
        return asyncio.run(self.try_remap(code_flows, sarif_code_flows))

    @staticmethod
    def parse_traversal_id(traversal_id: str) -> Optional[Tuple[int, int, int]]:
        """
        Split a "<flow>_<thread>_<step>" traversal id into indices.

        Returns:
            Tuple of (flow_index, thread_index, step_index), or None if malformed
        """
        parts = str(traversal_id).split('_')
        if len(parts) != 3 or not all(part.isdigit() for part in parts):
            return None
        flow_index, thread_index, step_index = (int(part) for part in parts)
        return flow_index, thread_index, step_index

    @staticmethod
    def find_step(code_flows: Optional[List[CodeFlow]], traversal_id: str) -> Optional[CodeFlowStep]:
        """
        Look up the step a selection command points at.

        Args:
            code_flows: Converted code flows of a result
            traversal_id: The 'treeid_step' value of a selection command

        Returns:
            The matching CodeFlowStep, or None if the id is malformed or out of range
        """
        indices = CodeFlowConverter.parse_traversal_id(traversal_id)
        if not code_flows or indices is None:
            return None

        flow_index, thread_index, step_index = indices
        if flow_index >= len(code_flows):
            return None
        threads = code_flows[flow_index].threads
        if thread_index >= len(threads):
            return None
        steps = threads[thread_index].steps
        if step_index >= len(steps):
            return None
        return steps[step_index]
