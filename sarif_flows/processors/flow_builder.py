"""
Builders for thread flows, code flows and whole code flow sets.
"""

from typing import Dict, List, Optional

from ..core.models import CodeFlow, ThreadFlow
from .step_builder import StepBuilder, parse_message_text


class ThreadFlowBuilder:
    """Converts a SARIF threadFlow into a ThreadFlow."""

    def __init__(self, step_builder: StepBuilder, message_parser):
        self.step_builder = step_builder
        self.message_parser = message_parser

    async def create(self, sarif_thread_flow: Dict, traversal_id: str) -> ThreadFlow:
        """
        Build the thread and all of its steps, in order.

        Each step is resolved before the next one starts.

        Args:
            sarif_thread_flow: SARIF threadFlow dictionary (must carry 'locations')
            traversal_id: "<flow>_<thread>" prefix

        Returns:
            ThreadFlow
        """
        thread_flow = ThreadFlow(
            id=sarif_thread_flow.get('id'),
            message=await parse_message_text(self.message_parser, sarif_thread_flow.get('message')),
        )

        locations = sarif_thread_flow['locations']
        for step_index in range(len(locations)):
            next_location = locations[step_index + 1] if step_index + 1 < len(locations) else None
            step = await self.step_builder.create(
                locations[step_index],
                next_location,
                f"{traversal_id}_{step_index}"
            )
            thread_flow.steps.append(step)

        return thread_flow


class CodeFlowBuilder:
    """Converts a SARIF codeFlow into a CodeFlow."""

    def __init__(self, thread_flow_builder: ThreadFlowBuilder, message_parser):
        self.thread_flow_builder = thread_flow_builder
        self.message_parser = message_parser

    async def create(self, sarif_code_flow: Dict, traversal_id: str) -> CodeFlow:
        """
        Build a code flow and its threads.

        Args:
            sarif_code_flow: SARIF codeFlow dictionary (must carry 'threadFlows')
            traversal_id: "<flow>" prefix

        Returns:
            CodeFlow
        """
        code_flow = CodeFlow(
            message=await parse_message_text(self.message_parser, sarif_code_flow.get('message')),
        )

        for thread_index, sarif_thread_flow in enumerate(sarif_code_flow['threadFlows']):
            thread_flow = await self.thread_flow_builder.create(
                sarif_thread_flow,
                f"{traversal_id}_{thread_index}"
            )
            code_flow.threads.append(thread_flow)

        return code_flow


class CodeFlowSetBuilder:
    """Converts the codeFlows array of one SARIF result."""

    def __init__(self, code_flow_builder: CodeFlowBuilder):
        self.code_flow_builder = code_flow_builder

    async def create(self, sarif_code_flows: Optional[List[Dict]]) -> Optional[List[CodeFlow]]:
        """
        Build every code flow of a result.

        An absent or empty codeFlows array yields None rather than an empty
        list. A failure in any flow aborts the whole conversion.

        Args:
            sarif_code_flows: SARIF codeFlows array (may be None)

        Returns:
            List of CodeFlow in input order, or None
        """
        if not sarif_code_flows:
            return None

        code_flows = []
        for flow_index, sarif_code_flow in enumerate(sarif_code_flows):
            code_flows.append(await self.code_flow_builder.create(sarif_code_flow, f"{flow_index}"))

        return code_flows
