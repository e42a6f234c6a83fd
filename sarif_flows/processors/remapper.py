"""
Remap pass for code flow steps whose location could not be mapped.
"""

from typing import Dict, List, Optional

from ..core.errors import ShapeMismatchError
from ..core.models import CodeFlow


class LocationRemapper:
    """Retries location resolution for not-mapped steps of a converted tree."""

    def __init__(self, location_resolver, validate_shape: bool = True):
        """
        Args:
            location_resolver: Object with an async resolve(physical_location) method
            validate_shape: Check the raw code flows against the tree before mutating it
        """
        self.location_resolver = location_resolver
        self.validate_shape = validate_shape

    async def try_remap(
        self,
        code_flows: Optional[List[CodeFlow]],
        sarif_code_flows: List[Dict]
    ) -> int:
        """
        Re-resolve every step whose location exists but is not mapped.

        The step's location is replaced by the new result even if that is
        still not mapped. Steps without a location, or already mapped, are
        left alone, and no other field is touched. Steps are processed in
        flow/thread/step order.

        Args:
            code_flows: Tree previously produced from sarif_code_flows
            sarif_code_flows: The raw codeFlows array the tree was built from

        Returns:
            Number of steps that became mapped

        Raises:
            ShapeMismatchError: If validation is enabled and the shapes differ
        """
        if not code_flows:
            return 0

        if self.validate_shape:
            self.check_shape(code_flows, sarif_code_flows)

        newly_mapped = 0
        for flow_index, code_flow in enumerate(code_flows):
            sarif_thread_flows = sarif_code_flows[flow_index]['threadFlows']
            for thread_index, thread in enumerate(code_flow.threads):
                sarif_locations = sarif_thread_flows[thread_index]['locations']
                for step_index, step in enumerate(thread.steps):
                    if step.location is None or step.location.mapped:
                        continue
                    sarif_location = sarif_locations[step_index]['location']
                    step.location = await self.location_resolver.resolve(
                        sarif_location.get('physicalLocation')
                    )
                    if step.location is not None and step.location.mapped:
                        newly_mapped += 1

        return newly_mapped

    @staticmethod
    def check_shape(code_flows: List[CodeFlow], sarif_code_flows: Optional[List[Dict]]) -> None:
        """
        Verify that the raw code flows have the tree's flow/thread/step counts.

        Raises:
            ShapeMismatchError: At the first level where the counts differ
        """
        sarif_code_flows = sarif_code_flows or []
        if len(sarif_code_flows) != len(code_flows):
            raise ShapeMismatchError('codeFlows', len(code_flows), len(sarif_code_flows))

        for flow_index, code_flow in enumerate(code_flows):
            path = f"codeFlows[{flow_index}]"
            sarif_thread_flows = sarif_code_flows[flow_index].get('threadFlows') or []
            if len(sarif_thread_flows) != len(code_flow.threads):
                raise ShapeMismatchError(
                    f"{path}.threadFlows", len(code_flow.threads), len(sarif_thread_flows)
                )

            for thread_index, thread in enumerate(code_flow.threads):
                sarif_locations = sarif_thread_flows[thread_index].get('locations') or []
                if len(sarif_locations) != len(thread.steps):
                    raise ShapeMismatchError(
                        f"{path}.threadFlows[{thread_index}].locations",
                        len(thread.steps),
                        len(sarif_locations)
                    )
