"""
Main SARIF analyzer orchestrator.
"""

import asyncio
from typing import Dict, List, Optional

from ..core.converter import CodeFlowConverter
from ..core.types import FlowConfig
from ..extractors import MessageParser
from ..processors import SarifFileProcessor


class SarifAnalyzer:
    """Converts the code flows of every result in a SARIF log."""

    def __init__(
        self,
        source_root: Optional[str] = None,
        uri_base_ids: Optional[Dict[str, str]] = None,
        validate_remap_shape: bool = True
    ):
        """
        Initialize the SarifAnalyzer.

        Args:
            source_root: Directory relative artifact URIs are resolved against
            uri_base_ids: uriBaseId -> directory overrides applied on top of each run's
                          originalUriBaseIds
            validate_remap_shape: If True, remapping checks the raw flows' shape first
        """
        self.config = FlowConfig(
            source_root=source_root,
            uri_base_ids=uri_base_ids,
            validate_remap_shape=validate_remap_shape
        )

        self.message_parser = MessageParser()
        self.file_processor = SarifFileProcessor()

        # One converter per run, since each run has its own originalUriBaseIds
        self.converters: Dict[int, CodeFlowConverter] = {}

        # Converted results, in file order
        self.results: List[Dict] = []

    def process_sarif_file(self, file_path: str):
        """
        Read a SARIF file and convert the code flows of every result.

        Args:
            file_path: Path to the SARIF file
        """
        # Step 1: Stream the results that carry code flows
        entries = self.file_processor.process_file(file_path)

        # Step 2: Convert each result's code flows
        self.results = asyncio.run(self._convert_entries(entries))

        # Step 3: Report summary
        summary = self.summary()
        print(f"\nConverted {summary['total_code_flows']} code flows "
              f"from {summary['total_results']} results")
        print(f"Found {summary['total_steps']} steps, {summary['unmapped_steps']} not mapped")

    async def _convert_entries(self, entries: List[Dict]) -> List[Dict]:
        results = []
        for entry in entries:
            converter = self._converter_for_run(entry['run_index'], entry['uri_base_ids'])
            code_flows = await converter.create(entry['code_flows'])

            message = self.message_parser.parse(entry['message'])
            results.append({
                'run_index': entry['run_index'],
                'result_index': entry['result_index'],
                'tool_name': entry['tool_name'],
                'rule_id': entry['rule_id'],
                'message': message.text if message is not None else None,
                'uri_base_ids': entry['uri_base_ids'],
                'code_flows': code_flows,
                'sarif_code_flows': entry['code_flows'],
            })
        return results

    def _converter_for_run(self, run_index: int, run_uri_base_ids: Dict[str, str]) -> CodeFlowConverter:
        if run_index not in self.converters:
            uri_base_ids = dict(run_uri_base_ids)
            uri_base_ids.update(self.config.uri_base_ids)
            run_config = FlowConfig(
                source_root=self.config.source_root,
                uri_base_ids=uri_base_ids,
                selection_command=self.config.selection_command,
                validate_remap_shape=self.config.validate_remap_shape
            )
            self.converters[run_index] = CodeFlowConverter(run_config, message_parser=self.message_parser)
        return self.converters[run_index]

    def remap_results(
        self,
        source_root: Optional[str] = None,
        uri_base_ids: Optional[Dict[str, str]] = None
    ) -> int:
        """
        Retry resolution of not-mapped locations across all converted results.

        Args:
            source_root: New source root to resolve against (keeps the current one if None)
            uri_base_ids: Extra uriBaseId mappings merged over the current ones

        Returns:
            Number of steps that became mapped
        """
        if source_root is not None:
            self.config.source_root = source_root
        if uri_base_ids:
            self.config.uri_base_ids.update(uri_base_ids)
        if source_root is not None or uri_base_ids:
            # Resolvers are rebuilt with the new roots
            self.converters = {}

        return asyncio.run(self._remap_all())

    async def _remap_all(self) -> int:
        newly_mapped = 0
        for result in self.results:
            converter = self._converter_for_run(result['run_index'], result['uri_base_ids'])
            newly_mapped += await converter.try_remap(result['code_flows'], result['sarif_code_flows'])
        return newly_mapped

    def find_step(self, result_number: int, traversal_id: str):
        """
        Look up a step of the result at position result_number in self.results.

        Returns:
            CodeFlowStep or None
        """
        if result_number < 0 or result_number >= len(self.results):
            return None
        return CodeFlowConverter.find_step(self.results[result_number]['code_flows'], traversal_id)

    def summary(self) -> Dict[str, int]:
        """Count results, flows, threads, steps and not-mapped steps."""
        total_code_flows = 0
        total_threads = 0
        total_steps = 0
        unmapped_steps = 0
        for result in self.results:
            for code_flow in result['code_flows'] or []:
                total_code_flows += 1
                total_threads += len(code_flow.threads)
                for step in code_flow.iter_steps():
                    total_steps += 1
                    if step.location is not None and not step.location.mapped:
                        unmapped_steps += 1

        return {
            'total_results': len(self.results),
            'total_code_flows': total_code_flows,
            'total_threads': total_threads,
            'total_steps': total_steps,
            'unmapped_steps': unmapped_steps,
        }
