"""
SARIF log file processing using streaming parser.
"""

import ijson
from typing import Dict, List

from ..extractors.location_resolver import LocationResolver


class SarifFileProcessor:
    """Reads SARIF log files run by run using a streaming parser."""

    @staticmethod
    def process_file(file_path: str) -> List[Dict]:
        """
        Read a SARIF log and collect every result that carries code flows.

        Args:
            file_path: Path to the SARIF file

        Returns:
            List of result entries with keys:
            run_index, result_index, tool_name, rule_id, message, code_flows, uri_base_ids
        """
        entries = []

        print(f"Processing {file_path}...")

        with open(file_path, 'rb') as f:
            parser = ijson.items(f, 'runs.item')
            run_count, result_count = 0, 0

            for run_index, run in enumerate(parser):
                run_count += 1
                tool_name = run.get('tool', {}).get('driver', {}).get('name', 'unknown-tool')
                uri_base_ids = LocationResolver.collect_uri_base_ids(run.get('originalUriBaseIds'))

                for result_index, result in enumerate(run.get('results') or []):
                    result_count += 1
                    code_flows = result.get('codeFlows')
                    if not code_flows:
                        continue
                    entries.append({
                        'run_index': run_index,
                        'result_index': result_index,
                        'tool_name': tool_name,
                        'rule_id': result.get('ruleId'),
                        'message': result.get('message'),
                        'code_flows': code_flows,
                        'uri_base_ids': uri_base_ids,
                    })

                if run_count % 10 == 0:
                    print(f"  Read {run_count} runs, {result_count} results...")

        print(f"Completed reading file: {run_count} runs, {result_count} results found.")
        print(f"Found {len(entries)} results with code flows.")

        return entries
