"""
Result builder for web interface output.
"""

from collections import defaultdict


def prepare_results(analyzer):
    """
    Convert analyzer results to a structured format for JSON output.

    Args:
        analyzer: SarifAnalyzer instance with completed analysis

    Returns:
        Dictionary with summary, per-rule counts and the converted code flows
    """
    rule_counts = defaultdict(int)
    results = []

    for result in analyzer.results:
        code_flows = result['code_flows'] or []
        rule_counts[result['rule_id'] or 'unknown-rule'] += 1

        unmapped = sum(
            1
            for code_flow in code_flows
            for step in code_flow.iter_steps()
            if step.location is not None and not step.location.mapped
        )

        results.append({
            'run_index': result['run_index'],
            'result_index': result['result_index'],
            'tool_name': result['tool_name'],
            'rule_id': result['rule_id'],
            'message': result['message'],
            'unmapped_steps': unmapped,
            'codeFlows': [code_flow.to_dict() for code_flow in code_flows],
        })

    rules = [
        {'rule_id': rule_id, 'result_count': count}
        for rule_id, count in rule_counts.items()
    ]
    rules.sort(key=lambda x: -x['result_count'])

    return {
        'summary': analyzer.summary(),
        'rules': rules,
        'results': results,
    }
