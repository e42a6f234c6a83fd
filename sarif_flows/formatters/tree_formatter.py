"""
Plain text rendering of code flow trees for terminal output.
"""

from typing import List, Optional

INDENT = '  '
IMPORTANCE_MARKERS = {
    'essential': '*',
    'important': '-',
    'unimportant': '.',
}


def format_location(location) -> str:
    """
    Format a resolved location as "uri:line:column".

    Args:
        location: ResolvedLocation or None

    Returns:
        Location string, suffixed with "(not mapped)" for unresolved files
    """
    if location is None:
        return '<no location>'

    text = location.uri or '<unknown>'
    if location.start_line is not None:
        text += f":{location.start_line}"
        if location.start_column is not None:
            text += f":{location.start_column}"
    if not location.mapped:
        text += ' (not mapped)'
    return text


def format_code_flows(code_flows: Optional[List], title: Optional[str] = None) -> str:
    """
    Render code flows as an indented tree.

    Steps are indented one level after a call entry (is_parent) and one level
    back after a return (is_last_child).

    Args:
        code_flows: Converted code flows (may be None)
        title: Optional heading line

    Returns:
        Multi-line string
    """
    lines = []
    if title:
        lines.append(title)

    if not code_flows:
        lines.append(f"{INDENT}(no code flows)")
        return '\n'.join(lines)

    for flow_index, code_flow in enumerate(code_flows):
        heading = f"{INDENT}Code flow {flow_index}"
        if code_flow.message:
            heading += f": {code_flow.message}"
        lines.append(heading)

        for thread_index, thread in enumerate(code_flow.threads):
            heading = f"{INDENT * 2}Thread {thread.id if thread.id is not None else thread_index}"
            if thread.message:
                heading += f": {thread.message}"
            lines.append(heading)

            depth = 0
            for step in thread.steps:
                marker = IMPORTANCE_MARKERS.get(step.importance, '-')
                lines.append(
                    f"{INDENT * (3 + depth)}{marker} {step.message_with_step}  "
                    f"[{format_location(step.location)}]"
                )
                if step.is_parent:
                    depth += 1
                elif step.is_last_child:
                    depth = max(0, depth - 1)

    return '\n'.join(lines)
