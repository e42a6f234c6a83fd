"""
Display model for converted code flows.

The tree built from one result's codeFlows is:
    List[CodeFlow] -> CodeFlow.threads -> ThreadFlow.steps -> CodeFlowStep

Only CodeFlowStep.location is written after construction (by the remap pass).
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .types import DEFAULT_SELECTION_COMMAND, Importance

TREE_SELECTION_REQUEST = 'CodeFlowTreeSelectionChange'


@dataclass
class ResolvedLocation:
    """A physical location, mapped to a local file or left as a not-mapped placeholder."""
    uri: Optional[str]
    mapped: bool
    file_path: Optional[str] = None
    uri_base_id: Optional[str] = None
    start_line: Optional[int] = None
    start_column: Optional[int] = None
    end_line: Optional[int] = None
    end_column: Optional[int] = None
    physical_location: Optional[Dict[str, Any]] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            'uri': self.uri,
            'mapped': self.mapped,
            'filePath': self.file_path,
            'uriBaseId': self.uri_base_id,
            'startLine': self.start_line,
            'startColumn': self.start_column,
            'endLine': self.end_line,
            'endColumn': self.end_column,
        }


@dataclass
class SelectionCommand:
    """Command a viewer invokes when the user selects a step."""
    command: str
    title: str
    arguments: List[Dict[str, Any]]

    @classmethod
    def for_step(
        cls,
        title: str,
        traversal_id: str,
        command: str = DEFAULT_SELECTION_COMMAND
    ) -> 'SelectionCommand':
        """Create the tree selection command for the step with the given traversal id."""
        return cls(
            command=command,
            title=title,
            arguments=[{
                'request': TREE_SELECTION_REQUEST,
                'treeid_step': traversal_id,
            }],
        )

    @property
    def traversal_id(self) -> Optional[str]:
        for argument in self.arguments:
            if 'treeid_step' in argument:
                return argument['treeid_step']
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {
            'command': self.command,
            'title': self.title,
            'arguments': self.arguments,
        }


@dataclass
class CodeFlowStep:
    """One step of a thread flow, ready for display."""
    traversal_id: str
    location: Optional[ResolvedLocation]
    message: str
    message_with_step: str
    is_parent: bool = False
    is_last_child: bool = False
    importance: str = Importance.DEFAULT
    step_id: Optional[int] = None
    state: Optional[Dict[str, Any]] = None
    selection_command: Any = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        command = self.selection_command
        if hasattr(command, 'to_dict'):
            command = command.to_dict()
        return {
            'traversalId': self.traversal_id,
            'stepId': self.step_id,
            'location': self.location.to_dict() if self.location is not None else None,
            'importance': self.importance,
            'isParent': self.is_parent,
            'isLastChild': self.is_last_child,
            'message': self.message,
            'messageWithStep': self.message_with_step,
            'state': self.state,
            'command': command,
        }


@dataclass
class ThreadFlow:
    """An ordered sequence of steps executed by one thread."""
    id: Optional[str] = None
    message: Optional[str] = None
    steps: List[CodeFlowStep] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'message': self.message,
            'steps': [step.to_dict() for step in self.steps],
        }


@dataclass
class CodeFlow:
    """One recorded execution trace, possibly spanning several threads."""
    message: Optional[str] = None
    threads: List[ThreadFlow] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'message': self.message,
            'threads': [thread.to_dict() for thread in self.threads],
        }

    def iter_steps(self):
        """Yield every step of every thread in traversal order."""
        for thread in self.threads:
            yield from thread.steps
