"""
Type definitions for SARIF code flow conversion.
"""

import os
from typing import Dict, List, Optional, TypedDict


class RawMessage(TypedDict, total=False):
    """SARIF message object."""
    text: str
    markdown: str
    id: str
    arguments: List[str]


class RawRegion(TypedDict, total=False):
    """SARIF region object (1-based lines and columns)."""
    startLine: int
    startColumn: int
    endLine: int
    endColumn: int


class RawArtifactLocation(TypedDict, total=False):
    """SARIF artifactLocation object."""
    uri: str
    uriBaseId: str


class RawPhysicalLocation(TypedDict, total=False):
    """SARIF physicalLocation object, the descriptor handed to the resolver."""
    artifactLocation: RawArtifactLocation
    region: RawRegion


class RawLocation(TypedDict, total=False):
    """SARIF location object."""
    physicalLocation: RawPhysicalLocation
    message: RawMessage


class RawTraceLocation(TypedDict, total=False):
    """One visited point of a thread flow (SARIF threadFlowLocation)."""
    location: RawLocation
    nestingLevel: int
    importance: str
    step: int
    state: Dict[str, str]


class RawThreadFlow(TypedDict, total=False):
    """SARIF threadFlow object."""
    id: str
    message: RawMessage
    locations: List[RawTraceLocation]


class RawCodeFlow(TypedDict, total=False):
    """SARIF codeFlow object."""
    message: RawMessage
    threadFlows: List[RawThreadFlow]


class Importance:
    """Importance values a thread flow location can carry."""
    IMPORTANT = 'important'
    ESSENTIAL = 'essential'
    UNIMPORTANT = 'unimportant'

    DEFAULT = IMPORTANT
    ALL = (IMPORTANT, ESSENTIAL, UNIMPORTANT)


DEFAULT_SELECTION_COMMAND = 'extension.sarif.ExplorerCallback'


class FlowConfig:
    """Configuration for code flow conversion."""

    def __init__(
        self,
        source_root: Optional[str] = None,
        uri_base_ids: Optional[Dict[str, str]] = None,
        selection_command: str = DEFAULT_SELECTION_COMMAND,
        validate_remap_shape: bool = True
    ):
        """
        Initialize code flow conversion configuration.

        Args:
            source_root: Directory that relative artifact URIs are resolved against.
                         Default: the current working directory

            uri_base_ids: Mapping of SARIF uriBaseId -> directory (or file:// URI).
                          Entries here override the run's originalUriBaseIds.
                          Default: no extra mappings

            selection_command: Command id placed on every step's selection command,
                               invoked by the presentation layer when a step is picked.
                               Default: 'extension.sarif.ExplorerCallback'

            validate_remap_shape: If True, the remap pass checks that the raw code flows
                                  have the same flow/thread/step shape as the converted
                                  tree and raises ShapeMismatchError before touching it.
                                  Default: True
        """
        self.source_root = source_root if source_root is not None else os.getcwd()
        self.uri_base_ids = dict(uri_base_ids or {})
        self.selection_command = selection_command
        self.validate_remap_shape = validate_remap_shape
