"""
Exceptions raised while converting or remapping code flows.
"""


class CodeFlowError(Exception):
    """Base class for code flow conversion errors."""


class ResolutionError(CodeFlowError):
    """A physical location descriptor could not be resolved at all."""


class ShapeMismatchError(CodeFlowError):
    """
    The raw code flows handed to the remap pass do not have the same
    flow/thread/step structure as the converted tree.

    Args:
        path: Location of the first mismatch (e.g. "codeFlows[0].threadFlows[1]")
        expected: Length found in the converted tree
        actual: Length found in the raw code flows
    """

    def __init__(self, path: str, expected: int, actual: int):
        self.path = path
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Shape mismatch at {path}: converted tree has {expected} entries, "
            f"raw code flows have {actual}"
        )
