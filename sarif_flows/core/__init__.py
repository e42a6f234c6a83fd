"""Core components for code flow conversion."""

from .analyzer import SarifAnalyzer
from .converter import CodeFlowConverter
from .errors import CodeFlowError, ResolutionError, ShapeMismatchError
from .models import CodeFlow, CodeFlowStep, ResolvedLocation, SelectionCommand, ThreadFlow
from .types import FlowConfig, Importance

__all__ = [
    "SarifAnalyzer",
    "CodeFlowConverter",
    "CodeFlowError",
    "ResolutionError",
    "ShapeMismatchError",
    "CodeFlow",
    "CodeFlowStep",
    "ResolvedLocation",
    "SelectionCommand",
    "ThreadFlow",
    "FlowConfig",
    "Importance",
]
