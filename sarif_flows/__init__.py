"""
SARIF Flows - navigable code flow trees from SARIF results
"""

__version__ = "1.0.0"

from .core.analyzer import SarifAnalyzer
from .core.converter import CodeFlowConverter
from .core.models import CodeFlow, CodeFlowStep, ResolvedLocation, ThreadFlow
from .core.types import FlowConfig

__all__ = [
    "SarifAnalyzer",
    "CodeFlowConverter",
    "CodeFlow",
    "CodeFlowStep",
    "ResolvedLocation",
    "ThreadFlow",
    "FlowConfig",
]
