"""Processors for SARIF code flow conversion."""

from .file_processor import SarifFileProcessor
from .step_classifier import classify_nesting
from .step_builder import StepBuilder
from .flow_builder import ThreadFlowBuilder, CodeFlowBuilder, CodeFlowSetBuilder
from .remapper import LocationRemapper

__all__ = [
    "SarifFileProcessor",
    "classify_nesting",
    "StepBuilder",
    "ThreadFlowBuilder",
    "CodeFlowBuilder",
    "CodeFlowSetBuilder",
    "LocationRemapper",
]
