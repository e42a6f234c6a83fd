"""Data extraction utilities for SARIF objects."""

from .message_parser import MessageParser, ParsedMessage
from .location_resolver import LocationResolver

__all__ = ["MessageParser", "ParsedMessage", "LocationResolver"]
