"""
SARIF message text extraction.
"""

import re
from dataclasses import dataclass
from typing import Dict, List, Optional

PLACEHOLDER_PATTERN = re.compile(r'\{(\d+)\}')
# [label](target) where neither bracket is escaped
EMBEDDED_LINK_PATTERN = re.compile(r'(?<!\\)\[((?:[^\]\\]|\\.)*)\]\(([^)]*)\)')
ESCAPED_BRACKET_PATTERN = re.compile(r'\\([\[\]])')


@dataclass
class ParsedMessage:
    """Plain text of a SARIF message after argument substitution."""
    text: str


class MessageParser:
    """Turns SARIF message objects into display text."""

    @staticmethod
    def parse(message: Optional[Dict]) -> Optional[ParsedMessage]:
        """
        Parse a SARIF message object.

        Text priority:
        1. message.text
        2. message.markdown

        '{n}' placeholders are replaced with message.arguments[n], embedded
        links '[label](target)' are collapsed to their label and escaped
        brackets are unescaped.

        Args:
            message: SARIF message dictionary (may be None)

        Returns:
            ParsedMessage, or None if the message is missing or carries no text
        """
        if not message:
            return None

        text = message.get('text')
        if text is None:
            text = message.get('markdown')
        if text is None:
            return None

        text = MessageParser.substitute_arguments(text, message.get('arguments', []))
        text = MessageParser.strip_embedded_links(text)
        return ParsedMessage(text=text)

    @staticmethod
    def substitute_arguments(text: str, arguments: List[str]) -> str:
        """Replace '{n}' placeholders; placeholders without an argument are kept."""
        if not arguments:
            return text

        def replace(match):
            index = int(match.group(1))
            if index < len(arguments):
                return str(arguments[index])
            return match.group(0)

        return PLACEHOLDER_PATTERN.sub(replace, text)

    @staticmethod
    def strip_embedded_links(text: str) -> str:
        """Collapse '[label](target)' links to 'label' and unescape '\\[' / '\\]'."""
        text = EMBEDDED_LINK_PATTERN.sub(lambda match: match.group(1), text)
        return ESCAPED_BRACKET_PATTERN.sub(r'\1', text)
