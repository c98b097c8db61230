"""
Schema parsers and the format selector.

Usage:
    from schema2script.services.schema.parsers import get_parser

    schema = get_parser("json").parse("tables.json")
"""
from schema2script.services.schema.exceptions import UnsupportedFormatError

from .base_parser import BaseParser
from .json_parser import JsonSchemaParser
from .xml_parser import XmlSchemaParser

PARSERS = {
    "json": JsonSchemaParser,
    "xml": XmlSchemaParser,
}

__all__ = ['BaseParser', 'JsonSchemaParser', 'XmlSchemaParser', 'get_parser', 'detect_format']


def get_parser(schema_format: str) -> BaseParser:
    """
    Return a new parser for the given format label (case-insensitive).

    Raises:
        UnsupportedFormatError: if the label is None or not a known format.
    """
    if schema_format is None:
        raise UnsupportedFormatError("Format cannot be None")

    parser_cls = PARSERS.get(schema_format.strip().lower())
    if parser_cls is None:
        raise UnsupportedFormatError(f"Unsupported format: {schema_format}")
    return parser_cls()


def detect_format(filename: str) -> str:
    """Guess the format label from a file extension; ``""`` when unknown."""
    if not filename:
        return ""
    lower = str(filename).lower()
    for label in PARSERS:
        if lower.endswith(f".{label}"):
            return label
    return ""
