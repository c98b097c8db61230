"""
Schema package - the intermediate schema representation and its readers.

Main Components:
    - Schema / Table / Column / Relationship: the shared model
    - get_parser(): format label -> JsonSchemaParser | XmlSchemaParser
    - SchemaParsingError / UnsupportedFormatError / InvalidInputError
"""

from .exceptions import InvalidInputError, SchemaParsingError, UnsupportedFormatError
from .model import Column, Relationship, Schema, Table
from .parsers import detect_format, get_parser

__all__ = [
    'Column',
    'Relationship',
    'Schema',
    'Table',
    'InvalidInputError',
    'SchemaParsingError',
    'UnsupportedFormatError',
    'detect_format',
    'get_parser',
]
