"""
JSON schema reader.

Expected document shape::

    [
      {"tableName": "users",
       "columns": [{"name": "user_id", "type": "INT"}],
       "relationships": [{"relationshipType": "many-to-one", "relatedTable": "departments",
                          "foreignKey": "dept_id"}]}
    ]

Relationship fields that are missing are kept as ``None``.
"""
import json
from typing import Any, Dict, List, Optional

from schema2script.services.schema.exceptions import SchemaParsingError
from schema2script.services.schema.model import DEFAULT_COLUMN_TYPE, Column, Relationship, Schema, Table
from schema2script.utils.logger import setup_logger

from .base_parser import BaseParser

RELATIONSHIP_FIELDS = {
    "relationshipType": "relationship_type",
    "relatedTable": "related_table",
    "throughTable": "through_table",
    "foreignKey": "foreign_key",
    "relatedForeignKey": "related_foreign_key",
}


def _as_text(value: Any, default: Optional[str] = None) -> Optional[str]:
    """Read a JSON value as text: scalars become strings, null and
    containers fall back to *default* / ``""`` respectively."""
    if value is None:
        return default
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    return ""


class JsonSchemaParser(BaseParser):
    format_name = "json"

    def __init__(self):
        self.logger = setup_logger('JsonSchemaParser')

    def parse(self, schema_file) -> Schema:
        self.logger.info(f"Parsing JSON schema from file: {schema_file}")
        path = self._resolve_file(schema_file, self.logger)

        try:
            with open(path, "r", encoding="utf-8-sig") as f:
                root = json.load(f)
        except json.JSONDecodeError as e:
            self.logger.error(f"Malformed JSON in schema file {path}: {e}", exc_info=True)
            raise SchemaParsingError(f"Malformed JSON in schema file {path}: {e}") from e
        except (OSError, UnicodeDecodeError) as e:
            self.logger.error(f"Failed to read schema file: {path}", exc_info=True)
            raise SchemaParsingError(f"Failed to read schema file: {path}") from e
        except (RecursionError, ValueError) as e:
            self.logger.error(f"Unreadable JSON in schema file {path}: {e}", exc_info=True)
            raise SchemaParsingError(f"Malformed JSON in schema file {path}: {e}") from e

        if not isinstance(root, list):
            self.logger.error("Top-level JSON must be an array of table definitions")
            raise SchemaParsingError("Top-level JSON must be an array of table definitions")

        tables = [self._parse_table(entry) for entry in root]

        schema = Schema(label="JSON Schema", tables=tables)
        self.logger.info(f"Parsed {len(tables)} tables successfully.")
        return schema

    def _parse_table(self, entry: Any) -> Table:
        if not isinstance(entry, dict):
            raise SchemaParsingError("Missing 'tableName' in one of the table definitions")

        table_name = _as_text(entry.get("tableName"))
        if self._is_blank(table_name):
            raise SchemaParsingError("Missing 'tableName' in one of the table definitions")

        self.logger.debug(f"Reading table: {table_name}")
        return Table(
            name=table_name,
            columns=self._parse_columns(entry.get("columns")),
            relationships=self._parse_relationships(entry.get("relationships")),
        )

    def _parse_columns(self, raw_columns: Any) -> List[Column]:
        columns = []
        if not isinstance(raw_columns, list):
            return columns

        for raw in raw_columns:
            raw = raw if isinstance(raw, dict) else {}
            column_type = _as_text(raw.get("type"))
            if self._is_blank(column_type):
                column_type = DEFAULT_COLUMN_TYPE
            columns.append(Column(name=_as_text(raw.get("name"), ""), type=column_type))
        return columns

    def _parse_relationships(self, raw_relationships: Any) -> List[Relationship]:
        relationships = []
        if not isinstance(raw_relationships, list):
            return relationships

        for raw in raw_relationships:
            raw: Dict[str, Any] = raw if isinstance(raw, dict) else {}
            relationships.append(Relationship(**{
                field: _as_text(raw.get(key)) for key, field in RELATIONSHIP_FIELDS.items()
            }))
        return relationships
