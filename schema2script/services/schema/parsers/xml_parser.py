"""
XML schema reader.

Expected document shape::

    <schema>
      <table name="users">
        <columns>
          <column name="user_id" type="INT"/>
        </columns>
        <relationships>
          <relationship relationshipType="many-to-one" relatedTable="departments"
                        foreignKey="dept_id" relatedForeignKey=""/>
        </relationships>
      </table>
    </schema>

Unlike the JSON reader, missing relationship attributes are kept as ``""``.
Documents carrying a DOCTYPE are rejected outright.
"""
from typing import List
from xml.etree.ElementTree import Element, ParseError

from defusedxml import DefusedXmlException
from defusedxml.ElementTree import parse as safe_parse

from schema2script.services.schema.exceptions import SchemaParsingError
from schema2script.services.schema.model import DEFAULT_COLUMN_TYPE, Column, Relationship, Schema, Table
from schema2script.utils.logger import setup_logger

from .base_parser import BaseParser

RELATIONSHIP_ATTRIBUTES = {
    "relationshipType": "relationship_type",
    "relatedTable": "related_table",
    "throughTable": "through_table",
    "foreignKey": "foreign_key",
    "relatedForeignKey": "related_foreign_key",
}


def _normalize(element: Element) -> None:
    """Drop whitespace-only text and tails so traversal sees element content only."""
    for node in element.iter():
        if node.text is not None and not node.text.strip():
            node.text = None
        if node.tail is not None and not node.tail.strip():
            node.tail = None


class XmlSchemaParser(BaseParser):
    format_name = "xml"

    def __init__(self):
        self.logger = setup_logger('XmlSchemaParser')

    def parse(self, schema_file) -> Schema:
        self.logger.info("Starting XML schema parsing...")
        path = self._resolve_file(schema_file, self.logger)

        root = self._build_document(path)
        self._validate_root(root)
        tables = [self._parse_table(table_el) for table_el in root.iter("table")]

        schema = Schema(label="XML Schema", tables=tables)
        self.logger.info(f"Parsed {len(tables)} tables successfully from XML.")
        return schema

    def _build_document(self, path) -> Element:
        try:
            tree = safe_parse(str(path), forbid_dtd=True, forbid_entities=True, forbid_external=True)
        except DefusedXmlException as e:
            self.logger.error(f"Rejected unsafe XML construct in {path}: {e}")
            raise SchemaParsingError(f"XML document type declarations are not allowed: {e}") from e
        except ParseError as e:
            self.logger.error(f"XML parsing error in {path}: {e}")
            raise SchemaParsingError(f"XML parsing error: {e}") from e
        except (LookupError, ValueError) as e:
            self.logger.error(f"XML decoding error in {path}: {e}")
            raise SchemaParsingError(f"XML decoding error: {e}") from e
        except OSError as e:
            self.logger.error(f"File I/O error during XML parsing: {path}", exc_info=True)
            raise SchemaParsingError(f"File I/O error during XML parsing: {e}") from e

        root = tree.getroot()
        _normalize(root)
        return root

    def _validate_root(self, root: Element) -> None:
        if root is None or not isinstance(root.tag, str) or root.tag.lower() != "schema":
            self.logger.error(f"Unexpected root element: {getattr(root, 'tag', None)}")
            raise SchemaParsingError("Root element <schema> is required")

    def _parse_table(self, table_el: Element) -> Table:
        table_name = table_el.get("name", "")
        if self._is_blank(table_name):
            raise SchemaParsingError("Each <table> must have a non-empty 'name' attribute")

        self.logger.debug(f"Reading table: {table_name}")
        return Table(
            name=table_name,
            columns=self._parse_columns(table_el, table_name),
            relationships=self._parse_relationships(table_el),
        )

    def _parse_columns(self, table_el: Element, table_name: str) -> List[Column]:
        columns = []
        columns_el = next(table_el.iter("columns"), None)
        if columns_el is None:
            return columns

        for column_el in columns_el.iter("column"):
            column_name = column_el.get("name", "")
            if self._is_blank(column_name):
                raise SchemaParsingError(
                    f"Each <column> in table '{table_name}' must have a non-empty 'name' attribute"
                )
            column_type = column_el.get("type", "")
            if self._is_blank(column_type):
                column_type = DEFAULT_COLUMN_TYPE
            columns.append(Column(name=column_name, type=column_type))
        return columns

    def _parse_relationships(self, table_el: Element) -> List[Relationship]:
        relationships = []
        relationships_el = next(table_el.iter("relationships"), None)
        if relationships_el is None:
            return relationships

        for relationship_el in relationships_el.iter("relationship"):
            relationships.append(Relationship(**{
                field: relationship_el.get(attribute, "")
                for attribute, field in RELATIONSHIP_ATTRIBUTES.items()
            }))
        return relationships
