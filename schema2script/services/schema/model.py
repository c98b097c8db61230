"""
In-memory representation of a parsed schema.

A ``Schema`` is produced fresh by a parser on every parse call and consumed
by the SQL generators. The only mutation after creation is
``Schema.update_column``, triggered when a user renames a column between
parsing and generation.
"""
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from schema2script.utils.logger import setup_logger

DEFAULT_COLUMN_TYPE = "VARCHAR(255)"
PRIMARY_KEY_SUFFIX = "_id"
MANY_TO_ONE = "many-to-one"
DEFAULT_REFERENCED_COLUMN = "id"

logger = setup_logger("SchemaModel")


# A single column in a table
class Column(BaseModel):
    name: str
    type: str = DEFAULT_COLUMN_TYPE

    def is_id_column(self) -> bool:
        return bool(self.name) and self.name.endswith(PRIMARY_KEY_SUFFIX)


# A relationship declared on a table; only many-to-one ends up in the DDL
class Relationship(BaseModel):
    relationship_type: Optional[str] = None
    related_table: Optional[str] = None
    through_table: Optional[str] = None
    foreign_key: Optional[str] = None
    related_foreign_key: Optional[str] = None

    def is_many_to_one(self) -> bool:
        return self.relationship_type is not None and self.relationship_type.lower() == MANY_TO_ONE

    def referenced_column(self) -> str:
        """Column on the related table, ``id`` when none was declared."""
        if self.related_foreign_key and self.related_foreign_key.strip():
            return self.related_foreign_key
        return DEFAULT_REFERENCED_COLUMN


# A table
class Table(BaseModel):
    name: str
    columns: List[Column] = Field(default_factory=list)
    relationships: List[Relationship] = Field(default_factory=list)

    def primary_key(self) -> Optional[str]:
        """Name of the first column ending in ``_id``, or None.

        Columns named any other way are never picked up as primary keys.
        """
        for column in self.columns:
            if column.is_id_column():
                return column.name
        return None


# The full schema
class Schema(BaseModel):
    label: Optional[str] = None
    tables: Optional[List[Table]] = Field(default_factory=list)
    metadata: Dict[str, Any] = Field(default_factory=dict)
    parsed_schema: Optional["Schema"] = None

    def put(self, key: str, value: Any) -> None:
        if key is None or value is None:
            logger.warning("Storing null key or value in schema metadata")
        self.metadata[key] = value

    def get(self, key: str, default: Any = None) -> Any:
        return self.metadata.get(key, default)

    def find_table(self, table_name: str) -> Optional[Table]:
        """First table with the given name; duplicates are kept, not merged."""
        for table in self.tables or []:
            if table.name == table_name:
                return table
        return None

    def update_column(self, table_name: str, column_index: int, new_name: str, new_type: str) -> None:
        """Overwrite name and type of one column in place.

        Targets the first table called *table_name*. A missing table or an
        out-of-range index leaves the schema unchanged and raises nothing.
        """
        table = self.find_table(table_name)
        if table is None:
            logger.debug(f"update_column: no table named '{table_name}'; schema unchanged")
            return
        if column_index < 0 or column_index >= len(table.columns):
            logger.debug(f"update_column: index {column_index} out of range for '{table_name}'; schema unchanged")
            return

        column = table.columns[column_index]
        column.name = new_name
        column.type = new_type
        logger.info(f"Column {column_index} of '{table_name}' updated to {new_name} ({new_type})")


Schema.model_rebuild()
