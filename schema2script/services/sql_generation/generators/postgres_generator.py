from schema2script.services.schema.model import Column

from .base_generator import BaseGenerator

ID_COLUMN_TYPE = "SERIAL"


class PostgresGenerator(BaseGenerator):
    """PostgreSQL DDL with double-quoted identifiers.

    Every ``_id``-suffixed column becomes SERIAL, whatever its declared type.
    """
    dialect = "PostgreSQL"
    create_prefix = "CREATE TABLE IF NOT EXISTS"
    placeholder_type = ID_COLUMN_TYPE

    def quote(self, identifier: str) -> str:
        return '"' + identifier.replace('"', '""') + '"'

    def map_type(self, column: Column) -> str:
        if column.is_id_column():
            return ID_COLUMN_TYPE
        return column.type
