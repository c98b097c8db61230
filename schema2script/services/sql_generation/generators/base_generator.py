"""
Shared CREATE TABLE generation; dialect subclasses only override the hooks.

For every named table the generator emits, in order:
    1. the CREATE TABLE header
    2. one definition per column (or a placeholder ``id`` column)
    3. a PRIMARY KEY clause for the first ``_id``-suffixed column, if any
    4. a FOREIGN KEY clause per many-to-one relationship
    5. the dialect's statement terminator
"""
from typing import List

from schema2script.services.schema.exceptions import InvalidInputError
from schema2script.services.schema.model import Column, Schema, Table
from schema2script.utils.logger import setup_logger

PREVIEW_LENGTH = 100


class BaseGenerator:
    """
    A base class for all SQL generators to ensure a consistent interface.
    Generators keep no per-call state, so one instance can be reused freely.
    """
    dialect: str = ""
    create_prefix: str = "CREATE TABLE"
    placeholder_type: str = ""
    statement_terminator: str = ");"

    def __init__(self):
        self.logger = setup_logger(self.__class__.__name__)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def generate(self, schema: Schema) -> str:
        """
        Build the DDL script for *schema*.

        Raises:
            InvalidInputError: if *schema* is None.
        """
        self.logger.info(f"Starting {self.dialect} generation...")
        if schema is None:
            self.logger.error("Received null schema. Aborting SQL generation.")
            raise InvalidInputError("Schema cannot be None")

        statements: List[str] = []
        if not schema.tables:
            self.logger.warning("No tables found in schema; emitting boilerplate only.")
        else:
            for table in schema.tables:
                if not table.name or not table.name.strip():
                    self.logger.warning("Encountered table with missing name; skipping.")
                    continue
                self.logger.debug(f"Generating SQL for table: {table.name}")
                statements.append(self.create_table(table))

        sql = self.wrap(statements)
        self._log_result(schema, sql)
        return sql

    def create_table(self, table: Table) -> str:
        definitions = self.column_definitions(table)

        primary_key = table.primary_key()
        if primary_key is not None:
            definitions.append(f"PRIMARY KEY ({self.quote(primary_key)})")

        definitions.extend(self.foreign_key_definitions(table))

        body = ",\n".join(f"  {definition}" for definition in definitions)
        return f"{self.create_prefix} {self.quote(table.name)} (\n{body}\n{self.statement_terminator}"

    # ------------------------------------------------------------------
    # Dialect hooks
    # ------------------------------------------------------------------

    def quote(self, identifier: str) -> str:
        return identifier

    def map_type(self, column: Column) -> str:
        return column.type

    def wrap(self, statements: List[str]) -> str:
        """Join finished statements; every statement is followed by a blank line."""
        return "".join(f"{statement}\n\n" for statement in statements)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def column_definitions(self, table: Table) -> List[str]:
        if not table.columns:
            self.logger.warning(
                f"Table {table.name} has no columns; creating placeholder id {self.placeholder_type}"
            )
            return [f"id {self.placeholder_type}"]
        return [f"{self.quote(column.name)} {self.map_type(column)}" for column in table.columns]

    def foreign_key_definitions(self, table: Table) -> List[str]:
        definitions = []
        for relationship in table.relationships:
            if not relationship.is_many_to_one():
                continue
            if not relationship.foreign_key or not relationship.related_table:
                self.logger.warning(
                    f"Many-to-one relationship on {table.name} lacks foreignKey or relatedTable; skipping."
                )
                continue
            definitions.append(
                f"FOREIGN KEY ({self.quote(relationship.foreign_key)}) "
                f"REFERENCES {self.quote(relationship.related_table)}"
                f"({self.quote(relationship.referenced_column())})"
            )
        return definitions

    def _log_result(self, schema: Schema, sql: str) -> None:
        if not sql:
            self.logger.warning(f"SQL generation returned empty result for schema: {schema.label}")
            return
        self.logger.info(f"{self.dialect} generation finished for schema: {schema.label}. Length={len(sql)} chars")
        self.logger.debug(f"SQL Preview (first {PREVIEW_LENGTH} chars): {sql[:PREVIEW_LENGTH]}")
