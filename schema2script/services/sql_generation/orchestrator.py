"""SchemaOrchestrator – drives the load → edit → generate workflow.

Responsibilities
----------------
1. Pick a parser (explicit format label or file extension) and load a schema.
2. Keep the most recently parsed schema on a root ``Schema`` so the user can
   rename columns before generating.
3. Pick a generator for the requested DBMS, write the script to the output
   directory and optionally run an offline syntax check.

Parsers and generators raise typed errors; this class is the collaborator
layer that turns them into result dictionaries with user-facing messages.
"""
from pathlib import Path
from typing import Any, Dict, Optional

from schema2script import config
from schema2script.services.schema import (
    InvalidInputError,
    Schema,
    SchemaParsingError,
    UnsupportedFormatError,
    detect_format,
    get_parser,
)
from schema2script.utils.file_utils import write_file_content
from schema2script.utils.logger import setup_logger
from schema2script.utils.path_utils import workspace_sub_dir

from .utils.dialect_utils import DbmsType, get_generator
from .utils.result_formatter import error, success
from .utils.syntax_check import check_ddl_syntax


class SchemaOrchestrator:

    def __init__(self, *, output_dir: Optional[str] = None, syntax_check: Optional[bool] = None):
        self.logger = setup_logger("SchemaOrchestrator")
        generation_cfg = config.get('generation', {})

        self.output_dir = Path(output_dir) if output_dir else workspace_sub_dir('generated')
        self.output_filename = generation_cfg.get('output_filename', 'schema.sql')
        self.syntax_check = generation_cfg.get('syntax_check', True) if syntax_check is None else syntax_check
        self.model = Schema(label="session")

    @property
    def current_schema(self) -> Optional[Schema]:
        return self.model.parsed_schema

    # ------------------------------------------------------------------
    # Load
    # ------------------------------------------------------------------

    def load_schema(self, schema_file, schema_format: Optional[str] = None) -> Dict[str, Any]:
        if schema_file is None:
            return self._fail("No file selected.")

        if schema_format is None:
            schema_format = detect_format(Path(schema_file).name)
            if not schema_format:
                return self._fail(f"Cannot determine schema format from file name: {Path(schema_file).name}")
        elif not schema_format.strip():
            return self._fail("No format provided.")

        try:
            parser = get_parser(schema_format)
            parsed = parser.parse(schema_file)
        except SchemaParsingError as e:
            return self._fail(f"Parsing failed: {e}")
        except UnsupportedFormatError as e:
            return self._fail(f"Unsupported format: {e}")

        self.model.parsed_schema = parsed
        self.model.put('source_file', str(schema_file))
        self.model.put('source_format', schema_format.strip().lower())

        message = f"Schema parsed successfully as {schema_format.strip().upper()} ({len(parsed.tables)} tables)"
        self.logger.info(message)
        return success(message, schema=parsed.model_dump(exclude={'parsed_schema'}))

    # ------------------------------------------------------------------
    # Edit
    # ------------------------------------------------------------------

    def edit_column(self, table_name: str, column_index: int, new_name: str, new_type: str) -> Dict[str, Any]:
        if self.current_schema is None:
            return self._fail("No schema loaded.")

        self.current_schema.update_column(table_name, column_index, new_name, new_type)
        return success(f"Updated: {new_name} ({new_type})")

    # ------------------------------------------------------------------
    # Generate
    # ------------------------------------------------------------------

    def generate_sql(self, dbms, schema: Optional[Schema] = None) -> Dict[str, Any]:
        schema = schema if schema is not None else self.current_schema
        try:
            dbms_type = DbmsType.from_label(dbms)
            sql = get_generator(dbms_type).generate(schema)
        except InvalidInputError as e:
            return self._fail(f"SQL generation failed: {e}")

        output_file = self.output_dir / self.output_filename
        try:
            write_file_content(output_file, sql)
        except OSError as e:
            self.logger.error(f"Could not write generated SQL to {output_file}", exc_info=True)
            return self._fail(f"SQL generation failed: {e}", sql=sql)
        self.logger.info(f"SQL saved to: {output_file}")

        syntax_issues = check_ddl_syntax(sql, dbms_type) if self.syntax_check else []
        return success(
            "SQL successfully generated!",
            dbms=dbms_type.value,
            sql=sql,
            output_file=str(output_file),
            syntax_issues=syntax_issues,
        )

    def _fail(self, message: str, **extra: Any) -> Dict[str, Any]:
        self.logger.error(message)
        return error(message, **extra)
