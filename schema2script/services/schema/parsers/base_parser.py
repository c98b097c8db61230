from pathlib import Path
from typing import Optional

from schema2script.services.schema.exceptions import SchemaParsingError
from schema2script.services.schema.model import Schema


class BaseParser:
    """
    A base class for all schema parsers to ensure a consistent interface.
    Parsers hold no state between calls; each ``parse`` builds a new Schema.
    """
    format_name: str = ""

    def parse(self, schema_file) -> Schema:
        """
        The main parsing method that each parser must implement.

        Args:
            schema_file: Path (str or Path) of the document to read.

        Returns:
            A freshly built Schema.

        Raises:
            SchemaParsingError: on any missing file, I/O, syntax or structure problem.
        """
        raise NotImplementedError("Each parser must implement its own parse method.")

    def _resolve_file(self, schema_file, logger) -> Path:
        """Return *schema_file* as a Path, failing when it is absent or missing on disk."""
        if schema_file is None:
            logger.error("Schema file is None")
            raise SchemaParsingError("Schema file cannot be None")

        path = Path(schema_file)
        if not path.is_file():
            logger.error(f"Schema file does not exist: {path}")
            raise SchemaParsingError(f"Schema file does not exist: {path}")
        return path

    @staticmethod
    def _is_blank(value: Optional[str]) -> bool:
        return value is None or not value.strip()
