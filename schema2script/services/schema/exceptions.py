"""Error taxonomy shared by the parsers and the SQL generators."""


class SchemaParsingError(Exception):
    """Raised when a schema file is missing, unreadable or violates the
    structural contract (missing table names, wrong root, bad syntax).

    The lower-level cause, if any, is chained via ``raise ... from``.
    """


class UnsupportedFormatError(ValueError):
    """Raised when no parser exists for the requested format label."""


class InvalidInputError(ValueError):
    """Raised when a generator receives no schema, or the generator
    selector receives no (or an unknown) dialect."""
