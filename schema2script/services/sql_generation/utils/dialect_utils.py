"""
Target dialect identifiers and the generator selector.
Also maps each dialect to the sqlglot dialect name used for syntax checks.
"""
from enum import Enum

from schema2script.services.schema.exceptions import InvalidInputError
from schema2script.services.sql_generation.generators import (
    BaseGenerator,
    MySqlGenerator,
    OracleGenerator,
    PostgresGenerator,
)


class DbmsType(str, Enum):
    MYSQL = "mysql"
    POSTGRES = "postgres"
    ORACLE = "oracle"

    @classmethod
    def from_label(cls, label) -> "DbmsType":
        """
        Resolve an enum member from its name, value or display label
        (e.g. 'MySQL', 'PostgreSQL', 'postgres', 'ORACLE').

        Raises:
            InvalidInputError: for None or unknown labels.
        """
        if isinstance(label, cls):
            return label
        if label is None:
            raise InvalidInputError("Dialect cannot be None")

        key = str(label).strip().lower()
        resolved = _LABEL_ALIASES.get(key)
        if resolved is None:
            raise InvalidInputError(f"Unknown dialect: {label}")
        return resolved


_LABEL_ALIASES = {
    "mysql": DbmsType.MYSQL,
    "postgres": DbmsType.POSTGRES,
    "postgresql": DbmsType.POSTGRES,
    "oracle": DbmsType.ORACLE,
}

_GENERATORS = {
    DbmsType.MYSQL: MySqlGenerator,
    DbmsType.POSTGRES: PostgresGenerator,
    DbmsType.ORACLE: OracleGenerator,
}

_SQLGLOT_DIALECTS = {
    DbmsType.MYSQL: 'mysql',
    DbmsType.POSTGRES: 'postgres',
    DbmsType.ORACLE: 'oracle',
}


def get_generator(dbms) -> BaseGenerator:
    """
    Return a new generator for *dbms* (a DbmsType or any label accepted by
    DbmsType.from_label).

    Raises:
        InvalidInputError: if *dbms* is None or unknown.
    """
    return _GENERATORS[DbmsType.from_label(dbms)]()


def get_sqlglot_dialect(dbms) -> str:
    """
    Get the sqlglot dialect name for a target DBMS.

    Args:
        dbms: DbmsType or label (e.g., 'mysql', 'PostgreSQL')

    Returns:
        sqlglot dialect string
    """
    return _SQLGLOT_DIALECTS[DbmsType.from_label(dbms)]
