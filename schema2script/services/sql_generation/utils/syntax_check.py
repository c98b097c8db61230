import sqlglot
import sqlglot.errors

from schema2script.utils.logger import setup_logger

from .dialect_utils import get_sqlglot_dialect

logger = setup_logger(__name__)


def check_ddl_syntax(sql: str, dbms) -> list[str]:
    """
    Parse generated DDL offline with sqlglot in the target dialect.

    Args:
        sql: The generated script.
        dbms: DbmsType or label of the dialect the script was generated for.

    Returns:
        A list of human-readable issues; empty when the script parses.
        Bad SQL never raises, it is reported.
    """
    dialect = get_sqlglot_dialect(dbms)
    if not sql or not sql.strip():
        return []

    try:
        sqlglot.parse(sql, read=dialect)
    except sqlglot.errors.SqlglotError as e:
        logger.warning(f"Generated DDL did not parse as {dialect}: {e}")
        return [f"{dialect}: {e}"]
    return []
