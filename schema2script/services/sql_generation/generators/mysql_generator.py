from typing import List

from .base_generator import BaseGenerator

FK_CHECKS_OFF = "SET FOREIGN_KEY_CHECKS=0;"
FK_CHECKS_ON = "SET FOREIGN_KEY_CHECKS=1;"


class MySqlGenerator(BaseGenerator):
    """MySQL DDL: bare identifiers, types passed through, InnoDB tables.

    The whole script is wrapped in a foreign-key-check toggle so tables can
    reference each other regardless of creation order.
    """
    dialect = "MySQL"
    create_prefix = "CREATE TABLE IF NOT EXISTS"
    placeholder_type = "INT"
    statement_terminator = ") ENGINE=InnoDB;"

    def wrap(self, statements: List[str]) -> str:
        return f"{FK_CHECKS_OFF}\n\n{super().wrap(statements)}{FK_CHECKS_ON}\n"
