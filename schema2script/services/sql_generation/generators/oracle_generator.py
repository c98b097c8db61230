import re

from schema2script.services.schema.model import Column

from .base_generator import BaseGenerator

# VARCHAR, VARCHAR(n) and an already-Oracle VARCHAR2 all map to VARCHAR2
_VARCHAR_PREFIX = re.compile(r"^VARCHAR2?", re.IGNORECASE)


class OracleGenerator(BaseGenerator):
    dialect = "Oracle"
    placeholder_type = "NUMBER"

    def map_type(self, column: Column) -> str:
        return _VARCHAR_PREFIX.sub("VARCHAR2", column.type, count=1)
