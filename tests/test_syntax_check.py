"""
Offline sqlglot syntax check of generated DDL.

Run with:
    pytest tests/test_syntax_check.py -v
"""
import pytest

from schema2script.services.schema import InvalidInputError
from schema2script.services.sql_generation import DbmsType, check_ddl_syntax, get_generator
from schema2script.services.sql_generation.utils.dialect_utils import get_sqlglot_dialect


@pytest.mark.parametrize("dbms,expected", [
    (DbmsType.MYSQL, "mysql"),
    ("PostgreSQL", "postgres"),
    ("oracle", "oracle"),
])
def test_sqlglot_dialect_mapping(dbms, expected):
    assert get_sqlglot_dialect(dbms) == expected


def test_unknown_dialect():
    with pytest.raises(InvalidInputError):
        get_sqlglot_dialect("db2")


def test_empty_script_has_no_issues():
    assert check_ddl_syntax("", DbmsType.ORACLE) == []


def test_generated_postgres_ddl_parses(users_schema):
    sql = get_generator(DbmsType.POSTGRES).generate(users_schema)
    assert check_ddl_syntax(sql, DbmsType.POSTGRES) == []


def test_generated_oracle_ddl_parses(users_schema):
    sql = get_generator(DbmsType.ORACLE).generate(users_schema)
    assert check_ddl_syntax(sql, DbmsType.ORACLE) == []


def test_broken_script_is_reported_not_raised():
    issues = check_ddl_syntax("CREATE TABLE users (id INT", DbmsType.MYSQL)
    assert len(issues) == 1
    assert issues[0].startswith("mysql:")
