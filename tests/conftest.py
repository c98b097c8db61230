"""
Shared fixtures: sample schema documents written into tmp_path and a small
in-memory schema used by the generator tests.
"""
import json

import pytest

from schema2script.services.schema import Column, Relationship, Schema, Table


SAMPLE_TABLES = [
    {
        "tableName": "departments",
        "columns": [
            {"name": "dept_id", "type": "INT"},
            {"name": "title", "type": "VARCHAR(100)"},
        ],
    },
    {
        "tableName": "users",
        "columns": [
            {"name": "user_id", "type": "INT"},
            {"name": "name"},
            {"name": "dept_id", "type": "INT"},
        ],
        "relationships": [
            {
                "relationshipType": "many-to-one",
                "relatedTable": "departments",
                "foreignKey": "dept_id",
            }
        ],
    },
]

SAMPLE_XML = """<?xml version="1.0" encoding="UTF-8"?>
<schema>
  <table name="departments">
    <columns>
      <column name="dept_id" type="INT"/>
      <column name="title" type="VARCHAR(100)"/>
    </columns>
  </table>
  <table name="users">
    <columns>
      <column name="user_id" type="INT"/>
      <column name="name"/>
      <column name="dept_id" type="INT"/>
    </columns>
    <relationships>
      <relationship relationshipType="many-to-one" relatedTable="departments" foreignKey="dept_id"/>
    </relationships>
  </table>
</schema>
"""


@pytest.fixture
def write_file(tmp_path):
    def _write(name: str, content: str):
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path
    return _write


@pytest.fixture
def json_schema_file(write_file):
    return write_file("schema.json", json.dumps(SAMPLE_TABLES))


@pytest.fixture
def xml_schema_file(write_file):
    return write_file("schema.xml", SAMPLE_XML)


@pytest.fixture
def users_schema():
    """One table: users(user_id INT, name VARCHAR(50)) with a many-to-one to departments."""
    return Schema(
        label="test",
        tables=[
            Table(
                name="users",
                columns=[Column(name="user_id", type="INT"), Column(name="name", type="VARCHAR(50)")],
                relationships=[
                    Relationship(
                        relationship_type="many-to-one",
                        related_table="departments",
                        foreign_key="dept_id",
                        related_foreign_key="",
                    )
                ],
            )
        ],
    )
