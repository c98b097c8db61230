"""
HTTP layer tests using FastAPI's TestClient.

Run with:
    pytest tests/test_api_routes.py -v
"""
import json

import pytest
from fastapi.testclient import TestClient

from schema2script import app
from schema2script.api import routes
from schema2script.services.sql_generation import SchemaOrchestrator
from tests.conftest import SAMPLE_TABLES, SAMPLE_XML


@pytest.fixture
def client(tmp_path, monkeypatch):
    monkeypatch.setattr(routes, "orchestrator", SchemaOrchestrator(output_dir=str(tmp_path), syntax_check=False))
    return TestClient(app)


def _upload(client, name, content, **form):
    return client.post("/api/v1/schema/upload", files={"file": (name, content)}, data=form)


def test_root(client):
    response = client.get("/api/v1/")
    assert response.status_code == 200
    assert response.json() == {"message": "API is running"}


def test_schema_before_upload(client):
    assert client.get("/api/v1/schema").status_code == 404


def test_upload_json_then_generate(client):
    upload = _upload(client, "tables.json", json.dumps(SAMPLE_TABLES))
    assert upload.status_code == 200
    assert upload.json()["status"] == "success"

    response = client.post("/api/v1/sql/generate", json={"dbms": "MySQL"})

    body = response.json()
    assert response.status_code == 200
    assert "PRIMARY KEY (user_id)" in body["sql"]
    assert "duration_s" in body


def test_upload_xml_with_explicit_format(client):
    response = _upload(client, "tables.data", SAMPLE_XML, format="xml")
    assert response.status_code == 200
    assert len(response.json()["schema"]["tables"]) == 2


def test_upload_unknown_extension(client):
    response = _upload(client, "tables.csv", "a,b")
    assert response.status_code == 400
    assert response.json()["message"].startswith("Cannot determine schema format")


def test_upload_invalid_document(client):
    response = _upload(client, "tables.json", '{"tableName": "t"}')
    assert response.status_code == 400
    assert response.json()["message"].startswith("Parsing failed:")


def test_edit_column(client):
    _upload(client, "tables.json", json.dumps(SAMPLE_TABLES))

    response = client.put("/api/v1/schema/tables/users/columns/1", json={"name": "nickname", "type": "TEXT"})
    schema = client.get("/api/v1/schema").json()["schema"]

    assert response.status_code == 200
    assert schema["tables"][1]["columns"][1] == {"name": "nickname", "type": "TEXT"}


def test_edit_column_missing_fields(client):
    response = client.put("/api/v1/schema/tables/users/columns/0", json={"name": "x"})
    assert response.status_code == 400


def test_generate_requires_dbms(client):
    assert client.post("/api/v1/sql/generate", json={}).status_code == 400


def test_generate_unknown_dbms(client):
    _upload(client, "tables.json", json.dumps(SAMPLE_TABLES))
    response = client.post("/api/v1/sql/generate", json={"dbms": "sqlite"})
    assert response.status_code == 400
    assert "Unknown dialect" in response.json()["message"]


def test_upload_with_unknown_xml_encoding_is_a_client_error(client):
    response = _upload(client, "tables.xml", '<?xml version="1.0" encoding="bogus"?><schema/>')
    assert response.status_code == 400
    assert response.json()["message"].startswith("Parsing failed:")
