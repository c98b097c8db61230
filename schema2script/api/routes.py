from pathlib import Path
from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, File, Form, UploadFile
from fastapi.responses import JSONResponse

from schema2script.services.schema import detect_format
from schema2script.services.sql_generation import SchemaOrchestrator
from schema2script.utils.file_utils import make_relative_path, safe_filename, write_bytes_content
from schema2script.utils.logger import setup_logger
from schema2script.utils.path_utils import get_timestamp, workspace_sub_dir
from schema2script.utils.timing import timed

api_router = APIRouter(prefix='/api/v1')

# The orchestrator keeps the loaded schema between upload, edit and generate calls
orchestrator = SchemaOrchestrator()

logger = setup_logger('api_routes')

PROJECT_ROOT = Path(__file__).parent.parent.parent


def _respond(result: Dict[str, Any]) -> JSONResponse:
    status_code = 200 if result.get('status') == 'success' else 400
    return JSONResponse(result, status_code=status_code)


@api_router.get('/')
def root():
    """Root endpoint of the API.

    Returns a simple JSON message indicating the API is running.
    {
        "message": "API is running"
    }
    """
    return JSONResponse({"message": "API is running"})


@api_router.post('/schema/upload')
def upload_schema(file: UploadFile = File(...), schema_format: Optional[str] = Form(None, alias="format")):
    """Store an uploaded JSON/XML schema in the workspace and parse it.

    When ``format`` is omitted it is detected from the file extension.
    """
    try:
        filename = safe_filename(file.filename)
        stored_path = workspace_sub_dir('uploads') / f"{get_timestamp()}_{filename}"
        write_bytes_content(stored_path, file.file.read())
        logger.info(f"Stored upload {filename} at {stored_path}")

        # Detect on the client file name; None lets the orchestrator report an unknown extension
        result = orchestrator.load_schema(stored_path, schema_format or detect_format(filename) or None)
        return _respond(result)

    except Exception as e:
        logger.error(f"An unhandled exception occurred in /schema/upload: {e}", exc_info=True)
        return JSONResponse({'status': 'error', 'message': 'An internal server error occurred.', 'details': str(e)}, status_code=500)


@api_router.get('/schema')
def get_schema():
    """Return the schema loaded by the most recent upload."""
    schema = orchestrator.current_schema
    if schema is None:
        return JSONResponse({'status': 'error', 'message': 'No schema loaded.'}, status_code=404)
    return JSONResponse({'status': 'success', 'schema': schema.model_dump(exclude={'parsed_schema'})})


@api_router.put('/schema/tables/{table_name}/columns/{column_index}')
def edit_column(table_name: str, column_index: int, data: Dict[str, Any] = Body(...)):
    new_name = data.get('name')
    new_type = data.get('type')
    if not new_name or not new_type:
        return JSONResponse({'status': 'error', 'message': 'Missing required fields: name, type'}, status_code=400)

    return _respond(orchestrator.edit_column(table_name, column_index, new_name, new_type))


@api_router.post('/sql/generate')
def generate_sql(data: Dict[str, Any] = Body(...)):
    """Generate DDL for the loaded schema.

    Body: {"dbms": "MySQL" | "PostgreSQL" | "Oracle"}
    """
    dbms = data.get('dbms')
    if not dbms:
        return JSONResponse({'status': 'error', 'message': 'Missing required field: dbms'}, status_code=400)

    try:
        result = timed(orchestrator.generate_sql, dbms)
        if result.get('output_file'):
            result['output_file'] = make_relative_path(result['output_file'], str(PROJECT_ROOT))
        return _respond(result)
    except Exception as e:
        logger.error(f"An unhandled exception occurred in /sql/generate: {e}", exc_info=True)
        return JSONResponse({'status': 'error', 'message': 'An internal server error occurred.', 'details': str(e)}, status_code=500)
