"""Entry-point script – simply delegates to Uvicorn with the FastAPI app that
lives in the ``schema2script`` package."""

import uvicorn

from schema2script import config


if __name__ == "__main__":
    # For development, the uvicorn command works as well:
    # uvicorn schema2script:app --reload --port 5001
    uvicorn.run(
        "schema2script:app",
        host=config.get('api', {}).get('host', "127.0.0.1"),
        port=config.get('api', {}).get('port', 5001),
        reload=config.get('api', {}).get('debug', False),
    )
