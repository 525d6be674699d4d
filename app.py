"""Entry-point script – simply delegates to Uvicorn with the FastAPI app that
lives in the ``app`` package."""

import uvicorn

from app import config  # type: ignore  # app object is created in package __init__


if __name__ == "__main__":
    # For development: uvicorn app:app --reload --port 5001
    uvicorn.run(
        "app:app",
        host=config.get('api', {}).get('host', "127.0.0.1"),
        port=config.get('api', {}).get('port', 5001),
        reload=config.get('api', {}).get('debug', False),
    )
